# -*- coding: utf-8 -*-
"""SQL repositories for stored analyses and their items."""

from .analysis_repo import AnalysisRepo, AnalysisNotFoundError
from .item_repo import ItemRepo, ITEM_COLUMNS

__all__ = ["AnalysisRepo", "AnalysisNotFoundError", "ItemRepo", "ITEM_COLUMNS"]
