# -*- coding: utf-8 -*-
"""Services combining scoring and storage."""

from .analysis_service import AnalysisService

__all__ = ["AnalysisService"]
