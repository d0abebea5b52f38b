# -*- coding: utf-8 -*-
"""Storage of analysis results (SQLAlchemy Core)."""

from .engine import get_engine, init_schema, ping_db, dispose_engines
from .repositories import AnalysisRepo, AnalysisNotFoundError, ItemRepo

__all__ = [
    'get_engine', 'init_schema', 'ping_db', 'dispose_engines',
    'AnalysisRepo', 'AnalysisNotFoundError', 'ItemRepo',
]
