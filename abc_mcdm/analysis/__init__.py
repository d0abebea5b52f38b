# -*- coding: utf-8 -*-
"""
Analysis Module
===============

Summaries of a scored inventory batch.
"""

from .summary import (
    AnalysisSummary, summarize, abc_distribution, fuzzy_crisp_match,
    top_item, top_weight_criterion, rank_agreement, CRITERION_DISPLAY_NAMES,
)

__all__ = [
    'AnalysisSummary', 'summarize',
    'abc_distribution', 'fuzzy_crisp_match', 'top_item',
    'top_weight_criterion', 'rank_agreement', 'CRITERION_DISPLAY_NAMES',
]
