# -*- coding: utf-8 -*-
"""
MCDM Methods Module

- Criteria mapping (linguistic → crisp and fuzzy)
- Min-max and vector normalization
- Composite criteria aggregation
- TOPSIS (crisp) and Fuzzy TOPSIS (vertex method)
- Rank-based ABC classification
"""

from .fuzzy_base import TriangularFuzzyNumber, FuzzyDecisionMatrix, vertex_distance
from .mapping import CategoryTable, map_category, map_criteria, map_fuzzy
from .normalization import min_max_normalize, normalize_quantities, vector_normalize
from .aggregation import AGGREGATE_WEIGHTS, aggregate_criteria
from .topsis import TOPSISCalculator, TOPSISResult
from .fuzzy_topsis import (
    FUZZY_CRITERIA, FuzzyTOPSIS, FuzzyTOPSISResult,
    build_fuzzy_matrix, fuzzy_criteria_frame,
)
from .classification import ABCClassifier, assign_abc_classes, class_counts, rank_order

__all__ = [
    'TriangularFuzzyNumber', 'FuzzyDecisionMatrix', 'vertex_distance',
    'CategoryTable', 'map_category', 'map_criteria', 'map_fuzzy',
    'min_max_normalize', 'normalize_quantities', 'vector_normalize',
    'AGGREGATE_WEIGHTS', 'aggregate_criteria',
    'TOPSISCalculator', 'TOPSISResult',
    'FUZZY_CRITERIA', 'FuzzyTOPSIS', 'FuzzyTOPSISResult',
    'build_fuzzy_matrix', 'fuzzy_criteria_frame',
    'ABCClassifier', 'assign_abc_classes', 'class_counts', 'rank_order',
]
