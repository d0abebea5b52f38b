# -*- coding: utf-8 -*-
"""
Weighting Methods Module

- EntropyWeightCalculator: Shannon entropy weights with additive smoothing
- entropy_weights: array-level entry point
- WeightResult: weight vector container
"""

from .base import WeightResult
from .entropy import EntropyWeightCalculator, entropy_weights

__all__ = [
    'WeightResult',
    'EntropyWeightCalculator',
    'entropy_weights',
]
