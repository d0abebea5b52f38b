# -*- coding: utf-8 -*-
"""
ABC Classifier
==============

Assigns A/B/C classes by rank position. With thresholds (A, B) in
percent and n items, the top ``floor(A/100·n)`` items are class A, the
next ``floor((B-A)/100·n)`` are class B and the rest are C. Ties keep
their input order.
"""

import math

import numpy as np
import pandas as pd
from typing import Dict, List, Mapping, Optional, Sequence, Union

from ..logger import get_module_logger


logger = get_module_logger("mcdm.classification")

DEFAULT_THRESHOLDS = {"A": 20.0, "B": 50.0}


def rank_order(scores: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """Indices sorting ``scores`` descending, ties in original order."""
    return np.argsort(-np.asarray(scores, dtype=float), kind="stable")


def class_counts(n: int, thresholds: Mapping[str, float]) -> Dict[str, int]:
    """Class sizes for ``n`` items under cumulative percentage thresholds."""
    count_a = math.floor(thresholds["A"] / 100 * n)
    count_b = math.floor((thresholds["B"] - thresholds["A"]) / 100 * n)
    return {"A": count_a, "B": count_b, "C": n - count_a - count_b}


def assign_abc_classes(scores: Union[Sequence[float], np.ndarray],
                       thresholds: Optional[Mapping[str, float]] = None) -> List[str]:
    """
    Class label for every score, aligned to the input order.

    Examples
    --------
    >>> assign_abc_classes([0.1, 0.9, 0.5, 0.3, 0.7])
    ['C', 'A', 'C', 'C', 'B']
    """
    thresholds = thresholds or DEFAULT_THRESHOLDS
    scores = np.asarray(scores, dtype=float)
    n = len(scores)
    counts = class_counts(n, thresholds)

    labels = ["C"] * n
    for position, idx in enumerate(rank_order(scores)):
        if position < counts["A"]:
            labels[idx] = "A"
        elif position < counts["A"] + counts["B"]:
            labels[idx] = "B"
    return labels


class ABCClassifier:
    """
    Rank-based ABC classifier.

    Parameters
    ----------
    thresholds : Mapping, optional
        Cumulative percentages ``{"A": a, "B": b}``; defaults to 20/50
    """

    def __init__(self, thresholds: Optional[Mapping[str, float]] = None):
        self.thresholds = dict(thresholds or DEFAULT_THRESHOLDS)

    def classify(self, scores: pd.Series) -> pd.Series:
        """Class labels on the index of ``scores``."""
        labels = assign_abc_classes(scores.to_numpy(dtype=float), self.thresholds)
        counts = class_counts(len(labels), self.thresholds)
        logger.debug("Classified %d items by %s: A=%d B=%d C=%d",
                     len(labels), scores.name, counts["A"], counts["B"], counts["C"])
        return pd.Series(labels, index=scores.index, name="Class")
