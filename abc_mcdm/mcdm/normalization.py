# -*- coding: utf-8 -*-
"""
Normalization Methods
=====================

Min-max rescaling of the continuous inventory attributes and the vector
normalisation used by crisp TOPSIS.
"""

import numpy as np
import pandas as pd
from typing import Sequence, Union

from ..numerics import column_sums
from ..records import AVERAGE_STOCK, DAILY_USAGE, UNIT_COST, LEAD_TIME


# Output column → source attribute
QUANTITATIVE_COLUMNS = {
    "Norm_Usage": DAILY_USAGE,
    "Norm_Stock": AVERAGE_STOCK,
    "Norm_LeadTime": LEAD_TIME,
    "Norm_Cost": UNIT_COST,
}

ZERO_VARIANCE_VALUE = 0.5


def min_max_normalize(values: Union[Sequence[float], np.ndarray]) -> np.ndarray:
    """
    Rescale ``values`` to [0, 1] with ``(v - min) / (max - min)``.

    A zero-variance input (including a single value) maps every entry to
    0.5, since it carries no discriminative information.

    Examples
    --------
    >>> min_max_normalize([2.0, 4.0, 6.0])
    array([0. , 0.5, 1. ])
    >>> min_max_normalize([3.0, 3.0])
    array([0.5, 0.5])
    """
    x = np.asarray(values, dtype=float)
    if x.size == 0:
        return x.copy()
    lo = x.min()
    hi = x.max()
    if hi == lo:
        return np.full(x.shape, ZERO_VARIANCE_VALUE)
    return (x - lo) / (hi - lo)


def normalize_quantities(frame: pd.DataFrame) -> pd.DataFrame:
    """Min-max normalise the four continuous attributes across the batch."""
    return pd.DataFrame(
        {col: min_max_normalize(frame[source].to_numpy(dtype=float))
         for col, source in QUANTITATIVE_COLUMNS.items()},
        index=frame.index,
    )


def vector_normalize(matrix: np.ndarray) -> np.ndarray:
    """
    Divide each column by its Euclidean norm.

    Zero-norm columns are left unchanged (they are all zero).
    """
    X = np.asarray(matrix, dtype=float)
    if X.ndim != 2:
        raise ValueError(f"matrix must be 2D, got {X.ndim}D")
    norm = np.sqrt(column_sums(X ** 2))
    norm[norm == 0] = 1
    return X / norm
