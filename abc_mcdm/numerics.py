# -*- coding: utf-8 -*-
"""
Order-fixed reductions.

numpy picks a summation strategy (pairwise or sequential) from the memory
layout of its input, so ``X.sum(axis=0)`` on a C-ordered and a
Fortran-ordered copy of the same matrix can differ in the last bits.
The helpers below always accumulate left to right along the reduced axis,
giving bit-identical results for identical values whatever the layout.
"""

import numpy as np


def column_sums(matrix: np.ndarray) -> np.ndarray:
    """
    Sum over the first axis, adding rows in index order.

    >>> column_sums(np.array([[1.0, 2.0], [3.0, 4.0]]))
    array([4., 6.])
    """
    X = np.ascontiguousarray(matrix, dtype=float)
    total = np.zeros(X.shape[1:])
    for row in X:
        total = total + row
    return total


def last_axis_sums(values: np.ndarray) -> np.ndarray:
    """
    Sum over the last axis, adding entries in index order.

    A 1-D input reduces to a 0-d array.
    """
    X = np.ascontiguousarray(values, dtype=float)
    total = np.zeros(X.shape[:-1])
    for k in range(X.shape[-1]):
        total = total + X[..., k]
    return total
