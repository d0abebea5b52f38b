# -*- coding: utf-8 -*-
"""
Entropy Weight Calculator

Shannon entropy-based objective weight calculation.
Assigns higher weights to criteria with more variation (information content).

Mathematical Formula:
    p_ij = (x_ij + ε) / Σ_i(x_ij + ε)
    E_j  = -k × Σ_i(p_ij × ln(p_ij)),   k = 1 / ln(n)
    w_j  = (1 - E_j) / Σ_k(1 - E_k)

The weights fall back to uniform 1/m for a single item, and when the total
diversity Σ(1 - E_j) is at most ``DIVERSITY_TOLERANCE`` rather than exactly
zero. A matrix with no variation anywhere yields diversities of rounding
size (~1e-16), which a strict ``== 0`` test would normalise into arbitrary
weights.

Every column and total sum is accumulated row by row in index order, so
identical matrices give bit-identical weights regardless of array layout.
"""

import numpy as np
import pandas as pd
from typing import Union

from ..logger import get_module_logger
from ..numerics import column_sums, last_axis_sums
from .base import WeightResult


logger = get_module_logger("weighting.entropy")

# Total diversity at or below this counts as zero (uniform fallback)
DIVERSITY_TOLERANCE = 1e-12


def entropy_weights(matrix: np.ndarray, epsilon: float = 0.0001) -> np.ndarray:
    """
    Entropy weights for an n × m matrix of non-negative criterion values.

    Column reductions run over the item axis in row order, so identical
    matrices always produce bit-identical weights.
    """
    X = np.asarray(matrix, dtype=float)
    if X.ndim != 2:
        raise ValueError(f"matrix must be 2D, got {X.ndim}D")
    n, m = X.shape
    if n == 0 or m == 0:
        raise ValueError(f"entropy weights need at least one row and column, got {X.shape}")

    if n == 1:
        return np.full(m, 1.0 / m)

    shifted = X + epsilon
    P = shifted / column_sums(shifted)

    k = 1.0 / np.log(n)
    safe_P = np.where(P > 0, P, 1.0)
    plogp = np.where(P > 0, P * np.log(safe_P), 0.0)
    E = -k * column_sums(plogp)

    # E_j <= 1 analytically; clipping only removes rounding noise
    D = np.clip(1.0 - E, 0.0, None)
    total = float(last_axis_sums(D))
    if total > DIVERSITY_TOLERANCE:
        return D / total
    return np.full(m, 1.0 / m)


class EntropyWeightCalculator:
    """
    Shannon entropy-based objective weight calculation.

    The entropy method assigns higher weights to criteria that have
    more variation across alternatives, as these provide more
    information for distinguishing between options.

    Parameters
    ----------
    epsilon : float
        Additive smoothing applied to every cell before column
        normalisation, avoiding log(0)

    Examples
    --------
    >>> import pandas as pd
    >>> data = pd.DataFrame({
    ...     'C1': [0.8, 0.6, 0.9, 0.7],
    ...     'C2': [0.5, 0.5, 0.5, 0.5],  # No variation - low weight
    ...     'C3': [0.3, 0.9, 0.1, 0.7]   # High variation - high weight
    ... })
    >>> result = EntropyWeightCalculator().calculate(data)
    >>> result.weights['C3'] > result.weights['C1'] > result.weights['C2']
    True
    """

    def __init__(self, epsilon: float = 0.0001):
        self.epsilon = epsilon

    def calculate(self, data: Union[pd.DataFrame, np.ndarray]) -> WeightResult:
        """
        Calculate entropy weights.

        Parameters
        ----------
        data : pd.DataFrame or np.ndarray
            Decision matrix (alternatives × criteria), non-negative values.
            Array columns are named ``C1..Cm``.

        Returns
        -------
        WeightResult
            Weights keyed by column, in column order

        Raises
        ------
        ValueError
            If the matrix is not 2-D or has no rows or columns
        """
        if isinstance(data, pd.DataFrame):
            columns = [str(c) for c in data.columns]
            X = data.to_numpy(dtype=float)
        else:
            X = np.asarray(data, dtype=float)
            if X.ndim != 2:
                raise ValueError(f"matrix must be 2D, got {X.ndim}D")
            columns = [f"C{j+1}" for j in range(X.shape[1])]

        weights_arr = entropy_weights(X, epsilon=self.epsilon)
        weights = {col: float(weights_arr[j]) for j, col in enumerate(columns)}

        logger.debug(
            "Entropy weights over %d items × %d criteria: %s",
            X.shape[0], X.shape[1],
            ", ".join(f"{c}={w:.4f}" for c, w in weights.items()),
        )

        return WeightResult(
            weights=weights,
            method="entropy",
            details={
                "n_samples": int(X.shape[0]),
                "epsilon": self.epsilon,
                "uniform_fallback": bool(np.all(weights_arr == 1.0 / len(columns))),
            },
        )
