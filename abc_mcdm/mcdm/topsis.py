# -*- coding: utf-8 -*-
"""
TOPSIS Implementation
=====================

Crisp TOPSIS with vector normalisation over a small criteria matrix.
"""

import numpy as np
import pandas as pd
from typing import Dict, List, Optional, Tuple, Union
from dataclasses import dataclass

from ..weighting.base import WeightResult
from ..numerics import last_axis_sums
from .normalization import vector_normalize


@dataclass
class TOPSISResult:
    """Result container for TOPSIS calculation."""
    scores: pd.Series                    # Closeness coefficients
    ranks: pd.Series                     # Final rankings (1 = best)
    d_positive: pd.Series                # Distance to ideal
    d_negative: pd.Series                # Distance to anti-ideal
    weighted_matrix: pd.DataFrame        # Weighted normalized matrix
    ideal_solution: pd.Series            # Ideal solution values
    anti_ideal_solution: pd.Series       # Anti-ideal solution values
    weights: Dict[str, float]            # Weights used


def closeness(d_pos: np.ndarray, d_neg: np.ndarray) -> np.ndarray:
    """``D- / (D+ + D-)``, 0 where both distances are 0."""
    d_pos = np.asarray(d_pos, dtype=float)
    d_neg = np.asarray(d_neg, dtype=float)
    denom = d_pos + d_neg
    return np.divide(d_neg, denom, out=np.zeros_like(denom), where=denom > 0)


class TOPSISCalculator:
    """
    Standard TOPSIS calculator.

    Every criterion is treated as a benefit criterion unless listed in
    ``cost_criteria``.

    Parameters
    ----------
    cost_criteria : list of str, optional
        Criteria where lower values are preferred
    """

    def __init__(self, cost_criteria: Optional[List[str]] = None):
        self.cost_criteria = cost_criteria or []

    def calculate(self,
                  data: pd.DataFrame,
                  weights: Union[Dict[str, float], WeightResult]
                  ) -> TOPSISResult:
        """
        Calculate TOPSIS scores and rankings.

        Parameters
        ----------
        data : pd.DataFrame
            Decision matrix (alternatives × criteria), at least one row
        weights : Dict or WeightResult
            One weight per column of ``data``

        Returns
        -------
        TOPSISResult
            Complete TOPSIS results

        Raises
        ------
        ValueError
            If the weights do not cover exactly the columns of ``data``
        """
        if isinstance(weights, WeightResult):
            weights = weights.weights
        if set(weights) != set(data.columns) or len(weights) != data.shape[1]:
            raise ValueError(
                f"weights {sorted(weights)} do not match criteria "
                f"{sorted(map(str, data.columns))}"
            )
        if data.shape[0] == 0:
            raise ValueError("TOPSIS needs at least one alternative")
        weights = {col: float(weights[col]) for col in data.columns}

        # Step 1: Normalize
        norm_matrix = vector_normalize(data.to_numpy(dtype=float))

        # Step 2: Apply weights
        weight_array = np.array([weights[col] for col in data.columns])
        weighted_df = pd.DataFrame(norm_matrix * weight_array,
                                   index=data.index,
                                   columns=data.columns)

        # Step 3: Determine ideal solutions
        ideal, anti_ideal = self._get_ideal_solutions(weighted_df)

        # Step 4: Calculate distances
        d_pos = self._calculate_distance(weighted_df, ideal)
        d_neg = self._calculate_distance(weighted_df, anti_ideal)

        # Step 5: Closeness coefficient
        scores = pd.Series(closeness(d_pos, d_neg), index=data.index,
                           name='TOPSIS_Score')

        # Step 6: Rank, ties broken by input order
        ranks = scores.rank(ascending=False, method='first').astype(int)
        ranks.name = 'TOPSIS_Rank'

        return TOPSISResult(
            scores=scores,
            ranks=ranks,
            d_positive=pd.Series(d_pos, index=data.index),
            d_negative=pd.Series(d_neg, index=data.index),
            weighted_matrix=weighted_df,
            ideal_solution=ideal,
            anti_ideal_solution=anti_ideal,
            weights=weights
        )

    def _get_ideal_solutions(self, weighted_df: pd.DataFrame
                             ) -> Tuple[pd.Series, pd.Series]:
        """Determine ideal and anti-ideal solutions."""
        ideal = pd.Series(index=weighted_df.columns, dtype=float)
        anti_ideal = pd.Series(index=weighted_df.columns, dtype=float)

        for col in weighted_df.columns:
            if col in self.cost_criteria:
                ideal[col] = weighted_df[col].min()
                anti_ideal[col] = weighted_df[col].max()
            else:  # Benefit criteria (default)
                ideal[col] = weighted_df[col].max()
                anti_ideal[col] = weighted_df[col].min()

        return ideal, anti_ideal

    def _calculate_distance(self, weighted_df: pd.DataFrame,
                            reference: pd.Series) -> np.ndarray:
        """Calculate Euclidean distance to reference point."""
        diff = weighted_df.to_numpy(dtype=float) - reference.to_numpy(dtype=float)
        return np.sqrt(last_axis_sums(diff ** 2))
