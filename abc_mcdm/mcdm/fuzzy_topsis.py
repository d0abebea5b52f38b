# -*- coding: utf-8 -*-
"""
Fuzzy TOPSIS Implementation
============================

Type-1 Fuzzy TOPSIS with triangular fuzzy numbers and the vertex method.

Every criterion is already scaled to [0, 1], so the fuzzy positive ideal
is fixed at (1, 1, 1) and the negative ideal at (0, 0, 0) rather than
taken from the batch.
"""

import numpy as np
import pandas as pd
from typing import Dict, Union
from dataclasses import dataclass

from ..records import RISK, DEMAND_FLUCTUATION, CONSIGNMENT_STOCK, UNIT_SIZE
from ..numerics import last_axis_sums
from ..weighting.base import WeightResult
from .fuzzy_base import (
    FuzzyDecisionMatrix, FUZZY_IDEAL, FUZZY_ANTI_IDEAL, vertex_distance,
)
from .mapping import (
    FUZZY_RISK_TABLE, FUZZY_FLUCTUATION_TABLE,
    FUZZY_CONSIGNMENT_TABLE, FUZZY_SIZE_TABLE, map_fuzzy,
)
from .topsis import closeness


# Fuzzy criteria, in matrix column order
FUZZY_CRITERIA = (
    "Risk", "Fluctuation", "Stock", "Usage",
    "Cost", "LeadTime", "Consignment", "Size",
)

# Crisp counterpart of each fuzzy criterion, used for entropy weighting
FUZZY_CRISP_SOURCES = {
    "Risk": "Risk_Score",
    "Fluctuation": "Fluctuation_Score",
    "Stock": "Norm_Stock",
    "Usage": "Norm_Usage",
    "Cost": "Norm_Cost",
    "LeadTime": "Norm_LeadTime",
    "Consignment": "Consignment_Score",
    "Size": "Size_Score",
}


@dataclass
class FuzzyTOPSISResult:
    """Result container for Fuzzy TOPSIS calculation."""
    scores: pd.Series                    # Closeness coefficients
    ranks: pd.Series                     # Final rankings (1 = best)
    d_positive: pd.Series                # Distance to fuzzy ideal
    d_negative: pd.Series                # Distance to fuzzy anti-ideal
    weighted_matrix: np.ndarray          # (n, m, 3) weighted TFNs
    weights: Dict[str, float]


class FuzzyTOPSIS:
    """
    Fuzzy TOPSIS over a ``FuzzyDecisionMatrix``.

    Steps:
        1. Scale each TFN component-wise by its crisp criterion weight
        2. Vertex distance of every weighted TFN to (1,1,1) and (0,0,0)
        3. Sum the per-criterion distances into D+ and D-
        4. Closeness ``D- / (D+ + D-)``, 0 when both are 0
    """

    def calculate(self,
                  matrix: FuzzyDecisionMatrix,
                  weights: Union[Dict[str, float], WeightResult],
                  index=None) -> FuzzyTOPSISResult:
        """
        Parameters
        ----------
        matrix : FuzzyDecisionMatrix
            n alternatives × m criteria of TFNs
        weights : Dict or WeightResult
            Crisp weight per criterion of ``matrix``
        index : optional
            Index for the returned series (defaults to 0..n-1)

        Raises
        ------
        ValueError
            If the weights do not cover exactly the matrix criteria
        """
        if isinstance(weights, WeightResult):
            weights = weights.weights
        if set(weights) != set(matrix.criteria) or len(weights) != len(matrix.criteria):
            raise ValueError(
                f"weights {sorted(weights)} do not match fuzzy criteria "
                f"{sorted(matrix.criteria)}"
            )
        weights = {c: float(weights[c]) for c in matrix.criteria}
        if index is None:
            index = pd.RangeIndex(matrix.n_alternatives)

        w = np.array([weights[c] for c in matrix.criteria])
        weighted = matrix.values * w[np.newaxis, :, np.newaxis]

        ideal = np.array(FUZZY_IDEAL.as_tuple())
        anti_ideal = np.array(FUZZY_ANTI_IDEAL.as_tuple())
        d_pos = last_axis_sums(vertex_distance(weighted, ideal))
        d_neg = last_axis_sums(vertex_distance(weighted, anti_ideal))

        scores = pd.Series(closeness(d_pos, d_neg), index=index,
                           name='Fuzzy_TOPSIS_Score')
        ranks = scores.rank(ascending=False, method='first').astype(int)
        ranks.name = 'Fuzzy_TOPSIS_Rank'

        return FuzzyTOPSISResult(
            scores=scores,
            ranks=ranks,
            d_positive=pd.Series(d_pos, index=index),
            d_negative=pd.Series(d_neg, index=index),
            weighted_matrix=weighted,
            weights=weights,
        )


def fuzzy_criteria_frame(mapped: pd.DataFrame,
                         normalized: pd.DataFrame) -> pd.DataFrame:
    """Crisp matrix of the eight fuzzy criteria, for entropy weighting."""
    inputs = pd.concat([mapped, normalized], axis=1)
    return pd.DataFrame(
        {name: inputs[FUZZY_CRISP_SOURCES[name]].to_numpy(dtype=float)
         for name in FUZZY_CRITERIA},
        index=mapped.index,
    )


def build_fuzzy_matrix(frame: pd.DataFrame,
                       normalized: pd.DataFrame) -> FuzzyDecisionMatrix:
    """
    Fuzzy decision matrix for an inventory batch.

    Categorical criteria use the fuzzy lookup tables; the normalised
    continuous criteria become degenerate TFNs ``[x, x, x]``.
    """
    n = len(frame)
    values = np.zeros((n, len(FUZZY_CRITERIA), 3))
    if n == 0:
        return FuzzyDecisionMatrix(values, FUZZY_CRITERIA)

    linguistic = {
        "Risk": (FUZZY_RISK_TABLE, frame[RISK]),
        "Fluctuation": (FUZZY_FLUCTUATION_TABLE, frame[DEMAND_FLUCTUATION]),
        "Consignment": (FUZZY_CONSIGNMENT_TABLE, frame[CONSIGNMENT_STOCK]),
        "Size": (FUZZY_SIZE_TABLE, frame[UNIT_SIZE]),
    }
    for j, name in enumerate(FUZZY_CRITERIA):
        if name in linguistic:
            table, column = linguistic[name]
            values[:, j, :] = [tfn.as_tuple() for tfn in map_fuzzy(column, table)]
        else:
            crisp = normalized[FUZZY_CRISP_SOURCES[name]].to_numpy(dtype=float)
            values[:, j, :] = crisp[:, np.newaxis]

    return FuzzyDecisionMatrix(values, FUZZY_CRITERIA)
