# -*- coding: utf-8 -*-
"""
Fuzzy Number Base Classes
==========================

Triangular fuzzy numbers and the fuzzy decision matrix used by the fuzzy
ranking path.
"""

import numpy as np
from typing import List, Sequence, Tuple
from dataclasses import dataclass

from ..numerics import last_axis_sums


@dataclass(frozen=True)
class TriangularFuzzyNumber:
    """
    Triangular fuzzy number (l, m, u).

    Attributes:
        l: Lower bound (minimum possible value)
        m: Modal value (most likely value)
        u: Upper bound (maximum possible value)
    """
    l: float  # Lower bound
    m: float  # Modal value (most likely)
    u: float  # Upper bound

    def __post_init__(self):
        if not (self.l <= self.m <= self.u):
            l, m, u = sorted([self.l, self.m, self.u])
            object.__setattr__(self, 'l', l)
            object.__setattr__(self, 'm', m)
            object.__setattr__(self, 'u', u)

    def defuzzify(self, method: str = "centroid") -> float:
        """
        Convert fuzzy number to crisp value.

        Methods:
            - centroid: (l + m + u) / 3
            - mom: Mean of maximum = m
            - graded_mean: (l + 4m + u) / 6
        """
        if method == "centroid":
            return (self.l + self.m + self.u) / 3
        elif method == "mom":
            return self.m
        elif method == "graded_mean":
            return (self.l + 4*self.m + self.u) / 6
        else:
            raise ValueError(f"Unknown defuzzification method: {method}")

    def __mul__(self, scalar: float) -> 'TriangularFuzzyNumber':
        """Component-wise scaling by a non-negative weight."""
        scalar = float(scalar)
        return TriangularFuzzyNumber(
            self.l * scalar, self.m * scalar, self.u * scalar
        )

    def __rmul__(self, scalar: float) -> 'TriangularFuzzyNumber':
        return self.__mul__(scalar)

    def distance(self, other: 'TriangularFuzzyNumber') -> float:
        """Vertex distance between two fuzzy numbers."""
        return float(np.sqrt(
            ((self.l - other.l) ** 2 +
             (self.m - other.m) ** 2 +
             (self.u - other.u) ** 2) / 3
        ))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.l, self.m, self.u)

    @staticmethod
    def from_crisp(value: float) -> 'TriangularFuzzyNumber':
        """Degenerate TFN [x, x, x] for a crisp value."""
        value = float(value)
        return TriangularFuzzyNumber(value, value, value)

    def __repr__(self) -> str:
        return f"TFN({self.l:.4f}, {self.m:.4f}, {self.u:.4f})"


FUZZY_IDEAL = TriangularFuzzyNumber(1.0, 1.0, 1.0)
FUZZY_ANTI_IDEAL = TriangularFuzzyNumber(0.0, 0.0, 0.0)


def vertex_distance(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Vectorised vertex distance over the last axis (l, m, u).

    ``a`` and ``b`` broadcast against each other; the result drops the
    trailing axis of length 3.
    """
    diff = np.asarray(a, dtype=float) - np.asarray(b, dtype=float)
    return np.sqrt(last_axis_sums(diff ** 2) / 3)


class FuzzyDecisionMatrix:
    """
    Alternatives × criteria matrix of triangular fuzzy numbers.

    Stored as a float array of shape (n_alternatives, n_criteria, 3).
    """

    def __init__(self, values: np.ndarray, criteria: Sequence[str]):
        values = np.asarray(values, dtype=float)
        criteria = list(criteria)
        if values.ndim != 3 or values.shape[2] != 3:
            raise ValueError(
                f"fuzzy matrix must have shape (n, m, 3), got {values.shape}"
            )
        if values.shape[1] != len(criteria):
            raise ValueError(
                f"fuzzy matrix has {values.shape[1]} criteria columns, "
                f"expected {len(criteria)}"
            )
        self.values = values
        self.criteria = criteria

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[TriangularFuzzyNumber]],
                  criteria: Sequence[str]) -> 'FuzzyDecisionMatrix':
        criteria = list(criteria)
        for i, row in enumerate(rows):
            if len(row) != len(criteria):
                raise ValueError(
                    f"row {i} has {len(row)} fuzzy values, "
                    f"expected {len(criteria)}"
                )
        values = np.array(
            [[tfn.as_tuple() for tfn in row] for row in rows], dtype=float
        ).reshape(len(rows), len(criteria), 3)
        return cls(values, criteria)

    @property
    def n_alternatives(self) -> int:
        return self.values.shape[0]

    def get(self, alternative: int, criterion: str) -> TriangularFuzzyNumber:
        j = self.criteria.index(criterion)
        return TriangularFuzzyNumber(*self.values[alternative, j])

    def row(self, alternative: int) -> List[TriangularFuzzyNumber]:
        return [TriangularFuzzyNumber(*v) for v in self.values[alternative]]
