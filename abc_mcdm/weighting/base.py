# -*- coding: utf-8 -*-
"""Base classes for weight calculation."""

import numpy as np
import pandas as pd
from typing import Dict, Sequence
from dataclasses import dataclass, field


@dataclass
class WeightResult:
    """Result container for weight calculations."""
    weights: Dict[str, float]
    method: str
    details: Dict = field(default_factory=dict)

    @property
    def as_array(self) -> np.ndarray:
        """Weights as an array in criterion (insertion) order."""
        return np.array(list(self.weights.values()), dtype=float)

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self.weights)

    @property
    def criteria(self):
        return list(self.weights.keys())

    @classmethod
    def zeros(cls, criteria: Sequence[str], method: str = "entropy") -> 'WeightResult':
        """All-zero weights, reported for an empty batch."""
        return cls(weights={c: 0.0 for c in criteria}, method=method,
                   details={"n_samples": 0})
