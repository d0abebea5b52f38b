# -*- coding: utf-8 -*-
"""
Criteria Mapper
===============

Fixed lookup tables turning the categorical inventory attributes into
numeric scores (crisp path) and triangular fuzzy numbers (fuzzy path).
A category absent from a table maps to the table's neutral entry.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, List, Mapping, TypeVar

import pandas as pd

from ..records import RISK, DEMAND_FLUCTUATION, CONSIGNMENT_STOCK, UNIT_SIZE
from .fuzzy_base import TriangularFuzzyNumber as TFN

T = TypeVar("T")


@dataclass(frozen=True)
class CategoryTable(Generic[T]):
    """Immutable category → value table with a neutral fallback entry."""
    field: str
    values: Mapping[str, T]
    fallback: str

    def __post_init__(self):
        if self.fallback not in self.values:
            raise ValueError(f"{self.field}: fallback '{self.fallback}' not in table")
        object.__setattr__(self, 'values', MappingProxyType(dict(self.values)))

    def lookup(self, category: str) -> T:
        return self.values.get(category, self.values[self.fallback])

    @property
    def default(self) -> T:
        return self.values[self.fallback]


RISK_TABLE = CategoryTable(
    RISK, {"High": 0.47, "Normal": 0.35, "Low": 0.18}, fallback="Normal"
)
FLUCTUATION_TABLE = CategoryTable(
    DEMAND_FLUCTUATION,
    {"Increasing": 0.36, "Stable": 0.28, "Unknown": 0.20,
     "Decreasing": 0.16, "Ending": 0.00},
    fallback="Unknown",
)
CONSIGNMENT_TABLE = CategoryTable(
    CONSIGNMENT_STOCK, {"No": 0.80, "Yes": 0.20}, fallback="No"
)
SIZE_TABLE = CategoryTable(
    UNIT_SIZE, {"Large": 0.53, "Medium": 0.31, "Small": 0.13}, fallback="Medium"
)

FUZZY_RISK_TABLE = CategoryTable(
    RISK,
    {"High": TFN(0.7, 0.9, 1.0), "Normal": TFN(0.3, 0.5, 0.7),
     "Low": TFN(0.0, 0.1, 0.3)},
    fallback="Normal",
)
FUZZY_FLUCTUATION_TABLE = CategoryTable(
    DEMAND_FLUCTUATION,
    {"Increasing": TFN(0.7, 0.85, 1.0), "Stable": TFN(0.4, 0.55, 0.7),
     "Unknown": TFN(0.3, 0.45, 0.6), "Decreasing": TFN(0.1, 0.25, 0.4),
     "Ending": TFN(0.0, 0.0, 0.1)},
    fallback="Unknown",
)
FUZZY_CONSIGNMENT_TABLE = CategoryTable(
    CONSIGNMENT_STOCK,
    {"No": TFN(0.6, 0.8, 1.0), "Yes": TFN(0.0, 0.2, 0.4)},
    fallback="No",
)
FUZZY_SIZE_TABLE = CategoryTable(
    UNIT_SIZE,
    {"Large": TFN(0.6, 0.8, 1.0), "Medium": TFN(0.3, 0.5, 0.7),
     "Small": TFN(0.0, 0.2, 0.4)},
    fallback="Medium",
)

# Output column → crisp table
SCORE_TABLES = MappingProxyType({
    "Risk_Score": RISK_TABLE,
    "Fluctuation_Score": FLUCTUATION_TABLE,
    "Consignment_Score": CONSIGNMENT_TABLE,
    "Size_Score": SIZE_TABLE,
})


def map_category(category: str, table: CategoryTable[T]) -> T:
    """Map one categorical value through ``table``."""
    return table.lookup(category)


def map_criteria(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Crisp scores for the four categorical columns of ``frame``.

    Returns a frame with ``Risk_Score``, ``Fluctuation_Score``,
    ``Consignment_Score`` and ``Size_Score`` on the same index.
    """
    return pd.DataFrame(
        {col: [table.lookup(v) for v in frame[table.field]]
         for col, table in SCORE_TABLES.items()},
        index=frame.index, dtype=float,
    )


def map_fuzzy(categories: pd.Series, table: CategoryTable[TFN]) -> List[TFN]:
    return [table.lookup(v) for v in categories]
