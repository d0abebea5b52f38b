# -*- coding: utf-8 -*-
"""
Inventory record data model.

Field names are the stable, case-sensitive keys shared with CSV import and
storage; ``InventoryRecord.to_dict`` and ``ScoredRecord.to_dict`` use them
verbatim.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


# Input fields
RISK = "Risk"
DEMAND_FLUCTUATION = "Demand fluctuation"
AVERAGE_STOCK = "Average stock"
DAILY_USAGE = "Daily usage"
UNIT_COST = "Unit cost"
LEAD_TIME = "Lead time"
CONSIGNMENT_STOCK = "Consignment stock"
UNIT_SIZE = "Unit size"

INPUT_FIELDS = (
    RISK, DEMAND_FLUCTUATION, AVERAGE_STOCK, DAILY_USAGE,
    UNIT_COST, LEAD_TIME, CONSIGNMENT_STOCK, UNIT_SIZE,
)
CATEGORICAL_FIELDS = (RISK, DEMAND_FLUCTUATION, CONSIGNMENT_STOCK, UNIT_SIZE)
NUMERIC_FIELDS = (AVERAGE_STOCK, DAILY_USAGE, UNIT_COST, LEAD_TIME)

# Derived fields, in export order
DERIVED_FIELDS = (
    "Risk_Score", "Fluctuation_Score", "Consignment_Score", "Size_Score",
    "Norm_Usage", "Norm_Stock", "Norm_LeadTime", "Norm_Cost",
    "Criticality_Agg", "Demand_Agg", "Supply_Agg",
    "TOPSIS_Score", "Fuzzy_TOPSIS_Score", "Class", "Fuzzy_Class",
)
SCORED_FIELDS = ("id",) + INPUT_FIELDS + DERIVED_FIELDS

ABC_CLASSES = ("A", "B", "C")


@dataclass(frozen=True)
class InventoryRecord:
    """One inventory item as handed to the pipeline."""
    risk: str
    demand_fluctuation: str
    average_stock: float
    daily_usage: float
    unit_cost: float
    lead_time: int
    consignment_stock: str
    unit_size: str
    id: Optional[int] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any],
                     id: Optional[int] = None) -> 'InventoryRecord':
        """
        Build a record from an already-parsed mapping keyed by the external
        field names. Raises ``KeyError`` for a missing field; lenient parsing
        of raw text belongs to ``data_loader``.
        """
        return cls(
            risk=str(row[RISK]),
            demand_fluctuation=str(row[DEMAND_FLUCTUATION]),
            average_stock=float(row[AVERAGE_STOCK]),
            daily_usage=float(row[DAILY_USAGE]),
            unit_cost=float(row[UNIT_COST]),
            lead_time=int(row[LEAD_TIME]),
            consignment_stock=str(row[CONSIGNMENT_STOCK]),
            unit_size=str(row[UNIT_SIZE]),
            id=id if id is not None else row.get("id"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            RISK: self.risk,
            DEMAND_FLUCTUATION: self.demand_fluctuation,
            AVERAGE_STOCK: self.average_stock,
            DAILY_USAGE: self.daily_usage,
            UNIT_COST: self.unit_cost,
            LEAD_TIME: self.lead_time,
            CONSIGNMENT_STOCK: self.consignment_stock,
            UNIT_SIZE: self.unit_size,
        }


@dataclass(frozen=True)
class ScoredRecord:
    """An ``InventoryRecord`` enriched with every derived pipeline value."""
    id: int
    record: InventoryRecord
    risk_score: float
    fluctuation_score: float
    consignment_score: float
    size_score: float
    norm_usage: float
    norm_stock: float
    norm_lead_time: float
    norm_cost: float
    criticality_agg: float
    demand_agg: float
    supply_agg: float
    topsis_score: float
    fuzzy_topsis_score: float
    crisp_class: str
    fuzzy_class: str

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        data.update(self.record.to_dict())
        data.update({
            "Risk_Score": self.risk_score,
            "Fluctuation_Score": self.fluctuation_score,
            "Consignment_Score": self.consignment_score,
            "Size_Score": self.size_score,
            "Norm_Usage": self.norm_usage,
            "Norm_Stock": self.norm_stock,
            "Norm_LeadTime": self.norm_lead_time,
            "Norm_Cost": self.norm_cost,
            "Criticality_Agg": self.criticality_agg,
            "Demand_Agg": self.demand_agg,
            "Supply_Agg": self.supply_agg,
            "TOPSIS_Score": self.topsis_score,
            "Fuzzy_TOPSIS_Score": self.fuzzy_topsis_score,
            "Class": self.crisp_class,
            "Fuzzy_Class": self.fuzzy_class,
        })
        return data
