# -*- coding: utf-8 -*-
"""Repository for the ``inventory_items`` table (one row per scored item)."""

from typing import Any, Dict, List, Sequence

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

from ...records import ScoredRecord


# Column → ScoredRecord.to_dict() key
ITEM_COLUMNS = {
    "item_number": "id",
    "risk": "Risk",
    "demand_fluctuation": "Demand fluctuation",
    "average_stock": "Average stock",
    "daily_usage": "Daily usage",
    "unit_cost": "Unit cost",
    "lead_time": "Lead time",
    "consignment_stock": "Consignment stock",
    "unit_size": "Unit size",
    "risk_score": "Risk_Score",
    "fluctuation_score": "Fluctuation_Score",
    "consignment_score": "Consignment_Score",
    "size_score": "Size_Score",
    "norm_usage": "Norm_Usage",
    "norm_stock": "Norm_Stock",
    "norm_lead_time": "Norm_LeadTime",
    "norm_cost": "Norm_Cost",
    "criticality_agg": "Criticality_Agg",
    "demand_agg": "Demand_Agg",
    "supply_agg": "Supply_Agg",
    "topsis_score": "TOPSIS_Score",
    "fuzzy_topsis_score": "Fuzzy_TOPSIS_Score",
    "class": "Class",
    "fuzzy_class": "Fuzzy_Class",
}


class ItemRepo:
    def __init__(self, engine: Engine):
        self.engine = engine

    def insert_items(self, conn: Connection, analysis_id: str, scored: Sequence[ScoredRecord]) -> int:
        if not scored:
            return 0
        columns = ["analysis_id"] + list(ITEM_COLUMNS)
        sql = f"""
        INSERT INTO inventory_items ({", ".join(columns)})
        VALUES ({", ".join(":" + c for c in columns)})
        """
        rows = []
        for record in scored:
            data = record.to_dict()
            row = {col: data[key] for col, key in ITEM_COLUMNS.items()}
            row["analysis_id"] = analysis_id
            rows.append(row)
        conn.execute(text(sql), rows)
        return len(rows)

    def list_items(self, analysis_id: str) -> List[Dict[str, Any]]:
        sql = f"""
        SELECT {", ".join(ITEM_COLUMNS)}
        FROM inventory_items
        WHERE analysis_id = :analysis_id
        ORDER BY topsis_score DESC, item_number ASC
        """
        with self.engine.begin() as conn:
            rows = conn.execute(text(sql), {"analysis_id": analysis_id}).mappings().all()
        return [dict(r) for r in rows]
