# -*- coding: utf-8 -*-
"""Repository for the ``mcdm_analyses`` table (one row per analysis)."""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine


class AnalysisNotFoundError(KeyError):
    """No stored analysis with the requested id."""


def _decode(row: Mapping[str, Any]) -> Dict[str, Any]:
    data = dict(row)
    data["crisp_weights"] = json.loads(data["crisp_weights"])
    data["fuzzy_weights"] = json.loads(data["fuzzy_weights"])
    return data


class AnalysisRepo:
    def __init__(self, engine: Engine):
        self.engine = engine

    def create_analysis(self, conn: Connection, analysis_id: str, thresholds: Mapping[str, float],
                        total_items: int, crisp_weights: Mapping[str, float],
                        fuzzy_weights: Mapping[str, float],
                        created_at: Optional[datetime] = None) -> Dict[str, Any]:
        created_at = created_at or datetime.now(timezone.utc)
        params = {
            "id": analysis_id,
            "name": f"Analysis {created_at.isoformat()}",
            "created_at": created_at.isoformat(),
            "thresholds_a": float(thresholds["A"]),
            "thresholds_b": float(thresholds["B"]),
            "total_items": int(total_items),
            "crisp_weights": json.dumps(dict(crisp_weights)),
            "fuzzy_weights": json.dumps(dict(fuzzy_weights)),
        }
        sql = """
        INSERT INTO mcdm_analyses (id, name, created_at, thresholds_a, thresholds_b,
                                   total_items, crisp_weights, fuzzy_weights)
        VALUES (:id, :name, :created_at, :thresholds_a, :thresholds_b,
                :total_items, :crisp_weights, :fuzzy_weights)
        """
        conn.execute(text(sql), params)
        return _decode(params)

    def get_analysis(self, analysis_id: str) -> Dict[str, Any]:
        sql = """
        SELECT id, name, created_at, thresholds_a, thresholds_b,
               total_items, crisp_weights, fuzzy_weights
        FROM mcdm_analyses
        WHERE id = :id
        """
        with self.engine.begin() as conn:
            row = conn.execute(text(sql), {"id": analysis_id}).mappings().first()
        if row is None:
            raise AnalysisNotFoundError(analysis_id)
        return _decode(row)

    def list_analyses(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        sql = """
        SELECT id, name, created_at, thresholds_a, thresholds_b,
               total_items, crisp_weights, fuzzy_weights
        FROM mcdm_analyses
        ORDER BY created_at DESC
        """
        params: Dict[str, Any] = {}
        if limit is not None:
            sql += " LIMIT :limit"
            params["limit"] = int(limit)
        with self.engine.begin() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [_decode(r) for r in rows]
