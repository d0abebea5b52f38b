# -*- coding: utf-8 -*-
"""
Analysis Service
================

Runs ``process`` on a batch and stores the analysis header and its scored
items in one transaction.
"""

import uuid
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..logger import get_module_logger
from ..persistence.engine import init_schema
from ..persistence.repositories.analysis_repo import AnalysisRepo
from ..persistence.repositories.item_repo import ItemRepo
from ..pipeline import AnalysisResult, ItemLike, process


logger = get_module_logger("services.analysis")


class AnalysisService:
    """Runs ``process`` and stores the result under a generated analysis id."""

    def __init__(self, engine: Engine, create_schema: bool = True):
        self.engine = engine
        self.analysis_repo = AnalysisRepo(engine)
        self.item_repo = ItemRepo(engine)
        if create_schema:
            init_schema(engine)

    def analyze(self, items: Sequence[ItemLike],
                thresholds: Optional[Mapping[str, float]] = None
                ) -> Tuple[str, AnalysisResult]:
        result = process(items, thresholds)
        return self.save(result), result

    def save(self, result: AnalysisResult) -> str:
        analysis_id = str(uuid.uuid4())
        try:
            with self.engine.begin() as conn:
                self.analysis_repo.create_analysis(
                    conn,
                    analysis_id=analysis_id,
                    thresholds=result.thresholds,
                    total_items=len(result.scored),
                    crisp_weights=result.crisp_weights,
                    fuzzy_weights=result.fuzzy_weights,
                )
                n = self.item_repo.insert_items(conn, analysis_id, result.scored)
        except SQLAlchemyError as e:
            logger.error(f"Error storing analysis: {e}")
            raise
        logger.info(f"Stored analysis {analysis_id} ({n} items)")
        return analysis_id

    def get_analysis(self, analysis_id: str) -> Dict[str, Any]:
        """Stored analysis and its items (``topsis_score`` descending)."""
        analysis = self.analysis_repo.get_analysis(analysis_id)
        items = self.item_repo.list_items(analysis_id)
        return {"analysis": analysis, "items": items}

    def list_analyses(self, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Stored analyses, newest first."""
        return self.analysis_repo.list_analyses(limit)
