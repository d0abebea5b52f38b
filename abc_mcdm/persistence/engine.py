# -*- coding: utf-8 -*-
"""SQLAlchemy engine factory and schema for stored analyses."""

from typing import Dict, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..config import get_config


SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS mcdm_analyses (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        created_at TEXT NOT NULL,
        thresholds_a DOUBLE PRECISION NOT NULL,
        thresholds_b DOUBLE PRECISION NOT NULL,
        total_items INTEGER NOT NULL,
        crisp_weights TEXT NOT NULL,
        fuzzy_weights TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS inventory_items (
        analysis_id TEXT NOT NULL REFERENCES mcdm_analyses(id),
        item_number INTEGER NOT NULL,
        risk TEXT,
        demand_fluctuation TEXT,
        average_stock DOUBLE PRECISION,
        daily_usage DOUBLE PRECISION,
        unit_cost DOUBLE PRECISION,
        lead_time INTEGER,
        consignment_stock TEXT,
        unit_size TEXT,
        risk_score DOUBLE PRECISION,
        fluctuation_score DOUBLE PRECISION,
        consignment_score DOUBLE PRECISION,
        size_score DOUBLE PRECISION,
        norm_usage DOUBLE PRECISION,
        norm_stock DOUBLE PRECISION,
        norm_lead_time DOUBLE PRECISION,
        norm_cost DOUBLE PRECISION,
        criticality_agg DOUBLE PRECISION,
        demand_agg DOUBLE PRECISION,
        supply_agg DOUBLE PRECISION,
        topsis_score DOUBLE PRECISION,
        fuzzy_topsis_score DOUBLE PRECISION,
        class TEXT,
        fuzzy_class TEXT,
        PRIMARY KEY (analysis_id, item_number)
    )
    """,
)

_engines: Dict[str, Engine] = {}


def get_engine(url: Optional[str] = None) -> Engine:
    """Engine for ``url`` (default: configured database), cached per URL."""
    url = url or get_config().database_url
    engine = _engines.get(url)
    if engine is None:
        engine = create_engine(url, pool_pre_ping=True, future=True)
        _engines[url] = engine
    return engine


def init_schema(engine: Engine) -> None:
    """Create the analysis tables if they do not exist."""
    with engine.begin() as conn:
        for ddl in SCHEMA:
            conn.execute(text(ddl))


def ping_db(engine: Engine) -> bool:
    try:
        with engine.begin() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError:
        return False


def dispose_engines() -> None:
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()
