# -*- coding: utf-8 -*-
"""Inventory data loading, lenient field parsing and sample generation."""

import math
import re
import pandas as pd
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .config import Config, get_config
from .logger import get_logger
from .records import (
    INPUT_FIELDS, RISK, DEMAND_FLUCTUATION, AVERAGE_STOCK, DAILY_USAGE,
    UNIT_COST, LEAD_TIME, CONSIGNMENT_STOCK, UNIT_SIZE, InventoryRecord,
)


# Defaults for empty or missing categorical cells
CATEGORY_DEFAULTS = {
    RISK: "Normal",
    DEMAND_FLUCTUATION: "Stable",
    CONSIGNMENT_STOCK: "No",
    UNIT_SIZE: "Medium",
}

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def parse_float(value: Any) -> float:
    """
    Leading decimal number of ``value``; 0.0 when there is none.

    >>> parse_float("12.5kg"), parse_float(""), parse_float(None)
    (12.5, 0.0, 0.0)
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value) if math.isfinite(value) else 0.0
    match = _FLOAT_PREFIX.match(str(value)) if value is not None else None
    return float(match.group()) if match else 0.0


def parse_int(value: Any) -> int:
    """
    Leading integer of ``value`` (fraction truncated); 0 when there is none.

    >>> parse_int("12.9"), parse_int("-3"), parse_int("n/a")
    (12, -3, 0)
    """
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = _INT_PREFIX.match(str(value)) if value is not None else None
    return int(match.group()) if match else 0


def parse_category(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def parse_row(row: Mapping[str, Any], id: Optional[int] = None) -> InventoryRecord:
    """
    Build an ``InventoryRecord`` from raw cells.

    Missing or empty categorical cells take the field default, unparsable
    numeric cells become 0.
    """
    return InventoryRecord(
        risk=parse_category(row.get(RISK), CATEGORY_DEFAULTS[RISK]),
        demand_fluctuation=parse_category(row.get(DEMAND_FLUCTUATION),
                                          CATEGORY_DEFAULTS[DEMAND_FLUCTUATION]),
        average_stock=parse_float(row.get(AVERAGE_STOCK)),
        daily_usage=parse_float(row.get(DAILY_USAGE)),
        unit_cost=parse_float(row.get(UNIT_COST)),
        lead_time=parse_int(row.get(LEAD_TIME)),
        consignment_stock=parse_category(row.get(CONSIGNMENT_STOCK),
                                         CATEGORY_DEFAULTS[CONSIGNMENT_STOCK]),
        unit_size=parse_category(row.get(UNIT_SIZE), CATEGORY_DEFAULTS[UNIT_SIZE]),
        id=id,
    )


class InventoryDataLoader:
    """Loads inventory records from CSV files or DataFrames."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self.logger = get_logger()

    def load(self, filepath: Union[str, Path]) -> List[InventoryRecord]:
        """
        Load inventory records from a CSV file with a header row.

        Raises
        ------
        FileNotFoundError
            If ``filepath`` does not exist
        ValueError
            If the header has none of the inventory columns
        """
        filepath = Path(filepath)
        if not filepath.exists():
            raise FileNotFoundError(f"Inventory data not found at {filepath}")

        self.logger.info(f"Loading inventory data from {filepath}")
        df = pd.read_csv(filepath, dtype=str, keep_default_na=False,
                         skip_blank_lines=True)
        return self.load_from_dataframe(df)

    def load_from_dataframe(self, df: pd.DataFrame) -> List[InventoryRecord]:
        """Load records from a DataFrame; ids are 1-based row positions."""
        df = df.rename(columns=lambda c: str(c).strip())
        present = [c for c in INPUT_FIELDS if c in df.columns]
        if not present:
            raise ValueError(
                f"No inventory columns found; expected any of {list(INPUT_FIELDS)}"
            )
        missing = [c for c in INPUT_FIELDS if c not in df.columns]
        if missing:
            self.logger.warning(f"Missing columns filled with defaults: {missing}")

        records = [parse_row(row, id=i + 1)
                   for i, row in enumerate(df.to_dict(orient="records"))]

        self.logger.info(f"✓ Loaded: {len(records)} inventory items")
        return records


# =============================================================================
# Sample inventory
# =============================================================================

BASE_SAMPLE_ROWS: List[Dict[str, Any]] = [
    {RISK: "High", DEMAND_FLUCTUATION: "Ending", AVERAGE_STOCK: 110.34, DAILY_USAGE: 4.94,
     UNIT_COST: 7.64446, LEAD_TIME: 23, CONSIGNMENT_STOCK: "Yes", UNIT_SIZE: "Large"},
    {RISK: "Normal", DEMAND_FLUCTUATION: "Ending", AVERAGE_STOCK: 183.26, DAILY_USAGE: 1.58,
     UNIT_COST: 2.50913, LEAD_TIME: 10, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Large"},
    {RISK: "Normal", DEMAND_FLUCTUATION: "Stable", AVERAGE_STOCK: 115.42, DAILY_USAGE: 3.29,
     UNIT_COST: 6.25884, LEAD_TIME: 17, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Medium"},
    {RISK: "Low", DEMAND_FLUCTUATION: "Stable", AVERAGE_STOCK: 113.85, DAILY_USAGE: 0.26,
     UNIT_COST: 4.95187, LEAD_TIME: 19, CONSIGNMENT_STOCK: "Yes", UNIT_SIZE: "Large"},
    {RISK: "Normal", DEMAND_FLUCTUATION: "Decreasing", AVERAGE_STOCK: 149.02, DAILY_USAGE: 4.93,
     UNIT_COST: 6.48226, LEAD_TIME: 24, CONSIGNMENT_STOCK: "Yes", UNIT_SIZE: "Small"},
    {RISK: "High", DEMAND_FLUCTUATION: "Increasing", AVERAGE_STOCK: 200.15, DAILY_USAGE: 8.50,
     UNIT_COST: 12.5432, LEAD_TIME: 28, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Large"},
    {RISK: "High", DEMAND_FLUCTUATION: "Increasing", AVERAGE_STOCK: 175.32, DAILY_USAGE: 7.25,
     UNIT_COST: 9.87654, LEAD_TIME: 25, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Large"},
    {RISK: "Normal", DEMAND_FLUCTUATION: "Increasing", AVERAGE_STOCK: 160.45, DAILY_USAGE: 6.80,
     UNIT_COST: 8.12345, LEAD_TIME: 20, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Large"},
    {RISK: "High", DEMAND_FLUCTUATION: "Stable", AVERAGE_STOCK: 145.67, DAILY_USAGE: 5.50,
     UNIT_COST: 10.2345, LEAD_TIME: 22, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Large"},
    {RISK: "Normal", DEMAND_FLUCTUATION: "Increasing", AVERAGE_STOCK: 190.23, DAILY_USAGE: 7.90,
     UNIT_COST: 11.5678, LEAD_TIME: 26, CONSIGNMENT_STOCK: "No", UNIT_SIZE: "Medium"},
]

SAMPLE_CSV = ",".join(INPUT_FIELDS) + "\n" + "\n".join(
    ",".join(str(row[f]) for f in INPUT_FIELDS) for row in BASE_SAMPLE_ROWS
)

RISK_OPTIONS = ("High", "Normal", "Low")
DEMAND_OPTIONS = ("Increasing", "Stable", "Unknown", "Decreasing", "Ending")
CONSIGNMENT_OPTIONS = ("Yes", "No")
SIZE_OPTIONS = ("Large", "Medium", "Small")


def seeded_random(seed: int) -> Callable[[], float]:
    """Linear congruential generator returning floats in [0, 1)."""
    state = seed

    def _next() -> float:
        nonlocal state
        state = (state * 9301 + 49297) % 233280
        return state / 233280
    return _next


def _choice(random: Callable[[], float], options) -> str:
    return options[math.floor(random() * len(options))]


def generate_sample_inventory(count: int = 700, seed: int = 42) -> List[InventoryRecord]:
    """
    Reproducible sample batch: the ten base rows, then seeded random rows.

    Ids are 1-based positions.
    """
    random = seeded_random(seed)
    records = []
    for i in range(count):
        if i < len(BASE_SAMPLE_ROWS):
            records.append(InventoryRecord.from_mapping(BASE_SAMPLE_ROWS[i], id=i + 1))
            continue
        risk = _choice(random, RISK_OPTIONS)
        demand = _choice(random, DEMAND_OPTIONS)
        consignment = _choice(random, CONSIGNMENT_OPTIONS)
        size = _choice(random, SIZE_OPTIONS)
        records.append(InventoryRecord(
            risk=risk,
            demand_fluctuation=demand,
            average_stock=50 + random() * 200,
            daily_usage=random() * 10,
            unit_cost=1 + random() * 15,
            lead_time=5 + math.floor(random() * 25),
            consignment_stock=consignment,
            unit_size=size,
            id=i + 1,
        ))
    return records


def load_inventory(filepath: Optional[Union[str, Path]] = None) -> List[InventoryRecord]:
    """Load a CSV, or the sample batch when no path is given."""
    if filepath is None:
        config = get_config()
        return generate_sample_inventory(config.sample.n_items, config.sample.seed)
    return InventoryDataLoader().load(filepath)
