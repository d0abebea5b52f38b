"""
Pytest configuration and fixtures for ABC-MCDM tests.
"""
import sys
from pathlib import Path

import pytest
import numpy as np
import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))


def make_item(**overrides):
    """Inventory mapping with neutral defaults, keyed by external field names."""
    item = {
        "Risk": "Normal",
        "Demand fluctuation": "Stable",
        "Average stock": 100.0,
        "Daily usage": 5.0,
        "Unit cost": 8.0,
        "Lead time": 15,
        "Consignment stock": "No",
        "Unit size": "Medium",
    }
    item.update(overrides)
    return item


@pytest.fixture
def base_rows():
    """The ten fixed sample rows."""
    from abc_mcdm.data_loader import BASE_SAMPLE_ROWS
    return [dict(r) for r in BASE_SAMPLE_ROWS]


@pytest.fixture
def base_records(base_rows):
    from abc_mcdm.records import InventoryRecord
    return [InventoryRecord.from_mapping(r, id=i + 1) for i, r in enumerate(base_rows)]


@pytest.fixture
def base_frame(base_rows):
    from abc_mcdm.records import INPUT_FIELDS
    return pd.DataFrame(base_rows, columns=list(INPUT_FIELDS))


@pytest.fixture
def sample_records():
    """A 100-item generated batch."""
    from abc_mcdm.data_loader import generate_sample_inventory
    return generate_sample_inventory(100)


@pytest.fixture
def sample_data():
    """Random non-negative decision matrix."""
    np.random.seed(42)
    return pd.DataFrame(
        np.random.rand(10, 5),
        columns=[f'C{i+1:02d}' for i in range(5)]
    )


@pytest.fixture
def sample_weights():
    return {f'C{i+1:02d}': 0.2 for i in range(5)}


@pytest.fixture
def test_config(tmp_path):
    """Configuration writing under a temporary directory."""
    from abc_mcdm.config import Config, PathConfig, DatabaseConfig
    return Config(
        paths=PathConfig(base_dir=tmp_path),
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'test.db'}"),
    )
