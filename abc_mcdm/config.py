# -*- coding: utf-8 -*-
"""Configuration management for the ABC-MCDM inventory pipeline."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from enum import Enum
import json
import os


DATABASE_URL_ENV = "ABC_MCDM_DATABASE_URL"


@dataclass
class PathConfig:
    """File and directory paths configuration."""
    base_dir: Path = field(default_factory=lambda: Path.cwd())
    output_name: str = "outputs"

    @property
    def output_dir(self) -> Path:
        return Path(self.base_dir) / self.output_name

    @property
    def results_dir(self) -> Path:
        return self.output_dir / "results"

    @property
    def reports_dir(self) -> Path:
        return self.output_dir / "reports"

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    def ensure_directories(self) -> None:
        """Create all necessary directories."""
        for d in [self.output_dir, self.results_dir,
                  self.reports_dir, self.logs_dir]:
            d.mkdir(parents=True, exist_ok=True)


@dataclass
class ThresholdConfig:
    """
    ABC tier cutoffs, as cumulative percentages of the ranked batch.

    Tier A takes the top ``a`` percent, tier B the next ``b - a`` percent
    and tier C the remainder.
    """
    a: float = 20.0
    b: float = 50.0

    def as_dict(self) -> Dict[str, float]:
        return {"A": self.a, "B": self.b}

    def validate(self) -> None:
        """Raise ``ValueError`` unless ``0 < a < b <= 100``."""
        if not (0 < self.a < self.b <= 100):
            raise ValueError(
                f"Invalid thresholds A={self.a}, B={self.b}: "
                f"expected 0 < A < B <= 100"
            )

    @classmethod
    def from_mapping(cls, thresholds: Dict[str, float]) -> 'ThresholdConfig':
        return cls(a=float(thresholds["A"]), b=float(thresholds["B"]))


@dataclass
class EntropyConfig:
    """Entropy weighting configuration."""
    epsilon: float = 0.0001


@dataclass
class DatabaseConfig:
    """Persistence configuration (any SQLAlchemy URL)."""
    url: Optional[str] = field(default_factory=lambda: os.getenv(DATABASE_URL_ENV))

    def resolve_url(self, paths: PathConfig) -> str:
        if self.url:
            return self.url
        return f"sqlite:///{paths.output_dir / 'abc_mcdm.db'}"


@dataclass
class SampleConfig:
    """Seeded sample inventory generator settings."""
    n_items: int = 700
    seed: int = 42


@dataclass
class Config:
    """Master configuration combining all sub-configurations."""
    paths: PathConfig = field(default_factory=PathConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    entropy: EntropyConfig = field(default_factory=EntropyConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    sample: SampleConfig = field(default_factory=SampleConfig)

    @property
    def output_dir(self) -> str:
        """Get output directory path as string."""
        return str(self.paths.output_dir)

    @property
    def database_url(self) -> str:
        return self.database.resolve_url(self.paths)

    def to_dict(self) -> Dict:
        def _to_dict(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _to_dict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, Enum):
                return obj.value
            elif isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, list):
                return [_to_dict(i) for i in obj]
            elif isinstance(obj, dict):
                return {k: _to_dict(v) for k, v in obj.items()}
            return obj
        return _to_dict(self)

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    def summary(self) -> str:
        return f"""
{'='*70}
CONFIGURATION SUMMARY - ABC Inventory Classification (TOPSIS / Fuzzy TOPSIS)
{'='*70}

THRESHOLDS:
  Class A: top {self.thresholds.a:g}%
  Class B: next {self.thresholds.b - self.thresholds.a:g}%
  Class C: remainder

WEIGHTING:
  Strategy: Shannon entropy (crisp 5 criteria, fuzzy 8 criteria)
  Smoothing epsilon: {self.entropy.epsilon}

OUTPUT:
  Directory: {self.output_dir}
  Database: {self.database_url}
{'='*70}
"""


_config: Optional[Config] = None

def get_config() -> Config:
    global _config
    if _config is None:
        _config = Config()
    return _config

def get_default_config() -> Config:
    """Get a fresh default configuration."""
    return Config()

def set_config(config: Config) -> None:
    global _config
    _config = config

def reset_config() -> None:
    global _config
    _config = Config()
