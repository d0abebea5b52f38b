# -*- coding: utf-8 -*-
"""
ABC-MCDM: Inventory ABC Classification with TOPSIS and Fuzzy TOPSIS
====================================================================

Ranks inventory items with entropy-weighted crisp TOPSIS and triangular
fuzzy TOPSIS (vertex method), then buckets both rankings into A/B/C tiers.

Package Structure
-----------------
abc_mcdm/
├── mcdm/               # Scoring stages
│   ├── mapping.py      # Linguistic → crisp / TFN lookup tables
│   ├── normalization.py
│   ├── aggregation.py  # Criticality / Demand / Supply composites
│   ├── topsis.py       # Crisp TOPSIS
│   ├── fuzzy_topsis.py # Fuzzy TOPSIS
│   └── classification.py
│
├── weighting/
│   └── entropy.py      # Shannon entropy weights
│
├── analysis/
│   └── summary.py      # Distribution, agreement, top item
│
├── persistence/        # SQLAlchemy storage of analyses
└── services/           # analyze / get_analysis / list_analyses

Quick Start
-----------
>>> from abc_mcdm import process, generate_sample_inventory
>>> result = process(generate_sample_inventory(50), {"A": 20, "B": 50})
>>> result.scored[0].crisp_class
'A'
"""

from .config import Config, get_default_config, get_config, set_config, reset_config
from .logger import (
    setup_logger,
    get_logger,
    get_module_logger,
    ProgressLogger,
    PipelineLogger,
    LoggerFactory,
    log_execution,
    log_context,
    timed_operation,
)
from .records import InventoryRecord, ScoredRecord
from .data_loader import InventoryDataLoader, generate_sample_inventory, load_inventory
from .pipeline import (
    process, AnalysisResult, ABCAnalysisPipeline, PipelineResult, run_pipeline,
)
from .output_manager import OutputManager, create_output_manager

__version__ = '1.0.0'

__all__ = [
    # Configuration
    'Config',
    'get_default_config',
    'get_config',
    'set_config',
    'reset_config',

    # Logging
    'setup_logger',
    'get_logger',
    'get_module_logger',
    'ProgressLogger',
    'PipelineLogger',
    'LoggerFactory',
    'log_execution',
    'log_context',
    'timed_operation',

    # Data model and loading
    'InventoryRecord',
    'ScoredRecord',
    'InventoryDataLoader',
    'generate_sample_inventory',
    'load_inventory',

    # Pipeline
    'process',
    'AnalysisResult',
    'ABCAnalysisPipeline',
    'PipelineResult',
    'run_pipeline',

    # Output Management
    'OutputManager',
    'create_output_manager',
]
