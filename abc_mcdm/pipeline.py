# -*- coding: utf-8 -*-
"""ABC-MCDM inventory classification pipeline."""

import time
import numpy as np
import pandas as pd
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from dataclasses import dataclass, field

from .config import Config, get_default_config
from .logger import setup_logger, get_module_logger, ProgressLogger, PipelineLogger
from .records import INPUT_FIELDS, SCORED_FIELDS, InventoryRecord, ScoredRecord
from .mcdm.mapping import map_criteria
from .mcdm.normalization import normalize_quantities
from .mcdm.aggregation import aggregate_criteria
from .mcdm.topsis import TOPSISCalculator
from .mcdm.fuzzy_topsis import (
    FUZZY_CRITERIA, FuzzyTOPSIS, build_fuzzy_matrix, fuzzy_criteria_frame,
)
from .mcdm.classification import ABCClassifier, DEFAULT_THRESHOLDS
from .weighting import EntropyWeightCalculator, WeightResult
from .data_loader import InventoryDataLoader, generate_sample_inventory
from .analysis.summary import AnalysisSummary, summarize
from .output_manager import OutputManager


logger = get_module_logger("pipeline")

# Crisp TOPSIS criteria (all benefit) → source column
CRISP_CRITERIA = {
    "Criticality_Agg": "Criticality_Agg",
    "Demand_Agg": "Demand_Agg",
    "Supply_Agg": "Supply_Agg",
    "Unit_cost": "Unit cost",
    "Size_Score": "Size_Score",
}

ItemLike = Union[InventoryRecord, Mapping[str, Any]]


@dataclass
class AnalysisResult:
    """Output of one ``process`` call."""
    scored: List[ScoredRecord]
    crisp_weights: Dict[str, float]
    fuzzy_weights: Dict[str, float]
    thresholds: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_THRESHOLDS))

    def __len__(self) -> int:
        return len(self.scored)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scored": [r.to_dict() for r in self.scored],
            "crisp_weights": dict(self.crisp_weights),
            "fuzzy_weights": dict(self.fuzzy_weights),
        }

    def to_frame(self) -> pd.DataFrame:
        """Scored records as a DataFrame with the stable export columns."""
        return pd.DataFrame([r.to_dict() for r in self.scored],
                            columns=list(SCORED_FIELDS))


def _coerce(items: Sequence[ItemLike]) -> List[InventoryRecord]:
    return [item if isinstance(item, InventoryRecord) else InventoryRecord.from_mapping(item)
            for item in items]


def process(items: Sequence[ItemLike],
            thresholds: Optional[Mapping[str, float]] = None,
            epsilon: float = 0.0001) -> AnalysisResult:
    """
    Score and classify a batch of inventory items.

    Parameters
    ----------
    items : sequence of InventoryRecord or mappings
        Mappings use the external field names (``"Risk"``, ``"Lead time"``...)
    thresholds : Mapping, optional
        ``{"A": a, "B": b}`` cumulative percentages, default 20/50.
        Not validated here.
    epsilon : float
        Entropy smoothing constant

    Returns
    -------
    AnalysisResult
        Scored records in crisp rank order (best first, ties by input
        order), plus the crisp (5) and fuzzy (8) entropy weight vectors.
        Each record is identified by its 1-based position in ``items``;
        ids carried by the inputs are not reused, so merged batches never
        collide
    """
    thresholds = dict(thresholds or DEFAULT_THRESHOLDS)
    records = _coerce(items)
    n = len(records)

    if n == 0:
        return AnalysisResult(
            scored=[],
            crisp_weights=WeightResult.zeros(CRISP_CRITERIA).weights,
            fuzzy_weights=WeightResult.zeros(FUZZY_CRITERIA).weights,
            thresholds=thresholds,
        )

    frame = pd.DataFrame([r.to_dict() for r in records], columns=list(INPUT_FIELDS))

    # Stages 1-3: map, normalise, aggregate
    mapped = map_criteria(frame)
    normalized = normalize_quantities(frame)
    aggregated = aggregate_criteria(mapped, normalized)
    inputs = pd.concat([frame, mapped, normalized, aggregated], axis=1)

    # Stage 4: entropy weights for both paths
    weighter = EntropyWeightCalculator(epsilon=epsilon)
    crisp_matrix = pd.DataFrame(
        {name: inputs[source].to_numpy(dtype=float)
         for name, source in CRISP_CRITERIA.items()},
        index=frame.index,
    )
    crisp_weights = weighter.calculate(crisp_matrix)
    fuzzy_weights = weighter.calculate(fuzzy_criteria_frame(mapped, normalized))

    # Stage 5: rankings
    crisp = TOPSISCalculator().calculate(crisp_matrix, crisp_weights)
    fuzzy = FuzzyTOPSIS().calculate(build_fuzzy_matrix(frame, normalized),
                                    fuzzy_weights, index=frame.index)

    # Stage 6: classes
    classifier = ABCClassifier(thresholds)
    crisp_class = classifier.classify(crisp.scores)
    fuzzy_class = classifier.classify(fuzzy.scores)

    logger.debug("Processed %d items (thresholds A=%s, B=%s)",
                 n, thresholds["A"], thresholds["B"])

    scored = []
    for i in np.argsort(-crisp.scores.to_numpy(), kind="stable"):
        row = inputs.iloc[i]
        scored.append(ScoredRecord(
            id=int(i) + 1,
            record=records[i],
            risk_score=float(row["Risk_Score"]),
            fluctuation_score=float(row["Fluctuation_Score"]),
            consignment_score=float(row["Consignment_Score"]),
            size_score=float(row["Size_Score"]),
            norm_usage=float(row["Norm_Usage"]),
            norm_stock=float(row["Norm_Stock"]),
            norm_lead_time=float(row["Norm_LeadTime"]),
            norm_cost=float(row["Norm_Cost"]),
            criticality_agg=float(row["Criticality_Agg"]),
            demand_agg=float(row["Demand_Agg"]),
            supply_agg=float(row["Supply_Agg"]),
            topsis_score=float(crisp.scores.iloc[i]),
            fuzzy_topsis_score=float(fuzzy.scores.iloc[i]),
            crisp_class=crisp_class.iloc[i],
            fuzzy_class=fuzzy_class.iloc[i],
        ))

    return AnalysisResult(
        scored=scored,
        crisp_weights=crisp_weights.weights,
        fuzzy_weights=fuzzy_weights.weights,
        thresholds=thresholds,
    )


# =============================================================================
# Orchestrator
# =============================================================================

@dataclass
class PipelineResult:
    """Container for all pipeline results."""
    result: AnalysisResult
    summary: AnalysisSummary
    saved_files: Dict[str, str] = field(default_factory=dict)
    source: str = "sample"
    execution_time: float = 0.0
    config: Optional[Config] = None

    def get_ranking_df(self) -> pd.DataFrame:
        """Scored items in crisp rank order with a 1-based ``Rank`` column."""
        df = self.result.to_frame()
        df.insert(0, "Rank", range(1, len(df) + 1))
        return df


class ABCAnalysisPipeline:
    """
    Inventory ABC classification pipeline.

    Phases:
    - Data loading (CSV, in-memory records, or the seeded sample set)
    - Scoring (entropy weights, TOPSIS, Fuzzy TOPSIS, ABC classes)
    - Summary (class distribution, crisp/fuzzy agreement)
    - Export (CSV / JSON / text report)
    """

    def __init__(self, config: Optional[Config] = None, save_outputs: bool = True,
                 use_colors: bool = False):
        """
        Initialize pipeline.

        Parameters
        ----------
        config : Config, optional
            Pipeline configuration
        save_outputs : bool
            Write results and reports under the output directory
        use_colors : bool
            Colored console log output
        """
        self.config = config or get_default_config()
        self.save_outputs = save_outputs

        debug_file = None
        if save_outputs:
            self.config.paths.ensure_directories()
            debug_file = Path(self.config.paths.logs_dir) / 'debug.log'
        self.logger = setup_logger('abc_mcdm', debug_file=debug_file,
                                   use_colors=use_colors)
        self.output_manager = OutputManager(self.config.output_dir) if save_outputs else None

    def run(self,
            data_path: Optional[str] = None,
            items: Optional[Sequence[ItemLike]] = None) -> PipelineResult:
        """
        Execute the analysis.

        Parameters
        ----------
        data_path : str, optional
            Inventory CSV to load
        items : sequence, optional
            Records to analyse directly (ignored when ``data_path`` is given)

        Returns
        -------
        PipelineResult
        """
        start_time = time.time()
        report = PipelineLogger(self.logger)
        report.banner("ABC INVENTORY CLASSIFICATION (TOPSIS / FUZZY TOPSIS)")

        with ProgressLogger(self.logger, "Phase 1: Data Loading") as phase:
            records, source = self._load_items(data_path, items)
            phase.set_metric("items", len(records))

        with ProgressLogger(self.logger, "Phase 2: Scoring and Classification"):
            result = process(records, self.config.thresholds.as_dict(),
                             epsilon=self.config.entropy.epsilon)

        with ProgressLogger(self.logger, "Phase 3: Summary"):
            summary = summarize(result)
            report.section("Results")
            report.metrics({
                "Items": summary.total_items,
                "Crisp A/B/C": "/".join(str(summary.crisp_distribution[c]) for c in "ABC"),
                "Fuzzy A/B/C": "/".join(str(summary.fuzzy_distribution[c]) for c in "ABC"),
                "Crisp/fuzzy class match (%)": summary.class_match_pct,
            })
            report.ranking([(f"Item {r.id}", r.topsis_score) for r in result.scored],
                           title="Crisp TOPSIS ranking")

        saved_files: Dict[str, str] = {}
        if self.output_manager is not None:
            with ProgressLogger(self.logger, "Phase 4: Saving Results"):
                saved_files = self.output_manager.save_all(result, summary)
                report.step(f"Saved {len(saved_files)} files to {self.config.output_dir}", "done")
        else:
            report.step("Saving results", "skip")

        execution_time = time.time() - start_time
        self.logger.info(f"Pipeline completed in {execution_time:.2f} seconds")

        return PipelineResult(
            result=result,
            summary=summary,
            saved_files=saved_files,
            source=source,
            execution_time=execution_time,
            config=self.config,
        )

    def _load_items(self, data_path: Optional[str],
                    items: Optional[Sequence[ItemLike]]):
        if data_path:
            return InventoryDataLoader(self.config).load(data_path), str(data_path)
        if items is not None:
            return list(items), "records"

        self.logger.info("No data provided, generating sample inventory")
        records = generate_sample_inventory(self.config.sample.n_items,
                                            seed=self.config.sample.seed)
        return records, "sample"


def run_pipeline(data_path: Optional[str] = None,
                 config: Optional[Config] = None) -> PipelineResult:
    """Convenience function to run the full pipeline."""
    return ABCAnalysisPipeline(config).run(data_path)
