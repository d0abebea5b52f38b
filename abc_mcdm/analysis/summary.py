# -*- coding: utf-8 -*-
"""
Result Summaries
================

Headline figures for a scored batch: class distribution, crisp/fuzzy
agreement, top item and dominant criterion.
"""

import math
import numpy as np
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
from dataclasses import dataclass, field
from scipy.stats import spearmanr

from ..records import ABC_CLASSES, ScoredRecord


CRITERION_DISPLAY_NAMES = {
    "Criticality_Agg": "Criticality",
    "Demand_Agg": "Demand",
    "Supply_Agg": "Supply",
    "Unit_cost": "Unit Cost",
    "Size_Score": "Unit Size",
}


def abc_distribution(scored: Sequence[ScoredRecord], fuzzy: bool = False) -> Dict[str, int]:
    """Number of items per class, crisp by default."""
    counts = {c: 0 for c in ABC_CLASSES}
    for r in scored:
        counts[r.fuzzy_class if fuzzy else r.crisp_class] += 1
    return counts


def fuzzy_crisp_match(scored: Sequence[ScoredRecord]) -> float:
    """Percentage of items with the same crisp and fuzzy class (0 if empty)."""
    if not scored:
        return 0.0
    matches = sum(1 for r in scored if r.crisp_class == r.fuzzy_class)
    return matches / len(scored) * 100


def top_item(scored: Sequence[ScoredRecord], use_fuzzy: bool = False) -> Optional[ScoredRecord]:
    """Highest-scoring item; the earliest one wins a tie."""
    if not scored:
        return None
    if use_fuzzy:
        return max(scored, key=lambda r: r.fuzzy_topsis_score)
    return max(scored, key=lambda r: r.topsis_score)


def top_weight_criterion(weights: Mapping[str, float]) -> Tuple[str, float]:
    """
    Heaviest criterion as ``(display name, weight)``.

    Keys without a display name are returned unchanged.
    """
    if not weights:
        raise ValueError("no weights given")
    key, value = max(weights.items(), key=lambda kv: kv[1])
    return CRITERION_DISPLAY_NAMES.get(key, key), float(value)


def rank_agreement(scored: Sequence[ScoredRecord]) -> float:
    """Spearman correlation of crisp and fuzzy scores; nan below two items."""
    if len(scored) < 2:
        return float("nan")
    crisp = np.array([r.topsis_score for r in scored])
    fuzzy = np.array([r.fuzzy_topsis_score for r in scored])
    if np.ptp(crisp) == 0 or np.ptp(fuzzy) == 0:
        return float("nan")
    rho, _ = spearmanr(crisp, fuzzy)
    return float(rho)


@dataclass
class AnalysisSummary:
    """Headline figures of one analysis."""
    total_items: int
    crisp_distribution: Dict[str, int]
    fuzzy_distribution: Dict[str, int]
    class_match_pct: float
    rank_correlation: float
    top_crisp_item: Optional[int] = None
    top_fuzzy_item: Optional[int] = None
    top_crisp_criterion: Optional[Tuple[str, float]] = None
    top_fuzzy_criterion: Optional[Tuple[str, float]] = None
    thresholds: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict; nan becomes None."""
        def _clean(v):
            return None if isinstance(v, float) and math.isnan(v) else v
        return {
            "total_items": self.total_items,
            "thresholds": dict(self.thresholds),
            "crisp_distribution": dict(self.crisp_distribution),
            "fuzzy_distribution": dict(self.fuzzy_distribution),
            "class_match_pct": self.class_match_pct,
            "rank_correlation": _clean(self.rank_correlation),
            "top_crisp_item": self.top_crisp_item,
            "top_fuzzy_item": self.top_fuzzy_item,
            "top_crisp_criterion": list(self.top_crisp_criterion) if self.top_crisp_criterion else None,
            "top_fuzzy_criterion": list(self.top_fuzzy_criterion) if self.top_fuzzy_criterion else None,
        }


def summarize(result) -> AnalysisSummary:
    """Summarise an ``AnalysisResult``."""
    scored = result.scored
    crisp_top = top_item(scored)
    fuzzy_top = top_item(scored, use_fuzzy=True)
    return AnalysisSummary(
        total_items=len(scored),
        crisp_distribution=abc_distribution(scored),
        fuzzy_distribution=abc_distribution(scored, fuzzy=True),
        class_match_pct=fuzzy_crisp_match(scored),
        rank_correlation=rank_agreement(scored),
        top_crisp_item=crisp_top.id if crisp_top else None,
        top_fuzzy_item=fuzzy_top.id if fuzzy_top else None,
        top_crisp_criterion=top_weight_criterion(result.crisp_weights) if scored else None,
        top_fuzzy_criterion=top_weight_criterion(result.fuzzy_weights) if scored else None,
        thresholds=dict(result.thresholds),
    )
