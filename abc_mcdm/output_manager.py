# -*- coding: utf-8 -*-
"""
Output Management for ABC-MCDM Analysis Results
================================================

Provides the ``OutputManager`` class for persisting analysis artefacts
(CSV, JSON, text report) into an organised directory structure::

    outputs/
    ├── results/   - scored items, weights, summary  (CSV, JSON)
    └── reports/   - plain text report
"""

import json
import pandas as pd
from pathlib import Path
from datetime import datetime
from typing import Dict, List, Optional

from .analysis.summary import AnalysisSummary, summarize
from .logger import get_module_logger, timed_operation
from .records import SCORED_FIELDS


logger = get_module_logger("output_manager")


class OutputManager:
    """Manages structured output to ``results/`` and ``reports/``."""

    def __init__(self, base_output_dir: str = 'outputs'):
        self.base_dir = Path(base_output_dir)
        self.results_dir = self.base_dir / 'results'
        self.reports_dir = self.base_dir / 'reports'
        self._setup_directories()
        self.timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

    def _setup_directories(self) -> None:
        for d in [self.results_dir, self.reports_dir]:
            d.mkdir(parents=True, exist_ok=True)

    # -----------------------------------------------------------------
    # Scored items
    # -----------------------------------------------------------------

    def save_scored_items(self, result) -> str:
        """Scored items in crisp rank order, stable column order."""
        df = pd.DataFrame([r.to_dict() for r in result.scored],
                          columns=list(SCORED_FIELDS))
        path = self.results_dir / 'scored_items.csv'
        df.to_csv(path, index=False, float_format='%.6f')
        return str(path)

    # -----------------------------------------------------------------
    # Weights
    # -----------------------------------------------------------------

    def save_weights(self, result) -> str:
        """Crisp and fuzzy entropy weights in one long-format CSV."""
        rows = [{'Path': 'crisp', 'Criterion': k, 'Weight': w}
                for k, w in result.crisp_weights.items()]
        rows += [{'Path': 'fuzzy', 'Criterion': k, 'Weight': w}
                 for k, w in result.fuzzy_weights.items()]
        path = self.results_dir / 'entropy_weights.csv'
        pd.DataFrame(rows, columns=['Path', 'Criterion', 'Weight']).to_csv(
            path, index=False, float_format='%.6f')
        return str(path)

    # -----------------------------------------------------------------
    # Summary and report
    # -----------------------------------------------------------------

    def save_summary(self, summary: AnalysisSummary) -> str:
        data = summary.to_dict()
        data['timestamp'] = datetime.now().isoformat()
        path = self.results_dir / 'summary.json'
        with open(path, 'w') as f:
            json.dump(data, f, indent=2)
        return str(path)

    def save_report(self, result, summary: AnalysisSummary, top_n: int = 10) -> str:
        path = self.reports_dir / 'report.txt'
        with open(path, 'w', encoding='utf-8') as f:
            f.write('\n'.join(self._report_lines(result, summary, top_n)) + '\n')
        return str(path)

    def _report_lines(self, result, summary: AnalysisSummary, top_n: int) -> List[str]:
        lines = [
            '=' * 70,
            'ABC INVENTORY CLASSIFICATION REPORT',
            f'Generated: {self.timestamp}',
            '=' * 70,
            '',
            f'Items analysed: {summary.total_items}',
            f"Thresholds: A = top {summary.thresholds.get('A', 0):g}%, "
            f"B = top {summary.thresholds.get('B', 0):g}%",
            '',
            'CLASS DISTRIBUTION',
            '-' * 40,
            f"{'Class':<8}{'Crisp':>10}{'Fuzzy':>10}",
        ]
        for c in ('A', 'B', 'C'):
            lines.append(f"{c:<8}{summary.crisp_distribution[c]:>10}"
                         f"{summary.fuzzy_distribution[c]:>10}")
        lines += [
            '',
            f'Crisp/fuzzy class match: {summary.class_match_pct:.1f}%',
            f'Spearman rank correlation: {summary.rank_correlation:.4f}',
            '',
            'ENTROPY WEIGHTS',
            '-' * 40,
        ]
        for k, w in result.crisp_weights.items():
            lines.append(f'  crisp  {k:<18}{w:>10.4f}')
        for k, w in result.fuzzy_weights.items():
            lines.append(f'  fuzzy  {k:<18}{w:>10.4f}')

        lines += ['', f'TOP {top_n} ITEMS (crisp TOPSIS)', '-' * 40,
                  f"{'Rank':<6}{'Item':>6}{'TOPSIS':>10}{'Fuzzy':>10}{'Class':>7}{'Fuzzy':>7}"]
        for rank, r in enumerate(result.scored[:top_n], 1):
            lines.append(f'{rank:<6}{r.id:>6}{r.topsis_score:>10.4f}'
                         f'{r.fuzzy_topsis_score:>10.4f}{r.crisp_class:>7}{r.fuzzy_class:>7}')
        lines.append('=' * 70)
        return lines

    # -----------------------------------------------------------------
    # Everything
    # -----------------------------------------------------------------

    def save_all(self, result, summary: Optional[AnalysisSummary] = None) -> Dict[str, str]:
        """Write every artefact; returns ``{name: path}``."""
        summary = summary or summarize(result)
        with timed_operation(logger, f"export to {self.base_dir}"):
            return {
                'scored_items': self.save_scored_items(result),
                'weights': self.save_weights(result),
                'summary': self.save_summary(summary),
                'report': self.save_report(result, summary),
            }


def create_output_manager(output_dir: str = 'outputs') -> OutputManager:
    """Factory function to create an OutputManager."""
    return OutputManager(output_dir)
