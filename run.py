#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Entry point for the ABC inventory classification pipeline.

Usage:
    python run.py                           # Run on the 700-item sample set
    python run.py path/to/inventory.csv     # Run on a CSV file
    python run.py data.csv --a 15 --b 45    # Custom tier thresholds
    python run.py data.csv --save           # Also store the analysis in the database
"""

import argparse
import logging
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="ABC inventory classification with TOPSIS and Fuzzy TOPSIS"
    )
    parser.add_argument("data", nargs="?", default=None,
                        help="inventory CSV (default: generated sample set)")
    parser.add_argument("--a", type=float, default=20.0,
                        help="class A cutoff, top percent (default: 20)")
    parser.add_argument("--b", type=float, default=50.0,
                        help="class B cutoff, cumulative percent (default: 50)")
    parser.add_argument("--output-dir", default="outputs",
                        help="output directory (default: outputs)")
    parser.add_argument("--sample-size", type=int, default=None,
                        help="items in the generated sample set (default: 700)")
    parser.add_argument("--save", action="store_true",
                        help="store the analysis in the configured database")
    parser.add_argument("--verbose", action="store_true",
                        help="debug output on the console")
    parser.add_argument("--color", action="store_true",
                        help="colored console log output")
    return parser


def main(argv=None) -> int:
    """Run the ABC classification pipeline."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Import here to avoid slow startup for --help
    from abc_mcdm import ABCAnalysisPipeline, get_default_config, setup_logger
    from abc_mcdm.config import ThresholdConfig

    thresholds = ThresholdConfig(a=args.a, b=args.b)
    try:
        thresholds.validate()
    except ValueError as e:
        parser.error(str(e))

    config = get_default_config()
    config.thresholds = thresholds
    config.paths.output_name = args.output_dir
    if args.sample_size is not None:
        config.sample.n_items = args.sample_size

    print(f"{'─'*70}")
    print(f"  CONFIGURATION")
    print(f"{'─'*70}")
    print(f"\n  Data source: {args.data if args.data else 'Generated sample set'}")
    print(f"  Thresholds : A = top {thresholds.a:g}%, B = next {thresholds.b - thresholds.a:g}%")
    print(f"  Output     : {config.output_dir}/\n")

    pipeline = ABCAnalysisPipeline(config, use_colors=args.color)
    if args.verbose:
        setup_logger('abc_mcdm', level=logging.DEBUG,
                     debug_file=Path(config.paths.logs_dir) / 'debug.log',
                     use_colors=args.color)

    try:
        result = pipeline.run(args.data)
        print_results(result)

        if args.save:
            from abc_mcdm.persistence import get_engine
            from abc_mcdm.services import AnalysisService

            service = AnalysisService(get_engine(config.database_url))
            analysis_id = service.save(result.result)
            print(f"\n  Stored analysis: {analysis_id}")

        print(f"\n{'─'*70}")
        print(f"  ANALYSIS COMPLETE")
        print(f"{'─'*70}")
        print(f"  Results saved to '{config.output_dir}/':")
        print(f"     • results/  - scored items, weights, summary")
        print(f"     • reports/  - text report\n")

    except Exception as e:
        pipeline.logger.exception(f"Pipeline failed: {e}")
        print(f"\n  ❌ Error: {e}")
        return 1
    return 0


def print_results(result):
    """Print concise results summary to console."""
    summary = result.summary

    print(f"\n{'='*70}")
    print("  RESULTS SUMMARY")
    print(f"{'='*70}")

    print(f"\n  ITEMS : {summary.total_items}")
    print(f"\n  CLASS DISTRIBUTION")
    print(f"    {'Class':<8}{'Crisp':>8}{'Fuzzy':>8}")
    for c in "ABC":
        print(f"    {c:<8}{summary.crisp_distribution[c]:>8}{summary.fuzzy_distribution[c]:>8}")

    print(f"\n  AGREEMENT")
    print(f"    Same class       : {summary.class_match_pct:.1f}%")
    print(f"    Spearman rho     : {summary.rank_correlation:.4f}")
    if summary.top_crisp_criterion:
        name, weight = summary.top_crisp_criterion
        print(f"    Top criterion    : {name} ({weight:.4f})")

    print(f"\n  TOP 10 ITEMS (crisp TOPSIS)")
    print(f"    {'Rank':<6}{'Item':>6}{'TOPSIS':>10}{'Fuzzy':>10}{'Class':>7}{'Fuzzy':>7}")
    print(f"    {'-'*46}")
    for rank, r in enumerate(result.result.scored[:10], 1):
        print(f"    {rank:<6}{r.id:>6}{r.topsis_score:>10.4f}{r.fuzzy_topsis_score:>10.4f}"
              f"{r.crisp_class:>7}{r.fuzzy_class:>7}")

    print(f"\n  RUNTIME : {result.execution_time:.2f}s")
    print(f"{'='*70}")


if __name__ == '__main__':
    sys.exit(main())
