# -*- coding: utf-8 -*-
"""Tests for result export."""

import json

import pandas as pd


class TestOutputManager:

    def test_directories(self, tmp_path):
        from abc_mcdm.output_manager import create_output_manager
        om = create_output_manager(str(tmp_path / "out"))
        assert (tmp_path / "out" / "results").is_dir()
        assert (tmp_path / "out" / "reports").is_dir()
        assert om.timestamp

    def test_save_all(self, tmp_path, base_records):
        from abc_mcdm import process
        from abc_mcdm.output_manager import OutputManager
        from abc_mcdm.records import SCORED_FIELDS

        result = process(base_records)
        files = OutputManager(str(tmp_path)).save_all(result)
        assert set(files) == {"scored_items", "weights", "summary", "report"}

        scored = pd.read_csv(files["scored_items"])
        assert list(scored.columns) == list(SCORED_FIELDS)
        assert list(scored["id"]) == [r.id for r in result.scored]

        weights = pd.read_csv(files["weights"])
        assert list(weights.columns) == ["Path", "Criterion", "Weight"]
        assert len(weights) == 13
        assert weights.groupby("Path")["Weight"].sum().round(4).tolist() == [1.0, 1.0]

        with open(files["summary"]) as f:
            summary = json.load(f)
        assert summary["total_items"] == 10
        assert summary["crisp_distribution"] == {"A": 2, "B": 3, "C": 5}
        assert "timestamp" in summary

        with open(files["report"], encoding="utf-8") as f:
            report = f.read()
        assert "ABC INVENTORY CLASSIFICATION REPORT" in report
        assert "ENTROPY WEIGHTS" in report

    def test_empty_result(self, tmp_path):
        from abc_mcdm import process
        from abc_mcdm.output_manager import OutputManager
        files = OutputManager(str(tmp_path)).save_all(process([]))
        with open(files["summary"]) as f:
            assert json.load(f)["total_items"] == 0

    def test_export_is_timed(self, tmp_path, base_records, caplog):
        import logging
        from abc_mcdm import process
        from abc_mcdm.output_manager import OutputManager

        logger = logging.getLogger("abc_mcdm.output_manager")
        caplog.set_level(logging.INFO, logger="abc_mcdm.output_manager")
        logger.addHandler(caplog.handler)
        try:
            OutputManager(str(tmp_path)).save_all(process(base_records))
        finally:
            logger.removeHandler(caplog.handler)
        assert f"Finished: export to {tmp_path}" in caplog.text
