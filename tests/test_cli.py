# -*- coding: utf-8 -*-
"""Tests for the command-line entry point."""

import pytest


class TestCLI:

    def test_invalid_thresholds(self):
        import run
        with pytest.raises(SystemExit) as exc:
            run.main(["--a", "60", "--b", "50"])
        assert exc.value.code == 2

    def test_sample_run(self, tmp_path, capsys):
        import run
        out = tmp_path / "out"
        code = run.main(["--output-dir", str(out), "--sample-size", "30"])

        assert code == 0
        assert (out / "results" / "scored_items.csv").exists()
        assert (out / "results" / "entropy_weights.csv").exists()
        assert (out / "results" / "summary.json").exists()
        assert (out / "reports" / "report.txt").exists()
        assert "RESULTS SUMMARY" in capsys.readouterr().out

    def test_csv_run_with_save(self, tmp_path, monkeypatch, capsys):
        import run
        from abc_mcdm.config import DATABASE_URL_ENV
        from abc_mcdm.data_loader import SAMPLE_CSV
        from abc_mcdm.persistence import get_engine, dispose_engines
        from abc_mcdm.services import AnalysisService

        db_url = f"sqlite:///{tmp_path / 'cli.db'}"
        monkeypatch.setenv(DATABASE_URL_ENV, db_url)
        data = tmp_path / "inventory.csv"
        data.write_text(SAMPLE_CSV)

        try:
            code = run.main([str(data), "--output-dir", str(tmp_path / "out"),
                             "--a", "10", "--b", "40", "--save"])
            assert code == 0
            assert "Stored analysis" in capsys.readouterr().out

            (stored,) = AnalysisService(get_engine(db_url)).list_analyses()
            assert stored["total_items"] == 10
            assert stored["thresholds_a"] == 10.0
        finally:
            dispose_engines()

    def test_missing_file(self, tmp_path):
        import run
        code = run.main([str(tmp_path / "missing.csv"),
                         "--output-dir", str(tmp_path / "out")])
        assert code == 1
