# -*- coding: utf-8 -*-
"""Tests for the logging helpers."""

import json
import logging

import pytest


class TestProgressLogger:

    def test_completed_phase(self, caplog):
        from abc_mcdm.logger import ProgressLogger
        logger = logging.getLogger("test_progress")
        caplog.set_level(logging.DEBUG, logger="test_progress")

        with ProgressLogger(logger, "Phase 1: Loading") as phase:
            phase.set_metric("items", 10)

        assert phase.metrics.status == "completed"
        assert phase.metrics.sub_metrics == {"items": 10}
        assert "▶ Starting: Phase 1: Loading" in caplog.text
        assert "✓ Completed: Phase 1: Loading" in caplog.text

    def test_failed_phase_reraises(self, caplog):
        from abc_mcdm.logger import ProgressLogger
        logger = logging.getLogger("test_progress")
        caplog.set_level(logging.DEBUG, logger="test_progress")

        with pytest.raises(ValueError):
            with ProgressLogger(logger, "Phase 2: Scoring") as phase:
                raise ValueError("bad batch")

        assert phase.metrics.status == "failed"
        assert "✗ Failed: Phase 2: Scoring" in caplog.text
        assert "ValueError: bad batch" in caplog.text


class TestLoggerSetup:

    def test_debug_file(self, tmp_path):
        from abc_mcdm.logger import setup_logger
        log_file = tmp_path / "logs" / "debug.log"
        logger = setup_logger("abc_mcdm_test", level=logging.WARNING,
                              console=False, debug_file=log_file)
        logger.debug("hidden on console")
        for handler in logger.handlers:
            handler.flush()

        assert not logger.propagate
        assert "hidden on console" in log_file.read_text(encoding="utf-8")

    def test_json_file_with_context(self, tmp_path):
        from abc_mcdm.logger import setup_logger, log_context
        json_file = tmp_path / "log.jsonl"
        logger = setup_logger("abc_mcdm_json", console=False, json_file=json_file)
        with log_context(analysis_id="abc-123"):
            logger.info("stored")
        for handler in logger.handlers:
            handler.flush()

        record = json.loads(json_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["message"] == "stored"
        assert record["analysis_id"] == "abc-123"

    def test_module_logger_name(self):
        from abc_mcdm.logger import get_module_logger
        assert get_module_logger("mcdm.topsis").name.endswith(".mcdm.topsis")

    def test_log_execution(self, caplog):
        from abc_mcdm.logger import log_execution
        logger = logging.getLogger("test_decorated")
        caplog.set_level(logging.DEBUG, logger="test_decorated")

        @log_execution(logger)
        def double(x):
            return 2 * x

        assert double(4) == 8
        assert "completed" in caplog.text


class TestLoggingHelpers:

    def test_timed_operation(self, caplog):
        from abc_mcdm.logger import timed_operation
        logger = logging.getLogger("test_timed")
        caplog.set_level(logging.INFO, logger="test_timed")
        with timed_operation(logger, "csv export"):
            pass
        assert "Starting: csv export" in caplog.text
        assert "Finished: csv export" in caplog.text

    def test_pipeline_logger_step(self, caplog):
        from abc_mcdm.logger import PipelineLogger
        logger = logging.getLogger("test_steps")
        caplog.set_level(logging.INFO, logger="test_steps")
        report = PipelineLogger(logger)
        report.step("Saved 4 files", "done")
        report.step("Saving results", "skip")
        assert "✓ Saved 4 files" in caplog.text
        assert "⊘ Saving results" in caplog.text

    def test_colored_formatter(self, monkeypatch):
        from abc_mcdm.logger import Colors, ColoredFormatter
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)

        colored = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert Colors.YELLOW in colored
        assert Colors.strip(colored).split() == ["WARNING", "careful"]
        assert record.msg == "careful"

    def test_no_color_env(self, monkeypatch):
        from abc_mcdm.logger import Colors, ColoredFormatter
        monkeypatch.setenv("NO_COLOR", "1")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", None, None)
        assert "\033[" not in ColoredFormatter(fmt="%(message)s").format(record)
        assert not Colors.supports_color()

    def test_setup_logger_with_colors(self, monkeypatch):
        from abc_mcdm.logger import ColoredFormatter, setup_logger
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("FORCE_COLOR", "1")
        logger = setup_logger("abc_mcdm_color", use_colors=True)
        (handler,) = logger.handlers
        assert isinstance(handler.formatter, ColoredFormatter)
        assert handler.formatter.use_colors
