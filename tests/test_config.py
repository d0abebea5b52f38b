# -*- coding: utf-8 -*-
"""Tests for configuration."""

import json

import pytest


class TestThresholdConfig:

    def test_defaults(self):
        from abc_mcdm.config import ThresholdConfig
        t = ThresholdConfig()
        t.validate()
        assert t.as_dict() == {"A": 20.0, "B": 50.0}

    @pytest.mark.parametrize("a,b", [(0, 50), (60, 50), (50, 50), (20, 101), (-5, 10)])
    def test_invalid(self, a, b):
        from abc_mcdm.config import ThresholdConfig
        with pytest.raises(ValueError):
            ThresholdConfig(a=a, b=b).validate()

    def test_from_mapping(self):
        from abc_mcdm.config import ThresholdConfig
        t = ThresholdConfig.from_mapping({"A": 10, "B": 100})
        t.validate()
        assert (t.a, t.b) == (10.0, 100.0)


class TestConfig:

    def test_paths(self, tmp_path):
        from abc_mcdm.config import PathConfig
        paths = PathConfig(base_dir=tmp_path, output_name="out")
        paths.ensure_directories()
        for d in (paths.results_dir, paths.reports_dir, paths.logs_dir):
            assert d.is_dir()
            assert d.parent == tmp_path / "out"

    def test_database_url_default(self, monkeypatch, tmp_path):
        from abc_mcdm.config import Config, PathConfig, DATABASE_URL_ENV
        monkeypatch.delenv(DATABASE_URL_ENV, raising=False)
        config = Config(paths=PathConfig(base_dir=tmp_path))
        assert config.database_url == f"sqlite:///{tmp_path / 'outputs' / 'abc_mcdm.db'}"

    def test_database_url_from_env(self, monkeypatch):
        from abc_mcdm.config import Config, DATABASE_URL_ENV
        monkeypatch.setenv(DATABASE_URL_ENV, "postgresql://localhost/abc")
        assert Config().database_url == "postgresql://localhost/abc"

    def test_save_and_summary(self, test_config, tmp_path):
        path = tmp_path / "config.json"
        test_config.save(path)
        with open(path) as f:
            data = json.load(f)
        assert data["thresholds"] == {"a": 20.0, "b": 50.0}
        assert data["paths"]["base_dir"] == str(tmp_path)
        assert "Class A: top 20%" in test_config.summary()

    def test_global_config(self):
        from abc_mcdm.config import Config, get_config, set_config, reset_config
        custom = Config()
        custom.sample.n_items = 5
        set_config(custom)
        assert get_config() is custom
        reset_config()
        assert get_config().sample.n_items == 700
