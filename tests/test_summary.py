# -*- coding: utf-8 -*-
"""Tests for result summaries."""

import math

import pytest


class TestSummary:

    @pytest.fixture
    def result(self, sample_records):
        from abc_mcdm import process
        return process(sample_records)

    def test_distribution(self, result):
        from abc_mcdm.analysis import abc_distribution
        assert abc_distribution(result.scored) == {"A": 20, "B": 30, "C": 50}
        assert sum(abc_distribution(result.scored, fuzzy=True).values()) == 100

    def test_summarize(self, result):
        from abc_mcdm.analysis import summarize
        summary = summarize(result)
        assert summary.total_items == 100
        assert 0 <= summary.class_match_pct <= 100
        assert -1 <= summary.rank_correlation <= 1
        assert summary.top_crisp_item == result.scored[0].id
        assert summary.thresholds == {"A": 20.0, "B": 50.0}
        name, weight = summary.top_crisp_criterion
        assert weight == max(result.crisp_weights.values())

    def test_to_dict_is_json_ready(self, result):
        import json
        from abc_mcdm.analysis import summarize
        data = summarize(result).to_dict()
        assert json.loads(json.dumps(data)) == data

    def test_empty_result(self):
        from abc_mcdm import process
        from abc_mcdm.analysis import summarize
        summary = summarize(process([]))
        assert summary.total_items == 0
        assert summary.class_match_pct == 0.0
        assert math.isnan(summary.rank_correlation)
        assert summary.top_crisp_item is None
        assert summary.top_crisp_criterion is None
        assert summary.to_dict()["rank_correlation"] is None

    def test_top_weight_criterion(self):
        from abc_mcdm.analysis import top_weight_criterion
        assert top_weight_criterion({"Demand_Agg": 0.6, "Unit_cost": 0.4}) == ("Demand", 0.6)
        assert top_weight_criterion({"Usage": 0.7, "Stock": 0.3}) == ("Usage", 0.7)
        with pytest.raises(ValueError):
            top_weight_criterion({})

    def test_rank_agreement_constant_scores(self):
        from abc_mcdm import process
        from abc_mcdm.analysis import rank_agreement
        from conftest import make_item
        result = process([make_item(), make_item()])
        assert math.isnan(rank_agreement(result.scored))
