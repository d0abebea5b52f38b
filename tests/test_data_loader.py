# -*- coding: utf-8 -*-
"""Tests for CSV loading, lenient parsing and the sample generator."""

import pytest
import pandas as pd


class TestFieldParsing:

    def test_parse_float(self):
        from abc_mcdm.data_loader import parse_float
        assert parse_float("12.5") == 12.5
        assert parse_float(" 3.5kg") == 3.5
        assert parse_float("-2e1") == -20.0
        assert parse_float(".5") == 0.5
        assert parse_float("abc") == 0.0
        assert parse_float("") == 0.0
        assert parse_float(None) == 0.0
        assert parse_float(7) == 7.0
        assert parse_float(float("nan")) == 0.0

    def test_parse_int(self):
        from abc_mcdm.data_loader import parse_int
        assert parse_int("12.7") == 12
        assert parse_int("  15 days") == 15
        assert parse_int("x15") == 0
        assert parse_int("") == 0
        assert parse_int(9.9) == 9
        assert parse_int(4) == 4

    def test_parse_row_defaults(self):
        from abc_mcdm.data_loader import parse_row
        record = parse_row({"Risk": "  ", "Average stock": "abc"}, id=3)
        assert record.id == 3
        assert record.risk == "Normal"
        assert record.demand_fluctuation == "Stable"
        assert record.consignment_stock == "No"
        assert record.unit_size == "Medium"
        assert record.average_stock == 0.0
        assert record.lead_time == 0


class TestCSVLoading:

    def test_sample_csv_round_trip(self, tmp_path, base_records):
        from abc_mcdm.data_loader import InventoryDataLoader, SAMPLE_CSV
        path = tmp_path / "inventory.csv"
        path.write_text(SAMPLE_CSV)

        records = InventoryDataLoader().load(path)
        assert records == base_records

    def test_unparsable_and_blank_cells(self, tmp_path):
        from abc_mcdm.data_loader import InventoryDataLoader, SAMPLE_CSV
        header = SAMPLE_CSV.splitlines()[0]
        path = tmp_path / "inventory.csv"
        path.write_text(header + "\n,,,abc,3.5,12.7,,\n")

        (record,) = InventoryDataLoader().load(path)
        assert record.risk == "Normal"
        assert record.demand_fluctuation == "Stable"
        assert record.average_stock == 0.0
        assert record.daily_usage == 0.0
        assert record.unit_cost == 3.5
        assert record.lead_time == 12
        assert record.consignment_stock == "No"
        assert record.unit_size == "Medium"

    def test_whitespace_and_blank_lines(self, tmp_path):
        from abc_mcdm.data_loader import InventoryDataLoader
        path = tmp_path / "inventory.csv"
        path.write_text(
            " Risk , Demand fluctuation ,Average stock,Daily usage,Unit cost,"
            "Lead time,Consignment stock,Unit size\n"
            " High , Increasing ,120,4.5,9.25,14, Yes , Small \n"
            "\n"
            "Low,Stable,80,1,2,7,No,Large\n"
        )
        records = InventoryDataLoader().load(path)
        assert len(records) == 2
        assert records[0].risk == "High"
        assert records[0].demand_fluctuation == "Increasing"
        assert records[0].consignment_stock == "Yes"
        assert records[0].unit_size == "Small"
        assert [r.id for r in records] == [1, 2]

    def test_missing_column_gets_default(self, tmp_path):
        from abc_mcdm.data_loader import InventoryDataLoader
        path = tmp_path / "inventory.csv"
        path.write_text("Risk,Average stock,Daily usage,Unit cost,Lead time\n"
                        "High,100,2,5,10\n")
        (record,) = InventoryDataLoader().load(path)
        assert record.risk == "High"
        assert record.unit_size == "Medium"
        assert record.consignment_stock == "No"

    def test_missing_file(self, tmp_path):
        from abc_mcdm.data_loader import InventoryDataLoader
        with pytest.raises(FileNotFoundError):
            InventoryDataLoader().load(tmp_path / "nope.csv")

    def test_no_inventory_columns(self):
        from abc_mcdm.data_loader import InventoryDataLoader
        with pytest.raises(ValueError):
            InventoryDataLoader().load_from_dataframe(pd.DataFrame({"foo": ["1"]}))

    def test_load_from_dataframe(self, base_frame):
        from abc_mcdm.data_loader import InventoryDataLoader
        records = InventoryDataLoader().load_from_dataframe(base_frame)
        assert len(records) == 10
        assert records[5].risk == "High"
        assert records[5].lead_time == 28


class TestSampleGenerator:

    def test_size_and_ids(self):
        from abc_mcdm.data_loader import generate_sample_inventory
        records = generate_sample_inventory()
        assert len(records) == 700
        assert [r.id for r in records[:3]] == [1, 2, 3]
        assert records[-1].id == 700

    def test_base_rows_first(self, base_records):
        from abc_mcdm.data_loader import generate_sample_inventory
        assert generate_sample_inventory(20)[:10] == base_records

    def test_short_batch(self):
        from abc_mcdm.data_loader import generate_sample_inventory
        assert len(generate_sample_inventory(4)) == 4

    def test_deterministic(self):
        from abc_mcdm.data_loader import generate_sample_inventory
        assert generate_sample_inventory(50) == generate_sample_inventory(50)
        assert generate_sample_inventory(50, seed=7) != generate_sample_inventory(50)

    def test_value_ranges(self):
        from abc_mcdm.data_loader import (
            generate_sample_inventory, RISK_OPTIONS, DEMAND_OPTIONS,
            CONSIGNMENT_OPTIONS, SIZE_OPTIONS,
        )
        for r in generate_sample_inventory(300)[10:]:
            assert 50 <= r.average_stock < 250
            assert 0 <= r.daily_usage < 10
            assert 1 <= r.unit_cost < 16
            assert 5 <= r.lead_time <= 29
            assert r.risk in RISK_OPTIONS
            assert r.demand_fluctuation in DEMAND_OPTIONS
            assert r.consignment_stock in CONSIGNMENT_OPTIONS
            assert r.unit_size in SIZE_OPTIONS

    def test_first_generated_item(self):
        from abc_mcdm.data_loader import generate_sample_inventory
        # First draw from seed 42 is 206659 / 233280
        item = generate_sample_inventory(11)[10]
        assert item.id == 11
        assert item.risk == "Low"

    def test_lcg_sequence(self):
        from abc_mcdm.data_loader import seeded_random
        random = seeded_random(42)
        first = random()
        assert first == ((42 * 9301 + 49297) % 233280) / 233280
        assert 0 <= random() < 1
