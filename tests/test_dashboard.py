#!/usr/bin/env python3
"""Tests for dashboard summary."""

import pytest

from parking import Vehicle, summarize


class TestSummarize:
    """Tests for summarize."""

    def test_empty(self):
        summary = summarize([])
        assert summary.total == 0
        assert summary.total_charge == 0
        assert summary.average_charge == 0
        assert summary.count_by_type == {"car": 0, "bike": 0, "truck": 0}

    def test_one_of_each_type(self):
        """car 2h + bike 1h + truck 0.5h."""
        records = [
            Vehicle.create(1, "C1", "car", 2.0),
            Vehicle.create(2, "B1", "bike", 1.0),
            Vehicle.create(3, "T1", "truck", 0.5),
        ]
        summary = summarize(records)
        assert summary.total == 3
        assert summary.total_charge == pytest.approx(6.5)
        assert summary.average_charge == pytest.approx(2.1667, abs=1e-3)
        assert summary.count_by_type == {"car": 1, "bike": 1, "truck": 1}

    def test_type_match_is_case_insensitive(self):
        records = [
            Vehicle.create(1, "A", "CAR", 1.0),
            Vehicle.create(2, "B", "Car", 1.0),
        ]
        assert summarize(records).count_by_type["car"] == 2

    def test_unknown_type_counted_only_in_total(self):
        records = [
            Vehicle.create(1, "A", "car", 1.0),
            Vehicle.create(2, "B", "scooter", 1.0),
        ]
        summary = summarize(records)
        assert summary.total == 2
        assert summary.total_charge == pytest.approx(4.0)
        assert sum(summary.count_by_type.values()) == 1

    def test_uses_stored_charge(self):
        """Charges come from the records, not from recomputation."""
        summary = summarize([Vehicle(1, "A", "car", 1.0, 10.0)])
        assert summary.total_charge == 10.0
