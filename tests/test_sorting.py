#!/usr/bin/env python3
"""Tests for sorting algorithms."""

import pytest

from parking import Vehicle, bubble_sort, insertion_sort, selection_sort


def by_id(v):
    return v.id


@pytest.fixture
def records():
    return [
        Vehicle(4, "D", "car", 3.0, 6.0),
        Vehicle(2, "B", "bike", 1.0, 1.0),
        Vehicle(5, "E", "truck", 0.5, 1.5),
        Vehicle(1, "A", "car", 2.0, 4.0),
        Vehicle(3, "C", "bike", 1.0, 1.0),
    ]


class TestBubbleSort:
    """Tests for bubble_sort."""

    def test_sorts_ascending(self, records):
        bubble_sort(records, key=by_id)
        assert [v.id for v in records] == [1, 2, 3, 4, 5]

    def test_already_sorted(self, records):
        records.sort(key=by_id)
        bubble_sort(records, key=by_id)
        assert [v.id for v in records] == [1, 2, 3, 4, 5]

    def test_reverse_order(self, records):
        records.sort(key=by_id, reverse=True)
        bubble_sort(records, key=by_id)
        assert [v.id for v in records] == [1, 2, 3, 4, 5]

    def test_empty_and_single(self):
        empty = []
        bubble_sort(empty, key=by_id)
        assert empty == []
        one = [Vehicle(1, "A", "car", 1.0, 2.0)]
        bubble_sort(one, key=by_id)
        assert [v.id for v in one] == [1]


class TestSelectionSort:
    """Tests for selection_sort."""

    def test_sorts_by_charge(self, records):
        selection_sort(records, key=lambda v: v.charge)
        charges = [v.charge for v in records]
        assert charges == sorted(charges)

    def test_ties_keep_first_encountered_first(self, records):
        """IDs 2 and 3 share a charge; 2 comes first in the input."""
        selection_sort(records, key=lambda v: v.charge)
        assert [v.id for v in records][:2] == [2, 3]

    def test_does_not_modify_records(self, records):
        before = set(records)
        selection_sort(records, key=lambda v: v.charge)
        assert set(records) == before


class TestInsertionSort:
    """Tests for insertion_sort."""

    def test_sorts_by_duration(self, records):
        insertion_sort(records, key=lambda v: v.duration_hours)
        assert [v.duration_hours for v in records] == [0.5, 1.0, 1.0, 2.0, 3.0]

    def test_stable_for_equal_durations(self, records):
        """IDs 2 and 3 share a duration and keep their input order."""
        insertion_sort(records, key=lambda v: v.duration_hours)
        assert [v.id for v in records] == [5, 2, 3, 1, 4]

    def test_reorders_the_given_list(self, records):
        same_list = records
        insertion_sort(records, key=by_id)
        assert same_list is records
        assert [v.id for v in records] == [1, 2, 3, 4, 5]

    def test_empty(self):
        empty = []
        insertion_sort(empty, key=by_id)
        assert empty == []
