"""Tests for the dashboard date and metal filters."""

from __future__ import annotations

from datetime import date

import pytest

from analytics.filters import filter_invoices
from core.models import FilterCriteria


def _ids(records):
    return [record["id"] for record in records]


def test_no_criteria_keeps_everything_in_order(sample_invoices):
    assert _ids(filter_invoices(sample_invoices, FilterCriteria())) == [1, 2, 3, 4, 5]
    assert _ids(filter_invoices(sample_invoices)) == [1, 2, 3, 4, 5]


def test_end_date_includes_the_whole_day():
    records = [
        {"id": "a", "invoiceDate": "2024-01-20"},
        {"id": "b", "invoiceDate": "2024-01-20T23:59:59"},
        {"id": "c", "invoiceDate": "2024-01-21"},
    ]

    filtered = filter_invoices(records, FilterCriteria(end_date="2024-01-20"))

    assert _ids(filtered) == ["a", "b"]


def test_start_date_is_inclusive_and_drops_undated(sample_invoices):
    filtered = filter_invoices(sample_invoices, FilterCriteria(start_date=date(2024, 1, 20)))

    assert _ids(filtered) == [2, 3]


def test_date_range_accepts_date_objects(sample_invoices):
    criteria = FilterCriteria(start_date=date(2024, 1, 1), end_date=date(2024, 1, 31))

    assert _ids(filter_invoices(sample_invoices, criteria)) == [1, 2]


def test_metal_filter_matches_prefix_case_insensitively(sample_invoices):
    gold = filter_invoices(sample_invoices, FilterCriteria(metal_filter="GOLD"))
    silver = filter_invoices(sample_invoices, FilterCriteria(metal_filter="silver"))

    assert _ids(gold) == [1, 3]
    assert _ids(silver) == [2]


def test_unparseable_bound_is_ignored(sample_invoices):
    assert len(filter_invoices(sample_invoices, FilterCriteria(start_date="soon"))) == 5


def test_filtering_is_idempotent(sample_invoices):
    criteria = FilterCriteria(start_date="2024-01-01", end_date="2024-02-28", metal_filter="GOLD")

    once = filter_invoices(sample_invoices, criteria)
    twice = filter_invoices(once, criteria)

    assert twice == once


def test_unknown_metal_filter_is_rejected():
    with pytest.raises(ValueError):
        FilterCriteria(metal_filter="PLATINUM")
