"""Tests for rupee and table-cell formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest

from core.formatting import format_cell, format_currency, group_indian_digits, profit_tone


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, "₹0.00"),
        (999, "₹999.00"),
        (1000, "₹1,000.00"),
        (60000, "₹60,000.00"),
        (147500.5, "₹1,47,500.50"),
        (12345678.9, "₹1,23,45,678.90"),
        (-12500, "-₹12,500.00"),
        ("2500", "₹2,500.00"),
        (Decimal("10.5"), "₹10.50"),
    ],
)
def test_format_currency_en_in(value, expected):
    assert format_currency(value) == expected


def test_format_currency_none_is_zero_fallback():
    assert format_currency(None) == "₹0"


def test_format_currency_falls_back_to_raw_string():
    assert format_currency("n/a") == "n/a"
    assert format_currency([1, 2]) == "[1, 2]"


def test_group_indian_digits():
    assert group_indian_digits("1") == "1"
    assert group_indian_digits("123456") == "1,23,456"
    assert group_indian_digits("1234567") == "12,34,567"


def test_format_cell_placeholder():
    assert format_cell(None) == "—"
    assert format_cell("") == "—"
    assert format_cell(0) == "0"
    assert format_cell("GOLD24") == "GOLD24"


def test_profit_tone():
    assert profit_tone(10.0) == "positive"
    assert profit_tone(-1.0) == "negative"
    assert profit_tone(0.0) == ""
