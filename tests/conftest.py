"""Shared fixtures for the Aura Gold test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)


@pytest.fixture()
def sample_invoices() -> list[dict]:
    return [
        {
            "id": 1,
            "invoiceDate": "2024-01-05",
            "metalType": "GOLD24",
            "amountWithoutGst": 1000,
            "gstAmount": 30,
            "totalAmount": 1030,
        },
        {
            "id": 2,
            "invoiceDate": "2024-01-20",
            "metalType": "SILVER24",
            "amountWithoutGst": "500",
            "gstAmount": "15",
            "totalAmount": "515",
        },
        {
            "id": 3,
            "invoiceDate": "2024-02-11",
            "metalType": "gold22",
            "amountWithoutGst": 2000,
            "gstAmount": 60,
            "totalAmount": 2060,
        },
        {
            "id": 4,
            "invoiceDate": None,
            "metalType": "PLATINUM",
            "amountWithoutGst": 700,
            "gstAmount": None,
            "totalAmount": 700,
        },
        {
            "id": 5,
            "invoiceDate": "not a date",
            "metalType": None,
            "amountWithoutGst": None,
            "gstAmount": 12,
            "totalAmount": "abc",
        },
    ]
