"""End-to-end tests for dashboard assembly from raw API payloads."""

from __future__ import annotations

import pandas as pd
import pytest

from core.models import FilterCriteria, Holdings
from core.summary_service import prepare_dashboard_data, prepare_home_data


def test_prepare_dashboard_data_basic(sample_invoices):
    data = prepare_dashboard_data(
        sample_invoices,
        FilterCriteria(),
        Holdings(gold_grams="1", gold_rate="3500"),
        now=pd.Timestamp("2024-02-15"),
    )

    assert data["kpi"]["count"] == 5
    assert data["invested"] == {"gold": 3000.0, "silver": 500.0}
    assert data["profits"]["gold"] == pytest.approx(500.0)
    assert data["profits"]["silver"] == 0.0
    assert [bucket["month"] for bucket in data["monthly"]] == ["2024-01", "2024-02"]
    assert len(data["gst_rows"]) == 5


def test_filters_flow_into_every_view(sample_invoices):
    data = prepare_dashboard_data(
        sample_invoices,
        FilterCriteria(end_date="2024-01-20", metal_filter="SILVER"),
        now=pd.Timestamp("2024-02-15"),
    )

    assert [record["id"] for record in data["filtered_records"]] == [2]
    assert data["kpi"]["total_spend"] == pytest.approx(515.0)
    assert data["metal_distribution"] == [{"name": "SILVER", "value": 1}]
    assert data["invested"] == {"gold": 0.0, "silver": 500.0}


@pytest.mark.parametrize("payload", [None, {"error": "boom"}, "[]", 42])
def test_non_list_payload_is_empty(payload):
    data = prepare_dashboard_data(payload)

    assert data["kpi"] == {"total_spend": 0.0, "gst_paid": 0.0, "count": 0, "avg_invoice": 0.0}
    assert data["monthly"] == []
    assert data["daily"] == []
    assert data["metal_distribution"] == []
    assert data["gst_rows"] == []
    assert data["profits"] == {"gold": 0.0, "silver": 0.0}


def test_malformed_records_never_raise():
    records = [
        {"id": 1, "invoiceDate": 12345, "metalType": 7, "amountWithoutGst": "x", "totalAmount": {}},
        {"id": 2, "invoiceDate": "", "metalType": "", "gstAmount": "nan"},
        "not a record",
    ]

    data = prepare_dashboard_data(records)

    assert data["kpi"]["count"] == 2
    assert data["kpi"]["total_spend"] == 0.0
    assert {row["name"] for row in data["metal_distribution"]} == {"7", "UNKNOWN"}


def test_prepare_home_data(sample_invoices):
    home = prepare_home_data(sample_invoices)

    assert home["invested"] == {"gold": 3000.0, "silver": 500.0}
    assert [row["key"] for row in home["invested_share"]] == ["GOLD", "SILVER"]
