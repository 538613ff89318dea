"""Reductions behind the revenue dashboard KPIs and charts."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from core.models import (
    DailyBucket,
    GstRow,
    InvestedShare,
    InvestedTotals,
    KpiSummary,
    MetalSlice,
    MonthlyBucket,
)
from core.parsing import metal_label, normalize_metal, parse_amount, parse_invoice_date

__all__ = [
    "DAILY_WINDOW_DAYS",
    "FRAME_COLUMNS",
    "build_daily_totals",
    "build_gst_rows",
    "build_invested_share",
    "build_invoice_frame",
    "build_metal_distribution",
    "build_monthly_totals",
    "compute_invested_totals",
    "compute_kpis",
]

DAILY_WINDOW_DAYS = 30

FRAME_COLUMNS = [
    "id",
    "invoice_date",
    "date",
    "metal_label",
    "metal",
    "amount_without_gst",
    "gst_amount",
    "total_amount",
]


def build_invoice_frame(records: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Return one normalised row per record.

    Dates and amounts that cannot be read become ``NaT``/``NaN`` so every
    reduction below can simply skip them.
    """

    rows = [record for record in records if isinstance(record, Mapping)]
    raw_dates = [row.get("invoiceDate") for row in rows]

    frame = pd.DataFrame(
        {
            "id": pd.Series([row.get("id") for row in rows], dtype="object"),
            "invoice_date": pd.Series(
                ["" if value is None else str(value) for value in raw_dates], dtype="object"
            ),
            "date": pd.to_datetime(
                pd.Series([parse_invoice_date(value) for value in raw_dates], dtype="object"),
                errors="coerce",
            ),
            "metal_label": pd.Series(
                [metal_label(row.get("metalType")) for row in rows], dtype="object"
            ),
            "metal": pd.Series(
                [normalize_metal(row.get("metalType")) for row in rows], dtype="object"
            ),
        }
    )
    for column, key in (
        ("amount_without_gst", "amountWithoutGst"),
        ("gst_amount", "gstAmount"),
        ("total_amount", "totalAmount"),
    ):
        frame[column] = pd.Series([parse_amount(row.get(key)) for row in rows], dtype="float64")
    return frame[FRAME_COLUMNS]


def compute_kpis(frame: pd.DataFrame) -> KpiSummary:
    count = int(len(frame))
    if count == 0:
        return {"total_spend": 0.0, "gst_paid": 0.0, "count": 0, "avg_invoice": 0.0}

    total_spend = float(frame["total_amount"].sum())
    gst_paid = float(frame["gst_amount"].sum())
    return {
        "total_spend": total_spend,
        "gst_paid": gst_paid,
        "count": count,
        "avg_invoice": total_spend / count,
    }


def _bucket_totals(frame: pd.DataFrame, date_format: str) -> pd.Series:
    dated = frame.dropna(subset=["date", "total_amount"])
    if dated.empty:
        return pd.Series(dtype=float)
    keys = dated["date"].dt.strftime(date_format)
    return dated.groupby(keys)["total_amount"].sum().sort_index()


def build_monthly_totals(frame: pd.DataFrame) -> list[MonthlyBucket]:
    totals = _bucket_totals(frame, "%Y-%m")
    return [{"month": str(month), "total": float(total)} for month, total in totals.items()]


def build_daily_totals(
    frame: pd.DataFrame,
    now: Optional[pd.Timestamp] = None,
    window_days: int = DAILY_WINDOW_DAYS,
) -> list[DailyBucket]:
    """Return per-day totals for invoices dated within ``window_days`` of ``now``, inclusive."""

    now = pd.Timestamp.now() if now is None else pd.Timestamp(now)
    if now.tzinfo is not None:
        now = now.tz_localize(None)
    # whole calendar days: the day ``window_days`` back counts from midnight
    cutoff = (now - pd.Timedelta(days=window_days)).normalize()

    recent = frame[frame["date"].notna() & (frame["date"] >= cutoff)]
    totals = _bucket_totals(recent, "%Y-%m-%d")
    return [{"date": str(day), "total": float(total)} for day, total in totals.items()]


def build_metal_distribution(frame: pd.DataFrame) -> list[MetalSlice]:
    if frame.empty:
        return []
    counts = frame.groupby("metal", sort=False).size()
    return [{"name": str(name), "value": int(value)} for name, value in counts.items()]


def build_gst_rows(frame: pd.DataFrame) -> list[GstRow]:
    amounts = frame[["amount_without_gst", "gst_amount"]].fillna(0.0)
    rows: list[GstRow] = []
    for record_id, invoice_date, base, gst in zip(
        frame["id"],
        frame["invoice_date"],
        amounts["amount_without_gst"],
        amounts["gst_amount"],
    ):
        rows.append(
            {
                "id": record_id,
                "invoice_date": invoice_date,
                "amount_without_gst": float(base),
                "gst_amount": float(gst),
            }
        )
    return rows


def compute_invested_totals(frame: pd.DataFrame) -> InvestedTotals:
    """Sum pre-tax amounts per metal, skipping rows without a label or amount."""

    eligible = frame[frame["metal_label"].notna() & frame["amount_without_gst"].notna()]
    totals = eligible.groupby("metal")["amount_without_gst"].sum()
    return {
        "gold": float(totals.get("GOLD", 0.0)),
        "silver": float(totals.get("SILVER", 0.0)),
    }


def build_invested_share(invested: InvestedTotals) -> list[InvestedShare]:
    """Return donut rows for metals with a positive invested total."""

    slices = (("GOLD", "Gold", invested["gold"]), ("SILVER", "Silver", invested["silver"]))
    return [
        {"key": key, "name": name, "value": float(value)}
        for key, name, value in slices
        if value > 0
    ]
