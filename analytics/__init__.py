"""Filtering, aggregation and valuation helpers for invoice analytics."""

from analytics.aggregation import (
    DAILY_WINDOW_DAYS,
    build_daily_totals,
    build_gst_rows,
    build_invested_share,
    build_invoice_frame,
    build_metal_distribution,
    build_monthly_totals,
    compute_invested_totals,
    compute_kpis,
)
from analytics.filters import filter_invoices, resolve_date_bounds
from analytics.valuation import compute_metal_profit, compute_profits

__all__ = [
    "DAILY_WINDOW_DAYS",
    "build_daily_totals",
    "build_gst_rows",
    "build_invested_share",
    "build_invoice_frame",
    "build_metal_distribution",
    "build_monthly_totals",
    "compute_invested_totals",
    "compute_kpis",
    "filter_invoices",
    "resolve_date_bounds",
    "compute_metal_profit",
    "compute_profits",
]
