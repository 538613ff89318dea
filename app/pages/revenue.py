"""Revenue dashboard: filters, live KPIs, profit estimate and charts."""

from __future__ import annotations

import streamlit as st

from app.layout import card
from config import Settings
from core import FilterCriteria, Holdings, InvoiceApiClient, InvoicePoller, RecordFeed, SessionContext
from core.formatting import format_currency, profit_tone
from core.models import DashboardData, Profits
from core.summary_service import prepare_dashboard_data
from visualization import (
    build_daily_chart,
    build_gst_chart,
    build_metal_chart,
    build_monthly_chart,
)

METAL_FILTER_LABELS = {"ALL": "All metals", "GOLD": "Gold", "SILVER": "Silver"}


def _status_chip(feed: RecordFeed) -> str | None:
    if feed.status in ("idle", "loading"):
        return "Loading…"
    if feed.status == "error":
        return f"Error: {feed.error}"
    if feed.status == "success":
        return "Live (auto-refreshing)"
    return None


def _render_filters(context: SessionContext) -> None:
    start_col, end_col, metal_col = st.columns(3)
    start_date = start_col.date_input("Start date", value=None, key="revenue_start")
    end_date = end_col.date_input("End date", value=None, key="revenue_end")
    metal_filter = metal_col.selectbox(
        "Metal type",
        tuple(METAL_FILTER_LABELS),
        key="revenue_metal",
        format_func=METAL_FILTER_LABELS.get,
    )
    context.criteria = FilterCriteria(start_date=start_date, end_date=end_date, metal_filter=metal_filter)


def _render_holdings(context: SessionContext) -> None:
    st.caption("Enter how many grams you hold and today's rate to see an approximate profit.")
    gold_col, silver_col = st.columns(2)
    with gold_col:
        st.markdown("**GOLD24**")
        gold_grams = st.text_input("Quantity you hold (g)", key="gold_grams", placeholder="e.g. 50")
        gold_rate = st.text_input("Current rate (₹ / g)", key="gold_rate", placeholder="e.g. 7200")
    with silver_col:
        st.markdown("**SILVER24**")
        silver_grams = st.text_input("Quantity you hold (g)", key="silver_grams", placeholder="e.g. 500")
        silver_rate = st.text_input("Current rate (₹ / g)", key="silver_rate", placeholder="e.g. 95")
    context.holdings = Holdings(
        gold_grams=gold_grams,
        gold_rate=gold_rate,
        silver_grams=silver_grams,
        silver_rate=silver_rate,
    )


def _render_profit_summary(profits: Profits) -> None:
    gold_col, silver_col = st.columns(2)
    for column, label, value in (
        (gold_col, "Gold profit", profits["gold"]),
        (silver_col, "Silver profit", profits["silver"]),
    ):
        tone = profit_tone(value)
        css_class = f"aura-value--{tone}" if tone else ""
        column.caption(label)
        column.markdown(
            f"<h3 class='{css_class}'>{format_currency(value)}</h3>",
            unsafe_allow_html=True,
        )


def _render_kpis(data: DashboardData) -> None:
    kpi = data["kpi"]
    columns = st.columns(4)
    columns[0].metric("Total spend", format_currency(kpi["total_spend"]))
    columns[1].metric("GST paid", format_currency(kpi["gst_paid"]))
    columns[2].metric("Number of invoices", kpi["count"])
    columns[3].metric("Average invoice value", format_currency(kpi["avg_invoice"]))


def _render_charts(data: DashboardData) -> None:
    top_left, top_right = st.columns(2, gap="medium")
    with top_left:
        with card("Monthly spending"):
            st.plotly_chart(build_monthly_chart(data["monthly"]), use_container_width=True, key="monthly")
    with top_right:
        with card("Metal type distribution"):
            st.plotly_chart(
                build_metal_chart(data["metal_distribution"]), use_container_width=True, key="metals"
            )

    bottom_left, bottom_right = st.columns(2, gap="medium")
    with bottom_left:
        with card("Daily spend (last 30 days)"):
            st.plotly_chart(build_daily_chart(data["daily"]), use_container_width=True, key="daily")
    with bottom_right:
        with card("GST analysis"):
            st.plotly_chart(build_gst_chart(data["gst_rows"]), use_container_width=True, key="gst")


def _render_live_section(context: SessionContext, poller: InvoicePoller) -> None:
    feed = poller.poll_if_due()
    chip = _status_chip(feed)
    if feed.status == "error":
        st.error(chip)
    elif chip:
        st.caption(chip)

    data = prepare_dashboard_data(list(feed.records), context.criteria, context.holdings)

    with card("Gold & silver profit"):
        _render_profit_summary(data["profits"])
    _render_kpis(data)
    _render_charts(data)


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    """Render the dashboard; the live section re-runs on the poll interval."""

    st.title("Revenue dashboard")
    st.caption("Monitor realized revenue, tax, and invoice volume from your Aura Gold workspace.")

    poller = context.invoice_poller(client, settings.poll_interval_seconds)
    poller.activate()

    with card("Filters"):
        _render_filters(context)
    with card("Holdings"):
        _render_holdings(context)

    live_section = st.fragment(run_every=poller.interval_seconds)(_render_live_section)
    live_section(context, poller)
