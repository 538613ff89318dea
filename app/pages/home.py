"""Landing page with market snapshots and the user's invested split."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import card
from config import Settings
from core import InvoiceApiClient, SessionContext, TransportError
from core.formatting import format_currency
from core.summary_service import prepare_home_data
from visualization import build_invested_chart

logger = logging.getLogger(__name__)


def _load_records(context: SessionContext, client: InvoiceApiClient) -> list[dict]:
    if context.user is None:
        return []
    try:
        return client.list_invoices(context.user.id)
    except TransportError as exc:
        logger.info("Home page invoices unavailable: %s", exc)
        return []


def _render_snapshots() -> None:
    gold_col, silver_col, pane_col = st.columns(3, gap="medium")
    with gold_col:
        with card("Gold performance snapshot"):
            st.markdown(
                "Over the last five years, gold has delivered around "
                "<span class='aura-stat'>125%+</span> returns in USD, and about "
                "<span class='aura-stat'>33.15%</span> in the five years leading up to October 2025.",
                unsafe_allow_html=True,
            )
            st.caption(
                "Driven by its role as a hedge against currency debasement and a safe haven "
                "during economic and geopolitical tension."
            )
    with silver_col:
        with card("Silver performance snapshot"):
            st.markdown(
                "Silver has shown strong upside with approximately "
                "<span class='aura-stat'>114.40%</span> returns over five years in USD.",
                unsafe_allow_html=True,
            )
            st.caption(
                "Powered by both investor demand and industrial use in solar panels, "
                "5G networks and AI hardware."
            )
    with pane_col:
        with card("Gold & silver on a single pane"):
            st.markdown(
                "Aura brings these market stories down to your ledger level: every invoice, "
                "tax line and gram reconciled in one golden surface."
            )


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    """Render the home page."""

    st.caption("Aura Gold for finance teams")
    st.title("One golden surface for every invoice and rupee of revenue.")
    st.caption(
        "Upload invoices, enter bespoke documents manually, and monitor gold and silver "
        "exposure and profit from a single Aura workspace."
    )

    _render_snapshots()

    home = prepare_home_data(_load_records(context, client))
    with card("Your invested picture"):
        chart_col, totals_col = st.columns([2, 1])
        with chart_col:
            if home["invested_share"]:
                st.plotly_chart(
                    build_invested_chart(home["invested_share"]),
                    use_container_width=True,
                    key="home-invested-donut",
                )
            else:
                st.info("No gold/silver invoices yet.")
        with totals_col:
            st.metric("Gold invested", format_currency(home["invested"]["gold"]))
            st.metric("Silver invested", format_currency(home["invested"]["silver"]))
