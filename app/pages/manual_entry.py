"""Manual invoice entry form."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import card
from config import Settings
from core import InvoiceApiClient, SessionContext, TransportError
from core.invoices import MANUAL_METAL_TYPES, build_manual_invoice_payload, compute_total_amount

logger = logging.getLogger(__name__)

FIELD_KEYS = ("manual_metal", "manual_date", "manual_base", "manual_gst")
STATUS_KEY = "manual_status"


def _reset_fields() -> None:
    st.session_state["manual_metal"] = ""
    st.session_state["manual_date"] = None
    st.session_state["manual_base"] = ""
    st.session_state["manual_gst"] = ""


def _save_invoice(context: SessionContext, client: InvoiceApiClient) -> None:
    state = st.session_state
    total = compute_total_amount(state.get("manual_base"), state.get("manual_gst"))
    payload = build_manual_invoice_payload(
        user_id=context.user.id if context.user is not None else None,
        invoice_date=state.get("manual_date"),
        metal_type=state.get("manual_metal"),
        amount_without_gst=state.get("manual_base"),
        gst_amount=state.get("manual_gst"),
        total_amount=total,
    )
    try:
        client.create_manual_invoice(payload)
    except TransportError:
        logger.exception("Manual invoice save failed")
        state[STATUS_KEY] = "error"
        return

    state[STATUS_KEY] = "success"
    _reset_fields()


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    """Render the manual entry form; the total is derived from its two parts."""

    st.title("Manual invoice entry")
    st.caption(
        "Capture bespoke documents, adjustments and off-cycle invoices in a guided Aura Gold form."
    )

    for key in FIELD_KEYS:
        st.session_state.setdefault(key, None if key == "manual_date" else "")

    with card("Invoice"):
        left, right = st.columns(2)
        left.selectbox(
            "Metal type",
            ("",) + MANUAL_METAL_TYPES,
            key="manual_metal",
            format_func=lambda value: value or "Select metal type",
        )
        right.date_input("Invoice date", key="manual_date")

        base_col, gst_col = st.columns(2)
        base_col.text_input("Amount without GST (₹)", key="manual_base", placeholder="125000")
        gst_col.text_input("GST amount (₹)", key="manual_gst", placeholder="22500")

        total = compute_total_amount(
            st.session_state.get("manual_base"), st.session_state.get("manual_gst")
        )
        st.text_input("Total amount (₹)", value=total, placeholder="147500", disabled=True)

        st.button(
            "Save invoice",
            type="primary",
            on_click=_save_invoice,
            args=(context, client),
        )

    status = st.session_state.pop(STATUS_KEY, None)
    if status == "success":
        st.success("Invoice saved successfully.")
    elif status == "error":
        st.error("Something went wrong. Please try again.")
