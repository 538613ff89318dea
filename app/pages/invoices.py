"""Invoice list with per-row delete."""

from __future__ import annotations

import logging
from typing import Any, Optional

import streamlit as st

from app.layout import card
from config import Settings
from core import InvoiceApiClient, SessionContext, TransportError
from core.formatting import format_cell
from core.invoices import remove_invoice, sort_invoices_by_date

logger = logging.getLogger(__name__)

INVOICE_LIST_KEY = "invoice_list"
PENDING_DELETE_KEY = "invoice_pending_delete"

COLUMNS: tuple[tuple[str, str], ...] = (
    ("Date", "invoiceDate"),
    ("Metal type", "metalType"),
    ("Amount without GST", "amountWithoutGst"),
    ("GST amount", "gstAmount"),
    ("Total amount", "totalAmount"),
)
COLUMN_WIDTHS = (1.2, 1, 1.3, 1, 1.1, 0.8)


def _load_invoices(context: SessionContext, client: InvoiceApiClient) -> Optional[list[dict[str, Any]]]:
    if context.user is None or not context.user.id:
        return []
    try:
        records = client.list_invoices(context.user.id)
    except TransportError:
        return None
    return sort_invoices_by_date(records)


def _render_delete_prompt(client: InvoiceApiClient, records: list[dict[str, Any]]) -> None:
    pending = st.session_state.get(PENDING_DELETE_KEY)
    if pending is None:
        return

    st.warning("Delete this invoice?")
    confirm_col, cancel_col, _ = st.columns([1, 1, 4])
    if confirm_col.button("Delete", type="primary", key="confirm-delete"):
        st.session_state.pop(PENDING_DELETE_KEY, None)
        try:
            client.delete_invoice(pending)
        except TransportError:
            logger.error("Failed to delete invoice %s", pending)
            st.error("Unable to delete invoice. Please try again.")
            return
        st.session_state[INVOICE_LIST_KEY] = remove_invoice(records, pending)
        st.rerun()
    if cancel_col.button("Cancel", key="cancel-delete"):
        st.session_state.pop(PENDING_DELETE_KEY, None)
        st.rerun()


def _render_table(records: list[dict[str, Any]]) -> None:
    header = st.columns(COLUMN_WIDTHS)
    for column, (label, _) in zip(header, COLUMNS):
        column.markdown(f"**{label}**")

    for record in records:
        cells = st.columns(COLUMN_WIDTHS)
        for column, (_, key) in zip(cells, COLUMNS):
            column.write(format_cell(record.get(key)))
        if cells[-1].button("Delete", key=f"delete-{record.get('id')}"):
            st.session_state[PENDING_DELETE_KEY] = record.get("id")
            st.rerun()


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    st.title("Invoices")
    st.caption("Review and manage all invoices captured in your Aura Gold workspace.")

    refresh = st.button("Refresh")
    if refresh or INVOICE_LIST_KEY not in st.session_state:
        with st.spinner("Loading invoices…"):
            loaded = _load_invoices(context, client)
        if loaded is None:
            st.error("Unable to load invoices. Please try again.")
            return
        st.session_state[INVOICE_LIST_KEY] = loaded

    records: list[dict[str, Any]] = st.session_state[INVOICE_LIST_KEY]
    with card("All invoices", suffix=f"{len(records)} total"):
        if not records:
            st.info("No invoices found yet.")
            return
        _render_delete_prompt(client, records)
        _render_table(records)
