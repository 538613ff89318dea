"""Invoice upload page backed by server-side extraction."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import card
from config import Settings
from core import InvoiceApiClient, SessionContext, TransportError
from core.formatting import format_cell

logger = logging.getLogger(__name__)

RESULT_FIELDS: tuple[tuple[str, str], ...] = (
    ("Date", "invoiceDate"),
    ("Metal type", "metalType"),
    ("Amount without GST", "amountWithoutGst"),
    ("GST amount", "gstAmount"),
    ("Total amount", "totalAmount"),
)


def _render_result(parsed: dict) -> None:
    with card("Extracted invoice details"):
        lines = [f"- **{label}:** {format_cell(parsed.get(key))}" for label, key in RESULT_FIELDS]
        if parsed.get("csvPath"):
            lines.append(f"- **CSV path:** {parsed['csvPath']}")
        st.markdown("\n".join(lines))


def render_page(context: SessionContext, client: InvoiceApiClient, settings: Settings) -> None:
    st.title("Upload invoices")
    st.caption(
        "Drop PDFs, images or CSVs into an Aura-grade ingestion pipeline with OCR, "
        "classification and instant policy validation."
    )

    with card("Upload"):
        uploaded = st.file_uploader("Drag & drop files here or click to browse", key="invoice-upload")
        st.markdown(
            "- Automatic vendor and tax detection\n"
            "- Live duplicate and anomaly checks\n"
            "- Exports to your downstream ledger in one click"
        )
        process = st.button("Process batch", type="primary")

    if not process:
        return

    if uploaded is None:
        st.error("Select at least one file to process.")
        return

    user_id = context.user.id if context.user is not None else None
    with st.spinner("Processing invoice…"):
        try:
            parsed = client.upload_invoice(
                uploaded.name,
                uploaded.getvalue(),
                user_id=user_id,
                content_type=uploaded.type,
            )
        except TransportError:
            logger.exception("Invoice upload failed")
            st.error("Upload failed. Check server logs and try again.")
            return

    st.success("Invoice processed successfully.")
    if parsed:
        _render_result(parsed)
