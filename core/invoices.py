"""Helpers behind the invoice list and manual entry pages."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from core.parsing import parse_amount, parse_invoice_date

__all__ = [
    "MANUAL_METAL_TYPES",
    "build_manual_invoice_payload",
    "compute_total_amount",
    "remove_invoice",
    "sort_invoices_by_date",
]

MANUAL_METAL_TYPES: tuple[str, ...] = ("SILVER24", "GOLD24")


def sort_invoices_by_date(records: Iterable[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Return records oldest first; missing or unreadable dates go last."""

    def sort_key(record: Mapping[str, Any]) -> tuple[int, Any]:
        parsed = parse_invoice_date(record.get("invoiceDate"))
        if parsed is None:
            return (1, 0)
        return (0, parsed.value)

    return [dict(record) for record in sorted(records, key=sort_key)]


def remove_invoice(records: Iterable[Mapping[str, Any]], invoice_id: Any) -> list[dict[str, Any]]:
    return [dict(record) for record in records if record.get("id") != invoice_id]


def compute_total_amount(amount_without_gst: Any, gst_amount: Any) -> str:
    """Return the auto-filled total for the manual form, blank until both parts parse."""

    base = parse_amount(amount_without_gst)
    gst = parse_amount(gst_amount)
    if base is None or gst is None:
        return ""
    return f"{base + gst:.2f}"


def build_manual_invoice_payload(
    *,
    user_id: Any,
    invoice_date: Any = None,
    metal_type: Optional[str] = None,
    amount_without_gst: Any = None,
    gst_amount: Any = None,
    total_amount: Any = None,
) -> dict[str, Any]:
    """Build the JSON body for ``POST /api/invoices/manual``."""

    if invoice_date is not None and not isinstance(invoice_date, str):
        invoice_date = invoice_date.isoformat()

    return {
        "userId": user_id,
        "invoiceDate": invoice_date or None,
        "metalType": metal_type or None,
        "amountWithoutGst": parse_amount(amount_without_gst),
        "gstAmount": parse_amount(gst_amount),
        "totalAmount": parse_amount(total_amount),
    }
