"""Total parsing helpers for loosely typed invoice payloads."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable, Mapping, Optional

import numpy as np
import pandas as pd

__all__ = [
    "coerce_records",
    "metal_label",
    "normalize_metal",
    "parse_amount",
    "parse_invoice_date",
]

UNKNOWN_METAL = "UNKNOWN"
_METAL_PREFIXES: tuple[str, ...] = ("GOLD", "SILVER")
# relative keywords pandas would resolve against the clock
_DATE_KEYWORDS = frozenset({"now", "today"})


def parse_amount(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it cannot be read.

    Blank strings, booleans, non-numeric text, NaN and infinities are all
    treated as absent.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None

    if not np.isfinite(amount):
        return None
    return amount


def parse_invoice_date(value: Any) -> Optional[pd.Timestamp]:
    """Parse an invoice date into a naive timestamp, ``None`` if unreadable.

    Offsets are dropped rather than converted so the invoice keeps its own
    calendar day.
    """

    if value is None or isinstance(value, bool):
        return None

    try:
        if isinstance(value, (pd.Timestamp, date)):
            timestamp = pd.Timestamp(value)
        elif isinstance(value, str):
            text = value.strip()
            if not text or text.lower() in _DATE_KEYWORDS:
                return None
            timestamp = pd.to_datetime(text, errors="coerce")
        else:
            return None
    except (TypeError, ValueError, OverflowError):
        return None

    if timestamp is None or pd.isna(timestamp):
        return None
    if timestamp.tzinfo is not None:
        timestamp = timestamp.tz_localize(None)
    return timestamp


def metal_label(value: Any) -> Optional[str]:
    """Return the uppercased metal label, ``None`` when missing or blank."""

    if value is None:
        return None
    label = str(value).strip().upper()
    return label or None


def normalize_metal(value: Any) -> str:
    """Map a free-text metal label onto GOLD/SILVER or its uppercased self."""

    label = metal_label(value)
    if label is None:
        return UNKNOWN_METAL
    for prefix in _METAL_PREFIXES:
        if label.startswith(prefix):
            return prefix
    return label


def coerce_records(data: Any) -> list[dict[str, Any]]:
    """Return invoice records from an API payload.

    Anything that is not a list is treated as "no data"; entries that are not
    mappings are dropped.
    """

    if not isinstance(data, list):
        return []
    return [dict(item) for item in _mappings(data)]


def _mappings(items: Iterable[Any]) -> Iterable[Mapping[str, Any]]:
    for item in items:
        if isinstance(item, Mapping):
            yield item
