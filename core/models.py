"""Shared data model definitions for the Aura Gold dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, TypedDict, Union

DateInput = Union[str, date, None]

METAL_FILTERS: tuple[str, ...] = ("ALL", "GOLD", "SILVER")


class InvoiceRecord(TypedDict, total=False):
    id: Any
    invoiceDate: Optional[str]
    metalType: Optional[str]
    amountWithoutGst: Any
    gstAmount: Any
    totalAmount: Any


class KpiSummary(TypedDict):
    total_spend: float
    gst_paid: float
    count: int
    avg_invoice: float


class MonthlyBucket(TypedDict):
    month: str
    total: float


class DailyBucket(TypedDict):
    date: str
    total: float


class MetalSlice(TypedDict):
    name: str
    value: int


class GstRow(TypedDict):
    id: Any
    invoice_date: str
    amount_without_gst: float
    gst_amount: float


class InvestedTotals(TypedDict):
    gold: float
    silver: float


class Profits(TypedDict):
    gold: float
    silver: float


class InvestedShare(TypedDict):
    key: str
    name: str
    value: float


class DashboardData(TypedDict):
    filtered_records: list[InvoiceRecord]
    kpi: KpiSummary
    monthly: list[MonthlyBucket]
    daily: list[DailyBucket]
    metal_distribution: list[MetalSlice]
    gst_rows: list[GstRow]
    invested: InvestedTotals
    profits: Profits


class HomeData(TypedDict):
    invested: InvestedTotals
    invested_share: list[InvestedShare]


@dataclass(frozen=True)
class UserProfile:
    """Signed-in user as returned by the login endpoint."""

    id: Any
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["UserProfile"]:
        if not isinstance(payload, Mapping):
            return None
        user_id = payload.get("id")
        if user_id is None:
            return None
        return cls(
            id=user_id,
            name=payload.get("name"),
            username=payload.get("username"),
            email=payload.get("email"),
        )

    @property
    def display_name(self) -> str:
        return self.name or self.username or self.email or "User"


@dataclass(frozen=True)
class FilterCriteria:
    """Dashboard filters; replaced whole whenever a widget changes."""

    start_date: DateInput = None
    end_date: DateInput = None
    metal_filter: str = "ALL"

    def __post_init__(self) -> None:
        token = str(self.metal_filter or "ALL").upper()
        if token not in METAL_FILTERS:
            raise ValueError(f"Unsupported metal filter: {self.metal_filter!r}")
        object.__setattr__(self, "metal_filter", token)


@dataclass(frozen=True)
class Holdings:
    """Raw grams/rate input per metal as typed by the user."""

    gold_grams: Any = None
    gold_rate: Any = None
    silver_grams: Any = None
    silver_rate: Any = None


__all__ = [
    "DateInput",
    "METAL_FILTERS",
    "InvoiceRecord",
    "KpiSummary",
    "MonthlyBucket",
    "DailyBucket",
    "MetalSlice",
    "GstRow",
    "InvestedTotals",
    "Profits",
    "InvestedShare",
    "DashboardData",
    "HomeData",
    "UserProfile",
    "FilterCriteria",
    "Holdings",
]
