"""Visualization utilities for Aura Gold dashboards."""

from .charts import (
    NO_DATA_MESSAGE,
    build_daily_chart,
    build_gst_chart,
    build_invested_chart,
    build_metal_chart,
    build_monthly_chart,
)
from .theme import theme_tokens

__all__ = [
    "NO_DATA_MESSAGE",
    "build_daily_chart",
    "build_gst_chart",
    "build_invested_chart",
    "build_metal_chart",
    "build_monthly_chart",
    "theme_tokens",
]
