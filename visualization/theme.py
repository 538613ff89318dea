"""Shared Plotly theme tokens for Aura Gold visualizations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping


def _metal_colors() -> Mapping[str, str]:
    return {
        "GOLD": "#fbbf24",
        "SILVER": "#e5e7eb",
        "PLATINUM": "#d1d5db",
        "PALLADIUM": "#a5b4fc",
    }


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#9ca3af"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "#1f2937"
    gold: str = "#fbbf24"
    sky: str = "#38bdf8"
    base_amount: str = "#4ade80"
    gst_amount: str = "#f97316"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"
    metal_colors: Mapping[str, str] = field(default_factory=_metal_colors)
    fallback_palette: tuple[str, ...] = ("#a855f7", "#22c55e", "#0ea5e9")

    def metal_color(self, name: str, index: int) -> str:
        """Return the brand colour for a metal, cycling the fallback palette otherwise."""

        return self.metal_colors.get(name.upper(), self.fallback_palette[index % len(self.fallback_palette)])


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
