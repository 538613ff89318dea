"""Plotly chart builders for the Aura Gold revenue and home pages."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.models import DailyBucket, GstRow, InvestedShare, MetalSlice, MonthlyBucket

from .theme import theme_tokens

TOKENS = theme_tokens()
NO_DATA_MESSAGE = "No data for selected filters."

__all__ = [
    "NO_DATA_MESSAGE",
    "build_daily_chart",
    "build_gst_chart",
    "build_invested_chart",
    "build_metal_chart",
    "build_monthly_chart",
]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _style_axes(fig: go.Figure, height: int = 260) -> go.Figure:
    axis_font = dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size)
    fig.update_layout(
        height=height,
        margin=dict(l=0, r=0, t=20, b=0),
        xaxis=dict(showgrid=False, tickfont=axis_font),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.grid_color, griddash="dash", zeroline=False, tickfont=axis_font),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_monthly_chart(monthly: Sequence[MonthlyBucket]) -> go.Figure:
    """Bar chart of total spend per ``YYYY-MM`` bucket."""

    if not monthly:
        return _empty_plotly_figure(NO_DATA_MESSAGE)

    df = pd.DataFrame(monthly)
    fig = px.bar(df, x="month", y="total", color_discrete_sequence=[TOKENS.gold])
    fig.update_traces(hovertemplate="%{x}<br>₹%{y:,.2f}<extra></extra>", marker_cornerradius=8)
    fig.update_layout(xaxis_title="", yaxis_title="")
    return _style_axes(fig)


def build_metal_chart(distribution: Sequence[MetalSlice]) -> go.Figure:
    """Pie chart of invoice counts per normalised metal."""

    if not distribution:
        return _empty_plotly_figure(NO_DATA_MESSAGE)

    df = pd.DataFrame(distribution)
    colors = [TOKENS.metal_color(str(name), index) for index, name in enumerate(df["name"])]
    fig = go.Figure(
        go.Pie(
            labels=df["name"],
            values=df["value"],
            marker=dict(colors=colors, line=dict(color=TOKENS.neutral_white, width=1)),
            textinfo="label+value",
            sort=False,
            hovertemplate="%{label}<br>%{value} invoices<extra></extra>",
        )
    )
    fig.update_layout(
        height=260,
        margin=dict(l=0, r=0, t=20, b=0),
        legend=dict(orientation="h", yanchor="top", y=-0.05, x=0.5, xanchor="center"),
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_daily_chart(daily: Sequence[DailyBucket]) -> go.Figure:
    """Line chart of spend per day over the trailing window."""

    if not daily:
        return _empty_plotly_figure(NO_DATA_MESSAGE)

    df = pd.DataFrame(daily)
    fig = go.Figure(
        go.Scatter(
            x=df["date"],
            y=df["total"],
            mode="lines",
            name="Daily spend",
            line=dict(color=TOKENS.sky, width=2, shape="spline", smoothing=0.45),
            hovertemplate="%{x}<br>₹%{y:,.2f}<extra></extra>",
        )
    )
    fig.update_layout(xaxis=dict(type="category"))
    return _style_axes(fig)


def build_gst_chart(gst_rows: Sequence[GstRow]) -> go.Figure:
    """Stacked bars of pre-tax amount and GST for each invoice."""

    if not gst_rows:
        return _empty_plotly_figure(NO_DATA_MESSAGE)

    df = pd.DataFrame(gst_rows)
    x_values = [f"{row_id} · {day}" if day else str(row_id) for row_id, day in zip(df["id"], df["invoice_date"])]
    fig = go.Figure()
    fig.add_trace(
        go.Bar(
            x=x_values,
            y=df["amount_without_gst"],
            name="Amount without GST",
            marker_color=TOKENS.base_amount,
        )
    )
    fig.add_trace(
        go.Bar(
            x=x_values,
            y=df["gst_amount"],
            name="GST amount",
            marker_color=TOKENS.gst_amount,
        )
    )
    fig.update_layout(
        barmode="stack",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
    )
    _style_axes(fig)
    fig.update_xaxes(visible=False)
    return fig


def build_invested_chart(invested_share: Sequence[InvestedShare]) -> go.Figure:
    """Donut of invested rupees split between gold and silver."""

    if not invested_share:
        return _empty_plotly_figure("No gold/silver invoices yet.")

    df = pd.DataFrame(invested_share)
    colors = [TOKENS.metal_color(str(key), index) for index, key in enumerate(df["key"])]
    fig = px.pie(
        df,
        names="name",
        values="value",
        hole=0.55,
        color="name",
        color_discrete_sequence=colors,
    )
    fig.update_traces(
        hovertemplate="%{label}<br>₹%{value:,.2f}<extra></extra>",
        marker=dict(line=dict(color=TOKENS.neutral_white, width=2)),
        sort=False,
    )
    fig.update_layout(height=180, margin=dict(l=0, r=0, t=0, b=0), showlegend=True)
    return fig
