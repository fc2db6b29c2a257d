# This file renders the trend tab with daily averages of the selected metric.
# It exists so users can follow how base and simulated rates evolve across the date range.

from __future__ import annotations

import streamlit as st

from src.rate_dashboard.components.charts import render_trend_chart
from src.rate_dashboard.components.tables import DISPLAY_DECIMALS, render_table
from src.rate_dashboard.frames import buckets_frame, metric_frame
from src.rate_dashboard.pipeline import DashboardView
from src.rate_dashboard.ui_text import EMPTY_TREND, METRIC_LABELS


def render(*, view: DashboardView, chart_type: str, tooltips: dict[str, str]) -> None:
    st.header("Trends")

    metric_label = METRIC_LABELS.get(view.metric, view.metric)
    render_trend_chart(
        metric_frame(view.metric_series, metric=view.metric),
        metric=view.metric,
        metric_label=metric_label,
        chart_type=chart_type,
        help_text=tooltips["trend_chart"],
    )

    table_df = buckets_frame(view.buckets)
    if not table_df.empty:
        table_df["date"] = table_df["date"].dt.strftime("%Y-%m-%d")

    render_table(
        table_df,
        title="Daily Averages",
        empty_message=EMPTY_TREND,
        help_text=tooltips["trend_chart"],
        decimals=DISPLAY_DECIMALS,
    )
