# This file renders sidebar filters shared across all dashboard pages.
# It exists so every page reads from one consistent set of global controls.
# Options come from the distinct values of the full dataset, each list starting with "All".
# Returning a typed filter spec keeps the pipeline memo key predictable.

from __future__ import annotations

import streamlit as st

from src.rate_dashboard.dashboard_config import CHART_TYPES, DashboardConfig
from src.rate_dashboard.filters import FilterSpec
from src.rate_dashboard.pipeline import TREND_METRICS
from src.rate_dashboard.ui_text import METRIC_LABELS

FILTER_LABELS: dict[str, str] = {
    "scenario": "Scenario",
    "product": "Product",
    "region": "Region",
    "category": "Risk category",
}


def render_sidebar_filters(*, options: dict[str, list[str]]) -> FilterSpec:
    st.sidebar.header("Global Filters")

    selections: dict[str, str] = {}
    for field_name, label in FILTER_LABELS.items():
        choices = options.get(field_name) or ["All"]
        selections[field_name] = st.sidebar.selectbox(
            label, options=choices, index=0, key=f"filter_{field_name}"
        )

    return FilterSpec.from_mapping(selections)


def render_chart_controls(*, config: DashboardConfig, tooltips: dict[str, str]) -> tuple[str, str]:
    st.sidebar.markdown("---")
    st.sidebar.subheader("Trend chart")

    metric = st.sidebar.selectbox(
        "Metric",
        options=list(TREND_METRICS),
        index=TREND_METRICS.index(config.default_metric),
        format_func=lambda value: METRIC_LABELS.get(value, value),
        help=tooltips["metric_selector"],
        key="trend_metric",
    )
    chart_type = st.sidebar.radio(
        "Chart type",
        options=list(CHART_TYPES),
        index=CHART_TYPES.index(config.default_chart_type),
        horizontal=True,
        help=tooltips["chart_type_selector"],
        key="trend_chart_type",
    )
    return str(metric), str(chart_type)
