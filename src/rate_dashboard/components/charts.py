# This file contains reusable chart renderers for trend, scenario, risk, and scatter views.
# It exists so chart logic is shared and consistently handles empty datasets.
# The charts use Altair because it integrates cleanly with Streamlit and supports layered visuals.

from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from src.rate_dashboard.dashboard_config import CHART_TYPES
from src.rate_dashboard.records import HIGH_RISK, LOW_RISK, SCENARIOS


def build_trend_chart(
    dataframe: pd.DataFrame,
    *,
    metric: str,
    metric_label: str,
    chart_type: str,
) -> alt.Chart:
    if chart_type not in CHART_TYPES:
        raise ValueError(f"chart_type must be one of {list(CHART_TYPES)}, got: {chart_type!r}")

    base = alt.Chart(dataframe)
    if chart_type == "area":
        marked = base.mark_area(opacity=0.4, line=True)
    elif chart_type == "bar":
        marked = base.mark_bar()
    else:
        marked = base.mark_line(point=True)

    return marked.encode(
        x=alt.X("date:T", title="Date"),
        y=alt.Y(f"{metric}:Q", title=metric_label),
        tooltip=[
            alt.Tooltip("date:T", title="Date"),
            alt.Tooltip(f"{metric}:Q", title=metric_label),
        ],
    ).properties(height=300)


def render_trend_chart(
    dataframe: pd.DataFrame,
    *,
    metric: str,
    metric_label: str,
    chart_type: str,
    help_text: str,
) -> None:
    st.subheader(f"{metric_label} Over Time", help=help_text)
    if dataframe.empty:
        st.info("No daily averages available for the current filters.")
        return

    chart = build_trend_chart(
        dataframe, metric=metric, metric_label=metric_label, chart_type=chart_type
    )
    st.altair_chart(chart, use_container_width=True)


def render_scenario_bar(dataframe: pd.DataFrame, *, help_text: str) -> None:
    st.subheader("Average Simulated Rate by Scenario", help=help_text)

    chart = (
        alt.Chart(dataframe)
        .mark_bar()
        .encode(
            x=alt.X("scenario:N", sort=list(SCENARIOS), title="Scenario"),
            y=alt.Y("avg_simulated_rate:Q", title="Avg simulated rate"),
            color=alt.Color("scenario:N", sort=list(SCENARIOS), legend=None),
            tooltip=[
                "scenario:N",
                alt.Tooltip("avg_simulated_rate:Q", format=".4f"),
                alt.Tooltip("count:Q", title="Records"),
            ],
        )
        .properties(height=300)
    )
    st.altair_chart(chart, use_container_width=True)


def render_risk_donut(dataframe: pd.DataFrame, *, help_text: str) -> None:
    st.subheader("Risk Split", help=help_text)
    if int(dataframe["count"].sum()) == 0:
        st.info("No records available for the risk split.")
        return

    chart = (
        alt.Chart(dataframe)
        .mark_arc(innerRadius=60)
        .encode(
            theta=alt.Theta("count:Q"),
            color=alt.Color(
                "category:N",
                scale=alt.Scale(domain=[HIGH_RISK, LOW_RISK], range=["#b91c1c", "#0e7490"]),
                title="Category",
            ),
            tooltip=["category:N", "count:Q"],
        )
        .properties(height=300)
    )
    st.altair_chart(chart, use_container_width=True)


def render_rate_scatter(dataframe: pd.DataFrame, *, max_points: int, help_text: str) -> None:
    st.subheader("Base vs Simulated Rate", help=help_text)
    if dataframe.empty:
        st.info("No records available for the scatter view.")
        return

    sampled = dataframe.head(max_points)
    chart = (
        alt.Chart(sampled)
        .mark_circle(size=40, opacity=0.6)
        .encode(
            x=alt.X("base_rate:Q", title="Base rate"),
            y=alt.Y("simulated_rate:Q", title="Simulated rate"),
            color=alt.Color("scenario:N", sort=list(SCENARIOS), title="Scenario"),
            tooltip=[
                "id:Q",
                alt.Tooltip("date:T"),
                "scenario:N",
                "product:N",
                "region:N",
                alt.Tooltip("base_rate:Q", format=".4f"),
                alt.Tooltip("simulated_rate:Q", format=".4f"),
                alt.Tooltip("confidence:Q", format=".3f"),
            ],
        )
        .properties(height=320)
    )
    st.altair_chart(chart, use_container_width=True)
