# This file renders the record explorer tab for row-level transparency.
# It exists so users can inspect the individual records behind every aggregate.
# The page combines a base-vs-simulated scatter with a plain-language record table.

from __future__ import annotations

import streamlit as st

from src.rate_dashboard.components.charts import render_rate_scatter
from src.rate_dashboard.components.tables import DISPLAY_DECIMALS, render_table
from src.rate_dashboard.dashboard_config import DashboardConfig
from src.rate_dashboard.frames import records_frame
from src.rate_dashboard.pipeline import DashboardView
from src.rate_dashboard.ui_text import EMPTY_SELECTION


def render(*, view: DashboardView, config: DashboardConfig, tooltips: dict[str, str]) -> None:
    st.header("Records")

    if view.is_empty:
        st.info(EMPTY_SELECTION)
        return

    st.subheader("How to read this page")
    st.markdown(f"- **Rate move:** {tooltips['rate_move']}")
    st.markdown(f"- **Confidence:** {tooltips['confidence_note']}")

    frame = records_frame(
        view.records,
        high_confidence_threshold=config.high_confidence_threshold,
        low_confidence_threshold=config.low_confidence_threshold,
    )
    render_rate_scatter(
        frame, max_points=config.scatter_max_points, help_text=tooltips["scatter_chart"]
    )

    table_df = frame.copy()
    table_df["date"] = table_df["date"].dt.strftime("%Y-%m-%d")
    render_table(
        table_df,
        title="Filtered Records",
        empty_message=EMPTY_SELECTION,
        help_text=tooltips["records_table"],
        height=360,
        decimals=DISPLAY_DECIMALS,
    )
