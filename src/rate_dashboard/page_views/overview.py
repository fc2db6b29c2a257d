# This file renders the high-level overview tab.
# It exists so users can quickly assess how many records match and how risky the selection is.
# The page prioritizes summary cards and the High/Low risk split.

from __future__ import annotations

import streamlit as st

from src.rate_dashboard.components.charts import render_risk_donut
from src.rate_dashboard.components.summary_cards import render_summary_cards
from src.rate_dashboard.formatting import (
    format_confidence,
    format_count,
    format_rate,
    format_share,
)
from src.rate_dashboard.frames import risk_frame
from src.rate_dashboard.pipeline import DashboardView
from src.rate_dashboard.ui_text import EMPTY_SELECTION


def render(*, view: DashboardView, tooltips: dict[str, str]) -> None:
    st.header("Overview")

    stats = view.statistics
    render_summary_cards(
        total_records=format_count(stats.total_records),
        avg_base_rate=format_rate(stats.avg_base_rate),
        avg_simulated_rate=format_rate(stats.avg_simulated_rate),
        avg_confidence=format_confidence(stats.avg_confidence),
        high_risk_count=format_count(stats.high_risk_count),
        tooltips=tooltips,
    )

    if view.is_empty:
        st.info(EMPTY_SELECTION)
        return

    st.caption(
        f"High risk share: {format_share(view.risk.high_risk, stats.total_records)} "
        f"({format_count(view.risk.high_risk)} high / {format_count(view.risk.low_risk)} low)"
    )
    render_risk_donut(risk_frame(view.risk), help_text=tooltips["risk_chart"])
