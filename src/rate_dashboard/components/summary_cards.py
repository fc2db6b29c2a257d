# This file renders the KPI cards shown at the top of the overview page.
# It exists so key metrics share one consistent visual and tooltip pattern.
# The function expects already formatted values and does not perform computation.

from __future__ import annotations

import streamlit as st


def render_summary_cards(
    *,
    total_records: str,
    avg_base_rate: str,
    avg_simulated_rate: str,
    avg_confidence: str,
    high_risk_count: str,
    tooltips: dict[str, str],
) -> None:
    col1, col2, col3, col4, col5 = st.columns(5)

    col1.metric("Records", total_records, help=tooltips["total_records_card"])
    col2.metric("Avg Base Rate", avg_base_rate, help=tooltips["avg_base_rate_card"])
    col3.metric(
        "Avg Simulated Rate",
        avg_simulated_rate,
        help=tooltips["avg_simulated_rate_card"],
    )
    col4.metric("Avg Confidence", avg_confidence, help=tooltips["avg_confidence_card"])
    col5.metric("High Risk", high_risk_count, help=tooltips["high_risk_card"])
