# This file renders the scenario comparison tab.
# It exists so users can compare the four estimation scenarios side by side.
# All four scenarios are always shown, even when the filters exclude some of them.

from __future__ import annotations

import streamlit as st

from src.rate_dashboard.components.charts import render_scenario_bar
from src.rate_dashboard.components.tables import DISPLAY_DECIMALS, render_table
from src.rate_dashboard.formatting import format_count
from src.rate_dashboard.frames import scenarios_frame
from src.rate_dashboard.pipeline import DashboardView


def render(*, view: DashboardView, tooltips: dict[str, str]) -> None:
    st.header("Scenario Comparison")

    scenario_df = scenarios_frame(view.scenarios)
    render_scenario_bar(scenario_df, help_text=tooltips["scenario_chart"])

    table_df = scenario_df.copy()
    table_df["count"] = table_df["count"].map(format_count)
    render_table(
        table_df,
        title="Scenario Summary",
        empty_message="No scenario rows available.",
        help_text=tooltips["scenario_chart"],
        height=200,
        decimals=DISPLAY_DECIMALS,
    )
