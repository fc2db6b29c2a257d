# This file wraps table rendering behavior used across dashboard pages.
# It exists so empty states, sizing, and fixed-decimal rate columns are consistent for every tab.
# The helper accepts prepared DataFrames; numeric columns listed in `decimals` are formatted here.

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd
import streamlit as st

from src.rate_dashboard.aggregation import CONFIDENCE_PLACES, RATE_PLACES, VARIANCE_PLACES
from src.rate_dashboard.formatting import format_decimal

DISPLAY_DECIMALS: dict[str, int] = {
    "base_rate": RATE_PLACES,
    "simulated_rate": RATE_PLACES,
    "avg_simulated_rate": RATE_PLACES,
    "confidence": CONFIDENCE_PLACES,
    "variance": VARIANCE_PLACES,
}


def format_columns(dataframe: pd.DataFrame, decimals: Mapping[str, int]) -> pd.DataFrame:
    """Return a copy with the named columns rendered as fixed-decimal strings."""

    formatted = dataframe.copy()
    for column, places in decimals.items():
        if column in formatted.columns:
            formatted[column] = formatted[column].map(
                lambda value, places=places: format_decimal(value, places=places)
            )
    return formatted


def render_table(
    dataframe: pd.DataFrame,
    *,
    title: str,
    empty_message: str,
    help_text: str | None = None,
    height: int = 320,
    decimals: Mapping[str, int] | None = None,
) -> None:
    st.subheader(title, help=help_text)
    if dataframe.empty:
        st.info(empty_message)
        return
    if decimals:
        dataframe = format_columns(dataframe, decimals)
    st.dataframe(dataframe, use_container_width=True, hide_index=True, height=height)
