# This file is the Streamlit entrypoint for the rate simulation dashboard.
# It exists to combine global filters, the memoized pipeline, and page-level storytelling in one app.
# Every rerun rebuilds the filter spec and asks the pipeline for the matching view.
# Validation failures in the record set are surfaced to the user instead of partial charts.

from __future__ import annotations

import logging

import streamlit as st

from src.common.logging import configure_logging
from src.common.settings import get_settings
from src.rate_dashboard.components.filters import render_chart_controls, render_sidebar_filters
from src.rate_dashboard.dashboard_config import load_dashboard_config
from src.rate_dashboard.page_views import overview, records, scenario_comparison, trends
from src.rate_dashboard.pipeline import DashboardPipeline
from src.rate_dashboard.records import RecordValidationError
from src.rate_dashboard.sample_data import load_sample_store
from src.rate_dashboard.tooltips import TOOLTIPS
from src.rate_dashboard.ui_text import APP_SUBTITLE, APP_TITLE, INVALID_DATASET

LOGGER = logging.getLogger("dashboard")


@st.cache_resource
def get_pipeline() -> DashboardPipeline:
    config = load_dashboard_config(config_path=get_settings().DASHBOARD_CONFIG_PATH)
    store = load_sample_store(config)
    return DashboardPipeline(store=store, memo_cache_size=config.memo_cache_size)


def main() -> None:
    configure_logging()
    st.set_page_config(page_title=APP_TITLE, layout="wide")

    config = load_dashboard_config(config_path=get_settings().DASHBOARD_CONFIG_PATH)

    st.title(APP_TITLE)
    st.caption(APP_SUBTITLE)

    try:
        pipeline = get_pipeline()
    except RecordValidationError as exc:
        LOGGER.exception("record store failed validation details=%s", exc.details)
        st.error(f"{INVALID_DATASET} {exc}")
        return

    filter_spec = render_sidebar_filters(options=pipeline.filter_options())
    metric, chart_type = render_chart_controls(config=config, tooltips=TOOLTIPS)

    view = pipeline.compute(filter_spec, metric)

    st.sidebar.markdown("---")
    st.sidebar.caption(f"Records loaded: {len(pipeline.store):,}")
    st.sidebar.caption(f"Records matching filters: {len(view.records):,}")

    tabs = st.tabs(["Overview", "Trends", "Scenario Comparison", "Records"])

    with tabs[0]:
        overview.render(view=view, tooltips=TOOLTIPS)

    with tabs[1]:
        trends.render(view=view, chart_type=chart_type, tooltips=TOOLTIPS)

    with tabs[2]:
        scenario_comparison.render(view=view, tooltips=TOOLTIPS)

    with tabs[3]:
        records.render(view=view, config=config, tooltips=TOOLTIPS)


if __name__ == "__main__":
    main()
