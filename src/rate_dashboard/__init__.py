# This package contains the rate simulation dashboard: record store, filter and aggregation
# pipeline, and the Streamlit pages that render its output.
# The pipeline modules are pure and UI-free; Streamlit code lives in app, components, and page_views.

__all__ = ["app", "pipeline"]
