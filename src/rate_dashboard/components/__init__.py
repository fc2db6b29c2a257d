# This package groups reusable Streamlit components used by multiple dashboard pages.
# It exists to keep visual patterns and interaction logic consistent across tabs.

__all__ = ["filters", "summary_cards", "tables", "charts"]
