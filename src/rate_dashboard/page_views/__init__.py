# This package holds the top-level dashboard page renderers.
# Each page owns its own charts, tables, and explanatory copy.

__all__ = ["overview", "trends", "scenario_comparison", "records"]
