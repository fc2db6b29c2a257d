# This file collects small formatting helpers used across dashboard pages.
# It exists so summary cards and tables present rates and counts consistently.
# Aggregates stay numeric inside the pipeline; fixed-decimal strings are produced only here.
# The functions return simple strings that Streamlit can display directly.

from __future__ import annotations


def format_rate(value: float | int | None) -> str:
    if value is None:
        return "-"
    return f"{100.0 * float(value):.2f}%"


def format_decimal(value: float | int | None, *, places: int = 4) -> str:
    if value is None:
        return "-"
    return f"{float(value):.{places}f}"


def format_confidence(value: float | int | None) -> str:
    if value is None:
        return "-"
    return f"{float(value):.3f}"


def format_percent(value: float | int | None) -> str:
    if value is None:
        return "-"
    return f"{100.0 * float(value):.1f}%"


def format_count(value: int | float | None) -> str:
    if value is None:
        return "0"
    return f"{int(value):,}"


def format_share(part: int, total: int) -> str:
    if total <= 0:
        return "-"
    return format_percent(part / total)
