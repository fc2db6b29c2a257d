# This file defines narrative tooltip text for metrics, charts, and risk counters.
# It exists so dashboard users can interpret rate simulations without a modelling background.
# A single dictionary keeps explanations consistent between pages and tests.

from __future__ import annotations

TOOLTIPS: dict[str, str] = {
    "total_records_card": "Number of records that match every active filter.",
    "avg_base_rate_card": "Average observed base rate across the filtered records.",
    "avg_simulated_rate_card": "Average simulated rate produced by the estimation scenarios.",
    "avg_confidence_card": "Average model confidence; values near 1 mean the estimate is more reliable.",
    "high_risk_card": "Count of filtered records classified as High Risk.",
    "trend_chart": "Daily averages of the selected metric over the filtered records.",
    "scenario_chart": "Average simulated rate per scenario; scenarios with no matching records show zero.",
    "risk_chart": "Split between High Risk and Low Risk records in the current selection.",
    "scatter_chart": "Each point is one record; points above the diagonal were simulated above their base rate.",
    "records_table": "Row-level records behind every chart, with plain-language notes.",
    "rate_move": "How far the simulated rate moved from the base rate for that record.",
    "confidence_note": "Confidence summarizes estimate reliability; lower values call for caution.",
    "metric_selector": "Choose which averaged field the trend chart plots.",
    "chart_type_selector": "Switch the trend chart between line, area, and bar marks.",
}
