# This file stores copy blocks for headings, section descriptions, and empty-state messages.
# It exists so narrative wording stays consistent across the dashboard pages.

from __future__ import annotations

APP_TITLE = "Rate Simulation Dashboard"
APP_SUBTITLE = (
    "Compare observed base rates with simulated rates across scenarios, products, and regions."
)

EMPTY_SELECTION = "No records match the current filters."
EMPTY_TREND = "No daily averages available for the current filters."
INVALID_DATASET = "The record set failed validation and cannot be displayed."

METRIC_LABELS: dict[str, str] = {
    "base_rate": "Base rate",
    "simulated_rate": "Simulated rate",
    "confidence": "Confidence",
    "variance": "Variance",
    "volume": "Volume",
}
