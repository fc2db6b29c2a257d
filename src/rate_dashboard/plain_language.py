# This file translates raw record values into short plain-language labels for the records table.
# It exists so non-technical readers can scan simulated moves and confidence without decoding decimals.
# The mappings are deterministic and tied directly to numeric thresholds from the dashboard config.

from __future__ import annotations


def rate_move_label(base_rate: float, simulated_rate: float) -> str:
    """Describe how far the simulated rate moved away from the base rate."""

    delta = simulated_rate - base_rate
    if abs(delta) < 0.0005:
        return "Flat"
    if delta > 0:
        return "Small rise" if delta <= 0.005 else "Large rise"
    return "Small drop" if delta >= -0.005 else "Large drop"


def confidence_note(
    confidence: float,
    *,
    high_threshold: float,
    low_threshold: float,
) -> str:
    if confidence >= high_threshold:
        return "High confidence estimate."
    if confidence >= low_threshold:
        return "Medium confidence estimate."
    return "Lower confidence estimate, treat the simulated rate cautiously."
