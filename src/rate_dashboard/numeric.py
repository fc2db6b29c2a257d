# This module holds the rounding and averaging helpers shared by every summarizer.
# It exists so buckets, scenario aggregates, and summary statistics round ties the same way.
# Values are rounded half away from zero on their shortest decimal representation.

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_away(value: float, places: int) -> float:
    """Round `value` to `places` decimals, ties away from zero."""

    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_or_zero(total: float, count: int) -> float:
    if count <= 0:
        return 0.0
    return total / count
