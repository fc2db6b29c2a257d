# This module computes the dataset-wide metrics shown on the summary cards.
# It exists so cards and the risk split read from one snapshot of the filtered records.
# An empty selection yields an all-zero snapshot instead of dividing by zero.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.rate_dashboard.aggregation import CONFIDENCE_PLACES, RATE_PLACES
from src.rate_dashboard.numeric import round_half_away
from src.rate_dashboard.records import HIGH_RISK, Record


@dataclass(frozen=True)
class SummaryStatistics:
    total_records: int
    avg_base_rate: float
    avg_simulated_rate: float
    avg_confidence: float
    high_risk_count: int

    @classmethod
    def empty(cls) -> SummaryStatistics:
        return cls(
            total_records=0,
            avg_base_rate=0.0,
            avg_simulated_rate=0.0,
            avg_confidence=0.0,
            high_risk_count=0,
        )


@dataclass(frozen=True)
class RiskSplit:
    high_risk: int
    low_risk: int


def summarize(records: Iterable[Record]) -> SummaryStatistics:
    total = 0
    base_sum = 0.0
    simulated_sum = 0.0
    confidence_sum = 0.0
    high_risk = 0
    for record in records:
        total += 1
        base_sum += record.base_rate
        simulated_sum += record.simulated_rate
        confidence_sum += record.confidence
        if record.category == HIGH_RISK:
            high_risk += 1

    if total == 0:
        return SummaryStatistics.empty()

    return SummaryStatistics(
        total_records=total,
        avg_base_rate=round_half_away(base_sum / total, RATE_PLACES),
        avg_simulated_rate=round_half_away(simulated_sum / total, RATE_PLACES),
        avg_confidence=round_half_away(confidence_sum / total, CONFIDENCE_PLACES),
        high_risk_count=high_risk,
    )


def risk_split(stats: SummaryStatistics) -> RiskSplit:
    """High-risk count and its complement within the filtered set."""

    return RiskSplit(
        high_risk=stats.high_risk_count,
        low_risk=stats.total_records - stats.high_risk_count,
    )
