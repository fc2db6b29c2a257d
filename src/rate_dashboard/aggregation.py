# This module builds the per-date averages behind the rate trend charts.
# It exists so the time-series view always reflects the filtered records, bucketed by calendar day.
# Buckets are accumulated in one pass, finalized once, and sorted chronologically.
# Rounding precision follows the display precision of each metric.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Final

from src.rate_dashboard.numeric import round_half_away
from src.rate_dashboard.records import Record

RATE_PLACES: Final[int] = 4
CONFIDENCE_PLACES: Final[int] = 3
VARIANCE_PLACES: Final[int] = 6


@dataclass(frozen=True)
class AggregateBucket:
    date: date
    base_rate: float
    simulated_rate: float
    confidence: float
    variance: float
    volume: int
    count: int

    @property
    def date_key(self) -> str:
        return self.date.isoformat()


@dataclass
class _DateAccumulator:
    bucket_date: date
    base_rate: float = 0.0
    simulated_rate: float = 0.0
    confidence: float = 0.0
    variance: float = 0.0
    volume: int = 0
    count: int = 0

    def add(self, record: Record) -> None:
        self.base_rate += record.base_rate
        self.simulated_rate += record.simulated_rate
        self.confidence += record.confidence
        self.variance += record.variance
        self.volume += record.volume
        self.count += 1

    def finalize(self) -> AggregateBucket:
        return AggregateBucket(
            date=self.bucket_date,
            base_rate=round_half_away(self.base_rate / self.count, RATE_PLACES),
            simulated_rate=round_half_away(self.simulated_rate / self.count, RATE_PLACES),
            confidence=round_half_away(self.confidence / self.count, CONFIDENCE_PLACES),
            variance=round_half_away(self.variance / self.count, VARIANCE_PLACES),
            volume=self.volume // self.count,
            count=self.count,
        )


def aggregate_by_date(records: Iterable[Record]) -> list[AggregateBucket]:
    """Average every numeric field per distinct date, oldest date first."""

    accumulators: dict[date, _DateAccumulator] = {}
    for record in records:
        accumulator = accumulators.get(record.date)
        if accumulator is None:
            accumulator = _DateAccumulator(bucket_date=record.date)
            accumulators[record.date] = accumulator
        accumulator.add(record)

    return [accumulators[key].finalize() for key in sorted(accumulators)]
