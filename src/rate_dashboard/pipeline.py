# This file is the single data interface between the record store and the dashboard pages.
# It exists so pages request one consistent view per filter state without recomputing on every rerun.
# Filtering runs first; date buckets, scenario aggregates, and summary statistics are then computed
# independently from the same filtered snapshot. Views are memoized per dataset, filter, and metric.

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Final

from src.rate_dashboard.aggregation import AggregateBucket, aggregate_by_date
from src.rate_dashboard.filters import FilterSpec, filter_options, filter_records
from src.rate_dashboard.records import Record, RecordStore
from src.rate_dashboard.scenarios import ScenarioAggregate, summarize_by_scenario
from src.rate_dashboard.statistics import RiskSplit, SummaryStatistics, risk_split, summarize

LOGGER = logging.getLogger("dashboard")

TREND_METRICS: Final[tuple[str, ...]] = (
    "base_rate",
    "simulated_rate",
    "confidence",
    "variance",
    "volume",
)

MemoKey = tuple[str, FilterSpec, str]


@dataclass(frozen=True)
class DashboardView:
    filter_spec: FilterSpec
    metric: str
    records: tuple[Record, ...]
    buckets: tuple[AggregateBucket, ...]
    scenarios: tuple[ScenarioAggregate, ...]
    statistics: SummaryStatistics
    risk: RiskSplit
    metric_series: tuple[tuple[date, float], ...]

    @property
    def is_empty(self) -> bool:
        return not self.records


def metric_series(buckets: tuple[AggregateBucket, ...], metric: str) -> tuple[tuple[date, float], ...]:
    """Project one trend metric out of the date buckets."""

    if metric not in TREND_METRICS:
        raise ValueError(f"metric must be one of {list(TREND_METRICS)}, got: {metric!r}")
    return tuple((bucket.date, float(getattr(bucket, metric))) for bucket in buckets)


def build_view(
    records: tuple[Record, ...] | list[Record],
    filter_spec: FilterSpec,
    metric: str,
) -> DashboardView:
    filtered = filter_records(records, filter_spec)
    buckets = tuple(aggregate_by_date(filtered))
    statistics = summarize(filtered)
    return DashboardView(
        filter_spec=filter_spec,
        metric=metric,
        records=filtered,
        buckets=buckets,
        scenarios=tuple(summarize_by_scenario(filtered)),
        statistics=statistics,
        risk=risk_split(statistics),
        metric_series=metric_series(buckets, metric),
    )


class _MemoCache:
    def __init__(self, max_entries: int) -> None:
        self._store: OrderedDict[MemoKey, DashboardView] = OrderedDict()
        self._max_entries = max(1, int(max_entries))

    def get(self, key: MemoKey) -> DashboardView | None:
        value = self._store.get(key)
        if value is not None:
            self._store.move_to_end(key)
        return value

    def set(self, key: MemoKey, value: DashboardView) -> None:
        self._store[key] = value
        self._store.move_to_end(key)
        while len(self._store) > self._max_entries:
            self._store.popitem(last=False)

    def __len__(self) -> int:
        return len(self._store)


class DashboardPipeline:
    def __init__(self, *, store: RecordStore, memo_cache_size: int = 64) -> None:
        self.store = store
        self.cache = _MemoCache(memo_cache_size)
        self._options = filter_options(store.records)

    def filter_options(self) -> dict[str, list[str]]:
        return {name: list(values) for name, values in self._options.items()}

    def compute(
        self,
        filter_spec: FilterSpec | Mapping[str, Any] | None = None,
        metric: str = "simulated_rate",
    ) -> DashboardView:
        if filter_spec is None:
            spec = FilterSpec()
        elif isinstance(filter_spec, FilterSpec):
            spec = filter_spec
        else:
            spec = FilterSpec.from_mapping(filter_spec)
        if metric not in TREND_METRICS:
            raise ValueError(f"metric must be one of {list(TREND_METRICS)}, got: {metric!r}")

        cache_key: MemoKey = (self.store.fingerprint, spec, metric)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        view = build_view(self.store.records, spec, metric)
        LOGGER.debug(
            "view computed filters=%s metric=%s rows=%s buckets=%s",
            spec.constraints() or "none",
            metric,
            len(view.records),
            len(view.buckets),
        )
        self.cache.set(cache_key, view)
        return view
