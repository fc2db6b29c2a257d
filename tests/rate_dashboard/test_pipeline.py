# This test file validates the memoized dashboard pipeline.
# It exists so every rerun with the same dataset, filters, and metric shows one consistent view.
# The checks cover cache hits, cache keys, eviction, and the metric projection.

from __future__ import annotations

import pytest

from src.rate_dashboard.filters import ALL, FilterSpec
from src.rate_dashboard.pipeline import TREND_METRICS, DashboardPipeline, build_view, metric_series
from src.rate_dashboard.records import RecordStore
from tests.rate_dashboard.support import example_records, make_record, mixed_records


def test_same_inputs_return_memoized_view() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()))

    first = pipeline.compute(FilterSpec(region="South"), "base_rate")
    second = pipeline.compute({"region": "South", "scenario": ALL}, "base_rate")

    assert first is second
    assert len(pipeline.cache) == 1


def test_metric_is_part_of_cache_key() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()))

    rate_view = pipeline.compute(None, "base_rate")
    volume_view = pipeline.compute(None, "volume")

    assert rate_view is not volume_view
    assert rate_view.buckets == volume_view.buckets
    assert [value for _, value in volume_view.metric_series] == [
        float(bucket.volume) for bucket in volume_view.buckets
    ]


def test_recomputation_is_idempotent() -> None:
    records = tuple(mixed_records())
    spec = FilterSpec(category="High Risk")

    assert build_view(records, spec, "confidence") == build_view(records, spec, "confidence")


def test_stores_with_different_content_do_not_share_views() -> None:
    first = DashboardPipeline(store=RecordStore(example_records()))
    second = DashboardPipeline(store=RecordStore([make_record(id=1, base_rate=0.09)]))

    assert first.store.fingerprint != second.store.fingerprint
    assert first.compute().statistics != second.compute().statistics


def test_cache_evicts_oldest_entry() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()), memo_cache_size=1)

    north = pipeline.compute(FilterSpec(region="North"))
    pipeline.compute(FilterSpec(region="South"))

    assert len(pipeline.cache) == 1
    assert pipeline.compute(FilterSpec(region="North")) is not north


def test_empty_selection_view_has_defined_shape() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()))

    view = pipeline.compute(FilterSpec(region="Atlantis"))

    assert view.is_empty
    assert view.buckets == ()
    assert view.metric_series == ()
    assert len(view.scenarios) == 4
    assert all(item.count == 0 for item in view.scenarios)
    assert view.statistics.total_records == 0
    assert view.risk.high_risk == 0 and view.risk.low_risk == 0


def test_unknown_metric_is_rejected() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()))

    with pytest.raises(ValueError, match="metric must be one of"):
        pipeline.compute(None, "spread")
    with pytest.raises(ValueError):
        metric_series((), "spread")


def test_filter_options_are_copies() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()))

    options = pipeline.filter_options()
    options["region"].append("Mutated")

    assert "Mutated" not in pipeline.filter_options()["region"]


def test_every_trend_metric_projects_bucket_values() -> None:
    view = DashboardPipeline(store=RecordStore(example_records())).compute()

    for metric in TREND_METRICS:
        series = metric_series(view.buckets, metric)
        assert series == ((view.buckets[0].date, float(getattr(view.buckets[0], metric))),)


def test_all_spec_shares_cache_entry_with_empty_spec() -> None:
    pipeline = DashboardPipeline(store=RecordStore(mixed_records()))

    unconstrained = pipeline.compute(FilterSpec())
    explicit_all = pipeline.compute(FilterSpec(scenario=ALL))

    assert explicit_all is unconstrained
    assert len(explicit_all.records) == 5
    assert len(pipeline.cache) == 1


def test_metric_series_follows_selected_metric() -> None:
    view = DashboardPipeline(store=RecordStore(mixed_records())).compute(None, "confidence")

    assert [point_date for point_date, _ in view.metric_series] == [
        bucket.date for bucket in view.buckets
    ]
    assert [value for _, value in view.metric_series] == [
        bucket.confidence for bucket in view.buckets
    ]
