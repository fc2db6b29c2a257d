# This test file validates per-date bucketing behind the trend charts.
# It exists so daily averages stay chronological, complete, and rounded to display precision.
# The worked two-record example is checked field by field.

from __future__ import annotations

from collections import defaultdict
from datetime import date

import pytest

from src.rate_dashboard.aggregation import aggregate_by_date
from src.rate_dashboard.numeric import mean_or_zero, round_half_away
from src.rate_dashboard.records import RecordStore
from tests.rate_dashboard.support import example_records, make_record, mixed_records


def test_worked_example_produces_single_bucket() -> None:
    buckets = aggregate_by_date(example_records())

    assert len(buckets) == 1
    bucket = buckets[0]
    assert bucket.date_key == "2024-01-01"
    assert bucket.base_rate == pytest.approx(0.03)
    assert bucket.simulated_rate == pytest.approx(0.04)
    assert bucket.confidence == pytest.approx(0.85)
    assert bucket.variance == pytest.approx(0.0006)
    assert bucket.volume == 150
    assert bucket.count == 2


def test_empty_input_gives_no_buckets() -> None:
    assert aggregate_by_date([]) == []


def test_buckets_are_chronological_across_year_and_month_boundaries() -> None:
    buckets = aggregate_by_date(mixed_records())

    assert [bucket.date for bucket in buckets] == [
        date(2023, 12, 31),
        date(2024, 1, 10),
        date(2024, 1, 31),
        date(2024, 2, 1),
    ]
    month_end = buckets[2]
    assert month_end.count == 2
    assert month_end.base_rate == pytest.approx(0.025)


def test_volume_mean_is_floored() -> None:
    records = [make_record(id=1, volume=100), make_record(id=2, volume=101)]

    assert aggregate_by_date(records)[0].volume == 100


def test_result_does_not_depend_on_input_order() -> None:
    records = mixed_records()

    assert aggregate_by_date(records) == aggregate_by_date(list(reversed(records)))


def test_bucket_means_stay_within_contributing_range(sample_store: RecordStore) -> None:
    by_date = defaultdict(list)
    for record in sample_store:
        by_date[record.date].append(record.base_rate)

    buckets = aggregate_by_date(sample_store.records)

    assert [bucket.date for bucket in buckets] == sorted(by_date)
    for bucket in buckets:
        rates = by_date[bucket.date]
        assert min(rates) <= bucket.base_rate <= max(rates)
        assert bucket.count == len(rates)


def test_round_half_away_breaks_ties_away_from_zero() -> None:
    assert round_half_away(0.00125, 4) == 0.0013
    assert round_half_away(2.5, 0) == 3.0
    assert round_half_away(-2.5, 0) == -3.0
    assert round_half_away(0.12344, 4) == 0.1234


def test_mean_or_zero_handles_empty_group() -> None:
    assert mean_or_zero(0.0, 0) == 0.0
    assert mean_or_zero(0.3, 3) == pytest.approx(0.1)


def test_bucket_means_stay_within_range_up_to_one_rounding_step() -> None:
    step = 10 ** -4
    records = [
        make_record(id=1, date=date(2024, 1, 1), base_rate=0.00005),
        make_record(id=2, date=date(2024, 1, 2), base_rate=0.012341),
        make_record(id=3, date=date(2024, 1, 2), base_rate=0.012347),
    ]

    buckets = aggregate_by_date(records)

    assert buckets[0].base_rate == 0.0001
    for bucket in buckets:
        rates = [record.base_rate for record in records if record.date == bucket.date]
        assert min(rates) - step <= bucket.base_rate <= max(rates) + step
