# This file converts pipeline outputs into DataFrames for the Streamlit pages.
# It exists so charts and tables consume tabular data while the pipeline keeps typed values.
# Every converter returns a frame with stable columns, including when the input is empty.

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

import pandas as pd

from src.rate_dashboard.aggregation import AggregateBucket
from src.rate_dashboard.plain_language import confidence_note, rate_move_label
from src.rate_dashboard.records import HIGH_RISK, LOW_RISK, Record
from src.rate_dashboard.scenarios import ScenarioAggregate
from src.rate_dashboard.statistics import RiskSplit

RECORD_COLUMNS = [
    "id",
    "date",
    "scenario",
    "product",
    "region",
    "base_rate",
    "simulated_rate",
    "confidence",
    "variance",
    "category",
    "volume",
]
BUCKET_COLUMNS = [
    "date",
    "base_rate",
    "simulated_rate",
    "confidence",
    "variance",
    "volume",
    "count",
]
SCENARIO_COLUMNS = ["scenario", "avg_simulated_rate", "count"]
RISK_COLUMNS = ["category", "count"]


def records_frame(
    records: Iterable[Record],
    *,
    high_confidence_threshold: float | None = None,
    low_confidence_threshold: float | None = None,
) -> pd.DataFrame:
    rows = [
        {
            **record.to_dict(),
            "date": pd.Timestamp(record.date),
        }
        for record in records
    ]
    frame = pd.DataFrame(rows, columns=RECORD_COLUMNS)
    if high_confidence_threshold is None or low_confidence_threshold is None:
        return frame

    frame["rate_move"] = [
        rate_move_label(float(base), float(simulated))
        for base, simulated in zip(frame["base_rate"], frame["simulated_rate"])
    ]
    frame["confidence_note"] = [
        confidence_note(
            float(value),
            high_threshold=high_confidence_threshold,
            low_threshold=low_confidence_threshold,
        )
        for value in frame["confidence"]
    ]
    return frame


def buckets_frame(buckets: Iterable[AggregateBucket]) -> pd.DataFrame:
    rows = [
        {
            "date": pd.Timestamp(bucket.date),
            "base_rate": bucket.base_rate,
            "simulated_rate": bucket.simulated_rate,
            "confidence": bucket.confidence,
            "variance": bucket.variance,
            "volume": bucket.volume,
            "count": bucket.count,
        }
        for bucket in buckets
    ]
    return pd.DataFrame(rows, columns=BUCKET_COLUMNS)


def scenarios_frame(scenarios: Iterable[ScenarioAggregate]) -> pd.DataFrame:
    rows = [
        {
            "scenario": item.scenario,
            "avg_simulated_rate": item.avg_simulated_rate,
            "count": item.count,
        }
        for item in scenarios
    ]
    return pd.DataFrame(rows, columns=SCENARIO_COLUMNS)


def risk_frame(risk: RiskSplit) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {"category": HIGH_RISK, "count": risk.high_risk},
            {"category": LOW_RISK, "count": risk.low_risk},
        ],
        columns=RISK_COLUMNS,
    )


def metric_frame(series: Iterable[tuple[date, float]], *, metric: str) -> pd.DataFrame:
    rows = [{"date": pd.Timestamp(point_date), metric: value} for point_date, value in series]
    return pd.DataFrame(rows, columns=["date", metric])
