# This file runs deterministic checks of the dashboard pipeline against a hand-computed example.
# It exists so aggregation and summary rounding stay aligned with the documented worked example.
# The script is lightweight and can run in CI or local preflight steps.
# ruff: noqa: E402

from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.rate_dashboard.filters import FilterSpec
from src.rate_dashboard.pipeline import DashboardPipeline
from src.rate_dashboard.records import RecordStore


def main() -> int:
    store = RecordStore.from_rows(
        [
            {
                "id": 1,
                "date": "2024-01-01",
                "scenario": "Conservative",
                "product": "Mortgage",
                "region": "North",
                "baseRate": 0.02,
                "simulatedRate": 0.03,
                "confidence": 0.8,
                "variance": 0.0005,
                "category": "Low Risk",
                "volume": 100,
            },
            {
                "id": 2,
                "date": "2024-01-01",
                "scenario": "Moderate",
                "product": "Mortgage",
                "region": "North",
                "baseRate": 0.04,
                "simulatedRate": 0.05,
                "confidence": 0.9,
                "variance": 0.0007,
                "category": "High Risk",
                "volume": 200,
            },
        ]
    )
    view = DashboardPipeline(store=store).compute(FilterSpec())
    bucket = view.buckets[0] if view.buckets else None

    checks = [
        (len(view.buckets) == 1, "example must produce exactly one date bucket"),
        (bucket is not None and bucket.date == date(2024, 1, 1), "bucket date must be 2024-01-01"),
        (bucket is not None and bucket.base_rate == 0.03, "bucket base_rate must be 0.0300"),
        (bucket is not None and bucket.simulated_rate == 0.04, "bucket simulated_rate must be 0.0400"),
        (bucket is not None and bucket.confidence == 0.85, "bucket confidence must be 0.850"),
        (bucket is not None and bucket.volume == 150, "bucket volume must be 150"),
        (view.statistics.total_records == 2, "total_records must be 2"),
        (view.statistics.avg_base_rate == 0.03, "avg_base_rate must be 0.0300"),
        (view.statistics.high_risk_count == 1, "high_risk_count must be 1"),
        (len(view.scenarios) == 4, "scenario summary must always have four entries"),
    ]

    failures = [message for passed, message in checks if not passed]
    if failures:
        for failure in failures:
            print(f"FAIL: {failure}")
        return 1

    print("Pipeline example checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
