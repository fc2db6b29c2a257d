# This file holds record builders shared by the dashboard pipeline tests.
# It exists so each test states only the fields it cares about.

from __future__ import annotations

from datetime import date
from typing import Any

from src.rate_dashboard.dashboard_config import DashboardConfig
from src.rate_dashboard.records import Record


def make_record(**overrides: Any) -> Record:
    values: dict[str, Any] = {
        "id": 1,
        "date": date(2024, 1, 1),
        "scenario": "Moderate",
        "product": "Mortgage",
        "region": "North",
        "base_rate": 0.03,
        "simulated_rate": 0.035,
        "confidence": 0.8,
        "variance": 0.0005,
        "category": "Low Risk",
        "volume": 100,
    }
    values.update(overrides)
    return Record(**values)


def example_records() -> list[Record]:
    return [
        make_record(
            id=1,
            date=date(2024, 1, 1),
            scenario="Conservative",
            base_rate=0.02,
            simulated_rate=0.03,
            confidence=0.8,
            variance=0.0005,
            volume=100,
            category="Low Risk",
        ),
        make_record(
            id=2,
            date=date(2024, 1, 1),
            scenario="Moderate",
            base_rate=0.04,
            simulated_rate=0.05,
            confidence=0.9,
            variance=0.0007,
            volume=200,
            category="High Risk",
        ),
    ]


def mixed_records() -> list[Record]:
    rows = [
        (1, date(2024, 1, 31), "Conservative", "Mortgage", "North", 0.02, 0.025, "Low Risk"),
        (2, date(2023, 12, 31), "Aggressive", "Auto Loan", "South", 0.05, 0.07, "High Risk"),
        (3, date(2024, 2, 1), "Aggressive", "Mortgage", "South", 0.04, 0.06, "High Risk"),
        (4, date(2024, 1, 31), "Optimistic", "Credit Card", "East", 0.03, 0.028, "Low Risk"),
        (5, date(2024, 1, 10), "Conservative", "Auto Loan", "North", 0.06, 0.058, "Low Risk"),
    ]
    return [
        make_record(
            id=record_id,
            date=record_date,
            scenario=scenario,
            product=product,
            region=region,
            base_rate=base_rate,
            simulated_rate=simulated_rate,
            category=category,
        )
        for record_id, record_date, scenario, product, region, base_rate, simulated_rate, category in rows
    ]


def build_test_config(**overrides: Any) -> DashboardConfig:
    values: dict[str, Any] = {
        "sample_days": 20,
        "sample_records_per_day": 3,
        "sample_seed": 7,
        "sample_start_date": date(2023, 12, 20),
        "high_risk_rate_threshold": 0.06,
        "products": ("Mortgage", "Auto Loan", "Credit Card"),
        "regions": ("North", "South"),
        "memo_cache_size": 8,
        "default_metric": "simulated_rate",
        "default_chart_type": "line",
        "high_confidence_threshold": 0.85,
        "low_confidence_threshold": 0.7,
        "scatter_max_points": 500,
    }
    values.update(overrides)
    return DashboardConfig(**values)
