# This file defines runtime configuration for the rate simulation dashboard.
# It exists so sample data, memoization, and display defaults can be tuned without code changes.
# The loader merges YAML defaults with DASHBOARD_* environment overrides and validates the result.
# Keeping these values centralized avoids hard-coded behavior scattered across the app.

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from typing import Any, Final

import yaml
from dotenv import load_dotenv

from src.rate_dashboard.pipeline import TREND_METRICS
from src.rate_dashboard.records import RESERVED_LABEL

CHART_TYPES: Final[tuple[str, ...]] = ("line", "area", "bar")


def _load_yaml(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        return {}
    with open(path, encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config at {path} must be a mapping, got: {type(loaded).__name__}")
    return dict(loaded)


def _env_str(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got: {value!r}") from exc


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got: {value!r}") from exc


def _env_list(name: str, default: list[str]) -> list[str]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class DashboardConfig:
    sample_days: int
    sample_records_per_day: int
    sample_seed: int
    sample_start_date: date
    high_risk_rate_threshold: float
    products: tuple[str, ...]
    regions: tuple[str, ...]
    memo_cache_size: int
    default_metric: str
    default_chart_type: str
    high_confidence_threshold: float
    low_confidence_threshold: float
    scatter_max_points: int

    @property
    def sample_record_count(self) -> int:
        return self.sample_days * self.sample_records_per_day

    def to_dict(self) -> dict[str, Any]:
        return {
            "sample_days": self.sample_days,
            "sample_records_per_day": self.sample_records_per_day,
            "sample_seed": self.sample_seed,
            "sample_start_date": self.sample_start_date.isoformat(),
            "high_risk_rate_threshold": self.high_risk_rate_threshold,
            "products": list(self.products),
            "regions": list(self.regions),
            "memo_cache_size": self.memo_cache_size,
            "default_metric": self.default_metric,
            "default_chart_type": self.default_chart_type,
            "high_confidence_threshold": self.high_confidence_threshold,
            "low_confidence_threshold": self.low_confidence_threshold,
            "scatter_max_points": self.scatter_max_points,
        }


def load_dashboard_config(
    *, config_path: str = "configs/dashboard.yaml", load_env: bool = True
) -> DashboardConfig:
    if load_env:
        load_dotenv()

    cfg = _load_yaml(config_path)
    sample_cfg = dict(cfg.get("sample_data", {}) or {})
    pipeline_cfg = dict(cfg.get("pipeline", {}) or {})
    display_cfg = dict(cfg.get("display", {}) or {})

    sample_days = _env_int("DASHBOARD_SAMPLE_DAYS", int(sample_cfg.get("days", 90)))
    sample_records_per_day = _env_int(
        "DASHBOARD_SAMPLE_RECORDS_PER_DAY", int(sample_cfg.get("records_per_day", 6))
    )
    sample_seed = _env_int("DASHBOARD_SAMPLE_SEED", int(sample_cfg.get("seed", 42)))
    start_date_raw = str(
        _env_str("DASHBOARD_SAMPLE_START_DATE", str(sample_cfg.get("start_date", "2024-01-01")))
    )
    try:
        sample_start_date = date.fromisoformat(start_date_raw)
    except ValueError as exc:
        raise ValueError(
            f"DASHBOARD_SAMPLE_START_DATE must be an ISO date (YYYY-MM-DD), got: {start_date_raw!r}"
        ) from exc
    high_risk_rate_threshold = _env_float(
        "DASHBOARD_HIGH_RISK_RATE_THRESHOLD",
        float(sample_cfg.get("high_risk_rate_threshold", 0.06)),
    )
    products = _env_list(
        "DASHBOARD_PRODUCTS",
        [str(item) for item in sample_cfg.get("products", ["Mortgage", "Auto Loan"])],
    )
    regions = _env_list(
        "DASHBOARD_REGIONS",
        [str(item) for item in sample_cfg.get("regions", ["North", "South"])],
    )

    memo_cache_size = _env_int(
        "DASHBOARD_MEMO_CACHE_SIZE", int(pipeline_cfg.get("memo_cache_size", 64))
    )

    default_metric = str(
        _env_str("DASHBOARD_DEFAULT_METRIC", str(display_cfg.get("default_metric", "simulated_rate")))
    )
    default_chart_type = str(
        _env_str("DASHBOARD_DEFAULT_CHART_TYPE", str(display_cfg.get("default_chart_type", "line")))
    )
    high_confidence_threshold = _env_float(
        "DASHBOARD_HIGH_CONFIDENCE_THRESHOLD",
        float(display_cfg.get("high_confidence_threshold", 0.85)),
    )
    low_confidence_threshold = _env_float(
        "DASHBOARD_LOW_CONFIDENCE_THRESHOLD",
        float(display_cfg.get("low_confidence_threshold", 0.7)),
    )
    scatter_max_points = _env_int(
        "DASHBOARD_SCATTER_MAX_POINTS", int(display_cfg.get("scatter_max_points", 1000))
    )

    if sample_days < 0 or sample_records_per_day < 0:
        raise ValueError("sample days and records_per_day must be nonnegative")
    if not products:
        raise ValueError("DASHBOARD_PRODUCTS must list at least one product")
    if not regions:
        raise ValueError("DASHBOARD_REGIONS must list at least one region")
    if RESERVED_LABEL in products or RESERVED_LABEL in regions:
        raise ValueError(
            f"DASHBOARD_PRODUCTS and DASHBOARD_REGIONS must not contain {RESERVED_LABEL!r}"
        )
    if memo_cache_size < 1:
        raise ValueError("memo_cache_size must be >= 1")
    if default_metric not in TREND_METRICS:
        raise ValueError(
            f"DASHBOARD_DEFAULT_METRIC must be one of {list(TREND_METRICS)}, got {default_metric}"
        )
    if default_chart_type not in CHART_TYPES:
        raise ValueError(
            f"DASHBOARD_DEFAULT_CHART_TYPE must be one of {list(CHART_TYPES)}, got {default_chart_type}"
        )
    if not (0.0 <= low_confidence_threshold <= high_confidence_threshold <= 1.0):
        raise ValueError("confidence thresholds must satisfy 0 <= low <= high <= 1")
    if high_risk_rate_threshold < 0:
        raise ValueError("high_risk_rate_threshold must be nonnegative")
    if scatter_max_points < 1:
        raise ValueError("scatter_max_points must be >= 1")

    return DashboardConfig(
        sample_days=sample_days,
        sample_records_per_day=sample_records_per_day,
        sample_seed=sample_seed,
        sample_start_date=sample_start_date,
        high_risk_rate_threshold=high_risk_rate_threshold,
        products=tuple(products),
        regions=tuple(regions),
        memo_cache_size=memo_cache_size,
        default_metric=default_metric,
        default_chart_type=default_chart_type,
        high_confidence_threshold=high_confidence_threshold,
        low_confidence_threshold=low_confidence_threshold,
        scatter_max_points=scatter_max_points,
    )
