# This test file validates dashboard configuration loading.
# It exists so YAML defaults, environment overrides, and validation errors stay predictable.

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from src.rate_dashboard.dashboard_config import load_dashboard_config

CONFIG_PATH = str(Path(__file__).resolve().parents[2] / "configs" / "dashboard.yaml")


def test_loads_yaml_defaults() -> None:
    config = load_dashboard_config(config_path=CONFIG_PATH, load_env=False)

    assert config.sample_days == 90
    assert config.sample_records_per_day == 6
    assert config.sample_record_count == 540
    assert config.sample_start_date == date(2024, 1, 1)
    assert "Mortgage" in config.products
    assert config.default_metric == "simulated_rate"
    assert config.default_chart_type == "line"


def test_environment_overrides_yaml(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_SAMPLE_DAYS", "10")
    monkeypatch.setenv("DASHBOARD_REGIONS", "Coast, Inland")
    monkeypatch.setenv("DASHBOARD_DEFAULT_CHART_TYPE", "bar")

    config = load_dashboard_config(config_path=CONFIG_PATH, load_env=False)

    assert config.sample_days == 10
    assert config.regions == ("Coast", "Inland")
    assert config.default_chart_type == "bar"


def test_missing_yaml_falls_back_to_builtin_defaults(tmp_path: Path) -> None:
    config = load_dashboard_config(config_path=str(tmp_path / "absent.yaml"), load_env=False)

    assert config.memo_cache_size == 64
    assert config.to_dict()["sample_start_date"] == "2024-01-01"


def test_rejects_unknown_default_metric(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_DEFAULT_METRIC", "spread")

    with pytest.raises(ValueError, match="DASHBOARD_DEFAULT_METRIC"):
        load_dashboard_config(config_path=CONFIG_PATH, load_env=False)


def test_rejects_invalid_start_date(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_SAMPLE_START_DATE", "01/02/2024")

    with pytest.raises(ValueError, match="ISO date"):
        load_dashboard_config(config_path=CONFIG_PATH, load_env=False)


def test_rejects_non_mapping_yaml(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_dashboard_config(config_path=str(path), load_env=False)


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("DASHBOARD_SAMPLE_DAYS", "ninety"),
        ("DASHBOARD_MEMO_CACHE_SIZE", "1.5"),
        ("DASHBOARD_HIGH_RISK_RATE_THRESHOLD", "six percent"),
    ],
)
def test_non_numeric_override_names_the_variable(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        load_dashboard_config(config_path=CONFIG_PATH, load_env=False)


def test_rejects_selector_sentinel_as_region(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DASHBOARD_REGIONS", "North, All")

    with pytest.raises(ValueError, match="must not contain 'All'"):
        load_dashboard_config(config_path=CONFIG_PATH, load_env=False)
