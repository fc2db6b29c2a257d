"""
Shared test configuration.
It asserts expected behavior and guards against regressions in the corresponding component.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.rate_dashboard.dashboard_config import DashboardConfig  # noqa: E402
from src.rate_dashboard.records import RecordStore  # noqa: E402
from src.rate_dashboard.sample_data import load_sample_store  # noqa: E402
from tests.rate_dashboard.support import build_test_config  # noqa: E402


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure required environment variables are present during tests."""

    defaults = {
        "PROJECT_NAME": "test-project",
        "ENV": "test",
        "LOG_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        if os.getenv(key) is None:
            monkeypatch.setenv(key, value)


@pytest.fixture
def test_config() -> DashboardConfig:
    return build_test_config()


@pytest.fixture
def sample_store(test_config: DashboardConfig) -> RecordStore:
    """Small generated dataset for property-style checks."""

    return load_sample_store(test_config)
