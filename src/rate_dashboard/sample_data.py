# This module generates the synthetic rate-estimation dataset the dashboard ships with.
# It exists so the app and its tests have a realistic, reproducible record set without a data source.
# Draws come from a seeded numpy generator, so a fixed config always yields the same records.
# Scenario labels shift the simulated rate so scenario comparisons show a visible spread.

from __future__ import annotations

from datetime import timedelta

import numpy as np

from src.rate_dashboard.dashboard_config import DashboardConfig
from src.rate_dashboard.records import HIGH_RISK, LOW_RISK, SCENARIOS, Record, RecordStore

SCENARIO_UPLIFT: dict[str, float] = {
    "Conservative": -0.004,
    "Moderate": 0.0,
    "Aggressive": 0.012,
    "Optimistic": -0.008,
}


def generate_sample_records(config: DashboardConfig) -> list[Record]:
    rng = np.random.default_rng(config.sample_seed)
    records: list[Record] = []
    record_id = 1

    for day_offset in range(config.sample_days):
        record_date = config.sample_start_date + timedelta(days=day_offset)
        for _ in range(config.sample_records_per_day):
            scenario = str(rng.choice(SCENARIOS))
            base_rate = round(float(rng.uniform(0.02, 0.08)), 4)
            simulated_rate = round(
                max(0.0, base_rate + SCENARIO_UPLIFT[scenario] + float(rng.normal(0.0, 0.004))), 4
            )
            confidence = round(float(rng.uniform(0.6, 1.0)), 3)
            variance = round(abs(float(rng.normal(0.0, 0.0008))), 6)
            category = HIGH_RISK if simulated_rate > config.high_risk_rate_threshold else LOW_RISK

            records.append(
                Record(
                    id=record_id,
                    date=record_date,
                    scenario=scenario,
                    product=str(rng.choice(config.products)),
                    region=str(rng.choice(config.regions)),
                    base_rate=base_rate,
                    simulated_rate=simulated_rate,
                    confidence=confidence,
                    variance=variance,
                    category=category,
                    volume=int(rng.integers(50, 1000)),
                )
            )
            record_id += 1

    return records


def load_sample_store(config: DashboardConfig) -> RecordStore:
    return RecordStore(generate_sample_records(config))
