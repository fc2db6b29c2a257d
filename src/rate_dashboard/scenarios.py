# This module summarizes simulated rates per estimation scenario.
# It exists so the scenario comparison chart always shows the same four bars in the same order.
# Scenarios with no matching records still appear, with a zero rate and zero count.

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.rate_dashboard.aggregation import RATE_PLACES
from src.rate_dashboard.numeric import mean_or_zero, round_half_away
from src.rate_dashboard.records import SCENARIOS, Record


@dataclass(frozen=True)
class ScenarioAggregate:
    scenario: str
    avg_simulated_rate: float
    count: int


def summarize_by_scenario(records: Iterable[Record]) -> list[ScenarioAggregate]:
    totals = {scenario: 0.0 for scenario in SCENARIOS}
    counts = {scenario: 0 for scenario in SCENARIOS}
    for record in records:
        totals[record.scenario] += record.simulated_rate
        counts[record.scenario] += 1

    return [
        ScenarioAggregate(
            scenario=scenario,
            avg_simulated_rate=round_half_away(
                mean_or_zero(totals[scenario], counts[scenario]), RATE_PLACES
            ),
            count=counts[scenario],
        )
        for scenario in SCENARIOS
    ]
