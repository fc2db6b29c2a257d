# This module decides which records are visible under the current dashboard filter selection.
# It exists so every view is computed from one consistent, conjunctive filter contract.
# Filter state is a hashable value so it can key memoized results directly.
# "All" only exists at the UI boundary; internally an unconstrained field is None.

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any, Final

from src.rate_dashboard.records import RESERVED_LABEL, RISK_CATEGORIES, SCENARIOS, Record

ALL: Final[str] = RESERVED_LABEL
FILTER_FIELDS: Final[tuple[str, ...]] = ("scenario", "product", "region", "category")


@dataclass(frozen=True)
class FilterSpec:
    scenario: str | None = None
    product: str | None = None
    region: str | None = None
    category: str | None = None

    def __post_init__(self) -> None:
        for name in FILTER_FIELDS:
            if getattr(self, name) == ALL:
                object.__setattr__(self, name, None)

    @classmethod
    def from_mapping(cls, selections: Mapping[str, Any]) -> FilterSpec:
        """Build a spec from UI selections; "All" clears a field and unknown keys are ignored."""

        values: dict[str, str | None] = {}
        for name in FILTER_FIELDS:
            choice = selections.get(name)
            values[name] = None if choice is None or choice == ALL else str(choice)
        return cls(**values)

    def constraints(self) -> dict[str, str]:
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }

    def as_selections(self) -> dict[str, str]:
        return {name: getattr(self, name) or ALL for name in FILTER_FIELDS}


def matches(record: Record, filter_spec: FilterSpec | Mapping[str, Any]) -> bool:
    spec = filter_spec if isinstance(filter_spec, FilterSpec) else FilterSpec.from_mapping(filter_spec)
    return all(getattr(record, name) == value for name, value in spec.constraints().items())


def filter_records(
    records: Iterable[Record], filter_spec: FilterSpec | Mapping[str, Any]
) -> tuple[Record, ...]:
    spec = filter_spec if isinstance(filter_spec, FilterSpec) else FilterSpec.from_mapping(filter_spec)
    return tuple(record for record in records if matches(record, spec))


def _ordered_labels(values: set[str], canonical_order: tuple[str, ...]) -> list[str]:
    return [label for label in canonical_order if label in values]


def filter_options(records: Iterable[Record]) -> dict[str, list[str]]:
    """Selectable values per filter field, each list prefixed with "All"."""

    seen: dict[str, set[str]] = {name: set() for name in FILTER_FIELDS}
    for record in records:
        for name in FILTER_FIELDS:
            seen[name].add(getattr(record, name))

    return {
        "scenario": [ALL, *_ordered_labels(seen["scenario"], SCENARIOS)],
        "product": [ALL, *sorted(seen["product"])],
        "region": [ALL, *sorted(seen["region"])],
        "category": [ALL, *_ordered_labels(seen["category"], RISK_CATEGORIES)],
    }
