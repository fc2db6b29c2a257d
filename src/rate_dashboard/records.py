# This module defines the rate-estimation record and the immutable store that holds a dataset.
# It exists so every downstream stage can assume validated input and never sees NaN or bad labels.
# Rows from dictionaries or DataFrames are coerced and checked here, once, at load time.
# The store also carries a content fingerprint used to key memoized pipeline results.

from __future__ import annotations

import hashlib
import json
import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Final

import numpy as np
import pandas as pd

LOGGER = logging.getLogger("dashboard")

SCENARIOS: Final[tuple[str, ...]] = ("Conservative", "Moderate", "Aggressive", "Optimistic")
HIGH_RISK: Final[str] = "High Risk"
LOW_RISK: Final[str] = "Low Risk"
RISK_CATEGORIES: Final[tuple[str, ...]] = (HIGH_RISK, LOW_RISK)
# Selector sentinel for "no constraint"; never a valid product or region label.
RESERVED_LABEL: Final[str] = "All"

FIELD_ALIASES: Final[dict[str, str]] = {
    "baseRate": "base_rate",
    "simulatedRate": "simulated_rate",
}


class RecordValidationError(ValueError):
    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_rate(failures: dict[str, str], name: str, value: Any) -> None:
    if not _is_number(value) or not math.isfinite(value):
        failures[name] = "must be a finite number"
    elif value < 0:
        failures[name] = "must be non-negative"


def _record_failures(record: Record) -> dict[str, str]:
    failures: dict[str, str] = {}

    if not isinstance(record.id, int) or isinstance(record.id, bool):
        failures["id"] = "must be an integer"
    if not isinstance(record.date, date) or isinstance(record.date, datetime):
        failures["date"] = "must be a calendar date"
    if record.scenario not in SCENARIOS:
        failures["scenario"] = f"must be one of {', '.join(SCENARIOS)}"
    for name in ("product", "region"):
        value = getattr(record, name)
        if not isinstance(value, str) or not value.strip():
            failures[name] = "must be a non-empty label"
        elif value.strip() == RESERVED_LABEL:
            failures[name] = f"must not be the reserved label {RESERVED_LABEL!r}"

    _check_rate(failures, "base_rate", record.base_rate)
    _check_rate(failures, "simulated_rate", record.simulated_rate)
    _check_rate(failures, "variance", record.variance)

    confidence = record.confidence
    if not _is_number(confidence) or not math.isfinite(confidence):
        failures["confidence"] = "must be a finite number"
    elif not 0.0 <= confidence <= 1.0:
        failures["confidence"] = "must be within [0, 1]"

    if record.category not in RISK_CATEGORIES:
        failures["category"] = f"must be one of {', '.join(RISK_CATEGORIES)}"

    volume = record.volume
    if not isinstance(volume, int) or isinstance(volume, bool):
        failures["volume"] = "must be an integer"
    elif volume < 0:
        failures["volume"] = "must be non-negative"

    return failures


@dataclass(frozen=True)
class Record:
    """One observed or simulated rate-estimation data point."""

    id: int
    date: date
    scenario: str
    product: str
    region: str
    base_rate: float
    simulated_rate: float
    confidence: float
    variance: float
    category: str
    volume: int

    def __post_init__(self) -> None:
        failures = _record_failures(self)
        if failures:
            fields = ", ".join(sorted(failures))
            raise RecordValidationError(
                f"Invalid record id={self.id!r}: {fields}",
                details={"record_id": self.id, **failures},
            )

    @property
    def date_key(self) -> str:
        return self.date.isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date_key,
            "scenario": self.scenario,
            "product": self.product,
            "region": self.region,
            "base_rate": self.base_rate,
            "simulated_rate": self.simulated_rate,
            "confidence": self.confidence,
            "variance": self.variance,
            "category": self.category,
            "volume": self.volume,
        }


def _coerce_date(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return value
    return value


def _coerce_float(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def _coerce_int(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else value
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def _unwrap_scalar(value: Any) -> Any:
    if isinstance(value, np.generic):
        return value.item()
    return value


def record_from_mapping(row: Mapping[str, Any]) -> Record:
    """Build a record from a loosely typed row, accepting camelCase rate keys."""

    normalized = {FIELD_ALIASES.get(str(key), str(key)): value for key, value in row.items()}
    missing = [name for name in Record.__dataclass_fields__ if name not in normalized]
    if missing:
        raise RecordValidationError(
            f"Record row is missing fields: {', '.join(missing)}",
            details={"missing": missing},
        )

    return Record(
        id=_coerce_int(normalized["id"]),
        date=_coerce_date(normalized["date"]),
        scenario=normalized["scenario"],
        product=normalized["product"],
        region=normalized["region"],
        base_rate=_coerce_float(normalized["base_rate"]),
        simulated_rate=_coerce_float(normalized["simulated_rate"]),
        confidence=_coerce_float(normalized["confidence"]),
        variance=_coerce_float(normalized["variance"]),
        category=normalized["category"],
        volume=_coerce_int(normalized["volume"]),
    )


class RecordStore:
    """Immutable holder of a validated record set."""

    def __init__(self, records: Iterable[Record]) -> None:
        loaded = tuple(records)
        seen: set[int] = set()
        duplicates: list[int] = []
        for record in loaded:
            if not isinstance(record, Record):
                raise RecordValidationError(
                    f"Record store accepts Record values, got: {type(record).__name__}"
                )
            if record.id in seen:
                duplicates.append(record.id)
            seen.add(record.id)
        if duplicates:
            raise RecordValidationError(
                f"Duplicate record ids: {', '.join(str(value) for value in sorted(set(duplicates)))}",
                details={"duplicate_ids": sorted(set(duplicates))},
            )

        self._records = loaded
        self._fingerprint = self._compute_fingerprint(loaded)
        LOGGER.info(
            "record store loaded rows=%s fingerprint=%s", len(loaded), self._fingerprint[:12]
        )

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, Any]]) -> RecordStore:
        records: list[Record] = []
        for row_index, row in enumerate(rows):
            try:
                records.append(record_from_mapping(row))
            except RecordValidationError as exc:
                raise RecordValidationError(
                    f"Row {row_index}: {exc}",
                    details={"row_index": row_index, **exc.details},
                ) from exc
        return cls(records)

    @classmethod
    def from_frame(cls, dataframe: pd.DataFrame) -> RecordStore:
        if dataframe.empty:
            return cls(())
        frame = dataframe.rename(columns=FIELD_ALIASES)
        rows = [
            {key: _unwrap_scalar(value) for key, value in row.items()}
            for row in frame.to_dict(orient="records")
        ]
        return cls.from_rows(rows)

    @staticmethod
    def _compute_fingerprint(records: tuple[Record, ...]) -> str:
        digest = hashlib.sha256()
        for record in records:
            digest.update(json.dumps(record.to_dict(), sort_keys=True).encode("utf-8"))
            digest.update(b"\n")
        return digest.hexdigest()

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    @property
    def fingerprint(self) -> str:
        return self._fingerprint

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)
