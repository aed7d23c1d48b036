"""Data contracts for the growth projection."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from growth_calc.core.schedule import EventFrequency, TimeUnit

LOGGER = logging.getLogger(__name__)

# keeps the end date inside the range datetime.date can represent
MAX_TIME_VALUE = 1000
# longest horizon (MAX_TIME_VALUE years) plus a month of compounding-anchor headroom
LATEST_START_DATE = date(date.max.year - MAX_TIME_VALUE - 1, 12, 31)


def parse_number(value: Any, fallback: float = 0.0) -> float:
    """Coerce form input to a finite float, or return ``fallback``."""
    if value is None or isinstance(value, bool):
        return fallback
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        LOGGER.debug("Could not parse %r as a number; using %s", value, fallback)
        return fallback
    if not math.isfinite(parsed):
        return fallback
    return parsed


def _normalize_tag(value: Any, default: str) -> str:
    """Trim and lower-case a cadence or unit tag.

    Matching is case-insensitive, so "WEEKLY" is weekly here; a browser form
    that compared tags verbatim would have sent such a variant down the
    monthly fallback.
    """
    if value is None:
        return default
    tag = str(value).strip().lower()
    return tag or default


class SimulationInput(BaseModel):
    """Inputs for one projection run.

    Every scalar is coerced rather than rejected: unparsable or non-finite
    numbers fall back to their default, amounts and rate are clamped at zero
    and the duration is floored to a whole number of at least one.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    starting_amount: float = Field(0.0, description="Balance on the start date.")
    annual_rate: float = Field(
        0.0,
        description="Percent applied in full on every compounding day (10 means x1.10).",
    )
    compound_frequency: str = Field(EventFrequency.MONTHLY.value)
    deposit_amount: float = Field(0.0, description="Amount added on every deposit day.")
    deposit_frequency: str = Field(EventFrequency.MONTHLY.value)
    time_value: int = Field(1, description="Length of the horizon in time_unit.")
    time_unit: str = Field(TimeUnit.YEARS.value)
    start_date: Optional[date] = Field(None, description="Defaults to today.")

    @field_validator("starting_amount", "annual_rate", "deposit_amount", mode="before")
    @classmethod
    def _non_negative_amount(cls, value: Any) -> float:
        return max(0.0, parse_number(value, 0.0))

    @field_validator("time_value", mode="before")
    @classmethod
    def _positive_whole_duration(cls, value: Any) -> int:
        return min(MAX_TIME_VALUE, max(1, math.floor(parse_number(value, 1.0))))

    @field_validator("compound_frequency", "deposit_frequency", mode="before")
    @classmethod
    def _frequency_tag(cls, value: Any) -> str:
        return _normalize_tag(value, EventFrequency.MONTHLY.value)

    @field_validator("time_unit", mode="before")
    @classmethod
    def _time_unit_tag(cls, value: Any) -> str:
        return _normalize_tag(value, TimeUnit.YEARS.value)

    @field_validator("start_date", mode="before")
    @classmethod
    def _blank_start_date(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("start_date")
    @classmethod
    def _start_date_in_range(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > LATEST_START_DATE:
            raise ValueError(f"start date must be on or before {LATEST_START_DATE.isoformat()}")
        return value


class SimulationResult(BaseModel):
    """Outcome of a single run: one label and one rounded balance per simulated day."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    labels: Tuple[str, ...]
    series: Tuple[float, ...]
    starting_amount: float
    final_balance: float
    total_deposits: float = 0.0
    deposit_count: int = 0
    compound_count: int = 0

    @property
    def interest_earned(self) -> float:
        return self.final_balance - self.starting_amount - self.total_deposits


class SimulationSummary(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    final_balance_text: str
    end_date_text: str
    total_deposits_text: str
    interest_earned_text: str
    headline: str


class GrowthResponse(BaseModel):
    """Body returned by the growth endpoint."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    labels: List[str]
    series: List[float]
    final_balance: float
    start_date: date
    end_date: date
    total_deposits: float
    interest_earned: float
    deposit_count: int = Field(..., ge=0)
    compound_count: int = Field(..., ge=0)
    summary: SimulationSummary
    chart: Dict[str, Any]
