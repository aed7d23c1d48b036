"""Calendar arithmetic and event-day predicates used by the growth simulator."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Iterator, Union

DateLike = Union[date, datetime]


class EventFrequency(str, Enum):
    """Cadence tags for deposits and compounding."""

    WEEKDAY = "weekday"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    DAILY = "daily"


class TimeUnit(str, Enum):
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"


def normalize_date(value: DateLike) -> date:
    """Drop the time-of-day component, leaving a plain calendar date."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_days(value: DateLike, days: int) -> date:
    return normalize_date(value) + timedelta(days=days)


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if ``end`` is earlier).

    Only the (year, month, day) parts take part, so time zones and DST
    transitions never shift the count.
    """
    return normalize_date(end).toordinal() - normalize_date(start).toordinal()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_months(value: DateLike, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length.

    Jan 31 + 1 month is the last day of February, never early March.
    """
    value = normalize_date(value)
    target_index = (value.month - 1) + months
    target_year = value.year + target_index // 12
    target_month = target_index % 12 + 1
    day = min(value.day, days_in_month(target_year, target_month))
    return date(target_year, target_month, day)


def add_years(value: DateLike, years: int) -> date:
    return add_months(value, years * 12)


def is_weekday(value: DateLike) -> bool:
    return normalize_date(value).weekday() < 5


def is_weekly_event(value: DateLike, anchor: DateLike) -> bool:
    return days_between(anchor, value) % 7 == 0


def is_monthly_event(value: DateLike, anchor: DateLike) -> bool:
    """Match the anchor's day of month; a 31st anchor lands on the last day of short months."""
    value = normalize_date(value)
    target_day = min(normalize_date(anchor).day, days_in_month(value.year, value.month))
    return value.day == target_day


def is_event_day(value: DateLike, anchor: DateLike, frequency: str) -> bool:
    # unknown tags fall through to the monthly rule
    if frequency == EventFrequency.WEEKDAY:
        return is_weekday(value)
    if frequency == EventFrequency.WEEKLY:
        return is_weekly_event(value, anchor)
    return is_monthly_event(value, anchor)


def get_end_date(start: DateLike, time_value: int, time_unit: str) -> date:
    if time_unit == TimeUnit.WEEKS:
        return add_days(start, time_value * 7)
    if time_unit == TimeUnit.MONTHS:
        return add_months(start, time_value)
    return add_years(start, time_value)


def get_compound_anchor(start: DateLike, compound_frequency: str) -> date:
    """First compounding reference date for the given cadence."""
    if compound_frequency == EventFrequency.WEEKLY:
        return add_days(start, 7)
    if compound_frequency == EventFrequency.MONTHLY:
        return add_months(start, 1)
    return normalize_date(start)


def iter_days(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end`` inclusive."""
    for offset in range(days_between(start, end) + 1):
        yield add_days(start, offset)
