"""Day-by-day balance simulation."""

from __future__ import annotations

import logging
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from functools import partial
from itertools import accumulate
from typing import NamedTuple, Optional

from growth_calc.core.presentation import DateFormatter
from growth_calc.core.schedule import (
    days_between,
    get_compound_anchor,
    get_end_date,
    is_event_day,
    iter_days,
    normalize_date,
)
from growth_calc.schemas.growth import SimulationInput, SimulationResult

LOGGER = logging.getLogger(__name__)


class DayState(NamedTuple):
    """Running totals after a simulated day has been applied."""

    day: Optional[date]
    balance: float
    total_deposits: float = 0.0
    deposit_count: int = 0
    compound_count: int = 0


def round_cents(value: float) -> float:
    """Round half-up to cents on the exact binary value (0.125 -> 0.13)."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def apply_interest(balance: float, rate_per_period: float) -> float:
    """Apply ``rate_per_period`` percent once; non-positive rates leave the balance alone."""
    if rate_per_period <= 0:
        return balance
    return balance * (1 + rate_per_period / 100)


def _advance(
    state: DayState,
    day: date,
    *,
    params: SimulationInput,
    start_date: date,
    compound_anchor: date,
) -> DayState:
    balance = state.balance
    total_deposits = state.total_deposits
    deposit_count = state.deposit_count
    compound_count = state.compound_count

    # deposit lands before that day's compounding
    if params.deposit_amount > 0 and is_event_day(day, start_date, params.deposit_frequency):
        balance += params.deposit_amount
        total_deposits += params.deposit_amount
        deposit_count += 1

    if params.annual_rate > 0 and is_event_day(day, compound_anchor, params.compound_frequency):
        balance = apply_interest(balance, params.annual_rate)
        compound_count += 1

    return DayState(day, balance, total_deposits, deposit_count, compound_count)


def simulate_growth(
    params: SimulationInput,
    *,
    start_date: Optional[date] = None,
    date_formatter: Optional[DateFormatter] = None,
) -> SimulationResult:
    """Project the balance from the start date through the end date, inclusive.

    Order of operations per day:
      1) Add the deposit if the day matches ``deposit_frequency`` (anchored on the start date).
      2) Multiply by ``1 + annual_rate / 100`` if the day matches ``compound_frequency``
         (anchored on the compounding anchor).
      3) Record the day's label and the balance rounded to cents.

    The returned ``final_balance`` is the unrounded running balance.
    """
    date_formatter = date_formatter or DateFormatter()
    start = normalize_date(start_date or params.start_date or date.today())
    end = get_end_date(start, params.time_value, params.time_unit)
    compound_anchor = get_compound_anchor(start, params.compound_frequency)

    step = partial(_advance, params=params, start_date=start, compound_anchor=compound_anchor)
    initial = DayState(day=None, balance=params.starting_amount)
    days = list(accumulate(iter_days(start, end), step, initial=initial))[1:]

    final = days[-1]
    result = SimulationResult(
        start_date=start,
        end_date=end,
        labels=tuple(date_formatter.format(state.day) for state in days),
        series=tuple(round_cents(state.balance) for state in days),
        starting_amount=params.starting_amount,
        final_balance=final.balance,
        total_deposits=final.total_deposits,
        deposit_count=final.deposit_count,
        compound_count=final.compound_count,
    )
    LOGGER.debug(
        "Simulated %d days (%s -> %s): %d deposits, %d compounding events",
        days_between(start, end) + 1,
        start,
        end,
        result.deposit_count,
        result.compound_count,
    )
    return result
