"""Formatting and chart payloads for a finished projection.

Nothing here is global: the app factory builds one set of formatters from
its settings and hands them to the routes, and tests build their own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from growth_calc.config import Settings
from growth_calc.core.schedule import DateLike, normalize_date
from growth_calc.schemas.growth import SimulationResult, SimulationSummary


@dataclass(frozen=True)
class CurrencyFormatter:
    currency: str = "CAD"
    symbol: str = "CA$"
    decimals: int = 2

    def format(self, value: float) -> str:
        """Render ``value`` as e.g. ``CA$1,234.56`` (``-CA$12.00`` when negative)."""
        rounded = round(value, self.decimals)
        sign = "-" if rounded < 0 else ""
        return f"{sign}{self.symbol}{abs(rounded):,.{self.decimals}f}"


@dataclass(frozen=True)
class DateFormatter:
    """Date labels from a ``str.format`` pattern.

    Available fields: ``year``, ``month``, ``day`` and the zero-padded
    ``mm`` / ``dd``. The default reads like a US browser locale (10/5/2026).
    """

    pattern: str = "{month}/{day}/{year}"

    def format(self, value: DateLike) -> str:
        value = normalize_date(value)
        return self.pattern.format(
            year=value.year,
            month=value.month,
            day=value.day,
            mm=f"{value.month:02d}",
            dd=f"{value.day:02d}",
        )


@dataclass(frozen=True)
class ChartSettings:
    label: str = "Balance"
    border_color: str = "#2f6fed"
    background_color: str = "rgba(47, 111, 237, 0.15)"
    fill: bool = True
    tension: float = 0.2
    point_radius: int = 0
    max_ticks: int = 8


def _tick_values(series: List[float], count: int) -> List[float]:
    low, high = min(series), max(series)
    if count < 2 or high == low:
        return [low]
    step = (high - low) / (count - 1)
    return [low + step * index for index in range(count)]


def build_chart_payload(
    result: SimulationResult,
    currency_formatter: CurrencyFormatter,
    settings: ChartSettings,
    include_series: bool = True,
) -> Dict[str, Any]:
    """Line-chart config (Chart.js shape) for the balance series.

    With ``include_series=False`` the labels and dataset values are left empty
    for a client that already holds them; the y ticks still span the series.
    """
    series = list(result.series)
    y_ticks = [
        {"value": round(value, 2), "label": currency_formatter.format(value)}
        for value in _tick_values(series, settings.max_ticks)
    ]
    return {
        "type": "line",
        "data": {
            "labels": list(result.labels) if include_series else [],
            "datasets": [
                {
                    "label": settings.label,
                    "data": series if include_series else [],
                    "borderColor": settings.border_color,
                    "backgroundColor": settings.background_color,
                    "fill": settings.fill,
                    "tension": settings.tension,
                    "pointRadius": settings.point_radius,
                }
            ],
        },
        "options": {
            "responsive": True,
            "plugins": {"legend": {"display": False}},
            "scales": {
                "x": {"ticks": {"maxTicksLimit": settings.max_ticks}},
                "y": {"ticks": y_ticks},
            },
        },
    }


def build_summary(
    result: SimulationResult,
    currency_formatter: CurrencyFormatter,
    date_formatter: DateFormatter,
) -> SimulationSummary:
    final_text = currency_formatter.format(result.final_balance)
    end_text = date_formatter.format(result.end_date)
    return SimulationSummary(
        final_balance_text=final_text,
        end_date_text=end_text,
        total_deposits_text=currency_formatter.format(result.total_deposits),
        interest_earned_text=currency_formatter.format(result.interest_earned),
        headline=f"Projected balance of {final_text} on {end_text}",
    )



@dataclass(frozen=True)
class Presentation:
    """Formatters shared by every request of one app instance."""

    currency: CurrencyFormatter
    dates: DateFormatter
    chart: ChartSettings

    @classmethod
    def from_settings(cls, settings: Settings) -> "Presentation":
        return cls(
            currency=CurrencyFormatter(currency=settings.currency, symbol=settings.currency_symbol),
            dates=DateFormatter(pattern=settings.date_pattern),
            chart=ChartSettings(),
        )
