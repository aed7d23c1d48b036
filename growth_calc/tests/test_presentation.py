from __future__ import annotations

from datetime import date, datetime

import pytest

from growth_calc.config import Settings
from growth_calc.core.growth import simulate_growth
from growth_calc.core.presentation import (
    ChartSettings,
    CurrencyFormatter,
    DateFormatter,
    Presentation,
    build_chart_payload,
    build_summary,
)
from growth_calc.schemas.growth import SimulationInput


@pytest.fixture()
def result():
    params = SimulationInput(
        starting_amount=500,
        annual_rate=2,
        compound_frequency="weekly",
        deposit_amount=50,
        deposit_frequency="weekly",
        time_value=2,
        time_unit="weeks",
    )
    return simulate_growth(params, start_date=date(2024, 1, 1))


@pytest.mark.parametrize(
    "value, expected",
    [
        (1234.5, "CA$1,234.50"),
        (0, "CA$0.00"),
        (-12, "-CA$12.00"),
        (1_000_000, "CA$1,000,000.00"),
        (-0.001, "CA$0.00"),
    ],
)
def test_currency_formatter(value, expected):
    assert CurrencyFormatter().format(value) == expected


def test_currency_formatter_respects_symbol_and_decimals():
    assert CurrencyFormatter(currency="USD", symbol="$", decimals=0).format(1999.6) == "$2,000"


def test_date_formatter_patterns():
    assert DateFormatter().format(date(2026, 10, 5)) == "10/5/2026"
    assert DateFormatter(pattern="{year}-{mm}-{dd}").format(datetime(2026, 3, 7, 15)) == "2026-03-07"
    assert DateFormatter(pattern="{dd}.{mm}.{year}").format(date(2026, 12, 24)) == "24.12.2026"


def test_chart_payload_carries_full_series(result):
    chart = build_chart_payload(result, CurrencyFormatter(), ChartSettings())

    assert chart["type"] == "line"
    assert chart["data"]["labels"] == list(result.labels)
    dataset = chart["data"]["datasets"][0]
    assert dataset["data"] == list(result.series)
    assert dataset["label"] == "Balance"
    assert dataset["pointRadius"] == 0
    assert chart["options"]["plugins"]["legend"]["display"] is False
    assert chart["options"]["scales"]["x"]["ticks"]["maxTicksLimit"] == 8

    ticks = chart["options"]["scales"]["y"]["ticks"]
    assert len(ticks) == 8
    assert ticks[0]["value"] == min(result.series)
    assert ticks[-1]["value"] == pytest.approx(max(result.series))
    assert ticks[0]["label"].startswith("CA$")


def test_chart_payload_flat_series_has_single_tick():
    params = SimulationInput(starting_amount=10, time_value=1, time_unit="weeks")
    flat = simulate_growth(params, start_date=date(2024, 1, 1))

    chart = build_chart_payload(flat, CurrencyFormatter(), ChartSettings(max_ticks=5))
    assert chart["options"]["scales"]["y"]["ticks"] == [{"value": 10.0, "label": "CA$10.00"}]


def test_summary_texts(result):
    summary = build_summary(result, CurrencyFormatter(), DateFormatter())

    assert summary.end_date_text == "1/15/2024"
    assert summary.final_balance_text == CurrencyFormatter().format(result.final_balance)
    assert summary.total_deposits_text == "CA$150.00"
    assert summary.headline == f"Projected balance of {summary.final_balance_text} on 1/15/2024"
    assert summary.model_dump(by_alias=True)["finalBalanceText"] == summary.final_balance_text


def test_presentation_from_settings():
    presentation = Presentation.from_settings(
        Settings(currency="EUR", currency_symbol="€", date_pattern="{dd}/{mm}/{year}")
    )
    assert presentation.currency.format(3) == "€3.00"
    assert presentation.dates.format(date(2024, 2, 9)) == "09/02/2024"
    assert presentation.chart == ChartSettings()


def test_chart_payload_can_leave_series_to_the_caller(result):
    chart = build_chart_payload(result, CurrencyFormatter(), ChartSettings(), include_series=False)

    assert chart["data"]["labels"] == []
    assert chart["data"]["datasets"][0]["data"] == []
    ticks = chart["options"]["scales"]["y"]["ticks"]
    assert ticks[0]["value"] == min(result.series)
    assert ticks[-1]["value"] == pytest.approx(max(result.series))
