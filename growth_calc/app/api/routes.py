"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from growth_calc.config import EXTENSION_KEY
from growth_calc.core.growth import simulate_growth
from growth_calc.core.ping import get_ping_message
from growth_calc.core.presentation import Presentation, build_chart_payload, build_summary
from growth_calc.schemas.growth import GrowthResponse, SimulationInput
from growth_calc.schemas.ping import PingResponse

LOGGER = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    detail = exc.errors(include_url=False, include_context=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message=get_ping_message())
    return jsonify(response.model_dump())


def _project(params: SimulationInput) -> Dict[str, Any]:
    presentation: Presentation = current_app.extensions[EXTENSION_KEY]
    result = simulate_growth(params, date_formatter=presentation.dates)
    LOGGER.info(
        "Projected %s %s from %s: final balance %.2f",
        params.time_value,
        params.time_unit,
        result.start_date.isoformat(),
        result.final_balance,
    )
    response = GrowthResponse(
        labels=list(result.labels),
        series=list(result.series),
        final_balance=result.final_balance,
        start_date=result.start_date,
        end_date=result.end_date,
        total_deposits=result.total_deposits,
        interest_earned=result.interest_earned,
        deposit_count=result.deposit_count,
        compound_count=result.compound_count,
        summary=build_summary(result, presentation.currency, presentation.dates),
        chart=build_chart_payload(
            result, presentation.currency, presentation.chart, include_series=False
        ),
    )
    return response.model_dump(mode="json", by_alias=True)


@api_bp.post("/calc/growth")
def growth() -> Any:
    """Project a balance from the submitted form values."""
    raw_payload = request.get_json(force=True, silent=False)
    params = SimulationInput.model_validate(raw_payload)
    return jsonify(_project(params))


@api_bp.get("/calc/growth")
def growth_from_query() -> Any:
    """Same projection driven by query parameters; every field is optional."""
    params = SimulationInput.model_validate(request.args.to_dict())
    return jsonify(_project(params))
