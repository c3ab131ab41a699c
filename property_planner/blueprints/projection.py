"""
Projection blueprint.

JSON endpoints over the calculation engine: scenario defaults, the full
property versus fund projection and the two standalone tax calculators.
"""

import json
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from property_planner.calculations import compute_land_tax, compute_stamp_duty
from property_planner.models.scenario import ScenarioInputs
from property_planner.services.projection_service import ProjectionService

projection_bp = Blueprint("projection", __name__, url_prefix="/api")


class StampDutyRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    purchase_price: float = Field(..., ge=0)
    is_first_time_buyer: bool = False


class LandTaxRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    land_value: float = Field(..., ge=0)


def _validation_response(error: ValidationError) -> Any:
    errors = json.loads(error.json(include_url=False))
    return jsonify({"error": "Invalid input", "details": errors}), 400


def _not_an_object() -> Any:
    return jsonify({"error": "Request body must be a JSON object"}), 400


def _json_body() -> Any:
    # An empty body means "all defaults"; unparseable JSON comes back as None
    if not request.get_data():
        return {}
    return request.get_json(silent=True, force=True)


@projection_bp.route("/scenario/defaults", methods=["GET"])
def scenario_defaults() -> Any:
    """Default scenario assumptions.

    Returns:
        JSON response with every ScenarioInputs field at its default
    """
    return jsonify(ScenarioInputs().model_dump()), 200


@projection_bp.route("/projection", methods=["POST"])
def run_projection() -> Any:
    """Project a scenario.

    Fields missing from the request body take their defaults.

    Returns:
        JSON response with the headline figures and yearly projection
    """
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()

    try:
        inputs = ScenarioInputs(**data)
    except ValidationError as e:
        return _validation_response(e)

    try:
        service: ProjectionService = current_app.extensions["projection_service"]
        summary = service.summarize(inputs)
    except Exception as e:
        current_app.logger.error(f"Error running projection: {str(e)}")
        return jsonify({"error": "Internal server error"}), 500

    payload = summary.model_dump()
    payload["cash_flow_positive"] = summary.cash_flow_positive
    payload["better_option"] = summary.projection.better_option
    payload["crossover_year"] = summary.projection.crossover_year()
    return jsonify(payload), 200


@projection_bp.route("/stamp-duty", methods=["POST"])
def stamp_duty() -> Any:
    """Stamp duty for a purchase price and buyer status."""
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()

    try:
        body = StampDutyRequest(**data)
    except ValidationError as e:
        return _validation_response(e)

    duty = compute_stamp_duty(body.purchase_price, body.is_first_time_buyer)
    return jsonify({"stamp_duty": duty}), 200


@projection_bp.route("/land-tax", methods=["POST"])
def land_tax() -> Any:
    """Annual land tax for a land value."""
    data = _json_body()
    if not isinstance(data, dict):
        return _not_an_object()

    try:
        body = LandTaxRequest(**data)
    except ValidationError as e:
        return _validation_response(e)

    return jsonify({"land_tax": compute_land_tax(body.land_value)}), 200
