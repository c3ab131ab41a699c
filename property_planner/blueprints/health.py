"""Liveness check for the projection service."""

from flask import Blueprint, Response, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.route("/healthz")
def health_check() -> Response:
    """Health check endpoint.

    Returns:
        JSON response with the service name and status
    """
    return jsonify({"service": "property-planner", "status": "ok"})
