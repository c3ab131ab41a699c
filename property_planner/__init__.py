"""Property versus Fund Planner Flask Application Factory."""

from typing import Optional

from flask import Flask

from property_planner.calculations import (
    compute_land_tax,
    compute_monthly_mortgage_payment,
    compute_net_monthly_cash_flow,
    compute_stamp_duty,
    generate_projection,
)
from property_planner.config import Settings, get_global_settings
from property_planner.models import ProjectionResult, ScenarioInputs, YearlyProjectionPoint
from property_planner.services import ProjectionService

__all__ = [
    "create_app",
    "compute_land_tax",
    "compute_monthly_mortgage_payment",
    "compute_net_monthly_cash_flow",
    "compute_stamp_duty",
    "generate_projection",
    "ProjectionResult",
    "ScenarioInputs",
    "YearlyProjectionPoint",
]


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        settings: Settings to use instead of the global environment settings

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    if settings is None:
        settings = get_global_settings()
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = settings.app_env == "development"
    app.logger.setLevel(settings.log_level)

    # One service per app so its cache lives as long as the app
    app.extensions["projection_service"] = ProjectionService(
        cache_size=settings.projection_cache_size
    )

    # Register blueprints
    from property_planner.blueprints.health import health_bp
    from property_planner.blueprints.projection import projection_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(projection_bp)

    return app
