"""
Pytest configuration and shared fixtures for the property planner tests.
"""

import os
from unittest.mock import patch

import pytest

from property_planner import create_app
from property_planner.config import reset_global_settings
from property_planner.models.scenario import ScenarioInputs


@pytest.fixture(autouse=True)
def app_environment():
    """Provide a valid environment and fresh global settings for each test."""
    reset_global_settings()
    with patch.dict(
        os.environ,
        {"SECRET_KEY": "test-secret-key-123", "APP_ENV": "testing"},
        clear=True,
    ):
        yield
    reset_global_settings()


@pytest.fixture
def client():
    """Flask test client."""
    app = create_app()
    return app.test_client()


@pytest.fixture
def default_inputs():
    """The published default scenario: 800k purchase, 160k deposit, 6% loan."""
    return ScenarioInputs()


@pytest.fixture
def flat_inputs():
    """A cash purchase with every growth rate and holding cost at zero."""
    return ScenarioInputs(
        property_appreciation_rate=0,
        fund_return_rate=0,
        rent_growth_rate=0,
        mortgage_interest_rate=0,
        purchase_price=500_000,
        down_payment=500_000,
        weekly_rent_income=0,
        annual_maintenance_cost=0,
        annual_insurance_cost=0,
    )
