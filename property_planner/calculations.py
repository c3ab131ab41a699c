"""
Public calculation functions.

Thin entry points over the model classes, using the Victorian 2024 tables and
the default loan constants. Rates are percentages (6 means 6%).
"""

from typing import Optional

from property_planner.models.cash_flow import CashFlowCalculator
from property_planner.models.constants import LOAN_CONSTANTS
from property_planner.models.mortgage_amortization import MortgageCalculator
from property_planner.models.projection import ProjectionEngine, ProjectionResult
from property_planner.models.scenario import ScenarioInputs
from property_planner.models.stamp_duty import StampDutyCalculator
from property_planner.models.tax_brackets import VIC_LAND_TAX_TABLE

_stamp_duty = StampDutyCalculator()
_cash_flow = CashFlowCalculator(LOAN_CONSTANTS)
_engine = ProjectionEngine(LOAN_CONSTANTS, VIC_LAND_TAX_TABLE, _stamp_duty)


def compute_land_tax(land_value: float) -> float:
    """Annual land tax on an assessed land value."""
    return VIC_LAND_TAX_TABLE.evaluate(land_value)


def compute_stamp_duty(purchase_price: float, is_first_time_buyer: bool = False) -> float:
    """Stamp duty on a purchase, rounded to whole dollars."""
    return _stamp_duty.calculate(purchase_price, is_first_time_buyer)


def compute_monthly_mortgage_payment(
    principal: float, annual_rate_pct: float, term_years: Optional[int] = None
) -> float:
    """Level monthly payment, defaulting to the standard loan term."""
    if term_years is None:
        term_years = LOAN_CONSTANTS.default_loan_term_years
    return MortgageCalculator.calculate_monthly_payment(
        principal, annual_rate_pct, term_years
    )


def compute_net_monthly_cash_flow(
    weekly_rent: float,
    monthly_payment: float,
    annual_maintenance: float,
    annual_land_tax: float,
    annual_insurance: float,
) -> float:
    """Net monthly cash flow, converting weekly rent at 4.33 weeks per month."""
    return _cash_flow.net_monthly_cash_flow(
        weekly_rent, monthly_payment, annual_maintenance, annual_land_tax, annual_insurance
    )


def generate_projection(inputs: ScenarioInputs) -> ProjectionResult:
    """Project property and fund equity for every year of the horizon."""
    return _engine.project(inputs)
