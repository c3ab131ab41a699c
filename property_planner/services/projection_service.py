"""
Projection service.

Produces the headline figures for a scenario (stamp duty, starting fund,
mortgage payment, land tax, monthly cash flow) together with the full yearly
projection. Results are memoized per scenario; scenarios are frozen and
hashable, and the same inputs always give the same result.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field

from property_planner.models.cash_flow import CashFlowCalculator
from property_planner.models.constants import LOAN_CONSTANTS, LoanConstants
from property_planner.models.mortgage_amortization import MortgageCalculator
from property_planner.models.projection import ProjectionEngine, ProjectionResult
from property_planner.models.scenario import ScenarioInputs
from property_planner.models.stamp_duty import StampDutyCalculator, StampDutyStatus
from property_planner.models.tax_brackets import VIC_LAND_TAX_TABLE, TaxBracketTable

logger = logging.getLogger(__name__)


class ScenarioSummary(BaseModel):
    """Headline figures at purchase plus the yearly projection."""

    inputs: ScenarioInputs = Field(..., description="Scenario the figures are for")
    stamp_duty: float = Field(..., ge=0, description="Stamp duty payable")
    stamp_duty_status: StampDutyStatus = Field(
        ..., description="Which stamp duty rule applied"
    )
    loan_amount: float = Field(..., ge=0, description="Amount borrowed")
    initial_fund_amount: float = Field(
        ..., ge=0, description="Deposit plus stamp duty invested in the fund"
    )
    monthly_mortgage_payment: float = Field(
        ..., ge=0, description="Level monthly repayment"
    )
    annual_land_tax: float = Field(
        ..., ge=0, description="Land tax on the purchase price"
    )
    net_monthly_cash_flow: float = Field(
        ..., description="Rent less outgoings per month at purchase"
    )
    projection: ProjectionResult = Field(..., description="Yearly projection")

    @property
    def cash_flow_positive(self) -> bool:
        return self.net_monthly_cash_flow >= 0


class ProjectionService:
    """Service for building scenario summaries."""

    def __init__(
        self,
        cache_size: int = 128,
        constants: LoanConstants = LOAN_CONSTANTS,
        land_tax_table: TaxBracketTable = VIC_LAND_TAX_TABLE,
        stamp_duty_calculator: Optional[StampDutyCalculator] = None,
    ) -> None:
        """Initialize the projection service.

        Args:
            cache_size: Number of distinct scenarios to keep results for
            constants: Loan and rent conversion constants
            land_tax_table: Land tax bracket table
            stamp_duty_calculator: Stamp duty calculator with concession taper
        """
        self.logger = logging.getLogger(__name__)
        self.constants = constants
        self.land_tax_table = land_tax_table
        self.stamp_duty = stamp_duty_calculator or StampDutyCalculator()
        self.cash_flow = CashFlowCalculator(constants)
        self.engine = ProjectionEngine(constants, land_tax_table, self.stamp_duty)
        self._cached_summary = lru_cache(maxsize=cache_size)(self._build_summary)

    def summarize(self, inputs: ScenarioInputs) -> ScenarioSummary:
        """Return the summary for a scenario, reusing a cached result if present.

        Args:
            inputs: Validated scenario assumptions

        Returns:
            ScenarioSummary for the scenario
        """
        hits_before = self._cached_summary.cache_info().hits
        summary = self._cached_summary(inputs)
        if self._cached_summary.cache_info().hits > hits_before:
            self.logger.debug("Reused cached projection for scenario")
        return summary

    def clear_cache(self) -> None:
        self._cached_summary.cache_clear()

    def _build_summary(self, inputs: ScenarioInputs) -> ScenarioSummary:
        self.logger.info(
            f"Projecting {inputs.projection_years} years for purchase price "
            f"{inputs.purchase_price:,.0f} with deposit {inputs.down_payment:,.0f}"
        )

        stamp_duty = self.stamp_duty.calculate(
            inputs.purchase_price, inputs.is_first_time_buyer
        )
        monthly_payment = MortgageCalculator.calculate_monthly_payment(
            inputs.loan_amount, inputs.mortgage_interest_rate, inputs.loan_term_years
        )
        annual_land_tax = self.engine.land_tax_for(inputs.purchase_price)
        net_monthly = self.cash_flow.net_monthly_cash_flow(
            inputs.weekly_rent_income,
            monthly_payment,
            inputs.annual_maintenance_cost,
            annual_land_tax,
            inputs.annual_insurance_cost,
        )
        projection = self.engine.project(inputs)

        final = projection.final_point
        self.logger.info(
            f"Year {final.year}: property equity {final.house_equity:,.0f}, "
            f"fund equity {final.fund_equity:,.0f}"
        )

        return ScenarioSummary(
            inputs=inputs,
            stamp_duty=stamp_duty,
            stamp_duty_status=self.stamp_duty.status(
                inputs.purchase_price, inputs.is_first_time_buyer
            ),
            loan_amount=inputs.loan_amount,
            initial_fund_amount=inputs.down_payment + stamp_duty,
            monthly_mortgage_payment=monthly_payment,
            annual_land_tax=annual_land_tax,
            net_monthly_cash_flow=net_monthly,
            projection=projection,
        )
