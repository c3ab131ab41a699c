"""
Year-by-year projection of property equity against a fund investment.

The property side buys with a mortgage and rents the place out. The fund side
starts with the deposit plus the stamp duty that would otherwise have been
paid, and each year receives whatever the property costs to hold net of rent.
A negative contribution means the property pays for itself and the surplus is
withdrawn from the fund, keeping both sides on the same cash outlay.

Each yearly step runs in a fixed order:

1. property value appreciates
2. twelve monthly mortgage payments are applied (fewer once the term ends)
3. land tax is reassessed on the new value
4. the year's holding cost and fund contribution are worked out with the
   rent of the year just ended
5. the fund grows on its prior balance, then receives the contribution
6. rent grows for the following year
"""

from typing import Dict, List, Literal, Optional

import numpy as np
import pandas as pd
from numpy.typing import NDArray
from pydantic import BaseModel, Field

from .cash_flow import CashFlowCalculator
from .constants import LOAN_CONSTANTS, LoanConstants
from .mortgage_amortization import MortgageCalculator
from .scenario import ScenarioInputs
from .stamp_duty import StampDutyCalculator
from .tax_brackets import VIC_LAND_TAX_TABLE, TaxBracketTable


class YearlyProjectionPoint(BaseModel):
    """Asset positions at the end of one projection year."""

    year: int = Field(..., ge=0, description="Years since purchase")
    house_value: float = Field(..., ge=0, description="Market value of the property")
    house_equity: float = Field(
        ..., ge=0, description="Property value less outstanding loan, floored at 0"
    )
    fund_equity: float = Field(
        ..., description="Fund balance (negative if the fund is underwater)"
    )
    net_annual_cost: float = Field(
        ..., description="Holding cost less rent, redirected into the fund"
    )
    loan_balance: float = Field(..., ge=0, description="Outstanding mortgage")


class ProjectionResult(BaseModel):
    """Ordered projection points, year 0 through the horizon."""

    points: List[YearlyProjectionPoint] = Field(
        ..., min_length=1, description="One point per year, year 0 first"
    )

    @property
    def years(self) -> int:
        return self.points[-1].year

    @property
    def final_point(self) -> YearlyProjectionPoint:
        return self.points[-1]

    @property
    def better_option(self) -> Literal["property", "fund", "tie"]:
        final = self.final_point
        if final.house_equity > final.fund_equity:
            return "property"
        if final.fund_equity > final.house_equity:
            return "fund"
        return "tie"

    def as_arrays(self) -> Dict[str, NDArray[np.float64]]:
        """Column arrays keyed by field name, indexed by year."""
        fields = list(YearlyProjectionPoint.model_fields)
        return {
            name: np.array(
                [getattr(point, name) for point in self.points], dtype=np.float64
            )
            for name in fields
        }

    def to_dataframe(self) -> pd.DataFrame:
        """Projection as a DataFrame indexed by year."""
        frame = pd.DataFrame([point.model_dump() for point in self.points])
        return frame.set_index("year")

    def crossover_year(self) -> Optional[int]:
        """First year the property's equity is at least the fund's, if any."""
        arrays = self.as_arrays()
        ahead = arrays["house_equity"] >= arrays["fund_equity"]
        if not ahead.any():
            return None
        return int(arrays["year"][np.argmax(ahead)])


class ProjectionEngine:
    """Runs the yearly property versus fund recurrence for a scenario."""

    def __init__(
        self,
        constants: LoanConstants = LOAN_CONSTANTS,
        land_tax_table: TaxBracketTable = VIC_LAND_TAX_TABLE,
        stamp_duty_calculator: Optional[StampDutyCalculator] = None,
    ) -> None:
        self.constants = constants
        self.land_tax_table = land_tax_table
        self.stamp_duty_calculator = stamp_duty_calculator or StampDutyCalculator()
        self.cash_flow = CashFlowCalculator(constants)

    def land_tax_for(self, house_value: float) -> float:
        """Land tax assessed on the land share of the property value."""
        return self.land_tax_table.evaluate(house_value * self.constants.land_value_ratio)

    def project(self, inputs: ScenarioInputs) -> ProjectionResult:
        """
        Project both strategies over the scenario horizon.

        Args:
            inputs: Validated scenario assumptions

        Returns:
            ProjectionResult with horizon + 1 points
        """
        months_per_year = self.constants.months_per_year
        term_months = inputs.loan_term_years * months_per_year

        monthly_payment = MortgageCalculator.calculate_monthly_payment(
            inputs.loan_amount, inputs.mortgage_interest_rate, inputs.loan_term_years
        )
        monthly_rate = MortgageCalculator.monthly_rate(inputs.mortgage_interest_rate)
        stamp_duty = self.stamp_duty_calculator.calculate(
            inputs.purchase_price, inputs.is_first_time_buyer
        )

        house_value = inputs.purchase_price
        loan_balance = inputs.loan_amount
        fund_value = inputs.down_payment + stamp_duty
        annual_rent = self.cash_flow.annual_rent(inputs.weekly_rent_income)

        # Year 0 is the position at purchase: nothing has grown or been repaid
        opening_cost = (
            self.cash_flow.annual_house_cost(
                monthly_payment,
                inputs.annual_maintenance_cost,
                self.land_tax_for(house_value),
                inputs.annual_insurance_cost,
            )
            - annual_rent
        )
        points = [
            self._point(0, house_value, loan_balance, fund_value, opening_cost)
        ]

        months_elapsed = 0
        for year in range(1, inputs.projection_years + 1):
            house_value *= 1 + inputs.property_appreciation_decimal

            months_paid = max(0, min(months_per_year, term_months - months_elapsed))
            loan_balance = MortgageCalculator.advance_months(
                loan_balance, monthly_payment, monthly_rate, months_paid
            )
            months_elapsed += months_per_year

            annual_house_cost = self.cash_flow.annual_house_cost(
                monthly_payment,
                inputs.annual_maintenance_cost,
                self.land_tax_for(house_value),
                inputs.annual_insurance_cost,
                months_paid=months_paid,
            )
            contribution = annual_house_cost - annual_rent

            fund_value = fund_value * (1 + inputs.fund_return_decimal) + contribution
            annual_rent *= 1 + inputs.rent_growth_decimal

            points.append(
                self._point(year, house_value, loan_balance, fund_value, contribution)
            )

        return ProjectionResult(points=points)

    @staticmethod
    def _point(
        year: int,
        house_value: float,
        loan_balance: float,
        fund_value: float,
        net_annual_cost: float,
    ) -> YearlyProjectionPoint:
        return YearlyProjectionPoint(
            year=year,
            house_value=house_value,
            house_equity=MortgageCalculator.calculate_equity(house_value, loan_balance),
            fund_equity=fund_value,
            net_annual_cost=net_annual_cost,
            loan_balance=loan_balance,
        )
