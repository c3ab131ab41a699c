"""
Pydantic model for the inputs of a property versus fund comparison.

Rates are entered as percentages (6 means 6%) and exposed as decimals through
the ``*_decimal`` properties. Instances are frozen so a scenario can be used
as a cache key.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import LOAN_CONSTANTS


class ScenarioInputs(BaseModel):
    """Economic assumptions for one projection run."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    # Annual rates, percent
    property_appreciation_rate: float = Field(
        default=5, ge=0, description="Annual property value growth (%)"
    )
    fund_return_rate: float = Field(
        default=8, ge=0, description="Annual fund return (%)"
    )
    rent_growth_rate: float = Field(
        default=3, ge=0, description="Annual rent growth (%)"
    )
    mortgage_interest_rate: float = Field(
        default=6, ge=0, description="Fixed mortgage interest rate (%)"
    )

    # Purchase
    purchase_price: float = Field(
        default=800_000, gt=0, description="Property purchase price"
    )
    down_payment: float = Field(default=160_000, ge=0, description="Deposit paid")
    is_first_time_buyer: bool = Field(
        default=False, description="Eligible for the first home buyer concession"
    )

    # Holding
    weekly_rent_income: float = Field(
        default=500, ge=0, description="Weekly rent received"
    )
    annual_maintenance_cost: float = Field(
        default=5_000, ge=0, description="Annual maintenance cost"
    )
    annual_insurance_cost: float = Field(
        default=1_500, ge=0, description="Annual insurance cost"
    )

    # Horizon
    loan_term_years: int = Field(
        default=LOAN_CONSTANTS.default_loan_term_years,
        ge=1,
        le=50,
        description="Mortgage term in years",
    )
    horizon_years: Optional[int] = Field(
        default=None,
        ge=1,
        le=100,
        description="Projection length in years (defaults to the loan term)",
    )

    @model_validator(mode="after")
    def validate_down_payment(self):
        if self.down_payment > self.purchase_price:
            raise ValueError(
                f"down_payment ({self.down_payment}) cannot exceed "
                f"purchase_price ({self.purchase_price})"
            )
        return self

    @property
    def loan_amount(self) -> float:
        return self.purchase_price - self.down_payment

    @property
    def projection_years(self) -> int:
        if self.horizon_years is None:
            return self.loan_term_years
        return self.horizon_years

    @property
    def property_appreciation_decimal(self) -> float:
        return self.property_appreciation_rate / 100

    @property
    def fund_return_decimal(self) -> float:
        return self.fund_return_rate / 100

    @property
    def rent_growth_decimal(self) -> float:
        return self.rent_growth_rate / 100
