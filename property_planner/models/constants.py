"""Fixed loan and conversion constants used across the projection."""

from pydantic import BaseModel, ConfigDict, Field


class LoanConstants(BaseModel):
    """Constants shared by the cash flow calculator and projection engine.

    The two weekly conversions are not reciprocal (4.33 * 12 != 52): monthly
    cash flow uses weeks_per_month, the yearly projection uses weeks_per_year.
    """

    model_config = ConfigDict(frozen=True)

    default_loan_term_years: int = Field(
        default=30, ge=1, le=50, description="Default mortgage term in years"
    )
    land_value_ratio: float = Field(
        default=0.8, gt=0, le=1, description="Land value as a share of property value"
    )
    weeks_per_month: float = Field(
        default=4.33, gt=0, description="Average weeks per month for rent conversion"
    )
    weeks_per_year: float = Field(
        default=52, gt=0, description="Weeks per year for rent conversion"
    )
    months_per_year: int = Field(default=12, description="Payments per year")


LOAN_CONSTANTS = LoanConstants()
