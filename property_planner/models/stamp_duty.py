"""
Stamp duty with the first home buyer concession.

Buyers under the full concession ceiling pay no duty. Between the full and
upper ceilings the concession tapers off linearly, so duty climbs from zero to
the standard amount at the upper ceiling.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .tax_brackets import VIC_STAMP_DUTY_TABLE, TaxBracketTable

StampDutyStatus = Literal["standard", "full_concession", "partial_concession"]


def round_to_whole_currency(amount: float) -> float:
    """Round half away from zero to the nearest whole currency unit."""
    return float(Decimal(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ConcessionTaper(BaseModel):
    """Linear phase-out of the first home buyer concession."""

    model_config = ConfigDict(frozen=True)

    full_ceiling: float = Field(
        default=600_000, gt=0, description="Highest price with no duty payable"
    )
    upper_ceiling: float = Field(
        default=750_000, gt=0, description="Price at which the concession ends"
    )

    @model_validator(mode="after")
    def validate_ceilings(self):
        if self.upper_ceiling <= self.full_ceiling:
            raise ValueError("upper_ceiling must be greater than full_ceiling")
        return self

    def status(self, price: float, is_first_time_buyer: bool) -> StampDutyStatus:
        if not is_first_time_buyer or price > self.upper_ceiling:
            return "standard"
        if price <= self.full_ceiling:
            return "full_concession"
        return "partial_concession"

    def apply(
        self, price: float, standard_duty: float, is_first_time_buyer: bool
    ) -> float:
        """
        Adjust the standard duty for the concession.

        Args:
            price: Purchase price
            standard_duty: Unrounded duty from the standard table
            is_first_time_buyer: Whether the buyer qualifies for the concession

        Returns:
            Duty payable, unrounded
        """
        status = self.status(price, is_first_time_buyer)
        if status == "standard":
            return standard_duty
        if status == "full_concession":
            return 0.0

        span = self.upper_ceiling - self.full_ceiling
        concession = standard_duty * (self.upper_ceiling - price) / span
        return max(0.0, standard_duty - concession)


VIC_FIRST_HOME_BUYER_TAPER = ConcessionTaper()


class StampDutyCalculator:
    """Standard table plus concession taper, rounded once at the end."""

    def __init__(
        self,
        table: TaxBracketTable = VIC_STAMP_DUTY_TABLE,
        taper: ConcessionTaper = VIC_FIRST_HOME_BUYER_TAPER,
    ) -> None:
        self.table = table
        self.taper = taper

    def standard_duty(self, price: float) -> float:
        """Unrounded duty at the standard rates."""
        if price <= 0:
            return 0.0
        return self.table.evaluate(price)

    def calculate(self, price: float, is_first_time_buyer: bool = False) -> float:
        if price <= 0:
            return 0.0
        duty = self.taper.apply(price, self.standard_duty(price), is_first_time_buyer)
        return round_to_whole_currency(duty)

    def status(self, price: float, is_first_time_buyer: bool) -> StampDutyStatus:
        return self.taper.status(price, is_first_time_buyer)
