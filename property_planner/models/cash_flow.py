"""Rental cash flow against the costs of holding the property."""

from .constants import LOAN_CONSTANTS, LoanConstants


class CashFlowCalculator:
    """Converts weekly rent and annual outgoings to monthly and yearly figures."""

    def __init__(self, constants: LoanConstants = LOAN_CONSTANTS) -> None:
        self.constants = constants

    def monthly_rent(self, weekly_rent: float) -> float:
        return weekly_rent * self.constants.weeks_per_month

    def annual_rent(self, weekly_rent: float) -> float:
        return weekly_rent * self.constants.weeks_per_year

    def net_monthly_cash_flow(
        self,
        weekly_rent: float,
        monthly_mortgage_payment: float,
        annual_maintenance: float,
        annual_land_tax: float,
        annual_insurance: float,
    ) -> float:
        """
        Net monthly income from the rental property.

        Args:
            weekly_rent: Weekly rental income
            monthly_mortgage_payment: Level mortgage payment
            annual_maintenance: Annual maintenance cost
            annual_land_tax: Annual land tax
            annual_insurance: Annual insurance cost

        Returns:
            Rent less outgoings for one month, negative when the property
            needs topping up
        """
        monthly_outgoings = monthly_mortgage_payment + (
            annual_maintenance + annual_land_tax + annual_insurance
        ) / self.constants.months_per_year
        return self.monthly_rent(weekly_rent) - monthly_outgoings

    def annual_house_cost(
        self,
        monthly_mortgage_payment: float,
        annual_maintenance: float,
        annual_land_tax: float,
        annual_insurance: float,
        months_paid: int = 12,
    ) -> float:
        """Total cost of holding the property for a year, before rent."""
        return (
            monthly_mortgage_payment * months_paid
            + annual_maintenance
            + annual_land_tax
            + annual_insurance
        )
