"""
Mortgage amortization calculations.

Level monthly payments on a fixed-rate, fully amortizing loan, and the
month-by-month balance recurrence the projection engine runs on.
"""

from .constants import LOAN_CONSTANTS

MONTHS_PER_YEAR = LOAN_CONSTANTS.months_per_year


class MortgageCalculator:
    """Calculator for mortgage payments and balance amortization."""

    @staticmethod
    def monthly_rate(annual_rate_pct: float) -> float:
        """Convert an annual percentage rate (6 for 6%) to a monthly decimal."""
        return annual_rate_pct / 100 / MONTHS_PER_YEAR

    @staticmethod
    def calculate_monthly_payment(
        principal: float, annual_rate_pct: float, term_years: int
    ) -> float:
        """
        Calculate the monthly mortgage payment using the standard formula.

        Args:
            principal: Loan principal amount
            annual_rate_pct: Annual interest rate as a percentage (6 for 6%)
            term_years: Loan term in years

        Returns:
            Monthly payment amount, unrounded. Zero when there is nothing to
            repay or no term to repay it over.
        """
        if principal <= 0 or term_years <= 0:
            return 0.0

        monthly_rate = MortgageCalculator.monthly_rate(annual_rate_pct)
        num_payments = term_years * MONTHS_PER_YEAR

        if monthly_rate == 0:
            return principal / num_payments

        # Negative exponent underflows to 0 at extreme rates instead of overflowing
        discount = (1 + monthly_rate) ** -num_payments
        return principal * monthly_rate / (1 - discount)

    @staticmethod
    def calculate_interest_payment(balance: float, monthly_rate: float) -> float:
        """Interest accrued on the balance over one month."""
        return balance * monthly_rate

    @staticmethod
    def advance_one_month(
        balance: float, monthly_payment: float, monthly_rate: float
    ) -> float:
        """
        Apply one month of interest and one payment to a loan balance.

        Args:
            balance: Balance before the payment
            monthly_payment: Level payment amount
            monthly_rate: Monthly interest rate (decimal)

        Returns:
            New balance, never below zero
        """
        interest = MortgageCalculator.calculate_interest_payment(balance, monthly_rate)
        principal_portion = monthly_payment - interest
        return max(0.0, balance - principal_portion)

    @staticmethod
    def advance_months(
        balance: float, monthly_payment: float, monthly_rate: float, months: int
    ) -> float:
        """Apply advance_one_month sequentially for the given number of months."""
        for _ in range(months):
            balance = MortgageCalculator.advance_one_month(
                balance, monthly_payment, monthly_rate
            )
        return balance

    @staticmethod
    def calculate_equity(property_value: float, loan_balance: float) -> float:
        """
        Calculate home equity.

        Args:
            property_value: Current property value
            loan_balance: Current loan balance

        Returns:
            Home equity amount
        """
        return max(0.0, property_value - loan_balance)

    @staticmethod
    def calculate_loan_to_value_ratio(
        loan_balance: float, property_value: float
    ) -> float:
        """
        Calculate loan-to-value ratio.

        Args:
            loan_balance: Current loan balance
            property_value: Current property value

        Returns:
            LTV ratio (0-1)
        """
        if property_value <= 0:
            return 1.0
        return min(1.0, loan_balance / property_value)
