"""Tests for stamp duty and the first home buyer concession taper."""

import pytest
from pydantic import ValidationError

from property_planner.models.stamp_duty import (
    ConcessionTaper,
    StampDutyCalculator,
    round_to_whole_currency,
)


@pytest.fixture
def calculator():
    return StampDutyCalculator()


class TestStandardDuty:
    """Duty for buyers without the concession."""

    def test_default_purchase(self, calculator):
        """Test duty on an 800k purchase."""
        assert calculator.calculate(800_000) == 43_070.0

    def test_non_positive_price_is_zero(self, calculator):
        """Test zero and negative prices owe no duty."""
        assert calculator.calculate(0) == 0.0
        assert calculator.calculate(-50_000) == 0.0
        assert calculator.standard_duty(-50_000) == 0.0

    def test_rounded_to_whole_dollars(self, calculator):
        """Test the result is rounded to the nearest dollar."""
        # 2870 + 1 * 0.06
        assert calculator.calculate(130_001) == 2_870.0

    def test_half_dollar_rounds_up(self, calculator):
        """Test half a dollar rounds up rather than to even."""
        # 750 * 1.4% = 10.50
        assert calculator.calculate(750) == 11.0

    def test_non_first_time_buyer_ignores_concession(self, calculator):
        """Test the concession needs first home buyer status."""
        assert calculator.calculate(500_000, is_first_time_buyer=False) == 25_070.0


class TestFirstHomeBuyerConcession:
    """Duty for first home buyers."""

    def test_full_concession_ceiling(self, calculator):
        """Test no duty is payable at the full concession ceiling."""
        assert calculator.calculate(600_000, is_first_time_buyer=True) == 0.0

    def test_below_full_concession_ceiling(self, calculator):
        """Test no duty is payable under the full concession ceiling."""
        assert calculator.calculate(450_000, is_first_time_buyer=True) == 0.0

    def test_upper_ceiling_pays_standard_duty(self, calculator):
        """Test the taper reaches the standard duty at the upper ceiling."""
        assert calculator.calculate(750_000, is_first_time_buyer=True) == 40_070.0
        assert calculator.calculate(750_000, is_first_time_buyer=True) == (
            calculator.calculate(750_000, is_first_time_buyer=False)
        )

    def test_taper_midpoint(self, calculator):
        """Test half the duty is payable midway between the ceilings."""
        # Standard duty at 675k is 35,570
        assert calculator.calculate(675_000, is_first_time_buyer=True) == 17_785.0

    def test_taper_rounds_after_tapering(self, calculator):
        """Test rounding happens once, after the taper."""
        # 37,070 - 37,070 / 3 = 24,713.33
        assert calculator.calculate(700_000, is_first_time_buyer=True) == 24_713.0

    def test_above_upper_ceiling_pays_standard_duty(self, calculator):
        """Test the concession does not apply above the upper ceiling."""
        assert calculator.calculate(800_000, is_first_time_buyer=True) == 43_070.0

    def test_taper_increases_with_price(self, calculator):
        """Test duty rises across the taper band."""
        duties = [
            calculator.calculate(price, is_first_time_buyer=True)
            for price in range(600_000, 750_001, 10_000)
        ]
        assert duties == sorted(duties)
        assert duties[0] == 0.0


class TestConcessionTaper:
    """The taper on its own."""

    def test_status(self):
        """Test which rule applies at each price."""
        taper = ConcessionTaper()
        assert taper.status(500_000, True) == "full_concession"
        assert taper.status(700_000, True) == "partial_concession"
        assert taper.status(750_000, True) == "partial_concession"
        assert taper.status(750_001, True) == "standard"
        assert taper.status(500_000, False) == "standard"

    def test_apply_is_unrounded(self):
        """Test the taper returns the exact tapered amount."""
        taper = ConcessionTaper()
        assert taper.apply(700_000, 37_070.0, True) == pytest.approx(24_713.3333, abs=1e-3)

    def test_custom_ceilings(self):
        """Test a taper between other ceilings."""
        taper = ConcessionTaper(full_ceiling=100, upper_ceiling=200)
        assert taper.apply(150, 10.0, True) == pytest.approx(5.0)

    def test_ceilings_must_be_ordered(self):
        """Test the upper ceiling must exceed the full ceiling."""
        with pytest.raises(ValidationError):
            ConcessionTaper(full_ceiling=750_000, upper_ceiling=600_000)


class TestRounding:
    def test_round_half_up(self):
        assert round_to_whole_currency(2.5) == 3.0
        assert round_to_whole_currency(3.5) == 4.0
        assert round_to_whole_currency(2.49) == 2.0
