"""
Progressive bracket tax tables.

A table is an ordered set of brackets, each carrying the threshold it starts
at, the marginal rate on the excess above that threshold and the cumulative
amount owed at the threshold. Evaluating a value only looks at the bracket
that applies to it, so every base amount must already account for the
brackets below it. That is checked when the table is built.
"""

from bisect import bisect_right
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TaxBracket(BaseModel):
    """A single bracket of a progressive tax table."""

    model_config = ConfigDict(frozen=True)

    threshold: float = Field(..., ge=0, description="Lower bound of the bracket")
    rate: float = Field(
        ..., ge=0, le=1, description="Marginal rate on the excess above threshold"
    )
    base_amount: float = Field(
        ..., ge=0, description="Cumulative tax owed at the threshold"
    )

    def tax_at(self, value: float) -> float:
        """Tax owed for a value falling inside this bracket."""
        return self.base_amount + (value - self.threshold) * self.rate


class TaxBracketTable(BaseModel):
    """Ordered bracket table evaluated by threshold lookup."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Human readable table name")
    brackets: Tuple[TaxBracket, ...] = Field(
        ..., min_length=1, description="Brackets in ascending threshold order"
    )

    @model_validator(mode="after")
    def validate_brackets(self):
        if self.brackets[0].threshold != 0:
            raise ValueError(f"{self.name}: first bracket must start at 0")

        for previous, current in zip(self.brackets, self.brackets[1:]):
            if current.threshold <= previous.threshold:
                raise ValueError(
                    f"{self.name}: thresholds must be strictly increasing, "
                    f"got {current.threshold} after {previous.threshold}"
                )
            # A flat step upwards is allowed, a drop is not
            carried = previous.tax_at(current.threshold)
            if current.base_amount < carried - 1e-6:
                raise ValueError(
                    f"{self.name}: base amount {current.base_amount} at "
                    f"{current.threshold} is below the {carried} owed by the "
                    f"previous bracket"
                )
        return self

    @property
    def thresholds(self) -> Tuple[float, ...]:
        return tuple(bracket.threshold for bracket in self.brackets)

    def bracket_for(self, value: float) -> TaxBracket:
        """Return the bracket with the greatest threshold not above value."""
        index = bisect_right(self.thresholds, max(0.0, value)) - 1
        return self.brackets[index]

    def evaluate(self, value: float) -> float:
        """
        Calculate the cumulative tax owed on a value.

        Negative values are treated as 0.

        Args:
            value: Assessable value (land value, purchase price, ...)

        Returns:
            Tax owed, unrounded
        """
        value = max(0.0, value)
        return self.bracket_for(value).tax_at(value)


def build_table(name: str, rows) -> TaxBracketTable:
    """Build a table from (threshold, rate, base_amount) rows."""
    return TaxBracketTable(
        name=name,
        brackets=tuple(
            TaxBracket(threshold=threshold, rate=rate, base_amount=base_amount)
            for threshold, rate, base_amount in rows
        ),
    )


# Victorian land tax, 2024 rates. The lower bands are flat amounts.
VIC_LAND_TAX_TABLE = build_table(
    "Victorian land tax (2024)",
    [
        (0, 0.0, 0),
        (50_000, 0.0, 500),
        (100_000, 0.0, 975),
        (300_000, 0.003, 1_350),
        (600_000, 0.006, 2_250),
        (1_000_000, 0.009, 4_650),
        (1_800_000, 0.0165, 11_850),
        (3_000_000, 0.0265, 31_650),
    ],
)

# Victorian general stamp duty, 2024 rates
VIC_STAMP_DUTY_TABLE = build_table(
    "Victorian stamp duty (2024)",
    [
        (0, 0.014, 0),
        (25_000, 0.024, 350),
        (130_000, 0.06, 2_870),
        (440_000, 0.06, 21_470),
        (550_000, 0.06, 28_070),
        (960_000, 0.055, 52_670),
    ],
)
