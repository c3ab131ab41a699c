"""Financial models for property versus fund projections."""

from .cash_flow import CashFlowCalculator
from .constants import LOAN_CONSTANTS, LoanConstants
from .mortgage_amortization import MortgageCalculator
from .projection import ProjectionEngine, ProjectionResult, YearlyProjectionPoint
from .scenario import ScenarioInputs
from .stamp_duty import (
    VIC_FIRST_HOME_BUYER_TAPER,
    ConcessionTaper,
    StampDutyCalculator,
    round_to_whole_currency,
)
from .tax_brackets import (
    VIC_LAND_TAX_TABLE,
    VIC_STAMP_DUTY_TABLE,
    TaxBracket,
    TaxBracketTable,
    build_table,
)

__all__ = [
    "CashFlowCalculator",
    "LOAN_CONSTANTS",
    "LoanConstants",
    "MortgageCalculator",
    "ProjectionEngine",
    "ProjectionResult",
    "YearlyProjectionPoint",
    "ScenarioInputs",
    "VIC_FIRST_HOME_BUYER_TAPER",
    "ConcessionTaper",
    "StampDutyCalculator",
    "round_to_whole_currency",
    "VIC_LAND_TAX_TABLE",
    "VIC_STAMP_DUTY_TABLE",
    "TaxBracket",
    "TaxBracketTable",
    "build_table",
]
