"""Tax-year configuration tables.

Every resolver in ``retireplan.core`` reads its constants from a
``TaxYearTables`` bundle passed in by the caller, so a new tax year is a new
bundle rather than an edit to module globals.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from retireplan.models import AccountType, FilingStatus, HsaCoverage


class _Table(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class TaxBracket(_Table):
    lower: float
    upper: Optional[float] = None  # None => unbounded top bracket
    rate: float

    @property
    def width(self) -> float:
        if self.upper is None:
            return float("inf")
        return self.upper - self.lower


class CatchUpLimit(_Table):
    base: float
    catch_up: float
    catch_up_age: int

    def for_age(self, age: int) -> float:
        if age >= self.catch_up_age:
            return self.base + self.catch_up
        return self.base


class RmdTable(_Table):
    start_age: int
    floor_age: int
    divisors: Dict[int, float]

    def divisor(self, age: int) -> Optional[float]:
        if age < self.start_age:
            return None
        return self.divisors.get(min(age, self.floor_age), self.divisors[self.floor_age])


class SocialSecurityRules(_Table):
    full_retirement_age: int
    early_claim_age: int
    pia_rate: float
    max_annual_benefit: float
    early_base_factor: float
    early_reduction_per_year: float
    delayed_credit_per_year: float


class TaxYearTables(_Table):
    tax_year: int
    brackets: Dict[FilingStatus, Tuple[TaxBracket, ...]]
    contribution_limits: Dict[AccountType, CatchUpLimit]
    hsa_limits: Dict[HsaCoverage, CatchUpLimit]
    rmd: RmdTable
    social_security: SocialSecurityRules
    safe_withdrawal_rate: float

    def brackets_for(self, filing_status: object) -> Tuple[TaxBracket, ...]:
        """Married-filing-separately and unknown statuses use the single schedule."""
        try:
            status = FilingStatus(filing_status)
        except ValueError:
            status = FilingStatus.SINGLE
        return self.brackets.get(status, self.brackets[FilingStatus.SINGLE])


def _schedule(*edges: Tuple[float, float]) -> Tuple[TaxBracket, ...]:
    brackets = []
    for index, (lower, rate) in enumerate(edges):
        upper = edges[index + 1][0] if index + 1 < len(edges) else None
        brackets.append(TaxBracket(lower=lower, upper=upper, rate=rate))
    return tuple(brackets)


_RMD_DIVISORS_2024 = {
    72: 27.4, 73: 26.5, 74: 25.5, 75: 24.6, 76: 23.7, 77: 22.9, 78: 22.0,
    79: 21.1, 80: 20.2, 81: 19.4, 82: 18.5, 83: 17.7, 84: 16.8, 85: 16.0,
    86: 15.2, 87: 14.4, 88: 13.7, 89: 12.9, 90: 12.2, 91: 11.5, 92: 10.8,
    93: 10.1, 94: 9.5, 95: 8.9, 96: 8.4, 97: 7.8, 98: 7.3, 99: 6.8, 100: 6.4,
}

TABLES_2024 = TaxYearTables(
    tax_year=2024,
    brackets={
        FilingStatus.SINGLE: _schedule(
            (0, 0.10),
            (11600, 0.12),
            (47150, 0.22),
            (100525, 0.24),
            (191950, 0.32),
            (243725, 0.35),
            (609350, 0.37),
        ),
        FilingStatus.MARRIED_JOINT: _schedule(
            (0, 0.10),
            (23200, 0.12),
            (94300, 0.22),
            (201050, 0.24),
            (383900, 0.32),
            (487450, 0.35),
            (731200, 0.37),
        ),
    },
    contribution_limits={
        AccountType.TRADITIONAL_401K: CatchUpLimit(base=23000, catch_up=7500, catch_up_age=50),
        AccountType.ROTH_401K: CatchUpLimit(base=23000, catch_up=7500, catch_up_age=50),
        AccountType.TRADITIONAL_IRA: CatchUpLimit(base=7000, catch_up=1000, catch_up_age=50),
        AccountType.ROTH_IRA: CatchUpLimit(base=7000, catch_up=1000, catch_up_age=50),
    },
    hsa_limits={
        HsaCoverage.SINGLE: CatchUpLimit(base=4300, catch_up=1000, catch_up_age=55),
        HsaCoverage.FAMILY: CatchUpLimit(base=8550, catch_up=1000, catch_up_age=55),
    },
    rmd=RmdTable(start_age=72, floor_age=100, divisors=_RMD_DIVISORS_2024),
    social_security=SocialSecurityRules(
        full_retirement_age=67,
        early_claim_age=62,
        pia_rate=0.9,
        max_annual_benefit=44000,
        early_base_factor=0.75,
        early_reduction_per_year=0.05,
        delayed_credit_per_year=0.08,
    ),
    safe_withdrawal_rate=0.04,
)

DEFAULT_TABLES = TABLES_2024

__all__ = [
    "TaxBracket",
    "CatchUpLimit",
    "RmdTable",
    "SocialSecurityRules",
    "TaxYearTables",
    "TABLES_2024",
    "DEFAULT_TABLES",
]
