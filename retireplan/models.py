from __future__ import annotations

import math
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def coerce_number(value: Any) -> float:
    """Turn missing or unparseable numeric input into 0 instead of rejecting it."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number):
        return 0.0
    return number


def coerce_age(value: Any) -> int:
    number = coerce_number(value)
    if math.isinf(number):
        return 0
    return int(number)


class FilingStatus(str, Enum):
    SINGLE = "single"
    MARRIED_JOINT = "married_joint"
    MARRIED_SEPARATE = "married_separate"

    @classmethod
    def _missing_(cls, value: object) -> Optional["FilingStatus"]:
        # spellings used by the profile form
        legacy = {
            "married": cls.MARRIED_JOINT,
            "marriedjoint": cls.MARRIED_JOINT,
            "marriedseparate": cls.MARRIED_SEPARATE,
        }
        if isinstance(value, str):
            return legacy.get(value.replace("_", "").replace("-", "").lower())
        return None


def parse_filing_status(value: Any) -> Any:
    if value in (None, ""):
        return FilingStatus.SINGLE
    if isinstance(value, str):
        return FilingStatus(value)
    return value


class HsaCoverage(str, Enum):
    SINGLE = "single"
    FAMILY = "family"


class AccountType(str, Enum):
    TRADITIONAL_401K = "traditional_401k"
    ROTH_401K = "roth_401k"
    TRADITIONAL_IRA = "traditional_ira"
    ROTH_IRA = "roth_ira"
    HSA = "hsa"
    PENSION = "pension"
    SOCIAL_SECURITY = "social_security"
    TAXABLE = "taxable"

    @classmethod
    def parse(cls, value: object) -> Optional["AccountType"]:
        """Return the matching variant, or None for an unknown tag."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def label(self) -> str:
        return _ACCOUNT_LABELS[self]

    @property
    def is_income_stream(self) -> bool:
        """Pensions and Social Security pay a benefit instead of holding a balance."""
        return self in _INCOME_STREAM_TYPES

    @property
    def requires_rmd(self) -> bool:
        return self in _RMD_TYPES


_ACCOUNT_LABELS: Dict[AccountType, str] = {
    AccountType.TRADITIONAL_401K: "401(k) Traditional",
    AccountType.ROTH_401K: "401(k) Roth",
    AccountType.TRADITIONAL_IRA: "IRA Traditional",
    AccountType.ROTH_IRA: "IRA Roth",
    AccountType.HSA: "Health Savings Account (HSA)",
    AccountType.PENSION: "Pension",
    AccountType.SOCIAL_SECURITY: "Social Security",
    AccountType.TAXABLE: "Taxable Investment Account",
}

_INCOME_STREAM_TYPES = frozenset({AccountType.PENSION, AccountType.SOCIAL_SECURITY})

# Roth accounts are exempt from RMDs while the owner is alive.
_RMD_TYPES = frozenset({AccountType.TRADITIONAL_401K, AccountType.TRADITIONAL_IRA})


MAX_AGE = 130


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class UserProfile(_CamelModel):
    current_age: int = Field(30, ge=0, le=MAX_AGE)
    retirement_age: int = Field(65, ge=0, le=MAX_AGE)
    death_age: int = Field(85, ge=0, le=MAX_AGE)
    filing_status: FilingStatus = Field(
        default=FilingStatus.SINGLE,
        validation_alias=AliasChoices("filingStatus", "maritalStatus", "filing_status"),
    )
    current_income: float = 75000.0
    # Informational; the income aggregator estimates Social Security from current_income.
    average_career_income: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices(
            "averageCareerIncome", "averageIncome", "average_career_income"
        ),
    )

    @field_validator("current_age", "retirement_age", "death_age", mode="before")
    @classmethod
    def _coerce_ages(cls, value: Any) -> int:
        return coerce_age(value)

    @field_validator("filing_status", mode="before")
    @classmethod
    def _parse_filing_status(cls, value: Any) -> Any:
        return parse_filing_status(value)

    @field_validator("current_income", mode="before")
    @classmethod
    def _coerce_income(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("average_career_income", mode="before")
    @classmethod
    def _coerce_average_income(cls, value: Any) -> Optional[float]:
        if value is None:
            return None
        return coerce_number(value)


class EconomicAssumptions(_CamelModel):
    return_rate: float = 0.07
    inflation_rate: float = 0.03
    retirement_tax_rate: float = Field(
        default=0.0,
        validation_alias=AliasChoices("retirementTaxRate", "taxRate", "retirement_tax_rate"),
    )

    @field_validator("return_rate", "inflation_rate", "retirement_tax_rate", mode="before")
    @classmethod
    def _coerce_rates(cls, value: Any) -> float:
        return coerce_number(value)


class Account(_CamelModel):
    """A snapshot of one account as entered by the user.

    ``employer_match`` is collected for display only and is never added to a
    projected balance. ``monthly_benefit`` only matters for pensions.
    """

    model_config = ConfigDict(extra="ignore")

    type: AccountType = AccountType.TRADITIONAL_401K
    name: str = ""
    description: str = ""
    current_balance: float = 0.0
    annual_contribution: float = 0.0
    employer_match: float = 0.0
    monthly_benefit: float = 0.0
    hsa_coverage: Optional[HsaCoverage] = Field(
        default=None,
        validation_alias=AliasChoices("hsaCoverage", "hsaType", "hsa_coverage"),
    )

    @field_validator(
        "current_balance",
        "annual_contribution",
        "employer_match",
        "monthly_benefit",
        mode="before",
    )
    @classmethod
    def _coerce_amounts(cls, value: Any) -> float:
        return coerce_number(value)

    @field_validator("name", "description", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("hsa_coverage", mode="before")
    @classmethod
    def _coerce_coverage(cls, value: Any) -> Optional[str]:
        # blank selections fall back to single coverage downstream
        if value in (None, ""):
            return None
        return value


class YearProjection(_CamelModel):
    year: int
    age: int
    balance: float = Field(ge=0)
    contribution: float
    rmd: float


class RetirementIncomeSummary(_CamelModel):
    total_balance: float
    safe_withdrawal_amount: float
    annual_income_streams: float
    total_annual_income: float
    monthly_income: float


class TimelinePoint(_CamelModel):
    """One age on the lifetime chart, summed across balance accounts."""

    year: int
    age: int
    is_retired: bool
    total_balance: float
    # total_balance expressed in today's dollars
    real_total_balance: float
    balances_by_type: Dict[AccountType, float] = Field(default_factory=dict)



class AccountTypeSummary(_CamelModel):
    """Current holdings of one account type, as listed on the results view."""

    account_type: AccountType
    label: str
    count: int
    balance: float
    contribution: float


class TimelineMilestones(_CamelModel):
    balance_at_retirement: float
    peak_balance: float
    final_balance: float


__all__ = [
    "coerce_number",
    "coerce_age",
    "parse_filing_status",
    "FilingStatus",
    "HsaCoverage",
    "AccountType",
    "UserProfile",
    "EconomicAssumptions",
    "Account",
    "YearProjection",
    "RetirementIncomeSummary",
    "TimelinePoint",
    "AccountTypeSummary",
    "TimelineMilestones",
    "MAX_AGE",
]
