"""Data contracts for the single-purpose calculator endpoints."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from retireplan.models import (
    Account,
    EconomicAssumptions,
    MAX_AGE,
    FilingStatus,
    HsaCoverage,
    YearProjection,
    coerce_age,
    coerce_number,
    parse_filing_status,
)


class _Contract(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AccountProjectionRequest(_Contract):
    account: Account
    current_age: int = Field(30, ge=0, le=MAX_AGE)
    num_years: int = Field(35, le=120, description="Years to simulate after year 0.")
    assumptions: EconomicAssumptions = Field(default_factory=EconomicAssumptions)

    @field_validator("current_age", "num_years", mode="before")
    @classmethod
    def _coerce_years(cls, value: Any) -> int:
        return coerce_age(value)


class AccountProjectionResponse(_Contract):
    projections: List[YearProjection]


class ContributionLimitQuery(_Contract):
    # unknown account types resolve to "no limit" rather than an error
    account_type: str
    age: int = Field(..., ge=0, le=130)
    hsa_coverage: Optional[HsaCoverage] = None

    @field_validator("hsa_coverage", mode="before")
    @classmethod
    def _blank_coverage(cls, value: Any) -> Any:
        return None if value == "" else value


class ContributionLimitResponse(_Contract):
    account_type: str
    age: int
    limit: float = Field(..., ge=0, description="Annual cap; 0 means no limit applies.")


class FederalTaxRequest(_Contract):
    income: float = 0.0
    filing_status: FilingStatus = FilingStatus.SINGLE

    @field_validator("filing_status", mode="before")
    @classmethod
    def _parse_filing_status(cls, value: Any) -> Any:
        return parse_filing_status(value)

    @field_validator("income", mode="before")
    @classmethod
    def _coerce_income(cls, value: Any) -> float:
        return coerce_number(value)


class FederalTaxResponse(_Contract):
    tax: float
    marginal_rate: float


class SocialSecurityRequest(_Contract):
    average_monthly_earnings: float = 0.0
    claim_age: float = 67

    @field_validator("average_monthly_earnings", "claim_age", mode="before")
    @classmethod
    def _coerce_inputs(cls, value: Any) -> float:
        return coerce_number(value)


class SocialSecurityResponse(_Contract):
    annual_benefit: float
    adjustment_factor: float
