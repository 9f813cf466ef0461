"""Data contracts for the retirement income and timeline endpoints."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from retireplan.models import (
    Account,
    AccountTypeSummary,
    EconomicAssumptions,
    RetirementIncomeSummary,
    TimelineMilestones,
    TimelinePoint,
    UserProfile,
)


class _Contract(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlanRequest(_Contract):
    """Everything the results view sends when any input changes."""

    accounts: List[Account] = Field(default_factory=list)
    user_profile: UserProfile = Field(default_factory=UserProfile)
    assumptions: EconomicAssumptions = Field(default_factory=EconomicAssumptions)


class Readiness(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    NEEDS_WORK = "needs_work"

    @classmethod
    def from_ratio(cls, ratio: Optional[float]) -> "Readiness":
        if ratio is None:
            return cls.NEEDS_WORK
        if ratio >= 0.8:
            return cls.EXCELLENT
        if ratio >= 0.6:
            return cls.GOOD
        if ratio >= 0.4:
            return cls.FAIR
        return cls.NEEDS_WORK


class RetirementIncomeResponse(_Contract):
    summary: RetirementIncomeSummary
    replacement_ratio: Optional[float] = Field(
        None,
        description="Total annual retirement income over current income; null when income is 0.",
    )
    readiness: Readiness
    years_to_retirement: int
    years_in_retirement: int
    account_summary: List[AccountTypeSummary] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class TimelineResponse(_Contract):
    points: List[TimelinePoint]
    milestones: TimelineMilestones
    warnings: List[str] = Field(default_factory=list)
