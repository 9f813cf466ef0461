"""Pure retirement calculations: no I/O, no shared state."""

from retireplan.core.checks import profile_warnings
from retireplan.core.growth import compound_growth, safe_withdrawal_amount
from retireplan.core.income import (
    project_timeline,
    retirement_income,
    summarize_accounts,
    timeline_milestones,
)
from retireplan.core.limits import contribution_limit
from retireplan.core.projection import project_account
from retireplan.core.rmd import required_minimum_distribution, rmd_divisor
from retireplan.core.social_security import claim_adjustment_factor, social_security_benefit
from retireplan.core.tax import federal_tax, marginal_rate

__all__ = [
    "profile_warnings",
    "compound_growth",
    "safe_withdrawal_amount",
    "project_timeline",
    "retirement_income",
    "summarize_accounts",
    "timeline_milestones",
    "contribution_limit",
    "project_account",
    "required_minimum_distribution",
    "rmd_divisor",
    "claim_adjustment_factor",
    "social_security_benefit",
    "federal_tax",
    "marginal_rate",
]
