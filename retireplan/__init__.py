"""Retirement savings and income projection."""

from retireplan.core import (
    compound_growth,
    contribution_limit,
    federal_tax,
    profile_warnings,
    project_account,
    project_timeline,
    required_minimum_distribution,
    retirement_income,
    safe_withdrawal_amount,
    social_security_benefit,
)
from retireplan.domain.tables import DEFAULT_TABLES, TABLES_2024, TaxYearTables
from retireplan.models import (
    Account,
    AccountType,
    EconomicAssumptions,
    FilingStatus,
    HsaCoverage,
    RetirementIncomeSummary,
    TimelinePoint,
    UserProfile,
    YearProjection,
)

__version__ = "0.1.0"
