from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from retireplan.core.growth import safe_withdrawal_amount
from retireplan.core.projection import project_account
from retireplan.core.social_security import social_security_benefit
from retireplan.domain.tables import DEFAULT_TABLES, TaxYearTables
from retireplan.models import (
    Account,
    AccountType,
    AccountTypeSummary,
    EconomicAssumptions,
    RetirementIncomeSummary,
    TimelineMilestones,
    TimelinePoint,
    UserProfile,
)

logger = logging.getLogger(__name__)


def guaranteed_income(
    account: Account,
    profile: UserProfile,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    """Annual benefit paid by a pension or Social Security account."""
    if account.type is AccountType.PENSION:
        return account.monthly_benefit * 12
    if account.type is AccountType.SOCIAL_SECURITY:
        # current income stands in for average indexed earnings
        return social_security_benefit(
            profile.current_income / 12,
            profile.retirement_age,
            tables=tables,
        )
    return 0.0


def balance_at_retirement(
    account: Account,
    profile: UserProfile,
    assumptions: EconomicAssumptions,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    years_to_retirement = profile.retirement_age - profile.current_age
    rows = project_account(
        account, profile.current_age, years_to_retirement, assumptions, tables=tables
    )
    return rows[-1].balance if rows else 0.0


def retirement_income(
    accounts: Iterable[Account],
    profile: UserProfile,
    assumptions: EconomicAssumptions,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> RetirementIncomeSummary:
    """
    Summarise income at retirement across every account.

    Balance accounts are projected from current_age to retirement_age and drawn
    at the safe withdrawal rate; pensions and Social Security add their annual
    benefit on top. Nothing here is tax-adjusted, and RMDs taken before
    retirement are not reported as income.
    """
    total_balance = 0.0
    income_streams = 0.0

    for account in accounts:
        if account.type.is_income_stream:
            income_streams += guaranteed_income(account, profile, tables=tables)
        else:
            total_balance += balance_at_retirement(
                account, profile, assumptions, tables=tables
            )

    withdrawal = safe_withdrawal_amount(total_balance, tables.safe_withdrawal_rate)
    total_annual_income = withdrawal + income_streams

    logger.debug(
        "retirement income: balance=%.2f withdrawal=%.2f streams=%.2f",
        total_balance,
        withdrawal,
        income_streams,
    )

    return RetirementIncomeSummary(
        total_balance=total_balance,
        safe_withdrawal_amount=withdrawal,
        annual_income_streams=income_streams,
        total_annual_income=total_annual_income,
        monthly_income=total_annual_income / 12,
    )


def project_timeline(
    accounts: Iterable[Account],
    profile: UserProfile,
    assumptions: EconomicAssumptions,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> List[TimelinePoint]:
    """
    Lifetime balance series for charting, from current_age to death_age inclusive.

    Uses the same horizon convention as retirement_income: num_years is the age
    gap and the last row is the balance at the end age. Income-stream accounts
    carry no balance and are left out.
    """
    num_years = profile.death_age - profile.current_age
    if num_years < 0:
        return []

    totals = [0.0] * (num_years + 1)
    by_type: List[Dict[AccountType, float]] = [{} for _ in range(num_years + 1)]

    for account in accounts:
        if account.type.is_income_stream:
            continue
        rows = project_account(
            account, profile.current_age, num_years, assumptions, tables=tables
        )
        for row in rows:
            totals[row.year] += row.balance
            bucket = by_type[row.year]
            bucket[account.type] = bucket.get(account.type, 0.0) + row.balance

    points: List[TimelinePoint] = []
    price_level = 1.0
    for year, total in enumerate(totals):
        age = profile.current_age + year
        if year:
            # compounds toward inf rather than raising OverflowError
            price_level *= 1 + assumptions.inflation_rate
        points.append(
            TimelinePoint(
                year=year,
                age=age,
                is_retired=age >= profile.retirement_age,
                total_balance=total,
                real_total_balance=total / price_level if price_level else total,
                balances_by_type=by_type[year],
            )
        )
    return points


def summarize_accounts(accounts: Iterable[Account]) -> List[AccountTypeSummary]:
    """Group today's balances and contributions by account type, in first-seen order."""
    grouped: Dict[AccountType, Dict[str, float]] = {}
    for account in accounts:
        bucket = grouped.setdefault(account.type, {"count": 0, "balance": 0.0, "contribution": 0.0})
        bucket["count"] += 1
        bucket["balance"] += account.current_balance
        bucket["contribution"] += account.annual_contribution

    return [
        AccountTypeSummary(
            account_type=kind,
            label=kind.label,
            count=int(bucket["count"]),
            balance=bucket["balance"],
            contribution=bucket["contribution"],
        )
        for kind, bucket in grouped.items()
    ]


def timeline_milestones(points: List[TimelinePoint], profile: UserProfile) -> TimelineMilestones:
    """Balance at retirement, the peak, and the balance left at death age.

    Ages outside the timeline read as 0.
    """
    retirement_index = profile.retirement_age - profile.current_age
    at_retirement = 0.0
    if 0 <= retirement_index < len(points):
        at_retirement = points[retirement_index].total_balance

    return TimelineMilestones(
        balance_at_retirement=at_retirement,
        peak_balance=max((point.total_balance for point in points), default=0.0),
        final_balance=points[-1].total_balance if points else 0.0,
    )
