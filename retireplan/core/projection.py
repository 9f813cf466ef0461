from __future__ import annotations

from typing import List

from retireplan.core.limits import contribution_limit
from retireplan.core.rmd import required_minimum_distribution
from retireplan.domain.tables import DEFAULT_TABLES, TaxYearTables
from retireplan.models import Account, EconomicAssumptions, YearProjection


def project_account(
    account: Account,
    current_age: int,
    num_years: int,
    assumptions: EconomicAssumptions,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> List[YearProjection]:
    """
    Simulate one account year by year, returning rows for years 0..num_years.

    Order of operations (per year):
      1) Cap the configured contribution at this age's limit (never below 0).
      2) Add the contribution at START of year.
      3) Apply one year of growth at assumptions.return_rate.
      4) Traditional 401(k)/IRA only: withdraw the RMD from the grown balance.
      5) Record the row (balance floored at 0 for reporting).

    Row 0 is the first simulated year, not the untouched opening balance.
    Pension and Social Security accounts are not meant to be projected; they have
    no contribution limit, so only their (normally zero) balance compounds.
    """
    balance = account.current_balance
    growth = 1.0 + assumptions.return_rate

    rows: List[YearProjection] = []
    for year in range(num_years + 1):
        age = current_age + year

        cap = contribution_limit(account.type, age, account.hsa_coverage, tables=tables)
        contribution = max(0.0, min(account.annual_contribution, cap))

        balance += contribution
        balance *= growth

        rmd = 0.0
        if account.type.requires_rmd:
            rmd = required_minimum_distribution(balance, age, tables=tables)
            balance -= rmd

        rows.append(
            YearProjection(
                year=year,
                age=age,
                balance=max(0.0, balance),
                contribution=contribution,
                rmd=rmd,
            )
        )

    return rows
