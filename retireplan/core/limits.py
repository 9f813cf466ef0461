"""Annual contribution caps per account type."""

from __future__ import annotations

from typing import Optional

from retireplan.domain.tables import DEFAULT_TABLES, TaxYearTables
from retireplan.models import AccountType, HsaCoverage, coerce_age


def contribution_limit(
    account_type: AccountType | str,
    age: int,
    hsa_coverage: Optional[HsaCoverage | str] = HsaCoverage.SINGLE,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    """Return the cap for ``account_type`` at ``age``, including catch-up amounts.

    Pensions, Social Security, taxable accounts and unrecognised types have no
    cap and resolve to 0.
    """
    kind = AccountType.parse(account_type)
    age = coerce_age(age)

    if kind is AccountType.HSA:
        try:
            coverage = HsaCoverage(hsa_coverage)
        except ValueError:
            coverage = HsaCoverage.SINGLE
        return tables.hsa_limits[coverage].for_age(age)

    limits = tables.contribution_limits.get(kind) if kind is not None else None
    if limits is None:
        return 0.0
    return limits.for_age(age)
