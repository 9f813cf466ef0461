"""Required minimum distributions from tax-deferred accounts."""

from __future__ import annotations

from typing import Optional

from retireplan.domain.tables import DEFAULT_TABLES, TaxYearTables
from retireplan.models import coerce_age, coerce_number


def rmd_divisor(age: int, *, tables: TaxYearTables = DEFAULT_TABLES) -> Optional[float]:
    """Uniform Lifetime divisor for ``age``; ages past the table reuse its last entry."""
    return tables.rmd.divisor(coerce_age(age))


def required_minimum_distribution(
    balance: float,
    age: int,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    divisor = rmd_divisor(age, tables=tables)
    if divisor is None:
        return 0.0
    return coerce_number(balance) / divisor
