"""Simplified federal income tax for a single tax year."""

from __future__ import annotations

from retireplan.domain.tables import DEFAULT_TABLES, TaxYearTables
from retireplan.models import FilingStatus, coerce_number


def federal_tax(
    income: float,
    filing_status: FilingStatus | str = FilingStatus.SINGLE,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    """Tax ``income`` slice by slice through the progressive bracket schedule."""
    remaining = coerce_number(income)
    tax = 0.0
    for bracket in tables.brackets_for(filing_status):
        if remaining <= 0:
            break
        taxable = min(remaining, bracket.width)
        tax += taxable * bracket.rate
        remaining -= taxable
    return tax


def marginal_rate(
    income: float,
    filing_status: FilingStatus | str = FilingStatus.SINGLE,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    """Rate applied to the last dollar of ``income`` (0 when there is no income)."""
    income = coerce_number(income)
    if income <= 0:
        return 0.0
    rate = 0.0
    for bracket in tables.brackets_for(filing_status):
        if income <= bracket.lower:
            break
        rate = bracket.rate
    return rate
