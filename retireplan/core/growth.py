"""Closed-form growth helpers."""

from __future__ import annotations

from retireplan.domain.tables import DEFAULT_TABLES
from retireplan.models import coerce_number


def compound_growth(
    principal: float,
    rate: float,
    years: float,
    monthly_contribution: float = 0.0,
) -> float:
    """Future value of ``principal`` plus an optional monthly annuity.

    The principal compounds annually; the annuity compounds monthly at
    ``rate / 12``.
    """
    principal = coerce_number(principal)
    rate = coerce_number(rate)
    years = coerce_number(years)
    monthly_contribution = coerce_number(monthly_contribution)

    future_principal = principal * (1 + rate) ** years
    if monthly_contribution == 0:
        return future_principal

    months = years * 12
    monthly_rate = rate / 12
    if monthly_rate == 0:
        return future_principal + monthly_contribution * months
    future_annuity = monthly_contribution * ((1 + monthly_rate) ** months - 1) / monthly_rate
    return future_principal + future_annuity


def safe_withdrawal_amount(
    portfolio_value: float,
    withdrawal_rate: float = DEFAULT_TABLES.safe_withdrawal_rate,
) -> float:
    """Annual draw under the 4% rule (or another fixed rate)."""
    return coerce_number(portfolio_value) * coerce_number(withdrawal_rate)
