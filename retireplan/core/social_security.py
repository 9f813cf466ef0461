"""Social Security benefit estimate.

This is a single-formula approximation (90% of earnings, capped) rather than the
SSA bend-point calculation, and is not legally accurate.
"""

from __future__ import annotations

from retireplan.domain.tables import DEFAULT_TABLES, TaxYearTables
from retireplan.models import coerce_number


def claim_adjustment_factor(
    claim_age: float,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    """Early-claim reduction below full retirement age, delayed credit at or above it."""
    rules = tables.social_security
    claim_age = coerce_number(claim_age)
    if claim_age < rules.full_retirement_age:
        return rules.early_base_factor + (
            claim_age - rules.early_claim_age
        ) * rules.early_reduction_per_year
    return 1.0 + (claim_age - rules.full_retirement_age) * rules.delayed_credit_per_year


def social_security_benefit(
    avg_monthly_earnings: float,
    claim_age: float = 67,
    *,
    tables: TaxYearTables = DEFAULT_TABLES,
) -> float:
    """Annual benefit for the given average monthly earnings and claiming age."""
    rules = tables.social_security
    primary_insurance_amount = min(
        coerce_number(avg_monthly_earnings) * rules.pia_rate * 12,
        rules.max_annual_benefit,
    )
    return primary_insurance_amount * claim_adjustment_factor(claim_age, tables=tables)
