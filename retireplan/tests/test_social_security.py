from __future__ import annotations

from math import isclose

from retireplan.core.social_security import claim_adjustment_factor, social_security_benefit


def test_full_retirement_age_has_no_adjustment():
    assert claim_adjustment_factor(67) == 1.0
    assert isclose(social_security_benefit(3000, 67), 3000 * 0.9 * 12)


def test_early_claim_reduction():
    assert isclose(claim_adjustment_factor(62), 0.75)
    assert isclose(claim_adjustment_factor(65), 0.90)
    assert isclose(social_security_benefit(3000, 62), 3000 * 0.9 * 12 * 0.75)


def test_delayed_retirement_credit():
    assert isclose(claim_adjustment_factor(70), 1.24)
    assert isclose(social_security_benefit(3000, 70), 3000 * 0.9 * 12 * 1.24)


def test_primary_insurance_amount_is_capped():
    assert isclose(social_security_benefit(10000, 67), 44000)
    assert isclose(social_security_benefit(10000, 70), 44000 * 1.24)


def test_default_claim_age_is_67():
    assert social_security_benefit(2000) == social_security_benefit(2000, 67)
