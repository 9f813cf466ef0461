from __future__ import annotations

from math import isclose

from retireplan.core.projection import project_account
from retireplan.models import Account, AccountType, EconomicAssumptions, HsaCoverage


def test_row_count_and_ages():
    account = Account(type=AccountType.TRADITIONAL_401K, current_balance=50000, annual_contribution=5000)

    rows = project_account(account, current_age=60, num_years=5, assumptions=EconomicAssumptions())

    assert len(rows) == 6
    assert [row.year for row in rows] == [0, 1, 2, 3, 4, 5]
    assert [row.age for row in rows] == [60, 61, 62, 63, 64, 65]


def test_contribution_lands_before_growth():
    account = Account(type=AccountType.ROTH_IRA, current_balance=1000, annual_contribution=1000)
    assumptions = EconomicAssumptions(return_rate=0.10)

    rows = project_account(account, 40, 1, assumptions)

    assert rows[0].contribution == 1000
    assert isclose(rows[0].balance, (1000 + 1000) * 1.1)
    assert isclose(rows[1].balance, (2200 + 1000) * 1.1)


def test_taxable_contributions_resolve_to_zero():
    account = Account(type=AccountType.TAXABLE, current_balance=1000, annual_contribution=500)

    rows = project_account(account, 40, 1, EconomicAssumptions(return_rate=0.10))

    assert all(row.contribution == 0 for row in rows)
    assert isclose(rows[1].balance, 1210.0)


def test_contribution_is_capped_per_year_with_catch_up():
    account = Account(type=AccountType.TRADITIONAL_401K, current_balance=0, annual_contribution=50000)
    assumptions = EconomicAssumptions(return_rate=0.0)

    rows = project_account(account, 48, 3, assumptions)

    assert [row.contribution for row in rows] == [23000, 23000, 30500, 30500]
    assert isclose(rows[-1].balance, 23000 * 2 + 30500 * 2)


def test_negative_contribution_is_clamped_to_zero():
    account = Account(type=AccountType.ROTH_IRA, current_balance=1000, annual_contribution=-500)

    rows = project_account(account, 30, 2, EconomicAssumptions(return_rate=0.0))

    assert all(row.contribution == 0 for row in rows)
    assert rows[-1].balance == 1000


def test_hsa_uses_coverage_tier():
    family = Account(type=AccountType.HSA, annual_contribution=20000, hsa_coverage=HsaCoverage.FAMILY)
    single = Account(type=AccountType.HSA, annual_contribution=20000)

    assert project_account(family, 40, 0, EconomicAssumptions())[0].contribution == 8550
    assert project_account(single, 40, 0, EconomicAssumptions())[0].contribution == 4300


def test_traditional_accounts_take_rmds_from_grown_balance():
    account = Account(type=AccountType.TRADITIONAL_IRA, current_balance=100000)
    assumptions = EconomicAssumptions(return_rate=0.05)

    rows = project_account(account, 70, 3, assumptions)

    assert rows[0].rmd == 0 and rows[1].rmd == 0
    grown = 100000 * 1.05**3
    assert isclose(rows[2].rmd, grown / 27.4)
    assert isclose(rows[2].balance, grown - grown / 27.4)
    assert rows[3].rmd > 0


def test_roth_accounts_never_take_rmds():
    for kind in (AccountType.ROTH_IRA, AccountType.ROTH_401K):
        account = Account(type=kind, current_balance=250000)
        rows = project_account(account, 95, 10, EconomicAssumptions(return_rate=0.04))

        assert all(row.rmd == 0 for row in rows)
        assert isclose(rows[-1].balance, 250000 * 1.04**11)


def test_balance_never_reported_negative():
    account = Account(type=AccountType.TAXABLE, current_balance=-1000)

    rows = project_account(account, 30, 3, EconomicAssumptions(return_rate=0.05))

    assert all(row.balance == 0 for row in rows)


def test_negative_horizon_yields_no_rows():
    account = Account(current_balance=1000)
    assert project_account(account, 70, -5, EconomicAssumptions()) == []


def test_projection_does_not_mutate_account():
    account = Account(type=AccountType.TRADITIONAL_401K, current_balance=10000, annual_contribution=10000)
    before = account.model_dump()

    project_account(account, 30, 40, EconomicAssumptions())

    assert account.model_dump() == before
