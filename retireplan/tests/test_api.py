from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def plan_payload() -> dict:
    return {
        "userProfile": {
            "currentAge": 30,
            "retirementAge": 65,
            "deathAge": 85,
            "maritalStatus": "single",
            "currentIncome": 75000,
        },
        "assumptions": {"returnRate": 0.07, "inflationRate": 0.03},
        "accounts": [
            {
                "id": 1,
                "type": "traditional_401k",
                "name": "Work 401k",
                "currentBalance": 10000,
                "annualContribution": 10000,
                "employerMatch": 0,
                "monthlyBenefit": 0,
                "description": "",
            },
            {"id": 2, "type": "social_security", "currentBalance": 0, "monthlyBenefit": 0},
        ],
    }


def test_health(client: FlaskClient):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json == {"status": "ok", "taxYear": 2024}


def test_retirement_income_summary(client: FlaskClient):
    response = client.post("/api/calc/retirement-income", json=plan_payload())

    assert response.status_code == 200
    body = response.get_json()
    summary = body["summary"]
    assert summary["totalBalance"] > 0
    assert isclose(summary["safeWithdrawalAmount"], summary["totalBalance"] * 0.04)
    assert isclose(summary["annualIncomeStreams"], 44000 * 0.90)
    assert isclose(body["replacementRatio"], summary["totalAnnualIncome"] / 75000)
    assert body["readiness"] in {"excellent", "good", "fair", "needs_work"}
    assert body["warnings"] == []


def test_zero_income_has_no_replacement_ratio(client: FlaskClient):
    payload = plan_payload()
    payload["userProfile"]["currentIncome"] = 0

    body = client.post("/api/calc/retirement-income", json=payload).get_json()

    assert body["replacementRatio"] is None
    assert body["readiness"] == "needs_work"


def test_inconsistent_profile_is_warned_not_rejected(client: FlaskClient):
    payload = plan_payload()
    payload["userProfile"]["retirementAge"] = 25

    response = client.post("/api/calc/retirement-income", json=payload)

    assert response.status_code == 200
    assert response.get_json()["warnings"]


def test_unknown_account_type_returns_400(client: FlaskClient):
    payload = plan_payload()
    payload["accounts"][0]["type"] = "annuity"

    response = client.post("/api/calc/retirement-income", json=payload)

    assert response.status_code == 400
    assert "detail" in response.get_json()


def test_timeline(client: FlaskClient):
    response = client.post("/api/calc/timeline", json=plan_payload())

    assert response.status_code == 200
    points = response.get_json()["points"]
    assert len(points) == 56
    assert points[-1]["age"] == 85
    assert "traditional_401k" in points[0]["balancesByType"]
    assert "social_security" not in points[0]["balancesByType"]


def test_account_projection(client: FlaskClient):
    payload = {
        "account": {"type": "roth_ira", "currentBalance": 1000, "annualContribution": 9000},
        "currentAge": 60,
        "numYears": 5,
        "assumptions": {"returnRate": 0.0},
    }

    response = client.post("/api/calc/account-projection", json=payload)

    assert response.status_code == 200
    rows = response.get_json()["projections"]
    assert [row["age"] for row in rows] == [60, 61, 62, 63, 64, 65]
    assert all(row["contribution"] == 8000 for row in rows)
    assert all(row["rmd"] == 0 for row in rows)


def test_contribution_limit_lookup(client: FlaskClient):
    response = client.get("/api/calc/contribution-limit?accountType=traditional_401k&age=50")
    assert response.status_code == 200
    assert response.get_json()["limit"] == 30500

    hsa = client.get("/api/calc/contribution-limit?accountType=hsa&age=40&hsaCoverage=family")
    assert hsa.get_json()["limit"] == 8550

    unknown = client.get("/api/calc/contribution-limit?accountType=pension&age=40")
    assert unknown.get_json()["limit"] == 0


def test_contribution_limit_requires_age(client: FlaskClient):
    response = client.get("/api/calc/contribution-limit?accountType=roth_ira")
    assert response.status_code == 400


def test_federal_tax(client: FlaskClient):
    response = client.post("/api/calc/federal-tax", json={"income": 100525, "filingStatus": "single"})

    assert response.status_code == 200
    body = response.get_json()
    assert isclose(body["tax"], 17168.50)
    assert body["marginalRate"] == 0.22


def test_social_security(client: FlaskClient):
    response = client.post(
        "/api/calc/social-security", json={"averageMonthlyEarnings": 3000, "claimAge": 67}
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["adjustmentFactor"] == 1.0
    assert isclose(body["annualBenefit"], 32400)


def test_implausible_death_age_returns_400(client: FlaskClient):
    payload = plan_payload()
    payload["userProfile"]["deathAge"] = 300000
    payload["accounts"] = [{"type": "taxable", "currentBalance": 1000}]

    response = client.post("/api/calc/timeline", json=payload)

    assert response.status_code == 400
    assert "detail" in response.get_json()


def test_retirement_income_reports_horizon_and_account_summary(client: FlaskClient):
    body = client.post("/api/calc/retirement-income", json=plan_payload()).get_json()

    assert body["yearsToRetirement"] == 35
    assert body["yearsInRetirement"] == 20
    assert body["accountSummary"] == [
        {
            "accountType": "traditional_401k",
            "label": "401(k) Traditional",
            "count": 1,
            "balance": 10000.0,
            "contribution": 10000.0,
        },
        {
            "accountType": "social_security",
            "label": "Social Security",
            "count": 1,
            "balance": 0.0,
            "contribution": 0.0,
        },
    ]


def test_timeline_reports_milestones(client: FlaskClient):
    body = client.post("/api/calc/timeline", json=plan_payload()).get_json()
    points = body["points"]
    milestones = body["milestones"]

    assert milestones["balanceAtRetirement"] == points[35]["totalBalance"]
    assert milestones["peakBalance"] == max(point["totalBalance"] for point in points)
    assert milestones["finalBalance"] == points[-1]["totalBalance"]
