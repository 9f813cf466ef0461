"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import BaseModel, ValidationError

from retireplan.core import (
    claim_adjustment_factor,
    contribution_limit,
    federal_tax,
    marginal_rate,
    profile_warnings,
    project_account,
    project_timeline,
    retirement_income,
    social_security_benefit,
    summarize_accounts,
    timeline_milestones,
)
from retireplan.domain.tables import DEFAULT_TABLES
from retireplan.schemas.calculators import (
    AccountProjectionRequest,
    AccountProjectionResponse,
    ContributionLimitQuery,
    ContributionLimitResponse,
    FederalTaxRequest,
    FederalTaxResponse,
    SocialSecurityRequest,
    SocialSecurityResponse,
)
from retireplan.schemas.health import HealthResponse
from retireplan.schemas.income import (
    PlanRequest,
    Readiness,
    RetirementIncomeResponse,
    TimelineResponse,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected %s %s: %d error(s)", request.method, request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.BAD_REQUEST


def _json_body() -> Any:
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    return raw_payload


def _respond(model: BaseModel) -> Any:
    return jsonify(model.model_dump(mode="json", by_alias=True))


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return _respond(HealthResponse(status="ok", tax_year=DEFAULT_TABLES.tax_year))


@api_bp.post("/calc/retirement-income")
def retirement_income_summary() -> Any:
    """Snapshot of income at the planned retirement age."""
    plan = PlanRequest.model_validate(_json_body())
    profile = plan.user_profile
    summary = retirement_income(plan.accounts, profile, plan.assumptions)

    ratio = None
    if profile.current_income:
        ratio = summary.total_annual_income / profile.current_income

    response = RetirementIncomeResponse(
        summary=summary,
        replacement_ratio=ratio,
        readiness=Readiness.from_ratio(ratio),
        years_to_retirement=profile.retirement_age - profile.current_age,
        years_in_retirement=profile.death_age - profile.retirement_age,
        account_summary=summarize_accounts(plan.accounts),
        warnings=profile_warnings(profile),
    )
    return _respond(response)


@api_bp.post("/calc/timeline")
def timeline() -> Any:
    """Lifetime balance series for the growth chart."""
    plan = PlanRequest.model_validate(_json_body())
    profile = plan.user_profile
    points = project_timeline(plan.accounts, profile, plan.assumptions)
    return _respond(
        TimelineResponse(
            points=points,
            milestones=timeline_milestones(points, profile),
            warnings=profile_warnings(profile),
        )
    )


@api_bp.post("/calc/account-projection")
def account_projection() -> Any:
    payload = AccountProjectionRequest.model_validate(_json_body())
    rows = project_account(
        payload.account,
        payload.current_age,
        payload.num_years,
        payload.assumptions,
    )
    return _respond(AccountProjectionResponse(projections=rows))


@api_bp.get("/calc/contribution-limit")
def contribution_limit_lookup() -> Any:
    query = ContributionLimitQuery.model_validate(request.args.to_dict())
    limit = contribution_limit(query.account_type, query.age, query.hsa_coverage)
    return _respond(
        ContributionLimitResponse(account_type=query.account_type, age=query.age, limit=limit)
    )


@api_bp.post("/calc/federal-tax")
def federal_tax_estimate() -> Any:
    payload = FederalTaxRequest.model_validate(_json_body())
    return _respond(
        FederalTaxResponse(
            tax=federal_tax(payload.income, payload.filing_status),
            marginal_rate=marginal_rate(payload.income, payload.filing_status),
        )
    )


@api_bp.post("/calc/social-security")
def social_security_estimate() -> Any:
    payload = SocialSecurityRequest.model_validate(_json_body())
    return _respond(
        SocialSecurityResponse(
            annual_benefit=social_security_benefit(
                payload.average_monthly_earnings, payload.claim_age
            ),
            adjustment_factor=claim_adjustment_factor(payload.claim_age),
        )
    )
