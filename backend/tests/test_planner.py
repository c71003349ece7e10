from decimal import Decimal

import pytest
from pydantic import ValidationError

from realty_api.core.enums import LimitingFactor, LoanDecisionStatus
from realty_api.models.schemas.home_loan import HomeLoanPlanRequest
from realty_api.services.loan_engine import HomeLoanPlanner, LoanPolicy


def make_request(payload, **sections):
    for section, overrides in sections.items():
        payload[section].update(overrides)
    return HomeLoanPlanRequest.model_validate(payload)


def test_income_limited_plan_is_approved(plan_payload):
    plan = HomeLoanPlanner().plan(make_request(plan_payload))

    assert plan.status == LoanDecisionStatus.APPROVED
    assert plan.approved_loan == Decimal("3000000")

    assert plan.profile.foir == pytest.approx(Decimal("0.53"))
    assert plan.profile.risk_factor == pytest.approx(Decimal("0.94"))
    assert plan.profile.adjusted_interest_rate == pytest.approx(Decimal("8.46"))
    assert plan.profile.tenure_years == Decimal("20")

    assert plan.property_costs.cost_per_sqft == Decimal("2640.00")
    assert plan.property_costs.property_value == Decimal("7280000.00")

    eligibility = plan.eligibility
    assert eligibility.max_allowed_total_emi == Decimal("53000.00")
    assert eligibility.available_surplus == Decimal("43000.00")
    assert eligibility.max_emi == Decimal("40420.00")
    assert eligibility.ltv_based_limit == Decimal("5824000.00")
    assert eligibility.limiting_factor == LimitingFactor.INCOME
    assert eligibility.eligible_loan == eligibility.income_based_limit
    assert eligibility.eligible_loan < eligibility.ltv_based_limit

    assert any("unlock" in s for s in plan.advisory.suggestions)
    assert plan.advisory.warnings == []


def test_ltv_limited_plan_gets_modified_approval(plan_payload):
    request = make_request(plan_payload, loanPreferences={"ltvRatio": 0.2})
    plan = HomeLoanPlanner().plan(request)

    assert plan.status == LoanDecisionStatus.MODIFIED_APPROVAL
    assert plan.eligibility.limiting_factor == LimitingFactor.LTV
    assert plan.approved_loan == Decimal("1456000.00")
    assert "Property value limits loan despite income capacity" in plan.advisory.warnings


def test_low_credit_score_short_circuits(plan_payload):
    request = make_request(plan_payload, financialProfile={"creditScore": 600})
    plan = HomeLoanPlanner().plan(request)

    assert plan.status == LoanDecisionStatus.REJECTED
    assert plan.reason == "Credit score below minimum threshold"
    assert plan.approved_loan is None
    assert plan.profile is None
    assert plan.eligibility is None


def test_tenure_defaults_to_years_until_retirement(plan_payload):
    request = make_request(plan_payload, loanPreferences={"desiredTenureYears": None})
    plan = HomeLoanPlanner().plan(request)

    assert plan.profile.max_tenure_years == 30
    assert plan.profile.tenure_years == Decimal("30")


def test_desired_tenure_is_capped_by_age(plan_payload):
    request = make_request(plan_payload, financialProfile={"age": 58})
    plan = HomeLoanPlanner().plan(request)

    assert plan.profile.max_tenure_years == 2
    assert plan.profile.tenure_years == Decimal("2")


def test_no_tenure_left_is_rejected(plan_payload):
    request = make_request(plan_payload, financialProfile={"age": 65})
    plan = HomeLoanPlanner().plan(request)

    assert plan.status == LoanDecisionStatus.REJECTED
    assert plan.approved_loan is None
    assert plan.eligibility.eligible_loan == Decimal("0")


def test_plot_price_ignored_without_plot(plan_payload):
    request = make_request(plan_payload, propertyDetails={"includePlot": False})
    plan = HomeLoanPlanner().plan(request)

    assert plan.property_costs.plot_cost == Decimal("0")
    assert plan.property_costs.property_value == Decimal("5280000.00")


def test_underage_applicant_fails_validation(plan_payload):
    plan_payload["financialProfile"]["age"] = 17
    with pytest.raises(ValidationError):
        HomeLoanPlanRequest.model_validate(plan_payload)


def test_credit_floor_follows_the_policy(plan_payload):
    request = make_request(plan_payload, financialProfile={"creditScore": 680})

    default_plan = HomeLoanPlanner().plan(request)
    strict_plan = HomeLoanPlanner(LoanPolicy(min_credit_score=700)).plan(request)

    assert default_plan.status != LoanDecisionStatus.REJECTED
    assert strict_plan.status == LoanDecisionStatus.REJECTED
    assert strict_plan.reason == "Credit score below minimum threshold"


@pytest.mark.parametrize(
    "section, field",
    [
        ("financialProfile", "monthlyIncome"),
        ("loanPreferences", "loanAmountRequested"),
        ("propertyDetails", "plotPrice"),
        ("propertyDetails", "plotSizeSqft"),
        ("propertyDetails", "baseCostPerSqft"),
    ],
)
def test_unbounded_amounts_fail_validation(plan_payload, section, field):
    with pytest.raises(ValidationError):
        make_request(plan_payload, **{section: {field: 1e30}})
