"""Loan capacity: income-side and LTV-side limits for the home loan planner."""

from decimal import Decimal

from realty_api.core.enums import LimitingFactor
from realty_api.models.schemas.home_loan import (
    EligibilityBreakdown,
    FinancialProfile,
    InterpretedProfile,
)
from realty_api.services.loan_engine.amortization import (
    ZERO,
    compute_emi,
    compute_totals,
    principal_from_emi,
    round_money,
)


def resolve_eligibility(
    profile: FinancialProfile,
    interpreted: InterpretedProfile,
    property_value: Decimal,
) -> EligibilityBreakdown:
    """
    Resolve the eligible loan as the lower of income capacity and LTV capacity.

    Income capacity: the surplus left under the FOIR cap after existing
    obligations, scaled by the risk factor, converted to a principal at
    the adjusted rate over the planned tenure.

    LTV capacity: property value times the LTV ratio.

    Ties are attributed to income.
    """
    max_allowed_total_emi = round_money(profile.monthly_income * interpreted.foir)
    available_surplus = max(max_allowed_total_emi - profile.other_obligations, ZERO)
    max_emi = round_money(available_surplus * interpreted.risk_factor)

    rate = interpreted.adjusted_interest_rate
    tenure = interpreted.tenure_years

    income_based_limit = principal_from_emi(max_emi, rate, tenure)
    ltv_based_limit = round_money(property_value * interpreted.ltv_ratio)

    eligible_loan = min(income_based_limit, ltv_based_limit)
    limiting_factor = (
        LimitingFactor.INCOME
        if eligible_loan == income_based_limit
        else LimitingFactor.LTV
    )

    emi = compute_emi(eligible_loan, rate, tenure)
    total_repayment, total_interest = compute_totals(eligible_loan, emi, tenure)

    return EligibilityBreakdown(
        max_allowed_total_emi=max_allowed_total_emi,
        available_surplus=available_surplus,
        max_emi=max_emi,
        income_based_limit=income_based_limit,
        ltv_based_limit=ltv_based_limit,
        limiting_factor=limiting_factor,
        eligible_loan=eligible_loan,
        emi=emi,
        tenure_years=tenure,
        interest_rate=rate,
        total_interest=total_interest,
        total_repayment=total_repayment,
    )
