"""Rule-based advisory notes for a home loan plan."""

from decimal import Decimal

from realty_api.core.enums import LimitingFactor
from realty_api.models.schemas.home_loan import (
    Advisory,
    EligibilityBreakdown,
    FinancialProfile,
)

EMI_WARNING_RATIO = Decimal("0.7")
EMI_SUGGESTION_RATIO = Decimal("0.6")


def generate_advisory(
    eligibility: EligibilityBreakdown,
    profile: FinancialProfile,
) -> Advisory:
    """
    Build insights, warnings and suggestions from the eligibility breakdown.

    The EMI ratio compares the EMI with the applicant's free cash
    (income minus obligations); with no free cash the ratio is 1.
    """
    advisory = Advisory()

    free_cash = max(profile.monthly_income - profile.other_obligations, Decimal("0"))
    emi_ratio = eligibility.emi / free_cash if free_cash > 0 else Decimal("1")

    advisory.insights.append(
        f"Loan eligibility capped by {eligibility.limiting_factor.value.lower()} constraints"
    )
    advisory.insights.append(
        f"Tenure of {eligibility.tenure_years.normalize():f} years maximizes "
        "eligibility under retirement rules"
    )

    if emi_ratio > EMI_WARNING_RATIO:
        advisory.warnings.append(f"EMI consumes {emi_ratio * 100:.0f}% of free cash")

    if eligibility.limiting_factor == LimitingFactor.LTV:
        advisory.warnings.append("Property value limits loan despite income capacity")

    if eligibility.limiting_factor == LimitingFactor.INCOME:
        gap = eligibility.ltv_based_limit - eligibility.income_based_limit
        if gap > 0:
            advisory.suggestions.append(
                f"Increase income or reduce obligations to unlock {gap:,.0f}"
            )

    if emi_ratio > EMI_SUGGESTION_RATIO:
        advisory.suggestions.append(
            "Consider reducing loan amount to improve monthly cash flow"
        )

    return advisory
