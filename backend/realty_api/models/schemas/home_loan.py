"""Pydantic schemas for the home loan planner."""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from realty_api.core.constants import MAX_AMOUNT, MAX_AREA_SQFT, MAX_COST_PER_SQFT
from realty_api.core.enums import LimitingFactor, LoanDecisionStatus
from realty_api.models.schemas.common import Amount, CamelModel


# ==================== Request Schemas ====================


class FinancialProfile(CamelModel):
    """Applicant finances."""

    monthly_income: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    other_obligations: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    age: int = Field(..., ge=18, le=70)
    credit_score: int = Field(..., ge=300, le=900)
    employment_stability_score: Decimal = Field(..., ge=0, le=1)


class LoanPreferences(CamelModel):
    """What the applicant wants to borrow and on which terms."""

    desired_tenure_years: Optional[Decimal] = Field(None, ge=1, le=40)
    loan_amount_requested: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    base_interest_rate: Decimal = Field(..., ge=0, le=30)
    ltv_ratio: Decimal = Field(..., ge=0, le=1)


class PropertyDetails(CamelModel):
    """The home being financed."""

    include_plot: bool
    plot_price: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    plot_size_sqft: Decimal = Field(..., ge=0, le=MAX_AREA_SQFT)
    floors: int = Field(..., ge=1, le=100)
    base_cost_per_sqft: Decimal = Field(..., ge=0, le=MAX_COST_PER_SQFT)
    luxury_level: Decimal = Field(..., ge=0, le=1)
    location_score: Decimal = Field(..., ge=0, le=1)


class HomeLoanPlanRequest(CamelModel):
    """Inputs for POST /loan/plan."""

    financial_profile: FinancialProfile
    loan_preferences: LoanPreferences
    property_details: PropertyDetails


# ==================== Response Schemas ====================


class InterpretedProfile(CamelModel):
    """Underwriting parameters derived from the applicant profile."""

    foir: Amount
    risk_factor: Amount
    adjusted_interest_rate: Amount
    luxury_multiplier: Amount
    location_multiplier: Amount
    max_tenure_years: int
    tenure_years: Amount
    ltv_ratio: Amount


class PropertyCosts(CamelModel):
    """Estimated cost of the property."""

    built_up_area: Amount
    cost_per_sqft: Amount
    construction_cost: Amount
    plot_cost: Amount
    property_value: Amount


class EligibilityBreakdown(CamelModel):
    """Income-side and LTV-side loan limits and the resulting EMI."""

    max_allowed_total_emi: Amount
    available_surplus: Amount
    max_emi: Amount
    income_based_limit: Amount
    ltv_based_limit: Amount
    limiting_factor: LimitingFactor
    eligible_loan: Amount
    emi: Amount
    tenure_years: Amount
    interest_rate: Amount
    total_interest: Amount
    total_repayment: Amount


class Advisory(CamelModel):
    """Rule-based guidance attached to a plan."""

    insights: List[str] = []
    warnings: List[str] = []
    suggestions: List[str] = []


class HomeLoanPlanResponse(CamelModel):
    """Outcome of the home loan planner."""

    status: LoanDecisionStatus
    reason: str
    requested_loan: Amount
    approved_loan: Optional[Amount] = None
    profile: Optional[InterpretedProfile] = None
    property_costs: Optional[PropertyCosts] = None
    eligibility: Optional[EligibilityBreakdown] = None
    advisory: Optional[Advisory] = None
