"""Pydantic schemas for loan eligibility analysis and EMI simulation."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import Field, model_validator

from realty_api.core.constants import MAX_AMOUNT, MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS
from realty_api.core.enums import CreditTier, LoanDecisionStatus
from realty_api.models.schemas.common import Amount, CamelModel


# ==================== Eligibility Analysis Schemas ====================


class LoanAnalysisRequest(CamelModel):
    """Applicant inputs for POST /loan/analyze."""

    monthly_income: Decimal = Field(
        ...,
        gt=0,
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        description="Gross monthly income",
    )
    existing_emis: Decimal = Field(
        Decimal("0"),
        ge=0,
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
        description="EMIs already being paid each month",
    )
    credit_score: int = Field(..., ge=300, le=900)
    age: int = Field(..., gt=0, le=120)
    loan_amount_requested: Decimal = Field(
        ...,
        gt=0,
        max_digits=MONEY_MAX_DIGITS,
        decimal_places=MONEY_DECIMAL_PLACES,
    )


class LoanDecisionDetailsResponse(CamelModel):
    """Figures behind a loan decision."""

    credit_score: int
    requested_loan: Amount
    credit_tier: Optional[CreditTier] = None
    foir_cap: Optional[Amount] = None
    max_tenure: Optional[int] = None
    assigned_rate: Optional[Amount] = None
    net_surplus: Optional[Amount] = None
    max_eligible_loan: Optional[Amount] = None
    approved_loan: Optional[Amount] = None
    requested_emi: Optional[Amount] = None


class LoanAnalysisResponse(CamelModel):
    """A recorded loan decision."""

    id: UUID
    status: LoanDecisionStatus
    reason: str
    details: LoanDecisionDetailsResponse
    created_at: datetime


class LoanAnalysisDetailResponse(LoanAnalysisResponse):
    """A recorded loan decision together with the inputs that produced it."""

    monthly_income: Amount
    existing_emis: Amount
    credit_score: int
    age: int
    loan_amount_requested: Amount


class LoanAnalysisListResponse(CamelModel):
    """Paginated loan analysis history."""

    items: List[LoanAnalysisResponse]
    total: int
    page: int
    page_size: int
    total_pages: int


# ==================== EMI Simulator Schemas ====================


class EmiSimulationRequest(CamelModel):
    """
    Inputs for the EMI simulator.

    Give a principal to get its EMI, a monthly budget to get the largest
    principal it can service, or both.
    """

    annual_rate: Decimal = Field(..., ge=0, le=50, description="Annual rate in percent")
    tenure_years: Decimal = Field(..., ge=Decimal("1") / 12, le=40)
    principal: Optional[Decimal] = Field(None, gt=0, le=MAX_AMOUNT)
    monthly_budget: Optional[Decimal] = Field(None, gt=0, le=MAX_AMOUNT)

    @model_validator(mode="after")
    def require_principal_or_budget(self) -> "EmiSimulationRequest":
        """At least one of principal and monthly_budget must be present."""
        if self.principal is None and self.monthly_budget is None:
            raise ValueError("Provide principal, monthly_budget, or both")
        return self


class EmiSimulationResponse(CamelModel):
    """Simulator output."""

    annual_rate: Amount
    tenure_years: Amount
    tenure_months: int
    principal: Optional[Amount] = None
    emi: Optional[Amount] = None
    total_repayment: Optional[Amount] = None
    total_interest: Optional[Amount] = None
    monthly_budget: Optional[Amount] = None
    max_loan: Optional[Amount] = None
