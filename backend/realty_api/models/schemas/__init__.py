"""Pydantic schemas for API validation and serialization."""

from realty_api.models.schemas.estimator import (
    ConstructionEstimateRequest,
    ConstructionEstimateResponse,
    MaterialLine,
)
from realty_api.models.schemas.home_loan import (
    Advisory,
    EligibilityBreakdown,
    FinancialProfile,
    HomeLoanPlanRequest,
    HomeLoanPlanResponse,
    InterpretedProfile,
    LoanPreferences,
    PropertyCosts,
    PropertyDetails,
)
from realty_api.models.schemas.loan import (
    EmiSimulationRequest,
    EmiSimulationResponse,
    LoanAnalysisDetailResponse,
    LoanAnalysisListResponse,
    LoanAnalysisRequest,
    LoanAnalysisResponse,
    LoanDecisionDetailsResponse,
)
from realty_api.models.schemas.vastu import (
    VastuFindingResponse,
    VastuRequest,
    VastuResponse,
    ZoneDetail,
)

__all__ = [
    # Loan analysis schemas
    "LoanAnalysisRequest",
    "LoanDecisionDetailsResponse",
    "LoanAnalysisResponse",
    "LoanAnalysisDetailResponse",
    "LoanAnalysisListResponse",
    "EmiSimulationRequest",
    "EmiSimulationResponse",
    # Home loan planner schemas
    "FinancialProfile",
    "LoanPreferences",
    "PropertyDetails",
    "HomeLoanPlanRequest",
    "InterpretedProfile",
    "PropertyCosts",
    "EligibilityBreakdown",
    "Advisory",
    "HomeLoanPlanResponse",
    # Estimator schemas
    "ConstructionEstimateRequest",
    "MaterialLine",
    "ConstructionEstimateResponse",
    # Vastu schemas
    "VastuRequest",
    "VastuFindingResponse",
    "ZoneDetail",
    "VastuResponse",
]
