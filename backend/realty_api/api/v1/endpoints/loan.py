"""Loan endpoints: eligibility analysis, history, EMI simulator and home loan planner."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.core.enums import LoanDecisionStatus
from realty_api.core.exceptions import InvalidInputError
from realty_api.deps import get_loan_policy, get_session
from realty_api.models.schemas.home_loan import HomeLoanPlanRequest, HomeLoanPlanResponse
from realty_api.models.schemas.loan import (
    EmiSimulationRequest,
    EmiSimulationResponse,
    LoanAnalysisDetailResponse,
    LoanAnalysisListResponse,
    LoanAnalysisRequest,
    LoanAnalysisResponse,
)
from realty_api.services.loan_analysis_service import LoanAnalysisService
from realty_api.services.loan_engine.amortization import (
    compute_emi,
    compute_totals,
    principal_from_emi,
    tenure_months,
)
from realty_api.services.loan_engine.evaluator import LoanApplication
from realty_api.services.loan_engine.planner import HomeLoanPlanner
from realty_api.services.loan_engine.policy import LoanPolicy

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    response_model=LoanAnalysisResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Analyze loan eligibility",
    description="Evaluate FOIR headroom, credit tier and tenure, and record the decision",
)
async def analyze_loan(
    request: LoanAnalysisRequest,
    db: Annotated[AsyncSession, Depends(get_session)],
    policy: Annotated[LoanPolicy, Depends(get_loan_policy)],
) -> LoanAnalysisResponse:
    """
    Analyze a loan request.

    The decision is one of:
    - APPROVED: the requested amount fits the affordability headroom
    - MODIFIED_APPROVAL: a reduced amount (the maximum eligible loan) is offered
    - REJECTED: over-leveraged, credit score too low, or too close to retirement

    A rejection is a normal outcome, not an error.
    """
    try:
        service = LoanAnalysisService(db, policy)
        analysis = await service.analyze(
            LoanApplication(
                monthly_income=request.monthly_income,
                existing_emis=request.existing_emis,
                credit_score=request.credit_score,
                age=request.age,
                loan_amount_requested=request.loan_amount_requested,
            )
        )
        return LoanAnalysisResponse.model_validate(analysis)

    except InvalidInputError as e:
        logger.error(f"Validation error analyzing loan: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error analyzing loan: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while analyzing the loan request",
        )


@router.get(
    "/analyses/{analysis_id}",
    response_model=LoanAnalysisDetailResponse,
    summary="Get loan analysis by ID",
    description="Retrieve a recorded loan analysis with its inputs",
)
async def get_loan_analysis(
    analysis_id: UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
) -> LoanAnalysisDetailResponse:
    """Retrieve a recorded loan analysis by ID."""
    service = LoanAnalysisService(db)
    analysis = await service.get_analysis(analysis_id)

    if not analysis:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Loan analysis with ID {analysis_id} not found",
        )

    return LoanAnalysisDetailResponse.model_validate(analysis)


@router.get(
    "/analyses",
    response_model=LoanAnalysisListResponse,
    summary="List loan analyses",
    description="Retrieve recorded loan analyses, newest first, with pagination",
)
async def list_loan_analyses(
    db: Annotated[AsyncSession, Depends(get_session)],
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    page_size: Annotated[
        int, Query(ge=1, le=100, description="Number of items per page")
    ] = 10,
    decision_status: Annotated[
        Optional[LoanDecisionStatus],
        Query(alias="status", description="Filter by decision status"),
    ] = None,
) -> LoanAnalysisListResponse:
    """List recorded loan analyses with pagination."""
    service = LoanAnalysisService(db)

    skip = (page - 1) * page_size
    analyses = await service.list_analyses(
        skip=skip, limit=page_size, status=decision_status
    )
    total = await service.count_analyses(decision_status)

    total_pages = (total + page_size - 1) // page_size if total > 0 else 1

    return LoanAnalysisListResponse(
        items=[LoanAnalysisResponse.model_validate(a) for a in analyses],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )


@router.post(
    "/emi",
    response_model=EmiSimulationResponse,
    summary="Simulate EMI",
    description="Compute the EMI of a principal and/or the largest loan a monthly budget can service",
)
async def simulate_emi(request: EmiSimulationRequest) -> EmiSimulationResponse:
    """
    EMI simulator.

    Pass the netSurplus of a loan analysis as monthlyBudget to see how the
    maximum loan moves with rate and tenure.
    """
    response = EmiSimulationResponse(
        annual_rate=request.annual_rate,
        tenure_years=request.tenure_years,
        tenure_months=tenure_months(request.tenure_years),
    )

    if request.principal is not None:
        emi = compute_emi(request.principal, request.annual_rate, request.tenure_years)
        total_repayment, total_interest = compute_totals(
            request.principal, emi, request.tenure_years
        )
        response.principal = request.principal
        response.emi = emi
        response.total_repayment = total_repayment
        response.total_interest = total_interest

    if request.monthly_budget is not None:
        response.monthly_budget = request.monthly_budget
        response.max_loan = principal_from_emi(
            request.monthly_budget, request.annual_rate, request.tenure_years
        )

    return response


@router.post(
    "/plan",
    response_model=HomeLoanPlanResponse,
    summary="Plan a home loan",
    description="Combine income capacity and property value (LTV) into a home loan plan with advisory notes",
)
async def plan_home_loan(
    request: HomeLoanPlanRequest,
    policy: Annotated[LoanPolicy, Depends(get_loan_policy)],
) -> HomeLoanPlanResponse:
    """
    Plan a home loan.

    The eligible loan is the lower of what the income can service and what
    the property value allows under the LTV ratio.
    """
    try:
        return HomeLoanPlanner(policy).plan(request)
    except ValueError as e:
        logger.error(f"Validation error planning home loan: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error planning home loan: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while planning the home loan",
        )
