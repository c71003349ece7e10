"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.config import settings
from realty_api.deps import get_loan_policy, get_session
from realty_api.services.loan_engine.policy import LoanPolicy

router = APIRouter()


@router.get("/health")
async def health_check(
    db: Annotated[AsyncSession, Depends(get_session)],
    policy: Annotated[LoanPolicy, Depends(get_loan_policy)],
) -> dict:
    """Report API, database and loan policy status."""
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "api": "healthy",
        "database": db_status,
        "environment": settings.ENVIRONMENT,
        "loanPolicy": {
            "baseRate": float(policy.base_rate),
            "retirementAge": policy.retirement_age,
            "maxTenureYears": policy.max_tenure_years,
            "minCreditScore": policy.min_credit_score,
        },
    }
