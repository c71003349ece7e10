"""Loan analysis service: evaluate eligibility and record the outcome."""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.config import settings
from realty_api.core.enums import LoanDecisionStatus
from realty_api.models.domain.loan_analysis import LoanAnalysis
from realty_api.repositories.loan_analysis_repository import LoanAnalysisRepository
from realty_api.services.loan_engine.evaluator import (
    LoanApplication,
    LoanEligibilityEvaluator,
)
from realty_api.services.loan_engine.policy import LoanPolicy

logger = logging.getLogger(__name__)


class LoanAnalysisService:
    """
    Loan analysis service.

    This service:
    - Builds the lending policy from settings
    - Runs the (pure) eligibility evaluator
    - Persists each decision with its inputs for later retrieval
    """

    def __init__(self, db: AsyncSession, policy: Optional[LoanPolicy] = None):
        """
        Initialize the loan analysis service.

        Args:
            db: Async database session
            policy: Lending policy; defaults to the one configured in settings
        """
        self.db = db
        self.repo = LoanAnalysisRepository(db)
        self.evaluator = LoanEligibilityEvaluator(
            policy or LoanPolicy.from_settings(settings)
        )

    async def analyze(self, application: LoanApplication) -> LoanAnalysis:
        """
        Evaluate an application and record the decision.

        Args:
            application: Applicant inputs

        Returns:
            The persisted LoanAnalysis

        Raises:
            InvalidInputError: If the inputs are outside their valid domain
        """
        decision = self.evaluator.evaluate(application)

        logger.info(
            f"Loan analysis {decision.status.value}: income={application.monthly_income}, "
            f"emis={application.existing_emis}, score={application.credit_score}, "
            f"age={application.age}, requested={application.loan_amount_requested}"
        )

        analysis = await self.repo.create(
            monthly_income=application.monthly_income,
            existing_emis=application.existing_emis,
            credit_score=application.credit_score,
            age=application.age,
            loan_amount_requested=application.loan_amount_requested,
            status=decision.status,
            credit_tier=decision.details.credit_tier,
            reason=decision.reason,
            details=decision.details.to_json(),
        )
        await self.db.commit()
        return analysis

    async def get_analysis(self, analysis_id: UUID) -> Optional[LoanAnalysis]:
        """
        Retrieve a recorded analysis.

        Args:
            analysis_id: UUID of the analysis

        Returns:
            The analysis if found, None otherwise
        """
        return await self.repo.get_by_id(analysis_id)

    async def list_analyses(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[LoanDecisionStatus] = None,
    ) -> List[LoanAnalysis]:
        """List recorded analyses, newest first."""
        return await self.repo.list_recent(skip=skip, limit=limit, status=status)

    async def count_analyses(self, status: Optional[LoanDecisionStatus] = None) -> int:
        """Count recorded analyses."""
        return await self.repo.count_by_status(status)
