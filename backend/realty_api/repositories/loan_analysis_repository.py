"""Repository for recorded loan analyses."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.core.enums import LoanDecisionStatus
from realty_api.models.domain.loan_analysis import LoanAnalysis
from realty_api.repositories.base import BaseRepository


class LoanAnalysisRepository(BaseRepository[LoanAnalysis]):
    """
    Repository for LoanAnalysis.

    Adds newest-first listing and status filtering on top of the base CRUD.
    """

    def __init__(self, db: AsyncSession):
        """
        Initialize the loan analysis repository.

        Args:
            db: Async database session
        """
        super().__init__(LoanAnalysis, db)

    async def list_recent(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[LoanDecisionStatus] = None,
    ) -> List[LoanAnalysis]:
        """
        List analyses, newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            status: Only return analyses with this decision status

        Returns:
            List of analyses
        """
        return await self.get_all(
            skip=skip,
            limit=limit,
            order_by=LoanAnalysis.created_at.desc(),
            status=status,
        )

    async def count_by_status(self, status: Optional[LoanDecisionStatus] = None) -> int:
        """Count analyses, optionally restricted to one decision status."""
        return await self.count(status=status)
