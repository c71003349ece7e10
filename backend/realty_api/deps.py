"""Dependency injection for FastAPI endpoints."""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from realty_api.config import settings
from realty_api.db.session import get_db
from realty_api.services.loan_engine.policy import LoanPolicy

__all__ = ["get_db", "get_loan_policy", "get_session"]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped database session; committed on success, rolled back on error."""
    async for session in get_db():
        yield session


@lru_cache
def get_loan_policy() -> LoanPolicy:
    """Lending policy built once from settings."""
    return LoanPolicy.from_settings(settings)
