"""Service layer for business logic."""

from realty_api.services.loan_analysis_service import LoanAnalysisService

__all__ = ["LoanAnalysisService"]
