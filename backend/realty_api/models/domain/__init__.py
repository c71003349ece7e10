"""Domain models for the application."""

from realty_api.models.domain.loan_analysis import LoanAnalysis

__all__ = [
    "LoanAnalysis",
]
