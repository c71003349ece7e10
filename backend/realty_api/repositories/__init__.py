from .base import BaseRepository
from .loan_analysis_repository import LoanAnalysisRepository

__all__ = [
    "BaseRepository",
    "LoanAnalysisRepository",
]
