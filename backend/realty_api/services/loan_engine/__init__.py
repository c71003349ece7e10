"""Loan engine: EMI maths, lending policy, eligibility evaluation and home loan planning."""

from .evaluator import (
    LoanApplication,
    LoanDecision,
    LoanDecisionDetails,
    LoanEligibilityEvaluator,
    evaluate,
)
from .planner import HomeLoanPlanner
from .policy import DEFAULT_LOAN_POLICY, CreditBand, FoirBand, LoanPolicy

__all__ = [
    "CreditBand",
    "DEFAULT_LOAN_POLICY",
    "FoirBand",
    "HomeLoanPlanner",
    "LoanApplication",
    "LoanDecision",
    "LoanDecisionDetails",
    "LoanEligibilityEvaluator",
    "LoanPolicy",
    "evaluate",
]
