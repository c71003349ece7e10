"""Loan analysis domain model recording eligibility decisions."""

from decimal import Decimal
from typing import Optional

from sqlalchemy import JSON, Enum as SQLEnum, Index, Integer, Numeric, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from realty_api.core.enums import CreditTier, LoanDecisionStatus
from realty_api.db.base import BaseModel


class LoanAnalysis(BaseModel):
    """One run of the loan eligibility evaluator: inputs and decision."""

    __tablename__ = "loan_analyses"
    __table_args__ = (Index("ix_loan_analyses_created_at", "created_at"),)

    # Applicant inputs
    monthly_income: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    existing_emis: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    credit_score: Mapped[int] = mapped_column(Integer, nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    loan_amount_requested: Mapped[Decimal] = mapped_column(
        Numeric(15, 2), nullable=False
    )

    # Decision
    status: Mapped[LoanDecisionStatus] = mapped_column(
        SQLEnum(LoanDecisionStatus, name="loan_decision_status"),
        nullable=False,
        index=True,
    )
    credit_tier: Mapped[Optional[CreditTier]] = mapped_column(
        SQLEnum(CreditTier, name="credit_tier"),
        nullable=True,
    )
    reason: Mapped[str] = mapped_column(Text, nullable=False)

    # Figures behind the decision (rate, tenure, surplus, limits)
    details: Mapped[dict] = mapped_column(
        JSON().with_variant(JSONB, "postgresql"),
        nullable=False,
        default=dict,
    )

    def __repr__(self) -> str:
        return (
            f"<LoanAnalysis(id={self.id}, status={self.status.value}, "
            f"credit_score={self.credit_score}, requested={self.loan_amount_requested})>"
        )
