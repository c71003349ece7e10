"""Loan eligibility evaluator: FOIR, credit tier, tenure and amortization."""

import logging
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from realty_api.core.constants import MAX_AMOUNT
from realty_api.core.enums import CreditTier, LoanDecisionStatus
from realty_api.core.exceptions import InvalidInputError
from realty_api.services.loan_engine.amortization import (
    ZERO,
    compute_emi,
    principal_from_emi,
    round_money,
    to_decimal,
)
from realty_api.services.loan_engine.policy import DEFAULT_LOAN_POLICY, LoanPolicy

logger = logging.getLogger(__name__)

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 900


@dataclass
class LoanApplication:
    """
    Applicant financial inputs for an eligibility check.

    Attributes:
        monthly_income: Gross monthly income
        existing_emis: Sum of EMIs already being paid
        credit_score: Bureau score in [300, 900]
        age: Applicant age in years
        loan_amount_requested: Principal the applicant asks for
    """

    monthly_income: Decimal
    existing_emis: Decimal
    credit_score: int
    age: int
    loan_amount_requested: Decimal

    def __post_init__(self):
        """Ensure monetary fields are Decimals."""
        self.monthly_income = to_decimal(self.monthly_income)
        self.existing_emis = to_decimal(self.existing_emis)
        self.loan_amount_requested = to_decimal(self.loan_amount_requested)


@dataclass
class LoanDecisionDetails:
    """Figures behind a decision; fields the evaluation never reached stay None."""

    credit_score: int
    requested_loan: Decimal
    credit_tier: Optional[CreditTier] = None
    foir_cap: Optional[Decimal] = None
    max_tenure: Optional[int] = None
    assigned_rate: Optional[Decimal] = None
    net_surplus: Optional[Decimal] = None
    max_eligible_loan: Optional[Decimal] = None
    approved_loan: Optional[Decimal] = None
    requested_emi: Optional[Decimal] = None

    def to_json(self) -> Dict[str, Any]:
        """JSON-safe dict (Decimals as floats, enums as values)."""
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, Decimal):
                data[key] = float(value)
            elif isinstance(value, CreditTier):
                data[key] = value.value
        return data


@dataclass
class LoanDecision:
    """Eligibility outcome returned to the caller."""

    status: LoanDecisionStatus
    reason: str
    details: LoanDecisionDetails


class LoanEligibilityEvaluator:
    """
    Evaluate an applicant against the lending policy.

    The evaluation is a single pass:
    1. FOIR headroom (income cap minus existing EMIs)
    2. Credit tier and assigned rate
    3. Tenure until retirement
    4. Largest principal the headroom can service
    5. Comparison with the requested amount

    Instances hold only the (immutable) policy, so one evaluator can be
    shared across requests.
    """

    def __init__(self, policy: LoanPolicy = DEFAULT_LOAN_POLICY):
        self.policy = policy

    def evaluate(self, application: LoanApplication) -> LoanDecision:
        """
        Evaluate a loan application.

        Args:
            application: Pre-validated applicant inputs

        Returns:
            LoanDecision with status, reason and details

        Raises:
            InvalidInputError: If any input is outside its domain
        """
        self._validate(application)
        policy = self.policy

        details = LoanDecisionDetails(
            credit_score=application.credit_score,
            requested_loan=application.loan_amount_requested,
        )

        # 1. FOIR headroom
        foir_cap = policy.foir_cap(application.monthly_income)
        max_allowable_emi = round_money(
            application.monthly_income * foir_cap - application.existing_emis
        )
        details.foir_cap = foir_cap
        details.net_surplus = max_allowable_emi

        if max_allowable_emi <= ZERO:
            return LoanDecision(
                status=LoanDecisionStatus.REJECTED,
                reason=(
                    "Existing debts (EMIs) consume all your eligibility: "
                    f"obligations of {application.existing_emis:,.2f} exceed "
                    f"{foir_cap * 100:.0f}% of monthly income."
                ),
                details=details,
            )

        # 2. Credit tier
        band = policy.credit_band(application.credit_score)
        if band is None:
            details.credit_tier = CreditTier.SUBPRIME
            return LoanDecision(
                status=LoanDecisionStatus.REJECTED,
                reason=(
                    f"Credit score {application.credit_score} is below the "
                    f"minimum of {policy.min_credit_score} and is too risky."
                ),
                details=details,
            )
        rate = policy.rate_for(band)
        details.credit_tier = band.tier
        details.assigned_rate = rate

        # 3. Tenure
        tenure = policy.max_tenure_for_age(application.age)
        details.max_tenure = tenure
        if tenure <= 0 or tenure < policy.min_tenure_years:
            return LoanDecision(
                status=LoanDecisionStatus.REJECTED,
                reason=(
                    f"Based on age {application.age}, tenure is insufficient "
                    f"(< {policy.min_tenure_years} years before retirement at "
                    f"{policy.retirement_age})."
                ),
                details=details,
            )

        # 4. Serviceable principal
        max_loan = principal_from_emi(max_allowable_emi, rate, tenure)
        details.max_eligible_loan = max_loan

        if max_loan <= ZERO:
            return LoanDecision(
                status=LoanDecisionStatus.REJECTED,
                reason="Monthly surplus cannot service any loan at the assigned rate and tenure.",
                details=details,
            )

        # 5. Decision
        requested = application.loan_amount_requested
        details.requested_emi = compute_emi(requested, rate, tenure)

        if requested <= max_loan:
            details.approved_loan = requested
            return LoanDecision(
                status=LoanDecisionStatus.APPROVED,
                reason="Congratulations! You can comfortably afford this loan.",
                details=details,
            )

        details.approved_loan = max_loan
        return LoanDecision(
            status=LoanDecisionStatus.MODIFIED_APPROVAL,
            reason=(
                "The requested loan is too high for your income. "
                f"We can offer a maximum of {max_loan:,.2f} over {tenure} years "
                f"at {rate}%."
            ),
            details=details,
        )

    def _validate(self, application: LoanApplication) -> None:
        """Reject out-of-domain input; the API layer normally catches these first."""
        errors: Dict[str, str] = {}

        self._check_amount(errors, "monthly_income", application.monthly_income)
        self._check_amount(
            errors, "existing_emis", application.existing_emis, allow_zero=True
        )
        if not isinstance(application.credit_score, int) or not (
            MIN_CREDIT_SCORE <= application.credit_score <= MAX_CREDIT_SCORE
        ):
            errors["credit_score"] = (
                f"must be an integer between {MIN_CREDIT_SCORE} and {MAX_CREDIT_SCORE}"
            )
        if not isinstance(application.age, int) or application.age <= 0:
            errors["age"] = "must be a positive integer"
        self._check_amount(
            errors, "loan_amount_requested", application.loan_amount_requested
        )

        if errors:
            logger.warning(f"Rejected invalid loan application input: {errors}")
            raise InvalidInputError(errors)

    @staticmethod
    def _check_amount(
        errors: Dict[str, str],
        field: str,
        value: Decimal,
        allow_zero: bool = False,
    ) -> None:
        """Record an error unless value is a finite amount no larger than MAX_AMOUNT."""
        if not value.is_finite():
            errors[field] = "must be a finite number"
        elif value > MAX_AMOUNT:
            errors[field] = f"must not exceed {MAX_AMOUNT:,.2f}"
        elif allow_zero and value < ZERO:
            errors[field] = "must not be negative"
        elif not allow_zero and value <= ZERO:
            errors[field] = "must be positive"


def evaluate(
    application: LoanApplication,
    policy: LoanPolicy = DEFAULT_LOAN_POLICY,
) -> LoanDecision:
    """Evaluate an application under a policy (default: the standard policy)."""
    return LoanEligibilityEvaluator(policy).evaluate(application)
