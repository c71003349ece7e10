"""Home loan planner orchestrating profile, property, capacity and advisory steps."""

import logging
from decimal import Decimal
from typing import Optional, Tuple

from realty_api.core.enums import LoanDecisionStatus
from realty_api.models.schemas.home_loan import (
    EligibilityBreakdown,
    HomeLoanPlanRequest,
    HomeLoanPlanResponse,
    InterpretedProfile,
)
from realty_api.services.loan_engine import profile as profile_rules
from realty_api.services.loan_engine.advisory import generate_advisory
from realty_api.services.loan_engine.capacity import resolve_eligibility
from realty_api.services.loan_engine.policy import DEFAULT_LOAN_POLICY, LoanPolicy
from realty_api.services.loan_engine.property_estimator import estimate_property_costs

logger = logging.getLogger(__name__)


class HomeLoanPlanner:
    """
    Plan a home loan against both the applicant's income and the property.

    Pipeline:
    1. Normalize tenure (desired tenure capped by years to retirement)
    2. Interpret the profile into FOIR, risk factor and adjusted rate
    3. Estimate property value
    4. Resolve eligibility (min of income and LTV capacity)
    5. Resolve approval
    6. Attach advisory notes
    """

    def __init__(self, policy: LoanPolicy = DEFAULT_LOAN_POLICY):
        self.policy = policy

    def plan(self, request: HomeLoanPlanRequest) -> HomeLoanPlanResponse:
        """
        Run the planner.

        Args:
            request: Validated planner inputs

        Returns:
            HomeLoanPlanResponse; a credit rejection short-circuits the pipeline
        """
        financial = request.financial_profile
        preferences = request.loan_preferences
        requested = preferences.loan_amount_requested

        if financial.credit_score < self.policy.min_credit_score:
            logger.info(
                f"Home loan plan rejected: credit score {financial.credit_score} "
                f"below {self.policy.min_credit_score}"
            )
            return HomeLoanPlanResponse(
                status=LoanDecisionStatus.REJECTED,
                reason="Credit score below minimum threshold",
                requested_loan=requested,
            )

        max_tenure = self.policy.max_tenure_for_age(financial.age)
        tenure = self._normalize_tenure(preferences.desired_tenure_years, max_tenure)

        interpreted = InterpretedProfile(
            foir=profile_rules.derive_foir(financial),
            risk_factor=profile_rules.derive_risk_factor(financial),
            adjusted_interest_rate=profile_rules.derive_adjusted_rate(
                preferences.base_interest_rate, financial
            ),
            luxury_multiplier=profile_rules.luxury_multiplier(
                request.property_details.luxury_level
            ),
            location_multiplier=profile_rules.location_multiplier(
                request.property_details.location_score
            ),
            max_tenure_years=max_tenure,
            tenure_years=tenure,
            ltv_ratio=preferences.ltv_ratio,
        )

        property_costs = estimate_property_costs(
            request.property_details,
            interpreted.luxury_multiplier,
            interpreted.location_multiplier,
        )

        eligibility = resolve_eligibility(
            financial, interpreted, property_costs.property_value
        )
        status, approved_loan, reason = self._resolve_approval(requested, eligibility)
        advisory = generate_advisory(eligibility, financial)

        logger.info(
            f"Home loan plan {status.value}: requested {requested}, "
            f"eligible {eligibility.eligible_loan} "
            f"({eligibility.limiting_factor.value}-limited)"
        )

        return HomeLoanPlanResponse(
            status=status,
            reason=reason,
            requested_loan=requested,
            approved_loan=approved_loan,
            profile=interpreted,
            property_costs=property_costs,
            eligibility=eligibility,
            advisory=advisory,
        )

    @staticmethod
    def _normalize_tenure(desired: Optional[Decimal], max_tenure: int) -> Decimal:
        """Desired tenure capped at the age limit; the age limit when none is given."""
        cap = Decimal(max_tenure)
        if not desired:
            return cap
        return min(desired, cap)

    @staticmethod
    def _resolve_approval(
        requested: Decimal,
        eligibility: EligibilityBreakdown,
    ) -> Tuple[LoanDecisionStatus, Optional[Decimal], str]:
        """Approve as requested, approve a reduced amount, or reject."""
        eligible = eligibility.eligible_loan

        if eligible <= 0:
            return (
                LoanDecisionStatus.REJECTED,
                None,
                "No loan can be offered under the income and property limits.",
            )

        if requested <= eligible and eligibility.emi <= eligibility.available_surplus:
            return (
                LoanDecisionStatus.APPROVED,
                requested,
                "The requested loan fits both income and property limits.",
            )

        return (
            LoanDecisionStatus.MODIFIED_APPROVAL,
            eligible,
            f"The requested loan exceeds what can be offered; approved amount is {eligible:,.2f}.",
        )
