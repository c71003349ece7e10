"""Lending policy constants for the loan eligibility evaluator."""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Optional, Tuple

from realty_api.core.enums import CreditTier


@dataclass(frozen=True)
class CreditBand:
    """A credit score band and the spread it adds to the base rate."""

    min_score: int
    tier: CreditTier
    rate_spread: Decimal


@dataclass(frozen=True)
class FoirBand:
    """FOIR cap for incomes strictly below `income_below` (None = no upper bound)."""

    income_below: Optional[Decimal]
    cap: Decimal


DEFAULT_CREDIT_BANDS: Tuple[CreditBand, ...] = (
    CreditBand(800, CreditTier.EXCELLENT, Decimal("-0.20")),
    CreditBand(750, CreditTier.PRIME, Decimal("0.00")),
    CreditBand(700, CreditTier.STANDARD, Decimal("0.50")),
    CreditBand(650, CreditTier.HIGH_RISK, Decimal("2.00")),
)

DEFAULT_FOIR_BANDS: Tuple[FoirBand, ...] = (
    FoirBand(Decimal("25000"), Decimal("0.40")),
    FoirBand(Decimal("50000"), Decimal("0.50")),
    FoirBand(None, Decimal("0.60")),
)


@dataclass(frozen=True)
class LoanPolicy:
    """
    Policy knobs for loan eligibility.

    Attributes:
        base_rate: Annual base rate in percent before the credit spread
        retirement_age: Age by which the loan must be repaid
        max_tenure_years: Regulatory tenure ceiling
        min_tenure_years: Shortest tenure the desk will lend over
        min_credit_score: Hard floor; lower scores are rejected outright
        credit_bands: Bands ordered from best to worst score
        foir_bands: Income bands ordered by ascending upper bound
    """

    base_rate: Decimal = Decimal("8.50")
    retirement_age: int = 60
    max_tenure_years: int = 30
    min_tenure_years: int = 5
    min_credit_score: int = 650
    credit_bands: Tuple[CreditBand, ...] = field(default=DEFAULT_CREDIT_BANDS)
    foir_bands: Tuple[FoirBand, ...] = field(default=DEFAULT_FOIR_BANDS)

    @classmethod
    def from_settings(cls, settings) -> "LoanPolicy":
        """Build a policy, applying the scalar overrides from settings."""
        return replace(
            cls(),
            base_rate=Decimal(str(settings.LOAN_BASE_RATE)),
            retirement_age=settings.LOAN_RETIREMENT_AGE,
            max_tenure_years=settings.LOAN_MAX_TENURE_YEARS,
            min_tenure_years=settings.LOAN_MIN_TENURE_YEARS,
            min_credit_score=settings.LOAN_MIN_CREDIT_SCORE,
        )

    def foir_cap(self, monthly_income: Decimal) -> Decimal:
        """FOIR cap for a monthly income; higher earners may carry more EMI."""
        for band in self.foir_bands:
            if band.income_below is None or monthly_income < band.income_below:
                return band.cap
        return self.foir_bands[-1].cap

    def credit_band(self, credit_score: int) -> Optional[CreditBand]:
        """
        Credit band for a score, or None when the score is below the floor.

        Scores above the floor but below every band fall into the
        lowest band.
        """
        if credit_score < self.min_credit_score:
            return None
        for band in self.credit_bands:
            if credit_score >= band.min_score:
                return band
        return self.credit_bands[-1]

    def rate_for(self, band: CreditBand) -> Decimal:
        """Annual rate in percent assigned to a credit band."""
        return max(Decimal("0.00"), self.base_rate + band.rate_spread)

    def max_tenure_for_age(self, age: int) -> int:
        """Years until retirement, capped at the ceiling and floored at zero."""
        return max(0, min(self.max_tenure_years, self.retirement_age - age))


DEFAULT_LOAN_POLICY = LoanPolicy()
