"""Derive underwriting parameters (FOIR, risk factor, rate) from an applicant profile."""

from decimal import Decimal

from realty_api.models.schemas.home_loan import FinancialProfile

FOIR_FLOOR = Decimal("0.30")
FOIR_CEILING = Decimal("0.60")
RISK_FLOOR = Decimal("0.6")
RISK_CEILING = Decimal("1.1")
RATE_FLOOR = Decimal("5")

MIDPOINT = Decimal("0.5")


def _clamp(value: Decimal, low: Decimal, high: Decimal) -> Decimal:
    return max(low, min(high, value))


def derive_foir(profile: FinancialProfile) -> Decimal:
    """
    FOIR for the home loan planner.

    Base by income band, nudged by credit score and employment
    stability, clamped to [0.30, 0.60].
    """
    if profile.monthly_income < 25000:
        base = Decimal("0.42")
    elif profile.monthly_income < 50000:
        base = Decimal("0.47")
    else:
        base = Decimal("0.52")

    score = profile.credit_score
    if score >= 800:
        credit_adj = Decimal("0.03")
    elif score >= 750:
        credit_adj = Decimal("0.02")
    elif score >= 700:
        credit_adj = Decimal("0.00")
    elif score >= 650:
        credit_adj = Decimal("-0.02")
    else:
        credit_adj = Decimal("-0.05")

    stability_adj = (profile.employment_stability_score - MIDPOINT) * Decimal("0.1")

    return _clamp(base + credit_adj + stability_adj, FOIR_FLOOR, FOIR_CEILING)


def derive_risk_factor(profile: FinancialProfile) -> Decimal:
    """Share of the EMI surplus the lender is willing to commit, clamped to [0.6, 1.1]."""
    score = profile.credit_score
    if score >= 820:
        risk = Decimal("1.05")
    elif score >= 760:
        risk = Decimal("1.00")
    elif score >= 700:
        risk = Decimal("0.90")
    elif score >= 650:
        risk = Decimal("0.80")
    else:
        risk = Decimal("0.70")

    risk += (profile.employment_stability_score - MIDPOINT) * Decimal("0.6")
    return _clamp(risk, RISK_FLOOR, RISK_CEILING)


def derive_adjusted_rate(base_rate: Decimal, profile: FinancialProfile) -> Decimal:
    """Base rate plus a credit and stability spread, never below 5%."""
    score = profile.credit_score
    if score >= 820:
        spread = Decimal("-0.3")
    elif score >= 760:
        spread = Decimal("-0.1")
    elif score >= 700:
        spread = Decimal("0.1")
    elif score >= 650:
        spread = Decimal("0.3")
    else:
        spread = Decimal("0.6")

    spread += (MIDPOINT - profile.employment_stability_score) * Decimal("0.6")
    return max(RATE_FLOOR, base_rate + spread)


def luxury_multiplier(luxury_level: Decimal) -> Decimal:
    """Linear map of luxury level [0, 1] onto [0.8, 1.4]."""
    return Decimal("0.8") + Decimal("0.6") * luxury_level


def location_multiplier(location_score: Decimal) -> Decimal:
    """Linear map of location score [0, 1] onto [0.9, 1.5]."""
    return Decimal("0.9") + Decimal("0.6") * location_score
