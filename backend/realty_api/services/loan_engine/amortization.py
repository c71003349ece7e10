"""Amortization formulas shared by the loan calculators."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Tuple, Union

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Number) -> Decimal:
    """Convert a number to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_money(value: Decimal) -> Decimal:
    """Round a monetary amount half-up to the cent."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def monthly_rate(annual_rate_percent: Number) -> Decimal:
    """Convert an annual percentage rate to a monthly fraction."""
    return to_decimal(annual_rate_percent) / Decimal("100") / Decimal("12")


def tenure_months(tenure_years: Number) -> int:
    """Number of monthly installments in a tenure, rounded to whole months."""
    months = to_decimal(tenure_years) * 12
    return int(months.to_integral_value(rounding=ROUND_HALF_UP))


def compute_emi(
    principal: Number,
    annual_rate_percent: Number,
    tenure_years: Number,
) -> Decimal:
    """
    Compute the equated monthly installment for a principal.

    EMI = P * r * (1+r)^n / ((1+r)^n - 1)

    Falls back to straight-line repayment when the rate or the
    tenure is zero.

    Args:
        principal: Loan principal
        annual_rate_percent: Annual interest rate in percent (e.g. 8.5)
        tenure_years: Repayment period in years

    Returns:
        EMI rounded to the cent
    """
    principal = to_decimal(principal)
    if principal <= ZERO:
        return round_money(ZERO)

    r = monthly_rate(annual_rate_percent)
    n = tenure_months(tenure_years)

    if r == ZERO or n == 0:
        return round_money(principal / max(n, 1))

    growth = (1 + r) ** n
    return round_money(principal * r * growth / (growth - 1))


def principal_from_emi(
    emi: Number,
    annual_rate_percent: Number,
    tenure_years: Number,
) -> Decimal:
    """
    Compute the largest principal a monthly installment can service.

    P = E * ((1+r)^n - 1) / (r * (1+r)^n)

    With a zero rate (or zero tenure) the principal is simply E * n.

    Args:
        emi: Affordable monthly installment
        annual_rate_percent: Annual interest rate in percent
        tenure_years: Repayment period in years

    Returns:
        Principal rounded to the cent
    """
    emi = to_decimal(emi)
    r = monthly_rate(annual_rate_percent)
    n = tenure_months(tenure_years)

    if r == ZERO or n == 0:
        return round_money(emi * n)

    growth = (1 + r) ** n
    return round_money(emi * (growth - 1) / (r * growth))


def compute_totals(
    principal: Number,
    emi: Number,
    tenure_years: Number,
) -> Tuple[Decimal, Decimal]:
    """
    Total repayment and total interest over the life of a loan.

    Returns:
        (total_repayment, total_interest)
    """
    n = tenure_months(tenure_years)
    total_repayment = round_money(to_decimal(emi) * n)
    total_interest = round_money(total_repayment - to_decimal(principal))
    return total_repayment, total_interest
