from decimal import Decimal

from realty_api.services.loan_engine.amortization import (
    compute_emi,
    compute_totals,
    principal_from_emi,
    round_money,
    tenure_months,
)


def test_round_money_is_half_up():
    assert round_money(Decimal("10.005")) == Decimal("10.01")
    assert round_money(Decimal("10.004")) == Decimal("10.00")


def test_tenure_months_rounds_to_whole_months():
    assert tenure_months(30) == 360
    assert tenure_months(Decimal("2.5")) == 30
    assert tenure_months(Decimal("0.04")) == 0


def test_compute_emi_standard_loan():
    # 1 lakh at 12% over one year
    assert compute_emi(100000, 12, 1) == Decimal("8884.88")


def test_compute_emi_zero_rate_is_straight_line():
    assert compute_emi(1200, 0, 1) == Decimal("100.00")


def test_compute_emi_zero_principal():
    assert compute_emi(0, Decimal("8.5"), 20) == Decimal("0.00")


def test_principal_from_emi_inverts_compute_emi():
    principal = principal_from_emi(Decimal("8884.88"), 12, 1)
    assert abs(principal - Decimal("100000")) < Decimal("1")


def test_principal_from_emi_zero_rate():
    assert principal_from_emi(100, 0, 1) == Decimal("1200.00")


def test_principal_from_emi_zero_tenure():
    assert principal_from_emi(25000, Decimal("8.5"), 0) == Decimal("0.00")


def test_compute_totals():
    total_repayment, total_interest = compute_totals(100000, Decimal("8884.88"), 1)
    assert total_repayment == Decimal("106618.56")
    assert total_interest == Decimal("6618.56")
