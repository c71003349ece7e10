"""Numeric limits shared by schemas, calculators and storage."""

from decimal import Decimal

# Largest amount a Numeric(15, 2) column holds
MAX_AMOUNT = Decimal("9999999999999.99")
MONEY_MAX_DIGITS = 15
MONEY_DECIMAL_PLACES = 2

# Planner and estimator physical limits
MAX_AREA_SQFT = Decimal("10000000")
MAX_COST_PER_SQFT = Decimal("1000000")
