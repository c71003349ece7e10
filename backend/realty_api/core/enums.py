"""Core enums for type safety across the application."""

from enum import Enum


class LoanDecisionStatus(str, Enum):
    """Outcome of a loan eligibility evaluation."""

    APPROVED = "APPROVED"
    MODIFIED_APPROVAL = "MODIFIED_APPROVAL"
    REJECTED = "REJECTED"


class CreditTier(str, Enum):
    """Credit score bands used to price a loan."""

    EXCELLENT = "EXCELLENT"
    PRIME = "PRIME"
    STANDARD = "STANDARD"
    HIGH_RISK = "HIGH_RISK"
    SUBPRIME = "SUBPRIME"


class LimitingFactor(str, Enum):
    """Which constraint capped the eligible home loan."""

    INCOME = "INCOME"
    LTV = "LTV"


class CityTier(str, Enum):
    """City classification driving construction market rates."""

    TIER_1 = "Tier 1"
    TIER_2 = "Tier 2"
    TIER_3 = "Tier 3"


class BuildQuality(str, Enum):
    """Finishing quality of a construction estimate."""

    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"


class Direction(str, Enum):
    """Compass directions used by Vastu analysis."""

    NORTH = "North"
    NORTH_EAST = "North-East"
    EAST = "East"
    SOUTH_EAST = "South-East"
    SOUTH = "South"
    SOUTH_WEST = "South-West"
    WEST = "West"
    NORTH_WEST = "North-West"


class RoadSide(str, Enum):
    """Side of the plot that touches the road."""

    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"


class PlotShape(str, Enum):
    """Plot outline categories recognised by Vastu."""

    REGULAR = "Regular"
    GAUMUKHI = "Gaumukhi"
    SHERMUKHI = "Shermukhi"
    IRREGULAR = "Irregular"


class FindingStatus(str, Enum):
    """Polarity of a single Vastu observation."""

    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
