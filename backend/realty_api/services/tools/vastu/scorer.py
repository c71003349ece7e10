"""Vastu scorer orchestrating the checks and building the layout plan."""

import logging
from typing import Dict, List

from realty_api.core.enums import RoadSide
from realty_api.models.schemas.vastu import (
    VastuFindingResponse,
    VastuRequest,
    VastuResponse,
    ZoneDetail,
)
from realty_api.services.tools.vastu.base import VastuCheck, VastuFinding
from realty_api.services.tools.vastu.checks import (
    OrientationCheck,
    ShapeCheck,
    SlopeCheck,
    SoilCheck,
    SurroundingsCheck,
)

logger = logging.getLogger(__name__)

MAX_SCORE = 100

IDEAL_ZONES: Dict[str, List[str]] = {
    "Master Bedroom": ["South-West (Nairutya)", "South"],
    "Kitchen": ["South-East (Agni)", "North-West (Vayu)"],
    "Living Room": ["North", "North-East", "East"],
    "Kids Bedroom": ["West", "North-West"],
    "Guest Room": ["North-West"],
    "Toilet": ["North-West", "West", "South"],
    "Puja Room": ["North-East (Ishanya)", "North", "East"],
    "Staircase": ["South", "South-West", "West"],
    "Borewell/Water": ["North-East"],
    "Septic Tank": ["North-West", "West"],
}

ZONE_DETAILS: Dict[str, ZoneDetail] = {
    "North": ZoneDetail(element="Water", color="Green", deity="Kubera (Wealth)"),
    "North-East": ZoneDetail(element="Water", color="White/Light Blue", deity="Ishanya (Prosperity)"),
    "East": ZoneDetail(element="Air/Wood", color="White", deity="Indra (Growth)"),
    "South-East": ZoneDetail(element="Fire", color="Red/Orange", deity="Agni (Energy)"),
    "South": ZoneDetail(element="Earth", color="Red/Yellow", deity="Yama (Stability)"),
    "South-West": ZoneDetail(element="Earth", color="Beige/Brown", deity="Nairutya (Strength)"),
    "West": ZoneDetail(element="Space/Metal", color="Blue/Grey", deity="Varuna (Gains)"),
    "North-West": ZoneDetail(element="Air", color="White/Cream", deity="Vayu (Support)"),
    "Center": ZoneDetail(element="Space", color="White/Gold", deity="Brahma (Creator)"),
}

ENTRANCES: Dict[RoadSide, str] = {
    RoadSide.NORTH: "North-East (Positive) or North-Center (Mukhya)",
    RoadSide.EAST: "East-North-East (Jayanta) or East-Center (Indra)",
    RoadSide.SOUTH: "South-South-East (Pusha/Vitatha) - AVOID SW Corner!",
    RoadSide.WEST: "West-North-West (Sugreev) or West-Center (Pushpadanta)",
}

BRAHMASTHAN = [
    "Keep the exact center of the house empty and well-lit.",
    "No pillars, staircase, or heavy furniture in the center.",
]


class VastuScorer:
    """
    Vastu scorer.

    Runs every registered check, deducts each finding's penalty from a
    starting score of 100 (clamped to [0, 100]) and suggests room zones.
    """

    def __init__(self):
        """Initialize the scorer with the default checks."""
        self._checks: List[VastuCheck] = [
            OrientationCheck(),
            ShapeCheck(),
            SlopeCheck(),
            SoilCheck(),
            SurroundingsCheck(),
        ]

    def register_check(self, check: VastuCheck) -> None:
        """Add a custom check, run after the defaults."""
        self._checks.append(check)

    def score(self, request: VastuRequest) -> VastuResponse:
        """
        Score a plot.

        Args:
            request: Validated Vastu inputs

        Returns:
            VastuResponse with score, findings, layout and reference tables
        """
        findings: List[VastuFinding] = []
        for check in self._checks:
            findings.extend(check.evaluate(request))

        total_penalty = sum(f.penalty for f in findings)
        score = max(0, min(MAX_SCORE, MAX_SCORE - total_penalty))

        logger.info(
            f"Vastu score {score} for {request.facing.value}-facing "
            f"{request.shape.value} plot ({len(findings)} findings)"
        )

        return VastuResponse(
            score=score,
            detailed_analysis=[
                VastuFindingResponse(
                    category=f.category,
                    observation=f.observation,
                    status=f.status,
                    description=f.description,
                    impact=f.impact,
                    remedy=f.remedy,
                )
                for f in findings
            ],
            layout=self._layout_plan(request),
            zone_details=ZONE_DETAILS,
            brahmasthan=BRAHMASTHAN,
        )

    @staticmethod
    def _layout_plan(request: VastuRequest) -> Dict[str, str]:
        """Suggested zone for each room, given the road side and room list."""
        layout = {
            "Main Entrance": ENTRANCES[request.road],
            "Master Bedroom": IDEAL_ZONES["Master Bedroom"][0],
            "Kitchen": IDEAL_ZONES["Kitchen"][0],
            "Puja Room": IDEAL_ZONES["Puja Room"][0] if request.puja else "N/A",
            "Toilets": f"Avoid NE/SW. Best in {IDEAL_ZONES['Toilet'][0]}",
            "Staircase": IDEAL_ZONES["Staircase"][0] if request.stairs else "N/A",
        }
        if request.bedrooms > 1:
            layout["Bedroom 2 (Kids)"] = IDEAL_ZONES["Kids Bedroom"][0]
        if request.bedrooms > 2:
            layout["Bedroom 3 (Guest)"] = IDEAL_ZONES["Guest Room"][0]
        return layout
