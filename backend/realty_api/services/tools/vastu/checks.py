"""Concrete Vastu checks for orientation, shape, slope, soil and surroundings."""

from typing import List

from realty_api.core.enums import Direction, FindingStatus, PlotShape
from realty_api.models.schemas.vastu import VastuRequest
from realty_api.services.tools.vastu.base import VastuCheck, VastuFinding

UNKNOWN = "unknown"


class OrientationCheck(VastuCheck):
    """Which way the plot faces."""

    category = "Plot Orientation"

    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        facing = request.facing

        if facing in (Direction.NORTH, Direction.EAST):
            return [
                self._finding(
                    f"{facing.value} Facing",
                    FindingStatus.POSITIVE,
                    "North and East facing plots allow positive solar and magnetic energies to enter the home.",
                    "Promotes health, wealth, and overall prosperity for the inhabitants.",
                )
            ]
        if facing == Direction.SOUTH:
            return [
                self._finding(
                    "South Facing",
                    FindingStatus.NEGATIVE,
                    "South facing plots are ruled by Yama and can bring strong energies that need managing.",
                    "If not balanced, it may lead to health issues for women or financial instability.",
                    "Place a silver Swastik or Panchmukhi Hanuman image above the main door. "
                    "Ensure the entrance is in the 4th Pada (positive zone).",
                    penalty=10,
                )
            ]
        if facing == Direction.WEST:
            return [
                self._finding(
                    "West Facing",
                    FindingStatus.NEUTRAL,
                    "West facing plots are ruled by Varuna and are good for business/commercial success.",
                    "Can bring material gains but might lead to less social interaction.",
                    "Ensure the main door is in the North-West or West-Central zone (Sugreev/Pushpadanta).",
                )
            ]
        return [
            self._finding(
                f"{facing.value} Facing",
                FindingStatus.NEUTRAL,
                "Standard orientation.",
                "Neutral impact.",
            )
        ]


class ShapeCheck(VastuCheck):
    """Outline of the plot."""

    category = "Plot Shape"

    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        shape = request.shape

        if shape == PlotShape.REGULAR:
            return [
                self._finding(
                    "Regular (Square/Rectangular)",
                    FindingStatus.POSITIVE,
                    "A regular shape ensures all elemental zones are balanced significantly.",
                    "Provides stability, mental peace, and financial growth.",
                )
            ]
        if shape == PlotShape.GAUMUKHI:
            return [
                self._finding(
                    "Gaumukhi (Cow Face)",
                    FindingStatus.POSITIVE,
                    "Narrow at front, broad at back. Considered very auspicious for residential use.",
                    "Accumulates wealth and brings good fortune to the residents.",
                )
            ]
        if shape == PlotShape.SHERMUKHI:
            return [
                self._finding(
                    "Shermukhi (Lion Face)",
                    FindingStatus.NEUTRAL,
                    "Broad at front, narrow at back. Excellent for commercial but aggressive for homes.",
                    "May lead to high expenses or aggressive behavior if used for residence.",
                    "Use mirrors or plants to visually correct the narrowing back. Ideally, use for business.",
                    penalty=15,
                )
            ]
        return [
            self._finding(
                "Irregular",
                FindingStatus.NEGATIVE,
                "Irregular shapes often result in cut or extended corners, causing 'Vastu Dosha'.",
                "Can lead to health problems, legal issues, or financial losses depending on the missing corner.",
                "Install Vastu Pyramids or Copper Helix in the missing zones to balance energy.",
                penalty=20,
            )
        ]


class SlopeCheck(VastuCheck):
    """Direction the land slopes towards; skipped when not given."""

    category = "Land Slope"

    POSITIVE_SLOPES = {"North", "East", "North-East"}
    NEGATIVE_SLOPES = {"South", "West", "South-West"}

    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        slope = request.slope_direction
        if not slope:
            return []

        if slope in self.POSITIVE_SLOPES:
            return [
                self._finding(
                    f"Slope towards {slope}",
                    FindingStatus.POSITIVE,
                    "Slope towards North/East allows heavy negative energy to flow out "
                    "and light positive energy to settle.",
                    "Enhances wealth accumulation and health.",
                )
            ]
        if slope in self.NEGATIVE_SLOPES:
            return [
                self._finding(
                    f"Slope towards {slope}",
                    FindingStatus.NEGATIVE,
                    "Slope towards South/West traps negative energy and drains positive energy.",
                    "May cause financial drainage, health issues, or lack of recognition.",
                    "Raise the floor level in the South/West or place heavy rocks/statues "
                    "in that corner to block energy drainage.",
                    penalty=15,
                )
            ]
        if slope.lower() == UNKNOWN:
            return [
                self._finding(
                    "Unknown Slope Direction",
                    FindingStatus.NEUTRAL,
                    "Slope direction not specified. Slope plays a crucial role in energy flow.",
                    "Unable to determine impact. Incorrect slope can lead to energy drainage.",
                    "Verify the slope physically. North/East slope is auspicious; "
                    "South/West slope needs correction.",
                    penalty=5,
                )
            ]
        return [
            self._finding(
                f"Slope towards {slope}",
                FindingStatus.NEUTRAL,
                "Neutral slope.",
                "Minimal impact.",
            )
        ]


class SoilCheck(VastuCheck):
    """Soil colour and texture; skipped when not given."""

    category = "Soil Quality"

    GOOD_SOILS = {"White", "Yellow", "Red"}
    POOR_SOILS = {"Black", "Rocky", "Mixed"}

    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        soil = request.soil_type
        if not soil:
            return []

        if soil in self.GOOD_SOILS:
            return [
                self._finding(
                    f"{soil} Soil",
                    FindingStatus.POSITIVE,
                    "Good quality soil (White/Yellow/Red) with pleasant smell represents abundance.",
                    "Provides a strong foundation for happiness and prosperity.",
                )
            ]
        if soil in self.POOR_SOILS:
            return [
                self._finding(
                    f"{soil} Soil",
                    FindingStatus.NEGATIVE,
                    "Black, Rocky, or Swampy soil is considered tampering or weak.",
                    "May lead to delays in construction or instability in life.",
                    "Perform 'Bhu-Shuddhi' (Earth Purification) ritual before construction. "
                    "Replace topsoil if possible.",
                    penalty=5,
                )
            ]
        if soil.lower() == UNKNOWN:
            return [
                self._finding(
                    "Unknown Soil Type",
                    FindingStatus.NEUTRAL,
                    "Soil type not specified. Quality of soil affects the foundation's energy.",
                    "Unable to assess stability. Poor soil can affect longevity of construction.",
                    "Get a soil test done. Remove any debris, bones, or coal from the site before building.",
                    penalty=5,
                )
            ]
        return []


class SurroundingsCheck(VastuCheck):
    """Notable features around the plot; one item may yield several findings."""

    category = "Surroundings"

    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        findings: List[VastuFinding] = []

        for item in request.surroundings:
            if "Temple" in item:
                findings.append(
                    self._finding(
                        "Temple Nearby",
                        FindingStatus.NEGATIVE,
                        "Temple shadows falling on the house are inauspicious. "
                        "Temples have high concentrated energy.",
                        "Can cause peace of mind issues or energetic disturbances.",
                        "Install a Pakua Mirror facing the temple to reflect the energy back.",
                        penalty=5,
                    )
                )

            if "Water Body" in item:
                if "North" in item or "East" in item:
                    findings.append(
                        self._finding(
                            "Water Body in North/East",
                            FindingStatus.POSITIVE,
                            "Water element in the proper zone (NE/N) is highly beneficial.",
                            "Significantly boosts wealth and career opportunities.",
                        )
                    )
                else:
                    findings.append(
                        self._finding(
                            "Water Body in South/West",
                            FindingStatus.NEGATIVE,
                            "Water in Earth zones (SW) or Fire/Air zones causes elemental conflict.",
                            "Can lead to health issues or financial instability.",
                            "Build a high boundary wall or plant tall trees between the house "
                            "and the water body.",
                            penalty=10,
                        )
                    )

            if "High Tension" in item or "Transformer" in item:
                findings.append(
                    self._finding(
                        "High Tension Wire/Transformer",
                        FindingStatus.NEGATIVE,
                        "Creates strong electromagnetic stress fields.",
                        "Harmful for physical health and causes mental stress.",
                        "Use energy neutralizing crystals (like Tourmaline) or lead strips "
                        "near the affected wall.",
                        penalty=15,
                    )
                )

            # Vithi Shoola
            if "T-Junction" in item:
                findings.append(
                    self._finding(
                        "T-Junction (Vithi Shoola)",
                        FindingStatus.NEGATIVE,
                        "A road hitting the plot directly acts like an arrow of energy.",
                        "Can cause accidents or sudden losses if hitting the wrong zone.",
                        "Install a Bagua Mirror or a convex mirror facing the road.",
                        penalty=15,
                    )
                )

        return findings
