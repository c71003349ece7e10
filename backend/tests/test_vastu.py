from typing import List

from realty_api.core.enums import FindingStatus
from realty_api.models.schemas.vastu import VastuRequest
from realty_api.services.tools.vastu import VastuCheck, VastuFinding, VastuScorer


def make_request(**overrides):
    values = {
        "facing": "North",
        "road": "North",
        "shape": "Regular",
        "slope_direction": "North-East",
        "soil_type": "Red",
    }
    values.update(overrides)
    return VastuRequest.model_validate(values)


def test_ideal_plot_scores_full_marks():
    result = VastuScorer().score(make_request())

    assert result.score == 100
    assert len(result.detailed_analysis) == 4
    assert all(f.status == FindingStatus.POSITIVE for f in result.detailed_analysis)


def test_south_facing_irregular_plot_loses_points():
    result = VastuScorer().score(make_request(facing="South", shape="Irregular"))

    assert result.score == 70
    negatives = [f for f in result.detailed_analysis if f.status == FindingStatus.NEGATIVE]
    assert len(negatives) == 2
    assert all(f.remedy for f in negatives)


def test_score_is_clamped_at_zero():
    request = make_request(
        facing="South",
        shape="Irregular",
        slope_direction="South-West",
        soil_type="Rocky",
        surroundings=[
            "Temple",
            "Water Body (South-West)",
            "High Tension Line",
            "T-Junction",
            "Transformer",
        ],
    )
    assert VastuScorer().score(request).score == 0


def test_water_body_in_north_is_positive():
    result = VastuScorer().score(make_request(surroundings=["Water Body (North)"]))

    assert result.score == 100
    water = [f for f in result.detailed_analysis if f.category == "Surroundings"]
    assert water[0].observation == "Water Body in North/East"


def test_missing_slope_and_soil_are_skipped():
    result = VastuScorer().score(make_request(slope_direction="", soil_type=None))

    assert result.score == 100
    assert len(result.detailed_analysis) == 2


def test_unknown_slope_and_soil_cost_points():
    result = VastuScorer().score(make_request(slope_direction="Unknown", soil_type="unknown"))
    assert result.score == 90


def test_layout_follows_rooms_and_road():
    result = VastuScorer().score(
        make_request(road="South", bedrooms=3, puja=True, stairs=False)
    )
    layout = result.layout

    assert "AVOID SW" in layout["Main Entrance"]
    assert layout["Master Bedroom"] == "South-West (Nairutya)"
    assert layout["Puja Room"] == "North-East (Ishanya)"
    assert layout["Staircase"] == "N/A"
    assert layout["Bedroom 2 (Kids)"] == "West"
    assert layout["Bedroom 3 (Guest)"] == "North-West"


def test_single_bedroom_layout_has_no_extra_rooms():
    layout = VastuScorer().score(make_request()).layout

    assert "Bedroom 2 (Kids)" not in layout
    assert layout["Puja Room"] == "N/A"


def test_reference_tables_are_included():
    result = VastuScorer().score(make_request())

    assert result.zone_details["North-East"].element == "Water"
    assert len(result.brahmasthan) == 2


class BoundaryWallCheck(VastuCheck):
    category = "Boundary"

    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        return [
            self._finding(
                "No boundary wall",
                FindingStatus.NEGATIVE,
                "Open boundaries let energy leak.",
                "Weak protection.",
                penalty=30,
            )
        ]


def test_custom_checks_can_be_registered():
    scorer = VastuScorer()
    scorer.register_check(BoundaryWallCheck())

    result = scorer.score(make_request())

    assert result.score == 70
    assert result.detailed_analysis[-1].category == "Boundary"
