from decimal import Decimal

from realty_api.core.enums import BuildQuality, CityTier
from realty_api.models.schemas.estimator import ConstructionEstimateRequest
from realty_api.services.tools.construction_estimator import ConstructionCostEstimator


def estimate(**fields):
    return ConstructionCostEstimator().estimate(ConstructionEstimateRequest(**fields))


def test_default_estimate_for_standard_tier_two_house():
    result = estimate()

    assert result.tier == CityTier.TIER_2
    assert result.quality == BuildQuality.STANDARD
    assert result.area == Decimal("1000")
    assert result.total_material == Decimal("954900.00")
    assert result.services == {}
    assert result.total_services == Decimal("0")
    assert result.gst == Decimal("171882.00")
    assert result.contingency == Decimal("47745.00")
    assert result.final_budget == Decimal("1174527.00")
    assert result.cost_sqft == Decimal("1174.53")


def test_material_lines():
    materials = estimate().materials

    assert list(materials) == [
        "Cement",
        "Steel",
        "Sand",
        "Aggregates",
        "Bricks",
        "Flooring",
        "Paint (Mat)",
        "Doors/Windows",
    ]
    assert materials["Cement"].quantity == "450 Bags"
    assert materials["Cement"].cost == Decimal("177750.00")
    assert materials["Steel"].quantity == "4000 Kg"
    # 5 doors (1 main + 4 internal) plus 120 sqft of windows
    assert materials["Doors/Windows"].quantity == "Lump Sum"
    assert materials["Doors/Windows"].cost == Decimal("153000.00")


def test_selected_services_are_priced_per_sqft():
    result = estimate(include_labor=True, include_architect=True)

    assert result.services == {
        "Civil Labor": Decimal("350000.00"),
        "Architect": Decimal("60000.00"),
    }
    assert result.total_services == Decimal("410000.00")
    assert result.subtotal == result.total_material + result.total_services


def test_tier_one_uses_higher_contingency():
    result = estimate(tier=CityTier.TIER_1)
    assert result.contingency == (result.subtotal * Decimal("0.10")).quantize(Decimal("0.01"))


def test_premium_quality_scales_finishes_and_contingency():
    standard = estimate().materials
    premium_result = estimate(quality=BuildQuality.PREMIUM)
    premium = premium_result.materials

    assert premium["Cement"].cost == standard["Cement"].cost
    assert premium["Flooring"].cost == Decimal("204750.00")
    assert premium["Doors/Windows"].cost == Decimal("198900.00")
    assert premium_result.contingency == (
        premium_result.subtotal * Decimal("0.10")
    ).quantize(Decimal("0.01"))


def test_floors_multiply_built_up_area():
    result = estimate(plot_size=Decimal("1000"), floors=2)

    assert result.area == Decimal("2000")
    # ceil(2000 / 225) = 9 doors
    doors = Decimal("35000") + 8 * Decimal("10000")
    windows = Decimal("2000") * Decimal("0.12") * Decimal("650")
    assert result.materials["Doors/Windows"].cost == doors + windows
