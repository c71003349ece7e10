"""Property value estimation for the home loan planner."""

from decimal import Decimal

from realty_api.models.schemas.home_loan import PropertyCosts, PropertyDetails
from realty_api.services.loan_engine.amortization import round_money


def estimate_property_costs(
    details: PropertyDetails,
    luxury_multiplier: Decimal,
    location_multiplier: Decimal,
) -> PropertyCosts:
    """
    Estimate construction cost and total property value.

    Args:
        details: Plot and construction inputs
        luxury_multiplier: Finish-level cost multiplier
        location_multiplier: Location cost multiplier

    Returns:
        PropertyCosts; the plot price only counts when include_plot is set
    """
    built_up_area = details.plot_size_sqft * details.floors
    cost_per_sqft = details.base_cost_per_sqft * luxury_multiplier * location_multiplier
    construction_cost = built_up_area * cost_per_sqft

    plot_cost = details.plot_price if details.include_plot else Decimal("0")
    property_value = construction_cost + plot_cost

    return PropertyCosts(
        built_up_area=built_up_area,
        cost_per_sqft=round_money(cost_per_sqft),
        construction_cost=round_money(construction_cost),
        plot_cost=round_money(plot_cost),
        property_value=round_money(property_value),
    )
