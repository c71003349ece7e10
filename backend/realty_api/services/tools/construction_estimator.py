"""Construction cost estimator based on per-sqft consumption and market rates."""

import logging
import math
from decimal import Decimal
from typing import Dict

from realty_api.core.enums import BuildQuality, CityTier
from realty_api.models.schemas.estimator import (
    ConstructionEstimateRequest,
    ConstructionEstimateResponse,
    MaterialLine,
)
from realty_api.services.loan_engine.amortization import round_money

logger = logging.getLogger(__name__)

# Market rates per unit, by city tier where they vary
TIERED_RATES: Dict[str, Dict[CityTier, Decimal]] = {
    "cement": {CityTier.TIER_1: Decimal("415"), CityTier.TIER_2: Decimal("395"), CityTier.TIER_3: Decimal("385")},
    "steel": {CityTier.TIER_1: Decimal("72.5"), CityTier.TIER_2: Decimal("67.5"), CityTier.TIER_3: Decimal("65")},
    "sand": {CityTier.TIER_1: Decimal("55"), CityTier.TIER_2: Decimal("48"), CityTier.TIER_3: Decimal("42")},
    "aggregate": {CityTier.TIER_1: Decimal("50"), CityTier.TIER_2: Decimal("45"), CityTier.TIER_3: Decimal("42")},
    "bricks": {CityTier.TIER_1: Decimal("9"), CityTier.TIER_2: Decimal("8"), CityTier.TIER_3: Decimal("7")},
    "labor": {CityTier.TIER_1: Decimal("400"), CityTier.TIER_2: Decimal("350"), CityTier.TIER_3: Decimal("300")},
}

FLAT_RATES: Dict[str, Decimal] = {
    "flooring": Decimal("150"),
    "paint_liter": Decimal("250"),
    "door_main": Decimal("35000"),
    "door_internal": Decimal("10000"),
    "window_sqft": Decimal("650"),
    "plumbing": Decimal("120"),
    "electrical": Decimal("110"),
    "waterproofing": Decimal("32"),
    "architect": Decimal("60"),
}

# Consumption per sqft of built-up area
CONSUMPTION: Dict[str, Decimal] = {
    "cement": Decimal("0.45"),
    "steel": Decimal("4.0"),
    "sand": Decimal("1.3"),
    "aggregate": Decimal("1.4"),
    "bricks": Decimal("7.5"),
    "paint": Decimal("0.045"),
    "flooring": Decimal("1.05"),
    "window_ratio": Decimal("0.12"),
}

SQFT_PER_DOOR = 225

QUALITY_MULTIPLIERS: Dict[BuildQuality, Decimal] = {
    BuildQuality.BASIC: Decimal("0.9"),
    BuildQuality.STANDARD: Decimal("1.0"),
    BuildQuality.PREMIUM: Decimal("1.3"),
}

GST_RATE = Decimal("0.18")
HIGH_CONTINGENCY = Decimal("0.10")
STANDARD_CONTINGENCY = Decimal("0.05")


class ConstructionCostEstimator:
    """
    Estimate the budget for building a house.

    Structure materials are priced at city-tier rates; finishing items
    (flooring, paint, doors, windows) scale with build quality. Optional
    services are priced per sqft. GST and a contingency reserve are added
    on top of the subtotal.
    """

    def estimate(self, request: ConstructionEstimateRequest) -> ConstructionEstimateResponse:
        """
        Produce an itemised estimate.

        Args:
            request: Validated estimator inputs

        Returns:
            ConstructionEstimateResponse
        """
        tier = request.tier
        quality_mult = QUALITY_MULTIPLIERS[request.quality]
        area = request.plot_size * request.floors

        materials: Dict[str, MaterialLine] = {}
        structure = (
            ("Cement", "cement", "Bags"),
            ("Steel", "steel", "Kg"),
            ("Sand", "sand", "cft"),
            ("Aggregates", "aggregate", "cft"),
            ("Bricks", "bricks", "Pcs"),
        )
        for label, key, unit in structure:
            qty = area * CONSUMPTION[key]
            materials[label] = self._line(qty, unit, qty * TIERED_RATES[key][tier])

        qty_floor = area * CONSUMPTION["flooring"]
        materials["Flooring"] = self._line(
            qty_floor, "sq.ft", qty_floor * FLAT_RATES["flooring"] * quality_mult
        )

        qty_paint = area * CONSUMPTION["paint"]
        materials["Paint (Mat)"] = self._line(
            qty_paint, "Ltr", qty_paint * FLAT_RATES["paint_liter"] * quality_mult
        )

        num_doors = math.ceil(area / SQFT_PER_DOOR)
        cost_doors = (
            FLAT_RATES["door_main"] + (num_doors - 1) * FLAT_RATES["door_internal"]
        ) * quality_mult
        qty_window = area * CONSUMPTION["window_ratio"]
        cost_window = qty_window * FLAT_RATES["window_sqft"] * quality_mult
        materials["Doors/Windows"] = MaterialLine(
            quantity="Lump Sum", cost=round_money(cost_doors + cost_window)
        )

        total_material = sum((line.cost for line in materials.values()), Decimal("0"))

        services = self._price_services(request, area)
        total_services = sum(services.values(), Decimal("0"))

        subtotal = total_material + total_services
        gst = round_money(subtotal * GST_RATE)

        if tier == CityTier.TIER_1 or request.quality == BuildQuality.PREMIUM:
            contingency_rate = HIGH_CONTINGENCY
        else:
            contingency_rate = STANDARD_CONTINGENCY
        contingency = round_money(subtotal * contingency_rate)

        final_budget = subtotal + gst + contingency
        cost_sqft = round_money(final_budget / area)

        logger.info(
            f"Construction estimate: {area} sqft, {tier.value}, {request.quality.value} "
            f"-> {final_budget}"
        )

        return ConstructionEstimateResponse(
            location=request.location,
            tier=tier,
            quality=request.quality,
            area=area,
            materials=materials,
            services=services,
            total_material=total_material,
            total_services=total_services,
            subtotal=subtotal,
            gst=gst,
            contingency=contingency,
            final_budget=final_budget,
            cost_sqft=cost_sqft,
        )

    @staticmethod
    def _line(quantity: Decimal, unit: str, cost: Decimal) -> MaterialLine:
        return MaterialLine(quantity=f"{quantity:.0f} {unit}", cost=round_money(cost))

    @staticmethod
    def _price_services(
        request: ConstructionEstimateRequest, area: Decimal
    ) -> Dict[str, Decimal]:
        """Per-sqft price of each requested service."""
        selected = (
            ("Civil Labor", request.include_labor, TIERED_RATES["labor"][request.tier]),
            ("Plumbing", request.include_plumbing, FLAT_RATES["plumbing"]),
            ("Electrical", request.include_electrical, FLAT_RATES["electrical"]),
            ("Waterproofing", request.include_waterproofing, FLAT_RATES["waterproofing"]),
            ("Architect", request.include_architect, FLAT_RATES["architect"]),
        )
        return {
            name: round_money(area * rate)
            for name, included, rate in selected
            if included
        }
