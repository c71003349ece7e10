"""Pydantic schemas for the construction cost estimator."""

from decimal import Decimal
from typing import Dict, Optional

from pydantic import Field

from realty_api.core.constants import MAX_AREA_SQFT
from realty_api.core.enums import BuildQuality, CityTier
from realty_api.models.schemas.common import Amount, CamelModel


class ConstructionEstimateRequest(CamelModel):
    """Inputs for POST /estimator/calculate."""

    location: Optional[str] = Field(None, max_length=255)
    tier: CityTier = CityTier.TIER_2
    plot_size: Decimal = Field(
        Decimal("1000"), gt=0, le=MAX_AREA_SQFT, description="Plot size in sqft"
    )
    floors: int = Field(1, ge=1, le=10)
    quality: BuildQuality = BuildQuality.STANDARD
    include_labor: bool = False
    include_plumbing: bool = False
    include_electrical: bool = False
    include_waterproofing: bool = False
    include_architect: bool = False


class MaterialLine(CamelModel):
    """Quantity and cost of one material."""

    quantity: str
    cost: Amount


class ConstructionEstimateResponse(CamelModel):
    """Itemised construction budget."""

    location: Optional[str] = None
    tier: CityTier
    quality: BuildQuality
    area: Amount
    materials: Dict[str, MaterialLine]
    services: Dict[str, Amount]
    total_material: Amount
    total_services: Amount
    subtotal: Amount
    gst: Amount
    contingency: Amount
    final_budget: Amount
    cost_sqft: Amount
