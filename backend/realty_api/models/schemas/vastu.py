"""Pydantic schemas for the Vastu compliance scorer."""

from typing import Dict, List, Optional

from pydantic import Field, field_validator

from realty_api.core.enums import Direction, FindingStatus, PlotShape, RoadSide
from realty_api.models.schemas.common import CamelModel


class VastuRequest(CamelModel):
    """Inputs for POST /vastu/calculate."""

    facing: Direction
    road: RoadSide
    shape: PlotShape
    bedrooms: int = Field(1, ge=0, le=20)
    puja: bool = False
    stairs: bool = False
    soil_type: Optional[str] = Field(None, max_length=50)
    slope_direction: Optional[str] = Field(None, max_length=50)
    surroundings: List[str] = Field(default_factory=list)

    @field_validator("soil_type", "slope_direction")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty strings as not provided."""
        if v is not None and not v.strip():
            return None
        return v.strip() if v else v


class VastuFindingResponse(CamelModel):
    """One observation in the Vastu analysis."""

    category: str
    observation: str
    status: FindingStatus
    description: str
    impact: str
    remedy: Optional[str] = None


class ZoneDetail(CamelModel):
    """Reference attributes of a Vastu zone."""

    element: str
    color: str
    deity: str


class VastuResponse(CamelModel):
    """Vastu score, detailed analysis and suggested layout."""

    score: int
    detailed_analysis: List[VastuFindingResponse]
    layout: Dict[str, str]
    zone_details: Dict[str, ZoneDetail]
    brahmasthan: List[str]
