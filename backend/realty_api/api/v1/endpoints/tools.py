"""Property tool endpoints: construction cost estimator and Vastu scorer."""

import logging

from fastapi import APIRouter, HTTPException, status

from realty_api.models.schemas.estimator import (
    ConstructionEstimateRequest,
    ConstructionEstimateResponse,
)
from realty_api.models.schemas.vastu import VastuRequest, VastuResponse
from realty_api.services.tools.construction_estimator import ConstructionCostEstimator
from realty_api.services.tools.vastu import VastuScorer

logger = logging.getLogger(__name__)

estimator_router = APIRouter()
vastu_router = APIRouter()


@estimator_router.post(
    "/calculate",
    response_model=ConstructionEstimateResponse,
    summary="Estimate construction cost",
    description="Itemised material, service, GST and contingency estimate for building a house",
)
async def calculate_estimate(
    request: ConstructionEstimateRequest,
) -> ConstructionEstimateResponse:
    """Estimate the construction budget."""
    try:
        return ConstructionCostEstimator().estimate(request)
    except Exception as e:
        logger.error(f"Error calculating construction estimate: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate construction estimate",
        )


@vastu_router.post(
    "/calculate",
    response_model=VastuResponse,
    summary="Calculate Vastu score",
    description="Score a plot for Vastu compliance with detailed analysis and a suggested layout",
)
async def calculate_vastu(request: VastuRequest) -> VastuResponse:
    """Score a plot for Vastu compliance."""
    try:
        return VastuScorer().score(request)
    except Exception as e:
        logger.error(f"Vastu calculation error: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to calculate Vastu score",
        )
