"""API v1 router configuration."""

from fastapi import APIRouter

from realty_api.api.v1.endpoints import health, loan, tools

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    loan.router,
    prefix="/loan",
    tags=["loan"],
)

api_router.include_router(
    tools.estimator_router,
    prefix="/estimator",
    tags=["estimator"],
)

api_router.include_router(
    tools.vastu_router,
    prefix="/vastu",
    tags=["vastu"],
)
