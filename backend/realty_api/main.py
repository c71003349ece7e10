"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from realty_api.api.v1.router import api_router
from realty_api.config import settings
from realty_api.core.logging import configure_logging
from realty_api.db.session import init_models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    configure_logging()
    if settings.DB_CREATE_ALL:
        logger.info("Creating database tables")
        await init_models()
    logger.info(f"Realty Tools API started (environment={settings.ENVIRONMENT})")
    yield


# Create FastAPI application
app = FastAPI(
    title="Realty Tools API",
    description="Loan eligibility, home loan planning, construction estimates and Vastu scoring for property buyers",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "Realty Tools API",
        "version": "1.0.0",
        "docs": "/api/docs",
    }
