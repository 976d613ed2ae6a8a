"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from fulfillment_lookup.api.v1 import fulfillments, health
from fulfillment_lookup.config import settings
from fulfillment_lookup.logging import setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(
        "Starting Fulfillment Lookup API",
        debug=settings.debug,
        shopify_api_version=settings.shopify_api_version,
    )
    if not settings.shopify_access_token or not settings.shopify_store_url:
        logger.warning("Shopify credentials not configured")

    yield

    logger.info("Shutting down Fulfillment Lookup API")


app = FastAPI(
    title="Fulfillment Lookup API",
    description="Fulfillment records of Shopify orders",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(fulfillments.router, prefix="/api/v1", tags=["fulfillments"])
