"""Health check endpoints."""

from fastapi import APIRouter

from fulfillment_lookup.config import settings

router = APIRouter()


@router.get("/health", operation_id="healthCheck")
async def health_check() -> dict[str, str | bool]:
    """Health check endpoint; also reports whether Shopify credentials are set."""
    return {
        "status": "healthy",
        "shopify_configured": bool(settings.shopify_access_token and settings.shopify_store_url),
    }
