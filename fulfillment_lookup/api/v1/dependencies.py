"""FastAPI dependencies for service injection."""

from typing import Annotated

from fastapi import Depends

from fulfillment_lookup.services.external.shopify import call_shopify_admin
from fulfillment_lookup.services.fulfillment import AdminCaller


def get_admin_caller() -> AdminCaller:
    """Get the Admin API caller configured from settings."""
    return call_shopify_admin


# Type alias for cleaner endpoint signatures
AdminCallerDep = Annotated[AdminCaller, Depends(get_admin_caller)]
