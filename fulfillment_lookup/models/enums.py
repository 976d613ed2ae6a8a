"""Enum definitions for lookup results."""

from enum import StrEnum


class FulfillmentErrorCode(StrEnum):
    """Application-level error code of a failed fulfillment lookup."""

    SHOPIFY_ADMIN_AUTH_ERROR = "SHOPIFY_ADMIN_AUTH_ERROR"
    SHOPIFY_FULFILLMENT_FETCH_ERROR = "SHOPIFY_FULFILLMENT_FETCH_ERROR"
