"""Fulfillment lookups and error classification."""

from fulfillment_lookup.services.fulfillment.errors import classify_lookup_error, extract_http_status
from fulfillment_lookup.services.fulfillment.lookup import (
    AdminCaller,
    get_fulfillment_orders,
    get_fulfillments,
)

__all__ = [
    "AdminCaller",
    "classify_lookup_error",
    "extract_http_status",
    "get_fulfillment_orders",
    "get_fulfillments",
]
