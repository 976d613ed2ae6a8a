"""Shopify order fulfillment lookups."""

from fulfillment_lookup.services.fulfillment import get_fulfillment_orders, get_fulfillments

__all__ = ["get_fulfillment_orders", "get_fulfillments"]
