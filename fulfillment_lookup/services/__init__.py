"""Services module.

This module provides the service layer:
- exceptions: Base service exceptions
- external: Shopify Admin API client
- fulfillment: Fulfillment lookups and error classification
"""
