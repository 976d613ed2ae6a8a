"""Result models and enums."""

from fulfillment_lookup.models.enums import FulfillmentErrorCode
from fulfillment_lookup.models.results import (
    FulfillmentLookupFailure,
    FulfillmentLookupResult,
    FulfillmentLookupSuccess,
    OrderFulfillmentLookupSuccess,
)

__all__ = [
    "FulfillmentErrorCode",
    "FulfillmentLookupFailure",
    "FulfillmentLookupResult",
    "FulfillmentLookupSuccess",
    "OrderFulfillmentLookupSuccess",
]
