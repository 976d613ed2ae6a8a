"""Classification of Admin API failures into lookup error codes."""

import re

from pydantic import ValidationError

from fulfillment_lookup.models.enums import FulfillmentErrorCode
from fulfillment_lookup.models.results import FulfillmentLookupFailure
from fulfillment_lookup.services.external.shopify import ShopifyAdminError

# Admin API errors read like "Shopify Admin API error (401): Invalid API key"
STATUS_PATTERN = re.compile(r"\((\d+)\)")

AUTH_STATUSES = frozenset({401, 403})
FALLBACK_STATUS = 500


def extract_http_status(error: BaseException) -> int | None:
    """Get the HTTP status code carried by an error.

    Uses the structured status of ShopifyAdminError, otherwise the first
    parenthesized number in the error message.

    Returns:
        Status code, or None if the error carries none
    """
    if isinstance(error, ShopifyAdminError):
        return error.status_code

    match = STATUS_PATTERN.search(str(error))
    return int(match.group(1)) if match else None


def classify_lookup_error(error: BaseException) -> FulfillmentLookupFailure:
    """Convert an error raised while fetching fulfillments into a failure result."""
    http_status = extract_http_status(error)

    if http_status in AUTH_STATUSES:
        return FulfillmentLookupFailure(
            http_status=http_status,
            error=FulfillmentErrorCode.SHOPIFY_ADMIN_AUTH_ERROR,
            message=str(error),
        )

    # Network errors, 404, 5xx
    return FulfillmentLookupFailure(
        http_status=http_status or FALLBACK_STATUS,
        error=FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR,
        message=str(error),
    )


def malformed_response_failure(error: ValidationError) -> FulfillmentLookupFailure:
    """Failure for a successful response whose body does not have the expected shape.

    The validation message echoes the offending input, so it is never searched
    for a status code.
    """
    return FulfillmentLookupFailure(
        http_status=FALLBACK_STATUS,
        error=FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR,
        message=f"Malformed Shopify Admin API response: {error}",
    )
