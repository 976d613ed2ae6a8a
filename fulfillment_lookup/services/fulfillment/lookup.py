"""Fulfillment lookups against the Shopify Admin REST API.

Both lookups issue a single GET through an admin caller and never raise:
every failure is returned as a FulfillmentLookupFailure.
"""

from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from pydantic import ValidationError

from fulfillment_lookup.models.results import (
    FulfillmentLookupFailure,
    FulfillmentLookupSuccess,
    OrderFulfillmentLookupSuccess,
)
from fulfillment_lookup.services.external.shopify import call_shopify_admin
from fulfillment_lookup.services.fulfillment.errors import classify_lookup_error, malformed_response_failure
from fulfillment_lookup.services.fulfillment.payloads import FulfillmentsPayload, OrderEnvelope

logger = structlog.get_logger(__name__)

OrderId = str | int
AdminCaller = Callable[[str], Awaitable[dict[str, Any]]]


def _failure(result: FulfillmentLookupFailure, order_id: OrderId, path: str) -> FulfillmentLookupFailure:
    logger.warning(
        "Failed to fetch fulfillments from Shopify",
        order_id=order_id,
        path=path,
        http_status=result.http_status,
        error_code=result.error,
        error=result.message,
    )
    return result


async def get_fulfillment_orders(
    order_id: OrderId,
    *,
    caller: AdminCaller = call_shopify_admin,
) -> FulfillmentLookupSuccess | FulfillmentLookupFailure:
    """Fetch fulfillments of an order via the fulfillments sub-resource.

    Args:
        order_id: Shopify order ID (not validated)
        caller: Admin API caller, defaults to the configured Shopify client

    Returns:
        Success with fulfillments, their count and IDs, or a failure result
    """
    path = f"/orders/{order_id}/fulfillments.json"

    try:
        response = await caller(path)
    except Exception as e:
        return _failure(classify_lookup_error(e), order_id, path)

    try:
        payload = FulfillmentsPayload.model_validate(response)
        result = FulfillmentLookupSuccess.from_fulfillments(payload.fulfillments, raw_response=response)
    except ValidationError as e:
        return _failure(malformed_response_failure(e), order_id, path)

    logger.info("Fetched fulfillments from Shopify", order_id=order_id, count=result.count)
    return result


async def get_fulfillments(
    order_id: OrderId,
    *,
    caller: AdminCaller = call_shopify_admin,
) -> OrderFulfillmentLookupSuccess | FulfillmentLookupFailure:
    """Fetch an order and extract the fulfillments embedded in it.

    Args:
        order_id: Shopify order ID (not validated)
        caller: Admin API caller, defaults to the configured Shopify client

    Returns:
        Success with fulfillments plus the order's id and name, or a failure result
    """
    path = f"/orders/{order_id}.json"

    try:
        response = await caller(path)
    except Exception as e:
        return _failure(classify_lookup_error(e), order_id, path)

    try:
        order = OrderEnvelope.model_validate(response).order
        fulfillments = order.fulfillments
        result = OrderFulfillmentLookupSuccess(
            fulfillments=fulfillments,
            count=len(fulfillments),
            fulfillment_ids=[f.get("id") for f in fulfillments],
            order_id=order.id,
            order_name=order.name,
            raw_response=response,
        )
    except ValidationError as e:
        return _failure(malformed_response_failure(e), order_id, path)

    logger.info(
        "Fetched order fulfillments from Shopify",
        order_id=order_id,
        order_name=result.order_name,
        count=result.count,
    )
    return result
