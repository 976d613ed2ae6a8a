"""Fulfillment lookup endpoints."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from fulfillment_lookup.api.v1.dependencies import AdminCallerDep
from fulfillment_lookup.models.results import FulfillmentLookupResult
from fulfillment_lookup.services.fulfillment import get_fulfillment_orders, get_fulfillments

router = APIRouter(tags=["fulfillments"])

# Parsed statuses outside 4xx/5xx cannot be sent back as an error response
BAD_GATEWAY = 502


def _response_status(result: FulfillmentLookupResult) -> int:
    if result.success or 400 <= result.http_status <= 599:
        return result.http_status
    return BAD_GATEWAY


def _to_response(result: FulfillmentLookupResult) -> JSONResponse:
    """Serialize a lookup result; error statuses are passed through as the response status."""
    return JSONResponse(
        status_code=_response_status(result),
        content=result.model_dump(mode="json", by_alias=True),
    )


@router.get("/orders/{order_id}/fulfillment-orders", operation_id="getFulfillmentOrders")
async def fulfillment_orders(order_id: str, caller: AdminCallerDep) -> JSONResponse:
    """Get fulfillments of an order from the fulfillments sub-resource."""
    result = await get_fulfillment_orders(order_id, caller=caller)
    return _to_response(result)


@router.get("/orders/{order_id}/fulfillments", operation_id="getFulfillments")
async def order_fulfillments(order_id: str, caller: AdminCallerDep) -> JSONResponse:
    """Get fulfillments embedded in the order resource, with order id and name."""
    result = await get_fulfillments(order_id, caller=caller)
    return _to_response(result)
