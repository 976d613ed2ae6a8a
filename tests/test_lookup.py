"""Tests for the fulfillment lookups."""

import pytest

from fulfillment_lookup.models import (
    FulfillmentErrorCode,
    FulfillmentLookupFailure,
    FulfillmentLookupSuccess,
    OrderFulfillmentLookupSuccess,
)
from fulfillment_lookup.services.external.shopify import ShopifyAdminError
from fulfillment_lookup.services.fulfillment import get_fulfillment_orders, get_fulfillments


@pytest.mark.asyncio
class TestGetFulfillmentOrders:
    """Tests for get_fulfillment_orders()."""

    async def test_returns_fulfillments_with_count_and_ids(self, admin_caller):
        response = {"fulfillments": [{"id": 1}, {"id": 2}]}
        admin_caller.return_value = response

        result = await get_fulfillment_orders(123, caller=admin_caller)

        admin_caller.assert_awaited_once_with("/orders/123/fulfillments.json")
        assert isinstance(result, FulfillmentLookupSuccess)
        assert result.success is True
        assert result.http_status == 200
        assert result.count == 2
        assert result.fulfillment_ids == [1, 2]
        assert result.fulfillments == [{"id": 1}, {"id": 2}]
        assert result.raw_response == response

    async def test_passes_fulfillments_through_unmodified(self, admin_caller):
        fulfillments = [
            {"id": 30, "status": "success", "tracking_numbers": ["1Z999"]},
            {"id": 10, "status": "cancelled", "line_items": [{"id": 5, "quantity": 1}]},
            {"id": 20},
        ]
        admin_caller.return_value = {"fulfillments": fulfillments}

        result = await get_fulfillment_orders("450789469", caller=admin_caller)

        assert result.fulfillments == fulfillments
        assert result.fulfillment_ids == [30, 10, 20]
        assert result.count == 3

    async def test_missing_id_yields_none(self, admin_caller):
        admin_caller.return_value = {"fulfillments": [{"status": "open"}]}

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.fulfillment_ids == [None]

    @pytest.mark.parametrize("response", [{}, {"fulfillments": None}, {"fulfillments": []}])
    async def test_missing_fulfillments_default_to_empty(self, admin_caller, response):
        admin_caller.return_value = response

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.success is True
        assert result.fulfillments == []
        assert result.count == 0
        assert result.fulfillment_ids == []
        assert result.raw_response == response

    @pytest.mark.parametrize("status", [401, 403])
    async def test_auth_error(self, admin_caller, status):
        message = f"Shopify Admin API error ({status}): Forbidden"
        admin_caller.side_effect = Exception(message)

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert isinstance(result, FulfillmentLookupFailure)
        assert result.success is False
        assert result.http_status == status
        assert result.error == FulfillmentErrorCode.SHOPIFY_ADMIN_AUTH_ERROR
        assert result.message == message
        assert result.fulfillments == []
        assert result.count == 0
        assert result.fulfillment_ids == []

    @pytest.mark.parametrize("status", [400, 404, 422, 429, 500, 503])
    async def test_other_http_error(self, admin_caller, status):
        admin_caller.side_effect = Exception(f"Shopify Admin API error ({status}): Something")

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.http_status == status
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR

    async def test_network_error_falls_back_to_500(self, admin_caller):
        admin_caller.side_effect = TimeoutError("network timeout")

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.http_status == 500
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR
        assert result.message == "network timeout"

    async def test_structured_admin_error(self, admin_caller):
        admin_caller.side_effect = ShopifyAdminError(403, "Access denied")

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.http_status == 403
        assert result.error == FulfillmentErrorCode.SHOPIFY_ADMIN_AUTH_ERROR
        assert result.message == "Shopify Admin API error (403): Access denied"

    async def test_malformed_response_is_fetch_error(self, admin_caller):
        admin_caller.return_value = {"fulfillments": "not-a-list"}

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.success is False
        assert result.http_status == 500
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR

    async def test_status_like_text_in_malformed_body_is_not_auth_error(self, admin_caller):
        admin_caller.return_value = {"fulfillments": [{"id": 1}, "Forbidden (403)"]}

        result = await get_fulfillment_orders(1, caller=admin_caller)

        assert result.success is False
        assert result.http_status == 500
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR
        assert result.message.startswith("Malformed Shopify Admin API response: ")


@pytest.mark.asyncio
class TestGetFulfillments:
    """Tests for get_fulfillments()."""

    async def test_extracts_fulfillments_from_order(self, admin_caller):
        response = {
            "order": {
                "id": 450789469,
                "name": "#1001",
                "email": "bob@example.com",
                "fulfillments": [{"id": 255858046, "status": "success"}, {"id": 255858047}],
            }
        }
        admin_caller.return_value = response

        result = await get_fulfillments(450789469, caller=admin_caller)

        admin_caller.assert_awaited_once_with("/orders/450789469.json")
        assert isinstance(result, OrderFulfillmentLookupSuccess)
        assert result.http_status == 200
        assert result.count == 2
        assert result.fulfillment_ids == [255858046, 255858047]
        assert result.fulfillments == [{"id": 255858046, "status": "success"}, {"id": 255858047}]
        assert result.order_id == 450789469
        assert result.order_name == "#1001"
        assert result.raw_response == response

    async def test_non_string_order_name_passes_through(self, admin_caller):
        admin_caller.return_value = {"order": {"id": 7, "name": 1007, "fulfillments": [{"id": 1}]}}

        result = await get_fulfillments(7, caller=admin_caller)

        assert result.success is True
        assert result.order_name == 1007
        assert result.fulfillment_ids == [1]

    async def test_malformed_order_is_fetch_error(self, admin_caller):
        admin_caller.return_value = {"order": {"id": 7, "fulfillments": ["Unauthorized (401)"]}}

        result = await get_fulfillments(7, caller=admin_caller)

        assert result.http_status == 500
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR

    async def test_order_without_fulfillments(self, admin_caller):
        admin_caller.return_value = {"order": {"id": 7, "name": "#1007"}}

        result = await get_fulfillments(7, caller=admin_caller)

        assert result.success is True
        assert result.fulfillments == []
        assert result.count == 0
        assert result.fulfillment_ids == []
        assert result.order_id == 7

    @pytest.mark.parametrize("response", [{}, {"order": None}, {"order": {}}])
    async def test_missing_order(self, admin_caller, response):
        admin_caller.return_value = response

        result = await get_fulfillments(7, caller=admin_caller)

        assert result.success is True
        assert result.count == 0
        assert result.order_id is None
        assert result.order_name is None

    async def test_auth_error_scenario(self, admin_caller):
        admin_caller.side_effect = Exception("Shopify Admin API error (401): Invalid API key")

        result = await get_fulfillments(123, caller=admin_caller)

        admin_caller.assert_awaited_once_with("/orders/123.json")
        assert result.model_dump(by_alias=True) == {
            "success": False,
            "httpStatus": 401,
            "error": FulfillmentErrorCode.SHOPIFY_ADMIN_AUTH_ERROR,
            "message": "Shopify Admin API error (401): Invalid API key",
            "fulfillments": [],
            "count": 0,
            "fulfillmentIds": [],
        }

    async def test_not_found(self, admin_caller):
        admin_caller.side_effect = ShopifyAdminError(404, '{"errors":"Not Found"}')

        result = await get_fulfillments(999, caller=admin_caller)

        assert result.http_status == 404
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR

    async def test_network_error(self, admin_caller):
        admin_caller.side_effect = ConnectionError("network timeout")

        result = await get_fulfillments(123, caller=admin_caller)

        assert result.http_status == 500
        assert result.error == FulfillmentErrorCode.SHOPIFY_FULFILLMENT_FETCH_ERROR
