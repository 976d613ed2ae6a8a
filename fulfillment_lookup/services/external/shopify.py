"""Shopify Admin REST API client."""

from typing import Any

import httpx
import structlog

from fulfillment_lookup.config import settings
from fulfillment_lookup.services.exceptions import ServiceError

logger = structlog.get_logger(__name__)


class ShopifyAdminError(ServiceError):
    """Shopify Admin API returned a non-success response.

    The message always embeds the status code in parentheses, e.g.
    ``Shopify Admin API error (401): Invalid API key``.
    """

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Shopify Admin API error ({status_code}): {body}")


class ShopifyAdminConfigError(ServiceError):
    """Shopify credentials are not configured."""

    pass


class ShopifyAdminClient:
    """Client for GET requests against the Shopify Admin REST API."""

    def __init__(
        self,
        store_url: str | None = None,
        access_token: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client, falling back to application settings.

        Args:
            store_url: Store URL, e.g. "https://my-store.myshopify.com"
            access_token: Admin API access token
            api_version: Admin API version, e.g. "2025-01"
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._store_url = (store_url if store_url is not None else settings.shopify_store_url).rstrip("/")
        self._access_token = access_token if access_token is not None else settings.shopify_access_token
        self._api_version = api_version or settings.shopify_api_version
        self._timeout = timeout if timeout is not None else settings.shopify_request_timeout
        self._transport = transport

    def _get_url(self, path: str) -> str:
        """Build the full Admin API URL for a resource path like "/orders/1.json"."""
        return f"{self._store_url}/admin/api/{self._api_version}{path}"

    def _get_headers(self) -> dict[str, str]:
        """Get the authorization headers for the Admin API."""
        return {
            "X-Shopify-Access-Token": self._access_token,
            "Accept": "application/json",
        }

    async def call(self, path: str) -> dict[str, Any]:
        """GET an Admin API resource and return its parsed JSON body.

        Args:
            path: Resource path relative to the versioned API root

        Returns:
            Parsed JSON body of the successful response

        Raises:
            ShopifyAdminConfigError: If store URL or access token is missing
            ShopifyAdminError: If Shopify responds with a non-2xx status
            httpx.RequestError: On network errors
        """
        if not self._access_token or not self._store_url:
            raise ShopifyAdminConfigError("Shopify Admin API credentials not configured")

        url = self._get_url(path)
        async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
            response = await client.get(url, headers=self._get_headers())

        if not response.is_success:
            error_body = response.text[:1000] if response.text else "No response body"
            logger.error(
                "Shopify Admin API error",
                path=path,
                status_code=response.status_code,
                response_body=error_body,
            )
            raise ShopifyAdminError(response.status_code, error_body)

        result: dict[str, Any] = response.json()
        return result


async def call_shopify_admin(path: str) -> dict[str, Any]:
    """Call the Admin API using credentials from application settings."""
    return await ShopifyAdminClient().call(path)
