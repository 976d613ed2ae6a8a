"""Result schemas returned by the fulfillment lookups.

Results serialize with camelCase aliases (``httpStatus``, ``fulfillmentIds``,
``rawResponse``) so API consumers get the same shape regardless of which
lookup produced them.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from fulfillment_lookup.models.enums import FulfillmentErrorCode

Fulfillment = dict[str, Any]


class _LookupResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FulfillmentLookupSuccess(_LookupResult):
    """Fulfillments fetched successfully."""

    success: Literal[True] = True
    http_status: int = 200
    fulfillments: list[Fulfillment]
    count: int
    fulfillment_ids: list[Any]
    raw_response: dict[str, Any]

    @classmethod
    def from_fulfillments(
        cls, fulfillments: list[Fulfillment], raw_response: dict[str, Any]
    ) -> "FulfillmentLookupSuccess":
        """Create result from a fulfillment list, preserving its order."""
        return cls(
            fulfillments=fulfillments,
            count=len(fulfillments),
            fulfillment_ids=[f.get("id") for f in fulfillments],
            raw_response=raw_response,
        )


class OrderFulfillmentLookupSuccess(FulfillmentLookupSuccess):
    """Fulfillments extracted from the parent order resource."""

    order_id: Any = None
    order_name: Any = None


class FulfillmentLookupFailure(_LookupResult):
    """Lookup failed; the failure is reported as data, never raised."""

    success: Literal[False] = False
    http_status: int
    error: FulfillmentErrorCode
    message: str
    fulfillments: list[Fulfillment] = Field(default_factory=list)
    count: int = 0
    fulfillment_ids: list[Any] = Field(default_factory=list)


FulfillmentLookupResult = FulfillmentLookupSuccess | OrderFulfillmentLookupSuccess | FulfillmentLookupFailure
