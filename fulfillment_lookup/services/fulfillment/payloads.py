"""Typed views of the Admin API responses read by the lookups.

Missing or null fields fall back to their defaults; anything else that does not
fit (e.g. ``fulfillments`` that is not a list of objects) fails validation.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from fulfillment_lookup.models.results import Fulfillment


class FulfillmentsPayload(BaseModel):
    """Body of ``GET /orders/{id}/fulfillments.json``."""

    fulfillments: list[Fulfillment] = Field(default_factory=list)

    @field_validator("fulfillments", mode="before")
    @classmethod
    def default_fulfillments(cls, value: Any) -> Any:
        return value or []


class OrderPayload(BaseModel):
    """The ``order`` object of ``GET /orders/{id}.json``."""

    id: Any = None
    name: Any = None
    fulfillments: list[Fulfillment] = Field(default_factory=list)

    @field_validator("fulfillments", mode="before")
    @classmethod
    def default_fulfillments(cls, value: Any) -> Any:
        return value or []


class OrderEnvelope(BaseModel):
    """Body of ``GET /orders/{id}.json``."""

    order: OrderPayload = Field(default_factory=OrderPayload)

    @field_validator("order", mode="before")
    @classmethod
    def default_order(cls, value: Any) -> Any:
        return value or {}
