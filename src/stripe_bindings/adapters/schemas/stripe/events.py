# Copyright (c)
# SPDX-License-Identifier: MIT
"""Event envelope schema.

See https://stripe.com/docs/api#events.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from stripe_bindings.adapters.mappers.stripe_datetime import StripeDateTime
from stripe_bindings.adapters.schemas.stripe.base import StripeModel
from stripe_bindings.adapters.schemas.stripe.lists import StripeList
from stripe_bindings.adapters.schemas.stripe.stripe_object import decode_stripe_object
from stripe_bindings.domain.enums.event_type import EventType


class EventData(StripeModel):
    """Resource snapshot carried by an event.

    ``object`` is kept raw; :meth:`resource` decodes it by its own tag.
    ``previous_attributes`` is only sent for ``*.updated`` events.
    """

    object_: dict[str, Any] = Field(alias="object")
    previous_attributes: dict[str, Any] | None = None

    def resource(self) -> StripeModel | dict[str, Any]:
        return decode_stripe_object(self.object_)


class Event(StripeModel):
    """Event envelope.

    Attributes:
        type: Known names decode to :class:`EventType`; anything else is kept
            as the raw string.
        request: Id of the API request that caused the event. Newer API
            versions send an object (``{"id", "idempotency_key"}``) instead.
    """

    object_: Literal["event"] = Field("event", alias="object")
    id: str
    api_version: str | None = None
    created: StripeDateTime
    data: EventData
    livemode: bool
    pending_webhooks: int
    request: str | dict[str, Any] | None = None
    type: EventType | str = Field(union_mode="left_to_right")


EventList = StripeList[Event]
