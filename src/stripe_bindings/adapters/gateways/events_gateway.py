# Copyright (c)
# SPDX-License-Identifier: MIT
"""Adapter Gateway: events.

Endpoints:
    * ``GET /v1/events/{id}``
    * ``GET /v1/events`` (``created`` filter, ``type`` filter, cursors)
"""

from __future__ import annotations

from stripe_bindings.adapters.gateways.base import build_list_params, path_segment
from stripe_bindings.adapters.schemas.stripe.events import Event, EventList
from stripe_bindings.domain.entities.created_input import CreatedInput
from stripe_bindings.domain.enums.event_type import EventType
from stripe_bindings.infrastructure.external_apis.stripe.client import StripeClient


class EventsGateway:
    """Read access to the account's event log."""

    def __init__(self, client: StripeClient) -> None:
        self._client = client

    async def get(self, event_id: str) -> Event:
        return await self._client.get(
            f"/v1/events/{path_segment(event_id)}", Event, op="events.get"
        )

    async def list(
        self,
        *,
        created: CreatedInput | None = None,
        type: EventType | str | None = None,
        limit: int | None = None,
        starting_after: str | None = None,
        ending_before: str | None = None,
        include_total_count: bool = False,
    ) -> EventList:
        """List events, newest first.

        Args:
            created: Exact instant or range the events were created in.
            type: Event name; Stripe also accepts ``*`` wildcards such as
                ``"charge.*"``.
            limit: Page size, 1..100.
            starting_after: Cursor: return events after this id.
            ending_before: Cursor: return events before this id.
            include_total_count: Ask Stripe to include ``total_count``.

        Returns:
            One page of events.
        """
        params = build_list_params(
            created=created,
            limit=limit,
            starting_after=starting_after,
            ending_before=ending_before,
            include_total_count=include_total_count,
        )
        if type is not None:
            params["type"] = type.value if isinstance(type, EventType) else type
        return await self._client.get("/v1/events", EventList, params=params, op="events.list")
