# Copyright (c)
# SPDX-License-Identifier: MIT
"""Typed async bindings for the Stripe REST API.

Typical usage:
    settings = StripeSettings()
    async with StripeClient(settings) as client:
        events = EventsGateway(client)
        page = await handle(
            lambda: events.list(created=Range(gte=since)),
            number_of_retries=settings.number_of_retries,
        )
"""

from __future__ import annotations

from stripe_bindings.adapters.gateways import (
    ApplicationFeeRefundsGateway,
    CouponsGateway,
    EventsGateway,
)
from stripe_bindings.adapters.mappers.created_input_codec import (
    decode_created_input,
    encode_created_input,
)
from stripe_bindings.domain.entities.created_input import CreatedInput, Range, Timestamp
from stripe_bindings.domain.value_objects.idempotency_key import IdempotencyKey
from stripe_bindings.infrastructure.external_apis.stripe import StripeClient, StripeSettings
from stripe_bindings.infrastructure.resilience.stripe_handling import handle, handle_idempotent

__all__ = [
    "ApplicationFeeRefundsGateway",
    "CouponsGateway",
    "CreatedInput",
    "EventsGateway",
    "IdempotencyKey",
    "Range",
    "StripeClient",
    "StripeSettings",
    "Timestamp",
    "decode_created_input",
    "encode_created_input",
    "handle",
    "handle_idempotent",
]
