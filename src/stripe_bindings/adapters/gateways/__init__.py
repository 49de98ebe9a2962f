# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resource gateways over :class:`StripeClient`."""

from __future__ import annotations

from stripe_bindings.adapters.gateways.application_fee_refunds_gateway import (
    ApplicationFeeRefundsGateway,
)
from stripe_bindings.adapters.gateways.coupons_gateway import CouponsGateway
from stripe_bindings.adapters.gateways.events_gateway import EventsGateway

__all__ = ["ApplicationFeeRefundsGateway", "CouponsGateway", "EventsGateway"]
