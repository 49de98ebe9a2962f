# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe resource schemas (Adapters Layer).

Purpose:
    Pydantic models mirroring Stripe JSON resources, decoded with
    ``Model.model_validate(payload)`` and encoded with ``model.to_wire()``.

Layer:
    adapters/schemas/stripe
"""

from __future__ import annotations

from stripe_bindings.adapters.schemas.stripe.alipay import AliPayAccount
from stripe_bindings.adapters.schemas.stripe.application_fee_refunds import (
    ApplicationFeeRefund,
    ApplicationFeeRefundInput,
    ApplicationFeeRefundList,
)
from stripe_bindings.adapters.schemas.stripe.base import StripeModel
from stripe_bindings.adapters.schemas.stripe.coupons import Coupon, CouponList
from stripe_bindings.adapters.schemas.stripe.delete_response import DeleteResponse
from stripe_bindings.adapters.schemas.stripe.discounts import Discount
from stripe_bindings.adapters.schemas.stripe.errors import StripeErrorBody, StripeErrorEnvelope
from stripe_bindings.adapters.schemas.stripe.events import Event, EventData, EventList
from stripe_bindings.adapters.schemas.stripe.lists import StripeList
from stripe_bindings.adapters.schemas.stripe.stripe_object import decode_stripe_object

__all__ = [
    "AliPayAccount",
    "ApplicationFeeRefund",
    "ApplicationFeeRefundInput",
    "ApplicationFeeRefundList",
    "Coupon",
    "CouponList",
    "DeleteResponse",
    "Discount",
    "Event",
    "EventData",
    "EventList",
    "StripeErrorBody",
    "StripeErrorEnvelope",
    "StripeList",
    "StripeModel",
    "decode_stripe_object",
]
