# Copyright (c)
# SPDX-License-Identifier: MIT
"""Discount schema.

A discount is a coupon applied to a customer or subscription; it is only
ever returned embedded in another resource or an event.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from stripe_bindings.adapters.mappers.stripe_datetime import StripeDateTime
from stripe_bindings.adapters.schemas.stripe.base import StripeModel
from stripe_bindings.adapters.schemas.stripe.coupons import Coupon


class Discount(StripeModel):
    object_: Literal["discount"] = Field("discount", alias="object")
    coupon: Coupon
    customer: str
    end: StripeDateTime | None = None
    start: StripeDateTime
    subscription: str | None = None
