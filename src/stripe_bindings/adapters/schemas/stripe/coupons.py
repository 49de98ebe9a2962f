# Copyright (c)
# SPDX-License-Identifier: MIT
"""Coupon schema.

See https://stripe.com/docs/api#coupons.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from stripe_bindings.adapters.mappers.stripe_datetime import StripeDateTime
from stripe_bindings.adapters.schemas.stripe.base import (
    Currency,
    Metadata,
    StripeAmount,
    StripeModel,
)
from stripe_bindings.adapters.schemas.stripe.lists import StripeList
from stripe_bindings.domain.enums.coupon_duration import CouponDuration


class Coupon(StripeModel):
    """Discount template applied to customers or subscriptions.

    Exactly one of ``amount_off`` (with ``currency``) or ``percent_off`` is set
    by Stripe; the model does not enforce it.
    """

    object_: Literal["coupon"] = Field("coupon", alias="object")
    id: str
    amount_off: StripeAmount | None = None
    created: StripeDateTime
    currency: Currency | None = None
    duration: CouponDuration
    duration_in_months: int | None = None
    livemode: bool
    max_redemptions: int | None = None
    metadata: Metadata | None = None
    percent_off: StripeAmount | None = None
    redeem_by: StripeDateTime | None = None
    times_redeemed: int
    valid: bool


CouponList = StripeList[Coupon]
