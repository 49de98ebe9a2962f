# Copyright (c)
# SPDX-License-Identifier: MIT
"""Polymorphic Stripe object decoding.

Resources embedded in events (and in a few other places) are only
identified by their ``object`` tag. This module maps tags to models and
decodes by dispatching on the tag.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from stripe_bindings.adapters.schemas.stripe.alipay import AliPayAccount
from stripe_bindings.adapters.schemas.stripe.application_fee_refunds import ApplicationFeeRefund
from stripe_bindings.adapters.schemas.stripe.base import StripeModel
from stripe_bindings.adapters.schemas.stripe.coupons import Coupon
from stripe_bindings.adapters.schemas.stripe.discounts import Discount
from stripe_bindings.domain.exceptions.decoding import FieldTypeError, ShapeMismatch

__all__ = ["STRIPE_OBJECT_MODELS", "decode_stripe_object"]

STRIPE_OBJECT_MODELS: Final[dict[str, type[StripeModel]]] = {
    "alipay_account": AliPayAccount,
    "coupon": Coupon,
    "discount": Discount,
    "fee_refund": ApplicationFeeRefund,
}


def decode_stripe_object(payload: Any) -> StripeModel | dict[str, Any]:
    """Decode a tagged Stripe object into its model.

    Args:
        payload: JSON object carrying an ``object`` tag.

    Returns:
        The matching model, or the payload unchanged (as a ``dict``) when the
        tag names a resource this binding does not model.

    Raises:
        ShapeMismatch: If ``payload`` is not a JSON object.
        FieldTypeError: If the ``object`` tag is missing or not a string.
    """
    if not isinstance(payload, Mapping):
        raise ShapeMismatch("UnknownStripeObject", details={"kind": type(payload).__name__})
    tag = payload.get("object")
    if not isinstance(tag, str):
        raise FieldTypeError("MissingObjectTag", path="object")
    model = STRIPE_OBJECT_MODELS.get(tag)
    if model is None:
        return dict(payload)
    return model.model_validate(payload)
