# Copyright (c)
# SPDX-License-Identifier: MIT
"""Application fee refund schemas.

See https://stripe.com/docs/api#fee_refunds.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from stripe_bindings.adapters.mappers.post_params import nested_post_params, to_post_params
from stripe_bindings.adapters.mappers.stripe_datetime import StripeDateTime
from stripe_bindings.adapters.schemas.stripe.base import (
    Currency,
    Metadata,
    StripeAmount,
    StripeModel,
)
from stripe_bindings.adapters.schemas.stripe.lists import StripeList


class ApplicationFeeRefund(StripeModel):
    """Refund of (part of) an application fee."""

    object_: Literal["fee_refund"] = Field("fee_refund", alias="object")
    id: str
    amount: StripeAmount
    metadata: Metadata | None = None
    created: StripeDateTime
    currency: Currency
    fee: str
    balance_transaction: str | None = None


class ApplicationFeeRefundInput(StripeModel):
    """Parameters for refunding an application fee.

    Attributes:
        id: Identifier of the application fee to refund.
        amount: Amount to refund in the smallest currency unit; the full
            fee when omitted.
        metadata: Key/value pairs attached to the refund.
    """

    id: str
    amount: StripeAmount | None = None
    metadata: Metadata = Field(default_factory=dict)

    def to_post_params(self) -> dict[str, str]:
        params = to_post_params({"amount": self.amount})
        return params | nested_post_params("metadata", self.metadata)


ApplicationFeeRefundList = StripeList[ApplicationFeeRefund]
