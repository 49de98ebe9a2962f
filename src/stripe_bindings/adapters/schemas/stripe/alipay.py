# Copyright (c)
# SPDX-License-Identifier: MIT
"""AliPay account schema.

See https://stripe.com/docs/api#alipay_account_object.
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


class AliPayAccount(StripeModel):
    """Snapshot of an AliPay account attached to a customer.

    Attributes:
        reusable: True if multiple payments can be created from this account;
            the amount of each payment is then freely chosen.
        used: Whether this account object has ever been used for a payment.
        username: The username for the AliPay account.
        fingerprint: Identifies the account across all AliPay account
            objects linked to the same AliPay account.
        payment_amount: For non-reusable accounts, the exact amount a charge
            may be created for.
        payment_currency: For non-reusable accounts, the exact currency a
            charge may be created for.
    """

    object_: Literal["alipay_account"] = Field("alipay_account", alias="object")
    id: str
    created: StripeDateTime
    livemode: bool
    reusable: bool
    used: bool
    username: str
    customer: str | None = None
    fingerprint: str | None = None
    metadata: Metadata | None = None
    payment_amount: StripeAmount | None = None
    payment_currency: Currency | None = None
