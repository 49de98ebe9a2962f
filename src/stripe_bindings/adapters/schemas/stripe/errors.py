# Copyright (c)
# SPDX-License-Identifier: MIT
"""Error body schema.

Failed Stripe responses carry ``{"error": {"type": ..., "code": ...,
"message": ..., "param": ...}}``.
"""

from __future__ import annotations

from pydantic import Field

from stripe_bindings.adapters.schemas.stripe.base import StripeModel
from stripe_bindings.domain.enums.stripe_error import StripeErrorType


class StripeErrorBody(StripeModel):
    type: StripeErrorType | str = Field(union_mode="left_to_right")
    code: str | None = None
    message: str | None = None
    param: str | None = None


class StripeErrorEnvelope(StripeModel):
    error: StripeErrorBody
