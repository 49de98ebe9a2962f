# Copyright (c)
# SPDX-License-Identifier: MIT
"""Delete response schema (shared by every DELETE endpoint)."""

from __future__ import annotations

from stripe_bindings.adapters.schemas.stripe.base import StripeModel


class DeleteResponse(StripeModel):
    id: str
    deleted: bool
