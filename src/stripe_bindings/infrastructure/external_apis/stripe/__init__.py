# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe provider integration (transport client + settings)."""

from __future__ import annotations

from stripe_bindings.infrastructure.external_apis.stripe.client import StripeClient
from stripe_bindings.infrastructure.external_apis.stripe.settings import StripeSettings

__all__ = ["StripeClient", "StripeSettings"]
