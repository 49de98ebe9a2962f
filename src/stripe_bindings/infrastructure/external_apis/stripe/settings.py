# Copyright (c)
# SPDX-License-Identifier: MIT
"""Pydantic settings for the Stripe transport client."""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StripeSettings(BaseSettings):
    """Configuration for the Stripe client.

    Environment variables (with ``model_config.env_prefix``):

    * ``STRIPE_API_KEY``
    * ``STRIPE_BASE_URL``
    * ``STRIPE_API_VERSION``
    * ``STRIPE_TIMEOUT_S``
    * ``STRIPE_NUMBER_OF_RETRIES``
    """

    api_key: SecretStr = Field(
        ...,
        description="Stripe secret API key (sk_test_* or sk_live_*).",
    )
    base_url: str = Field(
        "https://api.stripe.com",
        description="Stripe API endpoint, without a trailing slash.",
    )
    api_version: str | None = Field(
        None,
        description="Pinned API version sent as Stripe-Version; account default when unset.",
    )
    timeout_s: float = Field(
        30.0,
        description="Per-request timeout in seconds for the transport client.",
    )
    number_of_retries: int = Field(
        3,
        ge=0,
        description="Retries for retryable failures in handle()/handle_idempotent().",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="STRIPE_",
        extra="ignore",
    )

    @property
    def endpoint(self) -> str:
        """Return the base URL with any trailing slash removed."""
        return self.base_url.rstrip("/")
