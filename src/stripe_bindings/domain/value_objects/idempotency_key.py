# Copyright (c)
# SPDX-License-Identifier: MIT
"""Idempotency key value object.

Purpose:
    Key sent in the ``Idempotency-Key`` header so that a retried POST does not
    produce duplicate side effects (https://stripe.com/docs/api#idempotent_requests).

Layer:
    domain/value_objects
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

__all__ = ["IdempotencyKey"]


@dataclass(frozen=True, slots=True)
class IdempotencyKey:
    """Opaque idempotency key.

    Attributes:
        key: Header value; Stripe accepts up to 255 characters.
    """

    key: str

    def __post_init__(self) -> None:
        if not self.key or len(self.key) > 255:
            raise ValueError("idempotency key must be 1..255 characters")

    @classmethod
    def generate(cls) -> IdempotencyKey:
        """Return a fresh random (UUID4) key."""
        return cls(str(uuid.uuid4()))
