# Copyright (c)
# SPDX-License-Identifier: MIT
"""Base Stripe Schema (Adapters Layer).

Purpose:
    Canonical Pydantic base for every model that mirrors a Stripe JSON
    resource. Fixes the wire conventions in one place:

    * Field names are the snake_case wire names; the ``object`` tag is
      exposed as ``object_`` and aliased back on the wire.
    * Unknown fields are ignored (Stripe adds fields without versioning).
    * Instances are immutable.
    * Date-times travel as epoch seconds, amounts as JSON numbers.

Layer:
    adapters/schemas/stripe
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, StringConstraints


def _render_amount(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


StripeAmount = Annotated[Decimal, PlainSerializer(_render_amount)]
"""Monetary amount; decoded as ``Decimal``, encoded as a JSON number."""

Currency = Annotated[
    str, StringConstraints(strip_whitespace=True, to_lower=True, min_length=3, max_length=3)
]
"""Three-letter ISO-4217 code, lower-cased as Stripe returns it."""

Metadata = dict[str, str]


class StripeModel(BaseModel):
    """Base class for Stripe resource models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_wire(self, **kwargs: Any) -> dict[str, Any]:
        """Return the JSON-ready wire representation.

        Args:
            **kwargs: Optional Pydantic dump settings (e.g., ``exclude_none=True``).

        Returns:
            dict[str, Any]: Mapping with wire field names (including ``object``).
        """
        return self.model_dump(mode="json", by_alias=True, **kwargs)
