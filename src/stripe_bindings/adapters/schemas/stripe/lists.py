# Copyright (c)
# SPDX-License-Identifier: MIT
"""List collection schema.

Every Stripe list endpoint returns the same envelope:
``{"object": "list", "url": ..., "has_more": ..., "data": [...]}``.
"""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import Field

from stripe_bindings.adapters.schemas.stripe.base import StripeModel

T = TypeVar("T")


class StripeList(StripeModel, Generic[T]):
    """Page of resources returned by a list endpoint.

    Attributes:
        url: Endpoint URL the list was fetched from.
        has_more: Whether more items exist after the last one in ``data``.
        data: Items on this page.
        total_count: Total number of items, only when requested via
            ``include[]=total_count``.
    """

    object_: Literal["list"] = Field("list", alias="object")
    url: str
    has_more: bool
    data: list[T]
    total_count: int | None = None

    @property
    def last_id(self) -> str | None:
        """Return the ``id`` of the last item, for ``starting_after`` paging."""
        if not self.data:
            return None
        return getattr(self.data[-1], "id", None)
