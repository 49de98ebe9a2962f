# Copyright (c)
# SPDX-License-Identifier: MIT
"""Shared helpers for resource gateways.

Every list endpoint takes the same cursor parameters and, for most
resources, a ``created`` filter; they are rendered here once.
"""

from __future__ import annotations

from typing import Final
from urllib.parse import quote

from stripe_bindings.adapters.mappers.created_input_codec import created_input_to_query_params
from stripe_bindings.adapters.mappers.post_params import to_post_params
from stripe_bindings.domain.entities.created_input import CreatedInput

__all__ = ["MAX_LIST_LIMIT", "build_list_params", "path_segment"]

MAX_LIST_LIMIT: Final[int] = 100


def path_segment(value: str) -> str:
    """Escape an id for use as a single URL path segment."""
    if not value:
        raise ValueError("resource id must be non-empty")
    return quote(value, safe="")


def build_list_params(
    *,
    created: CreatedInput | None = None,
    limit: int | None = None,
    starting_after: str | None = None,
    ending_before: str | None = None,
    include_total_count: bool = False,
) -> dict[str, str]:
    """Render the common list-endpoint query parameters.

    Args:
        created: Optional ``created`` filter.
        limit: Page size, 1..100 (Stripe default is 10).
        starting_after: Cursor: return items after this id.
        ending_before: Cursor: return items before this id.
        include_total_count: Ask Stripe to include ``total_count``.

    Returns:
        Query parameters with unset values omitted.

    Raises:
        ValueError: If ``limit`` is outside 1..100 or both cursors are given.
    """
    if limit is not None and not 1 <= limit <= MAX_LIST_LIMIT:
        raise ValueError(f"limit must be between 1 and {MAX_LIST_LIMIT}")
    if starting_after is not None and ending_before is not None:
        raise ValueError("starting_after and ending_before are mutually exclusive")

    params = to_post_params(
        {"limit": limit, "starting_after": starting_after, "ending_before": ending_before}
    )
    if include_total_count:
        params["include[]"] = "total_count"
    if created is not None:
        params.update(created_input_to_query_params(created, "created"))
    return params
