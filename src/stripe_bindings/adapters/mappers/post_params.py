# Copyright (c)
# SPDX-License-Identifier: MIT
"""Form-parameter helpers for Stripe POST bodies.

Stripe takes ``application/x-www-form-urlencoded`` bodies. Nested mappings
such as ``metadata`` are flattened to ``metadata[key]=value``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from stripe_bindings.adapters.mappers.stripe_datetime import render_stripe_datetime_param

__all__ = ["nested_post_params", "render_param", "to_post_params"]


def render_param(value: Any) -> str:
    """Render a scalar as a form value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return render_stripe_datetime_param(value)
    if isinstance(value, Decimal):
        return format(value, "f")
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def to_post_params(values: Mapping[str, Any]) -> dict[str, str]:
    """Drop unset (``None``) values and render the rest.

    Args:
        values: Flat mapping of parameter name to optional scalar.

    Returns:
        Parameters ready to send as a form body or query string.
    """
    return {key: render_param(value) for key, value in values.items() if value is not None}


def nested_post_params(prefix: str, values: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten a nested mapping under ``prefix`` (``prefix[key]=value``)."""
    if not values:
        return {}
    return {
        f"{prefix}[{key}]": render_param(value)
        for key, value in values.items()
        if value is not None
    }
