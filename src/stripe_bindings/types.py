# Copyright (c)
# SPDX-License-Identifier: MIT
"""Project-wide JSON typing helpers.

These aliases model JSON-serializable values as they appear on the Stripe
wire, before decoding and after encoding.
"""

from __future__ import annotations

type JsonPrimitive = None | bool | int | float | str
type JsonValue = JsonPrimitive | list[JsonValue] | dict[str, JsonValue]
type JsonObject = dict[str, JsonValue]

__all__ = ["JsonObject", "JsonPrimitive", "JsonValue"]
