# Copyright (c)
# SPDX-License-Identifier: MIT
"""CreatedInput codec.

Decodes and encodes the polymorphic ``created`` filter used by list
endpoints. The variant is chosen from the JSON kind alone:

* object            → :class:`Range` (every bound optional, ``{}`` allowed)
* string or number  → :class:`Timestamp`
* anything else     → :class:`ShapeMismatch` (``"UnknownCreatedInput"``)

The kind is inspected first and exactly one variant parser runs; there is no
attempt-then-fallback between variants. A scalar the date-time codec rejects
matches no variant and is reported as a shape mismatch; a bad bound inside an
object is reported as a field type error on that bound.

Encoding omits unset range bounds instead of writing ``null``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Final

from stripe_bindings.adapters.mappers.stripe_datetime import (
    parse_stripe_datetime,
    render_stripe_datetime,
    render_stripe_datetime_param,
)
from stripe_bindings.domain.entities.created_input import CreatedInput, Range, Timestamp
from stripe_bindings.domain.exceptions.decoding import FieldTypeError, ShapeMismatch
from stripe_bindings.types import JsonValue

__all__ = [
    "UNKNOWN_CREATED_INPUT",
    "created_input_to_query_params",
    "decode_created_input",
    "encode_created_input",
]

UNKNOWN_CREATED_INPUT: Final[str] = "UnknownCreatedInput"

_BOUND_KEYS: Final[tuple[str, ...]] = ("gt", "gte", "lt", "lte")


def _json_kind(value: Any) -> str:
    """Classify a decoded JSON value by kind."""
    if isinstance(value, Mapping):
        return "object"
    # bool before number: bool is an int subclass.
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (int, float)):
        return "number"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _decode_range(obj: Mapping[str, Any]) -> Range:
    bounds: dict[str, datetime | None] = {}
    for key in _BOUND_KEYS:
        raw = obj.get(key)
        bounds[key] = None if raw is None else parse_stripe_datetime(raw, path=key)
    return Range(**bounds)


def decode_created_input(value: Any) -> CreatedInput:
    """Decode a JSON value into a :data:`CreatedInput`.

    Args:
        value: A JSON value as produced by ``json.loads``.

    Returns:
        ``Range`` for objects, ``Timestamp`` for strings and numbers.

    Raises:
        ShapeMismatch: If the value is neither an object nor a string or
            number holding a valid date-time.
        FieldTypeError: If a present range bound is not a valid date-time.
    """
    kind = _json_kind(value)
    if kind == "object":
        return _decode_range(value)
    if kind in ("string", "number"):
        try:
            return Timestamp(parse_stripe_datetime(value, path="$"))
        except FieldTypeError as exc:
            raise ShapeMismatch(
                UNKNOWN_CREATED_INPUT, path="$", details={"kind": kind, "value": value}
            ) from exc
    raise ShapeMismatch(UNKNOWN_CREATED_INPUT, path="$", details={"kind": kind})


def encode_created_input(value: CreatedInput) -> JsonValue:
    """Encode a :data:`CreatedInput` to its native JSON shape.

    ``Timestamp`` becomes bare epoch seconds; ``Range`` becomes an object
    holding only the bounds that are set.
    """
    if isinstance(value, Timestamp):
        return render_stripe_datetime(value.value)
    if isinstance(value, Range):
        encoded: dict[str, JsonValue] = {}
        for key in _BOUND_KEYS:
            bound = getattr(value, key)
            if bound is not None:
                encoded[key] = render_stripe_datetime(bound)
        return encoded
    raise TypeError(f"not a CreatedInput: {type(value).__name__}")


def created_input_to_query_params(value: CreatedInput, key: str = "created") -> dict[str, str]:
    """Render a filter as list-endpoint query parameters.

    Examples:
        ``Timestamp`` → ``{"created": "1577836800"}``
        ``Range(gt=...)`` → ``{"created[gt]": "1577836800"}``
    """
    if isinstance(value, Timestamp):
        return {key: render_stripe_datetime_param(value.value)}
    if isinstance(value, Range):
        params: dict[str, str] = {}
        for bound_key in _BOUND_KEYS:
            bound = getattr(value, bound_key)
            if bound is not None:
                params[f"{key}[{bound_key}]"] = render_stripe_datetime_param(bound)
        return params
    raise TypeError(f"not a CreatedInput: {type(value).__name__}")
