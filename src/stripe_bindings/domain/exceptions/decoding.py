# Copyright (c)
# SPDX-License-Identifier: MIT
"""Decoding Exceptions.

Synopsis:
    Errors raised while turning a JSON value into a typed binding object. They
    are raised client-side, before any network call is made, whenever a filter
    or payload does not have the expected shape.

Design:
    * ``ShapeMismatch`` means the top-level JSON kind matched no variant.
    * ``FieldTypeError`` means a present field had the wrong type; it always
      carries the dotted field path (``"$"`` for the root value).

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any

from stripe_bindings.domain.exceptions.base import StripeBindingError


class DecodeError(StripeBindingError):
    """A JSON value could not be decoded into the requested type.

    Attributes:
        code: Stable, machine-readable error code.
        tag: Short literal naming the failed decode.
        path: Dotted path of the offending value.
    """

    code = "DECODE_ERROR"

    def __init__(
        self,
        tag: str,
        *,
        path: str = "$",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"{tag} at {path}", details=details)
        self.tag = tag
        self.path = path


class ShapeMismatch(DecodeError):
    """The JSON kind (object, string, number, ...) matched no known variant."""

    code = "SHAPE_MISMATCH"


class FieldTypeError(DecodeError):
    """A present field did not have its expected type."""

    code = "FIELD_TYPE_ERROR"
