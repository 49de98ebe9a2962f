# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe date-time codec.

Stripe stores and returns timestamps as Unix epoch seconds (UTC). Callers and
echoed filters sometimes carry ISO-8601 strings instead, so parsing accepts
both; rendering always produces epoch seconds.

Exposes:
    * :func:`parse_stripe_datetime` / :func:`render_stripe_datetime` for JSON.
    * :func:`render_stripe_datetime_param` for query strings and form bodies.
    * :data:`StripeDateTime` for pydantic model fields.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Annotated, Any, Final

from pydantic import PlainSerializer, PlainValidator

from stripe_bindings.domain.exceptions.decoding import FieldTypeError

__all__ = [
    "StripeDateTime",
    "parse_stripe_datetime",
    "render_stripe_datetime",
    "render_stripe_datetime_param",
]

_EPOCH_DIGITS: Final = re.compile(r"^-?\d+$")
_TAG: Final[str] = "InvalidStripeDateTime"
# Longer digit strings are rejected before int() conversion.
_MAX_EPOCH_DIGITS: Final[int] = 20


def _from_epoch(seconds: int, path: str) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=UTC)
    except (OverflowError, OSError, ValueError) as exc:
        raise FieldTypeError(_TAG, path=path, details={"value": seconds}) from exc


def parse_stripe_datetime(raw: Any, *, path: str = "$") -> datetime:
    """Parse a wire date-time into an aware UTC ``datetime``.

    Args:
        raw: Epoch seconds (``int`` or integral ``float``), a string holding
            epoch digits, or an ISO-8601 string. Naive ISO values mean UTC.
        path: Field path reported on failure.

    Returns:
        The parsed instant in UTC, truncated to whole seconds.

    Raises:
        FieldTypeError: If ``raw`` is not a date-time representation.
    """
    # bool is an int subclass; it is never a timestamp.
    if isinstance(raw, bool):
        raise FieldTypeError(_TAG, path=path, details={"value": raw})

    if isinstance(raw, int):
        return _from_epoch(raw, path)

    if isinstance(raw, float):
        if not raw.is_integer():
            raise FieldTypeError(_TAG, path=path, details={"value": raw})
        return _from_epoch(int(raw), path)

    if isinstance(raw, str):
        text = raw.strip()
        if _EPOCH_DIGITS.match(text):
            if len(text.lstrip("-")) > _MAX_EPOCH_DIGITS:
                raise FieldTypeError(_TAG, path=path, details={"value": raw[:32]})
            return _from_epoch(int(text), path)
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise FieldTypeError(_TAG, path=path, details={"value": raw}) from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed.astimezone(UTC).replace(microsecond=0)

    raise FieldTypeError(_TAG, path=path, details={"value": repr(raw)})


def render_stripe_datetime(value: datetime) -> int:
    """Render a ``datetime`` as epoch seconds (naive values mean UTC)."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return int(value.timestamp())


def render_stripe_datetime_param(value: datetime) -> str:
    """Render a ``datetime`` for a query string or form body."""
    return str(render_stripe_datetime(value))


def _validate_field(value: Any) -> datetime:
    """Pydantic hook: accept ``datetime`` instances and wire values alike."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.replace(microsecond=0)
    try:
        return parse_stripe_datetime(value)
    except FieldTypeError as exc:
        # pydantic only wraps ValueError into a ValidationError.
        raise ValueError(f"invalid Stripe date-time: {exc.details.get('value')!r}") from exc


StripeDateTime = Annotated[
    datetime,
    PlainValidator(_validate_field),
    PlainSerializer(render_stripe_datetime, return_type=int),
]
