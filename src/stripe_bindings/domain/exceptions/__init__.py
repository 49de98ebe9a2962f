# Copyright (c)
# SPDX-License-Identifier: MIT
"""Domain exceptions package.

Exports:
    - StripeBindingError: root of the hierarchy.
    - Decoding errors: DecodeError, ShapeMismatch, FieldTypeError.
    - API errors: StripeApiError and its status-specific subclasses.
    - Transport errors: ApiConnectionError, StripeServerError,
      UnhandledServerError, InvalidJsonModelError, MaxNumberOfRetries.
"""

from __future__ import annotations

from stripe_bindings.domain.exceptions.base import StripeBindingError
from stripe_bindings.domain.exceptions.decoding import DecodeError, FieldTypeError, ShapeMismatch
from stripe_bindings.domain.exceptions.stripe_api import (
    ApiConnectionError,
    BadRequest,
    InvalidJsonModelError,
    MaxNumberOfRetries,
    NotFound,
    RequestFailed,
    StripeApiError,
    StripeServerError,
    TooManyRequests,
    Unauthorized,
    UnhandledServerError,
)

__all__ = [
    "ApiConnectionError",
    "BadRequest",
    "DecodeError",
    "FieldTypeError",
    "InvalidJsonModelError",
    "MaxNumberOfRetries",
    "NotFound",
    "RequestFailed",
    "ShapeMismatch",
    "StripeApiError",
    "StripeBindingError",
    "StripeServerError",
    "TooManyRequests",
    "Unauthorized",
    "UnhandledServerError",
]
