# Copyright (c)
# SPDX-License-Identifier: MIT
"""Base Domain Exceptions.

Summary:
    Canonical base class for every error raised by the binding, so callers can
    catch one type and still branch on a stable machine-readable ``code``.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any


class StripeBindingError(Exception):
    """Base class for all binding exceptions."""

    code: str = "STRIPE_BINDING_ERROR"

    def __init__(self, message: str = "", *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details: dict[str, Any] = details or {}
