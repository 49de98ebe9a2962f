# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe API Exceptions.

Synopsis:
    Errors surfaced by the request executor. Handled Stripe failures
    (400/401/402/404/429) carry the decoded ``error`` object; server and
    transport failures carry only what the response told us.

Design:
    * Inherit from :class:`StripeBindingError` for a consistent ``.code``.
    * ``http_status`` is the status actually received; each subclass carries
      a default (401 and 403 both map to :class:`Unauthorized`).

Layer:
    domain/exceptions
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stripe_bindings.domain.enums.stripe_error import StripeErrorType
from stripe_bindings.domain.exceptions.base import StripeBindingError


class StripeApiError(StripeBindingError):
    """Handled Stripe error decoded from the response ``error`` object.

    Attributes:
        code: Stable, machine-readable error code.
        http_status: HTTP status of the response; the class default when
            constructed without one.
        error_type: Stripe error category.
        error_code: Stripe short error code, when given.
        message: Human-readable message from Stripe, when given.
        param: Request parameter the error relates to, when given.
    """

    code = "STRIPE_API_ERROR"
    http_status: int = 0

    def __init__(
        self,
        error_type: StripeErrorType | str,
        *,
        error_code: str | None = None,
        message: str | None = None,
        param: str | None = None,
        http_status: int | None = None,
    ) -> None:
        if http_status is not None:
            self.http_status = http_status
        super().__init__(
            message or "",
            details={
                "status": self.http_status,
                "type": str(getattr(error_type, "value", error_type)),
                "code": error_code,
                "param": param,
            },
        )
        self.error_type = error_type
        self.error_code = error_code
        self.message = message
        self.param = param


class BadRequest(StripeApiError):
    """400: the request was unacceptable, often due to a missing parameter."""

    code = "STRIPE_BAD_REQUEST"
    http_status = 400


class Unauthorized(StripeApiError):
    """401/403: no valid API key provided."""

    code = "STRIPE_UNAUTHORIZED"
    http_status = 401


class RequestFailed(StripeApiError):
    """402: parameters were valid but the request failed."""

    code = "STRIPE_REQUEST_FAILED"
    http_status = 402


class NotFound(StripeApiError):
    """404: the requested resource doesn't exist."""

    code = "STRIPE_NOT_FOUND"
    http_status = 404


class TooManyRequests(StripeApiError):
    """429: too many requests hit the API too quickly."""

    code = "STRIPE_TOO_MANY_REQUESTS"
    http_status = 429


class ApiConnectionError(StripeBindingError):
    """Network failure or timeout before a response was received."""

    code = "STRIPE_CONNECTION_ERROR"


class StripeServerError(StripeBindingError):
    """Stripe answered 500, 502, 503 or 504."""

    code = "STRIPE_SERVER_ERROR"

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Stripe server error, status code is {status_code}",
            details={"status": status_code},
        )
        self.status_code = status_code


class UnhandledServerError(StripeBindingError):
    """Stripe answered with a status this binding has no mapping for."""

    code = "STRIPE_UNHANDLED_STATUS"

    def __init__(self, status_code: int) -> None:
        super().__init__(
            f"Unhandled server error, status code is {status_code}",
            details={"status": status_code},
        )
        self.status_code = status_code


class InvalidJsonModelError(StripeBindingError):
    """A response body could not be turned into the expected model.

    Attributes:
        status_code: HTTP status of the response.
        url: URL of the call.
        post_params: Form parameters sent with the call, if any.
        json_response: Raw decoded body, or the raw text if it was not JSON.
        errors: Validation errors reported by the decoder.
    """

    code = "STRIPE_INVALID_JSON_MODEL"

    def __init__(
        self,
        *,
        status_code: int,
        url: str,
        post_params: Mapping[str, str] | None,
        json_response: Any,
        errors: list[dict[str, Any]],
    ) -> None:
        super().__init__(
            f"Invalid JSON model, errors are {errors}",
            details={"status": status_code, "url": url},
        )
        self.status_code = status_code
        self.url = url
        self.post_params = dict(post_params) if post_params is not None else None
        self.json_response = json_response
        self.errors = errors


class MaxNumberOfRetries(StripeBindingError):
    """A retryable request kept failing until the retry budget ran out."""

    code = "STRIPE_MAX_RETRIES"

    def __init__(self, retry_count: int) -> None:
        super().__init__(
            f"Gave up after {retry_count} retries",
            details={"retry_count": retry_count},
        )
        self.retry_count = retry_count
