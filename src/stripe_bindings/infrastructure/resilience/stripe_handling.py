# Copyright (c)
# SPDX-License-Identifier: MIT
"""Request handling helpers for Stripe calls.

``handle`` runs a request and retries it while Stripe reports a condition
that its documentation describes as transient: a network-level failure, an
``api_error`` / ``api_connection_error`` on a 402, or a 429. Once the retry
budget is spent, :class:`MaxNumberOfRetries` is raised. Every other error is
propagated unchanged on first occurrence.

``handle_idempotent`` does the same but creates a single
:class:`IdempotencyKey` up front and hands it to every attempt, so a POST that
reached Stripe before the connection dropped is not executed twice.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Final, TypeVar

from stripe_bindings.domain.enums.stripe_error import StripeErrorType
from stripe_bindings.domain.exceptions.stripe_api import (
    ApiConnectionError,
    MaxNumberOfRetries,
    RequestFailed,
    TooManyRequests,
)
from stripe_bindings.domain.value_objects.idempotency_key import IdempotencyKey
from stripe_bindings.infrastructure.logging.logger import get_json_logger
from stripe_bindings.infrastructure.observability.metrics_stripe import inc_stripe_retry
from stripe_bindings.infrastructure.resilience.retry import RetryPolicy, retry_async

__all__ = ["default_retry_policy", "handle", "handle_idempotent", "is_retryable"]

T = TypeVar("T")

_log = get_json_logger(__name__)

_DEFAULT_BASE_BACKOFF: Final[float] = 0.5
_DEFAULT_MAX_BACKOFF: Final[float] = 8.0

_RETRYABLE_402_TYPES: Final[frozenset[str]] = frozenset(
    {StripeErrorType.API_ERROR.value, StripeErrorType.API_CONNECTION_ERROR.value}
)


def is_retryable(exc: BaseException) -> bool:
    """Return True when ``exc`` indicates a transient failure."""
    if isinstance(exc, (ApiConnectionError, TooManyRequests)):
        return True
    if isinstance(exc, RequestFailed):
        error_type = getattr(exc.error_type, "value", exc.error_type)
        return error_type in _RETRYABLE_402_TYPES
    return False


def default_retry_policy(number_of_retries: int) -> RetryPolicy:
    """Build the jittered exponential policy used when none is supplied."""
    return RetryPolicy(
        total=number_of_retries,
        base=_DEFAULT_BASE_BACKOFF,
        cap=_DEFAULT_MAX_BACKOFF,
        jitter=True,
    )


def _log_retry(exc: Exception, attempt: int) -> None:
    reason = type(exc).__name__
    inc_stripe_retry(reason)
    _log.info(
        "stripe.retry",
        extra={"extra": {"attempt": attempt + 1, "reason": reason}},
    )


async def handle(
    request: Callable[[], Awaitable[T]],
    *,
    number_of_retries: int,
    policy: RetryPolicy | None = None,
) -> T:
    """Run ``request`` and retry transient Stripe failures.

    Args:
        request: Zero-arg coroutine factory; called once per attempt.
        number_of_retries: Retries allowed after the first attempt.
        policy: Backoff policy; ``total`` is overridden by ``number_of_retries``.

    Returns:
        The decoded result of the first successful attempt.

    Raises:
        MaxNumberOfRetries: If every attempt failed with a retryable error.
        StripeBindingError: Any non-retryable error, unchanged.
    """
    base = policy or default_retry_policy(number_of_retries)
    effective = RetryPolicy(
        total=number_of_retries, base=base.base, cap=base.cap, jitter=base.jitter
    )
    try:
        return await retry_async(
            request, policy=effective, retry_on=is_retryable, on_retry=_log_retry
        )
    except Exception as exc:
        if is_retryable(exc):
            raise MaxNumberOfRetries(number_of_retries + 1) from exc
        raise


async def handle_idempotent(
    request: Callable[[IdempotencyKey], Awaitable[T]],
    *,
    number_of_retries: int,
    policy: RetryPolicy | None = None,
) -> T:
    """Like :func:`handle`, reusing one generated idempotency key on every attempt."""
    key = IdempotencyKey.generate()
    return await handle(
        lambda: request(key), number_of_retries=number_of_retries, policy=policy
    )
