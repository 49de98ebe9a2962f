# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe client Prometheus metrics.

Exports
-------
Collectors (names are part of the public contract):

* ``stripe_bindings_request_latency_seconds`` (Histogram)
* ``stripe_bindings_http_status_total`` (Counter)
* ``stripe_bindings_errors_total`` (Counter)
* ``stripe_bindings_retries_total`` (Counter)

Helper:

* :func:`observe_stripe_request` – context manager for one outbound call.

All collectors are created against the *current* default registry
(:data:`prometheus_client.REGISTRY`). If a collector with the same name is
already registered, the existing instance is reused instead of registering a
duplicate, so module re-imports in tests are safe.
"""

from __future__ import annotations

from collections.abc import Generator, Sequence
from contextlib import contextmanager, suppress
from dataclasses import dataclass, field
from time import perf_counter

import prometheus_client as prom
from prometheus_client import Counter, Histogram
from prometheus_client.registry import CollectorRegistry


def _get_or_create_histogram(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Histogram:
    """Return a histogram bound to the current default registry.

    Args:
        name: Metric name.
        doc: Human-readable metric description.
        labelnames: Optional iterable of label names.

    Returns:
        A :class:`Histogram` bound to the current :data:`prom.REGISTRY`.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})  # internal but stable
    existing = mapping.get(name)
    if isinstance(existing, Histogram):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Histogram(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            again = getattr(registry, "_names_to_collectors", {}).get(name)
            if isinstance(again, Histogram):
                return again
        raise


def _get_or_create_counter(
    name: str,
    doc: str,
    labelnames: Sequence[str] | None = None,
) -> Counter:
    """Return a counter bound to the current default registry.

    Mirrors :func:`_get_or_create_histogram` for :class:`Counter` collectors.
    Counter names are registered without the ``_total`` suffix, so lookups
    try both forms.
    """
    registry: CollectorRegistry = prom.REGISTRY
    mapping = getattr(registry, "_names_to_collectors", {})
    existing = mapping.get(name) or mapping.get(name.removesuffix("_total"))
    if isinstance(existing, Counter):
        return existing

    labels = tuple(labelnames) if labelnames is not None else ()
    try:
        return Counter(name, doc, labels, registry=registry)
    except ValueError as exc:
        if "Duplicated timeseries" in str(exc):
            mapping = getattr(registry, "_names_to_collectors", {})
            again = mapping.get(name) or mapping.get(name.removesuffix("_total"))
            if isinstance(again, Counter):
                return again
        raise


stripe_request_latency_seconds: Histogram = _get_or_create_histogram(
    "stripe_bindings_request_latency_seconds",
    "Latency of outbound Stripe API calls (seconds).",
    labelnames=("method", "endpoint", "outcome"),
)

stripe_http_status_total: Counter = _get_or_create_counter(
    "stripe_bindings_http_status_total",
    "HTTP status codes returned by the Stripe API.",
    labelnames=("method", "endpoint", "status_code"),
)

stripe_errors_total: Counter = _get_or_create_counter(
    "stripe_bindings_errors_total",
    "Errors raised while calling the Stripe API.",
    labelnames=("method", "endpoint", "reason"),
)

stripe_retries_total: Counter = _get_or_create_counter(
    "stripe_bindings_retries_total",
    "Retries attempted by handle()/handle_idempotent().",
    labelnames=("reason",),
)


@dataclass
class StripeRequestObservation:
    """State captured while observing one Stripe call.

    Attributes:
        method: HTTP method (for labelling).
        endpoint: Logical endpoint name (for labelling).
        start: Monotonic start time in seconds.
        outcome: ``"success"`` or ``"error"``.
        error_reason: Short, machine-readable error reason if any.
    """

    method: str
    endpoint: str
    start: float = field(default_factory=perf_counter)
    outcome: str = "success"
    error_reason: str | None = None

    def mark_status(self, status_code: int) -> None:
        with suppress(Exception):
            stripe_http_status_total.labels(
                method=self.method, endpoint=self.endpoint, status_code=str(status_code)
            ).inc()

    def mark_error(self, reason: str) -> None:
        self.outcome = "error"
        self.error_reason = reason


@contextmanager
def observe_stripe_request(
    *,
    method: str,
    endpoint: str,
) -> Generator[StripeRequestObservation, None, None]:
    """Observe a single Stripe request.

    Records a latency sample and, when the block raises or
    :meth:`StripeRequestObservation.mark_error` is called, one error
    increment labelled with the reason (the exception class name by default).

    Args:
        method: HTTP method, e.g. ``"GET"``.
        endpoint: Logical endpoint name, e.g. ``"events.list"``.

    Yields:
        A mutable :class:`StripeRequestObservation`.
    """
    obs = StripeRequestObservation(method=method, endpoint=endpoint)
    try:
        yield obs
    except Exception as exc:
        if obs.error_reason is None:
            obs.mark_error(type(exc).__name__)
        raise
    finally:
        elapsed = perf_counter() - obs.start
        with suppress(Exception):
            stripe_request_latency_seconds.labels(
                method=obs.method, endpoint=obs.endpoint, outcome=obs.outcome
            ).observe(elapsed)
            if obs.error_reason is not None:
                stripe_errors_total.labels(
                    method=obs.method, endpoint=obs.endpoint, reason=obs.error_reason
                ).inc()


def inc_stripe_retry(reason: str) -> None:
    """Increment the retry counter for ``reason``."""
    with suppress(Exception):
        stripe_retries_total.labels(reason=reason).inc()
