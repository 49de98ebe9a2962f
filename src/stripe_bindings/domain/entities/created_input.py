# Copyright (c)
# SPDX-License-Identifier: MIT
"""CreatedInput Entity.

Purpose:
    Filter value accepted by Stripe list endpoints for date-typed parameters
    such as ``created``. Either an exact instant or a range with optional
    exclusive/inclusive bounds on each side.

Design:
    * Two frozen variants; ``CreatedInput`` is their union.
    * Naive datetimes are interpreted as UTC.
    * Values are truncated to whole seconds, the resolution Stripe stores.
    * Bound consistency (e.g. ``gt < lt``) is not enforced; Stripe decides.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from .base import BaseEntity


def _as_utc(value: datetime | None) -> datetime | None:
    # Stripe filters resolve to whole epoch seconds.
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.replace(microsecond=0)


@dataclass(frozen=True, slots=True)
class Timestamp(BaseEntity):
    """Exact point in time.

    Args:
        value: The instant to match (timezone-aware; naive means UTC).
    """

    value: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _as_utc(self.value))


@dataclass(frozen=True, slots=True)
class Range(BaseEntity):
    """Date range with independently optional bounds.

    Args:
        gt: Exclusive lower bound.
        gte: Inclusive lower bound.
        lt: Exclusive upper bound.
        lte: Inclusive upper bound.
    """

    gt: datetime | None = None
    gte: datetime | None = None
    lt: datetime | None = None
    lte: datetime | None = None

    def __post_init__(self) -> None:
        for name in ("gt", "gte", "lt", "lte"):
            object.__setattr__(self, name, _as_utc(getattr(self, name)))

    @classmethod
    def unbounded(cls) -> Range:
        """Return a range with no bounds set."""
        return cls()

    @property
    def is_unbounded(self) -> bool:
        return self.gt is None and self.gte is None and self.lt is None and self.lte is None


type CreatedInput = Timestamp | Range

__all__ = ["CreatedInput", "Range", "Timestamp"]
