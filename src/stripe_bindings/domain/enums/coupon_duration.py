# Copyright (c)
# SPDX-License-Identifier: MIT
"""Coupon duration enum.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class CouponDuration(str, Enum):
    """How long a discount created from a coupon stays in effect."""

    FOREVER = "forever"
    ONCE = "once"
    REPEATING = "repeating"
