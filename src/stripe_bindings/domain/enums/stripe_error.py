# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe error enums.

Purpose:
    Error ``type`` and ``code`` literals returned inside the ``error`` object of
    a failed Stripe response (https://stripe.com/docs/api#errors).

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class StripeErrorType(str, Enum):
    """Broad category of a Stripe API error."""

    API_CONNECTION_ERROR = "api_connection_error"
    API_ERROR = "api_error"
    AUTHENTICATION_ERROR = "authentication_error"
    CARD_ERROR = "card_error"
    INVALID_REQUEST_ERROR = "invalid_request_error"
    RATE_LIMIT_ERROR = "rate_limit_error"


class StripeErrorCode(str, Enum):
    """Short code attached to card errors."""

    INVALID_NUMBER = "invalid_number"
    INVALID_EXPIRY_MONTH = "invalid_expiry_month"
    INVALID_EXPIRY_YEAR = "invalid_expiry_year"
    INVALID_CVC = "invalid_cvc"
    INCORRECT_NUMBER = "incorrect_number"
    EXPIRED_CARD = "expired_card"
    INCORRECT_CVC = "incorrect_cvc"
    INCORRECT_ZIP = "incorrect_zip"
    CARD_DECLINED = "card_declined"
    MISSING = "missing"
    PROCESSING_ERROR = "processing_error"
