# Copyright (c)
# SPDX-License-Identifier: MIT
"""Event type enum.

Purpose:
    Names of webhook/event types this binding knows about. The list is
    partial; event models keep unknown names as plain strings.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    """Known Stripe event names."""

    ACCOUNT_UPDATED = "account.updated"
    ACCOUNT_APPLICATION_DEAUTHORIZED = "account.application.deauthorized"
    ACCOUNT_EXTERNAL_ACCOUNT_CREATED = "account.external_account.created"
    ACCOUNT_EXTERNAL_ACCOUNT_DELETED = "account.external_account.deleted"
    ACCOUNT_EXTERNAL_ACCOUNT_UPDATED = "account.external_account.updated"
    APPLICATION_FEE_CREATED = "application_fee.created"
    APPLICATION_FEE_REFUNDED = "application_fee.refunded"
    APPLICATION_FEE_REFUND_UPDATED = "application_fee.refund.updated"
    BALANCE_AVAILABLE = "balance.available"
    CHARGE_CAPTURED = "charge.captured"
    CHARGE_FAILED = "charge.failed"
    CHARGE_REFUNDED = "charge.refunded"
    CHARGE_SUCCEEDED = "charge.succeeded"
    CHARGE_UPDATED = "charge.updated"
    CHARGE_DISPUTE_CLOSED = "charge.dispute.closed"
    CHARGE_DISPUTE_CREATED = "charge.dispute.created"
    CHARGE_DISPUTE_FUNDS_REINSTATED = "charge.dispute.funds_reinstated"
    CHARGE_DISPUTE_FUNDS_WITHDRAWN = "charge.dispute.funds_withdrawn"
    CHARGE_DISPUTE_UPDATED = "charge.dispute.updated"
    COUPON_CREATED = "coupon.created"
    COUPON_DELETED = "coupon.deleted"
    COUPON_UPDATED = "coupon.updated"
    CUSTOMER_CREATED = "customer.created"
    CUSTOMER_DELETED = "customer.deleted"
    CUSTOMER_UPDATED = "customer.updated"
    CUSTOMER_DISCOUNT_CREATED = "customer.discount.created"
    CUSTOMER_DISCOUNT_DELETED = "customer.discount.deleted"
    CUSTOMER_DISCOUNT_UPDATED = "customer.discount.updated"
    CUSTOMER_SOURCE_CREATED = "customer.source.created"
    CUSTOMER_SOURCE_DELETED = "customer.source.deleted"
    CUSTOMER_SOURCE_UPDATED = "customer.source.updated"
    CUSTOMER_SUBSCRIPTION_CREATED = "customer.subscription.created"
    CUSTOMER_SUBSCRIPTION_DELETED = "customer.subscription.deleted"
    CUSTOMER_SUBSCRIPTION_TRIAL_WILL_END = "customer.subscription.trial_will_end"
    CUSTOMER_SUBSCRIPTION_UPDATED = "customer.subscription.updated"
    INVOICE_CREATED = "invoice.created"
    INVOICE_PAYMENT_FAILED = "invoice.payment_failed"
    INVOICE_PAYMENT_SUCCEEDED = "invoice.payment_succeeded"
    INVOICE_UPDATED = "invoice.updated"
    INVOICEITEM_CREATED = "invoiceitem.created"
    INVOICEITEM_DELETED = "invoiceitem.deleted"
    INVOICEITEM_UPDATED = "invoiceitem.updated"
    PLAN_CREATED = "plan.created"
    PLAN_DELETED = "plan.deleted"
    PLAN_UPDATED = "plan.updated"
    PRODUCT_CREATED = "product.created"
    PRODUCT_DELETED = "product.deleted"
    PRODUCT_UPDATED = "product.updated"
    TRANSFER_CREATED = "transfer.created"
    TRANSFER_FAILED = "transfer.failed"
    TRANSFER_PAID = "transfer.paid"
    TRANSFER_REVERSED = "transfer.reversed"
    TRANSFER_UPDATED = "transfer.updated"
    PING = "ping"
