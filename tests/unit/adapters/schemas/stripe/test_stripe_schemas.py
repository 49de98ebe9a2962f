from __future__ import annotations

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

import pytest
from pydantic import ValidationError

from stripe_bindings.adapters.schemas.stripe import (
    AliPayAccount,
    ApplicationFeeRefund,
    ApplicationFeeRefundInput,
    ApplicationFeeRefundList,
    Coupon,
    CouponList,
    DeleteResponse,
    Discount,
    Event,
    EventList,
    StripeErrorEnvelope,
    decode_stripe_object,
)
from stripe_bindings.domain.enums.coupon_duration import CouponDuration
from stripe_bindings.domain.enums.event_type import EventType
from stripe_bindings.domain.enums.stripe_error import StripeErrorType
from stripe_bindings.domain.exceptions.decoding import FieldTypeError, ShapeMismatch

T2020 = datetime(2020, 1, 1, tzinfo=UTC)


def _fee_refund(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "fr_123",
        "object": "fee_refund",
        "amount": 100,
        "balance_transaction": None,
        "created": 1577836800,
        "currency": "usd",
        "fee": "fee_123",
        "metadata": {},
    }
    payload.update(overrides)
    return payload


def _coupon(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "25OFF",
        "object": "coupon",
        "amount_off": None,
        "created": 1577836800,
        "currency": None,
        "duration": "repeating",
        "duration_in_months": 3,
        "livemode": False,
        "max_redemptions": None,
        "metadata": {"campaign": "spring"},
        "percent_off": 25,
        "redeem_by": None,
        "times_redeemed": 0,
        "valid": True,
    }
    payload.update(overrides)
    return payload


def _event(data_object: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": "evt_123",
        "object": "event",
        "api_version": "2017-01-27",
        "created": 1577836800,
        "data": {"object": data_object},
        "livemode": False,
        "pending_webhooks": 1,
        "request": "req_123",
        "type": "coupon.created",
    }
    payload.update(overrides)
    return payload


def test_fee_refund_decodes_sample_payload() -> None:
    refund = ApplicationFeeRefund.model_validate(_fee_refund())
    assert refund.id == "fr_123"
    assert refund.amount == Decimal(100)
    assert refund.created == T2020
    assert refund.currency == "usd"
    assert refund.balance_transaction is None
    assert refund.object_ == "fee_refund"


def test_fee_refund_wire_form_uses_object_alias_and_epoch_seconds() -> None:
    wire = ApplicationFeeRefund.model_validate(_fee_refund()).to_wire()
    assert wire["object"] == "fee_refund"
    assert wire["created"] == 1577836800
    assert wire["amount"] == 100
    assert "object_" not in wire


def test_fee_refund_rejects_other_object_tag() -> None:
    with pytest.raises(ValidationError):
        ApplicationFeeRefund.model_validate(_fee_refund(object="coupon"))


def test_missing_optional_fields_mean_unset() -> None:
    payload = _fee_refund()
    del payload["metadata"]
    del payload["balance_transaction"]
    refund = ApplicationFeeRefund.model_validate(payload)
    assert refund.metadata is None
    assert refund.balance_transaction is None


def test_currency_is_lower_cased() -> None:
    assert ApplicationFeeRefund.model_validate(_fee_refund(currency="EUR")).currency == "eur"


def test_unknown_fields_are_ignored() -> None:
    refund = ApplicationFeeRefund.model_validate(_fee_refund(brand_new_field=True))
    assert not hasattr(refund, "brand_new_field")


def test_models_are_frozen() -> None:
    refund = ApplicationFeeRefund.model_validate(_fee_refund())
    with pytest.raises(ValidationError):
        refund.amount = Decimal(1)  # type: ignore[misc]


def test_refund_input_post_params() -> None:
    refund_input = ApplicationFeeRefundInput(
        id="fee_123", amount=Decimal(50), metadata={"reason": "duplicate"}
    )
    assert refund_input.to_post_params() == {"amount": "50", "metadata[reason]": "duplicate"}


def test_refund_input_full_refund_sends_no_amount() -> None:
    assert ApplicationFeeRefundInput(id="fee_123").to_post_params() == {}


def test_coupon_decodes_sample_payload() -> None:
    coupon = Coupon.model_validate(_coupon())
    assert coupon.duration is CouponDuration.REPEATING
    assert coupon.percent_off == Decimal(25)
    assert coupon.redeem_by is None
    assert coupon.metadata == {"campaign": "spring"}

    wire = coupon.to_wire()
    assert wire["duration"] == "repeating"
    assert wire["percent_off"] == 25
    assert wire["object"] == "coupon"


def test_coupon_rejects_unknown_duration() -> None:
    with pytest.raises(ValidationError):
        Coupon.model_validate(_coupon(duration="sometimes"))


def test_discount_embeds_coupon() -> None:
    discount = Discount.model_validate(
        {
            "object": "discount",
            "coupon": _coupon(),
            "customer": "cus_123",
            "end": None,
            "start": 1577836800,
            "subscription": None,
        }
    )
    assert discount.coupon.id == "25OFF"
    assert discount.start == T2020
    assert discount.end is None


def test_alipay_account_decodes_sample_payload() -> None:
    account = AliPayAccount.model_validate(
        {
            "id": "aliacc_123",
            "object": "alipay_account",
            "created": 1577836800,
            "customer": "cus_123",
            "fingerprint": None,
            "livemode": False,
            "metadata": {},
            "payment_amount": 1000,
            "payment_currency": "usd",
            "reusable": False,
            "used": False,
            "username": "test@example.com",
        }
    )
    assert account.payment_amount == Decimal(1000)
    assert account.fingerprint is None


def test_list_envelope_decodes_items_and_cursor() -> None:
    page = ApplicationFeeRefundList.model_validate(
        {
            "object": "list",
            "url": "/v1/application_fees/fee_123/refunds",
            "has_more": True,
            "data": [_fee_refund(id="fr_1"), _fee_refund(id="fr_2")],
        }
    )
    assert [r.id for r in page.data] == ["fr_1", "fr_2"]
    assert page.has_more
    assert page.total_count is None
    assert page.last_id == "fr_2"


def test_empty_list_has_no_cursor() -> None:
    page = CouponList.model_validate(
        {"object": "list", "url": "/v1/coupons", "has_more": False, "data": []}
    )
    assert page.last_id is None


def test_event_with_known_type_decodes_to_enum_and_resource() -> None:
    event = Event.model_validate(_event(_coupon()))
    assert event.type is EventType.COUPON_CREATED
    assert event.created == T2020
    resource = event.data.resource()
    assert isinstance(resource, Coupon)
    assert resource.id == "25OFF"


def test_event_with_unknown_type_keeps_raw_name() -> None:
    event = Event.model_validate(
        _event({"object": "issuing.card", "id": "ic_1"}, type="issuing_card.created")
    )
    assert event.type == "issuing_card.created"
    assert not isinstance(event.type, EventType)
    assert event.data.resource() == {"object": "issuing.card", "id": "ic_1"}


def test_event_previous_attributes_and_request_object() -> None:
    payload = _event(
        _coupon(), type="coupon.updated", request={"id": "req_1", "idempotency_key": None}
    )
    payload["data"]["previous_attributes"] = {"metadata": {}}
    event = Event.model_validate(payload)
    assert event.type is EventType.COUPON_UPDATED
    assert event.data.previous_attributes == {"metadata": {}}
    assert event.request == {"id": "req_1", "idempotency_key": None}


def test_event_list_decodes() -> None:
    page = EventList.model_validate(
        {
            "object": "list",
            "url": "/v1/events",
            "has_more": False,
            "data": [_event(_fee_refund(), type="application_fee.refund.updated")],
        }
    )
    assert page.data[0].type is EventType.APPLICATION_FEE_REFUND_UPDATED
    assert isinstance(page.data[0].data.resource(), ApplicationFeeRefund)


def test_decode_stripe_object_dispatches_on_tag() -> None:
    assert isinstance(decode_stripe_object(_fee_refund()), ApplicationFeeRefund)
    assert isinstance(decode_stripe_object(_coupon()), Coupon)


def test_decode_stripe_object_rejects_non_objects() -> None:
    with pytest.raises(ShapeMismatch):
        decode_stripe_object(["not", "an", "object"])


def test_decode_stripe_object_requires_tag() -> None:
    with pytest.raises(FieldTypeError) as excinfo:
        decode_stripe_object({"id": "x"})
    assert excinfo.value.path == "object"


def test_delete_response() -> None:
    assert DeleteResponse.model_validate({"id": "25OFF", "object": "coupon", "deleted": True}) == (
        DeleteResponse(id="25OFF", deleted=True)
    )


def test_error_envelope_keeps_unknown_types() -> None:
    known = StripeErrorEnvelope.model_validate(
        {"error": {"type": "card_error", "code": "card_declined", "message": "Declined"}}
    )
    assert known.error.type is StripeErrorType.CARD_ERROR
    assert known.error.param is None

    unknown = StripeErrorEnvelope.model_validate({"error": {"type": "idempotency_error"}})
    assert unknown.error.type == "idempotency_error"


def test_coupon_amount_off_is_decimal() -> None:
    coupon = Coupon.model_validate(_coupon(amount_off=500, currency="usd", percent_off=None))
    assert coupon.amount_off == Decimal(500)
    assert isinstance(coupon.amount_off, Decimal)
    assert coupon.to_wire()["amount_off"] == 500
