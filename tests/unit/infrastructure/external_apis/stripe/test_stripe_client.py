from __future__ import annotations

import base64
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest
import respx
from prometheus_client import REGISTRY

from stripe_bindings.adapters.schemas.stripe.coupons import Coupon, CouponList
from stripe_bindings.adapters.schemas.stripe.delete_response import DeleteResponse
from stripe_bindings.domain.enums.stripe_error import StripeErrorType
from stripe_bindings.domain.exceptions.stripe_api import (
    ApiConnectionError,
    BadRequest,
    InvalidJsonModelError,
    NotFound,
    RequestFailed,
    StripeApiError,
    StripeServerError,
    TooManyRequests,
    Unauthorized,
    UnhandledServerError,
)
from stripe_bindings.domain.value_objects.idempotency_key import IdempotencyKey
from stripe_bindings.infrastructure.external_apis.stripe.client import StripeClient
from stripe_bindings.infrastructure.external_apis.stripe.settings import StripeSettings
from stripe_bindings.infrastructure.logging.logger import set_request_context

BASE = "https://api.stripe.com"

COUPON: dict[str, Any] = {
    "id": "25OFF",
    "object": "coupon",
    "amount_off": None,
    "created": 1577836800,
    "currency": None,
    "duration": "once",
    "duration_in_months": None,
    "livemode": False,
    "max_redemptions": None,
    "metadata": {},
    "percent_off": 25,
    "redeem_by": None,
    "times_redeemed": 0,
    "valid": True,
}


def _settings(**overrides: Any) -> StripeSettings:
    return StripeSettings(api_key="sk_test_123", **overrides)  # type: ignore[arg-type]


@pytest.mark.asyncio
@respx.mock
async def test_get_decodes_model_and_sends_auth_headers() -> None:
    set_request_context(request_id="req-abc")
    try:
        async with httpx.AsyncClient() as http:
            client = StripeClient(_settings(api_version="2017-01-27"), http=http)
            route = respx.get(f"{BASE}/v1/coupons/25OFF").mock(
                return_value=httpx.Response(200, json=COUPON)
            )

            coupon = await client.get("/v1/coupons/25OFF", Coupon, op="coupons.get")

            assert isinstance(coupon, Coupon)
            assert coupon.id == "25OFF"
            request = route.calls.last.request
            expected = base64.b64encode(b"sk_test_123:").decode()
            assert request.headers["Authorization"] == f"Basic {expected}"
            assert request.headers["Stripe-Version"] == "2017-01-27"
            assert request.headers["X-Request-ID"] == "req-abc"
            assert request.headers["Accept"] == "application/json"
            assert request.headers["User-Agent"].startswith("stripe-bindings/")
            assert "Idempotency-Key" not in request.headers
            assert "Stripe-Account" not in request.headers
    finally:
        set_request_context(request_id=None)


@pytest.mark.asyncio
@respx.mock
async def test_get_sends_query_params() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        route = respx.get(f"{BASE}/v1/coupons").mock(
            return_value=httpx.Response(
                200, json={"object": "list", "url": "/v1/coupons", "has_more": False, "data": []}
            )
        )
        await client.get("/v1/coupons", CouponList, params={"limit": "3", "created[gt]": "1"})

        params = route.calls.last.request.url.params
        assert params["limit"] == "3"
        assert params["created[gt]"] == "1"


@pytest.mark.asyncio
@respx.mock
async def test_post_sends_form_body_and_idempotency_key() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        route = respx.post(f"{BASE}/v1/coupons").mock(return_value=httpx.Response(200, json=COUPON))

        await client.post(
            "/v1/coupons",
            Coupon,
            data={"percent_off": "25", "metadata[campaign]": "spring"},
            idempotency_key=IdempotencyKey("key-1"),
            stripe_account="acct_123",
        )

        request = route.calls.last.request
        assert request.headers["Idempotency-Key"] == "key-1"
        assert request.headers["Stripe-Account"] == "acct_123"
        assert request.headers["Content-Type"].startswith("application/x-www-form-urlencoded")
        assert parse_qs(request.content.decode()) == {
            "percent_off": ["25"],
            "metadata[campaign]": ["spring"],
        }


@pytest.mark.asyncio
@respx.mock
async def test_delete_returns_delete_response() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.delete(f"{BASE}/v1/coupons/25OFF").mock(
            return_value=httpx.Response(
                200, json={"id": "25OFF", "object": "coupon", "deleted": True}
            )
        )

        result = await client.delete("/v1/coupons/25OFF")

        assert result == DeleteResponse(id="25OFF", deleted=True)


@pytest.mark.parametrize(
    ("status", "error_cls"),
    [
        (400, BadRequest),
        (401, Unauthorized),
        (402, RequestFailed),
        (403, Unauthorized),
        (404, NotFound),
        (429, TooManyRequests),
    ],
)
@pytest.mark.asyncio
@respx.mock
async def test_handled_statuses_decode_error_object(
    status: int, error_cls: type[StripeApiError]
) -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(
            return_value=httpx.Response(
                status,
                json={
                    "error": {
                        "type": "invalid_request_error",
                        "code": "resource_missing",
                        "message": "No such coupon: x",
                        "param": "id",
                    }
                },
            )
        )

        with pytest.raises(error_cls) as excinfo:
            await client.get("/v1/coupons/x", Coupon)

        err = excinfo.value
        assert err.http_status == status
        assert err.details["status"] == status
        assert err.error_type is StripeErrorType.INVALID_REQUEST_ERROR
        assert err.error_code == "resource_missing"
        assert err.message == "No such coupon: x"
        assert err.param == "id"


@pytest.mark.parametrize("status", [500, 502, 503, 504])
@pytest.mark.asyncio
@respx.mock
async def test_server_statuses_map_to_server_error(status: int) -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(return_value=httpx.Response(status, text="oops"))

        with pytest.raises(StripeServerError) as excinfo:
            await client.get("/v1/coupons/x", Coupon)

        assert excinfo.value.status_code == status


@pytest.mark.parametrize("status", [409, 418, 501])
@pytest.mark.asyncio
@respx.mock
async def test_other_statuses_map_to_unhandled(status: int) -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(return_value=httpx.Response(status, json={}))

        with pytest.raises(UnhandledServerError) as excinfo:
            await client.get("/v1/coupons/x", Coupon)

        assert excinfo.value.status_code == status


@pytest.mark.asyncio
@respx.mock
async def test_transport_failure_maps_to_connection_error() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(side_effect=httpx.ConnectError("boom"))

        with pytest.raises(ApiConnectionError) as excinfo:
            await client.get("/v1/coupons/x", Coupon)

        assert excinfo.value.details["url"] == f"{BASE}/v1/coupons/x"


@pytest.mark.asyncio
@respx.mock
async def test_success_body_not_matching_model_is_invalid_json_model() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.post(f"{BASE}/v1/coupons").mock(
            return_value=httpx.Response(200, json={"id": "25OFF", "object": "coupon"})
        )

        with pytest.raises(InvalidJsonModelError) as excinfo:
            await client.post("/v1/coupons", Coupon, data={"percent_off": "25"})

        err = excinfo.value
        assert err.status_code == 200
        assert err.url == f"{BASE}/v1/coupons"
        assert err.post_params == {"percent_off": "25"}
        assert err.json_response == {"id": "25OFF", "object": "coupon"}
        assert err.errors


@pytest.mark.asyncio
@respx.mock
async def test_success_body_that_is_not_json_is_invalid_json_model() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(return_value=httpx.Response(200, text="<html>"))

        with pytest.raises(InvalidJsonModelError) as excinfo:
            await client.get("/v1/coupons/x", Coupon)

        assert excinfo.value.json_response == "<html>"


@pytest.mark.asyncio
@respx.mock
async def test_error_status_with_malformed_error_body_is_invalid_json_model() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(
            return_value=httpx.Response(404, json={"unexpected": True})
        )

        with pytest.raises(InvalidJsonModelError) as excinfo:
            await client.get("/v1/coupons/x", Coupon)

        assert excinfo.value.status_code == 404


@pytest.mark.asyncio
@respx.mock
async def test_base_url_trailing_slash_is_ignored() -> None:
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(base_url="http://stripe.local/"), http=http)
        route = respx.get("http://stripe.local/v1/coupons/25OFF").mock(
            return_value=httpx.Response(200, json=COUPON)
        )

        await client.get("/v1/coupons/25OFF", Coupon)

        assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_calls_are_counted_by_status() -> None:
    labels = {"method": "GET", "endpoint": "coupons.metrics", "status_code": "404"}
    before = REGISTRY.get_sample_value("stripe_bindings_http_status_total", labels) or 0.0
    async with httpx.AsyncClient() as http:
        client = StripeClient(_settings(), http=http)
        respx.get(f"{BASE}/v1/coupons/x").mock(
            return_value=httpx.Response(404, json={"error": {"type": "invalid_request_error"}})
        )

        with pytest.raises(NotFound):
            await client.get("/v1/coupons/x", Coupon, op="coupons.metrics")

    after = REGISTRY.get_sample_value("stripe_bindings_http_status_total", labels)
    assert after == before + 1
    errors = REGISTRY.get_sample_value(
        "stripe_bindings_errors_total",
        {"method": "GET", "endpoint": "coupons.metrics", "reason": "NotFound"},
    )
    assert errors is not None and errors >= 1


@pytest.mark.asyncio
async def test_owned_client_is_closed_on_exit() -> None:
    async with StripeClient(_settings()) as client:
        inner = client._client
        assert not inner.is_closed
    assert inner.is_closed


@pytest.mark.asyncio
async def test_injected_client_is_left_open() -> None:
    async with httpx.AsyncClient() as http:
        async with StripeClient(_settings(), http=http):
            pass
        assert not http.is_closed


@pytest.mark.asyncio
@respx.mock
async def test_injected_client_default_headers_are_overridden_per_request() -> None:
    async with httpx.AsyncClient(headers={"Accept": "text/html"}) as http:
        client = StripeClient(_settings(), http=http)
        route = respx.get(f"{BASE}/v1/coupons/25OFF").mock(
            return_value=httpx.Response(200, json=COUPON)
        )

        await client.get("/v1/coupons/25OFF", Coupon)

        assert route.calls.last.request.headers["Accept"] == "application/json"
        assert http.headers["Accept"] == "text/html"


@pytest.mark.asyncio
@respx.mock
async def test_owned_client_sends_json_accept_header() -> None:
    async with StripeClient(_settings()) as client:
        route = respx.get(f"{BASE}/v1/coupons/25OFF").mock(
            return_value=httpx.Response(200, json=COUPON)
        )

        await client.get("/v1/coupons/25OFF", Coupon)

        assert route.calls.last.request.headers["Accept"] == "application/json"
