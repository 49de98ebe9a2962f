# Copyright (c)
# SPDX-License-Identifier: MIT
"""Stripe transport client: async, instrumented, typed.

This transport is the single request executor behind every resource
gateway. It provides:

* Async HTTP (httpx) with per-request timeout and basic auth (secret key as
  username, empty password).
* ``Idempotency-Key``, ``Stripe-Account`` and ``Stripe-Version`` headers, and
  ``X-Request-ID`` propagation from the logging context.
* Deterministic mapping of responses to typed errors
  (400/401/402/403/404/429 decoded from the ``error`` object; 5xx and
  anything else mapped by status).
* Decoding of successful bodies into a pydantic model.
* Prometheus metrics per call.

Retrying is not done here; wrap calls in
:func:`stripe_bindings.infrastructure.resilience.stripe_handling.handle`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from stripe_bindings.adapters.schemas.stripe.delete_response import DeleteResponse
from stripe_bindings.adapters.schemas.stripe.errors import StripeErrorEnvelope
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
from stripe_bindings.infrastructure.external_apis.stripe.settings import StripeSettings
from stripe_bindings.infrastructure.logging.logger import get_json_logger, get_request_id
from stripe_bindings.infrastructure.observability.metrics_stripe import observe_stripe_request

M = TypeVar("M", bound=BaseModel)

_log = get_json_logger(__name__)

IDEMPOTENCY_KEY_HEADER: Final[str] = "Idempotency-Key"
STRIPE_ACCOUNT_HEADER: Final[str] = "Stripe-Account"
STRIPE_VERSION_HEADER: Final[str] = "Stripe-Version"

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "stripe-bindings/0.1",
}

_ERROR_BY_STATUS: Final[dict[int, type[StripeApiError]]] = {
    400: BadRequest,
    401: Unauthorized,
    402: RequestFailed,
    403: Unauthorized,
    404: NotFound,
    429: TooManyRequests,
}

_SERVER_ERROR_STATUSES: Final[frozenset[int]] = frozenset({500, 502, 503, 504})


class StripeClient:
    """Typed request executor for the Stripe REST API."""

    def __init__(
        self,
        settings: StripeSettings,
        *,
        http: httpx.AsyncClient | None = None,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Provider settings loaded from environment or DI.
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned by this instance.
            timeout_s: Optional per-request timeout override in seconds.
                When omitted, ``settings.timeout_s`` is used.
        """
        self._settings = settings
        self._base_url = settings.endpoint
        self._timeout = float(timeout_s if timeout_s is not None else settings.timeout_s)
        self._auth = httpx.BasicAuth(settings.api_key.get_secret_value(), "")

        self._owns_client = http is None
        self._client = http or httpx.AsyncClient(timeout=self._timeout)

    @property
    def settings(self) -> StripeSettings:
        return self._settings

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> StripeClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ---------------------------- Public API ----------------------------- #

    async def get(
        self,
        path: str,
        model: type[M],
        *,
        params: Mapping[str, str] | None = None,
        op: str = "get",
        stripe_account: str | None = None,
    ) -> M:
        """GET ``path`` and decode the body into ``model``.

        Args:
            path: Path below the endpoint, e.g. ``"/v1/events/evt_123"``.
            model: Pydantic model to decode the response into.
            params: Query-string parameters.
            op: Logical operation name used for metric labels.
            stripe_account: Connected account to act on behalf of.

        Returns:
            The decoded model instance.
        """
        return await self._request(
            "GET", path, model, params=params, op=op, stripe_account=stripe_account
        )

    async def post(
        self,
        path: str,
        model: type[M],
        *,
        data: Mapping[str, str] | None = None,
        idempotency_key: IdempotencyKey | None = None,
        op: str = "post",
        stripe_account: str | None = None,
    ) -> M:
        """POST form ``data`` to ``path`` and decode the body into ``model``."""
        _log.debug(
            "stripe.post_params",
            extra={"extra": {"path": path, "params": dict(data or {})}},
        )
        return await self._request(
            "POST",
            path,
            model,
            data=data,
            idempotency_key=idempotency_key,
            op=op,
            stripe_account=stripe_account,
        )

    async def delete(
        self,
        path: str,
        *,
        idempotency_key: IdempotencyKey | None = None,
        op: str = "delete",
        stripe_account: str | None = None,
    ) -> DeleteResponse:
        """DELETE ``path``; every Stripe DELETE returns ``{"id", "deleted"}``."""
        return await self._request(
            "DELETE",
            path,
            DeleteResponse,
            idempotency_key=idempotency_key,
            op=op,
            stripe_account=stripe_account,
        )

    # --------------------------- Internal helpers ------------------------- #

    def _headers(
        self,
        idempotency_key: IdempotencyKey | None,
        stripe_account: str | None,
    ) -> dict[str, str]:
        # Per request: httpx clients already carry their own Accept and User-Agent.
        headers = dict(_DEFAULT_HEADERS)
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id
        if self._settings.api_version:
            headers[STRIPE_VERSION_HEADER] = self._settings.api_version
        if stripe_account:
            headers[STRIPE_ACCOUNT_HEADER] = stripe_account
        if idempotency_key is not None:
            headers[IDEMPOTENCY_KEY_HEADER] = idempotency_key.key
        return headers

    async def _request(
        self,
        method: str,
        path: str,
        model: type[M],
        *,
        params: Mapping[str, str] | None = None,
        data: Mapping[str, str] | None = None,
        idempotency_key: IdempotencyKey | None = None,
        op: str,
        stripe_account: str | None = None,
    ) -> M:
        url = f"{self._base_url}{path}"
        headers = self._headers(idempotency_key, stripe_account)

        with observe_stripe_request(method=method, endpoint=op) as obs:
            try:
                response = await self._client.request(
                    method,
                    url,
                    params=dict(params) if params else None,
                    data=dict(data) if data is not None else None,
                    headers=headers,
                    auth=self._auth,
                    timeout=self._timeout,
                )
            except httpx.RequestError as exc:
                raise ApiConnectionError(str(exc), details={"url": url}) from exc

            obs.mark_status(response.status_code)
            _log.debug(
                "stripe.response",
                extra={"extra": {"method": method, "url": url, "status": response.status_code}},
            )
            return self._parse_response(response, model, url=url, post_params=data)

    @classmethod
    def _parse_response(
        cls,
        response: httpx.Response,
        model: type[M],
        *,
        url: str,
        post_params: Mapping[str, str] | None,
    ) -> M:
        """Decode a success body into ``model`` or raise the mapped error."""
        status = response.status_code

        if response.is_success:
            body = cls._json_body(response, url=url, post_params=post_params)
            try:
                return model.model_validate(body)
            except ValidationError as exc:
                raise InvalidJsonModelError(
                    status_code=status,
                    url=url,
                    post_params=post_params,
                    json_response=body,
                    errors=exc.errors(include_url=False, include_context=False),
                ) from exc

        error_cls = _ERROR_BY_STATUS.get(status)
        if error_cls is not None:
            body = cls._json_body(response, url=url, post_params=post_params)
            try:
                envelope = StripeErrorEnvelope.model_validate(body)
            except ValidationError as exc:
                raise InvalidJsonModelError(
                    status_code=status,
                    url=url,
                    post_params=post_params,
                    json_response=body,
                    errors=exc.errors(include_url=False, include_context=False),
                ) from exc
            err = envelope.error
            raise error_cls(
                err.type,
                error_code=err.code,
                message=err.message,
                param=err.param,
                http_status=status,
            )

        if status in _SERVER_ERROR_STATUSES:
            raise StripeServerError(status)
        raise UnhandledServerError(status)

    @staticmethod
    def _json_body(
        response: httpx.Response,
        *,
        url: str,
        post_params: Mapping[str, str] | None,
    ) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidJsonModelError(
                status_code=response.status_code,
                url=url,
                post_params=post_params,
                json_response=response.text,
                errors=[{"type": "json_invalid", "msg": str(exc)}],
            ) from exc
