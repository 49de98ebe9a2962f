# Copyright (c)
# SPDX-License-Identifier: MIT
"""Adapter Gateway: coupons.

Endpoints:
    * ``GET    /v1/coupons/{id}``
    * ``DELETE /v1/coupons/{id}``
    * ``GET    /v1/coupons``
"""

from __future__ import annotations

from stripe_bindings.adapters.gateways.base import build_list_params, path_segment
from stripe_bindings.adapters.schemas.stripe.coupons import Coupon, CouponList
from stripe_bindings.adapters.schemas.stripe.delete_response import DeleteResponse
from stripe_bindings.domain.entities.created_input import CreatedInput
from stripe_bindings.domain.value_objects.idempotency_key import IdempotencyKey
from stripe_bindings.infrastructure.external_apis.stripe.client import StripeClient


class CouponsGateway:
    def __init__(self, client: StripeClient) -> None:
        self._client = client

    async def get(self, coupon_id: str) -> Coupon:
        return await self._client.get(
            f"/v1/coupons/{path_segment(coupon_id)}", Coupon, op="coupons.get"
        )

    async def delete(
        self,
        coupon_id: str,
        *,
        idempotency_key: IdempotencyKey | None = None,
    ) -> DeleteResponse:
        """Delete a coupon; existing discounts created from it keep applying."""
        return await self._client.delete(
            f"/v1/coupons/{path_segment(coupon_id)}",
            idempotency_key=idempotency_key,
            op="coupons.delete",
        )

    async def list(
        self,
        *,
        created: CreatedInput | None = None,
        limit: int | None = None,
        starting_after: str | None = None,
        ending_before: str | None = None,
    ) -> CouponList:
        return await self._client.get(
            "/v1/coupons",
            CouponList,
            params=build_list_params(
                created=created,
                limit=limit,
                starting_after=starting_after,
                ending_before=ending_before,
            ),
            op="coupons.list",
        )
