# Copyright (c)
# SPDX-License-Identifier: MIT
"""Adapter Gateway: application fee refunds.

Endpoints:
    * ``POST /v1/application_fees/{fee}/refunds``
    * ``GET  /v1/application_fees/{fee}/refunds/{refund}``
    * ``GET  /v1/application_fees/{fee}/refunds``
"""

from __future__ import annotations

from stripe_bindings.adapters.gateways.base import build_list_params, path_segment
from stripe_bindings.adapters.schemas.stripe.application_fee_refunds import (
    ApplicationFeeRefund,
    ApplicationFeeRefundInput,
    ApplicationFeeRefundList,
)
from stripe_bindings.domain.value_objects.idempotency_key import IdempotencyKey
from stripe_bindings.infrastructure.external_apis.stripe.client import StripeClient


class ApplicationFeeRefundsGateway:
    """Create, fetch and list refunds of an application fee."""

    def __init__(self, client: StripeClient) -> None:
        self._client = client

    @staticmethod
    def _refunds_path(fee_id: str) -> str:
        return f"/v1/application_fees/{path_segment(fee_id)}/refunds"

    async def create(
        self,
        refund_input: ApplicationFeeRefundInput,
        *,
        idempotency_key: IdempotencyKey | None = None,
    ) -> ApplicationFeeRefund:
        """Refund an application fee, fully or partially.

        Args:
            refund_input: Fee id plus optional amount and metadata.
            idempotency_key: Key protecting against duplicate refunds on retry.

        Returns:
            The created refund.
        """
        return await self._client.post(
            self._refunds_path(refund_input.id),
            ApplicationFeeRefund,
            data=refund_input.to_post_params(),
            idempotency_key=idempotency_key,
            op="application_fee_refunds.create",
        )

    async def get(self, fee_id: str, refund_id: str) -> ApplicationFeeRefund:
        return await self._client.get(
            f"{self._refunds_path(fee_id)}/{path_segment(refund_id)}",
            ApplicationFeeRefund,
            op="application_fee_refunds.get",
        )

    async def list(
        self,
        fee_id: str,
        *,
        limit: int | None = None,
        starting_after: str | None = None,
        ending_before: str | None = None,
    ) -> ApplicationFeeRefundList:
        return await self._client.get(
            self._refunds_path(fee_id),
            ApplicationFeeRefundList,
            params=build_list_params(
                limit=limit, starting_after=starting_after, ending_before=ending_before
            ),
            op="application_fee_refunds.list",
        )
