# Copyright (c)
# SPDX-License-Identifier: MIT
"""Wire mappers (Adapters Layer).

Purpose:
    Pure JSON/form translation helpers shared by schemas and gateways:

    * stripe_datetime: epoch-seconds date-time codec.
    * created_input_codec: shape-dispatched ``created`` filter codec.
    * post_params: form-body flattening.
"""

from __future__ import annotations

from stripe_bindings.adapters.mappers.created_input_codec import (
    created_input_to_query_params,
    decode_created_input,
    encode_created_input,
)
from stripe_bindings.adapters.mappers.post_params import nested_post_params, to_post_params
from stripe_bindings.adapters.mappers.stripe_datetime import (
    StripeDateTime,
    parse_stripe_datetime,
    render_stripe_datetime,
    render_stripe_datetime_param,
)

__all__ = [
    "StripeDateTime",
    "created_input_to_query_params",
    "decode_created_input",
    "encode_created_input",
    "nested_post_params",
    "parse_stripe_datetime",
    "render_stripe_datetime",
    "render_stripe_datetime_param",
    "to_post_params",
]
