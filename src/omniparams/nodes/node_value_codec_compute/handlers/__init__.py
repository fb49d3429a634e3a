# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_value_codec_compute."""

from __future__ import annotations

from omniparams.nodes.node_value_codec_compute.handlers.exceptions import (
    ParameterCoercionError,
)
from omniparams.nodes.node_value_codec_compute.handlers.handler_parameter_rows import (
    build_parameter_rows,
)
from omniparams.nodes.node_value_codec_compute.handlers.handler_value_codec import (
    decode_for_display,
    encode_from_text,
    parameter_type_name,
)

__all__ = [
    "ParameterCoercionError",
    "build_parameter_rows",
    "decode_for_display",
    "encode_from_text",
    "parameter_type_name",
]
