# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared models for omniparams."""

from __future__ import annotations

from omniparams.models.model_parameter import ModelParameter
from omniparams.models.model_parameter_value import ModelParameterValue
from omniparams.models.model_service_bridge_config import ModelServiceBridgeConfig
from omniparams.models.model_service_responses import (
    ModelGetParametersResponse,
    ModelListNodesResponse,
    ModelListParametersResponse,
    ModelListParametersResult,
)

__all__ = [
    "ModelGetParametersResponse",
    "ModelListNodesResponse",
    "ModelListParametersResponse",
    "ModelListParametersResult",
    "ModelParameter",
    "ModelParameterValue",
    "ModelServiceBridgeConfig",
]
