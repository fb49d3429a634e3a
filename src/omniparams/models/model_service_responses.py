# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Response payload models for the remote parameter services.

Only the fields this client reads are declared. Validation failures are
treated as protocol violations by the sync handlers.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from omniparams.models.model_parameter_value import ModelParameterValue


class ModelListNodesResponse(BaseModel):
    """Response of the node enumeration service."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    nodes: tuple[str, ...]


class ModelListParametersResult(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    names: tuple[str, ...]


class ModelListParametersResponse(BaseModel):
    """Response of ``<node>/list_parameters``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    result: ModelListParametersResult


class ModelGetParametersResponse(BaseModel):
    """Response of ``<node>/get_parameters``; positional with the request names."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    values: tuple[ModelParameterValue, ...]


__all__ = [
    "ModelGetParametersResponse",
    "ModelListNodesResponse",
    "ModelListParametersResponse",
    "ModelListParametersResult",
]
