# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Named parameter model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from omniparams.models.model_parameter_value import ModelParameterValue


class ModelParameter(BaseModel):
    """A named, typed value owned by a node.

    Attributes:
        name: Unique key within a node's parameter set.
        value: The typed value.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1, description="Parameter name.")
    value: ModelParameterValue = Field(description="Typed parameter value.")

    def to_wire(self) -> dict[str, Any]:
        """Return the ``set_parameters`` request entry for this parameter."""
        return {"name": self.name, "value": self.value.to_wire()}


__all__ = ["ModelParameter"]
