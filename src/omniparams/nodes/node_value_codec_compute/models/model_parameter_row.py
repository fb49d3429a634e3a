# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Display row for one parameter of the selected node."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelParameterRow(BaseModel):
    """Name, type and display text of a parameter, plus any staged edit.

    Attributes:
        name: Parameter name.
        type_name: Lower-case type name (``double``, ``string_array``...).
        value: Current value rendered as edit text.
        staged: Staged edit rendered as edit text; None when nothing is
            staged for this parameter.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1)
    type_name: str = Field(...)
    value: str = Field(...)
    staged: str | None = Field(default=None)


__all__ = ["ModelParameterRow"]
