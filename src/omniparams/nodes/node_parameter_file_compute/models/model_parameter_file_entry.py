# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Single parameter assignment read from a parameter file."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModelParameterFileEntry(BaseModel):
    """One ``name -> text`` assignment recovered from a parameter file.

    Attributes:
        name: Parameter name.
        text: Edit text in the form the value codec expects. Block lists are
            joined with ``,`` so array kinds decode them element by element.
        line_number: 1-based line of the ``name:`` line in the source file.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    name: str = Field(min_length=1, description="Parameter name.")
    text: str = Field(description="Edit text for the value codec.")
    line_number: int = Field(ge=1, description="1-based source line number.")


__all__ = ["ModelParameterFileEntry"]
