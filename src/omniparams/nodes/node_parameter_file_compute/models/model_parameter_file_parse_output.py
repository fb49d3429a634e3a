# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Output model for parameter file parsing."""

from __future__ import annotations

from pydantic import BaseModel, Field

from omniparams.nodes.node_parameter_file_compute.models.model_parameter_file_entry import (
    ModelParameterFileEntry,
)


class ModelParameterFileParseOutput(BaseModel):
    """Result of parsing a parameter file.

    Attributes:
        entries: Assignments in file order. A name may repeat; later entries
            win when staged.
        header_node_name: Node name from the ``<node>:`` header line, or None
            when the file has no node header.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    entries: tuple[ModelParameterFileEntry, ...] = Field(
        description="Assignments in file order."
    )
    header_node_name: str | None = Field(
        default=None,
        description="Node name from the header line, if present.",
    )

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self.entries)


__all__ = ["ModelParameterFileParseOutput"]
