# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelSyncResult: outcome of a single parameter sync operation."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniparams.enums.enum_sync_status import EnumSyncOperation, EnumSyncStatus


class ModelSyncResult(BaseModel):
    """Result of list_nodes, load_parameters or stage.

    The ``status`` field is the primary outcome discriminator. Handlers never
    raise; failures are reported here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    status: EnumSyncStatus = Field(
        ...,
        description="Outcome of the operation.",
    )
    operation: EnumSyncOperation = Field(
        ...,
        description="Operation that produced this result.",
    )
    node_name: str | None = Field(
        default=None,
        description="Node the operation targeted, if any.",
    )
    generation: int = Field(
        ...,
        description="Selection generation the operation ran under.",
    )
    parameter_name: str | None = Field(
        default=None,
        description="Parameter the operation targeted (stage only).",
    )
    status_message: str | None = Field(
        default=None,
        description="Human-readable status line for the operator.",
    )
    error_message: str | None = Field(
        default=None,
        description="Error details when status is not SUCCESS.",
    )

    @property
    def ok(self) -> bool:
        return self.status == EnumSyncStatus.SUCCESS


__all__ = ["ModelSyncResult"]
