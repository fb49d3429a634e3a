# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelCommitResult: write-then-reread outcome of a commit."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniparams.enums.enum_sync_status import EnumSyncStatus
from omniparams.models.model_parameter import ModelParameter
from omniparams.nodes.node_parameter_sync_effect.models.model_sync_result import (
    ModelSyncResult,
)


class ModelCommitResult(BaseModel):
    """Result of transmitting staged edits and re-reading the node.

    A commit is a write followed by a mandatory refresh. The remote service
    gives no per-parameter acknowledgement, so ``sent`` and ``parameters``
    may legitimately differ (e.g. the node rejected or clamped a value).
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    status: EnumSyncStatus = Field(
        ...,
        description="Outcome of the write: SUCCESS, FAILED, STALE or NO_NODE_SELECTED.",
    )
    node_name: str | None = Field(
        default=None,
        description="Node the edits were sent to.",
    )
    generation: int = Field(
        ...,
        description="Selection generation the commit ran under.",
    )
    sent: tuple[ModelParameter, ...] = Field(
        default=(),
        description="Parameters transmitted in the set request (no-op edits excluded).",
    )
    refresh: ModelSyncResult | None = Field(
        default=None,
        description="Result of the refresh issued after the write; None if skipped.",
    )
    parameters: tuple[ModelParameter, ...] = Field(
        default=(),
        description="Parameter set as read back after the refresh.",
    )
    status_message: str | None = Field(
        default=None,
        description="Human-readable status line for the write.",
    )
    error_message: str | None = Field(
        default=None,
        description="Error details when status is not SUCCESS.",
    )

    @property
    def ok(self) -> bool:
        return self.status == EnumSyncStatus.SUCCESS


__all__ = ["ModelCommitResult"]
