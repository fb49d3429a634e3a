# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ModelFileLoadResult: outcome of loading a parameter file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omniparams.enums.enum_sync_status import EnumSyncStatus
from omniparams.nodes.node_parameter_sync_effect.models.model_commit_result import (
    ModelCommitResult,
)


class ModelFileLoadResult(BaseModel):
    """Result of parsing, staging and committing a parameter file.

    When ``status`` is PARSE_ERROR or INVALID_VALUE nothing was staged and
    no commit was attempted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", from_attributes=True)

    status: EnumSyncStatus = Field(
        ...,
        description="Overall outcome; mirrors the commit status when a commit ran.",
    )
    node_name: str | None = Field(default=None)
    staged: tuple[str, ...] = Field(
        default=(),
        description="Names staged from the file, in file order.",
    )
    skipped: tuple[str, ...] = Field(
        default=(),
        description="Names in the file that the node does not declare.",
    )
    rejected: tuple[str, ...] = Field(
        default=(),
        description="Per-entry coercion errors, one line each.",
    )
    line_number: int | None = Field(
        default=None,
        description="Offending line when status is PARSE_ERROR.",
    )
    commit: ModelCommitResult | None = Field(
        default=None,
        description="Commit issued after staging, if any.",
    )
    error_message: str | None = Field(default=None)

    @property
    def ok(self) -> bool:
        return self.status == EnumSyncStatus.SUCCESS


__all__ = ["ModelFileLoadResult"]
