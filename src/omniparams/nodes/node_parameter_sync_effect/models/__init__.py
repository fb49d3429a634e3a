# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_parameter_sync_effect."""

from __future__ import annotations

from omniparams.nodes.node_parameter_sync_effect.models.model_commit_result import (
    ModelCommitResult,
)
from omniparams.nodes.node_parameter_sync_effect.models.model_file_load_result import (
    ModelFileLoadResult,
)
from omniparams.nodes.node_parameter_sync_effect.models.model_parameter_sync_settings import (
    ParameterSyncSettings,
)
from omniparams.nodes.node_parameter_sync_effect.models.model_sync_result import (
    ModelSyncResult,
)

__all__ = [
    "ModelCommitResult",
    "ModelFileLoadResult",
    "ModelSyncResult",
    "ParameterSyncSettings",
]
