# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

# Copyright (c) 2025 OmniNode Team
"""Node ParameterSyncEffect: list nodes, fetch, stage and commit parameters."""

from __future__ import annotations

from omniparams.nodes.node_parameter_sync_effect.handlers import (
    ParameterOverlay,
    ParameterSession,
    handle_commit,
    handle_list_nodes,
    handle_load_parameters,
    handle_parameter_file_load,
    handle_select_node,
    handle_stage_edit,
)
from omniparams.nodes.node_parameter_sync_effect.models import (
    ModelCommitResult,
    ModelFileLoadResult,
    ModelSyncResult,
    ParameterSyncSettings,
)
from omniparams.nodes.node_parameter_sync_effect.node import NodeParameterSyncEffect

__all__ = [
    "ModelCommitResult",
    "ModelFileLoadResult",
    "ModelSyncResult",
    "NodeParameterSyncEffect",
    "ParameterOverlay",
    "ParameterSession",
    "ParameterSyncSettings",
    "handle_commit",
    "handle_list_nodes",
    "handle_load_parameters",
    "handle_parameter_file_load",
    "handle_select_node",
    "handle_stage_edit",
]
