# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_parameter_sync_effect."""

from __future__ import annotations

from omniparams.nodes.node_parameter_sync_effect.handlers.handler_parameter_file_load import (
    handle_parameter_file_load,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.handler_parameter_sync import (
    handle_commit,
    handle_list_nodes,
    handle_load_parameters,
    handle_select_node,
    handle_stage_edit,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.parameter_overlay import (
    ParameterOverlay,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.parameter_session import (
    ParameterSession,
)

__all__ = [
    "ParameterOverlay",
    "ParameterSession",
    "handle_commit",
    "handle_list_nodes",
    "handle_load_parameters",
    "handle_parameter_file_load",
    "handle_select_node",
    "handle_stage_edit",
]
