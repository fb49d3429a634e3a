# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_parameter_file_compute."""

from __future__ import annotations

from omniparams.nodes.node_parameter_file_compute.models.model_parameter_file_entry import (
    ModelParameterFileEntry,
)
from omniparams.nodes.node_parameter_file_compute.models.model_parameter_file_parse_output import (
    ModelParameterFileParseOutput,
)

__all__ = [
    "ModelParameterFileEntry",
    "ModelParameterFileParseOutput",
]
