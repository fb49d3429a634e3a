# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handlers for node_parameter_file_compute."""

from __future__ import annotations

from omniparams.nodes.node_parameter_file_compute.handlers.exceptions import (
    ParameterFileParseError,
)
from omniparams.nodes.node_parameter_file_compute.handlers.handler_parameter_file_parser import (
    parse_parameter_file,
)
from omniparams.nodes.node_parameter_file_compute.handlers.handler_parameter_file_writer import (
    dump_parameter_file,
)

__all__ = [
    "ParameterFileParseError",
    "dump_parameter_file",
    "parse_parameter_file",
]
