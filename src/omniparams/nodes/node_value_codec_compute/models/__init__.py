# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Models for node_value_codec_compute."""

from __future__ import annotations

from omniparams.nodes.node_value_codec_compute.models.model_parameter_row import (
    ModelParameterRow,
)

__all__ = ["ModelParameterRow"]
