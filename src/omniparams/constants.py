# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""
Shared Constants for omniparams.

Usage:
    from omniparams.constants import DISPLAY_UNDEFINED
"""

# =============================================================================
# Display Sentinels
# =============================================================================

DISPLAY_UNDEFINED: str = "undefined"
"""Rendered in place of a value that is absent entirely."""

DISPLAY_INVALID_TYPE: str = "error, invalid type..."
"""Rendered for a ParameterValue whose type tag is not in 1..9."""

TYPE_NAME_UNDEFINED: str = "undefined"
TYPE_NAME_INVALID: str = "invalid"

# =============================================================================
# Integer Limits
# =============================================================================

INT64_MIN: int = -(2**63)
INT64_MAX: int = 2**63 - 1
"""Bounds of the INTEGER and INTEGER_ARRAY payloads (signed 64-bit)."""

BYTE_MAX: int = 255

# =============================================================================
# Remote Services
# =============================================================================

DEFAULT_NODES_SERVICE: str = "/rosapi/nodes"
"""Service that enumerates the nodes visible to the bridge."""

LIST_PARAMETERS_SUFFIX: str = "/list_parameters"
GET_PARAMETERS_SUFFIX: str = "/get_parameters"
SET_PARAMETERS_SUFFIX: str = "/set_parameters"

# =============================================================================
# Parameter Files
# =============================================================================

ROS_PARAMETERS_HEADER: str = "ros__parameters"
"""Second structural header line of a ROS 2 parameter file (without colon)."""
