# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Result status and operation enums for parameter sync handlers."""

from __future__ import annotations

from enum import StrEnum


class EnumSyncStatus(StrEnum):
    """Outcome of a single sync operation.

    Attributes:
        SUCCESS: Operation completed and state was updated.
        FAILED: Remote call failed (transport or service error). State left
            at its last known good value.
        PROTOCOL_ERROR: Remote response was malformed or names/values lengths
            did not match. State left intact.
        STALE: Response arrived after the node selection changed and was
            discarded.
        NO_NODE_SELECTED: Operation requires a selected node.
        UNKNOWN_PARAMETER: Edit targets a name not in the parameter set.
        INVALID_VALUE: Text could not be coerced in strict mode.
        PARSE_ERROR: Parameter file is malformed.
    """

    SUCCESS = "success"
    FAILED = "failed"
    PROTOCOL_ERROR = "protocol_error"
    STALE = "stale"
    NO_NODE_SELECTED = "no_node_selected"
    UNKNOWN_PARAMETER = "unknown_parameter"
    INVALID_VALUE = "invalid_value"
    PARSE_ERROR = "parse_error"


class EnumSyncOperation(StrEnum):
    """Which sync operation produced a result."""

    LIST_NODES = "list_nodes"
    LOAD_PARAMETERS = "load_parameters"
    STAGE = "stage"
    COMMIT = "commit"
    LOAD_FILE = "load_file"


__all__ = ["EnumSyncOperation", "EnumSyncStatus"]
