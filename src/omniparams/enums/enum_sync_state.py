# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session state machine for the parameter sync effect."""

from __future__ import annotations

from enum import StrEnum


class EnumSyncState(StrEnum):
    """Lifecycle of a parameter session.

    IDLE -> NODES_LISTED -> PARAMETERS_LOADED -> COMMITTING -> PARAMETERS_LOADED

    A commit always re-enters PARAMETERS_LOADED through the mandatory
    refresh, whether the write succeeded or not.
    """

    IDLE = "idle"
    NODES_LISTED = "nodes_listed"
    PARAMETERS_LOADED = "parameters_loaded"
    COMMITTING = "committing"


__all__ = ["EnumSyncState"]
