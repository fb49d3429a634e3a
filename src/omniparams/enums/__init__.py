# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared enums for omniparams."""

from __future__ import annotations

from omniparams.enums.enum_coercion_mode import EnumCoercionMode
from omniparams.enums.enum_parameter_type import PAYLOAD_FIELDS, EnumParameterType
from omniparams.enums.enum_sync_state import EnumSyncState
from omniparams.enums.enum_sync_status import EnumSyncOperation, EnumSyncStatus

__all__ = [
    "PAYLOAD_FIELDS",
    "EnumCoercionMode",
    "EnumParameterType",
    "EnumSyncOperation",
    "EnumSyncState",
    "EnumSyncStatus",
]
