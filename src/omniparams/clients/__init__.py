# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport clients for omniparams.

These clients live outside the nodes/ directory. Nodes must never import
transport libraries directly; they receive a ``ProtocolServiceCaller`` via
dependency injection.
"""

from __future__ import annotations

from omniparams.clients.service_bridge_client import (
    ServiceBridgeClient,
    ServiceCallError,
    ServiceConnectionError,
    ServiceResponseError,
    ServiceTimeoutError,
)

__all__ = [
    "ServiceBridgeClient",
    "ServiceCallError",
    "ServiceConnectionError",
    "ServiceResponseError",
    "ServiceTimeoutError",
]
