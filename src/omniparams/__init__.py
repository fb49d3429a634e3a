# SPDX-FileCopyrightText: 2025 OmniNode.ai Inc.
# SPDX-License-Identifier: MIT

"""OmniParams - remote parameter inspection and editing for ROS 2 style nodes.

Lists the nodes reachable through a service bridge, fetches a node's typed
parameters, stages edits typed as text and commits them back, optionally in
bulk from a parameter file.

Quick Start:
    >>> from omniparams import NodeParameterSyncEffect, ServiceBridgeClient
    >>> from omniparams import ParameterSyncSettings
    >>> settings = ParameterSyncSettings()
    >>> async with ServiceBridgeClient(settings.to_bridge_config()) as client:
    ...     node = NodeParameterSyncEffect(client, settings)
    ...     await node.select_node("/robot")
    ...     node.stage("max_speed", "2.5")
    ...     result = await node.commit()
"""

from omniparams.clients import ServiceBridgeClient
from omniparams.enums import EnumCoercionMode, EnumParameterType, EnumSyncStatus
from omniparams.models import ModelParameter, ModelParameterValue
from omniparams.nodes.node_parameter_file_compute.handlers import (
    ParameterFileParseError,
    dump_parameter_file,
    parse_parameter_file,
)
from omniparams.nodes.node_parameter_sync_effect import (
    NodeParameterSyncEffect,
    ParameterSyncSettings,
)
from omniparams.nodes.node_value_codec_compute.handlers import (
    ParameterCoercionError,
    decode_for_display,
    encode_from_text,
)
from omniparams.protocols import ProtocolServiceCaller, ServiceCallError

__version__ = "0.1.0"

__all__ = [
    "EnumCoercionMode",
    "EnumParameterType",
    "EnumSyncStatus",
    "ModelParameter",
    "ModelParameterValue",
    "NodeParameterSyncEffect",
    "ParameterCoercionError",
    "ParameterFileParseError",
    "ParameterSyncSettings",
    "ProtocolServiceCaller",
    "ServiceBridgeClient",
    "ServiceCallError",
    "__version__",
    "decode_for_display",
    "dump_parameter_file",
    "encode_from_text",
    "parse_parameter_file",
]
