# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for loading a parameter file into the selected node.

Loading a file is a bulk edit followed by an immediate commit:

1. Parse the file (``parse_parameter_file``); a malformed line aborts.
2. Encode every entry whose name exists in the current parameter set
   against that parameter's type, using the session's coercion mode.
3. Names the node does not declare are skipped and reported.
4. If any value fails coercion the whole load is rejected and nothing is
   staged.
5. Otherwise all encoded values are staged and ``handle_commit`` runs.
"""

from __future__ import annotations

import logging

from omniparams.enums.enum_coercion_mode import EnumCoercionMode
from omniparams.enums.enum_sync_status import EnumSyncStatus
from omniparams.models.model_parameter_value import ModelParameterValue
from omniparams.nodes.node_parameter_file_compute.handlers import (
    ParameterFileParseError,
    parse_parameter_file,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.handler_parameter_sync import (
    handle_commit,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.parameter_overlay import (
    ParameterOverlay,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.parameter_session import (
    ParameterSession,
)
from omniparams.nodes.node_parameter_sync_effect.models import ModelFileLoadResult
from omniparams.nodes.node_value_codec_compute.handlers import (
    ParameterCoercionError,
    encode_from_text,
)
from omniparams.protocols import ProtocolServiceCaller

logger = logging.getLogger(__name__)


async def handle_parameter_file_load(
    *,
    content: str,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
    mode: EnumCoercionMode = EnumCoercionMode.STRICT,
) -> ModelFileLoadResult:
    """Parse ``content``, stage its values and commit them.

    Args:
        content: Parameter file text.
        session: Active parameter session; its parameter set supplies the
            target type of every entry.
        caller: Injected service caller used by the commit.
        overlay: Overlay the file values are staged into.
        mode: Coercion mode for entry text.

    Returns:
        ModelFileLoadResult. Status is PARSE_ERROR or INVALID_VALUE when
        nothing was staged, otherwise the status of the commit.
    """
    node_name = session.node_name
    if node_name is None:
        return ModelFileLoadResult(
            status=EnumSyncStatus.NO_NODE_SELECTED,
            error_message="No node selected",
        )

    try:
        return await _load_file(
            content=content,
            session=session,
            caller=caller,
            overlay=overlay,
            mode=mode,
            node_name=node_name,
        )
    except Exception as exc:
        logger.exception(
            "Unhandled exception in handle_parameter_file_load",
            extra={"node_name": node_name},
        )
        return ModelFileLoadResult(
            status=EnumSyncStatus.FAILED,
            node_name=node_name,
            error_message=str(exc),
        )


async def _load_file(
    *,
    content: str,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
    mode: EnumCoercionMode,
    node_name: str,
) -> ModelFileLoadResult:
    try:
        parsed = parse_parameter_file(content, node_name=node_name)
    except ParameterFileParseError as exc:
        logger.warning("Rejected parameter file for node %s: %s", node_name, exc)
        return ModelFileLoadResult(
            status=EnumSyncStatus.PARSE_ERROR,
            node_name=node_name,
            line_number=exc.line_number,
            error_message=str(exc),
        )

    if (
        parsed.header_node_name is not None
        and parsed.header_node_name.lstrip("/") != node_name.lstrip("/")
    ):
        logger.warning(
            "Parameter file header names node %s, loading into %s",
            parsed.header_node_name,
            node_name,
        )

    encoded: dict[str, ModelParameterValue | None] = {}
    skipped: list[str] = []
    rejected: list[str] = []
    for entry in parsed.entries:
        parameter = session.parameters.get(entry.name)
        if parameter is None:
            logger.warning(
                "Skipping %s (line %d): node %s has no such parameter",
                entry.name,
                entry.line_number,
                node_name,
            )
            if entry.name not in skipped:
                skipped.append(entry.name)
            continue
        try:
            encoded[entry.name] = encode_from_text(parameter.value, entry.text, mode)
        except ParameterCoercionError as exc:
            rejected.append(f"line {entry.line_number}: {entry.name}: {exc}")

    if rejected:
        logger.warning(
            "Rejected parameter file for node %s: %d invalid values",
            node_name,
            len(rejected),
        )
        return ModelFileLoadResult(
            status=EnumSyncStatus.INVALID_VALUE,
            node_name=node_name,
            skipped=tuple(skipped),
            rejected=tuple(rejected),
            error_message="; ".join(rejected),
        )

    for name, value in encoded.items():
        overlay.set(name, value)

    commit = await handle_commit(session=session, caller=caller, overlay=overlay)
    return ModelFileLoadResult(
        status=commit.status,
        node_name=node_name,
        staged=tuple(encoded),
        skipped=tuple(skipped),
        commit=commit,
        error_message=commit.error_message,
    )


__all__ = ["handle_parameter_file_load"]
