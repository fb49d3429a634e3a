# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler functions for ParameterSyncEffect.

This module implements the remote round trips of the parameter session:

1. ``handle_list_nodes()``
   One call to the node enumeration service. Failure empties the node list.

2. ``handle_load_parameters()``
   Two sequential calls: ``<node>/list_parameters`` then
   ``<node>/get_parameters`` for exactly those names. Values are matched to
   names by position; a length mismatch is a protocol violation. The
   parameter set is replaced only when both calls succeed.

3. ``handle_commit()``
   One ``<node>/set_parameters`` call carrying every non-no-op staged edit,
   followed unconditionally by a refresh. The overlay is cleared only when
   the write succeeded.

4. ``handle_stage_edit()``
   Local only: encodes edit text against the current typed value and
   stages it in the overlay.

Handler Contract:
-----------------
ALL exceptions are caught and returned as structured results. These
functions never raise. Remote failures produce FAILED, malformed responses
PROTOCOL_ERROR, and responses that arrive after the node selection changed
are discarded as STALE.

Stale Responses:
----------------
Each handler captures ``session.generation`` before its first remote call
and re-checks it after every await. Only the handler whose generation is
still current may touch the parameter set, overlay or state.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from omniparams.constants import (
    DEFAULT_NODES_SERVICE,
    GET_PARAMETERS_SUFFIX,
    LIST_PARAMETERS_SUFFIX,
    SET_PARAMETERS_SUFFIX,
)
from omniparams.enums.enum_coercion_mode import EnumCoercionMode
from omniparams.enums.enum_sync_state import EnumSyncState
from omniparams.enums.enum_sync_status import EnumSyncOperation, EnumSyncStatus
from omniparams.models.model_parameter import ModelParameter
from omniparams.models.model_service_responses import (
    ModelGetParametersResponse,
    ModelListNodesResponse,
    ModelListParametersResponse,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.parameter_overlay import (
    ParameterOverlay,
)
from omniparams.nodes.node_parameter_sync_effect.handlers.parameter_session import (
    ParameterSession,
)
from omniparams.nodes.node_parameter_sync_effect.models import (
    ModelCommitResult,
    ModelSyncResult,
)
from omniparams.nodes.node_value_codec_compute.handlers import (
    ParameterCoercionError,
    encode_from_text,
)
from omniparams.protocols import ProtocolServiceCaller, ServiceCallError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result helpers
# ---------------------------------------------------------------------------


def _result(
    session: ParameterSession,
    operation: EnumSyncOperation,
    status: EnumSyncStatus,
    *,
    generation: int,
    node_name: str | None = None,
    parameter_name: str | None = None,
    status_message: str | None = None,
    error_message: str | None = None,
) -> ModelSyncResult:
    return ModelSyncResult(
        status=status,
        operation=operation,
        node_name=node_name if node_name is not None else session.node_name,
        generation=generation,
        parameter_name=parameter_name,
        status_message=status_message,
        error_message=error_message,
    )


def _stale(
    session: ParameterSession,
    operation: EnumSyncOperation,
    *,
    generation: int,
    node_name: str,
) -> ModelSyncResult:
    logger.debug(
        "Discarding %s response for node %s (generation %d, current %d)",
        operation.value,
        node_name,
        generation,
        session.generation,
    )
    return _result(
        session,
        operation,
        EnumSyncStatus.STALE,
        generation=generation,
        node_name=node_name,
        error_message="Node selection changed while the request was in flight",
    )


def _no_node(
    session: ParameterSession,
    operation: EnumSyncOperation,
) -> ModelSyncResult:
    return _result(
        session,
        operation,
        EnumSyncStatus.NO_NODE_SELECTED,
        generation=session.generation,
        error_message="No node selected",
    )


# ---------------------------------------------------------------------------
# List nodes
# ---------------------------------------------------------------------------


async def handle_list_nodes(
    *,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    nodes_service: str = DEFAULT_NODES_SERVICE,
) -> ModelSyncResult:
    """Refresh the list of nodes visible through the service caller.

    On failure the node list is replaced by an empty tuple and a diagnostic
    status is recorded. This is recoverable and never raises.

    Args:
        session: Active parameter session (mutated).
        caller: Injected service caller.
        nodes_service: Name of the node enumeration service.

    Returns:
        ModelSyncResult with status SUCCESS, FAILED or PROTOCOL_ERROR.
    """
    generation = session.generation
    try:
        return await _list_nodes(
            session=session,
            caller=caller,
            nodes_service=nodes_service,
            generation=generation,
        )
    except Exception as exc:
        logger.exception("Unhandled exception in handle_list_nodes")
        session.nodes = ()
        message = f"Fetching nodes failed: {exc}"
        session.set_status(message)
        return _result(
            session,
            EnumSyncOperation.LIST_NODES,
            EnumSyncStatus.FAILED,
            generation=generation,
            status_message=message,
            error_message=str(exc),
        )


async def _list_nodes(
    *,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    nodes_service: str,
    generation: int,
) -> ModelSyncResult:
    session.set_status("Fetching nodes...")

    try:
        raw = await caller.call_service(nodes_service, {})
        nodes = ModelListNodesResponse.model_validate(raw).nodes
    except ServiceCallError as exc:
        logger.warning("Fetching nodes failed: %s", exc)
        status = EnumSyncStatus.FAILED
        error = str(exc)
    except ValidationError as exc:
        logger.warning("Malformed response from %s: %s", nodes_service, exc)
        status = EnumSyncStatus.PROTOCOL_ERROR
        error = f"malformed response from {nodes_service}"
    else:
        session.nodes = nodes
        if session.state is EnumSyncState.IDLE:
            session.state = EnumSyncState.NODES_LISTED
        message = "Fetching nodes done"
        session.set_status(message)
        return _result(
            session,
            EnumSyncOperation.LIST_NODES,
            EnumSyncStatus.SUCCESS,
            generation=generation,
            status_message=message,
        )

    session.nodes = ()
    message = f"Fetching nodes failed: {error}"
    session.set_status(message)
    return _result(
        session,
        EnumSyncOperation.LIST_NODES,
        status,
        generation=generation,
        status_message=message,
        error_message=error,
    )


# ---------------------------------------------------------------------------
# Load parameters
# ---------------------------------------------------------------------------


async def handle_load_parameters(
    *,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
    reset_overlay: bool = True,
) -> ModelSyncResult:
    """Fetch the names and values of the selected node's parameters.

    Args:
        session: Active parameter session (mutated on success only).
        caller: Injected service caller.
        overlay: Staged edits. Reset on success when ``reset_overlay``.
        reset_overlay: False for the refresh that follows a commit, so that
            edits kept after a failed write survive for a retry.

    Returns:
        ModelSyncResult with status SUCCESS, FAILED, PROTOCOL_ERROR, STALE or
        NO_NODE_SELECTED.
    """
    node_name = session.node_name
    if node_name is None:
        return _no_node(session, EnumSyncOperation.LOAD_PARAMETERS)

    generation = session.generation
    try:
        return await _load_parameters(
            session=session,
            caller=caller,
            overlay=overlay,
            reset_overlay=reset_overlay,
            node_name=node_name,
            generation=generation,
        )
    except Exception as exc:
        logger.exception(
            "Unhandled exception in handle_load_parameters",
            extra={"node_name": node_name, "generation": generation},
        )
        if not session.is_current(generation):
            return _stale(
                session,
                EnumSyncOperation.LOAD_PARAMETERS,
                generation=generation,
                node_name=node_name,
            )
        message = f"Fetching node parameters failed: {exc}"
        session.set_status(message)
        return _result(
            session,
            EnumSyncOperation.LOAD_PARAMETERS,
            EnumSyncStatus.FAILED,
            generation=generation,
            node_name=node_name,
            status_message=message,
            error_message=str(exc),
        )


async def _load_parameters(
    *,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
    reset_overlay: bool,
    node_name: str,
    generation: int,
) -> ModelSyncResult:
    operation = EnumSyncOperation.LOAD_PARAMETERS

    def failed(status: EnumSyncStatus, prefix: str, error: str) -> ModelSyncResult:
        message = f"{prefix}: {error}"
        logger.warning("%s (node=%s)", message, node_name)
        session.set_status(message)
        return _result(
            session,
            operation,
            status,
            generation=generation,
            node_name=node_name,
            status_message=message,
            error_message=error,
        )

    session.set_status(f"Fetching node parameters for node {node_name}...")

    list_service = f"{node_name}{LIST_PARAMETERS_SUFFIX}"
    try:
        raw_names = await caller.call_service(list_service, {})
    except ServiceCallError as exc:
        if not session.is_current(generation):
            return _stale(session, operation, generation=generation, node_name=node_name)
        return failed(EnumSyncStatus.FAILED, "Fetching node parameters failed", str(exc))

    if not session.is_current(generation):
        return _stale(session, operation, generation=generation, node_name=node_name)

    try:
        names = ModelListParametersResponse.model_validate(raw_names).result.names
    except ValidationError:
        return failed(
            EnumSyncStatus.PROTOCOL_ERROR,
            "Fetching node parameters failed",
            f"malformed response from {list_service}",
        )

    get_service = f"{node_name}{GET_PARAMETERS_SUFFIX}"
    try:
        raw_values = await caller.call_service(get_service, {"names": list(names)})
    except ServiceCallError as exc:
        if not session.is_current(generation):
            return _stale(session, operation, generation=generation, node_name=node_name)
        return failed(
            EnumSyncStatus.FAILED, "Fetching node parameters values failed", str(exc)
        )

    if not session.is_current(generation):
        return _stale(session, operation, generation=generation, node_name=node_name)

    try:
        values = ModelGetParametersResponse.model_validate(raw_values).values
    except ValidationError:
        return failed(
            EnumSyncStatus.PROTOCOL_ERROR,
            "Fetching node parameters values failed",
            f"malformed response from {get_service}",
        )

    if len(values) != len(names):
        return failed(
            EnumSyncStatus.PROTOCOL_ERROR,
            "Fetching node parameters values failed",
            f"expected {len(names)} values, got {len(values)}",
        )

    try:
        parameters = [
            ModelParameter(name=name, value=value)
            for name, value in zip(names, values, strict=True)
        ]
    except ValidationError:
        return failed(
            EnumSyncStatus.PROTOCOL_ERROR,
            "Fetching node parameters failed",
            f"invalid parameter name in response from {list_service}",
        )

    session.replace_parameters(parameters)
    if reset_overlay:
        overlay.clear()
    session.state = EnumSyncState.PARAMETERS_LOADED
    message = "Fetching node parameters done"
    session.set_status(message)
    logger.info("Loaded %d parameters from node %s", len(parameters), node_name)
    return _result(
        session,
        operation,
        EnumSyncStatus.SUCCESS,
        generation=generation,
        node_name=node_name,
        status_message=message,
    )


# ---------------------------------------------------------------------------
# Select node
# ---------------------------------------------------------------------------


async def handle_select_node(
    *,
    node_name: str,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
) -> ModelSyncResult:
    """Select ``node_name``, discard unsent edits and load its parameters.

    Selecting bumps the session generation, so any load or commit still in
    flight for the previous node is discarded when it completes.
    """
    session.select(node_name)
    overlay.clear()
    return await handle_load_parameters(
        session=session,
        caller=caller,
        overlay=overlay,
    )


# ---------------------------------------------------------------------------
# Stage edit
# ---------------------------------------------------------------------------


def handle_stage_edit(
    *,
    name: str,
    text: str,
    session: ParameterSession,
    overlay: ParameterOverlay,
    mode: EnumCoercionMode = EnumCoercionMode.STRICT,
) -> ModelSyncResult:
    """Encode ``text`` against the current value of ``name`` and stage it.

    Empty text stages the no-op marker, which cancels an earlier edit of the
    same name without transmitting anything.

    Returns:
        ModelSyncResult with status SUCCESS, UNKNOWN_PARAMETER,
        INVALID_VALUE or NO_NODE_SELECTED.
    """
    operation = EnumSyncOperation.STAGE
    if session.node_name is None:
        return _no_node(session, operation)

    parameter = session.parameters.get(name)
    if parameter is None:
        return _result(
            session,
            operation,
            EnumSyncStatus.UNKNOWN_PARAMETER,
            generation=session.generation,
            parameter_name=name,
            error_message=f"Node {session.node_name} has no parameter {name!r}",
        )

    try:
        value = encode_from_text(parameter.value, text, mode)
    except ParameterCoercionError as exc:
        return _result(
            session,
            operation,
            EnumSyncStatus.INVALID_VALUE,
            generation=session.generation,
            parameter_name=name,
            error_message=str(exc),
        )

    overlay.set(name, value)
    return _result(
        session,
        operation,
        EnumSyncStatus.SUCCESS,
        generation=session.generation,
        parameter_name=name,
    )


# ---------------------------------------------------------------------------
# Commit
# ---------------------------------------------------------------------------


async def handle_commit(
    *,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
) -> ModelCommitResult:
    """Send staged edits to the selected node, then re-read its parameters.

    The refresh runs whether the write succeeded or not; the node's
    per-parameter outcome is not inspected, so the read-back set is the
    only source of truth. An empty overlay still sends an empty list.
    Any error from the caller, not only ServiceCallError, counts as a
    failed write. A successful write clears the whole overlay, including
    edits staged while the request was in flight.

    Returns:
        ModelCommitResult carrying both the sent edits and the read-back set.
    """
    node_name = session.node_name
    if node_name is None:
        return ModelCommitResult(
            status=EnumSyncStatus.NO_NODE_SELECTED,
            generation=session.generation,
            error_message="No node selected",
        )

    generation = session.generation
    sent = overlay.pending()
    try:
        return await _commit(
            session=session,
            caller=caller,
            overlay=overlay,
            node_name=node_name,
            generation=generation,
            sent=sent,
        )
    except Exception as exc:
        logger.exception(
            "Unhandled exception in handle_commit",
            extra={"node_name": node_name, "generation": generation},
        )
        message = f"Sending node parameters failed: {exc}"
        if session.is_current(generation):
            session.state = EnumSyncState.PARAMETERS_LOADED
            session.set_status(message)
        return ModelCommitResult(
            status=EnumSyncStatus.FAILED,
            node_name=node_name,
            generation=generation,
            sent=sent,
            parameters=session.parameter_list,
            status_message=message,
            error_message=str(exc),
        )


async def _commit(
    *,
    session: ParameterSession,
    caller: ProtocolServiceCaller,
    overlay: ParameterOverlay,
    node_name: str,
    generation: int,
    sent: tuple[ModelParameter, ...],
) -> ModelCommitResult:
    session.state = EnumSyncState.COMMITTING
    session.set_status(f"Sending node parameters for node {node_name}...")

    error: str | None = None
    try:
        await caller.call_service(
            f"{node_name}{SET_PARAMETERS_SUFFIX}",
            {"parameters": [parameter.to_wire() for parameter in sent]},
        )
    except ServiceCallError as exc:
        error = str(exc)
    except Exception as exc:
        # The refresh below must still run.
        logger.exception(
            "Unexpected error sending parameters to %s",
            node_name,
            extra={"node_name": node_name, "generation": generation},
        )
        error = str(exc) or type(exc).__name__

    if not session.is_current(generation):
        logger.debug(
            "Node selection changed during commit to %s; skipping refresh",
            node_name,
        )
        return ModelCommitResult(
            status=EnumSyncStatus.STALE,
            node_name=node_name,
            generation=generation,
            sent=sent,
            error_message=error
            or "Node selection changed while the request was in flight",
        )

    if error is None:
        overlay.clear()
        status = EnumSyncStatus.SUCCESS
        message = "Sending node parameters done"
        logger.info("Sent %d parameters to node %s", len(sent), node_name)
    else:
        status = EnumSyncStatus.FAILED
        message = f"Sending node parameters failed: {error}"
        logger.warning("%s (node=%s)", message, node_name)
    session.set_status(message)

    refresh = await handle_load_parameters(
        session=session,
        caller=caller,
        overlay=overlay,
        reset_overlay=False,
    )
    if session.is_current(generation):
        session.state = EnumSyncState.PARAMETERS_LOADED

    return ModelCommitResult(
        status=status,
        node_name=node_name,
        generation=generation,
        sent=sent,
        refresh=refresh,
        parameters=session.parameter_list,
        status_message=message,
        error_message=error,
    )


__all__ = [
    "handle_commit",
    "handle_list_nodes",
    "handle_load_parameters",
    "handle_select_node",
    "handle_stage_edit",
]
