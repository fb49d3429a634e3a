# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Node ParameterSyncEffect: remote parameter inspection and editing.

Owns one operator session against the nodes reachable through a service
caller: the node list, the selected node, its authoritative parameter set
and the overlay of staged edits. All remote work is delegated to the
handlers in ``handlers/handler_parameter_sync.py``.

Responsibilities:
    - Enumerate nodes
    - Select a node and fetch its parameters (names, then values)
    - Stage edits typed as text, coerced to the parameter's type
    - Commit staged edits and re-read the node
    - Load a parameter file as a bulk edit plus commit
    - Render the parameter set as rows or as a parameter file

Does NOT:
    - Inspect the per-parameter outcome of a set request
    - Retry failed calls (the transport does that)
"""

from __future__ import annotations

from omniparams.enums.enum_sync_state import EnumSyncState
from omniparams.models.model_parameter import ModelParameter
from omniparams.nodes.node_parameter_file_compute.handlers import dump_parameter_file
from omniparams.nodes.node_parameter_sync_effect.handlers import (
    ParameterOverlay,
    ParameterSession,
    handle_commit,
    handle_list_nodes,
    handle_load_parameters,
    handle_parameter_file_load,
    handle_select_node,
    handle_stage_edit,
)
from omniparams.nodes.node_parameter_sync_effect.models import (
    ModelCommitResult,
    ModelFileLoadResult,
    ModelSyncResult,
    ParameterSyncSettings,
)
from omniparams.nodes.node_value_codec_compute.handlers import build_parameter_rows
from omniparams.nodes.node_value_codec_compute.models import ModelParameterRow
from omniparams.protocols import ProtocolServiceCaller


class NodeParameterSyncEffect:
    """Effect node holding a parameter session for one operator.

    Dependency Injection:
        The service caller is any ``ProtocolServiceCaller``; production code
        passes a ``ServiceBridgeClient``, tests an in-memory fake.

    Example:
        ```python
        async with ServiceBridgeClient(settings.to_bridge_config()) as client:
            node = NodeParameterSyncEffect(client, settings)
            await node.list_nodes()
            await node.select_node("/robot")
            node.stage("max_speed", "2.5")
            result = await node.commit()
        ```
    """

    def __init__(
        self,
        caller: ProtocolServiceCaller,
        settings: ParameterSyncSettings | None = None,
        *,
        session: ParameterSession | None = None,
        overlay: ParameterOverlay | None = None,
    ) -> None:
        self._caller = caller
        self._settings = settings or ParameterSyncSettings()
        self._session = session or ParameterSession()
        self._overlay = overlay or ParameterOverlay()

    @property
    def settings(self) -> ParameterSyncSettings:
        return self._settings

    @property
    def session(self) -> ParameterSession:
        return self._session

    @property
    def overlay(self) -> ParameterOverlay:
        return self._overlay

    @property
    def nodes(self) -> tuple[str, ...]:
        return self._session.nodes

    @property
    def node_name(self) -> str | None:
        return self._session.node_name

    @property
    def parameters(self) -> tuple[ModelParameter, ...]:
        return self._session.parameter_list

    @property
    def state(self) -> EnumSyncState:
        return self._session.state

    @property
    def status_message(self) -> str | None:
        return self._session.status_message

    async def list_nodes(self) -> ModelSyncResult:
        return await handle_list_nodes(
            session=self._session,
            caller=self._caller,
            nodes_service=self._settings.nodes_service,
        )

    async def select_node(self, node_name: str) -> ModelSyncResult:
        return await handle_select_node(
            node_name=node_name,
            session=self._session,
            caller=self._caller,
            overlay=self._overlay,
        )

    async def load_parameters(self, *, reset_overlay: bool = True) -> ModelSyncResult:
        return await handle_load_parameters(
            session=self._session,
            caller=self._caller,
            overlay=self._overlay,
            reset_overlay=reset_overlay,
        )

    def stage(self, name: str, text: str) -> ModelSyncResult:
        return handle_stage_edit(
            name=name,
            text=text,
            session=self._session,
            overlay=self._overlay,
            mode=self._settings.coercion_mode,
        )

    async def commit(self) -> ModelCommitResult:
        return await handle_commit(
            session=self._session,
            caller=self._caller,
            overlay=self._overlay,
        )

    async def load_parameter_file(self, content: str) -> ModelFileLoadResult:
        return await handle_parameter_file_load(
            content=content,
            session=self._session,
            caller=self._caller,
            overlay=self._overlay,
            mode=self._settings.coercion_mode,
        )

    def rows(self) -> tuple[ModelParameterRow, ...]:
        """Return (name, type, value, staged) rows for the parameter set."""
        staged = {name: self._overlay.get(name) for name in self._overlay.names()}
        return build_parameter_rows(self._session.parameter_list, staged)

    def dump_parameter_file(self) -> str:
        """Render the current parameter set as a parameter file.

        Raises:
            ValueError: If no node is selected.
        """
        if self._session.node_name is None:
            raise ValueError("No node selected")
        return dump_parameter_file(
            self._session.node_name, self._session.parameter_list
        )


__all__ = ["NodeParameterSyncEffect"]
