# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Session state for the parameter sync effect.

Holds everything the sync handlers read and replace: the known node list,
the selected node, the authoritative parameter set of that node, the state
machine position and the last human-readable status message.

Generation Token:
    ``generation`` increases every time a node is selected. Handlers capture
    it before a remote call and compare after every await; a response whose
    generation is no longer current belongs to an earlier selection and is
    discarded instead of applied.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from omniparams.enums.enum_sync_state import EnumSyncState
from omniparams.models.model_parameter import ModelParameter

logger = logging.getLogger(__name__)


class ParameterSession:
    """Mutable state of one operator session against the remote nodes."""

    def __init__(self) -> None:
        self.nodes: tuple[str, ...] = ()
        self.node_name: str | None = None
        self.generation: int = 0
        self.state: EnumSyncState = EnumSyncState.IDLE
        self.status_message: str | None = None
        self._parameters: dict[str, ModelParameter] = {}

    @property
    def parameters(self) -> dict[str, ModelParameter]:
        """Current parameter set keyed by name, in fetch order."""
        return self._parameters

    @property
    def parameter_list(self) -> tuple[ModelParameter, ...]:
        return tuple(self._parameters.values())

    def select(self, node_name: str) -> int:
        """Switch to ``node_name``, invalidating the current parameter set.

        Returns:
            The new generation token.
        """
        self.generation += 1
        self.node_name = node_name
        self._parameters = {}
        self.state = EnumSyncState.NODES_LISTED
        logger.debug("Selected node %s (generation %d)", node_name, self.generation)
        return self.generation

    def is_current(self, generation: int) -> bool:
        return generation == self.generation

    def replace_parameters(self, parameters: Iterable[ModelParameter]) -> None:
        """Replace the whole parameter set (never merged)."""
        self._parameters = {parameter.name: parameter for parameter in parameters}

    def set_status(self, message: str) -> None:
        self.status_message = message
        logger.debug("status: %s", message)


__all__ = ["ParameterSession"]
