# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-memory overlay of staged, not-yet-committed parameter edits.

Edits are keyed by parameter name, last write wins. A ``None`` value is the
no-op marker produced when the operator clears an input: it replaces any
earlier edit for that name and is never transmitted.

Thread Safety:
    Not protected by a lock. The sync effect runs in a single asyncio event
    loop and the overlay is only mutated between awaits.
"""

from __future__ import annotations

from omniparams.models.model_parameter import ModelParameter
from omniparams.models.model_parameter_value import ModelParameterValue


class ParameterOverlay:
    """Name-keyed store of pending edits.

    Usage:
        overlay = ParameterOverlay()
        overlay.set("max_speed", ModelParameterValue.of(EnumParameterType.DOUBLE, 2.0))
        overlay.set("frame_id", None)  # cleared input: nothing to send
        overlay.pending()  # -> (ModelParameter(name="max_speed", ...),)
    """

    def __init__(self) -> None:
        self._edits: dict[str, ModelParameterValue | None] = {}

    def set(self, name: str, value: ModelParameterValue | None) -> None:
        """Stage ``value`` for ``name``, replacing any earlier edit."""
        self._edits[name] = value

    def get(self, name: str) -> ModelParameterValue | None:
        """Return the staged value for ``name`` (None if absent or a no-op)."""
        return self._edits.get(name)

    def pending(self) -> tuple[ModelParameter, ...]:
        """Return staged edits to transmit, excluding no-op entries.

        Order is the order in which each name was first staged.
        """
        return tuple(
            ModelParameter(name=name, value=value)
            for name, value in self._edits.items()
            if value is not None
        )

    def names(self) -> tuple[str, ...]:
        """Return every staged name, no-op entries included."""
        return tuple(self._edits)

    def clear(self) -> None:
        self._edits.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._edits

    def __len__(self) -> int:
        return len(self._edits)


__all__ = ["ParameterOverlay"]
