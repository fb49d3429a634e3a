# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Build display rows for a parameter set."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from omniparams.models.model_parameter import ModelParameter
from omniparams.models.model_parameter_value import ModelParameterValue
from omniparams.nodes.node_value_codec_compute.handlers.handler_value_codec import (
    decode_for_display,
    parameter_type_name,
)
from omniparams.nodes.node_value_codec_compute.models import ModelParameterRow


def build_parameter_rows(
    parameters: Iterable[ModelParameter],
    staged: Mapping[str, ModelParameterValue | None] | None = None,
) -> tuple[ModelParameterRow, ...]:
    """Return one row per parameter, in the given order.

    Args:
        parameters: Current parameter set.
        staged: Staged edits by name. A ``None`` entry is a cleared input and
            shows as not staged.
    """
    staged = staged or {}
    rows = []
    for parameter in parameters:
        edit = staged.get(parameter.name)
        rows.append(
            ModelParameterRow(
                name=parameter.name,
                type_name=parameter_type_name(parameter.value),
                value=decode_for_display(parameter.value),
                staged=decode_for_display(edit) if edit is not None else None,
            )
        )
    return tuple(rows)


__all__ = ["build_parameter_rows"]
