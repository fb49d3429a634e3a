# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Render a node's parameter set as a ROS 2 parameter file.

Output layout:

    robot_node:
      ros__parameters:
        max_speed: 5.0
        waypoints:
        - a
        - b

Files produced here load back through ``parse_parameter_file`` as long as
string values contain no whitespace and need no YAML quoting. Values that
do not round trip:

- strings YAML must quote (``"true"``, ``"a: b"``) keep their quotes;
- the empty string is written as ``''``;
- non-finite doubles are written as ``.inf``, ``-.inf`` and ``.nan``,
  which the strict codec rejects and the lenient codec reads as 0.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import yaml

from omniparams.constants import ROS_PARAMETERS_HEADER
from omniparams.models.model_parameter import ModelParameter

logger = logging.getLogger(__name__)


def _native_payload(parameter: ModelParameter) -> Any:
    payload = parameter.value.payload
    if isinstance(payload, tuple):
        return list(payload)
    return payload


def dump_parameter_file(
    node_name: str,
    parameters: Iterable[ModelParameter],
) -> str:
    """Serialize parameters under a ``<node>: ros__parameters:`` header.

    Parameters with an unrecognized type tag are skipped with a warning.

    Args:
        node_name: Node the parameters belong to. A leading ``/`` is dropped.
        parameters: Parameters in the order they should be written.

    Returns:
        YAML document text.
    """
    values: dict[str, Any] = {}
    for parameter in parameters:
        if not parameter.value.is_valid:
            logger.warning(
                "Skipping parameter %s with invalid type tag %s",
                parameter.name,
                parameter.value.type,
            )
            continue
        values[parameter.name] = _native_payload(parameter)

    document = {node_name.lstrip("/") or node_name: {ROS_PARAMETERS_HEADER: values}}
    return yaml.safe_dump(
        document,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


__all__ = ["dump_parameter_file"]
