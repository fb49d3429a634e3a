# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Handler for ParameterFileCompute: restricted parameter file parser.

Accepted grammar (after removing every whitespace character except line
breaks, and dropping blank lines):

    [<node-name>:]            optional structural header
    [ros__parameters:]        optional structural header
    name:value                scalar assignment, split on the FIRST ':'
    name:                     block list header ...
    -item                     ... followed by one or more list items

A block list becomes one assignment whose text is the items joined with
``,``, which is the array text the value codec decodes.

This is not a YAML parser: there are no comments, quoting, anchors or
nesting beyond the header. Lines that fit neither form raise
``ParameterFileParseError``.
"""

from __future__ import annotations

import re

from omniparams.constants import ROS_PARAMETERS_HEADER
from omniparams.nodes.node_parameter_file_compute.handlers.exceptions import (
    ParameterFileParseError,
)
from omniparams.nodes.node_parameter_file_compute.models import (
    ModelParameterFileEntry,
    ModelParameterFileParseOutput,
)

_NON_NEWLINE_WHITESPACE = re.compile(r"[^\S\r\n]+")
_PARAMETERS_LINE = f"{ROS_PARAMETERS_HEADER}:"
_LIST_ITEM = "-"
_SEPARATOR = ":"


def _normalized_lines(content: str) -> list[tuple[int, str]]:
    """Return (line_number, text) for each non-blank line, whitespace removed."""
    stripped = _NON_NEWLINE_WHITESPACE.sub("", content)
    return [
        (number, line)
        for number, line in enumerate(stripped.splitlines(), start=1)
        if line
    ]


def _is_node_header(
    lines: list[tuple[int, str]],
    node_name: str | None,
) -> bool:
    if not lines:
        return False
    first = lines[0][1]
    if not first.endswith(_SEPARATOR) or first == _PARAMETERS_LINE:
        return False
    if node_name is not None and first[:-1].lstrip("/") == node_name.lstrip("/"):
        return True
    return len(lines) > 1 and lines[1][1] == _PARAMETERS_LINE


def parse_parameter_file(
    content: str,
    node_name: str | None = None,
) -> ModelParameterFileParseOutput:
    """Parse a parameter file into ordered ``name -> text`` assignments.

    Args:
        content: Full file content as a UTF-8 string.
        node_name: Currently selected node. A first line ``<node_name>:``
            (with or without a leading ``/``) is treated as the header even
            when no ``ros__parameters:`` line follows.

    Returns:
        ModelParameterFileParseOutput with entries in file order.

    Raises:
        ParameterFileParseError: On the first malformed line.
    """
    lines = _normalized_lines(content)

    header_node_name: str | None = None
    if _is_node_header(lines, node_name):
        header_node_name = lines[0][1][:-1]
        lines = lines[1:]
    if lines and lines[0][1] == _PARAMETERS_LINE:
        lines = lines[1:]

    entries: list[ModelParameterFileEntry] = []
    index = 0
    while index < len(lines):
        line_number, line = lines[index]

        if line.startswith(_LIST_ITEM):
            raise ParameterFileParseError(
                "list item without a preceding 'name:' header",
                line_number=line_number,
                line=line,
            )

        if line == _PARAMETERS_LINE:
            raise ParameterFileParseError(
                "nested parameter sections are not supported",
                line_number=line_number,
                line=line,
            )

        if line.endswith(_SEPARATOR):
            name = line[: -len(_SEPARATOR)]
            if not name:
                raise ParameterFileParseError(
                    "block header has an empty name",
                    line_number=line_number,
                    line=line,
                )
            items: list[str] = []
            index += 1
            while index < len(lines) and lines[index][1].startswith(_LIST_ITEM):
                items.append(lines[index][1][len(_LIST_ITEM) :])
                index += 1
            entries.append(
                ModelParameterFileEntry(
                    name=name,
                    text=",".join(items),
                    line_number=line_number,
                )
            )
            continue

        name, separator, text = line.partition(_SEPARATOR)
        if not separator:
            raise ParameterFileParseError(
                "expected 'name:value' or 'name:'",
                line_number=line_number,
                line=line,
            )
        if not name:
            raise ParameterFileParseError(
                "assignment has an empty name",
                line_number=line_number,
                line=line,
            )
        entries.append(
            ModelParameterFileEntry(name=name, text=text, line_number=line_number)
        )
        index += 1

    return ModelParameterFileParseOutput(
        entries=tuple(entries),
        header_node_name=header_node_name,
    )


__all__ = ["parse_parameter_file"]
