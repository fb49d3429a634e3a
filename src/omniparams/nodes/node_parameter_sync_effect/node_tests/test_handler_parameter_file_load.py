# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for handle_parameter_file_load."""

from __future__ import annotations

import pytest
import pytest_asyncio

from omniparams.enums import EnumCoercionMode, EnumParameterType, EnumSyncStatus
from omniparams.nodes.node_parameter_sync_effect.handlers import (
    ParameterOverlay,
    ParameterSession,
    handle_parameter_file_load,
    handle_select_node,
)
from omniparams.nodes.node_parameter_sync_effect.node_tests.conftest import (
    InMemoryServiceCaller,
    value_of,
)
from omniparams.protocols import ServiceConnectionError

pytestmark = pytest.mark.unit

SAMPLE_FILE = """\
robot:
  ros__parameters:
  max_speed:5.0
  waypoints:
  - a
  - b
  - c
"""


@pytest_asyncio.fixture
async def loaded(
    session: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> ParameterSession:
    await handle_select_node(
        node_name="/robot", session=session, caller=caller, overlay=overlay
    )
    return session


async def _load(
    content: str,
    session: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
    mode: EnumCoercionMode = EnumCoercionMode.STRICT,
):
    return await handle_parameter_file_load(
        content=content, session=session, caller=caller, overlay=overlay, mode=mode
    )


@pytest.mark.asyncio
async def test_sample_file_is_staged_and_committed(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load(SAMPLE_FILE, loaded, caller, overlay)

    assert result.status == EnumSyncStatus.SUCCESS
    assert result.staged == ("max_speed", "waypoints")
    assert result.skipped == ()
    assert result.commit is not None
    assert [p.name for p in result.commit.sent] == ["max_speed", "waypoints"]
    assert caller.nodes["/robot"]["max_speed"] == value_of(EnumParameterType.DOUBLE, 5.0)
    assert caller.nodes["/robot"]["waypoints"] == value_of(
        EnumParameterType.STRING_ARRAY, ("a", "b", "c")
    )
    assert loaded.parameters["max_speed"].value.double_value == 5.0
    assert len(overlay) == 0


@pytest.mark.asyncio
async def test_unknown_names_are_skipped_and_reported(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load("retries:8\nlegacy_gain:0.3\n", loaded, caller, overlay)

    assert result.ok
    assert result.staged == ("retries",)
    assert result.skipped == ("legacy_gain",)
    assert caller.nodes["/robot"]["retries"].integer_value == 8


@pytest.mark.asyncio
async def test_parse_error_stages_nothing(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load("retries:8\n- orphan\n", loaded, caller, overlay)

    assert result.status == EnumSyncStatus.PARSE_ERROR
    assert result.line_number == 2
    assert result.commit is None
    assert len(overlay) == 0
    assert caller.count("/robot/set_parameters") == 0


@pytest.mark.asyncio
async def test_any_invalid_value_rejects_whole_file(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load("max_speed:2.0\nretries:many\n", loaded, caller, overlay)

    assert result.status == EnumSyncStatus.INVALID_VALUE
    assert len(result.rejected) == 1
    assert result.rejected[0].startswith("line 2: retries: ")
    assert result.staged == ()
    assert len(overlay) == 0
    assert caller.count("/robot/set_parameters") == 0


@pytest.mark.asyncio
async def test_lenient_mode_coerces_instead_of_rejecting(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load(
        "retries:many\n", loaded, caller, overlay, EnumCoercionMode.LENIENT
    )

    assert result.ok
    assert caller.nodes["/robot"]["retries"].integer_value == 0


@pytest.mark.asyncio
async def test_last_entry_for_a_name_wins(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load("retries:1\nretries:2\n", loaded, caller, overlay)

    assert result.ok
    assert result.staged == ("retries",)
    assert caller.nodes["/robot"]["retries"].integer_value == 2


@pytest.mark.asyncio
async def test_commit_failure_is_reported(
    loaded: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    caller.failures["/robot/set_parameters"] = ServiceConnectionError("refused")

    result = await _load("retries:4\n", loaded, caller, overlay)

    assert result.status == EnumSyncStatus.FAILED
    assert result.error_message == "refused"
    assert overlay.get("retries") == value_of(EnumParameterType.INTEGER, 4)


@pytest.mark.asyncio
async def test_without_node_selected(
    session: ParameterSession,
    caller: InMemoryServiceCaller,
    overlay: ParameterOverlay,
) -> None:
    result = await _load(SAMPLE_FILE, session, caller, overlay)

    assert result.status == EnumSyncStatus.NO_NODE_SELECTED
    assert caller.calls == []
