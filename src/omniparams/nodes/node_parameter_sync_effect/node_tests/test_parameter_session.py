# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for ParameterSession."""

from __future__ import annotations

import pytest

from omniparams.enums import EnumParameterType, EnumSyncState
from omniparams.models import ModelParameter
from omniparams.nodes.node_parameter_sync_effect.handlers import ParameterSession
from omniparams.nodes.node_parameter_sync_effect.node_tests.conftest import value_of

pytestmark = pytest.mark.unit


def _parameter(name: str) -> ModelParameter:
    return ModelParameter(name=name, value=value_of(EnumParameterType.BOOL, True))


def test_initial_state() -> None:
    session = ParameterSession()

    assert session.state == EnumSyncState.IDLE
    assert session.node_name is None
    assert session.nodes == ()
    assert session.parameters == {}
    assert session.generation == 0


def test_select_bumps_generation_and_clears_parameters() -> None:
    session = ParameterSession()
    first = session.select("/a")
    session.replace_parameters([_parameter("x")])

    second = session.select("/b")

    assert second == first + 1
    assert session.is_current(second)
    assert not session.is_current(first)
    assert session.node_name == "/b"
    assert session.parameters == {}
    assert session.state == EnumSyncState.NODES_LISTED


def test_reselecting_same_node_still_bumps_generation() -> None:
    session = ParameterSession()
    first = session.select("/a")

    assert session.select("/a") != first


def test_replace_parameters_is_not_a_merge() -> None:
    session = ParameterSession()
    session.replace_parameters([_parameter("x"), _parameter("y")])

    session.replace_parameters([_parameter("z")])

    assert list(session.parameters) == ["z"]
    assert [p.name for p in session.parameter_list] == ["z"]


def test_set_status() -> None:
    session = ParameterSession()
    session.set_status("Fetching nodes...")

    assert session.status_message == "Fetching nodes..."
