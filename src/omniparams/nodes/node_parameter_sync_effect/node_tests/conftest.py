# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared fixtures for node_parameter_sync_effect tests.

Provides an in-memory ProtocolServiceCaller that serves the node
enumeration and per-node parameter services from a dict, records every
call, and can be told to fail, return a canned payload, or block on an
asyncio.Event so tests control the order in which responses arrive.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from omniparams.enums import EnumCoercionMode, EnumParameterType
from omniparams.enums.enum_parameter_type import PAYLOAD_FIELDS
from omniparams.models import ModelParameterValue
from omniparams.nodes.node_parameter_sync_effect.handlers import (
    ParameterOverlay,
    ParameterSession,
)
from omniparams.nodes.node_parameter_sync_effect.models import ParameterSyncSettings
from omniparams.nodes.node_parameter_sync_effect.node import NodeParameterSyncEffect
from omniparams.protocols import ProtocolServiceCaller, ServiceResponseError

NODES_SERVICE = "/rosapi/nodes"

_WIRE_DEFAULTS: dict[str, Any] = {
    "bool_value": False,
    "integer_value": 0,
    "double_value": 0.0,
    "string_value": "",
    "byte_array_value": [],
    "bool_array_value": [],
    "integer_array_value": [],
    "double_array_value": [],
    "string_array_value": [],
}


def wire_value(value: ModelParameterValue) -> dict[str, Any]:
    """Full wire form: every payload field present, inactive ones defaulted."""
    wire: dict[str, Any] = {"type": value.type}
    wire.update({field: _WIRE_DEFAULTS[field] for field in PAYLOAD_FIELDS})
    wire.update(value.to_wire())
    return wire


def value_of(parameter_type: EnumParameterType, payload: Any) -> ModelParameterValue:
    return ModelParameterValue.of(parameter_type, payload)


def robot_parameters() -> dict[str, ModelParameterValue]:
    return {
        "max_speed": value_of(EnumParameterType.DOUBLE, 1.0),
        "retries": value_of(EnumParameterType.INTEGER, 3),
        "use_sim_time": value_of(EnumParameterType.BOOL, False),
        "waypoints": value_of(EnumParameterType.STRING_ARRAY, ("x",)),
    }


def camera_parameters() -> dict[str, ModelParameterValue]:
    return {
        "fps": value_of(EnumParameterType.INTEGER, 30),
        "frame_id": value_of(EnumParameterType.STRING, "camera"),
    }


class InMemoryServiceCaller:
    """In-memory service caller backed by ``{node: {name: value}}``.

    Attributes:
        nodes: Remote parameter state, mutated by set_parameters.
        calls: Every (service, args) received, in order.
        failures: Service name -> exception raised for that service.
        responses: Service name -> payload returned instead of the default.
        gates: Service name -> event awaited before answering.
        ignored_names: Names set_parameters silently leaves unchanged.
    """

    def __init__(self, nodes: dict[str, dict[str, ModelParameterValue]]) -> None:
        self.nodes = nodes
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.failures: dict[str, Exception] = {}
        self.responses: dict[str, dict[str, Any]] = {}
        self.gates: dict[str, asyncio.Event] = {}
        self.ignored_names: set[str] = set()
        assert isinstance(self, ProtocolServiceCaller)

    def count(self, service: str) -> int:
        return sum(1 for called, _ in self.calls if called == service)

    def args_for(self, service: str) -> list[dict[str, Any]]:
        return [args for called, args in self.calls if called == service]

    async def call_service(
        self,
        service: str,
        args: dict[str, Any],
    ) -> dict[str, Any]:
        self.calls.append((service, args))

        gate = self.gates.get(service)
        if gate is not None:
            await gate.wait()

        if service in self.failures:
            raise self.failures[service]
        if service in self.responses:
            return self.responses[service]

        if service == NODES_SERVICE:
            return {"nodes": list(self.nodes)}

        node_name, _, method = service.rpartition("/")
        parameters = self.nodes.get(node_name)
        if parameters is None:
            raise ServiceResponseError(f"Service {service} does not exist")

        if method == "list_parameters":
            return {"result": {"names": list(parameters), "prefixes": []}}
        if method == "get_parameters":
            return {"values": [wire_value(parameters[name]) for name in args["names"]]}
        if method == "set_parameters":
            results = []
            for entry in args["parameters"]:
                if entry["name"] not in self.ignored_names:
                    parameters[entry["name"]] = ModelParameterValue.model_validate(
                        entry["value"]
                    )
                results.append({"successful": True, "reason": ""})
            return {"results": results}
        raise ServiceResponseError(f"Service {service} does not exist")


@pytest.fixture
def caller() -> InMemoryServiceCaller:
    return InMemoryServiceCaller(
        {"/robot": robot_parameters(), "/camera": camera_parameters()}
    )


@pytest.fixture
def session() -> ParameterSession:
    return ParameterSession()


@pytest.fixture
def overlay() -> ParameterOverlay:
    return ParameterOverlay()


@pytest.fixture
def settings() -> ParameterSyncSettings:
    return ParameterSyncSettings(coercion_mode=EnumCoercionMode.STRICT)


@pytest.fixture
def node(
    caller: InMemoryServiceCaller,
    settings: ParameterSyncSettings,
) -> NodeParameterSyncEffect:
    return NodeParameterSyncEffect(caller, settings)
