"""
Unit tests for the omniparams CLI.

Runs ``main()`` against an in-memory service caller; no bridge is needed.
"""

import json

import pytest
import yaml

from omniparams.__main__ import main
from omniparams.nodes.node_parameter_sync_effect.node_tests.conftest import (
    InMemoryServiceCaller,
    camera_parameters,
    robot_parameters,
)
from omniparams.protocols import ServiceConnectionError

pytestmark = pytest.mark.unit


@pytest.fixture
def caller():
    return InMemoryServiceCaller(
        {"/robot": robot_parameters(), "/camera": camera_parameters()}
    )


# ============================================================================
# Usage
# ============================================================================


@pytest.mark.parametrize(
    "args",
    [[], ["bogus"], ["show"], ["set", "/robot"], ["--coercion-mode", "sloppy", "nodes"]],
)
def test_usage_errors_exit_2(args, caller):
    assert main(args, caller=caller) == 2
    assert caller.calls == []


def test_help_exits_0(caller, capsys):
    assert main(["--help"], caller=caller) == 0
    assert "python -m omniparams" in capsys.readouterr().out


# ============================================================================
# nodes / show
# ============================================================================


def test_nodes(caller, capsys):
    assert main(["nodes"], caller=caller) == 0
    assert capsys.readouterr().out.splitlines() == ["/robot", "/camera"]


def test_nodes_json(caller, capsys):
    assert main(["--json", "nodes"], caller=caller) == 0
    assert json.loads(capsys.readouterr().out) == {"nodes": ["/robot", "/camera"]}


def test_nodes_failure_exits_1(caller, capsys):
    caller.failures["/rosapi/nodes"] = ServiceConnectionError("refused")

    assert main(["nodes"], caller=caller) == 1
    assert "Fetching nodes failed: refused" in capsys.readouterr().err


def test_show(caller, capsys):
    assert main(["show", "/robot"], caller=caller) == 0

    rows = [line.split() for line in capsys.readouterr().out.splitlines()]
    assert rows == [
        ["max_speed", "double", "1.0"],
        ["retries", "integer", "3"],
        ["use_sim_time", "boolean", "false"],
        ["waypoints", "string_array", "[x]"],
    ]


def test_show_json(caller, capsys):
    assert main(["--json", "show", "/camera"], caller=caller) == 0

    assert json.loads(capsys.readouterr().out) == {
        "node": "/camera",
        "parameters": [
            {"name": "fps", "type": "integer", "value": "30"},
            {"name": "frame_id", "type": "string", "value": "camera"},
        ],
    }


def test_show_unknown_node_exits_1(caller, capsys):
    assert main(["show", "/nope"], caller=caller) == 1
    assert "Fetching node parameters failed" in capsys.readouterr().err


# ============================================================================
# set
# ============================================================================


def test_set_commits_edits(caller, capsys):
    assert main(["set", "/robot", "max_speed=2.5", "waypoints=a,b"], caller=caller) == 0

    assert caller.nodes["/robot"]["max_speed"].double_value == 2.5
    assert caller.nodes["/robot"]["waypoints"].string_array_value == ("a", "b")
    assert "Sending node parameters done" in capsys.readouterr().out


def test_set_value_may_contain_equals(caller):
    assert main(["set", "/camera", "frame_id=a=b"], caller=caller) == 0
    assert caller.nodes["/camera"]["frame_id"].string_value == "a=b"


def test_set_malformed_assignment_exits_2(caller, capsys):
    assert main(["set", "/robot", "max_speed"], caller=caller) == 2
    assert "expected name=value" in capsys.readouterr().err
    assert caller.calls == []


def test_set_strict_rejection_exits_1(caller, capsys):
    assert main(["set", "/robot", "retries=abc"], caller=caller) == 1
    assert "retries" in capsys.readouterr().err
    assert caller.count("/robot/set_parameters") == 0


def test_set_lenient_mode(caller):
    assert main(
        ["--coercion-mode", "lenient", "set", "/robot", "retries=abc"], caller=caller
    ) == 0
    assert caller.nodes["/robot"]["retries"].integer_value == 0


def test_set_unknown_parameter_exits_1(caller):
    assert main(["set", "/robot", "missing=1"], caller=caller) == 1
    assert caller.count("/robot/set_parameters") == 0


def test_set_failure_exits_1(caller):
    caller.failures["/robot/set_parameters"] = ServiceConnectionError("refused")

    assert main(["set", "/robot", "retries=4"], caller=caller) == 1


# ============================================================================
# load / dump
# ============================================================================


def test_load(caller, capsys, tmp_path):
    path = tmp_path / "robot.yaml"
    path.write_text(
        "robot:\n  ros__parameters:\n    retries: 6\n    unknown: 1\n",
        encoding="utf-8",
    )

    assert main(["load", "/robot", str(path)], caller=caller) == 0

    captured = capsys.readouterr()
    assert caller.nodes["/robot"]["retries"].integer_value == 6
    assert "Loaded 1 parameters into /robot" in captured.out
    assert "Skipped unknown parameter: unknown" in captured.err


def test_load_parse_error_exits_1(caller, capsys, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- orphan\n", encoding="utf-8")

    assert main(["load", "/robot", str(path)], caller=caller) == 1
    assert "line 1" in capsys.readouterr().err
    assert caller.count("/robot/set_parameters") == 0


def test_load_missing_file_exits_2(caller, tmp_path):
    assert main(["load", "/robot", str(tmp_path / "missing.yaml")], caller=caller) == 2
    assert caller.calls == []


def test_dump_to_stdout(caller, capsys):
    assert main(["dump", "/camera"], caller=caller) == 0

    assert yaml.safe_load(capsys.readouterr().out) == {
        "camera": {"ros__parameters": {"fps": 30, "frame_id": "camera"}}
    }


def test_dump_to_file_and_load_back(caller, tmp_path):
    path = tmp_path / "camera.yaml"

    assert main(["dump", "/camera", "-o", str(path)], caller=caller) == 0
    assert main(["load", "/camera", str(path)], caller=caller) == 0

    assert caller.args_for("/camera/set_parameters") == [
        {
            "parameters": [
                {"name": "fps", "value": {"type": 2, "integer_value": 30}},
                {"name": "frame_id", "value": {"type": 4, "string_value": "camera"}},
            ]
        }
    ]
