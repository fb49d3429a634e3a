# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Parameter inspection CLI.

Talks to nodes through a rosbridge-style HTTP service bridge:

    python -m omniparams nodes
    python -m omniparams show /robot
    python -m omniparams --json show /robot
    python -m omniparams set /robot max_speed=2.5 frame_id=map
    python -m omniparams load /robot params.yaml
    python -m omniparams dump /robot -o params.yaml

Environment Variables:
    OMNIPARAMS_BRIDGE_URL: Service bridge base URL (default http://localhost:9091)
    OMNIPARAMS_COERCION_MODE: strict | lenient (default strict)
    LOG_LEVEL: Logging level (default: WARNING)

Exit Codes:
    0 - Success
    1 - Operation failed: a remote call failed or a value was rejected
    2 - Error: CLI usage error or unreadable input file
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from omniparams.clients import ServiceBridgeClient
from omniparams.enums import EnumCoercionMode
from omniparams.nodes.node_parameter_sync_effect import (
    ModelSyncResult,
    NodeParameterSyncEffect,
    ParameterSyncSettings,
)
from omniparams.protocols import ProtocolServiceCaller

# JSON output indentation (spaces)
JSON_INDENT_SPACES = 2

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _get_log_level() -> int:
    """Get log level from environment with safe fallback."""
    level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


logger = logging.getLogger(__name__)


# =============================================================================
# Output formatting
# =============================================================================


def _format_rows_text(node: NodeParameterSyncEffect) -> str:
    rows = node.rows()
    if not rows:
        return f"{node.node_name}: no parameters"
    name_width = max(len(row.name) for row in rows)
    type_width = max(len(row.type_name) for row in rows)
    return "\n".join(
        f"{row.name:<{name_width}}  {row.type_name:<{type_width}}  {row.value}"
        for row in rows
    )


def _format_rows_json(node: NodeParameterSyncEffect) -> str:
    return json.dumps(
        {
            "node": node.node_name,
            "parameters": [
                {"name": row.name, "type": row.type_name, "value": row.value}
                for row in node.rows()
            ],
        },
        indent=JSON_INDENT_SPACES,
    )


def _fail(result: ModelSyncResult) -> int:
    print(
        f"Error: {result.status_message or result.error_message or result.status.value}",
        file=sys.stderr,
    )
    return EXIT_FAILED


def _split_assignment(assignment: str) -> tuple[str, str] | None:
    name, sep, text = assignment.partition("=")
    if not sep or not name:
        return None
    return name, text


# =============================================================================
# Commands
# =============================================================================


async def _cmd_nodes(node: NodeParameterSyncEffect, parsed: argparse.Namespace) -> int:
    result = await node.list_nodes()
    if not result.ok:
        return _fail(result)
    if parsed.json:
        print(json.dumps({"nodes": list(node.nodes)}, indent=JSON_INDENT_SPACES))
    else:
        for name in node.nodes:
            print(name)
    return EXIT_OK


async def _cmd_show(node: NodeParameterSyncEffect, parsed: argparse.Namespace) -> int:
    result = await node.select_node(parsed.node)
    if not result.ok:
        return _fail(result)
    print(_format_rows_json(node) if parsed.json else _format_rows_text(node))
    return EXIT_OK


async def _cmd_set(node: NodeParameterSyncEffect, parsed: argparse.Namespace) -> int:
    assignments: list[tuple[str, str]] = []
    for raw in parsed.assignments:
        split = _split_assignment(raw)
        if split is None:
            print(f"Error: expected name=value, got {raw!r}", file=sys.stderr)
            return EXIT_USAGE
        assignments.append(split)

    result = await node.select_node(parsed.node)
    if not result.ok:
        return _fail(result)

    for name, text in assignments:
        staged = node.stage(name, text)
        if not staged.ok:
            print(f"Error: {name}: {staged.error_message}", file=sys.stderr)
            return EXIT_FAILED

    commit = await node.commit()
    print(commit.status_message or commit.status.value)
    if not commit.ok:
        return EXIT_FAILED
    if commit.refresh is not None and not commit.refresh.ok:
        return _fail(commit.refresh)
    if parsed.json:
        print(_format_rows_json(node))
    return EXIT_OK


async def _cmd_load(node: NodeParameterSyncEffect, parsed: argparse.Namespace) -> int:
    try:
        content = Path(parsed.file).read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    result = await node.select_node(parsed.node)
    if not result.ok:
        return _fail(result)

    loaded = await node.load_parameter_file(content)
    for name in loaded.skipped:
        print(f"Skipped unknown parameter: {name}", file=sys.stderr)
    if not loaded.ok:
        for line in loaded.rejected:
            print(f"Rejected {line}", file=sys.stderr)
        print(f"Error: {loaded.error_message or loaded.status.value}", file=sys.stderr)
        return EXIT_FAILED
    print(f"Loaded {len(loaded.staged)} parameters into {node.node_name}")
    return EXIT_OK


async def _cmd_dump(node: NodeParameterSyncEffect, parsed: argparse.Namespace) -> int:
    result = await node.select_node(parsed.node)
    if not result.ok:
        return _fail(result)
    document = node.dump_parameter_file()
    if parsed.output is None:
        print(document, end="")
        return EXIT_OK
    try:
        Path(parsed.output).write_text(document, encoding="utf-8")
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    return EXIT_OK


_COMMANDS = {
    "nodes": _cmd_nodes,
    "show": _cmd_show,
    "set": _cmd_set,
    "load": _cmd_load,
    "dump": _cmd_dump,
}


async def _run(
    parsed: argparse.Namespace,
    settings: ParameterSyncSettings,
    caller: ProtocolServiceCaller | None,
) -> int:
    command = _COMMANDS[parsed.command]
    if caller is not None:
        return await command(NodeParameterSyncEffect(caller, settings), parsed)
    async with ServiceBridgeClient(settings.to_bridge_config()) as client:
        return await command(NodeParameterSyncEffect(client, settings), parsed)


# =============================================================================
# Entry point
# =============================================================================


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect and edit parameters of remote nodes via a service bridge",
        prog="python -m omniparams",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s nodes                            # List reachable nodes
  %(prog)s show /robot                      # Show typed parameters
  %(prog)s set /robot max_speed=2.5         # Edit and commit
  %(prog)s load /robot params.yaml          # Bulk edit from a parameter file
  %(prog)s dump /robot -o params.yaml       # Save parameters as a file
""",
    )
    parser.add_argument(
        "--bridge-url",
        "-b",
        metavar="URL",
        help="Service bridge base URL (default: $OMNIPARAMS_BRIDGE_URL)",
    )
    parser.add_argument(
        "--coercion-mode",
        choices=[mode.value for mode in EnumCoercionMode],
        help="How edit text is coerced (default: $OMNIPARAMS_COERCION_MODE or strict)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("nodes", help="List nodes")

    show = subparsers.add_parser("show", help="Show a node's parameters")
    show.add_argument("node", help="Node name, e.g. /robot")

    set_ = subparsers.add_parser("set", help="Set parameters and commit")
    set_.add_argument("node", help="Node name, e.g. /robot")
    set_.add_argument(
        "assignments",
        nargs="+",
        metavar="name=value",
        help="Parameter edits; an empty value leaves the parameter unchanged",
    )

    load = subparsers.add_parser("load", help="Load a parameter file and commit")
    load.add_argument("node", help="Node name, e.g. /robot")
    load.add_argument("file", type=Path, help="Parameter file")

    dump = subparsers.add_parser("dump", help="Write parameters as a parameter file")
    dump.add_argument("node", help="Node name, e.g. /robot")
    dump.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        metavar="PATH",
        help="Output file (default: stdout)",
    )
    return parser


def main(
    args: list[str] | None = None,
    *,
    caller: ProtocolServiceCaller | None = None,
) -> int:
    """CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None).
        caller: Service caller to use instead of an HTTP bridge client.

    Returns:
        Exit code following Unix conventions:
            0 - Success
            1 - Operation failed
            2 - Error: CLI usage error or unreadable input file
    """
    logging.basicConfig(
        level=_get_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    parser = _build_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_USAGE

    overrides: dict[str, Any] = {}
    if parsed_args.bridge_url:
        overrides["bridge_url"] = parsed_args.bridge_url
    if parsed_args.coercion_mode:
        overrides["coercion_mode"] = parsed_args.coercion_mode

    try:
        settings = ParameterSyncSettings(**overrides)
    except ValueError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        return asyncio.run(_run(parsed_args, settings, caller))
    except KeyboardInterrupt:
        return EXIT_FAILED
    except Exception as e:
        logger.exception("Unexpected error running %s", parsed_args.command)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
