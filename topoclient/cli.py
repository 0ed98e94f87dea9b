"""Command line access to the topology analyzer.

Usage:
  topoclient query "g.V().Has('Name', 'br-int')"
  topoclient capture list [--summary]
  topoclient capture create "g.V().Has('Name', 'eth0')" --name eth0 --description "uplink"
  topoclient capture delete 7f1e3c6a-...

The analyzer URL comes from TOPOLOGY_API_URL (or .env) unless --url is given.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any

from topoclient.api.client import TopologyApiClient
from topoclient.config import get_settings
from topoclient.models.schemas import parse_captures
from topoclient.utils.exceptions import TransportError
from topoclient.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="topoclient", description="Topology analyzer client")
    parser.add_argument("--url", default=None, help="Analyzer base URL (overrides TOPOLOGY_API_URL)")
    sub = parser.add_subparsers(dest="command", required=True)

    query = sub.add_parser("query", help="Run a Gremlin query against the topology")
    query.add_argument("gremlin", help="Gremlin traversal expression")

    capture = sub.add_parser("capture", help="Manage captures")
    capture_sub = capture.add_subparsers(dest="action", required=True)
    list_cmd = capture_sub.add_parser("list", help="List captures")
    list_cmd.add_argument("--summary", action="store_true", help="One line per capture instead of raw JSON")

    create = capture_sub.add_parser("create", help="Create a capture")
    create.add_argument("query", help="Gremlin query selecting the interfaces to capture")
    create.add_argument("--name", default=None)
    create.add_argument("--description", default=None)

    delete = capture_sub.add_parser("delete", help="Delete a capture")
    delete.add_argument("uuid")

    return parser


async def run(args: argparse.Namespace) -> Any:
    settings = get_settings()
    if args.url:
        settings.TOPOLOGY_API_URL = args.url

    async with TopologyApiClient.from_settings(settings) as client:
        if args.command == "query":
            return await client.query_topology(args.gremlin)
        if args.action == "list":
            return await client.list_captures()
        if args.action == "create":
            return await client.create_capture(args.query, args.name, args.description)
        await client.delete_capture(args.uuid)
        return None


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    try:
        result = asyncio.run(run(args))
    except TransportError as e:
        print(f"Error: {e}", file=sys.stderr)
        if e.body:
            print(e.body, file=sys.stderr)
        return 1

    if getattr(args, "summary", False):
        for capture in parse_captures(result):
            print(f"{capture.uuid}\t{capture.name or '-'}\t{capture.gremlin_query}")
    elif result is not None:
        print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
