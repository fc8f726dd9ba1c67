"""Command line entry point for running searches outside an agent."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any

from loguru import logger

from clixmcp import __version__
from clixmcp.config.loader import load_config
from clixmcp.search.catalog import ALL_CATEGORIES
from clixmcp.tools.factory import build_tool_registry
from clixmcp.tools.search_sdk import PLATFORMS

ERROR_PREFIXES = ("[API Error]", "[Validation Error]", "[Configuration Error]", "[Not Found]", "[Error]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clixmcp",
        description="Search Clix documentation and SDK sources.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    docs = sub.add_parser("search-docs", help="Search the documentation index")
    docs.add_argument("query")
    docs.add_argument("-n", "--max-results", type=int, default=None)

    sdk = sub.add_parser("search-sdk", help="Search SDK source files")
    sdk.add_argument("query")
    sdk.add_argument("-p", "--platform", choices=[*PLATFORMS, ALL_CATEGORIES], default=ALL_CATEGORIES)
    sdk.add_argument("-n", "--max-results", type=int, default=None)

    sub.add_parser("tools", help="List available tools")
    return parser


def _tool_call(args: argparse.Namespace) -> tuple[str, dict[str, Any]]:
    params: dict[str, Any] = {"query": args.query}
    if args.max_results is not None:
        params["maxResults"] = args.max_results
    if args.command == "search-sdk":
        params["platform"] = args.platform
        return "search_sdk", params
    return "search_docs", params


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    config = load_config(args.config)
    registry = build_tool_registry(config)

    if args.command == "tools":
        for name in registry.tool_names:
            print(name)
        return 0

    name, params = _tool_call(args)
    result = asyncio.run(registry.execute(name, params))
    print(result)
    return 1 if result.startswith(ERROR_PREFIXES) else 0
