#!/usr/bin/env python3
"""
Entry point for the CHUK Notation MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http) and a project
catalogs directory for custom chord vocabularies.
"""

import argparse
import asyncio
import logging
from pathlib import Path

from chuk_mcp_notation.catalog import ChordCatalogLoader
from chuk_mcp_notation.core import CatalogError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Notation MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--catalogs-dir",
        type=Path,
        default=None,
        help="Directory of project chord catalogs (default: ./catalogs)",
    )
    parser.add_argument(
        "--list-catalogs",
        action="store_true",
        help="Validate and list available chord catalogs, then exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def list_catalogs(loader: ChordCatalogLoader) -> int:
    """Print each catalog with its chord-type count. Returns an exit status."""
    status = 0
    for name in loader.list_catalogs():
        try:
            catalog = loader.load(name)
        except CatalogError as e:
            print(f"{name}: ERROR {e}")
            status = 1
            continue
        print(f"{name}: {len(catalog)} chord types")
    return status


def main(argv: list[str] | None = None) -> int:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_catalogs:
        return list_catalogs(ChordCatalogLoader(project_path=args.catalogs_dir or Path("catalogs")))

    # Tool registration happens at import
    from chuk_mcp_notation.async_server import catalog_loader, mcp

    if args.catalogs_dir is not None:
        catalog_loader.project_path = args.catalogs_dir
        catalog_loader.clear_cache()
        logger.info(f"  Catalogs dir: {args.catalogs_dir}")

    if args.transport == "stdio":
        logger.info("Starting CHUK Notation MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Notation MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
