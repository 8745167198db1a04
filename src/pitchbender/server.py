#!/usr/bin/env python3
"""
Command-line entry point for the pitchbender MCP server.

    pitchbender                          # stdio, scales from ./scales
    pitchbender --transport http --port 9000
    pitchbender --scales-dir ~/tunings   # project .scl files elsewhere
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Read by pitchbender.async_server when it builds the scale loader
SCALES_DIR_ENV = "PITCHBENDER_SCALES_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the server."""
    parser = argparse.ArgumentParser(
        prog="pitchbender",
        description=(
            "Serve interval conversion (ratios, decimals, cents), Scala scale "
            "parsing and 12-TET pitch classification over MCP."
        ),
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="How MCP clients connect (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on with --transport http (default: 8000)",
    )
    parser.add_argument(
        "--scales-dir",
        default=None,
        help="Directory of project .scl files, overriding the built-in library "
        "(default: ./scales)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log skipped scale files and sample collection",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse options, then start the server on the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.scales_dir:
        os.environ[SCALES_DIR_ENV] = os.path.expanduser(args.scales_dir)

    # The server module builds its scale loader on import
    from pitchbender.async_server import mcp

    if args.transport == "stdio":
        logger.info("pitchbender listening on stdio")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"pitchbender listening on http port {args.port}")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
