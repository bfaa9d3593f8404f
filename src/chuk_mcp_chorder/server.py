#!/usr/bin/env python3
"""
Entry point for the CHUK Chorder MCP Server.

Parses transport options and where exported MIDI files go, then starts
the server over stdio or http.
"""

import argparse
import asyncio
import logging
import os

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Read by async_server when it builds the progression tools
OUTPUT_DIR_ENV = "CHORDER_OUTPUT_DIR"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description="CHUK Chorder MCP Server")
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--port", type=int, default=8000, help="HTTP port (http transport)")
    parser.add_argument("--output-dir", help="Directory for exported MIDI (default: ./output)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.output_dir:
        os.environ[OUTPUT_DIR_ENV] = args.output_dir

    # Tools are registered on import, after the options above are applied
    from chuk_mcp_chorder.async_server import mcp

    logger.info(f"Starting CHUK Chorder MCP Server ({args.transport})")
    if args.transport == "stdio":
        asyncio.run(mcp.run_stdio())
    else:
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
