#!/usr/bin/env python3
"""
Async Chorder MCP Server using chuk-mcp-server

This server exposes the Hooktheory chord-symbol compiler as MCP tools.
Symbols such as "1", "m164", "b76" or "443/7" are compiled into chords
with their scale-degree content.

The server provides tools for:
- Tokenizing and parsing single chord symbols
- Realizing chord notes against a tonic
- Compiling comma-separated progressions
- Exporting progressions to MIDI and YAML
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_chorder.server import OUTPUT_DIR_ENV
from chuk_mcp_chorder.tools import register_notation_tools, register_progression_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-chorder")

# Exported files go to --output-dir, else ./output under the working directory
OUTPUT_DIR = Path(os.environ.get(OUTPUT_DIR_ENV) or Path.cwd() / "output")

# Register all tools
notation_tools = register_notation_tools(mcp)
progression_tools = register_progression_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
chorder_tokenize = notation_tools["chorder_tokenize"]
chorder_parse_chord = notation_tools["chorder_parse_chord"]
chorder_chord_notes = notation_tools["chorder_chord_notes"]
chorder_describe_vocabulary = notation_tools["chorder_describe_vocabulary"]

chorder_parse_progression = progression_tools["chorder_parse_progression"]
chorder_append_chord = progression_tools["chorder_append_chord"]
chorder_export_midi = progression_tools["chorder_export_midi"]
chorder_export_yaml = progression_tools["chorder_export_yaml"]

logger.info("CHUK Chorder MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
