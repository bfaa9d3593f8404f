"""
MCP tool implementations.

Tools are organized by domain:
- notation - Single chord symbols (tokenize, parse, realize)
- progression - Comma-separated progressions and export
"""

from chuk_mcp_chorder.tools.notation import register_notation_tools
from chuk_mcp_chorder.tools.progression import register_progression_tools

__all__ = [
    "register_notation_tools",
    "register_progression_tools",
]
