"""
Pydantic models for the chord system.

This module provides:
- TokenModel: Serializable lexer token
- ChordModel: Serializable chord with derived notes
- ProgressionDocument: Named progression that round-trips through YAML
"""

from chuk_mcp_chorder.models.chord import ChordModel, TokenModel
from chuk_mcp_chorder.models.progression import ProgressionDocument

__all__ = [
    "ChordModel",
    "ProgressionDocument",
    "TokenModel",
]
