"""
Hooktheory chord-symbol compiler.

The pipeline:
    symbol string → tokenize → list[Token]
    → parse (code resolvers) → Chord
    → Chord.notes (derived semitone offsets)
"""

from chuk_mcp_chorder.notation.codes import (
    resolve_function,
    resolve_inversion,
    resolve_mode,
    resolve_numeral,
)
from chuk_mcp_chorder.notation.errors import (
    ChordSymbolError,
    EmptyTokenSequenceError,
    InvalidCharacterError,
    InvalidTokenCountError,
    UnexpectedTokenPatternError,
    UnresolvedCodeError,
)
from chuk_mcp_chorder.notation.lexer import (
    CharacterClass,
    Token,
    TokenKind,
    classify_character,
    tokenize,
)
from chuk_mcp_chorder.notation.parser import parse, parse_symbol

__all__ = [
    # Lexer
    "CharacterClass",
    "Token",
    "TokenKind",
    "classify_character",
    "tokenize",
    # Resolvers
    "resolve_function",
    "resolve_inversion",
    "resolve_mode",
    "resolve_numeral",
    # Parser
    "parse",
    "parse_symbol",
    # Errors
    "ChordSymbolError",
    "EmptyTokenSequenceError",
    "InvalidCharacterError",
    "InvalidTokenCountError",
    "UnexpectedTokenPatternError",
    "UnresolvedCodeError",
]
