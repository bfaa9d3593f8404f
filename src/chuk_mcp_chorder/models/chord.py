"""
Serializable views of tokens and chords.

The core types are frozen dataclasses and enums; these pydantic models
are what leaves the process (tool responses, exported documents).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_chorder.core.chord import Chord
from chuk_mcp_chorder.notation.lexer import Token, TokenKind


class TokenModel(BaseModel):
    """A single lexer token."""

    kind: TokenKind = Field(..., description="Token type")
    value: str = Field("", description="Raw text the token was scanned from")

    model_config = {"frozen": True}

    @classmethod
    def from_token(cls, token: Token) -> TokenModel:
        return cls(kind=token.kind, value=token.value)


class ChordModel(BaseModel):
    """
    A compiled chord with its derived notes.

    `symbol` is the canonical spelling, which may differ from the input
    (mode letters are normalised, redundant letters dropped).
    """

    symbol: str | None = Field(None, description="Canonical Hooktheory symbol")
    mode: str = Field(..., description="Mode name (ionian ... locrian)")
    numeral: int = Field(..., ge=1, le=7, description="Scale degree 1-7")
    inversion: str | None = Field(None, description="Inversion code (42, 43, 6, 64, 65, 7)")
    function: str | None = Field(None, description="Applied function code (4, 5, 7)")
    applied: bool = Field(False, description="Whether this is an applied chord")
    notes: list[int] = Field(default_factory=list, description="Semitone offsets 0-11")

    model_config = {"frozen": True}

    @classmethod
    def from_chord(cls, chord: Chord) -> ChordModel:
        try:
            symbol: str | None = chord.to_symbol()
        except ValueError:
            symbol = None

        return cls(
            symbol=symbol,
            mode=chord.mode.value,
            numeral=chord.numeral.value,
            inversion=chord.inversion.code if chord.inversion else None,
            function=chord.function.code if chord.function else None,
            applied=chord.is_applied,
            notes=chord.notes,
        )
