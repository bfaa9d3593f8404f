"""
Progressions - comma-separated chains of chord symbols.

The Hooktheory trends service identifies a progression by its `cp`
parameter, e.g. `cp=4,1` or `1,b76,7/5`. This module compiles such a
string into chords and renders chords back into one.

Strict parsing raises on the first bad symbol. Lenient parsing logs and
skips bad symbols so a caller can keep going with the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from chuk_mcp_chorder.constants import PROGRESSION_SEPARATOR
from chuk_mcp_chorder.core.chord import Chord
from chuk_mcp_chorder.notation.errors import ChordSymbolError
from chuk_mcp_chorder.notation.parser import parse_symbol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolError:
    """A chord symbol that failed to compile, with its position."""

    index: int
    symbol: str
    message: str


@dataclass
class ProgressionResult:
    """Result of compiling a progression string."""

    chords: list[Chord] = field(default_factory=list)
    symbols: list[str] = field(default_factory=list)
    errors: list[SymbolError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Whether every symbol compiled."""
        return not self.errors

    def to_cp(self) -> str:
        """Render the compiled chords back into a `cp` string."""
        return format_progression(self.chords)


def split_progression(text: str) -> list[str]:
    """Split a progression on commas, dropping whitespace and empty items."""
    return [part.strip() for part in text.split(PROGRESSION_SEPARATOR) if part.strip()]


def parse_progression(text: str, strict: bool = True) -> ProgressionResult:
    """
    Compile every chord symbol in a progression.

    Args:
        text: Comma-separated chord symbols
        strict: Raise on the first bad symbol instead of skipping it

    Returns:
        ProgressionResult with the compiled chords (and, when lenient,
        the symbols that were skipped)

    Raises:
        ChordSymbolError: In strict mode, the first failure
    """
    result = ProgressionResult()

    for index, symbol in enumerate(split_progression(text)):
        try:
            chord = parse_symbol(symbol)
        except ChordSymbolError as e:
            if strict:
                raise
            logger.warning("Skipping chord symbol %r at position %d: %s", symbol, index, e)
            result.errors.append(SymbolError(index=index, symbol=symbol, message=str(e)))
            continue

        result.chords.append(chord)
        result.symbols.append(symbol)

    return result


def format_progression(chords: Iterable[Chord]) -> str:
    """Join chords into a `cp` string using their canonical symbols."""
    return PROGRESSION_SEPARATOR.join(chord.to_symbol() for chord in chords)


def append_symbol(progression: str, symbol: str) -> str:
    """
    Append a chord symbol to a progression string.

    The symbol is validated first so a progression never accumulates
    something the compiler would reject.

    Raises:
        ChordSymbolError: If the symbol does not compile
    """
    symbol = symbol.strip()
    parse_symbol(symbol)
    symbols = split_progression(progression)
    symbols.append(symbol)
    return PROGRESSION_SEPARATOR.join(symbols)
