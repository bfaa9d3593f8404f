"""
Parser - assembles a Chord from a token sequence.

The Hooktheory grammar is fixed-depth (1-3 tokens), so parsing is a
single dispatch on the token kinds rather than a recursive descent:

    Letter, Number, AdditionalNumbers  -> mode + numeral + inversion
    Number, AdditionalNumbers, Number  -> function + inversion / numeral (applied)
    Letter, Number                     -> mode + numeral
    Number, AdditionalNumbers          -> numeral + inversion (default mode)
    Number, Number                     -> function / numeral (applied)
    Number                             -> numeral (default mode)

Applied chords are always Ionian.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chuk_mcp_chorder.core.chord import Chord
from chuk_mcp_chorder.core.mode import Mode
from chuk_mcp_chorder.notation.codes import (
    resolve_function,
    resolve_inversion,
    resolve_mode,
    resolve_numeral,
)
from chuk_mcp_chorder.notation.errors import InvalidTokenCountError, UnexpectedTokenPatternError
from chuk_mcp_chorder.notation.lexer import Token, TokenKind, tokenize

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def parse(tokens: Sequence[Token]) -> Chord:
    """
    Parse a token sequence into a Chord.

    Args:
        tokens: Tokens from `tokenize`

    Returns:
        A fully populated Chord

    Raises:
        InvalidTokenCountError: Fewer than 1 or more than 3 tokens
        UnexpectedTokenPatternError: Token kinds match no production
        UnresolvedCodeError: A token's text is not a valid code
    """
    if not 1 <= len(tokens) <= 3:
        raise InvalidTokenCountError(tokens)

    kinds = tuple(token.kind for token in tokens)
    values = [token.value for token in tokens]

    match kinds:
        case (TokenKind.LETTER, TokenKind.NUMBER, TokenKind.ADDITIONAL_NUMBERS):
            mode, numeral, inversion = values
            return Chord(
                mode=resolve_mode(mode),
                numeral=resolve_numeral(numeral),
                inversion=resolve_inversion(inversion),
            )
        case (TokenKind.NUMBER, TokenKind.ADDITIONAL_NUMBERS, TokenKind.NUMBER):
            function, inversion, numeral = values
            return Chord(
                mode=Mode.IONIAN,
                numeral=resolve_numeral(numeral),
                inversion=resolve_inversion(inversion),
                function=resolve_function(function),
            )
        case (TokenKind.LETTER, TokenKind.NUMBER):
            mode, numeral = values
            return Chord(mode=resolve_mode(mode), numeral=resolve_numeral(numeral))
        case (TokenKind.NUMBER, TokenKind.ADDITIONAL_NUMBERS):
            numeral, inversion = values
            resolved = resolve_numeral(numeral)
            return Chord(
                mode=resolved.default_mode,
                numeral=resolved,
                inversion=resolve_inversion(inversion),
            )
        case (TokenKind.NUMBER, TokenKind.NUMBER):
            function, numeral = values
            return Chord(
                mode=Mode.IONIAN,
                numeral=resolve_numeral(numeral),
                function=resolve_function(function),
            )
        case (TokenKind.NUMBER,):
            resolved = resolve_numeral(values[0])
            return Chord(mode=resolved.default_mode, numeral=resolved)
        case _:
            raise UnexpectedTokenPatternError(tokens)


def parse_symbol(symbol: str) -> Chord:
    """
    Tokenize and parse a chord symbol in one step.

    Args:
        symbol: Hooktheory chord symbol, e.g. '1', 'b76', '7/5'

    Returns:
        The parsed Chord

    Raises:
        ChordSymbolError: Any tokenization or parse failure

    Example:
        parse_symbol("b76").notes  # [7, 11, 2]
    """
    chord = parse(tokenize(symbol))
    logger.debug("Parsed %r -> %r", symbol, chord)
    return chord
