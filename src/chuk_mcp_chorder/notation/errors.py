"""
Chord symbol errors.

Every failure in the notation pipeline is a ChordSymbolError. They are
ValueErrors so callers that already guard parsing with `except ValueError`
keep working; none of them should end the process.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chuk_mcp_chorder.constants import ErrorMessages, Vocabulary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_chorder.notation.lexer import Token


class ChordSymbolError(ValueError):
    """Base class for chord symbol tokenization and parse failures."""


class InvalidCharacterError(ChordSymbolError):
    """A character is neither a letter, a digit nor a slash."""

    def __init__(self, character: str, index: int) -> None:
        self.character = character
        self.index = index
        super().__init__(ErrorMessages.INVALID_CHARACTER.format(character=character, index=index))


class EmptyTokenSequenceError(ChordSymbolError):
    """Tokenization produced no tokens."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(ErrorMessages.EMPTY_SYMBOL.format(symbol=symbol))


class UnresolvedCodeError(ChordSymbolError):
    """A token's text is not a member of the vocabulary it was resolved against."""

    def __init__(self, vocabulary: Vocabulary, code: str) -> None:
        self.vocabulary = vocabulary
        self.code = code
        super().__init__(
            ErrorMessages.UNRESOLVED_CODE.format(vocabulary=vocabulary.value, code=code)
        )


class UnexpectedTokenPatternError(ChordSymbolError):
    """The token kinds match no grammar production."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tuple(tokens)
        pattern = ", ".join(str(token) for token in tokens)
        super().__init__(ErrorMessages.UNEXPECTED_PATTERN.format(pattern=pattern))


class InvalidTokenCountError(ChordSymbolError):
    """Chord symbols are 1-3 tokens long."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tuple(tokens)
        super().__init__(ErrorMessages.INVALID_TOKEN_COUNT.format(count=len(self.tokens)))
