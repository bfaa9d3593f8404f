"""
Lexer - character classification and tokenization of chord symbols.

A chord symbol is scanned left to right. Letters become Letter tokens,
a digit becomes a Number token and any digits directly after it are
coalesced into one AdditionalNumbers token. Slashes are recognised but
dropped: the applied-chord shape is recoverable from token kinds alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from chuk_mcp_chorder.notation.errors import EmptyTokenSequenceError, InvalidCharacterError

logger = logging.getLogger(__name__)


class CharacterClass(str, Enum):
    """Lexical classes of a single chord-symbol character."""

    LETTER = "letter"
    DIGIT = "digit"
    SLASH = "slash"
    OTHER = "other"


class TokenKind(str, Enum):
    """Token types produced by the tokenizer."""

    LETTER = "letter"
    NUMBER = "number"
    ADDITIONAL_NUMBERS = "additional_numbers"
    SLASH = "slash"


def classify_character(character: str) -> CharacterClass:
    """
    Classify one character.

    Only ASCII letters and digits are accepted, so symbols outside the
    Hooktheory alphabet fail here instead of at resolution.
    """
    if len(character) != 1:
        raise ValueError(f"Expected a single character, got {character!r}")

    if character.isascii():
        if character.isalpha():
            return CharacterClass.LETTER
        if character.isdigit():
            return CharacterClass.DIGIT
        if character == "/":
            return CharacterClass.SLASH
    return CharacterClass.OTHER


@dataclass(frozen=True, repr=False)
class Token:
    """
    A typed token carrying the raw text it was scanned from.

    Slash tokens carry no value.
    """

    kind: TokenKind
    value: str = ""

    @classmethod
    def letter(cls, value: str) -> Token:
        return cls(TokenKind.LETTER, value)

    @classmethod
    def number(cls, value: str) -> Token:
        return cls(TokenKind.NUMBER, value)

    @classmethod
    def additional_numbers(cls, value: str) -> Token:
        return cls(TokenKind.ADDITIONAL_NUMBERS, value)

    @classmethod
    def slash(cls) -> Token:
        return cls(TokenKind.SLASH)

    def __str__(self) -> str:
        if self.kind == TokenKind.SLASH:
            return "Slash"
        name = "".join(part.capitalize() for part in self.kind.value.split("_"))
        return f"{name}({self.value!r})"

    __repr__ = __str__


def tokenize(symbol: str) -> list[Token]:
    """
    Scan a chord symbol into tokens.

    Args:
        symbol: Hooktheory chord symbol, e.g. 'm164' or '443/7'

    Returns:
        Non-empty list of tokens (slashes removed)

    Raises:
        InvalidCharacterError: A character is not a letter, digit or slash
        EmptyTokenSequenceError: The symbol is empty or only slashes

    Example:
        tokenize("443/7")
        # [Number('4'), AdditionalNumbers('43'), Number('7')]
    """
    tokens: list[Token] = []
    index = 0

    while index < len(symbol):
        character = symbol[index]
        char_class = classify_character(character)

        if char_class == CharacterClass.LETTER:
            tokens.append(Token.letter(character))
            index += 1
        elif char_class == CharacterClass.SLASH:
            index += 1
        elif char_class == CharacterClass.DIGIT:
            tokens.append(Token.number(character))
            end = index + 1
            while end < len(symbol) and classify_character(symbol[end]) == CharacterClass.DIGIT:
                end += 1
            if end > index + 1:
                tokens.append(Token.additional_numbers(symbol[index + 1 : end]))
            index = end
        else:
            raise InvalidCharacterError(character, index)

    if not tokens:
        raise EmptyTokenSequenceError(symbol)

    logger.debug("Tokenized %r -> %s", symbol, tokens)
    return tokens
