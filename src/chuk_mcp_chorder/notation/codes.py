"""
Hooktheory code resolvers.

Pure lookup tables from the raw text of one token to a vocabulary
member. A miss raises UnresolvedCodeError; there are no fallbacks.
"""

from __future__ import annotations

from chuk_mcp_chorder.constants import Vocabulary
from chuk_mcp_chorder.core.mode import Function, Inversion, Mode, Numeral
from chuk_mcp_chorder.notation.errors import UnresolvedCodeError

NUMERAL_CODES: dict[str, Numeral] = {numeral.code: numeral for numeral in Numeral}

# Keys are lowercase; mode letters are matched case-insensitively
MODE_CODES: dict[str, Mode] = {
    mode.code.lower(): mode for mode in Mode if mode.code is not None
}

INVERSION_CODES: dict[str, Inversion] = {inversion.code: inversion for inversion in Inversion}

FUNCTION_CODES: dict[str, Function] = {function.code: function for function in Function}


def resolve_numeral(code: str) -> Numeral:
    """Resolve '1'..'7' to a Numeral."""
    try:
        return NUMERAL_CODES[code]
    except KeyError:
        raise UnresolvedCodeError(Vocabulary.NUMERAL, code) from None


def resolve_mode(code: str) -> Mode:
    """Resolve a mode letter (d, y, l, m, b, c in either case) to a Mode."""
    try:
        return MODE_CODES[code.lower()]
    except KeyError:
        raise UnresolvedCodeError(Vocabulary.MODE, code) from None


def resolve_inversion(code: str) -> Inversion:
    """Resolve '42', '43', '6', '64', '65' or '7' to an Inversion."""
    try:
        return INVERSION_CODES[code]
    except KeyError:
        raise UnresolvedCodeError(Vocabulary.INVERSION, code) from None


def resolve_function(code: str) -> Function:
    """Resolve '4', '5' or '7' to a Function."""
    try:
        return FUNCTION_CODES[code]
    except KeyError:
        raise UnresolvedCodeError(Vocabulary.FUNCTION, code) from None
