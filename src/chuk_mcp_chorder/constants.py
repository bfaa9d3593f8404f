"""
Constants and enums for the chord notation system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class Vocabulary(str, Enum):
    """
    The closed vocabularies a Hooktheory token can resolve against.

    Carried by resolution errors so callers know which lookup failed.
    """

    MODE = "mode"
    NUMERAL = "numeral"
    INVERSION = "inversion"
    FUNCTION = "function"


# Playback context defaults for progression documents
DEFAULT_TONIC = "C"
DEFAULT_TEMPO = 120

# Separator between chord symbols in a Hooktheory `cp` progression
PROGRESSION_SEPARATOR = ","

# Schema versions - frozen for v1
SchemaVersion = Literal["progression/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_CHARACTER = "Invalid character {character!r} at index {index} in chord symbol."
    EMPTY_SYMBOL = "Chord symbol {symbol!r} produced no tokens."
    UNRESOLVED_CODE = "Unrecognized {vocabulary} code {code!r}."
    UNEXPECTED_PATTERN = "Unexpected token pattern: {pattern}."
    INVALID_TOKEN_COUNT = "Invalid token count {count}; chord symbols have 1-3 tokens."
    EMPTY_PROGRESSION = "Progression contains no chord symbols."


class SuccessMessages:
    """Standardized success messages."""

    PROGRESSION_PARSED = "Parsed {count} chords ({skipped} skipped)."
    MIDI_EXPORTED = "Exported {count} chords to {path}."
