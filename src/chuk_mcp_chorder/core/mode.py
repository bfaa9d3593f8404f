"""
Vocabulary primitives - Mode, Numeral, Inversion, Function.

These are the closed vocabularies a Hooktheory chord symbol is built
from. Every member is a process-wide constant looked up by value.

Mode tables are rotations of the Ionian table. They are left unrebased:
each entry is still a semitone offset from the Ionian tonic, so every
chord in a progression shares one reference pitch.
"""

from __future__ import annotations

from enum import Enum

IONIAN_INTERVALS: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)


class Mode(str, Enum):
    """
    The seven diatonic rotations of the major scale.

    Ionian has no Hooktheory letter; it is only reached through
    defaults and applied chords.
    """

    IONIAN = "ionian"
    DORIAN = "dorian"
    PHRYGIAN = "phrygian"
    LYDIAN = "lydian"
    MIXOLYDIAN = "mixolydian"
    AEOLIAN = "aeolian"
    LOCRIAN = "locrian"

    @property
    def rotation(self) -> int:
        """Left rotation applied to the Ionian table (Ionian=0 ... Locrian=6)."""
        return _MODE_ORDER.index(self)

    @property
    def intervals(self) -> tuple[int, ...]:
        """Semitone offsets of the seven scale steps of this mode."""
        n = self.rotation
        return IONIAN_INTERVALS[n:] + IONIAN_INTERVALS[:n]

    @property
    def code(self) -> str | None:
        """Canonical Hooktheory letter, or None for Ionian."""
        return _MODE_CODES.get(self)


_MODE_ORDER: list[Mode] = list(Mode)

# Canonical spelling used when rendering symbols; parsing is case-insensitive
_MODE_CODES: dict[Mode, str] = {
    Mode.DORIAN: "D",
    Mode.PHRYGIAN: "Y",
    Mode.LYDIAN: "L",
    Mode.MIXOLYDIAN: "M",
    Mode.AEOLIAN: "b",
    Mode.LOCRIAN: "C",
}


class Numeral(Enum):
    """
    Scale-degree markers one..seven.

    The value is the 1-based degree; `root` is the 0-based index into a
    mode's interval table.
    """

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7

    @property
    def root(self) -> int:
        return self.value - 1

    @property
    def default_mode(self) -> Mode:
        """Mode used when a simple chord carries no mode letter."""
        return _MODE_ORDER[self.root]

    @property
    def code(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return self.code


class Inversion(str, Enum):
    """
    Figured-bass markers, valued by their Hooktheory code.

    Only SEVEN adds a chord tone (the seventh, index 6). The others are
    stored for round-tripping but leave the derived notes unchanged.
    """

    FOUR_TWO = "42"
    FOUR_THREE = "43"
    SIX = "6"
    SIX_FOUR = "64"
    SIX_FIVE = "65"
    SEVEN = "7"

    @property
    def extra_index(self) -> int | None:
        """Additional scale-step index this marker contributes, if any."""
        return 6 if self is Inversion.SEVEN else None

    @property
    def code(self) -> str:
        return self.value


class Function(str, Enum):
    """Applied-chord relation markers, valued by their Hooktheory code."""

    FOUR = "4"
    FIVE = "5"
    SEVEN = "7"

    @property
    def code(self) -> str:
        return self.value
