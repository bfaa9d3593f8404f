"""
Chord primitives - Chord and note derivation.

A Chord is the parsed form of a Hooktheory symbol. Its notes are never
stored: they are derived on demand from the mode table, the numeral's
root and the inversion's extra chord tone.
"""

from __future__ import annotations

from dataclasses import dataclass

from .mode import Function, Inversion, Mode, Numeral
from .pitch import SEMITONES_PER_OCTAVE, PitchClass

# Root, third, fifth as scale steps within a mode table
TRIAD_INDICES: tuple[int, ...] = (0, 2, 4)


def derive_notes(chord: Chord) -> list[int]:
    """
    Derive a chord's semitone offsets.

    Steps: start from the triad indices, append the inversion's extra
    index (only the seventh contributes one), transpose by the numeral's
    root, wrap into the 7-entry mode table and look each index up.

    Args:
        chord: The chord to derive notes for

    Returns:
        Semitone offsets (0-11) in root-third-fifth(-seventh) order

    Example:
        derive_notes(Chord(Mode.IONIAN, Numeral.ONE)) == [0, 4, 7]
    """
    indices = list(TRIAD_INDICES)
    if chord.inversion is not None and chord.inversion.extra_index is not None:
        indices.append(chord.inversion.extra_index)

    table = chord.mode.intervals
    return [table[(index + chord.numeral.root) % len(table)] for index in indices]


@dataclass(frozen=True)
class Chord:
    """
    A parsed Hooktheory chord.

    Simple chords carry a mode (explicit letter or the numeral's default)
    and an optional inversion. Applied chords carry a function and are
    always rendered against the Ionian table.

    Immutable and hashable.
    """

    mode: Mode
    numeral: Numeral
    inversion: Inversion | None = None
    function: Function | None = None

    @property
    def notes(self) -> list[int]:
        """Semitone offsets, recomputed on every access."""
        return derive_notes(self)

    @property
    def is_applied(self) -> bool:
        """Whether this is an applied (secondary) chord."""
        return self.function is not None

    def pitch_classes(self, tonic: PitchClass) -> list[PitchClass]:
        """Resolve the note offsets against a tonic."""
        return [tonic.transpose(offset) for offset in self.notes]

    def midi_notes(self, tonic: PitchClass, octave: int = 4) -> list[int]:
        """
        Get MIDI note numbers for this chord in close position.

        The first note is placed in the tonic's octave; every following
        note is lifted by octaves until it sits above the previous one.

        Args:
            tonic: The pitch class the offsets are measured from
            octave: Octave of the tonic (default 4, where C4 = 60)

        Returns:
            Ascending MIDI note numbers

        Raises:
            ValueError: If any note falls outside the MIDI range 0-127
        """
        base = tonic.to_midi(octave)
        result: list[int] = []
        for offset in self.notes:
            note = base + offset
            while result and note <= result[-1]:
                note += SEMITONES_PER_OCTAVE
            if not 0 <= note <= 127:
                raise ValueError(f"MIDI note must be 0-127, got {note} (octave {octave})")
            result.append(note)
        return result

    def to_symbol(self) -> str:
        """
        Render this chord in canonical Hooktheory notation.

        Raises:
            ValueError: If a simple chord's mode has no spelling (Ionian
                on any numeral other than one)
        """
        inversion = self.inversion.code if self.inversion else ""

        if self.function is not None:
            return f"{self.function.code}{inversion}/{self.numeral.code}"

        if self.mode == self.numeral.default_mode:
            letter = ""
        elif self.mode.code is not None:
            letter = self.mode.code
        else:
            raise ValueError(
                f"No Hooktheory spelling for {self.mode.value} on numeral {self.numeral}"
            )

        return f"{letter}{self.numeral.code}{inversion}"

    def __str__(self) -> str:
        try:
            return self.to_symbol()
        except ValueError:
            return repr(self)
