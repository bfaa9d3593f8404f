"""
Pitch primitives - PitchClass.

Chord symbols only describe semitone offsets from an implied tonic.
PitchClass is the tonic (and the resolved chord tones) once a caller
picks a concrete key centre.
"""

from __future__ import annotations

from enum import IntEnum

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]
_FLAT_NAMES: list[str] = ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"]

SEMITONES_PER_OCTAVE = 12


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent. Enharmonic equivalents share the same value
    (C# == Db == 1); spelling is a display concern.
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % SEMITONES_PER_OCTAVE)

    def to_midi(self, octave: int = 4) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * SEMITONES_PER_OCTAVE

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db' or 'Cs'."""
        name = name.strip()

        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        if name in _FLAT_NAMES:
            return cls(_FLAT_NAMES.index(name))

        # Enum member names (C, Cs, D, Ds, ...), case-insensitive
        name_upper = name.upper()
        for member in cls:
            if member.name.upper() == name_upper:
                return member

        raise ValueError(f"Unknown pitch class: {name}")
