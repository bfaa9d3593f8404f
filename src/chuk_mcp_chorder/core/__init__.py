"""
Core music primitives for Hooktheory chords.

- Mode: Diatonic rotations with their interval tables
- Numeral: Scale-degree markers with root index and default mode
- Inversion: Figured-bass markers (only the seventh adds a tone)
- Function: Applied-chord relation markers
- Chord: Parsed chord value with derived notes
- PitchClass: The 12 chromatic pitch classes, for realizing notes
"""

from chuk_mcp_chorder.core.chord import TRIAD_INDICES, Chord, derive_notes
from chuk_mcp_chorder.core.mode import IONIAN_INTERVALS, Function, Inversion, Mode, Numeral
from chuk_mcp_chorder.core.pitch import PitchClass

__all__ = [
    # Vocabulary
    "IONIAN_INTERVALS",
    "Mode",
    "Numeral",
    "Inversion",
    "Function",
    # Chord
    "TRIAD_INDICES",
    "Chord",
    "derive_notes",
    # Pitch
    "PitchClass",
]
