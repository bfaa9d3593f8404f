#!/usr/bin/env python3
"""
Example: Compile a Hooktheory progression and write it to MIDI.

Shows the whole pipeline: symbols → tokens → chords → notes → MIDI.

Usage:
    python examples/compile_progression.py
    # Creates: examples/output/progression.mid
"""

from pathlib import Path

from chuk_mcp_chorder.compiler import progression_to_midi
from chuk_mcp_chorder.core import PitchClass
from chuk_mcp_chorder.notation import tokenize
from chuk_mcp_chorder.progression import parse_progression

PROGRESSION = "1,m164,b76,443/7,7/5,5,x9,1"


def main() -> None:
    """Compile the example progression."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    result = parse_progression(PROGRESSION, strict=False)

    print(f"Progression: {PROGRESSION}\n")
    for symbol, chord in zip(result.symbols, result.chords, strict=True):
        tokens = ", ".join(str(t) for t in tokenize(symbol))
        names = " ".join(p.spell() for p in chord.pitch_classes(PitchClass.C))
        print(f"  {symbol:>6}  [{tokens}]")
        print(f"          {chord.mode.value} {chord.numeral} -> {chord.notes} ({names})")

    for error in result.errors:
        print(f"\n  skipped {error.symbol!r}: {error.message}")

    midi = progression_to_midi(result.chords, PitchClass.C, tempo_bpm=96)
    midi.save(str(output_dir / "progression.mid"))
    print(f"\nCreated: {output_dir / 'progression.mid'}")


if __name__ == "__main__":
    main()
