"""
Compilation pipeline - turns compiled chords into MIDI.

The pipeline:
    cp string → Chords → MidiEvents (block chords) → MIDI File
"""

from chuk_mcp_chorder.compiler.midi import (
    CHORD_CHANNEL,
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    progression_to_events,
    progression_to_midi,
    velocity_float_to_int,
)

__all__ = [
    "CHORD_CHANNEL",
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "progression_to_events",
    "progression_to_midi",
    "velocity_float_to_int",
]
