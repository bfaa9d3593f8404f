"""
MIDI export - the end of the pipeline.

Compiled chords are realized against a tonic and written as block
chords using mido. All operations are deterministic: same input → same
output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_chorder.core.chord import Chord
    from chuk_mcp_chorder.core.pitch import PitchClass


# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

# Harmony channel (0-indexed)
CHORD_CHANNEL = 0


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
    velocity: int  # 0-127
    channel: int = CHORD_CHANNEL  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    tempo_us = int(60_000_000 / tempo_bpm)
    track.append(MetaMessage("set_tempo", tempo=tempo_us, time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick so repeated chord tones retrigger
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def progression_to_events(
    chords: Sequence[Chord],
    tonic: PitchClass,
    octave: int = 4,
    beats_per_chord: float = 4,
    velocity: float = 0.8,
    channel: int = CHORD_CHANNEL,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay out a progression as consecutive block chords.

    Args:
        chords: Compiled chords, in playing order
        tonic: Pitch class the chord offsets are measured from
        octave: Octave of the tonic
        beats_per_chord: Length of each chord in beats
        velocity: Velocity as 0.0-1.0
        channel: MIDI channel for every note

    Returns:
        MidiEvents ordered by start time
    """
    if beats_per_chord <= 0:
        raise ValueError(f"Beats per chord must be > 0, got {beats_per_chord}")

    duration = beats_to_ticks(beats_per_chord, ticks_per_beat)
    vel = velocity_float_to_int(velocity)

    events: list[MidiEvent] = []
    for position, chord in enumerate(chords):
        start = position * duration
        for pitch in chord.midi_notes(tonic, octave):
            events.append(
                MidiEvent(
                    pitch=pitch,
                    start_ticks=start,
                    duration_ticks=duration,
                    velocity=vel,
                    channel=channel,
                )
            )
    return events


def progression_to_midi(
    chords: Sequence[Chord],
    tonic: PitchClass,
    tempo_bpm: int = 120,
    octave: int = 4,
    beats_per_chord: float = 4,
    velocity: float = 0.8,
) -> MidiFile:
    """Compile a progression straight to a MidiFile."""
    events = progression_to_events(
        chords,
        tonic,
        octave=octave,
        beats_per_chord=beats_per_chord,
        velocity=velocity,
    )
    return events_to_midi(events, tempo_bpm=tempo_bpm)


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat position to ticks."""
    return int(beats * ticks_per_beat)


def velocity_float_to_int(velocity: float) -> int:
    """Convert velocity from 0.0-1.0 range to 0-127."""
    return max(0, min(127, int(velocity * 127)))
