"""
Tests for core chord primitives.

Tests cover:
- Mode, Numeral, Inversion, Function (mode.py)
- Chord and note derivation (chord.py)
- PitchClass (pitch.py)
"""

import pytest

from chuk_mcp_chorder.core import (
    IONIAN_INTERVALS,
    Chord,
    Function,
    Inversion,
    Mode,
    Numeral,
    PitchClass,
    derive_notes,
)
from chuk_mcp_chorder.notation import parse_symbol


class TestMode:
    """Tests for Mode."""

    def test_ionian_table(self) -> None:
        """Ionian is the major scale."""
        assert Mode.IONIAN.intervals == (0, 2, 4, 5, 7, 9, 11)

    def test_rotations(self) -> None:
        """Each mode rotates the Ionian table left by a fixed amount."""
        expected = {
            Mode.IONIAN: 0,
            Mode.DORIAN: 1,
            Mode.PHRYGIAN: 2,
            Mode.LYDIAN: 3,
            Mode.MIXOLYDIAN: 4,
            Mode.AEOLIAN: 5,
            Mode.LOCRIAN: 6,
        }
        for mode, n in expected.items():
            assert mode.rotation == n
            assert mode.intervals == IONIAN_INTERVALS[n:] + IONIAN_INTERVALS[:n]

    def test_aeolian_table(self) -> None:
        """Aeolian is Ionian rotated by five."""
        assert Mode.AEOLIAN.intervals == (9, 11, 0, 2, 4, 5, 7)

    def test_tables_have_seven_distinct_entries(self) -> None:
        """Every table is a permutation of the Ionian entries."""
        for mode in Mode:
            assert len(mode.intervals) == 7
            assert len(set(mode.intervals)) == 7
            assert sorted(mode.intervals) == list(IONIAN_INTERVALS)

    def test_codes(self) -> None:
        """Canonical letters; Ionian has none."""
        assert Mode.IONIAN.code is None
        assert [m.code for m in list(Mode)[1:]] == ["D", "Y", "L", "M", "b", "C"]


class TestNumeral:
    """Tests for Numeral."""

    def test_roots(self) -> None:
        """Roots are zero-based."""
        assert [n.root for n in Numeral] == [0, 1, 2, 3, 4, 5, 6]

    def test_default_modes(self) -> None:
        """Default modes follow degree order."""
        assert Numeral.ONE.default_mode == Mode.IONIAN
        assert Numeral.TWO.default_mode == Mode.DORIAN
        assert Numeral.THREE.default_mode == Mode.PHRYGIAN
        assert Numeral.FOUR.default_mode == Mode.LYDIAN
        assert Numeral.FIVE.default_mode == Mode.MIXOLYDIAN
        assert Numeral.SIX.default_mode == Mode.AEOLIAN
        assert Numeral.SEVEN.default_mode == Mode.LOCRIAN

    def test_str(self) -> None:
        """Numerals print as their code."""
        assert str(Numeral.FIVE) == "5"


class TestInversion:
    """Tests for Inversion."""

    def test_only_seven_adds_a_tone(self) -> None:
        """The seventh contributes index 6; the rest contribute nothing."""
        assert Inversion.SEVEN.extra_index == 6
        for inversion in Inversion:
            if inversion is not Inversion.SEVEN:
                assert inversion.extra_index is None


class TestDeriveNotes:
    """Tests for note derivation."""

    def test_one_ionian(self) -> None:
        """The tonic triad."""
        assert derive_notes(Chord(Mode.IONIAN, Numeral.ONE)) == [0, 4, 7]

    @pytest.mark.parametrize("numeral", list(Numeral))
    def test_default_mode_triads(self, numeral: Numeral) -> None:
        """Bare numerals use the default mode, transposed and wrapped."""
        chord = parse_symbol(numeral.code)
        table = numeral.default_mode.intervals
        expected = [table[(i + numeral.root) % 7] for i in (0, 2, 4)]
        assert chord.mode == numeral.default_mode
        assert chord.notes == expected

    def test_known_default_triads(self) -> None:
        """Concrete values for a few bare numerals."""
        assert parse_symbol("2").notes == [4, 7, 11]
        assert parse_symbol("5").notes == [2, 5, 9]

    def test_seventh_adds_fourth_note(self) -> None:
        """Inversion seven appends the seventh."""
        assert parse_symbol("17").notes == [0, 4, 7, 11]

    def test_wraparound(self) -> None:
        """Indices past the table wrap to the start."""
        chord = Chord(Mode.IONIAN, Numeral.SEVEN, inversion=Inversion.SEVEN)
        # indices 6, 8, 10, 12 -> 6, 1, 3, 5
        assert chord.notes == [11, 2, 5, 9]

    def test_aeolian_seven_six(self) -> None:
        """b76 uses the Aeolian table; the six inversion adds nothing."""
        assert parse_symbol("b76").notes == [7, 11, 2]

    def test_non_seventh_inversions_keep_triad(self) -> None:
        """Inversions other than seven do not reorder or extend."""
        base = Chord(Mode.DORIAN, Numeral.TWO).notes
        for inversion in Inversion:
            if inversion is Inversion.SEVEN:
                continue
            assert Chord(Mode.DORIAN, Numeral.TWO, inversion=inversion).notes == base

    def test_applied_chords_use_ionian(self) -> None:
        """Applied chords read the Ionian table."""
        assert parse_symbol("7/5").notes == [7, 11, 2]
        assert parse_symbol("57/4").notes == [5, 9, 0, 4]

    def test_notes_are_fresh(self) -> None:
        """Each access returns a new list."""
        chord = Chord(Mode.IONIAN, Numeral.ONE)
        notes = chord.notes
        notes.append(99)
        assert chord.notes == [0, 4, 7]

    def test_offsets_in_range(self) -> None:
        """All offsets are semitones 0-11."""
        for mode in Mode:
            for numeral in Numeral:
                chord = Chord(mode, numeral, inversion=Inversion.SEVEN)
                assert all(0 <= n <= 11 for n in chord.notes)


class TestChord:
    """Tests for Chord."""

    def test_value_semantics(self) -> None:
        """Chords compare and hash by value."""
        a = Chord(Mode.AEOLIAN, Numeral.SEVEN, inversion=Inversion.SIX)
        b = parse_symbol("b76")
        assert a == b
        assert hash(a) == hash(b)

    def test_immutable(self) -> None:
        """Chords are frozen."""
        chord = Chord(Mode.IONIAN, Numeral.ONE)
        with pytest.raises(AttributeError):
            chord.mode = Mode.DORIAN  # type: ignore[misc]

    def test_to_symbol_simple(self) -> None:
        """Default modes are omitted; other modes use canonical letters."""
        assert Chord(Mode.IONIAN, Numeral.ONE).to_symbol() == "1"
        assert Chord(Mode.MIXOLYDIAN, Numeral.FIVE, Inversion.SEVEN).to_symbol() == "57"
        assert Chord(Mode.AEOLIAN, Numeral.SEVEN, Inversion.SIX).to_symbol() == "b76"
        assert Chord(Mode.DORIAN, Numeral.FOUR).to_symbol() == "D4"

    def test_to_symbol_normalises_case(self) -> None:
        """Mode letters come back in canonical case."""
        assert parse_symbol("d4").to_symbol() == "D4"
        assert parse_symbol("B76").to_symbol() == "b76"

    def test_to_symbol_applied(self) -> None:
        """Applied chords render with a slash."""
        assert parse_symbol("7/5").to_symbol() == "7/5"
        assert parse_symbol("443/7").to_symbol() == "443/7"

    def test_to_symbol_unspellable(self) -> None:
        """Ionian on a non-tonic simple chord has no spelling."""
        chord = Chord(Mode.IONIAN, Numeral.FIVE)
        with pytest.raises(ValueError, match="No Hooktheory spelling"):
            chord.to_symbol()
        assert "Chord(" in str(chord)

    def test_is_applied(self) -> None:
        """Only chords with a function are applied."""
        assert not parse_symbol("m164").is_applied
        assert Chord(Mode.IONIAN, Numeral.FIVE, function=Function.FIVE).is_applied

    def test_pitch_classes(self) -> None:
        """Offsets resolve against a tonic."""
        chord = parse_symbol("1")
        assert chord.pitch_classes(PitchClass.D) == [PitchClass.D, PitchClass.Fs, PitchClass.A]

    def test_midi_notes_close_position(self) -> None:
        """MIDI notes ascend from the root."""
        assert parse_symbol("1").midi_notes(PitchClass.C) == [60, 64, 67]
        # [7, 11, 2] -> G4, B4, D5
        assert parse_symbol("b76").midi_notes(PitchClass.C) == [67, 71, 74]

    def test_midi_notes_octave(self) -> None:
        """Octave shifts the whole chord."""
        assert parse_symbol("1").midi_notes(PitchClass.C, octave=3) == [48, 52, 55]

    def test_midi_notes_out_of_range(self) -> None:
        """Notes outside 0-127 are rejected."""
        with pytest.raises(ValueError, match="MIDI note must be 0-127"):
            parse_symbol("17").midi_notes(PitchClass.C, octave=10)
        with pytest.raises(ValueError, match="MIDI note must be 0-127"):
            parse_symbol("1").midi_notes(PitchClass.C, octave=-2)

    def test_midi_notes_range_edges(self) -> None:
        """The lowest and highest octaves that fit are accepted."""
        assert parse_symbol("1").midi_notes(PitchClass.C, octave=-1) == [0, 4, 7]
        assert parse_symbol("1").midi_notes(PitchClass.C, octave=9) == [120, 124, 127]


class TestPitchClass:
    """Tests for PitchClass."""

    def test_parse(self) -> None:
        """Sharp, flat and member names parse."""
        assert PitchClass.parse("C") == PitchClass.C
        assert PitchClass.parse("F#") == PitchClass.Fs
        assert PitchClass.parse("Bb") == PitchClass.As
        assert PitchClass.parse("gs") == PitchClass.Gs

    def test_parse_unknown(self) -> None:
        """Unknown names raise."""
        with pytest.raises(ValueError, match="Unknown pitch class"):
            PitchClass.parse("H")

    def test_transpose_wraps(self) -> None:
        """Transposition wraps the octave."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_to_midi(self) -> None:
        """C4 is 60."""
        assert PitchClass.C.to_midi(4) == 60
        assert PitchClass.A.to_midi(4) == 69

    def test_spell(self) -> None:
        """Sharps by default, flats on request."""
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.As.spell(prefer_flats=True) == "Bb"
