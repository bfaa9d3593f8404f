"""
Tests for progression parsing and formatting.
"""

import logging

import pytest

from chuk_mcp_chorder.core import Function, Mode, Numeral
from chuk_mcp_chorder.notation import InvalidCharacterError, UnresolvedCodeError
from chuk_mcp_chorder.progression import (
    append_symbol,
    format_progression,
    parse_progression,
    split_progression,
)


class TestSplitProgression:
    """Tests for split_progression."""

    def test_split(self) -> None:
        """Commas separate symbols."""
        assert split_progression("1,b76,7/5") == ["1", "b76", "7/5"]

    def test_whitespace_and_empties(self) -> None:
        """Whitespace is stripped and empty items dropped."""
        assert split_progression(" 4 , 1,, ") == ["4", "1"]

    def test_empty(self) -> None:
        """Empty text has no symbols."""
        assert split_progression("") == []


class TestParseProgression:
    """Tests for parse_progression."""

    def test_strict_success(self) -> None:
        """All symbols compile in order."""
        result = parse_progression("1,4,57/5,5")
        assert result.ok
        assert [c.numeral for c in result.chords] == [
            Numeral.ONE,
            Numeral.FOUR,
            Numeral.FIVE,
            Numeral.FIVE,
        ]
        assert result.chords[2].function == Function.FIVE
        assert result.symbols == ["1", "4", "57/5", "5"]

    def test_strict_raises_first_error(self) -> None:
        """Strict mode propagates the first failure."""
        with pytest.raises(UnresolvedCodeError):
            parse_progression("1,x4,#")

    def test_lenient_skips(self, caplog: pytest.LogCaptureFixture) -> None:
        """Lenient mode logs and collects failures."""
        with caplog.at_level(logging.WARNING, logger="chuk_mcp_chorder.progression"):
            result = parse_progression("1,x4,5,#", strict=False)

        assert not result.ok
        assert [c.mode for c in result.chords] == [Mode.IONIAN, Mode.MIXOLYDIAN]
        assert [(e.index, e.symbol) for e in result.errors] == [(1, "x4"), (3, "#")]
        assert "Skipping chord symbol 'x4'" in caplog.text

    def test_to_cp(self) -> None:
        """Results render back to canonical symbols."""
        result = parse_progression("d4,B76,7/5")
        assert result.to_cp() == "D4,b76,7/5"


class TestFormatProgression:
    """Tests for format_progression and append_symbol."""

    def test_format(self) -> None:
        """Chords join with commas."""
        result = parse_progression("1,443/7,m164")
        assert format_progression(result.chords) == "1,443/7,M164"

    def test_append_to_empty(self) -> None:
        """Appending to nothing starts a progression."""
        assert append_symbol("", "4") == "4"

    def test_append(self) -> None:
        """Appending adds a comma-separated symbol."""
        assert append_symbol("4", " 1 ") == "4,1"

    def test_append_rejects_invalid(self) -> None:
        """Invalid symbols are never appended."""
        with pytest.raises(InvalidCharacterError):
            append_symbol("4", "1#")
