"""
Progression document - the exportable form of a chord progression.

A document pairs a list of Hooktheory symbols with the context needed
to play them (tonic and tempo). It round-trips through YAML.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_chorder.constants import DEFAULT_TEMPO, DEFAULT_TONIC, SchemaVersion
from chuk_mcp_chorder.core.chord import Chord
from chuk_mcp_chorder.core.pitch import PitchClass
from chuk_mcp_chorder.notation.parser import parse_symbol
from chuk_mcp_chorder.progression import format_progression


class ProgressionDocument(BaseModel):
    """A named chord progression with playback context."""

    schema_version: SchemaVersion = Field("progression/v1", description="Schema version")
    name: str = Field(..., min_length=1, description="Progression name")
    tonic: str = Field(DEFAULT_TONIC, description="Tonic pitch class (e.g. 'C', 'F#', 'Bb')")
    tempo: int = Field(DEFAULT_TEMPO, ge=20, le=300, description="Tempo in BPM")
    chords: list[str] = Field(..., min_length=1, description="Hooktheory chord symbols")

    @field_validator("tonic")
    @classmethod
    def validate_tonic(cls, v: str) -> str:
        """Validate tonic spelling."""
        PitchClass.parse(v)
        return v

    @field_validator("chords")
    @classmethod
    def validate_chords(cls, v: list[str]) -> list[str]:
        """Every symbol must compile."""
        symbols = [symbol.strip() for symbol in v]
        for symbol in symbols:
            parse_symbol(symbol)
        return symbols

    def get_tonic(self) -> PitchClass:
        """Get the tonic as a PitchClass."""
        return PitchClass.parse(self.tonic)

    def compile(self) -> list[Chord]:
        """Compile every symbol into a Chord."""
        return [parse_symbol(symbol) for symbol in self.chords]

    def to_cp(self) -> str:
        """Render the progression as a canonical `cp` string."""
        return format_progression(self.compile())

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dict."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "context": {
                "tonic": self.tonic,
                "tempo": self.tempo,
            },
            "chords": list(self.chords),
        }

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> ProgressionDocument:
        """Create a ProgressionDocument from a YAML-parsed dict."""
        context = data.get("context") or {}
        return cls(
            schema_version=data.get("schema", "progression/v1"),
            name=data["name"],
            tonic=context.get("tonic", DEFAULT_TONIC),
            tempo=context.get("tempo", DEFAULT_TEMPO),
            chords=data["chords"],
        )
