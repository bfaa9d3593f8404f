"""
Progression tools - MCP tools for chord progressions.

Tools for compiling `cp` progression strings, extending them one chord
at a time and exporting them to MIDI or YAML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chorder.compiler import progression_to_midi
from chuk_mcp_chorder.constants import ErrorMessages, SuccessMessages
from chuk_mcp_chorder.models import ChordModel, ProgressionDocument
from chuk_mcp_chorder.notation import ChordSymbolError
from chuk_mcp_chorder.progression import append_symbol, parse_progression, split_progression

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_progression_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register progression tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for exported files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_parse_progression(progression: str, strict: bool = False) -> str:
        """
        Compile a comma-separated progression of chord symbols.

        In lenient mode (default) symbols that fail to compile are
        reported under "skipped" and the rest are still returned.

        Args:
            progression: Chord symbols separated by commas (e.g., "1,b76,7/5,5")
            strict: Fail on the first bad symbol instead of skipping it

        Returns:
            JSON string with compiled chords and any skipped symbols

        Example:
            chorder_parse_progression(progression="1,4,57,1")
        """
        try:
            if not split_progression(progression):
                return json.dumps({"status": "error", "message": ErrorMessages.EMPTY_PROGRESSION})

            result = parse_progression(progression, strict=strict)

            return json.dumps(
                {
                    "status": "success",
                    "chords": [
                        ChordModel.from_chord(c).model_dump(mode="json") for c in result.chords
                    ],
                    "skipped": [
                        {"index": e.index, "symbol": e.symbol, "message": e.message}
                        for e in result.errors
                    ],
                    "message": SuccessMessages.PROGRESSION_PARSED.format(
                        count=len(result.chords), skipped=len(result.errors)
                    ),
                }
            )
        except ChordSymbolError as e:
            return json.dumps(
                {"status": "error", "error_type": type(e).__name__, "message": str(e)}
            )
        except Exception as e:
            logger.exception("Failed to parse progression")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_parse_progression"] = chorder_parse_progression

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_append_chord(progression: str, symbol: str) -> str:
        """
        Append a chord symbol to a progression.

        The symbol is validated before it is appended, so the result is
        always a progression the compiler accepts.

        Args:
            progression: Existing progression (may be empty)
            symbol: Chord symbol to append

        Returns:
            JSON string with the extended progression

        Example:
            chorder_append_chord(progression="4", symbol="1")
        """
        try:
            extended = append_symbol(progression, symbol)
            return json.dumps({"status": "success", "progression": extended})
        except ChordSymbolError as e:
            return json.dumps(
                {"status": "error", "error_type": type(e).__name__, "message": str(e)}
            )
        except Exception as e:
            logger.exception("Failed to append chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_append_chord"] = chorder_append_chord

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_export_midi(
        progression: str,
        tonic: str = "C",
        tempo: int = 120,
        beats_per_chord: float = 4,
        output_name: str = "progression",
    ) -> str:
        """
        Export a progression to a MIDI file of block chords.

        Args:
            progression: Comma-separated chord symbols
            tonic: Tonic the chords are realized against
            tempo: Tempo in BPM
            beats_per_chord: Length of each chord in beats
            output_name: Output filename (without .mid extension)

        Returns:
            JSON string with the output path

        Example:
            chorder_export_midi(progression="1,5,b76,4", tonic="A", tempo=90)
        """
        try:
            document = ProgressionDocument(
                name=output_name,
                tonic=tonic,
                tempo=tempo,
                chords=split_progression(progression),
            )
            chords = document.compile()
            midi = progression_to_midi(
                chords,
                document.get_tonic(),
                tempo_bpm=document.tempo,
                beats_per_chord=beats_per_chord,
            )

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.mid"
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": len(chords),
                    "message": SuccessMessages.MIDI_EXPORTED.format(
                        count=len(chords), path=output_path
                    ),
                }
            )
        except ValidationError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_export_midi"] = chorder_export_midi

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_export_yaml(
        progression: str,
        name: str,
        tonic: str = "C",
        tempo: int = 120,
    ) -> str:
        """
        Export a progression as a YAML document.

        Args:
            progression: Comma-separated chord symbols
            name: Progression name
            tonic: Tonic the chords are realized against
            tempo: Tempo in BPM

        Returns:
            JSON string containing the YAML text

        Example:
            chorder_export_yaml(progression="1,4,5,1", name="cadence")
        """
        try:
            document = ProgressionDocument(
                name=name,
                tonic=tonic,
                tempo=tempo,
                chords=split_progression(progression),
            )
            yaml_str = yaml.safe_dump(
                document.to_yaml_dict(), default_flow_style=False, sort_keys=False
            )
            return json.dumps({"status": "success", "yaml": yaml_str})
        except ValidationError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_export_yaml"] = chorder_export_yaml

    return tools
