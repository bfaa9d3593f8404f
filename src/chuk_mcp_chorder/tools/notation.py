"""
Notation tools - MCP tools for compiling single chord symbols.

Tools for tokenizing a Hooktheory symbol, parsing it into a chord and
realizing the chord's notes against a tonic.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_chorder.core import Function, Inversion, Mode, Numeral, PitchClass
from chuk_mcp_chorder.models import ChordModel, TokenModel
from chuk_mcp_chorder.notation import ChordSymbolError, parse_symbol, tokenize

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error(e: ChordSymbolError, symbol: str) -> str:
    return json.dumps(
        {
            "status": "error",
            "error_type": type(e).__name__,
            "symbol": symbol,
            "message": str(e),
        }
    )


def register_notation_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register chord-symbol tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_tokenize(symbol: str) -> str:
        """
        Tokenize a Hooktheory chord symbol.

        Shows how the lexer splits a symbol: letters, a leading digit,
        and any digits that follow it coalesced into one token. Slashes
        are dropped.

        Args:
            symbol: Chord symbol (e.g., "m164", "443/7")

        Returns:
            JSON string with the token list

        Example:
            chorder_tokenize(symbol="443/7")
        """
        try:
            tokens = tokenize(symbol)
            return json.dumps(
                {
                    "status": "success",
                    "symbol": symbol,
                    "tokens": [TokenModel.from_token(t).model_dump(mode="json") for t in tokens],
                }
            )
        except ChordSymbolError as e:
            return _error(e, symbol)
        except Exception as e:
            logger.exception("Failed to tokenize symbol")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_tokenize"] = chorder_tokenize

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_parse_chord(symbol: str) -> str:
        """
        Parse a Hooktheory chord symbol into a chord.

        Returns the resolved mode, numeral, inversion and function along
        with the chord's semitone offsets.

        Args:
            symbol: Chord symbol (e.g., "1", "b76", "7/5")

        Returns:
            JSON string with the parsed chord

        Example:
            chorder_parse_chord(symbol="b76")
        """
        try:
            chord = parse_symbol(symbol)
            return json.dumps(
                {
                    "status": "success",
                    "chord": ChordModel.from_chord(chord).model_dump(mode="json"),
                }
            )
        except ChordSymbolError as e:
            return _error(e, symbol)
        except Exception as e:
            logger.exception("Failed to parse chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_parse_chord"] = chorder_parse_chord

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_chord_notes(symbol: str, tonic: str = "C", octave: int = 4) -> str:
        """
        Realize a chord symbol's notes in a key.

        Args:
            symbol: Chord symbol
            tonic: Tonic the offsets are measured from (e.g., "C", "F#", "Bb")
            octave: Octave of the tonic (4 = middle C octave)

        Returns:
            JSON string with offsets, note names and MIDI notes

        Example:
            chorder_chord_notes(symbol="57", tonic="D")
        """
        try:
            chord = parse_symbol(symbol)
            root = PitchClass.parse(tonic)
            prefer_flats = "b" in tonic[1:]

            return json.dumps(
                {
                    "status": "success",
                    "symbol": symbol,
                    "tonic": root.spell(prefer_flats),
                    "offsets": chord.notes,
                    "names": [p.spell(prefer_flats) for p in chord.pitch_classes(root)],
                    "midi": chord.midi_notes(root, octave),
                }
            )
        except ChordSymbolError as e:
            return _error(e, symbol)
        except ValueError as e:
            return json.dumps({"status": "error", "symbol": symbol, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to realize chord notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["chorder_chord_notes"] = chorder_chord_notes

    @mcp.tool  # type: ignore[arg-type]
    async def chorder_describe_vocabulary() -> str:
        """
        Describe the Hooktheory chord-symbol vocabulary.

        Lists every mode letter (with its interval table), numeral,
        inversion and function code accepted by the parser.

        Returns:
            JSON string with the vocabulary tables

        Example:
            chorder_describe_vocabulary()
        """
        return json.dumps(
            {
                "status": "success",
                "modes": [
                    {"name": m.value, "code": m.code, "intervals": list(m.intervals)}
                    for m in Mode
                ],
                "numerals": [
                    {"code": n.code, "root": n.root, "default_mode": n.default_mode.value}
                    for n in Numeral
                ],
                "inversions": [{"name": i.name.lower(), "code": i.code} for i in Inversion],
                "functions": [{"name": f.name.lower(), "code": f.code} for f in Function],
                "grammar": {
                    "simple": "[mode-letter] numeral [inversion]",
                    "applied": "function [inversion] / numeral",
                },
            }
        )

    tools["chorder_describe_vocabulary"] = chorder_describe_vocabulary

    return tools
