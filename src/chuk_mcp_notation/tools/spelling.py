"""
Spelling tools - MCP tools for pitch spelling and note arithmetic.

Tools for spelling MIDI pitches in a key, shifting notes by intervals
and describing a spelled note.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, get_args

from chuk_mcp_notation.constants import MIDI_MAX, MIDI_MIN, ErrorMessages, ShiftDirection
from chuk_mcp_notation.core import Interval, Key, Note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _spelled(key: Key, pitch: int) -> dict[str, Any]:
    note = key.spell_note(pitch)
    return {
        "pitch": pitch,
        "note": str(note),
        "note_class": str(note.note_class),
        "octave": note.octave,
        "degree": key.degree_of(note.note_class),
    }


def register_spelling_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register spelling tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def notation_spell_pitch(pitch: int, key: str = "C_major") -> str:
        """
        Spell a MIDI pitch in a key.

        In-key pitches take the key's own spelling; chromatic pitches use
        sharps or flats according to the key.

        Args:
            pitch: MIDI note number (0-127)
            key: Key like 'C_major', 'Db_minor', 'F#_dorian'

        Returns:
            JSON string with the spelled note and its scale degree

        Example:
            notation_spell_pitch(pitch=61, key="Ab_major")
        """
        try:
            if not MIDI_MIN <= pitch <= MIDI_MAX:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=pitch)}
                )

            parsed_key = Key.parse(key)
            return json.dumps(
                {"status": "success", "key": str(parsed_key), **_spelled(parsed_key, pitch)}
            )
        except Exception as e:
            logger.exception("Failed to spell pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_spell_pitch"] = notation_spell_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def notation_spell_pitches(pitches: list[int], key: str = "C_major") -> str:
        """
        Spell a sequence of MIDI pitches in a key.

        Args:
            pitches: MIDI note numbers (0-127)
            key: Key like 'C_major' or 'Eb_minor'

        Returns:
            JSON string with one spelled note per pitch, in input order

        Example:
            notation_spell_pitches(pitches=[60, 63, 67], key="C_minor")
        """
        try:
            bad = [p for p in pitches if not MIDI_MIN <= p <= MIDI_MAX]
            if bad:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=bad[0])}
                )

            parsed_key = Key.parse(key)
            notes = [_spelled(parsed_key, p) for p in pitches]
            return json.dumps(
                {
                    "status": "success",
                    "key": str(parsed_key),
                    "notes": notes,
                    "count": len(notes),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_spell_pitches"] = notation_spell_pitches

    @mcp.tool  # type: ignore[arg-type]
    async def notation_shift_note(note: str, interval: str, direction: str = "up") -> str:
        """
        Shift a spelled note by an interval.

        The letter moves by the interval's degree and the accidental is
        chosen to match its semitones, so C up a minor third is E♭, never D♯.

        Args:
            note: Note like 'C4', 'F#3', 'Bb'
            interval: Interval name like 'm3', 'P5', 'A4', 'M9'
            direction: 'up' or 'down'

        Returns:
            JSON string with the resulting note

        Example:
            notation_shift_note(note="F#4", interval="m3", direction="up")
        """
        try:
            if direction not in get_args(ShiftDirection):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_DIRECTION.format(direction=direction),
                    }
                )

            start = Note.parse(note)
            step = Interval.parse(interval)
            result = start.shift_up(step) if direction == "up" else start.shift_down(step)

            return json.dumps(
                {
                    "status": "success",
                    "from": str(start),
                    "interval": str(step),
                    "direction": direction,
                    "note": str(result),
                    "pitch": result.pitch,
                }
            )
        except Exception as e:
            logger.exception("Failed to shift note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_shift_note"] = notation_shift_note

    @mcp.tool  # type: ignore[arg-type]
    async def notation_describe_note(note: str) -> str:
        """
        Describe a spelled note.

        Args:
            note: Note like 'C#4', 'Ebb3', 'B♯4'

        Returns:
            JSON string with letter, accidental, octave, pitch and index

        Example:
            notation_describe_note(note="B#4")
        """
        try:
            parsed = Note.parse(note)
            return json.dumps(
                {
                    "status": "success",
                    "note": str(parsed),
                    "letter": parsed.letter.name,
                    "accidental": parsed.accidental.value,
                    "octave": parsed.octave,
                    "pitch": parsed.pitch,
                    "pitch_class": parsed.pitch_class,
                    "index": parsed.index,
                }
            )
        except Exception as e:
            logger.exception("Failed to describe note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_describe_note"] = notation_describe_note

    return tools
