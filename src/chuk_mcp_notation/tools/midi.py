"""
MIDI tools - MCP tools for spelling MIDI files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_notation.constants import ErrorMessages, SuccessMessages
from chuk_mcp_notation.core import Key
from chuk_mcp_notation.midi import spell_midi_file

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_midi_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register MIDI tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def notation_spell_midi_file(
        path: str,
        key: str = "C_major",
        include_drums: bool = False,
    ) -> str:
        """
        Spell every note of a MIDI file in a key.

        Drum channel notes are skipped unless include_drums is set.

        Args:
            path: Path to a .mid file
            key: Key like 'Eb_major'
            include_drums: Also spell notes on the GM drum channel

        Returns:
            JSON string with spelled notes and their timing

        Example:
            notation_spell_midi_file(path="output/song.mid", key="Eb_major")
        """
        try:
            midi_path = Path(path)
            if not midi_path.exists():
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.MIDI_FILE_NOT_FOUND.format(path=path),
                    }
                )

            parsed_key = Key.parse(key)
            spelled = spell_midi_file(midi_path, parsed_key, include_drums=include_drums)

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MIDI_SPELLED.format(
                        count=len(spelled), path=path, key=parsed_key
                    ),
                    "key": str(parsed_key),
                    "notes": [s.to_dict() for s in spelled],
                    "count": len(spelled),
                }
            )
        except Exception as e:
            logger.exception("Failed to spell MIDI file")
            return json.dumps({"status": "error", "message": str(e)})

    tools["notation_spell_midi_file"] = notation_spell_midi_file

    return tools
