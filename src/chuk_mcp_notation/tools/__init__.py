"""
MCP tool implementations.

Tools are organized by domain:
- spelling - Pitch spelling and interval shifting
- keys - Key notes, triads, chords and scale/catalog browsing
- midi - Spelling MIDI files
"""

from chuk_mcp_notation.tools.keys import register_key_tools
from chuk_mcp_notation.tools.midi import register_midi_tools
from chuk_mcp_notation.tools.spelling import register_spelling_tools

__all__ = [
    "register_key_tools",
    "register_midi_tools",
    "register_spelling_tools",
]
