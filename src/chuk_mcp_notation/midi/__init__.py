"""
MIDI reading - turn MIDI files into spelled notes.
"""

from chuk_mcp_notation.midi.reader import (
    MidiNoteEvent,
    SpelledNote,
    midi_to_events,
    spell_events,
    spell_midi_file,
)

__all__ = [
    "MidiNoteEvent",
    "SpelledNote",
    "midi_to_events",
    "spell_events",
    "spell_midi_file",
]
