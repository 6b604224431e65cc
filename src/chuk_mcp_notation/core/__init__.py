"""
Core notation primitives - the spelling engine.

These are the invariants that everything else composes on:
- Letter: The seven natural note names (cyclic, period 7)
- Accidental: Semitone offset from double flat to double sharp
- NoteClass: Letter + Accidental, a spelled pitch class
- Interval: Degree (letter distance) + semitones
- Note: NoteClass + octave, with MIDI pitch and interval shifting
- NoteSet: Immutable set algebra over spelled notes
- Scale: Tonic-relative interval pattern
- Key: Tonic + Scale, spells pitches and generates chords
- ChordType / ChordCatalog / Chord: Chord vocabulary and matching
"""

from chuk_mcp_notation.core.chord import (
    Chord,
    ChordCatalog,
    ChordFamily,
    ChordType,
    match_chord,
)
from chuk_mcp_notation.core.errors import (
    CatalogError,
    DomainError,
    NotationError,
    SpellingError,
)
from chuk_mcp_notation.core.interval import Interval
from chuk_mcp_notation.core.key import AccidentalBias, Key
from chuk_mcp_notation.core.note import Note
from chuk_mcp_notation.core.note_set import NoteSet
from chuk_mcp_notation.core.pitch import Accidental, Letter, NoteClass, chromatic_spelling
from chuk_mcp_notation.core.scale import Scale

__all__ = [
    # Pitch
    "Letter",
    "Accidental",
    "NoteClass",
    "chromatic_spelling",
    # Interval and note
    "Interval",
    "Note",
    "NoteSet",
    # Scale and key
    "Scale",
    "Key",
    "AccidentalBias",
    # Chord
    "ChordFamily",
    "ChordType",
    "ChordCatalog",
    "Chord",
    "match_chord",
    # Errors
    "NotationError",
    "DomainError",
    "SpellingError",
    "CatalogError",
]
