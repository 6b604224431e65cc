"""
Key - a spelled tonic plus a scale: the tonal context for spelling.

A key generates one spelled note per scale degree by shifting the tonic by
each scale interval. Everything else follows from those notes: the accidental
bias, the spelling of arbitrary pitches, the primary triads and the in-key
chord list.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .chord import Chord, ChordCatalog, ChordFamily, match_chord
from .errors import DomainError, SpellingError
from .note import DEFAULT_OCTAVE, Note
from .note_set import NoteSet
from .pitch import Accidental, NoteClass, chromatic_spelling
from .scale import Scale

DEFAULT_MAX_FAMILY = ChordFamily.NINTH


class AccidentalBias(str, Enum):
    """Which way a key spells chromatic (out-of-key) pitches."""

    SHARP = "sharp"
    FLAT = "flat"


@dataclass(frozen=True)
class Key:
    """
    A key is a tonic note class plus a scale.

    Examples:
        Key(NoteClass(Letter.C)) = C major
        Key(NoteClass(Letter.C), Scale.NATURAL_MINOR) = C minor
        Key(NoteClass(Letter.D, Accidental.FLAT), Scale.PHRYGIAN) = D♭ phrygian

    bias overrides the derived accidental preference when given.
    """

    root: NoteClass
    scale: Scale = Scale.MAJOR
    bias: AccidentalBias | None = None

    @property
    def notes(self) -> tuple[Note, ...]:
        """Spelled scale notes in degree order, tonic at octave 4."""
        tonic = Note(self.root, DEFAULT_OCTAVE)
        return tuple(tonic.shift_up(interval) for interval in self.scale.intervals)

    @property
    def note_set(self) -> NoteSet:
        return NoteSet(self.notes)

    @property
    def note_classes(self) -> frozenset[NoteClass]:
        return frozenset(note.note_class for note in self.notes)

    @property
    def preferred_accidental(self) -> AccidentalBias:
        """
        The key's accidental bias.

        Sharp tonics prefer sharps and flat tonics prefer flats. A natural
        tonic prefers flats only if its own scale spells a flat
        (F major, D minor), otherwise sharps (C major, A minor).
        """
        if self.bias is not None:
            return self.bias
        if self.root.accidental > Accidental.NATURAL:
            return AccidentalBias.SHARP
        if self.root.accidental < Accidental.NATURAL:
            return AccidentalBias.FLAT
        if any(note.accidental < Accidental.NATURAL for note in self.notes):
            return AccidentalBias.FLAT
        return AccidentalBias.SHARP

    def spell(self, pitch: int) -> NoteClass:
        """
        Spell a pitch (MIDI number or pitch class) in this key.

        In-key pitches get exactly the key's spelling; chromatic pitches get
        the fallback spelling for the key's accidental bias.
        """
        pitch_class = pitch % 12
        for note in self.notes:
            if note.pitch_class == pitch_class:
                return note.note_class
        return chromatic_spelling(
            pitch_class, prefer_flats=self.preferred_accidental is AccidentalBias.FLAT
        )

    def spell_note(self, pitch: int) -> Note:
        """Spell a MIDI pitch as a Note with octave."""
        return Note.from_pitch(pitch, self)

    def contains(self, note_class: NoteClass) -> bool:
        """True if this exact spelling is a scale tone."""
        return note_class in self.note_classes

    def degree_of(self, note_class: NoteClass) -> int | None:
        """
        The 1-based scale degree of a spelling, if it is in the key.

        Returns None for chromatic spellings (including enharmonics of
        scale tones).
        """
        for position, note in enumerate(self.notes):
            if note.note_class == note_class:
                return position + 1
        return None

    def get_primary_triads(self, catalog: ChordCatalog | None = None) -> list[Chord]:
        """
        The triad built on each scale degree from degrees i, i+2, i+4.

        The quality is whatever the scale produces among the catalog's
        third-and-fifth triads; degrees whose stack matches none of them
        (as in pentatonic scales) are skipped.
        """
        if catalog is None:
            catalog = ChordCatalog.default()
        notes = self.notes
        count = len(notes)
        triad_types = catalog.triads()

        triads: list[Chord] = []
        for position in range(count):
            wanted = (
                notes[position].note_class,
                notes[(position + 2) % count].note_class,
                notes[(position + 4) % count].note_class,
            )
            for triad_type in triad_types:
                chord = Chord(wanted[0], triad_type)
                try:
                    tones = chord.note_classes
                except SpellingError:
                    continue
                if tones == wanted:
                    triads.append(chord)
                    break
        return triads

    def get_chords(
        self,
        catalog: ChordCatalog | None = None,
        max_family: ChordFamily = DEFAULT_MAX_FAMILY,
    ) -> list[Chord]:
        """
        Every catalog chord whose spelled tones all lie in the key.

        Ordered by scale-degree root, then catalog declaration order.
        Only chord types up to max_family are considered.
        """
        if catalog is None:
            catalog = ChordCatalog.default()
        allowed = self.note_classes
        candidates = catalog.up_to(max_family)

        chords: list[Chord] = []
        for note in self.notes:
            for chord_type in candidates:
                chord = match_chord(note.note_class, chord_type, allowed)
                if chord is not None:
                    chords.append(chord)
        return chords

    @property
    def primary_triads(self) -> list[Chord]:
        """Primary triads against the shipped catalog."""
        return self.get_primary_triads()

    @property
    def chords(self) -> list[Chord]:
        """In-key chords (up to ninths) against the shipped catalog."""
        return self.get_chords()

    def __str__(self) -> str:
        scale_name = "minor" if self.scale == Scale.NATURAL_MINOR else str(self.scale)
        return f"{self.root} {scale_name}"

    def __repr__(self) -> str:
        return f"Key({self.root!r}, {self.scale!r})"

    @classmethod
    def parse(cls, name: str) -> Key:
        """
        Parse a key from a string like 'C_major', 'D_minor', 'F#_dorian'.

        Args:
            name: Key name with underscore separator

        Returns:
            Parsed Key object
        """
        parts = name.strip().split("_")
        if len(parts) < 2:
            raise DomainError(f"Invalid key format: {name}. Expected 'root_scale' like 'C_major'")

        root = NoteClass.parse(parts[0])
        scale = Scale.parse("_".join(parts[1:]))
        return cls(root, scale)
