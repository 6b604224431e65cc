"""
Chord primitives - ChordFamily, ChordType, ChordCatalog, Chord.

Chord types are data: an identifier, a printed label and a list of intervals
from the root. The catalog of types is loaded from YAML (see
chuk_mcp_notation.catalog); this module only defines its shape and the
matching of a root + type against a key.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum

from .errors import DomainError, SpellingError
from .interval import Interval
from .note import DEFAULT_OCTAVE, Note
from .note_set import NoteSet
from .pitch import NoteClass

# Degrees above the root of a triad stacked in thirds
TERTIAN_TRIAD_DEGREES: tuple[int, ...] = (3, 5)


class ChordFamily(IntEnum):
    """
    How far a chord type extends above the root.

    Ordered, so a key can ask for "everything up to ninths".
    """

    TRIAD = 3
    SIXTH = 6
    SEVENTH = 7
    NINTH = 9
    ELEVENTH = 11
    THIRTEENTH = 13

    @classmethod
    def parse(cls, name: str) -> ChordFamily:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise DomainError(f"Unknown chord family: {name}") from None


@dataclass(frozen=True)
class ChordType:
    """
    A chord type: intervals measured from the root, not stacked.

    A major triad is root + M3 + P5. The root itself is implied.

    Immutable and hashable.
    """

    identifier: str
    label: str
    intervals: tuple[Interval, ...]
    family: ChordFamily
    description: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(self.intervals))
        if not self.intervals:
            raise DomainError(f"Chord type {self.identifier!r} has no intervals")

    @property
    def tone_count(self) -> int:
        """Number of chord tones including the root."""
        return len(self.intervals) + 1

    def _with_degree(self, simple_degree: int) -> Interval | None:
        for interval in self.intervals:
            if interval.simple_degree == simple_degree and not interval.is_compound:
                return interval
        return None

    @property
    def third(self) -> Interval | None:
        """The third of the chord (if present)."""
        return self._with_degree(3)

    @property
    def fifth(self) -> Interval | None:
        """The fifth of the chord (if present)."""
        return self._with_degree(5)

    @property
    def seventh(self) -> Interval | None:
        """The seventh of the chord (if present)."""
        return self._with_degree(7)

    def __str__(self) -> str:
        return self.identifier

    def __repr__(self) -> str:
        return f"ChordType({self.identifier!r})"


@dataclass(frozen=True)
class ChordCatalog:
    """
    An ordered, read-only table of chord types keyed by identifier.

    Declaration order is significant: key chord lists follow it.
    """

    chord_types: tuple[ChordType, ...]
    name: str = "default"
    version: str = "chord-catalog/v1"
    _by_id: dict[str, ChordType] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chord_types", tuple(self.chord_types))
        by_id: dict[str, ChordType] = {}
        for chord_type in self.chord_types:
            if chord_type.identifier in by_id:
                raise DomainError(f"Duplicate chord type: {chord_type.identifier}")
            by_id[chord_type.identifier] = chord_type
        object.__setattr__(self, "_by_id", by_id)

    @classmethod
    def default(cls) -> ChordCatalog:
        """The catalog shipped with the package."""
        from chuk_mcp_notation.catalog.loader import load_default_catalog

        return load_default_catalog()

    def get(self, identifier: str) -> ChordType:
        """Look up a chord type by identifier."""
        if identifier not in self._by_id:
            raise DomainError(f"Unknown chord type: {identifier}")
        return self._by_id[identifier]

    def up_to(self, max_family: ChordFamily) -> tuple[ChordType, ...]:
        """Chord types whose family is at most max_family, in catalog order."""
        return tuple(t for t in self.chord_types if t.family <= max_family)

    def find(self, intervals: Iterable[Interval]) -> ChordType | None:
        """First chord type with exactly these intervals (order-insensitive)."""
        wanted = frozenset(intervals)
        for chord_type in self.chord_types:
            if frozenset(chord_type.intervals) == wanted:
                return chord_type
        return None

    def triads(self) -> tuple[ChordType, ...]:
        """Triad types built from a third and a fifth, in declaration order."""
        return tuple(
            chord_type
            for chord_type in self.chord_types
            if chord_type.family is ChordFamily.TRIAD
            and tuple(i.degree for i in chord_type.intervals) == TERTIAN_TRIAD_DEGREES
        )

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._by_id

    def __iter__(self) -> Iterator[ChordType]:
        return iter(self.chord_types)

    def __len__(self) -> int:
        return len(self.chord_types)


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a spelled root plus a chord type.

    Chord tones are spelled by shifting the root by each interval, so
    G major is G-B-D and F♯ diminished is F♯-A-C.
    """

    root: NoteClass
    chord_type: ChordType

    def notes(self, octave: int = DEFAULT_OCTAVE) -> list[Note]:
        """
        Chord tones from the root upward.

        Raises:
            SpellingError: if a tone needs more than a double accidental
        """
        root_note = Note(self.root, octave)
        return [root_note] + [root_note.shift_up(i) for i in self.chord_type.intervals]

    @property
    def note_classes(self) -> tuple[NoteClass, ...]:
        """Spelled chord tones, root first."""
        return tuple(note.note_class for note in self.notes())

    def note_set(self, octave: int = DEFAULT_OCTAVE) -> NoteSet:
        return NoteSet(self.notes(octave))

    def get_midi_notes(self, octave: int = DEFAULT_OCTAVE) -> list[int]:
        """MIDI note numbers, root at the given octave."""
        return [note.pitch for note in self.notes(octave)]

    def __str__(self) -> str:
        return f"{self.root}{self.chord_type.label}"

    def __repr__(self) -> str:
        return f"Chord({self.root.ascii}, {self.chord_type.identifier!r})"


def match_chord(
    root: NoteClass,
    chord_type: ChordType,
    note_classes: frozenset[NoteClass],
) -> Chord | None:
    """
    Fit a chord type on a root against a set of allowed spellings.

    Accepted when the root and every spelled tone are among note_classes.
    A tone that cannot be spelled at all rejects the chord.

    Returns:
        The chord, or None if it does not fit
    """
    if root not in note_classes:
        return None
    chord = Chord(root, chord_type)
    try:
        tones = chord.note_classes
    except SpellingError:
        return None
    if all(tone in note_classes for tone in tones):
        return chord
    return None
