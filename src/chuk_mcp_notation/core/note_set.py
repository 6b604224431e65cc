"""
NoteSet - an immutable set of spelled notes.

Backed by a bitmask over the dense Note index domain, so membership and
insertion are O(1) and set algebra is a single integer operation. Identity is
the exact spelling: C♯4 and D♭4 are different members.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .errors import DomainError
from .note import INDEX_COUNT, Note
from .pitch import NoteClass


def _checked_index(note: Note) -> int:
    index = note.index
    if not 0 <= index < INDEX_COUNT:
        raise DomainError(f"{note} is outside the representable note range")
    return index


class NoteSet:
    """
    Duplicate-free, ordered collection of Notes.

    Iteration is in index order (octave, then letter, then accidental).
    Every operation returns a new NoteSet; nothing mutates in place.
    """

    __slots__ = ("_bits",)
    _bits: int

    def __init__(self, notes: Iterable[Note] = ()) -> None:
        bits = 0
        for note in notes:
            bits |= 1 << _checked_index(note)
        object.__setattr__(self, "_bits", bits)

    @classmethod
    def _from_bits(cls, bits: int) -> NoteSet:
        result = cls.__new__(cls)
        object.__setattr__(result, "_bits", bits)
        return result

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def contains(self, note: Note) -> bool:
        """True if this exact spelling (and octave) is a member."""
        index = note.index
        if not 0 <= index < INDEX_COUNT:
            return False
        return bool(self._bits >> index & 1)

    def add(self, note: Note) -> NoteSet:
        """Return a new set including note."""
        return NoteSet._from_bits(self._bits | 1 << _checked_index(note))

    def remove(self, note: Note) -> NoteSet:
        """Return a new set without note (no error if absent)."""
        if not self.contains(note):
            return self
        return NoteSet._from_bits(self._bits & ~(1 << note.index))

    def union(self, other: NoteSet) -> NoteSet:
        return NoteSet._from_bits(self._bits | other._bits)

    def intersection(self, other: NoteSet) -> NoteSet:
        return NoteSet._from_bits(self._bits & other._bits)

    def difference(self, other: NoteSet) -> NoteSet:
        return NoteSet._from_bits(self._bits & ~other._bits)

    def symmetric_difference(self, other: NoteSet) -> NoteSet:
        return NoteSet._from_bits(self._bits ^ other._bits)

    def issubset(self, other: NoteSet) -> bool:
        return self._bits & ~other._bits == 0

    def issuperset(self, other: NoteSet) -> bool:
        return other.issubset(self)

    def isdisjoint(self, other: NoteSet) -> bool:
        return self._bits & other._bits == 0

    @property
    def notes(self) -> tuple[Note, ...]:
        """Members in index order."""
        return tuple(self)

    def sorted(self) -> list[Note]:
        """Members ascending by (letter, accidental, octave)."""
        return sorted(self)

    def note_classes(self) -> frozenset[NoteClass]:
        """Octave-free view of the members' spellings."""
        return frozenset(note.note_class for note in self)

    def pitch_classes(self) -> frozenset[int]:
        """Pitch classes sounded by the members."""
        return frozenset(note.pitch_class for note in self)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Note):
            return False
        return self.contains(item)

    def __iter__(self) -> Iterator[Note]:
        bits = self._bits
        while bits:
            lowest = bits & -bits
            yield Note.from_index(lowest.bit_length() - 1)
            bits ^= lowest

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __bool__(self) -> bool:
        return self._bits != 0

    def __or__(self, other: NoteSet) -> NoteSet:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: NoteSet) -> NoteSet:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: NoteSet) -> NoteSet:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: NoteSet) -> NoteSet:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.symmetric_difference(other)

    def __le__(self, other: NoteSet) -> bool:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.issubset(other)

    def __ge__(self, other: NoteSet) -> bool:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self.issuperset(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NoteSet):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __repr__(self) -> str:
        return f"NoteSet([{', '.join(str(note) for note in self)}])"
