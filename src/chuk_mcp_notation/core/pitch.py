"""
Pitch primitives - Letter, Accidental and NoteClass.

These are the foundational spelling types. A Letter is one of the seven
natural note names, an Accidental raises or lowers it by up to two semitones,
and a NoteClass pairs the two. Enharmonic NoteClasses (C♯ and D♭) share a
pitch class but are distinct values: identity is the spelling, never the
pitch class.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from .errors import DomainError

# Semitones above C for each natural letter
_BASE_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

_GLYPHS: dict[int, str] = {-2: "𝄫", -1: "♭", 0: "", 1: "♯", 2: "𝄪"}
_ASCII: dict[int, str] = {-2: "bb", -1: "b", 0: "", 1: "#", 2: "##"}

_ACCIDENTAL_TOKENS: dict[str, int] = {
    "": 0,
    "♮": 0,
    "n": 0,
    "𝄫": -2,
    "bb": -2,
    "♭♭": -2,
    "♭": -1,
    "b": -1,
    "♯": 1,
    "#": 1,
    "𝄪": 2,
    "##": 2,
    "♯♯": 2,
    "x": 2,
}

_SPELLING_RE = re.compile(r"^\s*([A-Ga-g])(𝄫|𝄪|♭♭|♯♯|♭|♯|♮|bb|##|b|#|x|n)?(-?\d+)?\s*$")


class Letter(IntEnum):
    """
    The seven natural note names (C=0 .. B=6).

    Letter arithmetic is cyclic with period 7.
    """

    C = 0
    D = 1
    E = 2
    F = 3
    G = 4
    A = 5
    B = 6

    @classmethod
    def _missing_(cls, value: object) -> Letter:
        raise DomainError(f"Letter must be 0-6, got {value!r}")

    @property
    def base_semitone(self) -> int:
        """Semitones above C of the natural note."""
        return _BASE_SEMITONES[self.value]

    def shift(self, steps: int) -> Letter:
        """Move up (or down, if negative) by letter steps, wrapping mod 7."""
        return Letter((self.value + steps) % 7)


class Accidental(IntEnum):
    """An accidental as a semitone offset in [-2, +2]."""

    DOUBLE_FLAT = -2
    FLAT = -1
    NATURAL = 0
    SHARP = 1
    DOUBLE_SHARP = 2

    @classmethod
    def _missing_(cls, value: object) -> Accidental:
        raise DomainError(f"Accidental must be between -2 and 2, got {value!r}")

    @property
    def glyph(self) -> str:
        """Typographic symbol (empty for natural)."""
        return _GLYPHS[self.value]

    @property
    def ascii(self) -> str:
        """Plain-text symbol (b, #, bb, ##; empty for natural)."""
        return _ASCII[self.value]

    @classmethod
    def parse(cls, token: str) -> Accidental:
        """Parse an accidental from a glyph or ASCII token."""
        if token not in _ACCIDENTAL_TOKENS:
            raise DomainError(f"Unknown accidental: {token!r}")
        return cls(_ACCIDENTAL_TOKENS[token])


@dataclass(frozen=True, order=True)
class NoteClass:
    """
    A spelled, octave-independent note name: Letter + Accidental.

    Examples:
        NoteClass(Letter.C) = C
        NoteClass(Letter.D, Accidental.FLAT) = D♭
        NoteClass(Letter.B, Accidental.SHARP) = B♯ (pitch class 0)
    """

    letter: Letter = Letter.C
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        # Accept plain ints, validating through the enums
        object.__setattr__(self, "letter", Letter(self.letter))
        object.__setattr__(self, "accidental", Accidental(self.accidental))

    @property
    def pitch_class(self) -> int:
        """Chromatic position 0-11, independent of spelling."""
        return (self.letter.base_semitone + self.accidental.value) % 12

    @property
    def ascii(self) -> str:
        """Plain-text name, e.g. 'Db', 'F##'."""
        return f"{self.letter.name}{self.accidental.ascii}"

    def is_enharmonic(self, other: NoteClass) -> bool:
        """True if both spellings denote the same pitch class."""
        return self.pitch_class == other.pitch_class

    @classmethod
    def parse(cls, name: str) -> NoteClass:
        """Parse a note class from a string like 'C', 'C#', 'Db', 'F𝄪'."""
        note_class, octave = parse_spelling(name)
        if octave is not None:
            raise DomainError(f"Unexpected octave in note class: {name!r}")
        return note_class

    def __str__(self) -> str:
        return f"{self.letter.name}{self.accidental.glyph}"

    def __repr__(self) -> str:
        return f"NoteClass({self.ascii})"


def parse_spelling(text: str) -> tuple[NoteClass, int | None]:
    """
    Split a spelling like 'C#4', 'B♭', 'Ebb-1' into a NoteClass and octave.

    Returns:
        (note class, octave or None when no octave was given)
    """
    match = _SPELLING_RE.match(text)
    if match is None:
        raise DomainError(f"Cannot parse note spelling: {text!r}")
    letter_str, accidental_str, octave_str = match.groups()
    note_class = NoteClass(
        Letter[letter_str.upper()],
        Accidental.parse(accidental_str or ""),
    )
    octave = int(octave_str) if octave_str is not None else None
    return note_class, octave


# Chromatic fallback spellings, indexed by pitch class
_SHARP_SPELLINGS: tuple[NoteClass, ...] = (
    NoteClass(Letter.C),
    NoteClass(Letter.C, Accidental.SHARP),
    NoteClass(Letter.D),
    NoteClass(Letter.D, Accidental.SHARP),
    NoteClass(Letter.E),
    NoteClass(Letter.F),
    NoteClass(Letter.F, Accidental.SHARP),
    NoteClass(Letter.G),
    NoteClass(Letter.G, Accidental.SHARP),
    NoteClass(Letter.A),
    NoteClass(Letter.A, Accidental.SHARP),
    NoteClass(Letter.B),
)
_FLAT_SPELLINGS: tuple[NoteClass, ...] = (
    NoteClass(Letter.C),
    NoteClass(Letter.D, Accidental.FLAT),
    NoteClass(Letter.D),
    NoteClass(Letter.E, Accidental.FLAT),
    NoteClass(Letter.E),
    NoteClass(Letter.F),
    NoteClass(Letter.G, Accidental.FLAT),
    NoteClass(Letter.G),
    NoteClass(Letter.A, Accidental.FLAT),
    NoteClass(Letter.A),
    NoteClass(Letter.B, Accidental.FLAT),
    NoteClass(Letter.B),
)


def chromatic_spelling(pitch_class: int, prefer_flats: bool = False) -> NoteClass:
    """
    Context-free spelling of a pitch class.

    Sharps spell upward from the letter below, flats downward from the
    letter above. Total over all 12 pitch classes.
    """
    table = _FLAT_SPELLINGS if prefer_flats else _SHARP_SPELLINGS
    return table[pitch_class % 12]
