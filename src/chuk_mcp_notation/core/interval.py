"""
Interval - the dual degree/semitone distance.

An interval carries two independent measurements:
- degree: the letter distance, 1-based (a third spans 3 letters: C-D-E)
- semitones: the true chromatic distance

Both are authoritative. C→E and C→F♭ are both 4 semitones, but only the
first is a third; the degree is what makes spelling arithmetic possible.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar

from .errors import DomainError

MAX_DEGREE = 13

# Semitones of the major/perfect form of each simple degree (1-7)
_MAJOR_PERFECT_SEMITONES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)
_PERFECT_DEGREES = frozenset({1, 4, 5})

_PERFECT_QUALITIES: dict[str, int] = {"d": -1, "P": 0, "A": 1}
_MAJOR_QUALITIES: dict[str, int] = {"d": -2, "m": -1, "M": 0, "A": 1}

_NAME_RE = re.compile(r"^\s*([dmMPA])(\d{1,2})\s*$")


def _simple_degree(degree: int) -> int:
    return (degree - 1) % 7 + 1


def _reference_semitones(degree: int) -> int:
    """Semitones of the major or perfect interval with this degree."""
    octaves, index = divmod(degree - 1, 7)
    return _MAJOR_PERFECT_SEMITONES[index] + 12 * octaves


@total_ordering
@dataclass(frozen=True, eq=True)
class Interval:
    """
    A diatonic distance: letter steps plus semitones.

    Immutable and hashable. Degree is 1-13 (unison to thirteenth).

    Examples:
        Interval(3, 4) = major third (M3)
        Interval(5, 6) = diminished fifth (d5)
        Interval(4, 6) = augmented fourth (A4) - same sound, different letter
    """

    degree: int
    semitones: int

    # Named intervals (defined after class)
    P1: ClassVar[Interval]
    m2: ClassVar[Interval]
    M2: ClassVar[Interval]
    A2: ClassVar[Interval]
    m3: ClassVar[Interval]
    M3: ClassVar[Interval]
    P4: ClassVar[Interval]
    A4: ClassVar[Interval]
    d5: ClassVar[Interval]
    P5: ClassVar[Interval]
    A5: ClassVar[Interval]
    m6: ClassVar[Interval]
    M6: ClassVar[Interval]
    A6: ClassVar[Interval]
    d7: ClassVar[Interval]
    m7: ClassVar[Interval]
    M7: ClassVar[Interval]
    P8: ClassVar[Interval]
    m9: ClassVar[Interval]
    M9: ClassVar[Interval]
    A9: ClassVar[Interval]
    P11: ClassVar[Interval]
    A11: ClassVar[Interval]
    m13: ClassVar[Interval]
    M13: ClassVar[Interval]

    def __post_init__(self) -> None:
        if not 1 <= self.degree <= MAX_DEGREE:
            raise DomainError(f"Interval degree must be 1-{MAX_DEGREE}, got {self.degree}")
        if self.semitones < 0:
            raise DomainError(f"Interval semitones must be >= 0, got {self.semitones}")

    @property
    def letter_steps(self) -> int:
        """Number of letter names crossed (degree - 1)."""
        return self.degree - 1

    @property
    def simple_degree(self) -> int:
        """Degree reduced into a single octave (a ninth is a second)."""
        return _simple_degree(self.degree)

    @property
    def is_compound(self) -> bool:
        """True for intervals wider than an octave."""
        return self.degree > 8

    @property
    def quality(self) -> str | None:
        """
        Quality letter: P, M, m, A or d.

        None when the semitone count is more than one step away from the
        major/perfect reference (e.g. a doubly augmented interval).
        """
        offset = self.semitones - _reference_semitones(self.degree)
        table = (
            _PERFECT_QUALITIES if self.simple_degree in _PERFECT_DEGREES else _MAJOR_QUALITIES
        )
        for quality, quality_offset in table.items():
            if quality_offset == offset:
                return quality
        return None

    @property
    def name(self) -> str | None:
        """Conventional short name like 'M3' or 'd5'."""
        quality = self.quality
        if quality is None:
            return None
        return f"{quality}{self.degree}"

    @classmethod
    def parse(cls, name: str) -> Interval:
        """
        Parse an interval from its short name.

        Quality letters: P (perfect), M (major), m (minor), A (augmented),
        d (diminished). Examples: 'P5', 'm3', 'A11', 'M13'.
        """
        match = _NAME_RE.match(name)
        if match is None:
            raise DomainError(f"Cannot parse interval: {name!r}")
        quality, degree_str = match.groups()
        degree = int(degree_str)
        if not 1 <= degree <= MAX_DEGREE:
            raise DomainError(f"Interval degree must be 1-{MAX_DEGREE}, got {degree}")

        table = _PERFECT_QUALITIES if _simple_degree(degree) in _PERFECT_DEGREES else _MAJOR_QUALITIES
        if quality not in table:
            raise DomainError(f"Quality {quality!r} is not valid for degree {degree}")

        semitones = _reference_semitones(degree) + table[quality]
        return cls(degree, semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return (self.semitones, self.degree) < (other.semitones, other.degree)

    def __str__(self) -> str:
        return self.name or f"Interval({self.degree}, {self.semitones})"

    def __repr__(self) -> str:
        name = self.name
        if name is not None and hasattr(Interval, name):
            return f"Interval.{name}"
        return f"Interval({self.degree}, {self.semitones})"


# Initialize named intervals after class is defined
Interval.P1 = Interval(1, 0)
Interval.m2 = Interval(2, 1)
Interval.M2 = Interval(2, 2)
Interval.A2 = Interval(2, 3)
Interval.m3 = Interval(3, 3)
Interval.M3 = Interval(3, 4)
Interval.P4 = Interval(4, 5)
Interval.A4 = Interval(4, 6)
Interval.d5 = Interval(5, 6)
Interval.P5 = Interval(5, 7)
Interval.A5 = Interval(5, 8)
Interval.m6 = Interval(6, 8)
Interval.M6 = Interval(6, 9)
Interval.A6 = Interval(6, 10)
Interval.d7 = Interval(7, 9)
Interval.m7 = Interval(7, 10)
Interval.M7 = Interval(7, 11)
Interval.P8 = Interval(8, 12)
Interval.m9 = Interval(9, 13)
Interval.M9 = Interval(9, 14)
Interval.A9 = Interval(9, 15)
Interval.P11 = Interval(11, 17)
Interval.A11 = Interval(11, 18)
Interval.m13 = Interval(13, 20)
Interval.M13 = Interval(13, 21)
