"""
Scale - an ordered set of tonic-relative intervals.

Each interval is measured from the tonic (not from the previous degree), and
carries its own degree so that every scale tone gets its own letter.
A major scale is: P1 M2 M3 P4 P5 M6 M7.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .errors import DomainError
from .interval import Interval


@dataclass(frozen=True)
class Scale:
    """
    A scale defined by its intervals from the tonic.

    The first interval is the unison. Semitones and degrees both strictly
    ascend and stay within one octave.

    Immutable and hashable.
    """

    intervals: tuple[Interval, ...]
    name: str = ""

    # Common scales (defined after class)
    MAJOR: ClassVar[Scale]
    NATURAL_MINOR: ClassVar[Scale]
    HARMONIC_MINOR: ClassVar[Scale]
    MELODIC_MINOR: ClassVar[Scale]
    DORIAN: ClassVar[Scale]
    PHRYGIAN: ClassVar[Scale]
    LYDIAN: ClassVar[Scale]
    MIXOLYDIAN: ClassVar[Scale]
    LOCRIAN: ClassVar[Scale]
    MAJOR_PENTATONIC: ClassVar[Scale]
    MINOR_PENTATONIC: ClassVar[Scale]

    def __post_init__(self) -> None:
        object.__setattr__(self, "intervals", tuple(self.intervals))
        if not self.intervals:
            raise DomainError("A scale needs at least one interval")
        if self.intervals[0] != Interval.P1:
            raise DomainError(f"A scale must start on the unison, got {self.intervals[0]}")

        for lower, upper in zip(self.intervals, self.intervals[1:]):
            if upper.semitones <= lower.semitones or upper.degree <= lower.degree:
                raise DomainError(f"Scale intervals must ascend: {lower} then {upper}")
        if self.intervals[-1].semitones >= 12 or self.intervals[-1].degree > 7:
            raise DomainError("Scale intervals must stay within one octave")

    @property
    def degree_count(self) -> int:
        """Number of scale degrees (7 for heptatonic scales)."""
        return len(self.intervals)

    @property
    def semitone_offsets(self) -> tuple[int, ...]:
        """Semitones from the tonic to each degree."""
        return tuple(interval.semitones for interval in self.intervals)

    @property
    def steps(self) -> tuple[int, ...]:
        """
        Semitones from each degree to the next, including the octave return.

        Major: (2, 2, 1, 2, 2, 2, 1)
        """
        offsets = self.semitone_offsets + (12,)
        return tuple(upper - lower for lower, upper in zip(offsets, offsets[1:]))

    def interval_at(self, position: int) -> Interval:
        """Interval of a 0-based scale position, wrapping cyclically."""
        return self.intervals[position % self.degree_count]

    @classmethod
    def from_names(cls, names: str, name: str = "") -> Scale:
        """Build a scale from space-separated interval names: 'P1 M2 m3 ...'."""
        return cls(tuple(Interval.parse(part) for part in names.split()), name)

    @classmethod
    def parse(cls, name: str) -> Scale:
        """
        Look up a named scale like 'major', 'minor', 'harmonic_minor'.

        Spaces, hyphens and underscores are interchangeable.
        """
        normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
        if normalized not in SCALES:
            raise DomainError(f"Unknown scale: {name}")
        return SCALES[normalized]

    def __str__(self) -> str:
        return self.name or " ".join(str(interval) for interval in self.intervals)

    def __repr__(self) -> str:
        if self.name:
            return f"Scale.{self.name.upper().replace(' ', '_')}"
        return f"Scale({self.intervals!r})"


Scale.MAJOR = Scale.from_names("P1 M2 M3 P4 P5 M6 M7", "major")
Scale.NATURAL_MINOR = Scale.from_names("P1 M2 m3 P4 P5 m6 m7", "natural minor")
Scale.HARMONIC_MINOR = Scale.from_names("P1 M2 m3 P4 P5 m6 M7", "harmonic minor")
Scale.MELODIC_MINOR = Scale.from_names("P1 M2 m3 P4 P5 M6 M7", "melodic minor")
Scale.DORIAN = Scale.from_names("P1 M2 m3 P4 P5 M6 m7", "dorian")
Scale.PHRYGIAN = Scale.from_names("P1 m2 m3 P4 P5 m6 m7", "phrygian")
Scale.LYDIAN = Scale.from_names("P1 M2 M3 A4 P5 M6 M7", "lydian")
Scale.MIXOLYDIAN = Scale.from_names("P1 M2 M3 P4 P5 M6 m7", "mixolydian")
Scale.LOCRIAN = Scale.from_names("P1 m2 m3 P4 d5 m6 m7", "locrian")
Scale.MAJOR_PENTATONIC = Scale.from_names("P1 M2 M3 P5 M6", "major pentatonic")
Scale.MINOR_PENTATONIC = Scale.from_names("P1 m3 P4 P5 m7", "minor pentatonic")

SCALES: dict[str, Scale] = {
    "major": Scale.MAJOR,
    "ionian": Scale.MAJOR,
    "minor": Scale.NATURAL_MINOR,
    "natural_minor": Scale.NATURAL_MINOR,
    "aeolian": Scale.NATURAL_MINOR,
    "harmonic_minor": Scale.HARMONIC_MINOR,
    "melodic_minor": Scale.MELODIC_MINOR,
    "dorian": Scale.DORIAN,
    "phrygian": Scale.PHRYGIAN,
    "lydian": Scale.LYDIAN,
    "mixolydian": Scale.MIXOLYDIAN,
    "locrian": Scale.LOCRIAN,
    "major_pentatonic": Scale.MAJOR_PENTATONIC,
    "minor_pentatonic": Scale.MINOR_PENTATONIC,
}
