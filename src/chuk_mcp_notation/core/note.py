"""
Note - a spelled pitch: NoteClass + octave.

A Note knows its absolute MIDI pitch and a dense index used for NoteSet
membership. Interval shifting (shift_up / shift_down) is where letter distance
and semitone distance are reconciled into a spelling.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import TYPE_CHECKING

from .errors import DomainError, SpellingError
from .interval import Interval
from .pitch import Accidental, Letter, NoteClass, chromatic_spelling, parse_spelling

if TYPE_CHECKING:
    from .key import Key

# Index layout: 7 letters x 5 accidentals per octave
ACCIDENTALS_PER_LETTER = 5
INDEX_STRIDE = 7 * ACCIDENTALS_PER_LETTER

# Octave range of the index domain (MIDI 127 is G9)
MIN_OCTAVE = -1
MAX_OCTAVE = 9
INDEX_COUNT = (MAX_OCTAVE - MIN_OCTAVE + 1) * INDEX_STRIDE

DEFAULT_OCTAVE = 4

# Major-scale semitones per letter step, used to count octaves in interval_to
_DIATONIC_SEMITONES = (0, 2, 4, 5, 7, 9, 11)


@total_ordering
@dataclass(frozen=True, eq=True)
class Note:
    """
    A pitch with a particular spelling.

    Octave numbering follows MIDI convention: C4 = 60. The octave is the
    sounding one (pitch // 12 - 1), so B♯5 is MIDI 72 and C♭3 is MIDI 59.

    Ordering is by (letter, accidental, octave), matching how note names
    are listed rather than how they sound.
    """

    note_class: NoteClass = field(default_factory=NoteClass)
    octave: int = DEFAULT_OCTAVE

    @classmethod
    def make(
        cls,
        letter: Letter | int = Letter.C,
        accidental: Accidental | int = Accidental.NATURAL,
        octave: int = DEFAULT_OCTAVE,
    ) -> Note:
        """Build a note from its parts."""
        return cls(NoteClass(Letter(letter), Accidental(accidental)), octave)

    @classmethod
    def parse(cls, text: str, default_octave: int = DEFAULT_OCTAVE) -> Note:
        """Parse a note like 'C#4', 'Eb', 'B♭3', 'Fx-1'."""
        note_class, octave = parse_spelling(text)
        return cls(note_class, default_octave if octave is None else octave)

    @classmethod
    def from_index(cls, index: int) -> Note:
        """Inverse of Note.index."""
        if not 0 <= index < INDEX_COUNT:
            raise DomainError(f"Note index must be 0-{INDEX_COUNT - 1}, got {index}")
        octave_block, remainder = divmod(index, INDEX_STRIDE)
        letter, accidental_slot = divmod(remainder, ACCIDENTALS_PER_LETTER)
        return cls.make(letter, accidental_slot - 2, octave_block + MIN_OCTAVE)

    @classmethod
    def from_pitch(cls, pitch: int, key: Key | None = None) -> Note:
        """
        Spell a MIDI pitch.

        In-key pitches take the key's own spelling; anything else uses the
        key's chromatic fallback. Without a key, sharps are used (as in
        C major). The octave comes from the pitch alone.
        """
        if key is None:
            note_class = chromatic_spelling(pitch % 12)
        else:
            note_class = key.spell(pitch)
        return cls(note_class, octave_of(pitch))

    @property
    def letter(self) -> Letter:
        return self.note_class.letter

    @property
    def accidental(self) -> Accidental:
        return self.note_class.accidental

    @property
    def pitch(self) -> int:
        """Absolute MIDI pitch, always inside the octave's 12-semitone band."""
        return (self.octave + 1) * 12 + self.pitch_class

    @property
    def pitch_class(self) -> int:
        return self.note_class.pitch_class

    @property
    def index(self) -> int:
        """
        Dense index, unique per exact spelling and octave.

        (octave + 1) * 35 + letter * 5 + (accidental + 2)
        """
        return (
            (self.octave - MIN_OCTAVE) * INDEX_STRIDE
            + self.letter.value * ACCIDENTALS_PER_LETTER
            + (self.accidental.value + 2)
        )

    def spelling(self, key: Key) -> NoteClass:
        """How this note's pitch is spelled in a key."""
        return key.spell(self.pitch)

    def semitones_to(self, other: Note) -> int:
        """Signed semitone distance to another note."""
        return other.pitch - self.pitch

    def interval_to(self, other: Note) -> Interval:
        """
        The ascending interval from this note to a higher (or equal) note.

        Degree comes from letter positions, semitones from pitches. Whole
        octaves are counted from the semitone span since B♯ and C♭ sit in
        the octave they sound in.
        """
        semitones = self.semitones_to(other)
        letter_steps = (other.letter.value - self.letter.value) % 7
        octaves = (semitones - _DIATONIC_SEMITONES[letter_steps] + 6) // 12
        steps = letter_steps + 7 * octaves
        if semitones < 0 or steps < 0:
            raise DomainError(f"{other} is below {self}")
        return Interval(steps + 1, semitones)

    def shift_up(self, interval: Interval) -> Note:
        """
        Spell the note an interval above.

        Raises:
            SpellingError: if no accidental in [-2, +2] fits the target letter
        """
        return self._shift(interval.letter_steps, interval.semitones, interval)

    def shift_down(self, interval: Interval) -> Note:
        """
        Spell the note an interval below.

        Raises:
            SpellingError: if no accidental in [-2, +2] fits the target letter
        """
        return self._shift(-interval.letter_steps, -interval.semitones, interval)

    def _shift(self, letter_steps: int, semitones: int, interval: Interval) -> Note:
        letter = self.letter.shift(letter_steps)
        target = self.pitch + semitones

        # Letter distance and semitone distance meet in the accidental
        for accidental in Accidental:
            if (letter.base_semitone + accidental.value) % 12 == target % 12:
                note_class = NoteClass(letter, accidental)
                return Note(note_class, octave_of(target))

        raise SpellingError(
            f"Cannot spell {interval} from {self}: no accidental on {letter.name} "
            f"reaches pitch class {target % 12}",
            note=self,
            interval=interval,
        )

    def __lt__(self, other: Note) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return (self.letter, self.accidental, self.octave) < (
            other.letter,
            other.accidental,
            other.octave,
        )

    def __str__(self) -> str:
        return f"{self.note_class}{self.octave}"

    def __repr__(self) -> str:
        return f"Note({self.note_class.ascii}{self.octave})"


def octave_of(pitch: int) -> int:
    """Octave of a MIDI pitch, whatever its spelling."""
    return pitch // 12 - 1
