"""
MIDI reading - from a MIDI file to spelled notes.

This module pairs note-on/note-off messages into note events using mido,
then spells each event's pitch in a key. A MIDI file only knows pitch
numbers; the key decides whether 61 is C♯ or D♭.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from mido import MidiFile

from chuk_mcp_notation.constants import DRUM_CHANNEL, MIDI_MAX, MIDI_MIN, ErrorMessages
from chuk_mcp_notation.core.key import Key
from chuk_mcp_notation.core.note import Note

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MidiNoteEvent:
    """
    A single note read from a MIDI file.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15 (9 = drums)
    track: int = 0

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not MIDI_MIN <= self.pitch <= MIDI_MAX:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


@dataclass(frozen=True)
class SpelledNote:
    """A MIDI note event together with its spelling in a key."""

    event: MidiNoteEvent
    note: Note

    def to_dict(self) -> dict[str, int | str]:
        return {
            "note": str(self.note),
            "pitch": self.event.pitch,
            "start_ticks": self.event.start_ticks,
            "duration_ticks": self.event.duration_ticks,
            "velocity": self.event.velocity,
            "channel": self.event.channel,
            "track": self.event.track,
        }


def midi_to_events(mid: MidiFile) -> list[MidiNoteEvent]:
    """
    Extract note events from a MidiFile.

    Note-on with velocity 0 counts as note-off. Overlapping notes of the same
    pitch and channel close first-in, first-out. Notes still sounding at the
    end of a track are closed there.

    Returns:
        Events from all tracks, sorted by (start, pitch)
    """
    events: list[MidiNoteEvent] = []

    for track_number, track in enumerate(mid.tracks):
        open_notes: dict[tuple[int, int], list[tuple[int, int]]] = {}
        now = 0

        for msg in track:
            now += msg.time
            if msg.type not in ("note_on", "note_off"):
                continue

            slot = (msg.channel, msg.note)
            if msg.type == "note_on" and msg.velocity > 0:
                open_notes.setdefault(slot, []).append((now, msg.velocity))
                continue

            pending = open_notes.get(slot)
            if not pending:
                logger.debug("Unmatched note_off for %s at tick %d", slot, now)
                continue
            start, velocity = pending.pop(0)
            events.append(
                MidiNoteEvent(
                    pitch=msg.note,
                    start_ticks=start,
                    duration_ticks=now - start,
                    velocity=velocity,
                    channel=msg.channel,
                    track=track_number,
                )
            )

        # Close anything left hanging at end of track
        for (channel, pitch), pending in open_notes.items():
            for start, velocity in pending:
                events.append(
                    MidiNoteEvent(
                        pitch=pitch,
                        start_ticks=start,
                        duration_ticks=now - start,
                        velocity=velocity,
                        channel=channel,
                        track=track_number,
                    )
                )

    events.sort(key=lambda e: (e.start_ticks, e.pitch))
    return events


def spell_events(
    events: Iterable[MidiNoteEvent],
    key: Key,
    include_drums: bool = False,
) -> list[SpelledNote]:
    """
    Spell note events in a key.

    Args:
        events: Note events
        key: Tonal context for spelling
        include_drums: Also spell events on the GM drum channel

    Returns:
        One SpelledNote per kept event, in input order
    """
    spelled: list[SpelledNote] = []
    for event in events:
        if event.channel == DRUM_CHANNEL and not include_drums:
            continue
        spelled.append(SpelledNote(event, key.spell_note(event.pitch)))
    return spelled


def spell_midi_file(
    path: Path | str,
    key: Key,
    include_drums: bool = False,
) -> list[SpelledNote]:
    """
    Read a MIDI file and spell every note in a key.

    Raises:
        FileNotFoundError: if the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(ErrorMessages.MIDI_FILE_NOT_FOUND.format(path=path))

    events = midi_to_events(MidiFile(str(path)))
    spelled = spell_events(events, key, include_drums=include_drums)
    logger.debug("Spelled %d of %d events from %s in %s", len(spelled), len(events), path, key)
    return spelled
