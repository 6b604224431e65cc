#!/usr/bin/env python3
"""
Example: Spell a MIDI file in a key.

Writes a short chromatic line with mido, then spells it in two keys so the
difference between sharp and flat spellings is visible.

Usage:
    python examples/spell_midi.py
    # Creates: examples/output/chromatic_line.mid
"""

from pathlib import Path

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_notation.core import Key
from chuk_mcp_notation.midi import spell_midi_file

TICKS_PER_BEAT = 480


def create_chromatic_line() -> MidiFile:
    """One octave of chromatic quarter notes from middle C."""
    mid = MidiFile(ticks_per_beat=TICKS_PER_BEAT)
    track = MidiTrack()
    mid.tracks.append(track)
    track.append(MetaMessage("set_tempo", tempo=500000, time=0))

    for pitch in range(60, 73):
        track.append(Message("note_on", note=pitch, velocity=90, time=0))
        track.append(Message("note_off", note=pitch, velocity=0, time=TICKS_PER_BEAT))

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def main() -> None:
    """Write the example file and spell it."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    path = output_dir / "chromatic_line.mid"

    create_chromatic_line().save(str(path))
    print(f"Created: {path}")

    for name in ["E_major", "Eb_major"]:
        key = Key.parse(name)
        spelled = spell_midi_file(path, key)
        print(f"\n{key} ({key.preferred_accidental.value}s):")
        print("  " + " ".join(str(s.note) for s in spelled))


if __name__ == "__main__":
    main()
