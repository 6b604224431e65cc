#!/usr/bin/env python3
"""
Example: Explore keys, triads and in-key chords.

Shows how the same pitches are spelled differently by key, and lists the
triads and chords each key supports.

Usage:
    python examples/key_chords.py
"""

from chuk_mcp_notation.core import ChordFamily, Interval, Key, Note, NoteSet


def main() -> None:
    """Print notes, triads and chords for a few keys."""
    for name in ["C_major", "G_major", "C#_major", "Cb_major", "C_harmonic_minor", "Db_phrygian"]:
        key = Key.parse(name)
        print(f"{key}:")
        print(f"  notes:  {' '.join(str(n.note_class) for n in key.notes)}")
        print(f"  triads: {' '.join(str(c) for c in key.primary_triads)}")

    print("\nSame pitch, different spelling:")
    for name in ["A_major", "Ab_major", "C_major", "C_minor"]:
        print(f"  61 in {Key.parse(name)}: {Key.parse(name).spell_note(61)}")

    g_major = Key.parse("G_major")
    print(f"\n{g_major} has {len(g_major.chords)} chords up to ninths")
    sevenths = g_major.get_chords(max_family=ChordFamily.SEVENTH)
    print(f"  up to sevenths: {', '.join(str(c) for c in sevenths)}")

    major = Key.parse("C_major").note_set
    minor = Key.parse("C_minor").note_set
    print("\nC major vs C minor:")
    print(f"  common:    {' '.join(str(n.note_class) for n in major & minor)}")
    print(f"  differing: {' '.join(str(n.note_class) for n in major ^ minor)}")

    print("\nInterval shifting:")
    start = Note.parse("C#4")
    for interval in ["M3", "P5", "M7", "A9"]:
        print(f"  {start} + {interval} = {start.shift_up(Interval.parse(interval))}")

    print(f"\nNoteSet of the C major scale: {NoteSet(Key.parse('C_major').notes)!r}")


if __name__ == "__main__":
    main()
