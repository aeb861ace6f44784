#!/usr/bin/env python3
"""
Example: Spelled pitch arithmetic.

This demonstrates transposition and distance on the line of fifths.
Enharmonic spelling is never lost: a major third above F# is A#, not Bb.

Usage:
    python examples/transpose_and_measure.py
"""

from chuk_mcp_pitch.core import (
    distance,
    harmonize,
    parse_note,
    simplify,
    simplify_ascending,
    sort_pitches,
    transpose,
    transpose_by,
)


def main() -> None:
    """Demonstrate transposition and distance."""
    print("CHUK Pitch Arithmetic Demo")
    print("=" * 40)
    print()

    # Notes are stored as line-of-fifths coordinates
    print("Encoding:")
    for name in ["C4", "F#4", "Gb4", "Bb3"]:
        note = parse_note(name)
        print(f"  {name:4} -> fifths={note.fifths:3}, octaves={note.octaves:3}")
    print()

    # Transposition keeps spelling
    print("Transposition:")
    for pitch, interval in [("C4", "M3"), ("F#", "M3"), ("Gb", "M3"), ("C", "-P5"), ("B3", "m2")]:
        print(f"  {pitch} + {interval} = {transpose(pitch, interval)}")
    print()

    # A fixed interval mapped over a melody
    up_a_fifth = transpose_by("P5")
    melody = ["C4", "D4", "E4", "F4", "G4"]
    print(f"Melody:           {' '.join(melody)}")
    print(f"Up a fifth:       {' '.join(up_a_fifth(note) for note in melody)}")
    print()

    # Distances
    print("Distances:")
    for a, b in [("C2", "C3"), ("G", "B"), ("B", "G"), ("E4", "C4"), ("M2", "P5")]:
        print(f"  {a} -> {b} = {distance(a, b)}")
    print()

    # Simplification
    print("Simplify:")
    for interval in ["M10", "-P11", "-M3"]:
        print(f"  {interval:5} -> {simplify(interval):4} (ascending: {simplify_ascending(interval)})")
    print()

    # Chords and ordering
    print(f"G7 chord:   {harmonize('P1 M3 P5 m7', 'G3')}")
    print(f"Sorted:     {sort_pitches('E5 C4 G4 B3')}")


if __name__ == "__main__":
    main()
