#!/usr/bin/env python3
"""
Example: MIDI numbers and frequencies.

This demonstrates converting notes to MIDI numbers and back, and
computing equal-temperament frequencies for different tunings.

Usage:
    python examples/midi_frequencies.py
"""

from chuk_mcp_pitch.core import chromatic_name, frequency, from_midi, midi, to_frequency


def main() -> None:
    """Demonstrate MIDI and frequency conversion."""
    print("CHUK Pitch MIDI Demo")
    print("=" * 40)
    print()

    print("Notes to MIDI:")
    for name in ["C-1", "C4", "B#3", "Cb4", "A4", "G9"]:
        print(f"  {name:4} -> {midi(name)}")
    print()

    # Without a key there is no right spelling for black keys
    sharps = chromatic_name(True)
    print("MIDI to notes (flats / sharps):")
    for m in range(60, 72):
        print(f"  {m} -> {from_midi(m):4} {sharps(m)}")
    print()

    baroque = frequency(415.0)
    print("Frequencies (A4 = 440 / A4 = 415):")
    for name in ["A3", "C4", "A4", "E5"]:
        print(f"  {name:3} -> {to_frequency(name):8.2f} Hz  {baroque(name):8.2f} Hz")


if __name__ == "__main__":
    main()
