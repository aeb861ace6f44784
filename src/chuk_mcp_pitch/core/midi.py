"""
MIDI note numbers and frequencies.

MIDI numbers range 0-127 with C4 = 60. Frequencies use twelve-tone
equal temperament against a reference (A4 = 440 Hz by default).
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from chuk_mcp_pitch.constants import DEFAULT_REFERENCE_FREQUENCY, MIDI_LIMIT, REFERENCE_MIDI

from .adapters import as_note
from .arithmetic import height
from .encoding import encode
from .formatting import format_note
from .pitch import Note

# Step of each chromatic position; None for positions that need an accidental
CHROMATIC: tuple[int | None, ...] = (0, None, 1, None, 2, 3, None, 4, None, 5, None, 6)


def is_midi(value: Any) -> bool:
    """
    Test if a value is a valid MIDI note number.

    Accepts numbers and digit strings in the range 0-127.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, str):
        return value.isdigit() and int(value) < MIDI_LIMIT
    return isinstance(value, (int, float)) and 0 <= value < MIDI_LIMIT


def midi(value: Any) -> int | float | None:
    """
    Get the MIDI number of a note.

    Args:
        value: A note (name or value) or a MIDI number

    Returns:
        The MIDI number, or None for pitch classes, intervals and
        out-of-range numbers

    Example:
        midi("C4")  # 60
        midi(61)    # 61
    """
    note = as_note(value)
    if isinstance(note, Note):
        return height(note) + 12
    if note is None and is_midi(value):
        return int(value) if isinstance(value, str) else value
    return None


def chromatic_name(use_sharps: bool) -> Callable[[Any], str | None]:
    """
    Get a MIDI number to note name converter.

    Altered notes are spelled with sharps or flats depending on use_sharps.

    Example:
        flats = chromatic_name(False)
        [flats(m) for m in (60, 61, 62, 63)]  # ['C4', 'Db4', 'D4', 'Eb4']
    """

    def name(midi_number: Any) -> str | None:
        if not is_midi(midi_number):
            return None
        m = int(midi_number)
        octave = m // 12 - 1
        step = CHROMATIC[m % 12]
        if step is not None:
            note = encode(step, 0, octave)
        elif use_sharps:
            note = encode(CHROMATIC[(m - 1) % 12], 1, octave)  # type: ignore[arg-type]
        else:
            note = encode(CHROMATIC[(m + 1) % 12], -1, octave)  # type: ignore[arg-type]
        return format_note(note)

    return name


# Without a tonal context there is no right spelling; flats are the convention
from_midi = chromatic_name(False)


def frequency(reference: float = DEFAULT_REFERENCE_FREQUENCY) -> Callable[[Any], float | None]:
    """
    Get an equal-temperament frequency calculator.

    Args:
        reference: Frequency of A4 (MIDI 69) in Hz

    Returns:
        A function from pitch (name, value or MIDI number) to Hz;
        inf for notes too high to represent
    """

    def to_hz(pitch: Any) -> float | None:
        m = midi(pitch)
        if m is None:
            return None
        try:
            return float(2 ** ((m - REFERENCE_MIDI) / 12) * reference)
        except OverflowError:
            return math.inf

    return to_hz


to_frequency = frequency(DEFAULT_REFERENCE_FREQUENCY)
