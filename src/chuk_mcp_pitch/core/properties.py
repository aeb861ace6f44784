"""
Pitch properties - read parts of a pitch.

Each function accepts a pitch value or its name. Pitch results are
returned as text when the input was text.
"""

from __future__ import annotations

from typing import Any

from .adapters import interval_op, note_op, pitch_op
from .encoding import decode
from .formatting import interval_number, interval_quality, to_accidentals, to_letter
from .pitch import Interval, Note, PitchClass


@note_op
def pitch_class(note: Any) -> PitchClass | None:
    """Drop the register of a note: 'C#4' -> 'C#'."""
    if not isinstance(note, (Note, PitchClass)):
        return None
    return PitchClass(note.fifths)


@note_op
def chroma(note: Any) -> int | None:
    """Semitones above C (0-11), ignoring register: 'Bb3' -> 10."""
    if not isinstance(note, (Note, PitchClass)):
        return None
    return (note.fifths * 7) % 12


@note_op
def letter(note: Any) -> str | None:
    """Letter name of a note: 'F#4' -> 'F'."""
    if not isinstance(note, (Note, PitchClass)):
        return None
    return to_letter(decode(note).step)


@note_op
def accidentals(note: Any) -> str | None:
    """Accidentals of a note: 'Ebb' -> 'bb'."""
    if not isinstance(note, (Note, PitchClass)):
        return None
    return to_accidentals(decode(note).alteration)


@pitch_op
def octave(pitch: Any) -> int | None:
    """
    Octave of a note, or number of whole octaves of an interval.

    None for pitch classes.
    """
    if not isinstance(pitch, (Note, Interval)):
        return None
    return decode(pitch).octave


@interval_op
def simple_number(interval: Any) -> int | None:
    """Simple interval number (1-7): 'M10' -> 3."""
    if not isinstance(interval, Interval):
        return None
    return decode(interval).step + 1


@interval_op
def number(interval: Any) -> int | None:
    """Signed interval number: 'M10' -> 10, '-P5' -> -5."""
    if not isinstance(interval, Interval):
        return None
    return interval.direction * interval_number(interval)


@interval_op
def quality(interval: Any) -> str | None:
    """Quality letter(s) of an interval: 'm3' -> 'm', '-AA4' -> 'AA'."""
    if not isinstance(interval, Interval):
        return None
    return interval_quality(interval)


@interval_op
def semitones(interval: Any) -> int | None:
    """Signed size of an interval in semitones: 'P5' -> 7, '-M3' -> -4."""
    if not isinstance(interval, Interval):
        return None
    return interval.fifths * 7 + 12 * interval.octaves
