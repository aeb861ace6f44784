"""
Pitch formatting - pitch values to text.

The inverse of the parser:
    Note(0, 4)          -> "C4"
    PitchClass(-2)      -> "Bb"
    Interval(-1, 0, -1) -> "-P5"
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_pitch.constants import LETTERS

from .encoding import DecodedPitch, decode, decode_coordinates
from .notation import alteration_to_quality, interval_type
from .pitch import Interval, Note, PitchClass


def to_letter(step: int) -> str:
    """Letter name of a step."""
    return LETTERS[step % 7]


def to_accidentals(alteration: int) -> str:
    """'#' or 'b' repeated once per alteration."""
    return ("b" if alteration < 0 else "#") * abs(alteration)


def format_note(value: Any) -> str | None:
    """
    Format a note or pitch class.

    Returns None for intervals and non-pitches.
    """
    if not isinstance(value, (Note, PitchClass)):
        return None
    p = decode(value)
    octave = "" if p.octave is None else str(p.octave)
    return to_letter(p.step) + to_accidentals(p.alteration) + octave


def _interval_number(p: DecodedPitch, direction: int) -> int:
    if p.octave is None:
        raise TypeError(f"Interval coordinates need an octave: {p!r}")
    if direction == 1:
        return p.step + 1 + 7 * p.octave
    return (8 - p.step) - 7 * (p.octave + 1)


def _interval_alteration(p: DecodedPitch, direction: int) -> int:
    if direction == 1:
        return p.alteration
    # diminished is one step further from major than from perfect
    if interval_type(p.step + 1) == "P":
        return -p.alteration
    return -(p.alteration + 1)


def interval_number(interval: Interval) -> int:
    """Unsigned interval number (1 = unison, 8 = octave, 10 = tenth...)."""
    return _interval_number(decode_coordinates(interval.fifths, interval.octaves), interval.direction)


def interval_quality(interval: Interval) -> str:
    """Quality letter(s) of an interval: P, M, m, A..., d..."""
    p = decode_coordinates(interval.fifths, interval.octaves)
    number = _interval_number(p, interval.direction)
    return alteration_to_quality(number, _interval_alteration(p, interval.direction))


def format_interval(value: Any) -> str | None:
    """
    Format an interval as <sign><quality><number>.

    Ascending intervals have no sign: "M3", "-P5", "AA4".
    Returns None for notes, pitch classes and non-pitches.
    """
    if not isinstance(value, Interval):
        return None
    sign = "-" if value.direction < 0 else ""
    return f"{sign}{interval_quality(value)}{interval_number(value)}"


def format_pitch(value: Any) -> str | None:
    """Format any pitch value; None for non-pitches."""
    match value:
        case Interval():
            return format_interval(value)
        case Note() | PitchClass():
            return format_note(value)
    return None
