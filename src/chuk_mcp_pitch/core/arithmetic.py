"""
Pitch arithmetic - transposition, distance, simplification and ordering.

On the line of fifths every operation is component-wise integer math:
    transpose: note + interval     (add fifths, add octaves)
    distance:  note_b - note_a     (subtract fifths, subtract octaves)

Operations accept text or pitch values. Text in gives text out,
values in give values out. Anything that does not parse, or mixes
the wrong kinds, gives None.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from .adapters import as_interval, as_note, as_pitch, interval_op, to_interval_text, to_pitch_text
from .encoding import FIFTH_OCTAVES, decode_alteration, decode_step
from .pitch import Interval, Note, Pitch, PitchClass, is_pitch


def interval_direction(fifths: int, octaves: int) -> int:
    """
    Direction of raw interval coordinates: -1 below zero height, else 1.

    At zero height, intervals spelled upward on the line of fifths
    (C4 to B#3) are descending diminished seconds.
    """
    height = 7 * fifths + 12 * octaves
    return -1 if height < 0 or (height == 0 and fifths > 0) else 1


def make_interval(fifths: int, octaves: int) -> Interval:
    """Build an interval from raw coordinates, deriving its direction."""
    return Interval(fifths, octaves, interval_direction(fifths, octaves))


def add(pitch: Pitch | None, interval: Interval) -> Pitch | None:
    """
    Transpose a pitch value by an interval value.

    The result keeps the kind of pitch. Two intervals add up to an interval.
    """
    match pitch:
        case PitchClass(fifths=fifths):
            return PitchClass(fifths + interval.fifths)
        case Note(fifths=fifths, octaves=octaves):
            return Note(fifths + interval.fifths, octaves + interval.octaves)
        case Interval(fifths=fifths, octaves=octaves):
            return make_interval(fifths + interval.fifths, octaves + interval.octaves)
    return None


def _simplify(interval: Any) -> Interval | None:
    if not isinstance(interval, Interval):
        return None
    d = interval.direction
    step = decode_step(d * interval.fifths)
    alteration = decode_alteration(d * interval.fifths)
    return Interval(interval.fifths, -d * (FIFTH_OCTAVES[step] + 4 * alteration), d)


def _simplify_ascending(interval: Any) -> Interval | None:
    simple = _simplify(interval)
    if simple is None or simple.direction == 1:
        return simple
    return Interval(simple.fifths, simple.octaves + 1, 1)


def subtract(a: Pitch | None, b: Pitch | None) -> Interval | None:
    """
    Interval from pitch value a to pitch value b.

    Both must be the same kind. Pitch class distances are always
    ascending and within an octave.
    """
    match (a, b):
        case (PitchClass(), PitchClass()):
            return _simplify_ascending(make_interval(b.fifths - a.fifths, 0))
        case (Note(), Note()) | (Interval(), Interval()):
            return make_interval(b.fifths - a.fifths, b.octaves - a.octaves)
    return None


def _output(result: Pitch | None, *inputs: Any, formatter: Callable[[Any], Any]) -> Any:
    if result is None:
        return None
    if all(is_pitch(value) for value in inputs):
        return result
    return formatter(result)


def _transpose_operands(a: Any, b: Any) -> tuple[Pitch | None, Interval | None]:
    # The second operand is read as an interval unless the first is not a note
    pitch, interval = as_note(a), as_interval(b)
    if pitch is None or isinstance(pitch, Interval):
        pitch, interval = as_note(b), as_interval(a)
    if isinstance(interval, Interval) and pitch is not None and not isinstance(pitch, Interval):
        return pitch, interval
    return None, None


def transpose(a: Any, b: Any) -> Any:
    """
    Transpose a pitch by an interval.

    Exactly one of the operands must be an interval. The interval may come
    first only when the first operand is not a note name. Text in the
    second position is read as an interval name, so transpose("E4", "A4")
    is an augmented fourth above E4, and transpose("A4", "C4") is None.

    Args:
        a: Pitch, note name or interval name
        b: Pitch, note name or interval name

    Returns:
        The transposed pitch (text if any operand was text), or None

    Example:
        transpose("C4", "M3")  # "E4"
        transpose("M3", "C4")  # "E4"
        transpose("C", "-P5")  # "F"
    """
    pitch, interval = _transpose_operands(a, b)
    result = add(pitch, interval) if interval is not None else None
    return _output(result, a, b, formatter=to_pitch_text)


def transpose_by(interval: Any) -> Callable[[Any], Any]:
    """Get a function that transposes pitches by a fixed interval."""
    return lambda pitch: transpose(pitch, interval)


def transpose_from(pitch: Any) -> Callable[[Any], Any]:
    """Get a function that transposes a fixed pitch by intervals."""
    return lambda interval: transpose(pitch, interval)


def add_intervals(a: Any, b: Any) -> Any:
    """
    Add two intervals.

    Example:
        add_intervals("M3", "m3")  # "P5"
    """
    pa = as_interval(a)
    pb = as_interval(b)
    if not (isinstance(pa, Interval) and isinstance(pb, Interval)):
        return None
    return _output(add(pa, pb), a, b, formatter=to_interval_text)


def distance(a: Any, b: Any) -> Any:
    """
    Find the interval between two pitches of the same kind.

    Distances between pitch classes are always ascending.
    Distances between intervals subtract one from the other.

    Example:
        distance("C2", "C3")  # "P8"
        distance("G", "B")    # "M3"
        distance("M2", "P5")  # "P4"
    """
    return _output(subtract(as_pitch(a), as_pitch(b)), a, b, formatter=to_interval_text)


def distance_from(a: Any) -> Callable[[Any], Any]:
    """Get a function that measures the distance from a fixed pitch."""
    return lambda b: distance(a, b)


def distance_to(b: Any) -> Callable[[Any], Any]:
    """Get a function that measures the distance to a fixed pitch."""
    return lambda a: distance(a, b)


@interval_op
def simplify(interval: Any) -> Interval | None:
    """
    Reduce an interval to within one octave, keeping its direction.

    Example:
        simplify("M10")  # "M3"
        simplify("-P11") # "-P4"
    """
    return _simplify(interval)


@interval_op
def simplify_ascending(interval: Any) -> Interval | None:
    """
    Reduce an interval to an ascending one within one octave.

    Descending intervals are replaced by their ascending complement.

    Example:
        simplify_ascending("-M3")  # "m6"
    """
    return _simplify_ascending(interval)


def height(pitch: Note | Interval) -> int:
    """Height in semitones of a note or interval (C0 = 0)."""
    return pitch.fifths * 7 + 12 * pitch.octaves


def sort_key(pitch: Pitch | None) -> float:
    """
    Ordering key for any pitch value.

    Pitch classes get an estimated octave so they sort consistently
    among themselves. None sorts below everything.
    """
    if pitch is None:
        return -math.inf
    f = pitch.fifths * 7
    if isinstance(pitch, (Note, Interval)):
        o = pitch.octaves
    else:
        o = -(f // 12) - 10
    return f + o * 12


def compare_ascending(a: Pitch | None, b: Pitch | None) -> int:
    """Comparator ordering lower pitches first (-1, 0 or 1)."""
    ka = sort_key(a)
    kb = sort_key(b)
    return (ka > kb) - (ka < kb)


def compare_descending(a: Pitch | None, b: Pitch | None) -> int:
    """Comparator ordering higher pitches first."""
    return -compare_ascending(a, b)
