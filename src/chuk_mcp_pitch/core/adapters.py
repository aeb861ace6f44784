"""
Adapters between text and pitch values.

Every public operation accepts either text or a pitch value:
- values in, values out
- text in, text out

The decorators here lift a function over pitch values into one that
also accepts text, parsing on the way in and formatting on the way out.
Unparseable text short-circuits to None.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from .formatting import format_interval, format_note, format_pitch
from .parser import get_default_parser
from .pitch import Interval, Note, Pitch, PitchClass, is_pitch


def as_note(value: Any) -> Note | PitchClass | Interval | None:
    """Return a pitch value as is, or parse text as a note name."""
    if is_pitch(value):
        return value
    return get_default_parser().parse_note(value)


def as_interval(value: Any) -> Pitch | None:
    """Return a pitch value as is, or parse text as an interval name."""
    if is_pitch(value):
        return value
    return get_default_parser().parse_interval(value)


def as_pitch(value: Any) -> Pitch | None:
    """Return a pitch value as is, or parse text as a note or interval."""
    if is_pitch(value):
        return value
    return get_default_parser().parse_pitch(value)


def _formatter(fmt: Callable[[Any], str | None]) -> Callable[[Any], Any]:
    # Non-pitch results (letters, numbers, None) pass through untouched
    return lambda result: fmt(result) if is_pitch(result) else result


to_note_text = _formatter(format_note)
to_interval_text = _formatter(format_interval)
to_pitch_text = _formatter(format_pitch)


def _pitch_op(
    parse: Callable[[Any], Pitch | None],
    to_text: Callable[[Any], Any],
) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    def decorator(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
        @wraps(fn)
        def wrapper(value: Any) -> Any:
            if is_pitch(value):
                return fn(value)
            pitch = parse(value)
            return to_text(fn(pitch)) if pitch is not None else None

        return wrapper

    return decorator


def note_op(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Lift a function over notes to one that also accepts note names."""
    return _pitch_op(as_note, to_note_text)(fn)


def interval_op(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Lift a function over intervals to one that also accepts interval names."""
    return _pitch_op(as_interval, to_interval_text)(fn)


def pitch_op(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Lift a function over pitches to one that also accepts any pitch name."""
    return _pitch_op(as_pitch, to_pitch_text)(fn)
