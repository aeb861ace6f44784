"""
Pitch primitives - PitchClass, Note and Interval.

These are the foundational values for all pitch arithmetic.
All three live on the line of fifths:
- PitchClass is a spelled pitch with no register (C, F#, Bb)
- Note is a PitchClass plus an internal octave offset (C4, Bb3)
- Interval is a Note-shaped distance plus a direction (M3, -P5)

The octave offset is not the musical octave. It is chosen so that
adding coordinates is transposition; see encoding.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeGuard

from chuk_mcp_pitch.constants import PitchKind


@dataclass(frozen=True)
class PitchClass:
    """
    An enharmonic-aware pitch name with no register.

    fifths is the signed position on the line of fifths:
    C=0, G=1, D=2 ... F=-1, Bb=-2 ...
    C# (7) and Db (-5) are different values.

    Immutable and hashable.
    """

    fifths: int
    kind: PitchKind = field(default=PitchKind.PITCH_CLASS, init=False, repr=False)


@dataclass(frozen=True)
class Note:
    """
    A register-qualified pitch.

    octaves is the internal octave offset. Use decode() to
    recover the musical octave.
    """

    fifths: int
    octaves: int
    kind: PitchKind = field(default=PitchKind.NOTE, init=False, repr=False)


@dataclass(frozen=True)
class Interval:
    """
    A signed distance between two pitches.

    fifths and octaves are stored already multiplied by direction,
    so a descending interval carries negative-looking coordinates.
    """

    fifths: int
    octaves: int
    direction: int = 1
    kind: PitchKind = field(default=PitchKind.INTERVAL, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.direction not in (1, -1):
            raise ValueError(f"Direction must be 1 or -1, got {self.direction}")


Pitch = PitchClass | Note | Interval


def is_pitch(value: Any) -> TypeGuard[Pitch]:
    """Test if a value is a pitch of any kind."""
    return isinstance(value, (PitchClass, Note, Interval))


def is_pitch_class(value: Any) -> TypeGuard[PitchClass]:
    """Test if a value is a pitch class (no register)."""
    return isinstance(value, PitchClass)


def is_note(value: Any) -> TypeGuard[Note]:
    """Test if a value is a note (has octave, no direction)."""
    return isinstance(value, Note)


def is_interval(value: Any) -> TypeGuard[Interval]:
    """Test if a value is an interval (has octave and direction)."""
    return isinstance(value, Interval)


def has_octave(value: Any) -> TypeGuard[Note | Interval]:
    """Test if a value carries an octave coordinate."""
    return isinstance(value, (Note, Interval))
