"""
Pitch encoding - step/alteration/octave/direction <-> line of fifths.

A spelled pitch is a step (0=C .. 6=B), an alteration (sharps > 0,
flats < 0), an optional octave and, for intervals, a direction.

Encoded, it becomes two coordinates:
- fifths: position on the line of fifths. Each sharp adds 7, each flat subtracts 7.
- octaves: octave - FIFTH_OCTAVES[step] - 4 * alteration

The octave coordinate absorbs the octave drift that walking along the
line of fifths introduces (7 fifths ~ 4 octaves + a semitone), so that
note + interval is plain component-wise addition. No carry logic.

This module is the only place that knows the line-of-fifths math.
"""

from __future__ import annotations

from dataclasses import dataclass

from .pitch import Interval, Note, Pitch, PitchClass

# Line-of-fifths position of each natural step, indexed C D E F G A B
FIFTHS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Inverse of FIFTHS: steps ordered F C G D A E B
STEPS: tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)


def fifths_span(fifths: int) -> int:
    """Number of octaves spanned by walking a number of fifths."""
    return (fifths * 7) // 12


# Octaves spanned by each natural step
FIFTH_OCTAVES: tuple[int, ...] = tuple(fifths_span(f) for f in FIFTHS)


@dataclass(frozen=True)
class DecodedPitch:
    """
    A pitch in human terms.

    octave is None for pitch classes.
    direction is None for pitch classes and notes.
    """

    step: int
    alteration: int
    octave: int | None = None
    direction: int | None = None


def encode_pitch_class(step: int, alteration: int = 0) -> int:
    """Line-of-fifths coordinate of a spelled pitch class."""
    return FIFTHS[step] + 7 * alteration


def encode_octaves(step: int, alteration: int, octave: int) -> int:
    """Internal octave coordinate of a spelled pitch."""
    return octave - FIFTH_OCTAVES[step] - 4 * alteration


def encode(
    step: int,
    alteration: int = 0,
    octave: int | None = None,
    direction: int | None = None,
) -> Pitch | None:
    """
    Encode a spelled pitch.

    Args:
        step: 0-6, letters C to B (or simple interval numbers unison to seventh)
        alteration: Sharps (positive) or flats (negative)
        octave: Musical octave; None for a pitch class
        direction: Intervals only; negative means descending

    Returns:
        PitchClass, Note or Interval, or None for an invalid step
    """
    if not 0 <= step <= 6:
        return None
    alteration = alteration or 0
    fifths = encode_pitch_class(step, alteration)
    if octave is None:
        return PitchClass(fifths)
    octaves = encode_octaves(step, alteration, octave)
    if direction is None:
        return Note(fifths, octaves)
    sign = -1 if direction < 0 else 1
    return Interval(sign * fifths, sign * octaves, sign)


def decode_step(fifths: int) -> int:
    """Natural step (0-6) of a line-of-fifths coordinate."""
    return STEPS[(fifths + 1) % 7]


def decode_alteration(fifths: int) -> int:
    """Alteration of a line-of-fifths coordinate."""
    return (fifths + 1) // 7


def decode_coordinates(fifths: int, octaves: int | None = None) -> DecodedPitch:
    """
    Decode raw coordinates, ignoring any direction.

    For descending intervals the raw coordinates describe the
    inversion, which is what the interval formatter expects.
    """
    step = decode_step(fifths)
    alteration = decode_alteration(fifths)
    octave = None if octaves is None else octaves + 4 * alteration + FIFTH_OCTAVES[step]
    return DecodedPitch(step, alteration, octave)


def decode(pitch: Pitch) -> DecodedPitch:
    """
    Decode a pitch back into step, alteration, octave and direction.

    decode(encode(step, alt, oct, dir)) returns the same values for
    every kind, descending intervals included.
    """
    match pitch:
        case PitchClass(fifths=fifths):
            return decode_coordinates(fifths)
        case Note(fifths=fifths, octaves=octaves):
            return decode_coordinates(fifths, octaves)
        case Interval(fifths=fifths, octaves=octaves, direction=direction):
            base = decode_coordinates(direction * fifths, direction * octaves)
            return DecodedPitch(base.step, base.alteration, base.octave, direction)
    raise TypeError(f"Cannot decode {pitch!r}")
