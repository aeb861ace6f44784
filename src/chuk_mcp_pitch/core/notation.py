"""
Notation grammars - note names and interval names.

Note names:      <letter><accidentals><octave?>     C#4, Bb, F##-1, fx3
Interval names:  <sign?><number><quality>           5P, -3M, 4AA
                 <sign?><quality><number>           P5, -M3, AA4

These functions only split text into musical parts. They know nothing
about the line of fifths; parser.py turns the parts into pitches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_pitch.constants import LETTERS

_NOTE_RE = re.compile(r"([a-gA-G])(#+|b+|x+)?(-?\d+)?")
_QUALITY = r"(d{1,4}|m|M|P|A{1,4})"
_INTERVAL_NUMBER_FIRST_RE = re.compile(r"([-+]?)(\d+)" + _QUALITY)
_INTERVAL_QUALITY_FIRST_RE = re.compile(r"([-+]?)" + _QUALITY + r"(\d+)")

# Interval class of each simple step: unison, 2nd ... 7th
INTERVAL_TYPES = "PMMPPMM"


@dataclass(frozen=True)
class NoteParts:
    """A note name split into step, alteration and optional octave."""

    step: int
    alteration: int
    octave: int | None = None


@dataclass(frozen=True)
class IntervalParts:
    """
    An interval name split into its parts.

    step is the 0-based simple step (0 = unison .. 6 = seventh),
    octave the number of whole octaves above it.
    """

    number: int
    quality: str
    step: int
    alteration: int
    octave: int
    direction: int

    @property
    def simple(self) -> int:
        """Simple interval number (1-7)."""
        return self.step + 1


def interval_type(number: int) -> str:
    """'P' for perfect-class interval numbers, 'M' for major-class ones."""
    return INTERVAL_TYPES[(abs(number) - 1) % 7]


def quality_to_alteration(itype: str, quality: str) -> int | None:
    """
    Alteration of a quality for an interval class.

    Returns None when the quality does not fit (P3, M5, m4).
    """
    if quality == "M" and itype == "M":
        return 0
    if quality == "P" and itype == "P":
        return 0
    if quality == "m" and itype == "M":
        return -1
    if quality and set(quality) == {"A"}:
        return len(quality)
    if quality and set(quality) == {"d"}:
        return -len(quality) if itype == "P" else -len(quality) - 1
    return None


def alteration_to_quality(number: int, alteration: int) -> str:
    """
    Quality letter(s) for an interval number and alteration.

    Diminished counts from perfect for P-class intervals but from
    minor for M-class ones, hence the off-by-one.
    """
    itype = interval_type(number)
    if alteration == 0:
        return itype
    if itype == "M" and alteration == -1:
        return "m"
    if alteration > 0:
        return "A" * alteration
    return "d" * abs(alteration if itype == "P" else alteration + 1)


def parse_note_name(text: str) -> NoteParts | None:
    """
    Split a note name into parts.

    'x' counts as a double sharp. Returns None if the text is not a note name.
    """
    match = _NOTE_RE.fullmatch(text)
    if not match:
        return None
    letter, accidentals, octave = match.groups()
    step = LETTERS.index(letter.upper())
    alteration = 0
    if accidentals:
        if accidentals[0] == "#":
            alteration = len(accidentals)
        elif accidentals[0] == "x":
            alteration = 2 * len(accidentals)
        else:
            alteration = -len(accidentals)
    return NoteParts(step, alteration, int(octave) if octave is not None else None)


def parse_interval_name(text: str) -> IntervalParts | None:
    """
    Split an interval name into parts.

    Returns None for unknown text, a zero interval number, or a
    quality that does not fit the interval class.
    """
    match = _INTERVAL_NUMBER_FIRST_RE.fullmatch(text)
    if match:
        sign, num, quality = match.groups()
    else:
        match = _INTERVAL_QUALITY_FIRST_RE.fullmatch(text)
        if not match:
            return None
        sign, quality, num = match.groups()

    number = int(num)
    if number < 1:
        return None
    step = (number - 1) % 7
    alteration = quality_to_alteration(INTERVAL_TYPES[step], quality)
    if alteration is None:
        return None
    return IntervalParts(
        number=number,
        quality=quality,
        step=step,
        alteration=alteration,
        octave=(number - 1) // 7,
        direction=-1 if sign == "-" else 1,
    )
