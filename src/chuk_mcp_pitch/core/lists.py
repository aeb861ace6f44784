"""
Lists of pitches - harmonize, sort and max.

Lists can be given as Python lists or as text separated by spaces,
commas or bars ("C E G", "1P, 3M, 5P", "C | F | G"). Results are
always lists of names; unparseable entries become None.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from functools import cmp_to_key
from typing import Any

from .adapters import as_pitch, to_pitch_text
from .arithmetic import compare_ascending, compare_descending, sort_key, transpose

_SEPARATOR_RE = re.compile(r"\s*\|\s*|\s*,\s*|\s+")


def split_list(source: Any) -> list[Any]:
    """
    Get a list from a source.

    Text is split on spaces, commas and bars; lists and tuples are
    copied; None gives an empty list; anything else is wrapped.
    """
    if isinstance(source, (list, tuple)):
        return list(source)
    if isinstance(source, str):
        text = source.strip()
        return _SEPARATOR_RE.split(text) if text else []
    if source is None:
        return []
    return [source]


def harmonizer(items: Any) -> Callable[[Any], list[Any]]:
    """
    Get a function that transposes a pitch by every interval in a list.

    Example:
        major = harmonizer("P1 M3 P5")
        major("C4")  # ['C4', 'E4', 'G4']
    """

    def harmonize_pitch(pitch: Any) -> list[Any]:
        results = (transpose(pitch, item) for item in split_list(items))
        return [to_pitch_text(result) for result in results if result is not None]

    return harmonize_pitch


def harmonize(items: Any, pitch: Any) -> list[Any]:
    """
    Transpose a pitch by every interval in a list, dropping failures.

    Example:
        harmonize("P1 M3 P5", "C")  # ['C', 'E', 'G']
    """
    return harmonizer(items)(pitch)


def sort_pitches(items: Any, descending: bool = False) -> list[str | None]:
    """
    Sort pitches by height.

    Example:
        sort_pitches("G4 C4 E4")  # ['C4', 'E4', 'G4']
    """
    compare = compare_descending if descending else compare_ascending
    pitches = sorted((as_pitch(item) for item in split_list(items)), key=cmp_to_key(compare))
    return [to_pitch_text(pitch) for pitch in pitches]


def max_pitch(items: Any) -> str | None:
    """
    Get the highest pitch of a list.

    The first of equally high pitches wins. None for an empty list.
    """
    best = None
    for pitch in (as_pitch(item) for item in split_list(items)):
        if sort_key(pitch) > sort_key(best):
            best = pitch
    return to_pitch_text(best)
