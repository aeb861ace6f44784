"""
Pitch parser - text to pitch values.

Parsing is executed many times with the same few strings, so every
result is memoized, failures included. The cache is a bounded LRU
owned by a PitchParser rather than global state:

    with PitchParser(cache_size=256) as parser:
        parser.parse_note("C#4")   # Note
        parser.parse_interval("-P5")  # Interval
        parser.parse_pitch("xyz")  # None

The plain module functions (parse_note, parse_interval, parse_pitch)
use a shared default parser.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from chuk_mcp_pitch.constants import DEFAULT_CACHE_SIZE, Grammar

from .encoding import encode
from .notation import parse_interval_name, parse_note_name
from .pitch import Interval, Note, PitchClass

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class CacheInfo:
    """Parse cache statistics."""

    hits: int
    misses: int
    size: int
    max_size: int


class ParseCache:
    """
    Bounded least-recently-used cache of parse results.

    Keys are (grammar, text). None results are cached like any other.
    Thread-safe: lookups and inserts happen under a lock.
    """

    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE):
        if max_size < 1:
            raise ValueError(f"Cache size must be at least 1, got {max_size}")
        self.max_size = max_size
        self._entries: OrderedDict[tuple[str, str], Any] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_parse(self, grammar: Grammar, text: str, parse: Callable[[str], Any]) -> Any:
        """Return the cached result for text, parsing and storing it on a miss."""
        key = (grammar, text)
        with self._lock:
            value = self._entries.get(key, _MISSING)
            if value is not _MISSING:
                self._entries.move_to_end(key)
                self._hits += 1
                return value
            self._misses += 1

        value = parse(text)

        with self._lock:
            self._entries[key] = value
            self._entries.move_to_end(key)
            if len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
        return value

    def info(self) -> CacheInfo:
        """Get cache statistics."""
        with self._lock:
            return CacheInfo(self._hits, self._misses, len(self._entries), self.max_size)

    def clear(self) -> None:
        """Drop all entries and reset statistics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)


def _note_from_text(text: str) -> Note | PitchClass | None:
    parts = parse_note_name(text)
    if parts is None:
        return None
    return encode(parts.step, parts.alteration, parts.octave)  # type: ignore[return-value]


def _interval_from_text(text: str) -> Interval | None:
    parts = parse_interval_name(text)
    if parts is None:
        return None
    return encode(parts.step, parts.alteration, parts.octave, parts.direction)  # type: ignore[return-value]


class PitchParser:
    """
    Parses note and interval names, memoizing results.

    Use as a context manager to scope a cache to a block of work;
    the cache is cleared on exit.
    """

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE, cache: ParseCache | None = None):
        """
        Initialize the parser.

        Args:
            cache_size: Capacity of a new cache (ignored if cache is given)
            cache: An existing cache to share
        """
        self.cache = cache if cache is not None else ParseCache(cache_size)
        logger.debug(f"Created pitch parser (cache size {self.cache.max_size})")

    def parse_note(self, text: Any) -> Note | PitchClass | None:
        """
        Parse a note name.

        'C#4' gives a Note, 'C#' a PitchClass. Non-strings and
        unknown names give None.
        """
        if not isinstance(text, str):
            return None
        return self.cache.get_or_parse("note", text, _note_from_text)  # type: ignore[no-any-return]

    def parse_interval(self, text: Any) -> Interval | None:
        """Parse an interval name like 'M3', '-P5' or '4AA'."""
        if not isinstance(text, str):
            return None
        return self.cache.get_or_parse("interval", text, _interval_from_text)  # type: ignore[no-any-return]

    def parse_pitch(self, text: Any) -> Note | PitchClass | Interval | None:
        """Parse text as a note name, falling back to an interval name."""
        note = self.parse_note(text)
        if note is not None:
            return note
        return self.parse_interval(text)

    def is_note_name(self, text: Any) -> bool:
        """Test if text is a valid note name."""
        return self.parse_note(text) is not None

    def close(self) -> None:
        """Release cached entries."""
        self.cache.clear()
        logger.debug("Closed pitch parser")

    def __enter__(self) -> PitchParser:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_default_parser = PitchParser()


def get_default_parser() -> PitchParser:
    """Get the parser used by the module-level functions."""
    return _default_parser


def set_default_parser(parser: PitchParser) -> PitchParser:
    """
    Replace the default parser.

    Returns:
        The previous default parser
    """
    global _default_parser
    previous = _default_parser
    _default_parser = parser
    return previous


def parse_note(text: Any) -> Note | PitchClass | None:
    """Parse a note name with the default parser."""
    return _default_parser.parse_note(text)


def parse_interval(text: Any) -> Interval | None:
    """Parse an interval name with the default parser."""
    return _default_parser.parse_interval(text)


def parse_pitch(text: Any) -> Note | PitchClass | Interval | None:
    """Parse a note or interval name with the default parser."""
    return _default_parser.parse_pitch(text)


def is_note_name(text: Any) -> bool:
    """Test if text is a valid note name."""
    return _default_parser.is_note_name(text)
