"""
Constants and enums for the pitch system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class PitchKind(str, Enum):
    """
    The three kinds of pitch value.

    They share one line-of-fifths encoding and differ only in
    which coordinates they carry.
    """

    PITCH_CLASS = "pitch_class"  # fifths
    NOTE = "note"  # fifths + octaves
    INTERVAL = "interval"  # fifths + octaves + direction


# Letter names indexed by step (0 = C .. 6 = B)
LETTERS = "CDEFGAB"

# Tuning reference: A4 (MIDI 69) = 440 Hz
DEFAULT_REFERENCE_FREQUENCY = 440.0
REFERENCE_MIDI = 69

# Valid MIDI note numbers are 0 <= n < MIDI_LIMIT
MIDI_LIMIT = 128

# Default parse cache capacity (entries)
DEFAULT_CACHE_SIZE = 1024

# Grammars known to the parser (part of the parse cache key)
Grammar = Literal["note", "interval"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_PITCH = "Invalid pitch: '{pitch}'."
    INVALID_NOTE = "Invalid note: '{pitch}'. Expected a name like 'C4', 'Bb' or 'F##-1'."
    INVALID_INTERVAL = "Invalid interval: '{interval}'. Expected a name like 'M3', '-P5' or 'AA4'."
    INVALID_MIDI = "Invalid MIDI note number: {midi}. Must be between 0 and 127."
    CANNOT_TRANSPOSE = "Cannot transpose '{pitch}' by '{interval}'. Exactly one must be an interval."
    CANNOT_MEASURE = "Cannot measure distance from '{from_pitch}' to '{to_pitch}'. Both must be the same kind."
    NO_MIDI = "Pitch '{pitch}' has no MIDI number. Only notes with an octave do."
    INVALID_REFERENCE = "Invalid reference frequency: {reference}. Must be greater than 0."


class SuccessMessages:
    """Standardized success messages."""

    TRANSPOSED = "Transposed '{pitch}' by '{interval}'."
    MEASURED = "Distance from '{from_pitch}' to '{to_pitch}'."
