"""
CHUK Pitch - spelled pitch arithmetic on the line of fifths.

    from chuk_mcp_pitch import transpose, distance

    transpose("C4", "M3")  # 'E4'
    distance("G", "B")     # 'M3'
"""

from chuk_mcp_pitch.core import (
    Interval,
    Note,
    PitchClass,
    distance,
    from_midi,
    midi,
    parse_pitch,
    to_frequency,
    transpose,
)

__version__ = "0.1.0"

__all__ = [
    "Interval",
    "Note",
    "PitchClass",
    "distance",
    "from_midi",
    "midi",
    "parse_pitch",
    "to_frequency",
    "transpose",
]
