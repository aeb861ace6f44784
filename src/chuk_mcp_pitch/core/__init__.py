"""
Core pitch primitives - the line-of-fifths layer.

These are the mathematical invariants everything else composes on:
- PitchClass, Note, Interval: pitch values on the line of fifths
- encode / decode: spelled pitches <-> line-of-fifths coordinates
- PitchParser: note and interval names -> pitch values (LRU cached)
- format_*: pitch values -> names
- transpose / distance / simplify: pitch arithmetic
- midi / from_midi / frequency: MIDI numbers and Hz
- harmonize / sort_pitches / max_pitch: lists of pitches
"""

from chuk_mcp_pitch.core.adapters import as_interval, as_note, as_pitch
from chuk_mcp_pitch.core.arithmetic import (
    add_intervals,
    compare_ascending,
    compare_descending,
    distance,
    distance_from,
    distance_to,
    height,
    simplify,
    simplify_ascending,
    sort_key,
    transpose,
    transpose_by,
    transpose_from,
)
from chuk_mcp_pitch.core.encoding import DecodedPitch, decode, encode
from chuk_mcp_pitch.core.formatting import format_interval, format_note, format_pitch
from chuk_mcp_pitch.core.lists import harmonize, harmonizer, max_pitch, sort_pitches, split_list
from chuk_mcp_pitch.core.midi import chromatic_name, frequency, from_midi, is_midi, midi, to_frequency
from chuk_mcp_pitch.core.parser import (
    ParseCache,
    PitchParser,
    get_default_parser,
    is_note_name,
    parse_interval,
    parse_note,
    parse_pitch,
    set_default_parser,
)
from chuk_mcp_pitch.core.pitch import (
    Interval,
    Note,
    Pitch,
    PitchClass,
    has_octave,
    is_interval,
    is_note,
    is_pitch,
    is_pitch_class,
)
from chuk_mcp_pitch.core.properties import (
    accidentals,
    chroma,
    letter,
    number,
    octave,
    pitch_class,
    quality,
    semitones,
    simple_number,
)

__all__ = [
    # Values
    "PitchClass",
    "Note",
    "Interval",
    "Pitch",
    "is_pitch",
    "is_pitch_class",
    "is_note",
    "is_interval",
    "has_octave",
    # Encoding
    "DecodedPitch",
    "encode",
    "decode",
    # Parsing
    "ParseCache",
    "PitchParser",
    "get_default_parser",
    "set_default_parser",
    "parse_note",
    "parse_interval",
    "parse_pitch",
    "is_note_name",
    "as_note",
    "as_interval",
    "as_pitch",
    # Formatting
    "format_note",
    "format_interval",
    "format_pitch",
    # Arithmetic
    "transpose",
    "transpose_by",
    "transpose_from",
    "add_intervals",
    "distance",
    "distance_from",
    "distance_to",
    "simplify",
    "simplify_ascending",
    "height",
    "sort_key",
    "compare_ascending",
    "compare_descending",
    # Properties
    "pitch_class",
    "chroma",
    "letter",
    "accidentals",
    "octave",
    "simple_number",
    "number",
    "quality",
    "semitones",
    # MIDI
    "is_midi",
    "midi",
    "chromatic_name",
    "from_midi",
    "frequency",
    "to_frequency",
    # Lists
    "split_list",
    "harmonize",
    "harmonizer",
    "sort_pitches",
    "max_pitch",
]
