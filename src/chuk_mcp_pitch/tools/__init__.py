"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Describe, transpose, measure and simplify pitches
- midi - MIDI numbers and frequencies
- lists - Harmonize, sort and max over lists of pitches
"""

from chuk_mcp_pitch.tools.lists import register_list_tools
from chuk_mcp_pitch.tools.midi import register_midi_tools
from chuk_mcp_pitch.tools.pitch import register_pitch_tools

__all__ = [
    "register_list_tools",
    "register_midi_tools",
    "register_pitch_tools",
]
