"""
Pydantic models for the pitch system.

This module provides:
- PitchInfo: JSON-friendly report of a pitch value
"""

from chuk_mcp_pitch.models.pitch import PitchInfo

__all__ = [
    "PitchInfo",
]
