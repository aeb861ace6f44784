"""
Pitch tools - MCP tools for pitch analysis and arithmetic.

Tools for describing, transposing, measuring and simplifying pitches.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.config import PitchSettings
from chuk_mcp_pitch.constants import ErrorMessages, SuccessMessages
from chuk_mcp_pitch.core import as_pitch, distance, simplify, simplify_ascending, transpose
from chuk_mcp_pitch.models import PitchInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_pitch_tools(mcp: ChukMCPServer, settings: PitchSettings) -> dict[str, Any]:
    """
    Register pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Runtime settings (tuning reference)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_describe(pitch: str) -> str:
        """
        Describe a note, pitch class or interval.

        Returns its canonical name, line-of-fifths coordinates, and derived
        facts: MIDI number and frequency for notes, number, quality and
        size for intervals.

        Args:
            pitch: Note name ('C#4', 'Bb'), or interval name ('M3', '-P5')

        Returns:
            JSON string with pitch details

        Example:
            pitch_describe(pitch="Bb3")
        """
        try:
            value = as_pitch(pitch)
            if value is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=pitch)}
                )

            info = PitchInfo.from_pitch(value, settings.reference_frequency)
            return json.dumps({"status": "success", "pitch": info.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to describe pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_describe"] = pitch_describe

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_transpose(pitch: str, interval: str) -> str:
        """
        Transpose a note or pitch class by an interval.

        Args:
            pitch: Note or pitch class name ('C4', 'F#')
            interval: Interval name ('M3', '-P5', '10M')

        Returns:
            JSON string with the transposed pitch

        Example:
            pitch_transpose(pitch="C4", interval="M3")
        """
        try:
            result = transpose(pitch, interval)
            if result is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.CANNOT_TRANSPOSE.format(
                            pitch=pitch, interval=interval
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.TRANSPOSED.format(pitch=pitch, interval=interval),
                    "result": result,
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_transpose"] = pitch_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_distance(from_pitch: str, to_pitch: str) -> str:
        """
        Measure the interval between two pitches of the same kind.

        Distances between pitch classes are always ascending. Distances
        between intervals subtract the first from the second.

        Args:
            from_pitch: Starting note, pitch class or interval
            to_pitch: Target of the same kind

        Returns:
            JSON string with the interval

        Example:
            pitch_distance(from_pitch="C2", to_pitch="E3")
        """
        try:
            result = distance(from_pitch, to_pitch)
            if result is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.CANNOT_MEASURE.format(
                            from_pitch=from_pitch, to_pitch=to_pitch
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.MEASURED.format(
                        from_pitch=from_pitch, to_pitch=to_pitch
                    ),
                    "interval": result,
                }
            )
        except Exception as e:
            logger.exception("Failed to measure distance")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_distance"] = pitch_distance

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_simplify(interval: str, ascending: bool = False) -> str:
        """
        Reduce an interval to within one octave.

        Args:
            interval: Interval name ('M10', '-P11')
            ascending: If True, descending intervals become their ascending complement

        Returns:
            JSON string with the simple interval

        Example:
            pitch_simplify(interval="-M10", ascending=True)
        """
        try:
            result = simplify_ascending(interval) if ascending else simplify(interval)
            if result is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_INTERVAL.format(interval=interval),
                    }
                )

            return json.dumps({"status": "success", "interval": result})
        except Exception as e:
            logger.exception("Failed to simplify interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_simplify"] = pitch_simplify

    return tools
