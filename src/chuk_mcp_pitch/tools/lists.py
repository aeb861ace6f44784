"""
List tools - MCP tools over lists of pitches.

Lists are passed as text separated by spaces, commas or bars.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.core import as_interval, as_pitch, harmonize, max_pitch, sort_pitches, split_list

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _invalid_items(items: str, parse: Callable[[Any], Any] = as_pitch) -> list[str]:
    return [item for item in split_list(items) if parse(item) is None]


def register_list_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register list tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_harmonize(intervals: str, tonic: str) -> str:
        """
        Build a chord or scale by transposing a tonic by a list of intervals.

        Args:
            intervals: Intervals separated by spaces ('P1 M3 P5 m7')
            tonic: Note or pitch class ('C4', 'Eb')

        Returns:
            JSON string with the resulting notes

        Example:
            pitch_harmonize(intervals="P1 M3 P5 M7", tonic="C4")
        """
        try:
            if as_pitch(tonic) is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=tonic)}
                )

            notes = harmonize(intervals, tonic)
            return json.dumps(
                {
                    "status": "success",
                    "tonic": tonic,
                    "notes": notes,
                    "skipped": _invalid_items(intervals, as_interval),
                }
            )
        except Exception as e:
            logger.exception("Failed to harmonize")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_harmonize"] = pitch_harmonize

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_sort(pitches: str, descending: bool = False) -> str:
        """
        Sort pitches from lowest to highest (or highest to lowest).

        Unparseable entries are reported and left out.

        Args:
            pitches: Notes, pitch classes or intervals separated by spaces
            descending: Sort from highest to lowest

        Returns:
            JSON string with the sorted pitches

        Example:
            pitch_sort(pitches="G4 C4 E4 C5")
        """
        try:
            result = [p for p in sort_pitches(pitches, descending=descending) if p is not None]
            return json.dumps(
                {"status": "success", "pitches": result, "skipped": _invalid_items(pitches)}
            )
        except Exception as e:
            logger.exception("Failed to sort pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_sort"] = pitch_sort

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_max(pitches: str) -> str:
        """
        Get the highest pitch of a list.

        Args:
            pitches: Notes, pitch classes or intervals separated by spaces

        Returns:
            JSON string with the highest pitch

        Example:
            pitch_max(pitches="G4 C5 E4")
        """
        try:
            result = max_pitch(pitches)
            if result is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=pitches)}
                )

            return json.dumps({"status": "success", "pitch": result})
        except Exception as e:
            logger.exception("Failed to find highest pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_max"] = pitch_max

    return tools
