"""
MIDI tools - MCP tools for MIDI numbers and frequencies.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.config import PitchSettings
from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.core import as_note, chromatic_name, frequency, is_midi, midi

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_midi_tools(mcp: ChukMCPServer, settings: PitchSettings) -> dict[str, Any]:
    """
    Register MIDI and frequency tools with the MCP server.

    Args:
        mcp: The MCP server instance
        settings: Runtime settings (tuning reference, spelling preference)

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_to_midi(pitch: str) -> str:
        """
        Get the MIDI note number of a note (C4 = 60).

        Args:
            pitch: Note name with octave ('C4', 'Bb3')

        Returns:
            JSON string with the MIDI number

        Example:
            pitch_to_midi(pitch="A4")
        """
        try:
            if as_note(pitch) is None and not is_midi(pitch):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(pitch=pitch)}
                )

            result = midi(pitch)
            if result is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.NO_MIDI.format(pitch=pitch)}
                )

            return json.dumps({"status": "success", "pitch": pitch, "midi": result})
        except Exception as e:
            logger.exception("Failed to convert to MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_to_midi"] = pitch_to_midi

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_from_midi(midi_number: int, use_sharps: bool | None = None) -> str:
        """
        Get a note name for a MIDI note number.

        Black keys are spelled with flats unless use_sharps is set
        (or the server is configured to prefer sharps).

        Args:
            midi_number: MIDI note number (0-127)
            use_sharps: Spell black keys with sharps (default from settings)

        Returns:
            JSON string with the note name

        Example:
            pitch_from_midi(midi_number=61, use_sharps=True)
        """
        try:
            if not is_midi(midi_number):
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_MIDI.format(midi=midi_number)}
                )

            sharps = settings.prefer_sharps if use_sharps is None else use_sharps
            name = chromatic_name(sharps)(midi_number)
            return json.dumps({"status": "success", "midi": midi_number, "note": name})
        except Exception as e:
            logger.exception("Failed to convert from MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_from_midi"] = pitch_from_midi

    @mcp.tool  # type: ignore[arg-type]
    async def pitch_to_frequency(pitch: str, reference: float | None = None) -> str:
        """
        Get the equal-temperament frequency of a note.

        Args:
            pitch: Note name with octave ('A4'), or a MIDI number as text
            reference: Frequency of A4 in Hz (default from settings, usually 440)

        Returns:
            JSON string with the frequency in Hz

        Example:
            pitch_to_frequency(pitch="C4")
        """
        try:
            ref = settings.reference_frequency if reference is None else reference
            if ref <= 0:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_REFERENCE.format(reference=ref),
                    }
                )

            hz = frequency(ref)(pitch)
            if hz is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.NO_MIDI.format(pitch=pitch)}
                )

            return json.dumps(
                {"status": "success", "pitch": pitch, "frequency": hz, "reference": ref}
            )
        except Exception as e:
            logger.exception("Failed to convert to frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pitch_to_frequency"] = pitch_to_frequency

    return tools
