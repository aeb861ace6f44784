#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server provides MCP tools for spelled-pitch arithmetic. Notes,
pitch classes and intervals share one line-of-fifths encoding, so
transposition and distance never lose enharmonic spelling.

The server provides tools for:
- Describing notes, pitch classes and intervals
- Transposing pitches and measuring distances between them
- Simplifying intervals
- Converting between notes, MIDI numbers and frequencies
- Harmonizing, sorting and ranking lists of pitches
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.config import PitchSettings, configure_default_parser, load_settings
from chuk_mcp_pitch.tools import register_list_tools, register_midi_tools, register_pitch_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Picked up automatically when present in the working directory
DEFAULT_CONFIG_PATH = Path.cwd() / "pitch.yaml"


def create_server(settings: PitchSettings | None = None) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create the MCP server and register all tools.

    Args:
        settings: Runtime settings; defaults to pitch.yaml in the
            working directory if present, else built-in defaults

    Returns:
        The server and a dictionary of all registered tool functions
    """
    if settings is None:
        settings = load_settings(DEFAULT_CONFIG_PATH if DEFAULT_CONFIG_PATH.exists() else None)

    configure_default_parser(settings)

    mcp = ChukMCPServer("chuk-mcp-pitch")

    tools: dict[str, Any] = {}
    tools.update(register_pitch_tools(mcp, settings))
    tools.update(register_midi_tools(mcp, settings))
    tools.update(register_list_tools(mcp))

    logger.info("CHUK Pitch MCP Server initialized")
    logger.info(f"  Reference frequency: {settings.reference_frequency} Hz")
    logger.info(f"  Parse cache size: {settings.cache_size}")
    logger.info(f"  Tools: {', '.join(sorted(tools))}")

    return mcp, tools
