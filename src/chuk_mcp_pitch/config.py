"""
Settings - tuning, spelling and cache configuration.

Settings can come from:
1. Defaults (A4 = 440 Hz, flats, 1024 cached parses)
2. A YAML file passed with --config

Example file:

    reference_frequency: 442
    prefer_sharps: true
    cache_size: 4096
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from chuk_mcp_pitch.constants import DEFAULT_CACHE_SIZE, DEFAULT_REFERENCE_FREQUENCY
from chuk_mcp_pitch.core.parser import PitchParser, set_default_parser

logger = logging.getLogger(__name__)


class PitchSettings(BaseModel):
    """Runtime settings for the pitch library and server."""

    cache_size: int = Field(
        default=DEFAULT_CACHE_SIZE,
        ge=1,
        description="Maximum number of cached parse results",
    )
    reference_frequency: float = Field(
        default=DEFAULT_REFERENCE_FREQUENCY,
        gt=0,
        description="Frequency of A4 in Hz",
    )
    prefer_sharps: bool = Field(
        default=False,
        description="Spell black keys with sharps when converting from MIDI",
    )

    model_config = {"frozen": True, "extra": "forbid"}


def load_settings(path: Path | str | None = None) -> PitchSettings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file; None for defaults

    Returns:
        Validated settings

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a YAML mapping
        pydantic.ValidationError: If a value is out of range
    """
    if path is None:
        return PitchSettings()

    path = Path(path)
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid settings file {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Settings file must contain a mapping: {path}")

    settings = PitchSettings(**data)
    logger.debug(f"Loaded settings from {path}: {settings}")
    return settings


def configure_default_parser(settings: PitchSettings) -> PitchParser:
    """
    Install a fresh default parser sized by the settings.

    Returns:
        The new default parser
    """
    parser = PitchParser(cache_size=settings.cache_size)
    previous = set_default_parser(parser)
    previous.close()
    return parser
