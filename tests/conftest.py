"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_pitch.core import PitchParser, get_default_parser, set_default_parser


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def parser() -> PitchParser:
    """A fresh parser with its own small cache."""
    with PitchParser(cache_size=8) as p:
        yield p


@pytest.fixture
def restore_default_parser() -> PitchParser:
    """Put the default parser back after a test replaces it."""
    previous = get_default_parser()
    yield previous
    set_default_parser(previous)
