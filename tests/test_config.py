"""
Tests for settings loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chuk_mcp_pitch.config import PitchSettings, configure_default_parser, load_settings
from chuk_mcp_pitch.constants import DEFAULT_CACHE_SIZE, DEFAULT_REFERENCE_FREQUENCY
from chuk_mcp_pitch.core import PitchParser, get_default_parser


class TestPitchSettings:
    """Tests for the settings model."""

    def test_defaults(self) -> None:
        """Defaults are concert pitch, flats and the standard cache."""
        settings = PitchSettings()
        assert settings.reference_frequency == DEFAULT_REFERENCE_FREQUENCY
        assert settings.cache_size == DEFAULT_CACHE_SIZE
        assert settings.prefer_sharps is False

    def test_out_of_range(self) -> None:
        """Non-positive values are rejected."""
        with pytest.raises(ValidationError):
            PitchSettings(cache_size=0)
        with pytest.raises(ValidationError):
            PitchSettings(reference_frequency=0)

    def test_unknown_key(self) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(ValidationError):
            PitchSettings(tuning="just")

    def test_frozen(self) -> None:
        """Settings cannot be changed after loading."""
        settings = PitchSettings()
        with pytest.raises(ValidationError):
            settings.cache_size = 10


class TestLoadSettings:
    """Tests for load_settings."""

    def test_no_path(self) -> None:
        """No path gives defaults."""
        assert load_settings() == PitchSettings()

    def test_yaml_file(self, temp_dir: Path) -> None:
        """Values are read from YAML."""
        path = temp_dir / "pitch.yaml"
        path.write_text("reference_frequency: 442\nprefer_sharps: true\ncache_size: 16\n")

        settings = load_settings(path)

        assert settings.reference_frequency == 442.0
        assert settings.prefer_sharps is True
        assert settings.cache_size == 16

    def test_string_path(self, temp_dir: Path) -> None:
        """Paths can be strings."""
        path = temp_dir / "pitch.yaml"
        path.write_text("cache_size: 32\n")
        assert load_settings(str(path)).cache_size == 32

    def test_empty_file(self, temp_dir: Path) -> None:
        """An empty file gives defaults."""
        path = temp_dir / "pitch.yaml"
        path.write_text("")
        assert load_settings(path) == PitchSettings()

    def test_missing_file(self, temp_dir: Path) -> None:
        """A missing file is an error."""
        with pytest.raises(FileNotFoundError):
            load_settings(temp_dir / "missing.yaml")

    def test_not_a_mapping(self, temp_dir: Path) -> None:
        """The file must hold a mapping."""
        path = temp_dir / "pitch.yaml"
        path.write_text("- 440\n- 442\n")
        with pytest.raises(ValueError, match="mapping"):
            load_settings(path)

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        """Malformed YAML is a ValueError."""
        path = temp_dir / "pitch.yaml"
        path.write_text("cache_size: [1, 2\n")
        with pytest.raises(ValueError, match="Invalid settings file"):
            load_settings(path)

    def test_invalid_value(self, temp_dir: Path) -> None:
        """Values are validated."""
        path = temp_dir / "pitch.yaml"
        path.write_text("reference_frequency: -440\n")
        with pytest.raises(ValidationError):
            load_settings(path)


class TestConfigureDefaultParser:
    """Tests for configure_default_parser."""

    def test_installs_parser(self, restore_default_parser: PitchParser) -> None:
        """The new parser becomes the default, sized by the settings."""
        parser = configure_default_parser(PitchSettings(cache_size=3))
        assert get_default_parser() is parser
        assert parser.cache.info().max_size == 3

    def test_previous_parser_closed(self, restore_default_parser: PitchParser) -> None:
        """The replaced parser's cache is released."""
        first = configure_default_parser(PitchSettings(cache_size=4))
        first.parse_note("C4")
        configure_default_parser(PitchSettings(cache_size=4))
        assert len(first.cache) == 0
