"""Unit tests for config.py."""

import pytest
from teabrew.config import (
    DEFAULT_PRESETS,
    MAX_BREW_TIME,
    MIN_BREW_TIME,
    Config,
    ConfigError,
    Preset,
    format_duration,
    parse_duration,
)


class TestParseDuration:
    """Test duration string parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("2m", 120),
            ("3m30s", 210),
            ("45s", 45),
            ("1h", 3600),
            ("1h2m3s", 3723),
            ("90", 90),
            (" 4M ", 240),
        ],
    )
    def test_valid(self, text, expected):
        """Valid duration strings parse to seconds."""
        assert parse_duration(text) == expected

    @pytest.mark.parametrize("text", ["", "m", "2x", "two minutes", "3m 30s", "-2m", "1.5m"])
    def test_invalid(self, text):
        """Malformed strings raise ValueError."""
        with pytest.raises(ValueError):
            parse_duration(text)


class TestFormatDuration:
    """Test compact duration formatting."""

    def test_format(self):
        """Durations format compactly."""
        assert format_duration(30) == "30s"
        assert format_duration(240) == "4m"
        assert format_duration(210) == "3m30s"


class TestValidate:
    """Test configuration validation."""

    def test_defaults_are_valid(self):
        """Default configuration passes validation."""
        Config().validate()

    def test_bounds_are_inclusive(self):
        """Minimum and maximum brew times are accepted."""
        Config(brew_time=MIN_BREW_TIME, custom_duration=True).validate()
        Config(brew_time=MAX_BREW_TIME, custom_duration=True).validate()

    def test_too_short(self):
        """Brew time below the minimum is rejected."""
        with pytest.raises(ConfigError, match="at least 30s"):
            Config(brew_time=MIN_BREW_TIME - 1, custom_duration=True).validate()

    def test_too_long(self):
        """Brew time above the maximum is rejected."""
        with pytest.raises(ConfigError, match="cannot exceed 30m"):
            Config(brew_time=MAX_BREW_TIME + 1, custom_duration=True).validate()

    def test_empty_catalog(self):
        """An empty preset catalog is rejected."""
        with pytest.raises(ConfigError):
            Config(presets=()).validate()

    def test_non_positive_preset(self):
        """Presets must have a positive duration."""
        with pytest.raises(ConfigError, match="Broken"):
            Config(presets=(Preset("Broken", 0, "90°C"),)).validate()


class TestPresets:
    """Test the default preset catalog."""

    def test_catalog(self):
        """Default catalog starts with Rooibos and has six teas."""
        assert len(DEFAULT_PRESETS) == 6
        assert DEFAULT_PRESETS[0].name == "Rooibos"
        assert DEFAULT_PRESETS[0].duration == 240
        assert all(p.duration > 0 for p in DEFAULT_PRESETS)
