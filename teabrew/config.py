"""Configuration for the tea timer: presets, brew-time bounds, duration parsing."""

import re
from dataclasses import dataclass, field
from typing import Tuple

DEFAULT_BREW_TIME = 4 * 60
MIN_BREW_TIME = 30
MAX_BREW_TIME = 30 * 60
DEFAULT_PROGRESS_BAR_WIDTH = 20

_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}
_DURATION_RE = re.compile(r"(\d+)([hms])")


class ConfigError(ValueError):
    """Raised when configuration values are outside accepted ranges."""


@dataclass(frozen=True)
class Preset:
    """A tea type with its recommended brew settings."""
    name: str
    duration: int  # seconds
    temp: str
    notes: str = ""


DEFAULT_PRESETS: Tuple[Preset, ...] = (
    Preset("Rooibos", 4 * 60, "95°C", "No bitterness, naturally sweet"),
    Preset("Green Tea", 2 * 60, "80°C", "Don't overbrew to avoid bitterness"),
    Preset("Black Tea", 3 * 60, "95°C", "Full flavor development"),
    Preset("Herbal", 5 * 60, "95°C", "Medicinal properties develop over time"),
    Preset("White Tea", 2 * 60, "75°C", "Delicate flavor, careful timing"),
    Preset("Oolong", 3 * 60, "85°C", "Complex flavors, multiple infusions possible"),
)


@dataclass(frozen=True)
class Config:
    """Read-only settings handed to the timer.

    Attributes:
        brew_time: Brew time in seconds used in custom-duration mode.
        custom_duration: True when brew_time was given explicitly and
            overrides every preset duration.
        presets: Ordered preset catalog; index 0 is selected at start.
        sound_enabled: Play an audio alert when the tea is ready.
        notify_enabled: Show a desktop notification when the tea is ready.
        sound_file: Optional audio file for the alert.
    """
    brew_time: int = DEFAULT_BREW_TIME
    custom_duration: bool = False
    presets: Tuple[Preset, ...] = field(default=DEFAULT_PRESETS)
    sound_enabled: bool = True
    notify_enabled: bool = True
    sound_file: str = ""

    def validate(self) -> None:
        """Check values are within accepted ranges.

        Raises:
            ConfigError: If the brew time is out of bounds or the preset
                catalog is unusable.
        """
        if self.brew_time < MIN_BREW_TIME:
            raise ConfigError(f"brew time must be at least {format_duration(MIN_BREW_TIME)}")
        if self.brew_time > MAX_BREW_TIME:
            raise ConfigError(f"brew time cannot exceed {format_duration(MAX_BREW_TIME)}")
        if not self.presets:
            raise ConfigError("at least one tea preset is required")
        for preset in self.presets:
            if preset.duration <= 0:
                raise ConfigError(f"preset {preset.name!r} must have a positive duration")


def parse_duration(text: str) -> int:
    """Parse a duration string such as ``2m``, ``3m30s`` or ``90`` into seconds.

    Raises:
        ValueError: If the text is not a duration.
    """
    value = text.strip().lower()
    if value.isdigit():
        return int(value)

    if not value or _DURATION_RE.sub("", value):
        raise ValueError(f"invalid duration: {text!r}")

    return sum(int(amount) * _UNIT_SECONDS[unit] for amount, unit in _DURATION_RE.findall(value))


def format_duration(seconds: int) -> str:
    """Format seconds as a compact duration string (e.g. ``3m30s``)."""
    mins, secs = divmod(seconds, 60)
    if mins and secs:
        return f"{mins}m{secs}s"
    if mins:
        return f"{mins}m"
    return f"{secs}s"
