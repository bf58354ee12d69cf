"""Unit tests for view.py."""

from dataclasses import replace

from teabrew.config import Config, Preset
from teabrew.timer import TimerState, new_session
from teabrew.view import format_time, render, render_progress_bar

PRESETS = (
    Preset("Rooibos", 240, "95°C", "No bitterness, naturally sweet"),
    Preset("Green Tea", 120, "80°C"),
)


def make_session(**changes):
    return replace(new_session(Config(presets=PRESETS)), **changes)


class TestFormatTime:
    """Test MM:SS formatting."""

    def test_format(self):
        """Seconds format as zero-padded minutes and seconds."""
        assert format_time(0) == "00:00"
        assert format_time(65) == "01:05"
        assert format_time(3599) == "59:59"
        assert format_time(3600) == "60:00"


class TestProgressBar:
    """Test progress bar rendering."""

    def test_half_brewing(self):
        """Half-way bar while brewing."""
        assert render_progress_bar(100, 50, 10, TimerState.BREWING) == "[█████░░░░░] 50%"

    def test_paused_chars(self):
        """Paused bar uses shaded characters."""
        assert render_progress_bar(100, 50, 4, TimerState.PAUSED) == "[▓▓▒▒] 50%"

    def test_finished_full(self):
        """Finished bar is full."""
        assert render_progress_bar(60, 60, 5, TimerState.FINISHED) == "[█████] 100%"

    def test_clamped(self):
        """Elapsed beyond total is clamped to 100%."""
        assert render_progress_bar(10, 20, 4, TimerState.BREWING) == "[████] 100%"

    def test_zero_total(self):
        """Zero total renders nothing."""
        assert render_progress_bar(0, 0, 10, TimerState.BREWING) == ""


class TestRender:
    """Test full session rendering."""

    def test_idle(self):
        """Idle view shows the start prompt and preset details."""
        text = render(make_session()).plain
        assert "Press 's' to start   04:00" in text
        assert "Rooibos (95°C) - No bitterness, naturally sweet" in text
        assert "Current: Rooibos (04:00)" in text
        assert "[" not in text

    def test_idle_without_notes(self):
        """Empty notes are omitted."""
        text = render(make_session(preset_index=1, remaining=120)).plain
        assert "Green Tea (80°C)" in text
        assert " - " not in text

    def test_idle_custom_marker(self):
        """Custom duration is marked in the idle view."""
        config = Config(brew_time=300, custom_duration=True, presets=PRESETS)
        text = render(new_session(config)).plain
        assert "Current: Rooibos (05:00) [custom]" in text

    def test_brewing(self):
        """Brewing view shows the countdown and a progress bar."""
        text = render(make_session(state=TimerState.BREWING, remaining=120)).plain
        assert "Brewing...   02:00" in text
        assert "50%" in text
        assert "Current:" not in text

    def test_paused(self):
        """Paused view shows the paused label."""
        text = render(make_session(state=TimerState.PAUSED, remaining=60)).plain
        assert "Paused   01:00" in text
        assert "▓" in text

    def test_finished(self):
        """Finished view announces the tea is ready."""
        text = render(make_session(state=TimerState.FINISHED, remaining=0)).plain
        assert "Tea Ready!   00:00" in text
        assert "100%" in text

    def test_narrow_viewport_shrinks_bar(self):
        """Bar shrinks to fit a narrow viewport."""
        text = render(make_session(state=TimerState.BREWING, remaining=240, width=20)).plain
        assert "[" + "░" * 12 + "] 0%" in text
