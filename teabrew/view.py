"""Render a timer session as styled text."""

from rich.text import Text

from .config import DEFAULT_PROGRESS_BAR_WIDTH
from .timer import Session, TimerState

COLOR_READY = "#00FF7F"
COLOR_BREWING = "#FFD93D"
COLOR_PAUSED = "#FFA500"
COLOR_IDLE = "#AAAAAA"
COLOR_PRESET = "#666666"

_MIN_BAR_WIDTH = 10
# Room taken by the brackets and percentage around the bar.
_BAR_DECORATION = 8

_BAR_CHARS = {
    TimerState.BREWING: ("█", "░"),
    TimerState.PAUSED: ("▓", "▒"),
    TimerState.FINISHED: ("█", "█"),
}


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    mins, secs = divmod(max(0, seconds), 60)
    return f"{mins:02d}:{secs:02d}"


def render_progress_bar(total: int, elapsed: int, width: int, state: TimerState) -> str:
    """Render a text progress bar with a percentage, e.g. ``[███░░] 60%``."""
    if total <= 0:
        return ""

    percent = min(1.0, max(0.0, elapsed / total))
    filled = int(percent * width)
    fill_char, empty_char = _BAR_CHARS.get(state, ("░", "░"))
    bar = fill_char * filled + empty_char * (width - filled)
    return f"[{bar}] {percent * 100:.0f}%"


def _bar_width(session: Session) -> int:
    if not session.width:
        return DEFAULT_PROGRESS_BAR_WIDTH
    fit = session.width - _BAR_DECORATION
    return max(_MIN_BAR_WIDTH, min(DEFAULT_PROGRESS_BAR_WIDTH, fit))


def _status_line(session: Session) -> Text:
    time_str = format_time(session.remaining)
    if session.state == TimerState.FINISHED:
        label, color = "🫖 Tea Ready!", COLOR_READY
    elif session.state == TimerState.BREWING:
        label, color = "⏰ Brewing...", COLOR_BREWING
    elif session.state == TimerState.PAUSED:
        label, color = "⏸ Paused", COLOR_PAUSED
    else:
        label, color = "Press 's' to start", COLOR_IDLE
    return Text(f"{label}   {time_str}", style=f"bold {color}")


def render(session: Session) -> Text:
    """Render *session* for display.

    Idle sessions show the selected preset and its brew time; running,
    paused and finished sessions show a progress bar instead.
    """
    preset = session.preset
    text = _status_line(session)

    if session.state == TimerState.IDLE:
        info = f"{preset.name} ({preset.temp})"
        if preset.notes:
            info += " - " + preset.notes
        text.append("\n\n")
        text.append("🍵 " + info, style=f"dim {COLOR_PRESET}")

        current = f"Current: {preset.name} ({format_time(session.effective_duration)})"
        if session.custom_duration_active:
            current += " [custom]"
        text.append("\n\n" + current)
    else:
        total = session.effective_duration
        bar = render_progress_bar(total, total - session.remaining, _bar_width(session), session.state)
        text.append("\n\n" + bar)

    return text
