"""Pure logic for the tea timer state machine.

A session is an immutable snapshot. ``handle_event`` takes the current
session and one event, and returns the next session together with at most
one effect for the driver to carry out. Elapsed time is counted in ticks,
one second per ``TickElapsed`` received.
"""

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum, auto
from typing import Optional, Tuple

from .config import Config, Preset

logger = logging.getLogger(__name__)

TICK_SECONDS = 1


class TimerState(Enum):
    """Brewing lifecycle states."""
    IDLE = auto()
    BREWING = auto()
    PAUSED = auto()
    FINISHED = auto()


class Effect(Enum):
    """Side effects requested by a transition."""
    SCHEDULE_TICK = auto()
    PLAY_COMPLETION_ALERT = auto()
    TERMINATE = auto()


class Event:
    """Base class for timer input events."""


@dataclass(frozen=True)
class StartRequested(Event):
    pass


@dataclass(frozen=True)
class PauseToggleRequested(Event):
    pass


@dataclass(frozen=True)
class ResetRequested(Event):
    pass


@dataclass(frozen=True)
class PresetPrevRequested(Event):
    pass


@dataclass(frozen=True)
class PresetNextRequested(Event):
    pass


@dataclass(frozen=True)
class QuitRequested(Event):
    pass


@dataclass(frozen=True)
class TickElapsed(Event):
    """One second has passed. ``at`` is informational only."""
    at: Optional[datetime] = None


@dataclass(frozen=True)
class ViewportResized(Event):
    width: int
    height: int


@dataclass(frozen=True)
class Session:
    """State of the single running timer."""
    config: Config
    remaining: int
    state: TimerState = TimerState.IDLE
    preset_index: int = 0
    width: int = 0
    height: int = 0

    @property
    def custom_duration_active(self) -> bool:
        """Whether a custom duration overrides preset durations."""
        return self.config.custom_duration

    @property
    def preset(self) -> Preset:
        """Currently selected preset."""
        return self.config.presets[self.preset_index]

    @property
    def effective_duration(self) -> int:
        """Duration a fresh brew starts from, in seconds."""
        if self.custom_duration_active:
            return self.config.brew_time
        return self.preset.duration

    @property
    def progress(self) -> float:
        """Progress through the current brew (0.0 to 1.0)."""
        total = self.effective_duration
        if total <= 0:
            return 1.0
        return min(1.0, max(0.0, 1.0 - self.remaining / total))


Transition = Tuple[Session, Optional[Effect]]


def new_session(config: Config) -> Session:
    """Create the initial idle session for *config*."""
    session = Session(config=config, remaining=0)
    return replace(session, remaining=session.effective_duration)


def _start(session: Session) -> Transition:
    if session.state == TimerState.BREWING:
        return session, None
    # PAUSED keeps its remaining time; resuming goes through the pause toggle.
    if session.state == TimerState.PAUSED:
        return session, None
    return replace(session, state=TimerState.BREWING, remaining=session.effective_duration), Effect.SCHEDULE_TICK


def _toggle_pause(session: Session) -> Transition:
    if session.state == TimerState.BREWING:
        return replace(session, state=TimerState.PAUSED), None
    if session.state == TimerState.PAUSED:
        return replace(session, state=TimerState.BREWING), Effect.SCHEDULE_TICK
    return session, None


def _reset(session: Session) -> Transition:
    return replace(session, state=TimerState.IDLE, remaining=session.effective_duration), None


def _select_preset(session: Session, step: int) -> Transition:
    if session.state != TimerState.IDLE:
        return session, None

    index = (session.preset_index + step) % len(session.config.presets)
    moved = replace(session, preset_index=index)
    if not moved.custom_duration_active:
        moved = replace(moved, remaining=moved.preset.duration)
    return moved, None


def _tick(session: Session) -> Transition:
    if session.state != TimerState.BREWING:
        return session, None

    remaining = max(0, session.remaining - TICK_SECONDS)
    if remaining == 0:
        return replace(session, state=TimerState.FINISHED, remaining=0), Effect.PLAY_COMPLETION_ALERT
    return replace(session, remaining=remaining), Effect.SCHEDULE_TICK


def handle_event(session: Session, event: Event) -> Transition:
    """Apply one event to *session*.

    Args:
        session: Current session.
        event: Incoming event.

    Returns:
        The next session and the effect to run, or None for no effect.
        Events that do not apply to the current state return the session
        unchanged.
    """
    if isinstance(event, StartRequested):
        result = _start(session)
    elif isinstance(event, PauseToggleRequested):
        result = _toggle_pause(session)
    elif isinstance(event, ResetRequested):
        result = _reset(session)
    elif isinstance(event, PresetPrevRequested):
        result = _select_preset(session, -1)
    elif isinstance(event, PresetNextRequested):
        result = _select_preset(session, 1)
    elif isinstance(event, QuitRequested):
        result = session, Effect.TERMINATE
    elif isinstance(event, TickElapsed):
        result = _tick(session)
    elif isinstance(event, ViewportResized):
        result = replace(session, width=event.width, height=event.height), None
    else:
        result = session, None

    new, _ = result
    if new.state != session.state:
        logger.debug("%s: %s -> %s", type(event).__name__, session.state.name, new.state.name)
    return result
