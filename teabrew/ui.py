"""Textual-based UI for the tea timer."""

import logging
from datetime import datetime
from typing import Callable, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.css.query import NoMatches
from textual.timer import Timer
from textual.widgets import Footer, Static

from .config import Config
from .timer import (
    Effect,
    Event,
    PauseToggleRequested,
    PresetNextRequested,
    PresetPrevRequested,
    QuitRequested,
    ResetRequested,
    Session,
    StartRequested,
    TickElapsed,
    TimerState,
    ViewportResized,
    handle_event,
    new_session,
)
from .view import render

logger = logging.getLogger(__name__)

TICK_INTERVAL = 1.0

_STATE_CLASSES = {
    TimerState.IDLE: "idle",
    TimerState.BREWING: "brewing",
    TimerState.PAUSED: "paused",
    TimerState.FINISHED: "finished",
}


class BrewDisplay(Static):
    """Timer status, preset details and progress."""

    def show_session(self, session: Session) -> None:
        self.update(render(session))
        self.remove_class(*_STATE_CLASSES.values())
        self.add_class(_STATE_CLASSES[session.state])


class TeaBrewApp(App):
    """Tea timer application.

    Key presses and ticks are turned into timer events and applied one at
    a time. Effects returned by the state machine are carried out here.
    """

    CSS_PATH = "teabrew.tcss"
    TITLE = "Tea Timer"

    BINDINGS = [
        Binding("s", "start", "Start"),
        Binding("space", "pause", "Pause/Resume"),
        Binding("p", "pause", "Pause/Resume", show=False),
        Binding("r", "reset", "Reset"),
        Binding("up", "prev_preset", "Prev tea"),
        Binding("down", "next_preset", "Next tea"),
        Binding("q", "quit_timer", "Quit"),
        Binding("ctrl+c", "quit_timer", "Quit", show=False, priority=True),
        Binding("ctrl+q", "quit_timer", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        config: Config,
        on_complete: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__()
        self.session = new_session(config)
        self.on_complete_callback = on_complete
        self._tick_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            yield BrewDisplay(id="brew")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_display()

    def on_resize(self, event: events.Resize) -> None:
        self.apply_event(ViewportResized(event.size.width, event.size.height))

    def apply_event(self, event: Event) -> None:
        """Apply *event* to the session and carry out the resulting effect."""
        self.session, effect = handle_event(self.session, event)
        self._refresh_display()

        if effect is Effect.SCHEDULE_TICK:
            self._arm_tick()
        elif effect is Effect.PLAY_COMPLETION_ALERT:
            self._announce_completion()
        elif effect is Effect.TERMINATE:
            self.exit()

    def _arm_tick(self) -> None:
        """Deliver a single TickElapsed after one second."""
        # A resume or restart inside the same second must not leave two ticks in flight.
        if self._tick_timer is not None:
            self._tick_timer.stop()
        self._tick_timer = self.set_timer(TICK_INTERVAL, self._on_tick)

    def _on_tick(self) -> None:
        self._tick_timer = None
        self.apply_event(TickElapsed(datetime.now()))

    def _announce_completion(self) -> None:
        if self.on_complete_callback is None:
            return
        logger.info("Tea ready, starting completion alerts")
        self.run_worker(
            self.on_complete_callback,
            name="completion-alert",
            group="alerts",
            thread=True,
            exit_on_error=False,
        )

    def _refresh_display(self) -> None:
        try:
            display = self.query_one("#brew", BrewDisplay)
        except NoMatches:
            return
        display.show_session(self.session)

    def action_start(self) -> None:
        self.apply_event(StartRequested())

    def action_pause(self) -> None:
        self.apply_event(PauseToggleRequested())

    def action_reset(self) -> None:
        self.apply_event(ResetRequested())

    def action_prev_preset(self) -> None:
        self.apply_event(PresetPrevRequested())

    def action_next_preset(self) -> None:
        self.apply_event(PresetNextRequested())

    def action_quit_timer(self) -> None:
        self.apply_event(QuitRequested())


def run_ui(config: Config, on_complete: Optional[Callable[[], None]] = None) -> None:
    """Run the tea timer UI.

    Args:
        config: Validated configuration.
        on_complete: Called in a background thread when the tea is ready.
    """
    app = TeaBrewApp(config, on_complete)
    app.run()
