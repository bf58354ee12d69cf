"""Entry point for python -m teabrew."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .audio import play_completion_alert
from .config import (
    DEFAULT_BREW_TIME,
    MAX_BREW_TIME,
    MIN_BREW_TIME,
    Config,
    ConfigError,
    format_duration,
    parse_duration,
)
from .log import setup_logging
from .notifications import notify_completion
from .ui import run_ui

logger = logging.getLogger(__name__)

NOTIFY_TITLE = "Tea Timer"
NOTIFY_MESSAGE = "Your tea is ready!"


def _duration_arg(value: str) -> int:
    try:
        return parse_duration(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="teabrew",
        description="Terminal tea brewing timer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Controls:
  s          Start brewing
  Space, p   Pause/Resume
  r          Reset timer
  Up/Down    Select tea preset (while idle)
  q, Ctrl+C  Quit

Examples:
  teabrew                     # Pick a tea preset, default {format_duration(DEFAULT_BREW_TIME)}
  teabrew --duration 2m       # 2-minute brew, ignores preset times
  teabrew --duration 3m30s --no-sound
""",
    )

    parser.add_argument(
        "--duration",
        type=_duration_arg,
        default=None,
        metavar="DURATION",
        help=(
            "Custom brew time such as 2m or 3m30s, overriding preset times "
            f"({format_duration(MIN_BREW_TIME)} to {format_duration(MAX_BREW_TIME)})"
        ),
    )

    # Alerts
    parser.add_argument(
        "--no-sound",
        action="store_true",
        help="Disable the audio alert",
    )
    parser.add_argument(
        "--no-notify",
        action="store_true",
        help="Disable desktop notifications",
    )
    parser.add_argument(
        "--sound-file",
        default="",
        metavar="PATH",
        help="Audio file to play when the tea is ready (default: built-in chime)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Also write log records to this file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    """Build a validated Config from parsed arguments.

    Raises:
        ConfigError: If the configuration is invalid.
    """
    custom = args.duration is not None
    config = Config(
        brew_time=args.duration if custom else DEFAULT_BREW_TIME,
        custom_duration=custom,
        sound_enabled=not args.no_sound,
        notify_enabled=not args.no_notify,
        sound_file=args.sound_file,
    )
    config.validate()
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        config = build_config(args)
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    def on_complete() -> None:
        """Completion callback, run off the UI thread."""
        if config.notify_enabled:
            notify_completion(NOTIFY_TITLE, NOTIFY_MESSAGE)
        if config.sound_enabled:
            play_completion_alert(config.sound_file or None)

    try:
        run_ui(config, on_complete=on_complete)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Error running the timer UI")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
