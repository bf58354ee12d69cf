"""Completion alert playback with layered fallbacks.

Strategies are tried in order and the first one that succeeds stops the
chain: the pygame mixer (a sound file, or a synthesized chime), then an
OS beep command, then the terminal bell.
"""

import logging
import os
import platform
import subprocess
import sys
import time
from typing import Callable, List, Optional, Tuple

import numpy as np

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame  # noqa: E402

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100
BEEP_TIMEOUT = 5
# (frequency Hz, seconds) notes of the built-in chime
CHIME = ((880, 0.25), (1320, 0.35))

_LINUX_BEEPS = (
    ("paplay", "/usr/share/sounds/alsa/Front_Left.wav"),
    ("aplay", "/usr/share/sounds/alsa/Front_Center.wav"),
    ("beep", "-f", "1000", "-l", "200"),
)
_MAC_BEEP = ("afplay", "/System/Library/Sounds/Ping.aiff")
_WINDOWS_BEEP = ("powershell", "-NoProfile", "-Command", "[System.Media.SystemSounds]::Beep.Play(); Start-Sleep -Milliseconds 500")


def make_chime(notes=CHIME, sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Build a stereo int16 sample buffer for a sequence of sine tones."""
    parts = []
    for freq, duration in notes:
        n = int(duration * sample_rate)
        t = np.linspace(0, duration, n, False)
        wave = np.sin(freq * t * 2 * np.pi)

        fade = min(n // 2, int(sample_rate * 0.01))
        if fade:
            wave[:fade] *= np.linspace(0, 1, fade)
            wave[-fade:] *= np.linspace(1, 0, fade)
        parts.append(wave)

    audio = (np.concatenate(parts) * 32767 * 0.8).astype(np.int16)
    return np.repeat(audio.reshape(-1, 1), 2, axis=1)


def play_with_mixer(sound_file: Optional[str] = None) -> bool:
    """Play *sound_file*, or the built-in chime, through the pygame mixer."""
    try:
        pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
    except pygame.error as exc:
        logger.warning("Audio device unavailable: %s", exc)
        return False

    try:
        if sound_file:
            sound = pygame.mixer.Sound(sound_file)
        else:
            sound = pygame.sndarray.make_sound(make_chime())
        sound.play()
        time.sleep(sound.get_length())
        return True
    except (pygame.error, OSError, ValueError) as exc:
        logger.warning("Mixer playback failed: %s", exc)
        return False
    finally:
        pygame.mixer.quit()


def _run_beep(args) -> bool:
    try:
        subprocess.run(list(args), capture_output=True, timeout=BEEP_TIMEOUT, check=True)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.debug("Beep command %s failed: %s", args[0], exc)
        return False


def play_system_beep() -> bool:
    """Play a beep with the platform's sound command."""
    system = platform.system()
    if system == "Darwin":
        commands: Tuple[tuple, ...] = (_MAC_BEEP,)
    elif system == "Windows":
        commands = (_WINDOWS_BEEP,)
    elif system == "Linux":
        commands = _LINUX_BEEPS
    else:
        logger.warning("No system beep implementation for %s", system)
        return False

    for args in commands:
        if _run_beep(args):
            return True

    logger.warning("System beep failed on %s", system)
    return False


def ring_terminal_bell() -> bool:
    """Write the terminal bell character."""
    try:
        sys.__stdout__.write("\a")
        sys.__stdout__.flush()
        return True
    except (AttributeError, OSError, ValueError) as exc:
        logger.warning("Terminal bell failed: %s", exc)
        return False


def play_completion_alert(
    sound_file: Optional[str] = None,
    bell: Optional[Callable[[], bool]] = None,
) -> bool:
    """Play the completion alert, falling back through each strategy.

    Args:
        sound_file: Optional audio file for the mixer tier.
        bell: Replacement for the terminal bell tier.

    Returns:
        True if any strategy succeeded.
    """
    strategies: List[Tuple[str, Callable[[], bool]]] = [
        ("mixer", lambda: play_with_mixer(sound_file)),
        ("system beep", play_system_beep),
        ("terminal bell", bell or ring_terminal_bell),
    ]

    for name, strategy in strategies:
        if strategy():
            logger.debug("Completion alert played via %s", name)
            return True

    logger.error("All audio methods failed")
    return False
