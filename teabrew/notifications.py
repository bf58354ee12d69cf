"""Desktop notification support for the tea timer."""

import logging
import platform
import subprocess

logger = logging.getLogger(__name__)

NOTIFY_TIMEOUT = 5

_WINDOWS_TOAST = (
    "[void][System.Reflection.Assembly]::LoadWithPartialName('System.Windows.Forms');"
    "$n = New-Object System.Windows.Forms.NotifyIcon;"
    "$n.Icon = [System.Drawing.SystemIcons]::Information;"
    "$n.Visible = $true;"
    "$n.ShowBalloonTip(5000, '{title}', '{message}', 'Info');"
    "Start-Sleep -Seconds 5; $n.Dispose()"
)


def _run(args: list) -> bool:
    try:
        subprocess.run(args, capture_output=True, timeout=NOTIFY_TIMEOUT, check=True)
        return True
    except (subprocess.SubprocessError, FileNotFoundError, OSError) as exc:
        logger.warning("Failed to send notification via %s: %s", args[0], exc)
        return False


def _applescript_quote(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _send_macos_notification(title: str, message: str) -> bool:
    """Send macOS notification via osascript."""
    script = f'display notification "{_applescript_quote(message)}" with title "{_applescript_quote(title)}"'
    return _run(["osascript", "-e", script])


def _send_linux_notification(title: str, message: str) -> bool:
    """Send Linux notification via notify-send."""
    return _run(["notify-send", title, message])


def _send_windows_notification(title: str, message: str) -> bool:
    """Send Windows balloon notification via PowerShell."""
    script = _WINDOWS_TOAST.format(title=title.replace("'", "''"), message=message.replace("'", "''"))
    return _run(["powershell", "-NoProfile", "-Command", script])


def notify_completion(title: str, message: str) -> bool:
    """Send a desktop notification.

    Failures are logged and never raised.

    Args:
        title: Notification title.
        message: Notification message.

    Returns:
        True if a notification was delivered, False otherwise.
    """
    system = platform.system()
    if system == "Darwin":
        return _send_macos_notification(title, message)
    if system == "Linux":
        return _send_linux_notification(title, message)
    if system == "Windows":
        return _send_windows_notification(title, message)

    logger.warning("No desktop notification support for %s", system)
    return False
