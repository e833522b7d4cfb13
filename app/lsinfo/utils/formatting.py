"""Rich console formatting utilities.

Provides the shared consoles, message helpers, and the byte-count and
timestamp formatters used by the listing output.
"""

import os
import sys
from datetime import datetime

from rich.console import Console
from rich.markup import escape

from lsinfo.core.config import DEFAULT_TIME_FORMAT
from lsinfo.core.theme import get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import).
# File names are printed verbatim, so no emoji codes or auto highlighting.
console = Console(
    theme=get_theme(),
    color_system=_detect_color_system(),
    emoji=False,
    highlight=False,
)
err_console = Console(
    theme=get_theme(),
    stderr=True,
    color_system=_detect_color_system(),
    emoji=False,
    highlight=False,
)


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string.

    Args:
        size_bytes: Size in bytes.

    Returns:
        String such as "512 B", "1.5 KB" or "3.0 GB"; "0 B" for None.
    """
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def format_timestamp(timestamp: float, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """Format a POSIX timestamp in local time.

    Args:
        timestamp: Seconds since the epoch.
        time_format: strftime pattern.

    Returns:
        The formatted date, or "?" if the timestamp is out of range.
    """
    try:
        return datetime.fromtimestamp(timestamp).strftime(time_format)
    except (OverflowError, OSError, ValueError):
        return "?"


def printable(text: str) -> str:
    """Make a filesystem string safe to write to a UTF-8 stream.

    Bytes that were not valid UTF-8 come back from the OS as surrogate
    escapes; they are shown as ``\\xNN`` instead.

    Args:
        text: Path or name as returned by ``os`` functions.

    Returns:
        The text with undecodable bytes backslash-escaped.
    """
    try:
        raw = os.fsencode(text)
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "backslashreplace")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(printable(message))}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(printable(message))}", soft_wrap=True)
