"""Pure time utility helpers for SRT timestamps."""
from __future__ import annotations

import re

from subtitle_toolkit.services.errors import FormatError

_TIMESTAMP_RE = re.compile(r"^(\d+):(\d{2}):(\d{2}),(\d{3})$")


def parse_srt_time(time_str: str) -> float:
    """Convert an SRT timestamp to seconds.

    Accepts values like ``"00:00:10,500"`` and returns ``10.5``. Hours may
    have more than two digits. Raises ``FormatError`` on anything else.
    """
    if time_str is None:
        raise FormatError("Timestamp cannot be None")
    match = _TIMESTAMP_RE.match(time_str.strip())
    if not match:
        raise FormatError(f"Invalid SRT timestamp: {time_str!r}")
    hours, minutes, seconds, millis = (int(g) for g in match.groups())
    return (hours * 3_600_000 + minutes * 60_000 + seconds * 1000 + millis) / 1000.0


def format_srt_time(seconds: float) -> str:
    """Format seconds as an SRT timestamp ``HH:MM:SS,mmm``.

    The value is rounded to whole milliseconds before splitting, so a
    fraction such as ``.9996`` carries into the next second.
    """
    if seconds < 0:
        raise FormatError(f"Negative time cannot be formatted: {seconds}")
    total_ms = int(round(seconds * 1000))
    hours, rest = divmod(total_ms, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    secs, millis = divmod(rest, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def format_timestamp_line(start: float, end: float) -> str:
    """Return the ``start --> end`` line of an SRT block."""
    return f"{format_srt_time(start)} --> {format_srt_time(end)}"
