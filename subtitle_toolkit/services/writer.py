"""Serialise subtitles back to SRT text on disk."""
from __future__ import annotations

import logging
from typing import Sequence

from subtitle_toolkit.core import Subtitle, clean_srt, format_timestamp_line
from .files import read_text, write_text

logger = logging.getLogger(__name__)


def render_srt(subtitles: Sequence[Subtitle]) -> str:
    """Render subtitles as SRT text, numbering blocks 1..N.

    Any index already on the subtitles is ignored. Text is emitted as-is.
    """
    blocks = [
        f"{i}\n{format_timestamp_line(s.start_time, s.end_time)}\n{s.text}\n"
        for i, s in enumerate(subtitles, start=1)
    ]
    return '\n'.join(blocks)


def write_srt(subtitles: Sequence[Subtitle], output_path: str) -> str:
    """Write ``subtitles`` to ``output_path`` as UTF-8 and return the path.

    Missing parent directories are created. An empty sequence produces a
    zero-byte file. ``OSError`` from the filesystem is not caught.
    """
    content = render_srt(subtitles)
    write_text(output_path, content)
    logger.debug("Wrote %d subtitles (%d chars) to %s", len(subtitles), len(content), output_path)
    return output_path


def clean_file(input_path: str, output_path: str) -> str:
    """Clean the SRT file at ``input_path`` and write the result to ``output_path``."""
    logger.info("Cleaning subtitles: %s -> %s", input_path, output_path)
    cleaned = clean_srt(read_text(input_path))
    return write_text(output_path, cleaned)
