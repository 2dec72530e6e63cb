"""Transcript extraction services.

Split between a pure helper that operates on SRT text and a thin file
wrapper, so extraction is testable by supplying SRT strings directly.
"""
from __future__ import annotations

import logging

from subtitle_toolkit.core import parse_srt
from .errors import ValidationError
from .files import read_text, write_text

logger = logging.getLogger(__name__)


def extract_transcript(srt_text: str, paragraph_gap: int = 1) -> str:
    """Return the spoken text of ``srt_text`` without indices or timestamps.

    Subtitle texts are joined by ``paragraph_gap`` newlines.
    """
    if isinstance(paragraph_gap, bool) or not isinstance(paragraph_gap, int) or paragraph_gap < 1:
        raise ValidationError(f'paragraph_gap must be an integer >= 1, got {paragraph_gap!r}')
    subtitles = parse_srt(srt_text)
    return ('\n' * paragraph_gap).join(s.text for s in subtitles)


def write_transcript(srt_path: str, output_path: str, paragraph_gap: int = 1) -> str:
    """Read ``srt_path``, extract the transcript and write it to ``output_path``."""
    logger.info("Extracting transcript: %s -> %s", srt_path, output_path)
    transcript = extract_transcript(read_text(srt_path), paragraph_gap=paragraph_gap)
    write_text(output_path, transcript)
    logger.debug("Transcript written with %d chars", len(transcript))
    return output_path
