"""Merge several subtitle sequences into one continuous sequence.

Each source keeps its internal timing. Only the gap between the end of one
source and the start of the next is adjusted, so that the next source starts
at least ``buffer_ms`` after the previous one ends. The result is renumbered
from 1.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from subtitle_toolkit.services.errors import ValidationError
from .subtitle import Subtitle

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_MS = 100


def calculate_offset(current_end_time: float, next_start_time: float, buffer_ms: float) -> float:
    """Return the shift (seconds) to apply to the next source.

    Zero when nothing has been merged yet, or when the next source already
    starts late enough.
    """
    if current_end_time == 0:
        return 0.0
    needed = current_end_time + buffer_ms / 1000.0 - next_start_time
    return max(needed, 0.0)


def renumber(subtitles: Iterable[Subtitle]) -> List[Subtitle]:
    """Return new subtitles numbered 1..N in the given order."""
    return [s.renumbered(i) for i, s in enumerate(subtitles, start=1)]


def merge_subtitles(sequences: Sequence[Sequence[Subtitle]],
                    buffer_ms: float = DEFAULT_BUFFER_MS) -> List[Subtitle]:
    """Concatenate ``sequences`` in order without overlap, then renumber."""
    if isinstance(buffer_ms, bool) or not isinstance(buffer_ms, (int, float)) or buffer_ms < 0:
        raise ValidationError(f'buffer_ms must be a non-negative number, got {buffer_ms!r}')

    merged: List[Subtitle] = []
    current_end_time = 0.0

    for position, subtitles in enumerate(sequences, start=1):
        if not subtitles:
            logger.debug("Skipping empty subtitle sequence #%d", position)
            continue

        offset = calculate_offset(current_end_time, subtitles[0].start_time, buffer_ms)
        logger.debug("Sequence #%d: %d subtitles, offset %.3fs", position, len(subtitles), offset)
        merged.extend(s.shifted(offset) for s in subtitles)
        current_end_time = merged[-1].end_time

    return renumber(merged)
