"""SRT text parser.

Turns raw SRT content into an ordered list of :class:`Subtitle` values. The
parser works line by line, so CRLF files and runs of blank lines between
blocks are tolerated. Incomplete blocks are dropped without raising; only
content that is blank or has no timestamp range at all is rejected.
"""
from __future__ import annotations

import logging
import re
from typing import List, Optional

from subtitle_toolkit.services.errors import FormatError, ValidationError
from .subtitle import Subtitle
from .timeutils import parse_srt_time

logger = logging.getLogger(__name__)

TIMESTAMP_RANGE_RE = re.compile(
    r"\d{2}:\d{2}:\d{2},\d{3}\s*-->\s*\d{2}:\d{2}:\d{2},\d{3}"
)


class _Block:
    """Accumulator for the block currently being read."""

    def __init__(self):
        self.index: Optional[str] = None
        self.timestamp: Optional[str] = None
        self.text: List[str] = []

    def is_empty(self) -> bool:
        return self.index is None

    def feed(self, line: str) -> None:
        if self.index is None:
            self.index = line
        elif self.timestamp is None and '-->' in line:
            self.timestamp = line
        else:
            self.text.append(line)

    def to_subtitle(self) -> Optional[Subtitle]:
        if self.index is None or self.timestamp is None or not self.text:
            return None
        try:
            index = int(self.index)
        except ValueError:
            return None
        start_text, _, end_text = self.timestamp.partition('-->')
        try:
            start = parse_srt_time(start_text)
            end = parse_srt_time(end_text)
        except FormatError:
            return None
        return Subtitle(
            index=index,
            start_time=start,
            end_time=end,
            text='\n'.join(self.text).strip(),
        )


def validate_srt_content(content: Optional[str]) -> None:
    """Coarse check that ``content`` looks like SRT at all."""
    if content is None:
        raise ValidationError('Content cannot be None')
    if not content.strip():
        raise ValidationError('Content cannot be empty')
    if not TIMESTAMP_RANGE_RE.search(content):
        raise ValidationError('Invalid SRT format: missing required timestamp format')


def parse_srt(content: str) -> List[Subtitle]:
    """Parse SRT text into subtitles, keeping the indices found in the source."""
    validate_srt_content(content)

    subtitles: List[Subtitle] = []
    block = _Block()

    def close(current: _Block) -> None:
        if current.is_empty():
            return
        subtitle = current.to_subtitle()
        if subtitle is None:
            logger.debug("Dropping incomplete SRT block starting with %r", current.index)
        else:
            subtitles.append(subtitle)

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line:
            close(block)
            block = _Block()
            continue
        block.feed(line)

    close(block)
    return subtitles
