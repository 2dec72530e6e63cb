"""Clean and normalise SRT captions produced by auto-captioning tools.

Word-highlight exports repeat the same caption several times with a
different ``<u>`` word each time. Cleaning drops the markup, puts every
caption on one line and folds consecutive duplicates into a single caption
spanning their combined time range.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional

from subtitle_toolkit.services.errors import ValidationError

UNDERLINE_RE = re.compile(r"</?u>")
INDEX_LINE_RE = re.compile(r"^\d+$")
TIMESTAMP_LINE_RE = re.compile(r"^(\d{2}:\d{2}:\d{2},\d{3}) --> (\d{2}:\d{2}:\d{2},\d{3})$")


def remove_underlines(content: str) -> str:
    return UNDERLINE_RE.sub('', content)


def group_captions(content: str) -> List[Dict[str, Optional[str]]]:
    """Group lines into captions with ``start``, ``end`` and one-line ``text``."""
    captions: List[Dict[str, Optional[str]]] = []
    current: Dict[str, Optional[str]] = {'start': None, 'end': None, 'text': ''}

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or INDEX_LINE_RE.match(line):
            continue
        match = TIMESTAMP_LINE_RE.match(line)
        if match:
            if current['start'] is not None:
                captions.append(current)
                current = {'start': None, 'end': None, 'text': ''}
            # Text seen before the first timestamp stays with the first caption
            current['start'], current['end'] = match.group(1), match.group(2)
        elif current['text']:
            current['text'] += ' ' + line
        else:
            current['text'] = line

    if current['start'] is not None and current['text']:
        captions.append(current)
    return captions


def merge_duplicates(captions: List[Dict[str, Optional[str]]]) -> List[Dict[str, Optional[str]]]:
    """Fold runs of captions with identical text, extending the end time."""
    merged: List[Dict[str, Optional[str]]] = []
    for caption in captions:
        if merged and merged[-1]['text'] == caption['text']:
            merged[-1] = dict(merged[-1], end=caption['end'])
        else:
            merged.append(dict(caption))
    return merged


def clean_srt(content: str) -> str:
    """Return cleaned SRT text, renumbered from 1.

    Timestamps are copied verbatim from the source.
    """
    if content is None or not content.strip():
        raise ValidationError('Content cannot be empty')

    captions = merge_duplicates(group_captions(remove_underlines(content)))
    blocks = [
        f"{i}\n{c['start']} --> {c['end']}\n{c['text']}\n"
        for i, c in enumerate(captions, start=1)
    ]
    return '\n'.join(blocks)
