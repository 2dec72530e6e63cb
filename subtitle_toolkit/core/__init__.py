"""
Core utilities and domain helpers for the subtitle toolkit.

This package hosts pure, side-effect-free logic: timestamp conversion,
SRT parsing, merging and cleaning. File I/O lives in ``services``.
"""

__all__ = [
    "Subtitle",
    "parse_srt_time",
    "format_srt_time",
    "format_timestamp_line",
    "parse_srt",
    "merge_subtitles",
    "clean_srt",
]

from .subtitle import Subtitle
from .timeutils import parse_srt_time, format_srt_time, format_timestamp_line
from .parser import parse_srt
from .merger import merge_subtitles
from .cleaning import clean_srt
