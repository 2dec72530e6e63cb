"""Join several SRT files into one.

The orchestrator is the only place where resolver, parser, merger and writer
meet. All settings arrive through :class:`JoinOptions`; nothing is read from
global state.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import List

from .core import Subtitle, merge_subtitles, parse_srt
from .services.errors import ConfigError
from .services.files import read_text
from .services.resolver import resolve_files
from .services.writer import write_srt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinOptions:
    folder: str = './'
    files: str = '*.srt'
    sort: str = 'inferred'
    buffer_ms: float = 100
    output: str = 'merged.srt'
    log_level: str = 'info'

    @classmethod
    def from_config(cls, config) -> "JoinOptions":
        """Build options from the ``join`` section of a :class:`Config`.

        Raises ``ConfigError`` when a value has the wrong type.
        """
        section = config.get('join') or {}
        if not isinstance(section, dict):
            raise ConfigError("The 'join' configuration section must be a mapping")
        values = {}
        for f in fields(cls):
            value = section.get(f.name)
            if value is None:
                continue
            expected = (int, float) if f.name == 'buffer_ms' else str
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ConfigError(f"join.{f.name} has an invalid value: {value!r}")
            values[f.name] = value
        return cls(**values)


class Join:
    """Resolve, parse, merge and write a set of SRT files."""

    def __init__(self, options: JoinOptions):
        self.options = options

    def join(self) -> List[Subtitle]:
        opts = self.options
        logger.info("Starting join in folder %s with files %s", opts.folder, opts.files)

        paths = resolve_files(opts.folder, opts.files, opts.sort)
        if paths:
            logger.info("Resolved files: %s", ', '.join(paths))
        else:
            logger.warning("No files matched %s in %s; writing an empty output", opts.files, opts.folder)

        # Parse everything before writing so a bad file leaves no output behind
        groups = [self._parse_file(path) for path in paths]

        merged = merge_subtitles(groups, opts.buffer_ms)
        logger.info("Merged %d subtitles from %d files", len(merged), len(groups))

        write_srt(merged, opts.output)
        logger.info("Output written to %s", opts.output)
        return merged

    def _parse_file(self, path: str) -> List[Subtitle]:
        subtitles = parse_srt(read_text(path))
        logger.debug("Parsed %d subtitles from %s", len(subtitles), path)
        return subtitles
