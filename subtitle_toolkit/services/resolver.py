"""Resolve a folder plus a comma-separated file spec into SRT paths.

Each pattern is either a glob (contains ``*``) expanded relative to the
folder, or a literal file name kept only when the file exists.
"""
from __future__ import annotations

import glob
import logging
import os
from typing import List

from .errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

SORT_MODES = ("asc", "desc", "inferred")


def split_file_spec(file_spec: str) -> List[str]:
    return [p.strip() for p in file_spec.split(',') if p.strip()]


def resolve_pattern(folder: str, pattern: str) -> List[str]:
    if '*' in pattern:
        return glob.glob(os.path.join(folder, pattern))
    path = os.path.join(folder, pattern)
    if os.path.isfile(path):
        return [path]
    logger.debug("Skipping missing file: %s", path)
    return []


def sort_files(files: List[str], file_spec: str, sort: str) -> List[str]:
    """Order resolved paths according to ``sort``.

    ``inferred`` keeps the user's order for explicit file lists and falls
    back to ascending order as soon as the spec contains a wildcard.
    """
    if sort == 'asc':
        return sorted(files)
    if sort == 'desc':
        return sorted(files, reverse=True)
    if '*' not in file_spec:
        return list(files)
    return sorted(files)


def resolve_files(folder: str, file_spec: str, sort: str = 'inferred') -> List[str]:
    """Return the ordered list of existing files matching ``file_spec``.

    Raises ``ValidationError`` for missing arguments or an unknown sort mode
    and ``NotFoundError`` when ``folder`` is not a directory. An empty list
    is returned when nothing matches.
    """
    if not folder:
        raise ValidationError('folder is required')
    if not file_spec:
        raise ValidationError('files is required')
    if sort not in SORT_MODES:
        raise ValidationError(f"sort must be one of {', '.join(SORT_MODES)}; got {sort!r}")
    if not os.path.isdir(folder):
        raise NotFoundError(f"No such directory - {folder}")

    resolved: List[str] = []
    for pattern in split_file_spec(file_spec):
        resolved.extend(resolve_pattern(folder, pattern))
    return sort_files(resolved, file_spec, sort)
