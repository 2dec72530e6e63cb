"""Small filesystem helpers shared by the writers and the join pipeline."""
from __future__ import annotations

import os

from .errors import ValidationError


def read_text(path: str) -> str:
    """Read ``path`` as UTF-8 (an optional BOM is dropped).

    Undecodable bytes raise ``ValidationError``; ``OSError`` is not caught.
    """
    try:
        with open(path, 'r', encoding='utf-8-sig') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise ValidationError(f"{path} is not valid UTF-8: {e}") from e


def write_text(path: str, content: str) -> str:
    """Write ``content`` to ``path`` as UTF-8, creating missing parent directories."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='\n') as f:
        f.write(content)
    return path
