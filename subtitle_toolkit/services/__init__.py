"""Service layer modules (filesystem I/O).

Includes file resolution, UTF-8 file helpers, SRT writing and transcript helpers.
"""

__all__ = [
    "errors",
    "files",
    "resolver",
    "writer",
    "transcript",
]
