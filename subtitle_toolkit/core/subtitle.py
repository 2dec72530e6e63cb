"""Subtitle value type shared by parser, merger and writer."""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Subtitle:
    """A single SRT caption with start/end times in seconds."""

    index: int
    start_time: float
    end_time: float
    text: str

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time

    def shifted(self, offset: float) -> "Subtitle":
        """Return a copy moved by ``offset`` seconds, kept on whole milliseconds."""
        return replace(
            self,
            start_time=round(self.start_time + offset, 3),
            end_time=round(self.end_time + offset, 3),
        )

    def renumbered(self, index: int) -> "Subtitle":
        return replace(self, index=index)
