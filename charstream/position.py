from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """Location snapshot of a stream: logical line and character offset."""

    line: int
    offset: int

    def __str__(self):
        return f"{self.line}:{self.offset}"
