from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .constants import EOF
from .position import Position


class CharStream(ABC):
    """Character stream as seen by a scanner.

    This is the lenient interface: `peek` and `getch` never raise. End of
    input and any failure of the underlying stream are both reported as
    `constants.EOF`, so a scanner that needs to tell them apart must use the
    strict operations of the concrete stream instead.

    Iterating over the stream consumes it with `getch` until EOF.
    """

    @abstractmethod
    def peek(self) -> Optional[str]:
        """Return the next character without consuming it."""

    @abstractmethod
    def getch(self) -> Optional[str]:
        """Consume and return the next character."""

    @abstractmethod
    def get_pos(self) -> Position:
        """Return the current position."""

    def __iter__(self) -> CharStream:
        return self

    def __next__(self) -> str:
        char = self.getch()
        if char is EOF:
            raise StopIteration
        return char
