from __future__ import annotations

import logging
import threading

from typing import MutableSequence, Optional

from .constants import EOF
from .contract import CharStream
from .errors import (
    StreamError,
    StreamClosedError,
    IndexRangeError,
    IllegalArgumentError
)
from .position import Position

logger = logging.getLogger("charstream.buffer")


class StringBufferReader(CharStream):
    """Character stream over an in-memory string.

    The reader keeps the whole text in memory, so the cursor can be moved
    freely in both directions: characters can be pushed back, skipped
    forwards and backwards, and the stream can be rewound to a saved mark.

    There are two sets of read operations over the same state. `read`,
    `lookahead` and the rest of the strict operations raise `StreamError`
    subclasses on misuse. `getch` and `peek` implement the lenient
    `CharStream` interface and report any failure as EOF.

    Marks are kept on a stack. With the default depth of 1 there is a
    single mark slot: `mark` overwrites it and `reset` rewinds to it.
    A deeper stack allows nested speculative reads with `push_mark` and
    `pop_mark`.

    The line number is never derived from the text. The scanner sets it
    with `set_line` whenever it consumes a line terminator.

    Args:
        text: Text to open right away.
        name: Name of the source, used in messages.
        first_line: Initial value of the line counter.
        max_mark_depth: Maximum number of mark slots.
    """

    def __init__(self,
                 text: Optional[str] = None,
                 *,
                 name: str = "<string>",
                 first_line: int = 0,
                 max_mark_depth: int = 1):
        if max_mark_depth < 1:
            msg = f"mark depth must be at least 1, got {max_mark_depth}"
            raise IllegalArgumentError(msg)

        self.name = name
        self.max_mark_depth = max_mark_depth
        self.lock = threading.RLock()

        self._buffer: Optional[str] = ""
        self._next = 0
        self._marks = [0]
        self._line = first_line

        if text is not None:
            self.open(text)

    def _ensure_open(self) -> str:
        if self._buffer is None:
            raise StreamClosedError(f"stream closed: {self.name}")
        return self._buffer

    @staticmethod
    def _check_limit(read_ahead_limit: int) -> None:
        # The text is fully in memory, so the limit bounds nothing
        if read_ahead_limit < 0:
            raise IllegalArgumentError("read-ahead limit < 0")

    def open(self, text: str) -> None:
        """Replace the buffer contents and rewind to the start.

        The line counter is left as is.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text).__name__}")
        with self.lock:
            self._ensure_open()
            self._buffer = text
            self._next = 0
            self._marks = [0]
        logger.debug("%s: opened, %d characters", self.name, len(text))

    def hard_reset(self) -> None:
        """Empty the buffer and drop the cursor and all marks."""
        with self.lock:
            self._ensure_open()
            self._buffer = ""
            self._next = 0
            self._marks = [0]
        logger.debug("%s: hard reset", self.name)

    def read(self) -> Optional[str]:
        """Consume one character.

        Return EOF if the end of the buffer has been reached.

        Raises:
            StreamClosedError
        """
        with self.lock:
            buffer = self._ensure_open()
            if self._next >= len(buffer):
                return EOF
            char = buffer[self._next]
            self._next += 1
            return char

    def read_into(self,
                  destination: MutableSequence[str],
                  offset: int = 0,
                  max_length: Optional[int] = None) -> Optional[int]:
        """Copy characters into a portion of `destination`.

        At most `max_length` characters are copied starting from
        `destination[offset]`. If `max_length` is None, up to the end of
        `destination`.

        Return the number of characters copied, or EOF if the end of the
        buffer had been reached before the call.

        Raises:
            StreamClosedError
            IndexRangeError: The range does not fit into `destination`.
        """
        with self.lock:
            buffer = self._ensure_open()
            size = len(destination)
            if max_length is None:
                max_length = size - offset
            if (
                offset < 0 or offset > size or max_length < 0 or
                offset + max_length > size
            ):
                msg = (f"range {offset}:{offset + max_length} is outside "
                       f"of destination of length {size}")
                raise IndexRangeError(msg)
            if max_length == 0:
                return 0
            if self._next >= len(buffer):
                return EOF

            n = min(len(buffer) - self._next, max_length)
            chunk = buffer[self._next:self._next + n]
            for i, char in enumerate(chunk, offset):
                destination[i] = char
            self._next += n
            return n

    def skip(self, n: int) -> int:
        """Move the cursor by `n` characters, backwards if `n` is negative.

        The cursor never leaves the buffer: the move is clamped to its
        bounds. If the whole buffer has been consumed, skipping forward has
        no effect.

        Return the number of characters actually skipped, negative for
        a backward skip.
        """
        with self.lock:
            buffer = self._ensure_open()
            if n >= 0 and self._next >= len(buffer):
                return 0
            n = min(len(buffer) - self._next, n)
            n = max(-self._next, n)
            self._next += n
            return n

    def ready(self) -> bool:
        self._ensure_open()
        return True

    def mark_supported(self) -> bool:
        return True

    def mark(self, read_ahead_limit: int = 0) -> None:
        """Remember the current position in the top mark slot."""
        self._check_limit(read_ahead_limit)
        with self.lock:
            self._ensure_open()
            self._marks[-1] = self._next

    def reset(self) -> None:
        """Rewind to the top mark, or to the start if nothing was marked."""
        with self.lock:
            self._ensure_open()
            self._next = self._marks[-1]

    def push_mark(self, read_ahead_limit: int = 0) -> None:
        """Remember the current position in a new mark slot.

        Raises:
            IndexRangeError: `max_mark_depth` slots are already in use.
        """
        self._check_limit(read_ahead_limit)
        with self.lock:
            self._ensure_open()
            if len(self._marks) >= self.max_mark_depth:
                msg = f"mark stack overflow: depth {self.max_mark_depth}"
                raise IndexRangeError(msg)
            self._marks.append(self._next)
            logger.debug("%s: push mark %d, depth %d",
                         self.name, self._next, len(self._marks))

    def pop_mark(self, restore=True) -> int:
        """Remove the top mark slot and return its position.

        If `restore` is true, the cursor is moved back to the mark.
        Otherwise the cursor stays where it is.

        Raises:
            IndexRangeError: Only the bottom slot is left.
        """
        with self.lock:
            self._ensure_open()
            if len(self._marks) == 1:
                raise IndexRangeError("mark stack underflow")
            position = self._marks.pop()
            if restore:
                self._next = position
            logger.debug("%s: pop mark %d, depth %d",
                         self.name, position, len(self._marks))
            return position

    @property
    def mark_depth(self) -> int:
        return len(self._marks)

    def pushback(self, n: int = 1) -> None:
        """Move the cursor `n` characters back.

        Raises:
            StreamClosedError
            IllegalArgumentError: `n` is negative.
            IndexRangeError: `n` is greater than the current offset.
        """
        with self.lock:
            self._ensure_open()
            if n < 0:
                raise IllegalArgumentError(f"negative pushback: {n}")
            if n > self._next:
                msg = (f"pushback of {n} characters at offset {self._next} "
                       f"in {self.name}")
                raise IndexRangeError(msg)
            self._next -= n

    def lookahead(self) -> Optional[str]:
        """Return the next character without consuming it.

        Strict counterpart of `peek`.

        Raises:
            StreamClosedError
        """
        with self.lock:
            char = self.read()
            if char is not EOF:
                self.pushback()
            return char

    def remainder(self) -> str:
        """Return the unread part of the buffer without consuming it."""
        with self.lock:
            buffer = self._ensure_open()
            return buffer[self._next:]

    def getvalue(self) -> str:
        """Return the whole buffer contents."""
        return self._ensure_open()

    @property
    def offset(self) -> int:
        return self._next

    @property
    def line(self) -> int:
        return self._line

    def set_line(self, line: int) -> None:
        self._line = line

    @property
    def closed(self) -> bool:
        return self._buffer is None

    def close(self) -> None:
        """Release the buffer. Closing a closed stream does nothing."""
        with self.lock:
            if self._buffer is None:
                return
            self._buffer = None
        logger.debug("%s: closed", self.name)

    def peek(self) -> Optional[str]:
        try:
            return self.lookahead()
        except StreamError:
            return EOF

    def getch(self) -> Optional[str]:
        try:
            return self.read()
        except StreamError:
            return EOF

    def get_pos(self) -> Position:
        return Position(self._line, self._next)

    def __enter__(self) -> StringBufferReader:
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self):
        state = "closed" if self.closed else f"offset={self._next}"
        return (f"StringBufferReader(name={self.name!r}, {state}, "
                f"line={self._line})")
