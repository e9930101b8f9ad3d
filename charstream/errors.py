from enum import StrEnum


class Errors(StrEnum):
    STREAM_CLOSED = "stream-closed"
    INDEX_RANGE = "index-range"
    ILLEGAL_ARGUMENT = "illegal-argument"


class StreamError(Exception):
    """Base class for strict stream operation failures."""

    what: Errors

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __repr__(self):
        return f"{type(self).__name__}({self.what!s}, {self.message!r})"


class StreamClosedError(StreamError):
    what = Errors.STREAM_CLOSED

    def __init__(self, message: str = "stream closed"):
        super().__init__(message)


class IndexRangeError(StreamError, IndexError):
    what = Errors.INDEX_RANGE


class IllegalArgumentError(StreamError, ValueError):
    what = Errors.ILLEGAL_ARGUMENT
