__all__ = [
    'CharStream',
    'StringBufferReader',
    'Position',
    'EOF',
    'Errors',
    'StreamError',
    'StreamClosedError',
    'IndexRangeError',
    'IllegalArgumentError',
    '__version__'
]

from .__version__ import __version__
from .constants import EOF
from .contract import CharStream
from .buffer import StringBufferReader
from .position import Position
from .errors import (
    Errors,
    StreamError,
    StreamClosedError,
    IndexRangeError,
    IllegalArgumentError
)
