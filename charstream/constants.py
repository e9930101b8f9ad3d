"""Character and stream constants shared by scanners built on charstream.

The stream does not interpret any of these; it returns raw characters
and positions. A scanner uses them to decide what a character means.
"""

from enum import IntEnum
from typing import Final

COMMENT_CHAR: Final = '*'
CONTINUE_CHAR: Final = '.'
CONTROL_WORD_CHAR: Final = '-'
COMMA_CHAR: Final = ','
BLANK_CHAR: Final = ' '
WHITESPACE_CHARS: Final = " \t"
NULL_STRING: Final = ""
SQUOTE: Final = "'"
DQUOTE: Final = '"'
EOL_CHAR: Final = '\n'
LPAREN_CHAR: Final = '('
RPAREN_CHAR: Final = ')'

# Returned by read operations when no characters are left
EOF: Final = None

NO_ADDRESS: Final = -1

DEFAULT_STACK_SIZE: Final = 128
INITIAL_CODE_SIZE: Final = 1024


class StreamId(IntEnum):
    """Predefined I/O stream identifiers."""

    STDNULL = -1
    STDIN = 0
    STDOUT = 1
    STDERR = 2
