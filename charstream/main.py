import logging

from pathlib import Path
from typing import Iterable, Iterator, Optional

from charstream.buffer import StringBufferReader
from charstream.config import reader_config
from charstream.constants import EOF, EOL_CHAR
from charstream.position import Position

logging.basicConfig(format="{name}: {message}", style="{")
logger = logging.getLogger("charstream")


def set_verbosity(verbose: int) -> None:
    if verbose >= 2:
        logger.setLevel(logging.DEBUG)
    elif verbose == 1:
        logger.setLevel(logging.INFO)


def create_reader(text: str,
                  options: Iterable[str] = ()) -> StringBufferReader:
    """Create a reader configured by `name=value` option strings.

    Raises:
        ConfigError
    """
    cfg = reader_config(options)
    return StringBufferReader(text,
                              name=cfg.name,
                              first_line=cfg.first_line,
                              max_mark_depth=cfg.max_mark_depth)


def read_file(file: Path, options: Iterable[str] = ()) -> StringBufferReader:
    logger.info("file %s", file)
    with open(file, 'r', encoding="UTF-8") as fin:
        text = fin.read()
    return create_reader(text, [f"name={file}", *options])


def scan(reader: StringBufferReader,
         count: Optional[int] = None) -> Iterator[tuple[Position, str]]:
    """Consume characters, yielding each with the position it was read at.

    Advances the reader's line counter after every end of line. Stops after
    `count` characters or at the end of input.
    """
    n = 0
    while count is None or n < count:
        pos = reader.get_pos()
        char = reader.getch()
        if char is EOF:
            break
        yield pos, char
        if char == EOL_CHAR:
            reader.set_line(reader.line + 1)
        n += 1


def advance(reader: StringBufferReader, count: int) -> int:
    """Consume up to `count` characters, keeping the line counter current.

    Return the number of characters consumed.
    """
    consumed = 0
    for _ in scan(reader, count):
        consumed += 1
    return consumed
