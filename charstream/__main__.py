import sys

from pathlib import Path

import click

from charstream.main import set_verbosity, read_file, scan, advance
from charstream.config import ConfigError
from charstream.errors import StreamError


FILE = click.Path(exists=True, file_okay=True, dir_okay=False,
                  readable=True, path_type=Path)


@click.group()
def main():
    pass


@main.command("scan")
@click.argument("file", required=True, type=FILE)
@click.option("-o", "--offset", type=click.IntRange(min=0), default=0,
              help="number of characters to skip first")
@click.option("-n", "--count", type=click.IntRange(min=0), default=None,
              help="maximum number of characters to print")
@click.option("-d", "--define", multiple=True, metavar="NAME=VALUE",
              help="reader option")
@click.option("-v", "--verbose", count=True)
def scan_command(file, offset, count, define, verbose):
    """Print every character of FILE with its line and offset."""
    set_verbosity(verbose)
    with read_file(file, define) as reader:
        advance(reader, offset)
        for pos, char in scan(reader, count):
            click.echo(f"{pos}\t{char!r}")


@main.command()
@click.argument("file", required=True, type=FILE)
@click.option("-o", "--offset", type=click.IntRange(min=0), default=0,
              help="number of characters to skip first")
@click.option("-d", "--define", multiple=True, metavar="NAME=VALUE",
              help="reader option")
@click.option("-v", "--verbose", count=True)
def remainder(file, offset, define, verbose):
    """Print the unread text of FILE after OFFSET characters."""
    set_verbosity(verbose)
    with read_file(file, define) as reader:
        advance(reader, offset)
        click.echo(reader.get_pos())
        click.echo(reader.remainder(), nl=False)


def run():
    try:
        main()
    except (StreamError, ConfigError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
