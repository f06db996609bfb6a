"""Read a grid from stdin and print the moves from the "me" feature to the destination."""

import sys
from typing import Optional, TextIO

from config import Settings, get_settings
from grid import GridError, NEW_LINE, parse
import logger

_log = logger.get_logger(__name__)


def strip_header(raw: str) -> str:
    """Drop the first line (a size hint nobody needs) and keep the rest verbatim."""
    lines = raw.split(NEW_LINE)
    return NEW_LINE.join(lines[1:])


def run(raw: str, settings: Settings) -> str:
    """Parse the grid body of raw input and route between the configured markers."""
    game_grid = parse(strip_header(raw))
    return game_grid.route(settings.source_marker, settings.target_marker)


def main(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
         settings: Optional[Settings] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    settings = settings or get_settings()
    logger.configure(settings.log_level)

    raw = stdin.read()
    try:
        moves = run(raw, settings)
    except GridError as e:
        _log.tag("MAIN", f"aborted: {type(e).__name__}: {e}", level="debug")
        stdout.write(f"{e}\n")
        return 1

    stdout.write(moves + NEW_LINE)
    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
