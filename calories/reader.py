"""Open the puzzle input and stream its lines."""
import logging

from calories.errors import InputError

logger = logging.getLogger(__name__)


def open_input(path):
    """Open `path` for reading.

    The file is opened right away, so a missing or unreadable path fails
    here rather than on the first read. Use the result as a context
    manager.

    Lines end at "\\n" only, so a stray "\\r" stays inside its line.
    Bytes that are not UTF-8 are kept as surrogate escapes and fail as
    numbers later on.
    """
    try:
        infile = open(path, "r", encoding="utf-8", errors="surrogateescape",
                      newline="\n")
    except OSError as exc:
        raise InputError(path) from exc

    logger.debug("Opened %s", path)
    return infile


def read_lines(infile):
    for line in infile:
        yield line.strip()
