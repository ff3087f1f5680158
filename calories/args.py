import argparse
import logging
from dataclasses import dataclass
from typing import Optional

DEFAULT_INPUT = "./day_1_input.txt"

LEVELS = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


@dataclass
class Options:
    """Options for the script."""

    input: str = DEFAULT_INPUT
    top: int = 1
    loglevel: int = logging.WARNING
    log_file: Optional[str] = None


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def parse_args(argv=None) -> Options:
    parser = argparse.ArgumentParser(
        "calories", description="Find the elf carrying the most calories"
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=DEFAULT_INPUT,
        help=f"Puzzle input, default={DEFAULT_INPUT}",
    )
    parser.add_argument(
        "--top",
        type=positive_int,
        default=1,
        help="Add up the calories of the TOP best-fed elves, default=1",
    )
    parser.add_argument(
        "-log",
        "--loglevel",
        default="warning",
        dest="loglevel",
        choices=list(LEVELS.keys()),
        help="Provide logging level. Example --loglevel debug, default=warning",
    )

    parser.add_argument(
        "--log-file",
        default=None,
        dest="log_file",
        help="Also write log records to this file",
    )

    args = parser.parse_args(argv)

    return Options(
        input=args.input,
        top=args.top,
        loglevel=LEVELS[args.loglevel],
        log_file=args.log_file,
    )
