"""Group calorie values by elf and reduce the groups.

Every blank line starts a new elf, so runs of blank lines (and a
trailing blank line) leave elves that carry nothing. Those stay in the
list at zero calories; they can never win because the maximum starts at
zero.
"""
import heapq
import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from calories.errors import ParseError

logger = logging.getLogger(__name__)

# Base-10 only: `int()` alone would also take "1_000" and non-ASCII digits.
NUMBER = re.compile(r"[+-]?[0-9]+")

# Values must fit a signed 64-bit integer.
MIN_CALORIES = -(1 << 63)
MAX_CALORIES = (1 << 63) - 1


@dataclass
class Elf:
    num: int
    calories: int = 0

    def eat(self, calories: int) -> None:
        self.calories += calories


def parse_calories(line: str, lineno: int) -> int:
    if not NUMBER.fullmatch(line):
        raise ParseError(lineno, line)
    calories = int(line)
    if not MIN_CALORIES <= calories <= MAX_CALORIES:
        raise ParseError(lineno, line)
    return calories


def input_to_elves(lines: Iterable[str]) -> List[Elf]:
    """Sum the calorie values of each elf, in input order.

    `lines` should already be stripped. A line that is not a number
    raises `ParseError` and nothing is returned.
    """
    elf_index = 0
    elves = [Elf(elf_index)]

    for lineno, line in enumerate(lines, start=1):
        if line:
            elves[elf_index].eat(parse_calories(line, lineno))
        else:
            elf_index += 1
            elves.append(Elf(elf_index))

    logger.debug("Read %d elves", len(elves))
    return elves


def max_calories(elves: Iterable[Elf]) -> int:
    most_cals = 0
    for elf in elves:
        if elf.calories > most_cals:
            most_cals = elf.calories
    return most_cals


def best_fed_elf(elves: Iterable[Elf]) -> Optional[Elf]:
    """Find the first elf carrying the most calories.

    Returns None if nobody carries more than zero.
    """
    best = None
    for elf in elves:
        if elf.calories > (best.calories if best else 0):
            best = elf
    return best


def top_calories(elves: Iterable[Elf], k: int = 3) -> int:
    """Total calories carried by the `k` best-fed elves.

    Like `max_calories`, each elf counts for at least zero, so `k=1`
    gives the same answer.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    top = heapq.nlargest(k, (max(elf.calories, 0) for elf in elves))
    return sum(top)
