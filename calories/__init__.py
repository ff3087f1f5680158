"""Count the calories carried by a group of elves.

The input lists one calorie value per line, and a blank line separates
one elf's inventory from the next. See `calories.elves` for the grouping
and reduction.
"""
from calories.elves import (
    Elf,
    best_fed_elf,
    input_to_elves,
    max_calories,
    top_calories,
)
from calories.errors import CalorieError, InputError, ParseError
from calories.reader import open_input, read_lines

__all__ = [
    "CalorieError",
    "Elf",
    "InputError",
    "ParseError",
    "best_fed_elf",
    "input_to_elves",
    "max_calories",
    "open_input",
    "read_lines",
    "top_calories",
]
