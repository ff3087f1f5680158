"""Print the calories carried by the best-fed elf (or the top K elves)."""
import logging
import sys

from calories.args import Options, parse_args
from calories.elves import best_fed_elf, input_to_elves, max_calories, top_calories
from calories.errors import CalorieError
from calories.logging_config import setup_logging
from calories.reader import open_input, read_lines

logger = logging.getLogger(__name__)


def solve(options: Options) -> int:
    with open_input(options.input) as infile:
        elves = input_to_elves(read_lines(infile))

    best = best_fed_elf(elves)
    if best is not None:
        logger.info("Elf %d is best fed with %d calories", best.num, best.calories)

    if options.top == 1:
        return max_calories(elves)
    return top_calories(elves, options.top)


def main(argv=None) -> int:
    options = parse_args(argv)
    setup_logging(options.loglevel, options.log_file)

    try:
        answer = solve(options)
    except CalorieError as exc:
        logger.debug("Giving up on %s", options.input, exc_info=True)
        print(exc)
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
