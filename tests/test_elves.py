import pytest

from calories.elves import (
    Elf,
    best_fed_elf,
    input_to_elves,
    max_calories,
    top_calories,
)
from calories.errors import ParseError

EXAMPLE = """
1000
2000
3000

4000

5000
6000

7000
8000
9000

10000
"""


def elves_from(text):
    return input_to_elves(line.strip() for line in text.splitlines())


def test_example_best_elf():
    elves = elves_from(EXAMPLE.lstrip("\n"))
    assert max_calories(elves) == 24000
    assert best_fed_elf(elves) == Elf(3, 24000)


def test_example_top_three():
    elves = elves_from(EXAMPLE.lstrip("\n"))
    assert top_calories(elves) == 45000


def test_groups_split_on_blank_lines():
    elves = elves_from("10\n20\n\n5\n")
    assert [elf.calories for elf in elves] == [30, 5]
    assert max_calories(elves) == 30


def test_zero_group_does_not_win():
    assert max_calories(elves_from("1\n1\n1\n\n0\n\n100\n")) == 100


def test_trailing_blank_line_keeps_empty_elf():
    elves = elves_from("7\n\n")
    assert [elf.calories for elf in elves] == [7, 0]
    assert [elf.num for elf in elves] == [0, 1]


def test_consecutive_blank_lines_keep_empty_elves():
    elves = elves_from("1\n\n\n2\n")
    assert [elf.calories for elf in elves] == [1, 0, 2]


def test_only_blank_lines():
    elves = elves_from("\n\n\n")
    assert max_calories(elves) == 0
    assert best_fed_elf(elves) is None


def test_empty_input():
    elves = input_to_elves([])
    assert elves == [Elf(0)]
    assert max_calories(elves) == 0


def test_single_group_sums_everything():
    assert max_calories(elves_from("1\n2\n3\n4")) == 10


def test_surrounding_whitespace_is_ignored():
    assert max_calories(elves_from("  12 \n\t3\n   \n4\n")) == 15


@pytest.mark.parametrize("line", ["abc", "1.5", "1_000", "12a", "--3"])
def test_bad_number(line):
    with pytest.raises(ParseError) as excinfo:
        elves_from(f"1\n\n{line}\n2\n")
    assert excinfo.value.lineno == 3
    assert excinfo.value.line == line
    assert "line 3" in str(excinfo.value)


def test_signed_numbers_parse():
    elves = elves_from("+5\n-2\n")
    assert elves[0].calories == 3


def test_max_starts_at_zero():
    assert max_calories([Elf(0, -4), Elf(1, -1)]) == 0


def test_best_fed_prefers_first_on_tie():
    elves = [Elf(0, 5), Elf(1, 9), Elf(2, 9)]
    assert best_fed_elf(elves).num == 1


def test_top_more_than_elves():
    assert top_calories([Elf(0, 5), Elf(1, 9)], k=5) == 14


def test_top_needs_positive_k():
    with pytest.raises(ValueError):
        top_calories([Elf(0, 5)], k=0)


def test_calories_fit_in_64_bits():
    assert max_calories(elves_from("9223372036854775807\n")) == 2**63 - 1
    with pytest.raises(ParseError):
        elves_from("-9223372036854775809\n")


def test_top_counts_negative_elves_as_zero():
    assert top_calories([Elf(0, -5), Elf(1, -3)], k=2) == 0
