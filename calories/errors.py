class CalorieError(Exception):
    """Base class for errors that abort a calorie count."""


class InputError(CalorieError):
    """The input file could not be opened."""

    def __init__(self, path):
        super().__init__(f"Cannot open input file: {path}")
        self.path = path


class ParseError(CalorieError):
    """A non-blank line is not a decimal integer."""

    def __init__(self, lineno, line):
        super().__init__(
            f"Could not format calorie number on line {lineno}: {line!r}"
        )
        self.lineno = lineno
        self.line = line
