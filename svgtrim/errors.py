"""Exceptions raised by svgtrim."""


class MinifyError(Exception):
    """Base class for every error a minify call can surface."""


class MalformedMarkup(MinifyError):
    """The input is not well-formed XML.

    Carries the 1-based ``line`` and ``column`` of the problem and the
    0-based character ``offset`` into the input text when they are known.
    """

    def __init__(self, message: str, line: int | None = None, column: int | None = None,
                 offset: int | None = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.offset = offset

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class InvalidPathData(MinifyError, ValueError):
    """Path data that cannot be tokenized under the path grammar."""

    def __init__(self, message: str, position: int | None = None):
        super().__init__(message if position is None else f"{message} at position {position}")
        self.position = position


class InvalidColorValue(ValueError):
    """A color string the color engine does not understand exactly."""


class InvalidStyleValue(ValueError):
    """A declaration block the style engine cannot split."""
