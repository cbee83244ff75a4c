"""Path data: tokenizing, absolute resolution and the shortest re-encoding.

Coordinates are kept as ``Decimal`` from the moment they are read, so that
rounding happens exactly once, on absolute positions, and relative output
is the exact difference between two rounded points. Decoding the output
therefore lands every point within half a unit of the last kept decimal
of where it was, however long the path.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, localcontext

from .errors import InvalidPathData
from .numbers import NUMBER_RE, WORKING_CONTEXT, format_decimal, in_range, join_numbers, round_decimal

# Argument kinds per command: "n" number, "f" arc flag.
ARGUMENTS = {
    "M": "nn",
    "L": "nn",
    "H": "n",
    "V": "n",
    "C": "nnnnnn",
    "S": "nnnn",
    "Q": "nnnn",
    "T": "nn",
    "A": "nnnffnn",
    "Z": "",
}

WSP = " \t\r\n\f"
SEPARATOR_RE = re.compile(r"[ \t\r\n\f]*,?[ \t\r\n\f]*")

_ZERO = Decimal(0)


@dataclass(frozen=True)
class Segment:
    command: str                    # upper-case letter
    relative: bool
    args: tuple[Decimal, ...] = ()


# --- parsing -------------------------------------------------------------------

class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def skip_space(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos] in WSP:
            self.pos += 1

    def skip_separator(self) -> None:
        self.pos = SEPARATOR_RE.match(self.text, self.pos).end()

    def number(self) -> Decimal:
        match = NUMBER_RE.match(self.text, self.pos)
        if not match:
            raise InvalidPathData("expected a number", self.pos)
        value = Decimal(match.group(0))
        if not in_range(value):
            raise InvalidPathData("number out of range", self.pos)
        self.pos = match.end()
        return value

    def flag(self) -> Decimal:
        if self.at_end() or self.peek() not in "01":
            raise InvalidPathData("expected an arc flag (0 or 1)", self.pos)
        self.pos += 1
        return Decimal(self.text[self.pos - 1])


def parse_path(d: str) -> list[Segment]:
    """Split path data into segments, expanding implicit command repetition."""
    scanner = _Scanner(d)
    segments: list[Segment] = []
    command = None
    scanner.skip_space()
    while not scanner.at_end():
        char = scanner.peek()
        if char.isalpha():
            if char.upper() not in ARGUMENTS:
                raise InvalidPathData(f"unknown command {char!r}", scanner.pos)
            if not segments and char not in "Mm":
                raise InvalidPathData("path data must begin with a move-to", scanner.pos)
            command = char
            scanner.pos += 1
            scanner.skip_space()
        elif command is None:
            raise InvalidPathData("path data must begin with a move-to", scanner.pos)
        elif command in "Zz":
            raise InvalidPathData("unexpected number after close-path", scanner.pos)
        elif command in "Mm":
            # coordinate pairs after the first one of a move-to are line-tos
            command = "L" if command == "M" else "l"

        args = []
        for index, kind in enumerate(ARGUMENTS[command.upper()]):
            if index:
                scanner.skip_separator()
            args.append(scanner.flag() if kind == "f" else scanner.number())
        segments.append(Segment(command.upper(), command.islower(), tuple(args)))
        scanner.skip_separator()
    return segments


# --- geometry ------------------------------------------------------------------

def to_absolute(segments: list[Segment]) -> list[Segment]:
    """The same path with every segment in absolute coordinates."""
    with localcontext(WORKING_CONTEXT):
        return _absolute(segments)


def _absolute(segments):
    out = []
    x = y = start_x = start_y = _ZERO
    for seg in segments:
        cmd, args = seg.command, seg.args
        if seg.relative:
            if cmd == "H":
                args = (args[0] + x,)
            elif cmd == "V":
                args = (args[0] + y,)
            elif cmd == "A":
                args = args[:5] + (args[5] + x, args[6] + y)
            elif cmd != "Z":
                args = tuple(v + (x if i % 2 == 0 else y) for i, v in enumerate(args))
        out.append(Segment(cmd, False, args))
        x, y = _end_point(cmd, args, x, y, start_x, start_y)
        if cmd == "M":
            start_x, start_y = x, y
    return out


def _end_point(cmd, args, x, y, start_x, start_y):
    if cmd == "Z":
        return start_x, start_y
    if cmd == "H":
        return args[0], y
    if cmd == "V":
        return x, args[0]
    return args[-2], args[-1]


def _round_segment(seg: Segment, precision: int, rounding: str) -> Segment:
    if seg.command == "A":
        args = tuple(v if i in (3, 4) else round_decimal(v, precision, rounding)
                     for i, v in enumerate(seg.args))
    else:
        args = tuple(round_decimal(v, precision, rounding) for v in seg.args)
    return Segment(seg.command, False, args)


def _relative_args(seg: Segment, x: Decimal, y: Decimal) -> tuple[Decimal, ...]:
    cmd, args = seg.command, seg.args
    if cmd == "H":
        return (args[0] - x,)
    if cmd == "V":
        return (args[0] - y,)
    if cmd == "A":
        return args[:5] + (args[5] - x, args[6] - y)
    return tuple(v - (x if i % 2 == 0 else y) for i, v in enumerate(args))


# --- output --------------------------------------------------------------------

def _encode(letter: str, numbers: list[str], previous_letter: str | None,
            previous_token: str) -> str:
    implicit = {"M": "L", "m": "l"}.get(previous_letter, previous_letter)
    if letter == implicit and letter not in "Zz":
        return join_numbers(numbers, previous_token)
    return letter + join_numbers(numbers)


def serialize_path(segments: list[Segment], precision: int, rounding: str = "half-even") -> str:
    """Shortest text for ``segments`` with coordinates rounded to ``precision`` places."""
    with localcontext(WORKING_CONTEXT):
        return _serialize(segments, precision, rounding)


def _serialize(segments, precision, rounding):
    out = []
    previous_letter = None
    previous_token = ""
    x = y = start_x = start_y = _ZERO
    for seg in _absolute(segments):
        seg = _round_segment(seg, precision, rounding)
        cmd = seg.command
        if cmd == "L":
            if seg.args[1] == y:
                seg = Segment("H", False, seg.args[:1])
            elif seg.args[0] == x:
                seg = Segment("V", False, seg.args[1:])
            cmd = seg.command

        if cmd == "Z":
            text, letter, numbers = _encode("z", [], previous_letter, previous_token), "z", []
        else:
            absolute = [format_decimal(v) for v in seg.args]
            relative = [format_decimal(v) for v in _relative_args(seg, x, y)]
            abs_text = _encode(cmd, absolute, previous_letter, previous_token)
            rel_text = _encode(cmd.lower(), relative, previous_letter, previous_token)
            if len(rel_text) < len(abs_text) or (
                    len(rel_text) == len(abs_text) and previous_letter is not None
                    and previous_letter.islower()):
                text, letter, numbers = rel_text, cmd.lower(), relative
            else:
                text, letter, numbers = abs_text, cmd, absolute

        out.append(text)
        previous_letter = letter
        previous_token = numbers[-1] if numbers else letter
        x, y = _end_point(cmd, seg.args, x, y, start_x, start_y)
        if cmd == "M":
            start_x, start_y = x, y
    return "".join(out)


def minify_path(d: str, precision: int, rounding: str = "half-even") -> str:
    """Re-encode path data in its shortest form. Raises InvalidPathData."""
    return serialize_path(parse_path(d), precision, rounding)


def minify_points(points: str, precision: int, rounding: str = "half-even") -> str:
    """Round a ``points`` list and join it with the fewest separators.

    An odd trailing coordinate is ignored by renderers; such lists are
    rejected so they pass through untouched.
    """
    scanner = _Scanner(points)
    values = []
    scanner.skip_space()
    while not scanner.at_end():
        values.append(scanner.number())
        scanner.skip_separator()
    if len(values) % 2:
        raise InvalidPathData("odd number of coordinates in point list")
    return join_numbers(format_decimal(round_decimal(v, precision, rounding)) for v in values)
