"""Rounding and shortest formatting of numbers, lengths and number lists."""

import re
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal, InvalidOperation

ROUNDING_MODES = {
    "half-even": ROUND_HALF_EVEN,
    "half-up": ROUND_HALF_UP,
}

# General numeric token (int or float, optional exponent)
NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
LENGTH_RE = re.compile(r"\s*(" + NUMBER_RE.pattern + r")([a-zA-Z]+|%)?\s*")
LIST_SPLIT_RE = re.compile(r"[\s,]+")
TRANSFORM_RE = re.compile(r"\s*([A-Za-z]+)\s*\(([^()]*)\)\s*,?\s*")
TRANSFORM_ARITY = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}
# Argument positions that are coordinates rather than factors or angles.
TRANSFORM_OFFSETS = {"matrix": (4, 5), "translate": (0, 1), "rotate": (1, 2)}

# Numbers with a decimal exponent beyond +-MAX_EXPONENT are refused: written
# out in plain notation they would be huge, and path arithmetic on them could
# overflow. Coordinate arithmetic runs in WORKING_CONTEXT.
MAX_EXPONENT = 32
WORKING_CONTEXT = Context(prec=80)


def in_range(value: Decimal) -> bool:
    """Whether ``value`` is small enough to be rounded and written out in full."""
    return value.is_zero() or -MAX_EXPONENT <= value.adjusted() <= MAX_EXPONENT


def parse_decimal(text: str) -> Decimal:
    """Convert a numeric token to Decimal, raising ValueError when it is not one."""
    if not NUMBER_RE.fullmatch(text):
        raise ValueError(f"not a number: {text!r}")
    value = Decimal(text)
    if not in_range(value):
        raise ValueError(f"number out of range: {text!r}")
    return value


def round_decimal(value: Decimal, precision: int, rounding: str = "half-even") -> Decimal:
    """Round to at most ``precision`` decimal places.

    Values that already have fewer decimals come back unchanged.
    """
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent >= -precision:
        return value
    try:
        return value.quantize(Decimal(1).scaleb(-precision), rounding=ROUNDING_MODES[rounding],
                              context=WORKING_CONTEXT)
    except InvalidOperation:
        # magnitude beyond the working precision; nothing sensible to round
        return value


def round_nonzero(value: Decimal, precision: int, rounding: str = "half-even") -> Decimal:
    """Like :func:`round_decimal`, but a non-zero value never becomes zero.

    A width or a viewBox size of zero disables rendering, so a value too
    small for ``precision`` is kept as written.
    """
    rounded = round_decimal(value, precision, rounding)
    if rounded.is_zero() and not value.is_zero():
        return value
    return rounded


def format_decimal(value: Decimal) -> str:
    """Shortest plain-notation text for ``value``: no trailing zeros, no leading 0."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", "", "-"):
        return "0"
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def format_number(value, precision: int, rounding: str = "half-even") -> str:
    """Round then format a number given as str, int, float or Decimal."""
    if isinstance(value, float):
        value = Decimal(repr(value))
    elif not isinstance(value, Decimal):
        value = parse_decimal(str(value).strip())
    return format_decimal(round_decimal(value, precision, rounding))


def needs_separator(previous: str, following: str) -> bool:
    """Whether two number tokens written back to back would read as one."""
    if not previous:
        return False
    first = following[:1]
    if first in ("-", "+"):
        return previous[-1:] in ("e", "E")
    if first == ".":
        # a second decimal point always starts a new number
        return "." not in previous and "e" not in previous.lower()
    return True


def join_numbers(tokens, previous: str = "") -> str:
    """Concatenate number tokens with the fewest separators.

    ``previous`` is the token already written before the first one, if any.
    """
    out = []
    for token in tokens:
        if needs_separator(previous, token):
            out.append(" ")
        out.append(token)
        previous = token
    return "".join(out)


def parse_length(text: str) -> tuple[Decimal, str] | None:
    """Split ``"12.5px"`` into ``(Decimal("12.5"), "px")``; None if not a length."""
    match = LENGTH_RE.fullmatch(text)
    if not match:
        return None
    return Decimal(match.group(1)), match.group(2) or ""


def lengths_equal(a: str, b: str) -> bool:
    """Compare two lengths by value; ``px`` equals user units and zero ignores units."""
    left, right = parse_length(a), parse_length(b)
    if left is None or right is None:
        return False
    (left_num, left_unit), (right_num, right_unit) = left, right
    if left_num != right_num:
        return False
    if left_num == 0:
        return True
    normalize = {"px": ""}
    return normalize.get(left_unit, left_unit) == normalize.get(right_unit, right_unit)


def minify_length(text: str, precision: int, rounding: str = "half-even") -> str | None:
    """Round the number in a length and keep its unit. None if ``text`` is not a length."""
    parsed = parse_length(text)
    if parsed is None:
        return None
    number, unit = parsed
    if not in_range(number):
        return None
    return _shortest(number, precision, rounding, LENGTH_RE.fullmatch(text).group(1)) + unit


def _shortest(value: Decimal, precision: int, rounding: str, written: str) -> str:
    text = format_decimal(round_nonzero(value, precision, rounding))
    return text if len(text) <= len(written) else written


def minify_length_list(text: str, precision: int, rounding: str = "half-even") -> str | None:
    """Round a whitespace/comma separated list of lengths, joined by single spaces."""
    items = [item for item in LIST_SPLIT_RE.split(text.strip()) if item]
    if not items:
        return None
    out = []
    for item in items:
        minified = minify_length(item, precision, rounding)
        if minified is None:
            return None
        out.append(minified)
    return " ".join(out)


def minify_transform(text: str, precision: int, rounding: str = "half-even") -> str | None:
    """Round the arguments of a transform list; None if ``text`` is not one.

    Offsets (translations, rotation centers) get ``precision`` places like
    any coordinate. Factors and angles multiply every coordinate they
    apply to and keep three more.
    """
    out = []
    pos = 0
    text = text.strip()
    while pos < len(text):
        match = TRANSFORM_RE.match(text, pos)
        if not match or match.group(1) not in TRANSFORM_ARITY:
            return None
        name, body = match.groups()
        items = [item for item in LIST_SPLIT_RE.split(body.strip()) if item]
        if len(items) not in TRANSFORM_ARITY[name]:
            return None
        args = []
        for index, item in enumerate(items):
            try:
                value = parse_decimal(item)
            except ValueError:
                return None
            offset = index in TRANSFORM_OFFSETS.get(name, ())
            args.append(_shortest(value, precision if offset else precision + 3, rounding, item))
        out.append(f"{name}({' '.join(args)})")
        pos = match.end()
    return " ".join(out) if out else None
