"""Color values: decoding to exact RGBA and picking the shortest spelling."""

import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction

from .errors import InvalidColorValue
from .numbers import NUMBER_RE, format_decimal
from .tables import COLOR_NAMES_BY_HEX, NAMED_COLORS

HEX_RE = re.compile(r"#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})")
FUNCTION_RE = re.compile(r"(rgba?)\(\s*(.*?)\s*\)", re.DOTALL)
CHANNEL_RE = re.compile(r"(" + NUMBER_RE.pattern + r")(%?)")


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    alpha: Fraction = Fraction(1)
    hex_alpha: bool = False     # written with #rgba / #rrggbbaa

    @property
    def rgba(self) -> tuple:
        return self.red, self.green, self.blue, self.alpha

    @property
    def opaque(self) -> bool:
        return self.alpha == 1


def _channel(token: str) -> int:
    match = CHANNEL_RE.fullmatch(token)
    if not match:
        raise InvalidColorValue(f"bad color channel {token!r}")
    value = Fraction(Decimal(match.group(1)))
    if match.group(2):
        value = value * 255 / 100
    if value.denominator != 1 or not 0 <= value <= 255:
        raise InvalidColorValue(f"color channel {token!r} is not an exact byte")
    return int(value)


def _alpha(token: str) -> Fraction:
    match = CHANNEL_RE.fullmatch(token)
    if not match:
        raise InvalidColorValue(f"bad alpha {token!r}")
    value = Fraction(Decimal(match.group(1)))
    if match.group(2):
        value /= 100
    if not 0 <= value <= 1:
        raise InvalidColorValue(f"alpha {token!r} out of range")
    return value


def _parse_function(name: str, inner: str) -> Color:
    if "," in inner:
        parts = [part.strip() for part in inner.split(",")]
    else:
        head, slash, alpha = inner.partition("/")
        parts = head.split()
        if slash:
            parts.append(alpha.strip())
    if len(parts) not in (3, 4):
        raise InvalidColorValue(f"{name}() takes 3 or 4 arguments")
    red, green, blue = (_channel(part) for part in parts[:3])
    alpha = _alpha(parts[3]) if len(parts) == 4 else Fraction(1)
    return Color(red, green, blue, alpha)


def parse_color(value: str) -> Color:
    """Decode a color; raises InvalidColorValue for anything not exactly representable."""
    text = value.strip().lower()
    match = HEX_RE.fullmatch(text)
    if match:
        digits = match.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        alpha = Fraction(int(digits[6:], 16), 255) if len(digits) == 8 else Fraction(1)
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16),
                     alpha, hex_alpha=len(digits) == 8)
    if text in NAMED_COLORS:
        return parse_color(NAMED_COLORS[text])
    match = FUNCTION_RE.fullmatch(text)
    if match:
        return _parse_function(match.group(1), match.group(2))
    raise InvalidColorValue(f"not a color: {value!r}")


def _hex(color: Color, with_alpha: bool) -> str:
    channels = [color.red, color.green, color.blue]
    if with_alpha:
        channels.append(int(color.alpha * 255))
    full = "".join(f"{c:02x}" for c in channels)
    if all(full[i] == full[i + 1] for i in range(0, len(full), 2)):
        return "#" + full[::2]
    return "#" + full


def _decimal_alpha(alpha: Fraction) -> str | None:
    # Only alphas with a finite decimal expansion can be written exactly.
    denominator = alpha.denominator
    for prime in (2, 5):
        while denominator % prime == 0:
            denominator //= prime
    if denominator != 1:
        return None
    return format_decimal(Decimal(alpha.numerator) / Decimal(alpha.denominator))


def color_candidates(color: Color) -> list[str]:
    """Every exact spelling of ``color`` this engine can write."""
    if color.opaque:
        short = _hex(color, with_alpha=False)
        name = COLOR_NAMES_BY_HEX.get(f"#{color.red:02x}{color.green:02x}{color.blue:02x}")
        return [short] + ([name] if name else [])
    candidates = []
    if color.hex_alpha and (color.alpha * 255).denominator == 1:
        candidates.append(_hex(color, with_alpha=True))
    alpha = _decimal_alpha(color.alpha)
    if alpha is not None:
        candidates.append(f"rgba({color.red},{color.green},{color.blue},{alpha})")
    return candidates


def minify_color(value: str, tie_break: str = "hex") -> str:
    """Shortest exact equivalent of ``value``; unknown values come back unchanged."""
    try:
        color = parse_color(value)
    except InvalidColorValue:
        return value
    candidates = color_candidates(color)
    if not candidates:
        return value

    def preference(candidate: str):
        is_hex = candidate.startswith("#")
        return len(candidate), is_hex != (tie_break == "hex")

    best = min(candidates, key=preference)
    original = value.strip()
    return best if len(best) <= len(original) else original


def colors_equal(a: str, b: str) -> bool:
    """Same decoded RGBA; falls back to a case-insensitive text compare."""
    try:
        return parse_color(a).rgba == parse_color(b).rgba
    except InvalidColorValue:
        return a.strip().lower() == b.strip().lower()
