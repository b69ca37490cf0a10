"""A small ``sprintf`` supporting the ``c``, ``d``, ``f``, ``s``, ``u`` and ``%`` conversions.

A format is split into parts: literal text followed by an optional conversion
specification. Other conversion letters are recognised by the parser but
produce no output and consume no argument.

The padding rules for ``d`` are the library's own. Width is applied before
precision and sign, so ``%+5d`` gives ``+   42``, not ``  +42``.
"""

from __future__ import annotations

import math
import numbers
import operator
import re
from collections.abc import Callable
from dataclasses import dataclass

from cstringkit.cstring import strlen

STAR = "*"
"""Width or precision that is taken from the argument list."""

SPECIFIERS = "cdieEfgGosuxXpn%"
FLAGS = "-+ #0"
LENGTHS = "hlL"
DEFAULT_FLOAT_PRECISION = 6

_SPEC_RE = re.compile(
    r"%(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|[0-9]+)?"
    r"(?:\.(?P<precision>\*|[0-9]*))?"
    r"(?P<length>[hlL])?"
    r"(?P<spec>.)?",
    re.DOTALL,
)
_SPEC_CHAR_RE = re.compile("[" + re.escape(SPECIFIERS) + "]")


@dataclass(frozen=True)
class FormatSpec:
    """One conversion specification, from ``%`` to the conversion letter."""

    spec: str | None
    flags: str = ""
    width: int | str | None = None
    precision: int | str | None = None
    length: str | None = None


@dataclass(frozen=True)
class FormatPart:
    """Literal text followed by an optional conversion."""

    text: str
    spec: FormatSpec | None = None


def _cstr(text: str) -> str:
    return text[: strlen(text)]


def _count(value: str | None) -> int | str | None:
    if value is None or value == STAR:
        return value
    return int(value) if value else 0


def parse_spec(text: str) -> FormatSpec:
    """Parse a specification such as ``%-08.3ld``.

    Raises ValueError when ``text`` does not start with ``%`` or holds nothing more.
    """
    if not text.startswith("%") or len(text) == 1:
        raise ValueError(f"not a conversion specification: {text!r}")
    match = _SPEC_RE.match(text)
    letter = match["spec"]
    return FormatSpec(
        spec=letter if letter is not None and letter in SPECIFIERS else None,
        flags=match["flags"],
        width=_count(match["width"]),
        precision=_count(match["precision"]),
        length=match["length"],
    )


def split_format(fmt: str) -> list[FormatPart]:
    """Split ``fmt`` into literal text and conversions.

    A ``%`` with no conversion letter after it ends the format: the text from
    that ``%`` on is dropped.
    """
    fmt = _cstr(fmt)
    parts: list[FormatPart] = []
    pos = 0
    while (start := fmt.find("%", pos)) >= 0:
        letter = _SPEC_CHAR_RE.search(fmt, start + 1)
        if letter is None:
            parts.append(FormatPart(fmt[pos:start]))
            return parts
        end = letter.end()
        parts.append(FormatPart(fmt[pos:start], parse_spec(fmt[start:end])))
        pos = end
    if pos < len(fmt):
        parts.append(FormatPart(fmt[pos:]))
    return parts


def int_to_str(value: int) -> str:
    """Return the decimal digits of ``value``, with a leading ``-`` when negative."""
    return str(operator.index(value))


def float_to_str(value: float, precision: int) -> str:
    """Return ``value`` in fixed-point notation with ``precision`` decimals.

    Decimals are produced by repeated multiplication and rounded half up on
    the next digit. Raises ValueError for a negative precision or a value
    that is not finite.
    """
    if precision < 0:
        raise ValueError("precision must not be negative")
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite value {value!r}")
    negative = value < 0
    magnitude = -value if negative else value
    whole = int(magnitude)
    fraction = magnitude - whole
    digits: list[int] = []
    for _ in range(precision + 1):
        fraction *= 10
        digit = int(fraction)
        fraction -= digit
        digits.append(digit)
    if digits.pop() >= 5:
        position = len(digits) - 1
        while position >= 0 and digits[position] == 9:
            digits[position] = 0
            position -= 1
        if position >= 0:
            digits[position] += 1
        else:
            whole += 1
    text = str(whole)
    if precision:
        text += "." + "".join(map(str, digits))
    return "-" + text if negative else text


def _wrap(value, bits: int, signed: bool) -> int:
    number = operator.index(value) & ((1 << bits) - 1)
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def _pad_text(text: str, flags: str, width: int | None) -> str:
    if width is None or width <= len(text):
        return text
    return text.ljust(width) if "-" in flags else text.rjust(width)


def _pad_number(text: str, flags: str, width: int | None) -> str:
    if width is None:
        return text
    if " " in flags:
        width -= 1
    spaces = width - len(text)
    if spaces <= 0:
        return text
    if "-" in flags:
        return text + " " * spaces
    if "0" in flags:
        if text[:1] in ("+", "-"):
            return text[0] + "0" * spaces + text[1:]
        return "0" * spaces + text
    return " " * spaces + text


def _apply_precision(text: str, precision: int | None, signed: bool) -> str:
    if precision is None:
        return text
    sign = 1 if signed and text[:1] in ("+", "-") else 0
    if precision == 0 and text[sign : sign + 1] == "0":
        text = text[:sign]
    if len(text) < precision:
        text = text[:sign] + "0" * (precision - (len(text) - sign)) + text[sign:]
    return text


def _with_plus(text: str) -> str:
    return text if text.startswith("-") else "+" + text


def _with_space(text: str) -> str:
    return text if text[:1] in ("+", "-") else " " + text


def _as_char(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_wrap(value, 8, signed=False))


def _render(spec: FormatSpec, take: Callable[[], object]) -> str:
    width = spec.width
    if width == STAR:
        width = operator.index(take())
    precision = spec.precision
    if precision == STAR:
        precision = operator.index(take())
    if precision is not None and precision < 0:
        precision = None
    flags = spec.flags

    match spec.spec:
        case "s":
            value = take()
            if not isinstance(value, str):
                raise TypeError("%s requires a string")
            text = _cstr(value)
            if precision is not None:
                text = text[:precision]
            return _pad_text(text, flags, width)
        case "c":
            char = _as_char(take())
            if char == "\0":
                return char + _pad_text("", flags, width)
            return _pad_text(char, flags, width)
        case "d":
            bits = {"l": 64, "h": 16}.get(spec.length, 32)
            text = int_to_str(_wrap(take(), bits, signed=True))
            text = _pad_number(text, flags, width)
            text = _apply_precision(text, precision, signed=True)
            if "+" in flags:
                text = _with_plus(text)
            if " " in flags:
                text = _with_space(text)
            return text
        case "f":
            value = take()
            if not isinstance(value, numbers.Real):
                raise TypeError("%f requires a real number")
            digits = DEFAULT_FLOAT_PRECISION if precision is None else precision
            text = float_to_str(float(value), digits)
            if "+" in flags:
                text = _with_plus(text)
            if " " in flags:
                text = _with_space(text)
            return _pad_number(text, flags, width)
        case "u":
            bits = {"l": 64, "h": 16}.get(spec.length, 32)
            text = int_to_str(_wrap(take(), bits, signed=False))
            text = _apply_precision(text, precision, signed=False)
            if " " in flags and width is not None:
                width += 1
            return _pad_number(text, flags, width)
        case "%":
            return "%"
        case _:
            return ""


def sprintf(fmt: str, *args) -> str:
    """Format ``args`` according to ``fmt`` and return the result.

    Raises TypeError when ``fmt`` asks for more arguments than were given or
    an argument has the wrong type. Extra arguments are ignored.
    """
    pending = iter(args)

    def take():
        try:
            return next(pending)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    pieces: list[str] = []
    for part in split_format(fmt):
        pieces.append(part.text)
        if part.spec is not None:
            pieces.append(_render(part.spec, take))
    return "".join(pieces)