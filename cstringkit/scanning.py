"""A small ``sscanf`` that returns the converted values instead of writing through pointers.

Supported conversions: ``c``, ``s``, ``d``, ``u``, ``i``, ``p``, ``x``, ``X``,
``o``, ``e``, ``E``, ``f``, ``g``, ``G``, ``n`` and ``%``, with an optional
``*`` (no assignment), a field width and a length modifier (``h``, ``l``, ``L``).

Integers are wrapped to the size of their destination type: 16 bits with
``h``, 64 bits with ``l`` (and for ``p``), 32 bits otherwise. ``d``, ``i`` and
``n`` give signed values; ``u``, ``o``, ``x``, ``X`` and ``p`` give unsigned
ones. Floating conversions without a length modifier are rounded to single
precision.

Scanning rules of this implementation:

* a literal character in the format that matches the input also consumes the
  format character that follows it, so ``"%d, %d"`` reads two numbers where
  ``"%d,%d"`` stops after the first;
* an integer conversion that finds no digits still assigns 0 and counts;
* a floating conversion counts only when it consumed something, and counts
  then even when suppressed with ``*``;
* scanning stops as soon as the input is used up, so a trailing ``%n`` is
  only honoured while input remains.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass

from cstringkit.cstring import strlen

SPECIFIERS = "cdieEfgGosuxXpn%"
LENGTHS = "hlL"

_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_OCTAL = "01234567"
_HEX = "0123456789abcdefABCDEF"
_MASK64 = (1 << 64) - 1

_ALLOWED = {
    None: SPECIFIERS,
    "h": "diuoxXn",
    "l": "csdiuoxXneEfgG",
    "L": "eEfgG",
}


def _cstr(text: str) -> str:
    return text[: strlen(text)]


def _isprint(ch: str) -> bool:
    return " " <= ch <= "~"


def _wrap(value: int, bits: int, signed: bool) -> int:
    number = value & ((1 << bits) - 1)
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _matches(word: str, pattern: tuple[str, str, str]) -> bool:
    return len(word) == 3 and all(ch in options for ch, options in zip(word, pattern))


def _compose(
    integer: int, fraction: int, places: int, exponent: int, negative_exponent: bool
) -> float:
    try:
        mantissa = integer + fraction / 10**places
    except OverflowError:
        mantissa = math.inf
    try:
        scale = 10.0 ** (-exponent if negative_exponent else exponent)
    except OverflowError:
        scale = 0.0 if negative_exponent else math.inf
    return mantissa * scale


@dataclass(frozen=True)
class ScanToken:
    """One conversion specification of a scan format."""

    specifier: str
    no_assignment: bool = False
    width: int = 0
    length: str | None = None

    def is_valid(self) -> bool:
        """Tell whether the length modifier may be combined with the conversion letter."""
        allowed = _ALLOWED.get(self.length, "")
        return len(self.specifier) == 1 and self.specifier in allowed


class Scanner:
    """Reads values from ``text`` as directed by ``fmt``."""

    def __init__(self, text: str, fmt: str) -> None:
        self.text = _cstr(text)
        self.fmt = _cstr(fmt)
        self.count = 0
        self.values: list[int | float | str] = []
        self._i = 0
        self._j = 0

    def scan(self) -> list[int | float | str]:
        """Run the scan and return the assigned values; ``count`` holds the conversion count."""
        self.count = 0
        self.values = []
        self._i = 0
        self._j = 0
        while (token := self._next_token()) is not None:
            if not token.is_valid() or not self._convert(token):
                break
        return self.values

    # format handling

    def _next_token(self) -> ScanToken | None:
        fmt, text = self.fmt, self.text
        while self._i < len(fmt) and self._j < len(text):
            ch = fmt[self._i]
            if ch in _SPACE:
                self._skip_spaces()
                self._i += 1
            elif ch == "%":
                return self._parse_spec()
            elif _isprint(ch):
                if text[self._j] != ch:
                    return None
                self._j += 1
                # the format character following a literal is passed over too
                self._i += 2
            else:
                return None
        return None

    def _parse_spec(self) -> ScanToken | None:
        fmt = self.fmt
        i = self._i + 1
        no_assignment = i < len(fmt) and fmt[i] == "*"
        if no_assignment:
            i += 1
        start = i
        while i < len(fmt) and fmt[i] in _DIGITS:
            i += 1
        width = int(fmt[start:i]) if i > start else 0
        length = None
        if i < len(fmt) and fmt[i] in LENGTHS:
            length = fmt[i]
            i += 1
        if i >= len(fmt) or fmt[i] not in SPECIFIERS:
            return None
        self._i = i + 1
        return ScanToken(fmt[i], no_assignment, width, length)

    # input helpers

    def _peek(self, offset: int = 0) -> str:
        index = self._j + offset
        return self.text[index] if index < len(self.text) else ""

    def _skip_spaces(self) -> None:
        while (ch := self._peek()) and ch in _SPACE:
            self._j += 1

    @staticmethod
    def _within(token: ScanToken, used: int) -> bool:
        return token.width == 0 or used < token.width

    def _read_sign(self) -> tuple[bool, int]:
        ch = self._peek()
        if ch == "-" or ch == "+":
            self._j += 1
            return ch == "-", 1
        return False, 0

    def _read_radix(
        self, token: ScanToken, used: int, digits: str, base: int
    ) -> tuple[int, int]:
        value = 0
        while self._within(token, used) and (ch := self._peek()) and ch in digits:
            value = value * base + int(ch, base)
            self._j += 1
            used += 1
        return value, used

    def _read_octal(self, token: ScanToken, used: int) -> int:
        if self._peek() == "0" and self._within(token, used + 1):
            self._j += 1
            used += 1
        value, _ = self._read_radix(token, used, _OCTAL, 8)
        return value

    def _read_hex(
        self, token: ScanToken, used: int, negative: bool
    ) -> tuple[int, bool]:
        if (
            self._peek() == "0"
            and self._peek(1) in ("x", "X")
            and self._within(token, used + 1)
        ):
            self._j += 2
            used += 2
        value = 0
        while self._within(token, used) and (ch := self._peek()) and ch in _HEX:
            grown = (value * 16 + int(ch, 16)) & _MASK64
            if value > grown:
                grown = _MASK64
                negative = False
            value = grown
            self._j += 1
            used += 1
        return value, negative

    # conversions

    def _convert(self, token: ScanToken) -> bool:
        spec = token.specifier
        if spec == "%":
            self._skip_spaces()
            matched = self._peek() == "%"
            self._j += 1
            return matched
        if spec == "n":
            if not token.no_assignment:
                self.values.append(self._integer(token, self._j, False))
            return True
        match spec:
            case "c":
                value, counts = self._scan_chars(token)
            case "s":
                value, counts = self._scan_string(token)
            case "d" | "u":
                value, counts = self._scan_decimal(token)
            case "i" | "p":
                value, counts = self._scan_integer(token)
            case "x" | "X":
                value, counts = self._scan_hex(token)
            case "o":
                value, counts = self._scan_octal(token)
            case _:
                value, counts = self._scan_float(token)
        if not token.no_assignment:
            self.values.append(value)
        if counts:
            self.count += 1
        return True

    @staticmethod
    def _integer(token: ScanToken, value: int, negative: bool) -> int:
        if negative:
            value = -value
        if token.length == "l" or token.specifier == "p":
            bits = 64
        elif token.length == "h":
            bits = 16
        else:
            bits = 32
        return _wrap(value, bits, signed=token.specifier in "din")

    def _scan_chars(self, token: ScanToken) -> tuple[str, bool]:
        chunk = self.text[self._j : self._j + (token.width or 1)]
        self._j += len(chunk)
        return chunk, not token.no_assignment

    def _scan_string(self, token: ScanToken) -> tuple[str, bool]:
        self._skip_spaces()
        start = self._j
        while (
            (ch := self._peek())
            and ch not in _SPACE
            and self._within(token, self._j - start)
        ):
            self._j += 1
        return self.text[start : self._j], not token.no_assignment

    def _scan_decimal(self, token: ScanToken) -> tuple[int, bool]:
        self._skip_spaces()
        negative, used = self._read_sign()
        value, _ = self._read_radix(token, used, _DIGITS, 10)
        return self._integer(token, value, negative), not token.no_assignment

    def _scan_integer(self, token: ScanToken) -> tuple[int, bool]:
        self._skip_spaces()
        negative, used = self._read_sign()
        hex_prefix = self._peek() == "0" and self._peek(1) in ("x", "X")
        if hex_prefix or token.specifier == "p":
            value, negative = self._read_hex(token, used, negative)
        elif self._peek() == "0" and (self._peek(1) == "" or self._peek(1) in _OCTAL):
            value = self._read_octal(token, used)
        else:
            value, _ = self._read_radix(token, used, _DIGITS, 10)
        return self._integer(token, value, negative), not token.no_assignment

    def _scan_hex(self, token: ScanToken) -> tuple[int, bool]:
        self._skip_spaces()
        negative, used = self._read_sign()
        value, negative = self._read_hex(token, used, negative)
        return self._integer(token, value, negative), not token.no_assignment

    def _scan_octal(self, token: ScanToken) -> tuple[int, bool]:
        self._skip_spaces()
        negative, used = self._read_sign()
        value = self._read_octal(token, used)
        return self._integer(token, value, negative), not token.no_assignment

    @staticmethod
    def _real(token: ScanToken, value: float) -> float:
        return _to_single(value) if token.length is None else float(value)

    def _scan_float(self, token: ScanToken) -> tuple[float, bool]:
        self._skip_spaces()
        negative, used = self._read_sign()
        word = self.text[self._j : self._j + 3]
        wide_enough = token.width == 0 or token.width >= 3
        if wide_enough and _matches(word, ("iI", "nN", "fF")):
            self._j += 3
            value = -math.inf if negative else math.inf
            return self._real(token, value), not token.no_assignment
        if wide_enough and _matches(word, ("nN", "aA", "nN")):
            self._j += 3
            return self._real(token, math.nan), not token.no_assignment
        return self._scan_number(token, negative, used)

    def _scan_number(
        self, token: ScanToken, negative: bool, used: int
    ) -> tuple[float, bool]:
        start = used
        integer, used = self._read_radix(token, used, _DIGITS, 10)
        fraction, places = 0, 0
        if self._within(token, used) and self._peek() == ".":
            self._j += 1
            used += 1
            before = used
            fraction, used = self._read_radix(token, used, _DIGITS, 10)
            places = used - before
        exponent, negative_exponent = 0, False
        if self._within(token, used) and self._peek() in ("e", "E"):
            self._j += 1
            used += 1
            sign = self._peek()
            if sign == "-" or sign == "+":
                negative_exponent = sign == "-"
                self._j += 1
                used += 1
            exponent, used = self._read_radix(token, used, _DIGITS, 10)
        read = used != start
        value = _compose(integer, fraction, places, exponent, negative_exponent)
        if negative and read:
            value = -value
        return self._real(token, value), read


def sscanf(text: str, fmt: str) -> tuple[int, list[int | float | str]]:
    """Scan ``text`` according to ``fmt``.

    Returns the number of conversions counted and the list of assigned values
    in format order (``%n`` values included, suppressed conversions left out).
    """
    scanner = Scanner(text, fmt)
    values = scanner.scan()
    return scanner.count, values