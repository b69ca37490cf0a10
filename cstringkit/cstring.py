"""Null-terminated string operations on Python strings.

A string ends at its first ``"\\0"`` character, if it has one. Positions are
returned as indices into the string, or None where nothing is found.
"""

from __future__ import annotations

from collections.abc import Iterator
from itertools import zip_longest

_NUL = "\0"


def _as_char(c: int | str) -> str:
    if isinstance(c, int):
        return chr(c)
    if len(c) != 1:
        raise ValueError("expected a single character")
    return c


def _cstr(text: str) -> str:
    return text[: strlen(text)]


def strlen(text: str) -> int:
    """Return the number of characters before the terminator."""
    end = text.find(_NUL)
    return len(text) if end < 0 else end


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``text``; the terminator itself can be found."""
    char = _as_char(c)
    body = _cstr(text)
    if char == _NUL:
        return len(body)
    index = body.find(char)
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``text``; the terminator itself can be found."""
    char = _as_char(c)
    body = _cstr(text)
    if char == _NUL:
        return len(body)
    index = body.rfind(char)
    return None if index < 0 else index


def strpbrk(text: str, accept: str) -> int | None:
    """Return the index of the first character of ``text`` found in ``accept``."""
    wanted = set(_cstr(accept))
    return next((i for i, ch in enumerate(_cstr(text)) if ch in wanted), None)


def strstr(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle``.

    An empty haystack never matches, not even an empty needle.
    """
    body = _cstr(haystack)
    if not body:
        return None
    index = body.find(_cstr(needle))
    return None if index < 0 else index


def strcspn(text: str, reject: str) -> int:
    """Return the length of the leading part of ``text`` free of ``reject`` characters."""
    body = _cstr(text)
    rejected = set(_cstr(reject))
    return next((i for i, ch in enumerate(body) if ch in rejected), len(body))


def strncmp(first: str, second: str, n: int) -> int:
    """Compare ``n`` characters; return the code difference of the first mismatch, or 0.

    Comparison does not stop at a terminator; characters past the end read as ``"\\0"``.
    """
    if n < 0:
        raise ValueError("count must not be negative")
    return next(
        (
            ord(a) - ord(b)
            for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL)
            if a != b
        ),
        0,
    )


def strncpy(dest: str, src: str, n: int) -> str:
    """Overwrite the first ``n`` characters of ``dest`` with ``src`` (padded with terminators)."""
    if n < 0:
        raise ValueError("count must not be negative")
    copied = src[:n].ljust(n, _NUL)
    return _cstr(copied + dest[n:])


def strncat(dest: str, src: str, n: int) -> str:
    """Append at most ``n`` characters of ``src`` to ``dest``."""
    if n < 0:
        raise ValueError("count must not be negative")
    return _cstr(dest) + _cstr(src)[:n]


def strcat(dest: str, src: str) -> str:
    """Append ``src`` to ``dest``."""
    return _cstr(dest) + _cstr(src)


def strcpy(dest: str, src: str) -> str:
    """Copy ``src`` over the start of ``dest`` without writing a terminator.

    Characters of ``dest`` beyond the copied part are kept.
    """
    body = _cstr(src)
    return _cstr(body + dest[len(body):])


class Tokenizer:
    """Splits a string into tokens, one call at a time, with per-call delimiters."""

    def __init__(self, text: str) -> None:
        self._text = _cstr(text)
        self._pos: int | None = 0

    def next_token(self, delim: str) -> str | None:
        """Return the next token separated by any character of ``delim``, or None when done."""
        if self._pos is None:
            return None
        delimiters = _cstr(delim)
        rest = self._text[self._pos:]
        stripped = rest.lstrip(delimiters)
        start = self._pos + len(rest) - len(stripped)
        if not stripped:
            self._pos = start
            return None
        length = next(
            (i for i, ch in enumerate(stripped) if ch in delimiters), None
        )
        if length is None:
            self._pos = None
            return stripped
        self._pos = start + length + 1
        return stripped[:length]


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield every token of ``text`` separated by characters of ``delim``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delim)) is not None:
        yield token