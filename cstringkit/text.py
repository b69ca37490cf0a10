"""Allocating text helpers: ASCII case conversion, insertion and trimming."""

from __future__ import annotations

import string

from cstringkit.cstring import strlen

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _cstr(text: str) -> str:
    return text[: strlen(text)]


def to_upper(text: str) -> str:
    """Return ``text`` with ASCII letters in upper case; other characters are kept."""
    return _cstr(text).translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Return ``text`` with ASCII letters in lower case; other characters are kept."""
    return _cstr(text).translate(_TO_LOWER)


def insert(src: str | None, text: str | None, start_index: int) -> str:
    """Return ``src`` with ``text`` inserted at ``start_index``.

    A missing ``src`` or ``text`` counts as empty. Raises IndexError when
    ``start_index`` lies outside ``src``.
    """
    body = "" if src is None else _cstr(src)
    addition = "" if text is None else _cstr(text)
    if not 0 <= start_index <= len(body):
        raise IndexError(
            f"start index {start_index} outside string of length {len(body)}"
        )
    return body[:start_index] + addition + body[start_index:]


def trim(src: str | None, trim_chars: str | None) -> str | None:
    """Strip characters of ``trim_chars`` from both ends of ``src``.

    Returns None when either argument is None.
    """
    if src is None or trim_chars is None:
        return None
    return _cstr(src).strip(_cstr(trim_chars))