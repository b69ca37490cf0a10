"""Byte-buffer primitives: search, compare, copy and fill.

Bytes are compared as signed 8-bit values, the way a plain ``char`` is read.
"""

from __future__ import annotations


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError("count must not be negative")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"count {n} exceeds buffer of length {len(buffer)}")


def memchr(data, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` among the first ``n``, or None."""
    if data is None:
        return None
    _check_count(n, data)
    return next(
        (offset for offset, byte in enumerate(data[:n]) if _signed(byte) == c),
        None,
    )


def memcmp(first, second, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first mismatch, or 0."""
    _check_count(n, first, second)
    return next(
        (
            _signed(a) - _signed(b)
            for a, b in zip(first[:n], second[:n])
            if a != b
        ),
        0,
    )


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` into the start of ``dest`` and return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``c`` (low 8 bits) and return it."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer