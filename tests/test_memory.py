import pytest

from cstringkit.memory import memchr, memcmp, memcpy, memset


def test_memchr_finds_first_occurrence():
    assert memchr(b"hello", ord("l"), 5) == b"hello".index(b"l")


def test_memchr_respects_count():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_missing_byte():
    assert memchr(b"hello", ord("z"), 5) is None


def test_memchr_none_data():
    assert memchr(None, 1, 0) is None


def test_memchr_reads_signed_bytes():
    data = b"ab\xff"
    assert memchr(data, -1, 3) == 2
    assert memchr(data, 255, 3) is None


def test_memchr_count_too_large():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 3)


def test_memcmp_equal():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_antisymmetric():
    assert memcmp(b"hello", b"help!", 5) == -memcmp(b"help!", b"hello", 5)


def test_memcmp_signed_high_bytes():
    assert memcmp(b"\x80", b"\x01", 1) < 0


def test_memcmp_zero_count():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_negative_count():
    with pytest.raises(ValueError):
        memcmp(b"a", b"b", -1)


def test_memcpy_copies_prefix_in_place():
    dest = bytearray(b"hello world")
    result = memcpy(dest, b"HELLO!!", 5)
    assert result is dest
    assert bytes(dest[:5]) == b"HELLO"
    assert bytes(dest[5:]) == b" world"


def test_memcpy_count_exceeds_dest():
    with pytest.raises(ValueError):
        memcpy(bytearray(b"ab"), b"abcd", 3)


def test_memset_fills_prefix():
    buffer = bytearray(b"hello")
    result = memset(buffer, ord("x"), 3)
    assert result is buffer
    assert bytes(buffer) == b"x" * 3 + b"lo"


def test_memset_uses_low_byte():
    assert memset(bytearray(4), 256 + 65, 4) == memset(bytearray(4), 65, 4)


def test_memset_count_exceeds_buffer():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 5)