import string

import pytest

from cstringkit.text import insert, to_lower, to_upper, trim

ASCII_SAMPLE = "Hello, World! 123 " + string.ascii_letters


def test_to_upper_matches_ascii_upper():
    assert to_upper(ASCII_SAMPLE) == ASCII_SAMPLE.upper()


def test_to_lower_matches_ascii_lower():
    assert to_lower(ASCII_SAMPLE) == ASCII_SAMPLE.lower()


def test_case_round_trip():
    assert to_lower(to_upper(ASCII_SAMPLE)) == ASCII_SAMPLE.lower()


def test_non_ascii_untouched():
    assert to_upper("ßé") == "ßé"
    assert to_lower("ÀÉ") == "ÀÉ"


def test_case_stops_at_terminator():
    assert to_upper("ab\0cd") == "AB"


def test_insert_middle():
    result = insert("hello", "XY", 2)
    assert result[2:4] == "XY"
    assert result[:2] + result[4:] == "hello"


def test_insert_at_end_and_start():
    assert insert("hello", "XY", 5).endswith("XY")
    assert insert("hello", "XY", 0).startswith("XY")


def test_insert_none_arguments():
    assert insert(None, "abc", 0) == "abc"
    assert insert("abc", None, 1) == "abc"


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        insert("abc", "x", 4)
    with pytest.raises(IndexError):
        insert("abc", "x", -1)


def test_trim_both_ends():
    assert trim("  *xx* ", " *") == "xx"


def test_trim_keeps_inner_characters():
    assert trim("--a-b--", "-") == "a-b"


def test_trim_all_characters():
    assert trim("aaaa", "a") == ""


def test_trim_empty_set_keeps_text():
    assert trim(" abc ", "") == " abc "


def test_trim_none():
    assert trim(None, " ") is None
    assert trim("abc", None) is None