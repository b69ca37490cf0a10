import math
import struct

import pytest

from cstringkit.scanning import ScanToken, Scanner, sscanf


def test_single_decimal():
    assert sscanf("42", "%d") == (1, [42])


def test_two_decimals_separated_by_space():
    assert sscanf("-17 25", "%d %d") == (2, [-17, 25])


def test_literal_consumes_following_format_character():
    assert sscanf("1,2", "%d,%d") == (1, [1])
    assert sscanf("1, 2", "%d, %d") == (2, [1, 2])


def test_literal_mismatch_stops_scan():
    assert sscanf("a1", "b%d") == (0, [])


def test_strings():
    assert sscanf("hello world", "%s %s") == (2, ["hello", "world"])


def test_string_width():
    assert sscanf("abcdef", "%3s") == (1, ["abc"])
    assert sscanf("abcdef", "%3s%s") == (2, ["abc", "def"])


def test_chars():
    assert sscanf("xyz", "%c") == (1, ["x"])
    assert sscanf("xyz", "%3c") == (1, ["xyz"])
    assert sscanf(" a", "%c") == (1, [" "])


def test_suppressed_assignment():
    assert sscanf("1 2", "%*d %d") == (1, [2])


def test_decimal_width_splits_number():
    assert sscanf("12345", "%2d%d") == (2, [12, 345])


def test_sign_counts_toward_width():
    assert sscanf("-123", "%2d") == (1, [-1])


def test_decimal_without_digits_assigns_zero():
    assert sscanf("abc", "%d") == (1, [0])


def test_long_decimal():
    assert sscanf("9999999999", "%ld") == (1, [9999999999])


def test_unsigned_negative_wraps():
    assert sscanf("-1", "%u") == (1, [2**32 - 1])


def test_short_wraps_to_signed():
    assert sscanf("65535", "%hd") == (1, [-1])


@pytest.mark.parametrize("number", [0, 1, 15, 255, 4096, 123456789])
def test_hex_round_trip(number):
    assert sscanf(format(number, "x"), "%x") == (1, [number])
    assert sscanf("0x" + format(number, "X"), "%X") == (1, [number])


@pytest.mark.parametrize("number", [0, 7, 8, 511, 123456])
def test_octal_round_trip(number):
    assert sscanf(format(number, "o"), "%o") == (1, [number])


def test_integer_detects_base():
    assert sscanf("0x1A", "%i") == (1, [int("1A", 16)])
    assert sscanf("017", "%i") == (1, [int("17", 8)])
    assert sscanf("-42", "%i") == (1, [-42])


def test_pointer_reads_hex():
    assert sscanf("0x10", "%p") == (1, [int("10", 16)])


def test_double_value():
    assert sscanf("3.5", "%lf") == (1, [3.5])
    assert sscanf("1.5e3", "%le") == (1, [float("1.5e3")])


def test_float_rounded_to_single_precision():
    count, values = sscanf("0.1", "%f")
    assert count == 1
    assert values == [struct.unpack("f", struct.pack("f", 0.1))[0]]


def test_infinity_and_nan():
    assert sscanf("-inf", "%Lf") == (1, [-math.inf])
    count, values = sscanf("NaN", "%f")
    assert count == 1
    assert math.isnan(values[0])


def test_float_without_digits_is_not_counted():
    assert sscanf("abc", "%f") == (0, [0.0])


def test_suppressed_float_still_counts():
    assert sscanf("1.5", "%*f") == (1, [])


def test_position_conversion():
    count, values = sscanf("ab cd", "%s%n")
    assert count == 1
    assert values == ["ab", len("ab")]


def test_percent_literal():
    assert sscanf("50%", "%d%%") == (1, [50])
    assert sscanf("5x6", "%d%%%d") == (1, [5])


@pytest.mark.parametrize("fmt", ["%hf", "%Ls", "%lp"])
def test_invalid_length_combination_stops(fmt):
    assert sscanf("1", fmt) == (0, [])


def test_empty_input():
    assert sscanf("", "%d") == (0, [])


def test_unknown_conversion_stops():
    assert sscanf("12", "%y") == (0, [])


@pytest.mark.parametrize(
    "token, valid",
    [
        (ScanToken("d"), True),
        (ScanToken("f", length="h"), False),
        (ScanToken("p", length="l"), False),
        (ScanToken("f", length="L"), True),
        (ScanToken("n", length="h"), True),
    ],
)
def test_token_validity(token, valid):
    assert token.is_valid() is valid


def test_scanner_exposes_count_and_values():
    scanner = Scanner("7 word", "%d %s")
    values = scanner.scan()
    assert values == [7, "word"]
    assert scanner.count == 2
    assert scanner.values == values


def test_scanner_rescan_gives_same_result():
    scanner = Scanner("1 2 3", "%d %d %d")
    first = scanner.scan()
    second = scanner.scan()
    assert first == second == [1, 2, 3]
    assert scanner.count == 3


def test_input_stops_at_terminator():
    assert sscanf("12\0 34", "%d %d") == (1, [12])