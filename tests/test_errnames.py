import pytest

from cstringkit.errnames import Platform, strerror


def test_linux_known_entries():
    assert strerror(0, "linux") == "Success"
    assert strerror(2, "linux") == "No such file or directory"
    assert strerror(133, "linux") == "Memory page has hardware error"


def test_linux_gap_entry():
    assert strerror(41, "linux") == "Unknown error 41"


def test_linux_out_of_range():
    assert strerror(134, "linux") == "Unknown error 134"
    assert strerror(-1, "linux") == "Unknown error -1"


def test_darwin_known_entries():
    assert strerror(0, Platform.DARWIN) == "Error 0"
    assert strerror(2, "darwin") == "No such file or directory"
    assert strerror(100, "darwin") == "Operation\tnot supported on socket"


def test_darwin_out_of_range():
    assert strerror(101, "darwin") == "Unknown error 101"


def test_platforms_differ():
    assert strerror(11, "linux") == "Resource temporarily unavailable"
    assert strerror(11, "darwin") == "Resource deadlock avoided"


def test_default_platform_uses_a_table():
    assert strerror(1) == "Operation not permitted"


def test_unknown_platform():
    with pytest.raises(ValueError):
        strerror(1, "plan9")