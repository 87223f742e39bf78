import pytest

from wireframe.numeric import INT_MAX, INT_MIN, abs_diff, parse_int


def test_abs_diff_symmetric():
    assert abs_diff(3, 10) == abs_diff(10, 3)
    assert abs_diff(5, 5) == 0


def test_abs_diff_is_non_negative():
    for a, b in [(-4, 9), (9, -4), (0, 100), (-100, -1)]:
        assert abs_diff(a, b) == abs(a - b)


def test_abs_diff_overflow():
    assert abs_diff(INT_MAX, -1) == -1
    assert abs_diff(INT_MIN, 1) == -1


def test_abs_diff_int_min_wraps():
    assert abs_diff(INT_MIN, 0) == INT_MIN


def test_parse_decimal():
    assert parse_int("42", 10) == 42
    assert parse_int("-17", 10) == -17


def test_parse_leading_blanks_and_plus():
    assert parse_int("  +7", 10) == 7


def test_parse_limits():
    assert parse_int("2147483647", 10) == INT_MAX
    assert parse_int("-2147483648", 10) == INT_MIN


@pytest.mark.parametrize("text", ["2147483648", "-2147483649"])
def test_parse_out_of_range(text):
    with pytest.raises(ValueError):
        parse_int(text, 10)


def test_parse_hex():
    assert parse_int("0xff", 16) == 0xFF
    assert parse_int("0XFFFFFF", 16) == 0xFFFFFF
    assert parse_int("0x7FFFFFFF", 16) == INT_MAX


@pytest.mark.parametrize("text", ["ff", "0x", "0xfg", "0x80000000"])
def test_parse_hex_errors(text):
    with pytest.raises(ValueError):
        parse_int(text, 16)


@pytest.mark.parametrize("text", ["", "-", "7 ", "12a", "a", None])
def test_parse_decimal_errors(text):
    with pytest.raises(ValueError):
        parse_int(text, 10)


def test_parse_rejects_bad_base():
    with pytest.raises(ValueError):
        parse_int("1", 17)