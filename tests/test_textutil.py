import pytest

from wireframe.textutil import (
    bounded_copy,
    compare_prefix,
    fill,
    is_digit,
    is_space,
    split_fields,
    substring,
    to_upper,
    trim,
)


@pytest.mark.parametrize("c", list("0123456789"))
def test_is_digit_accepts_digits(c):
    assert is_digit(c) is True
    assert is_digit(ord(c)) is True


@pytest.mark.parametrize("c", ["a", "/", ":", " ", "x"])
def test_is_digit_rejects_others(c):
    assert is_digit(c) is False


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_accepts_whitespace(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "\x00", "\x0e"])
def test_is_space_rejects_others(c):
    assert is_space(c) is False


def test_to_upper_letters_and_others():
    assert to_upper("a") == "A"
    assert to_upper("f") == "F"
    assert to_upper("Z") == "Z"
    assert to_upper("5") == "5"
    assert to_upper(ord("x")) == ord("X")


def test_to_upper_matches_str_upper_for_ascii_letters():
    for c in "abcdefghijklmnopqrstuvwxyz":
        assert to_upper(c) == c.upper()


def test_fill_sets_prefix_only():
    buf = bytearray(b"abcdef")
    result = fill(buf, ord("z"), 3)
    assert result is buf
    assert buf == bytearray(b"zzzdef")


def test_fill_zero_whole_buffer():
    buf = bytearray(b"hello")
    fill(buf, 0)
    assert buf == bytearray(len(b"hello"))


def test_fill_wraps_value_to_byte():
    buf = bytearray(2)
    fill(buf, 0x141, 2)
    assert buf == bytearray([0x41, 0x41])


def test_fill_rejects_overlong_length():
    with pytest.raises(ValueError):
        fill(bytearray(2), 0, 3)


def test_split_fields_drops_empty():
    assert split_fields("  10  20 30,0xFF  ", " ") == ["10", "20", "30,0xFF"]
    assert split_fields("10,0xFF", ",") == ["10", "0xFF"]


def test_split_fields_empty_and_only_separators():
    assert split_fields("", " ") == []
    assert split_fields("    ", " ") == []


def test_split_fields_join_round_trip():
    fields = ["1", "2", "3"]
    assert split_fields(" ".join(fields), " ") == fields


def test_trim_both_ends():
    assert trim("\n 1 2 3 \n", "\n ") == "1 2 3"
    assert trim("   ", " ") == ""


def test_trim_none_inputs():
    assert trim(None, "\n ") is None
    assert trim("abc", None) is None


def test_trim_without_chars_keeps_text():
    assert trim(" abc ", "") == " abc "


def test_substring_cases():
    assert substring("hello", 1, 3) == "ell"
    assert substring("hello", 2, 100) == "llo"
    assert substring("hello", 5, 2) == ""
    assert substring("hello", 9, 2) == ""


def test_substring_rejects_negative():
    with pytest.raises(ValueError):
        substring("hello", -1, 2)


def test_bounded_copy_truncates_and_reports_length():
    text = "abcdef"
    copied, full = bounded_copy(text, 4)
    assert copied == text[:3]
    assert full == len(text)


def test_bounded_copy_fits_and_zero_size():
    assert bounded_copy("abc", 10) == ("abc", 3)
    assert bounded_copy("abc", 0) == ("", 3)


def test_compare_prefix_hex_prefix_check():
    assert compare_prefix("0x1F", "0x", 2) == 0
    assert compare_prefix("0X1F", "0X", 2) == 0
    assert compare_prefix("1F", "0x", 2) != 0


def test_compare_prefix_ordering():
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("abd", "abc", 3) > 0
    assert compare_prefix("abc", "abd", 2) == 0
    assert compare_prefix("abc", "abc", 10) == 0


def test_compare_prefix_shorter_string():
    assert compare_prefix("ab", "abc", 3) < 0
    assert compare_prefix("abc", "ab", 3) > 0
    assert compare_prefix("a", "b", 0) == 0


def test_compare_prefix_difference_of_codes():
    assert compare_prefix("a", "b", 1) == ord("a") - ord("b")