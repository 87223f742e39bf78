import io

import pytest

from wireframe.printf import fprintf, printf, sprintf


@pytest.mark.parametrize(
    "fmt, arg",
    [
        ("%d", 42),
        ("%i", -17),
        ("%5d", 42),
        ("%-5d|", 42),
        ("%05d", 42),
        ("%05d", -42),
        ("%+d", 42),
        ("%+5d", 42),
        ("% d", 7),
        ("% 5d", 42),
        ("%.3d", 5),
        ("%+.3d", -5),
        ("%8.3d", 42),
        ("%-8.3d|", 42),
        ("%d", -2147483648),
        ("%x", 255),
        ("%X", 255),
        ("%#x", 255),
        ("%#X", 255),
        ("%10.4x", 255),
        ("%u", 4294967295),
        ("%s", "hello"),
        ("%.2s", "hello"),
        ("%10s", "hello"),
        ("%-10s|", "hello"),
        ("%c", "a"),
        ("%5c", "a"),
        ("%-5c|", "a"),
    ],
)
def test_agrees_with_standard_formatting(fmt, arg):
    assert sprintf(fmt, arg) == fmt % arg


def test_percent_literal():
    assert sprintf("100%%") == "100%%" % ()


def test_plain_text_passes_through():
    text = "no conversions here"
    assert sprintf(text) == text


def test_null_string():
    assert sprintf("%s", None) == "(null)"


def test_star_width_and_precision():
    assert sprintf("%*d", 5, 42) == "%5d" % 42
    assert sprintf("%.*s", 2, "hello") == "%.2s" % "hello"


def test_negative_star_width_gives_no_padding():
    assert sprintf("%*d", -5, 42) == sprintf("%d", 42)


def test_integer_wraps_to_32_bits():
    assert sprintf("%d", 2**32 + 5) == sprintf("%d", 5)
    assert sprintf("%x", -1) == "%x" % 0xFFFFFFFF


def test_char_from_integer():
    assert sprintf("%c", 65) == chr(65)
    assert sprintf("%c", 65 + 256) == sprintf("%c", 65)
    assert sprintf("%c", 0) == chr(0)


def test_pointer_has_hex_prefix():
    assert sprintf("%p", 255) == "%#x" % 255
    assert sprintf("%p", 0) == "0x0"


def test_alternate_form_of_zero_has_no_prefix():
    assert sprintf("%#x", 0) == sprintf("%x", 0)


def test_zero_precision_zero_value_prints_nothing():
    assert sprintf("%.0d", 0) == ""
    assert sprintf("%.d", 0) == sprintf("%.0d", 0)


def test_plus_flag_applies_to_unsigned():
    assert sprintf("%+u", 5) == "+" + sprintf("%u", 5)


def test_zero_flag_pads_characters_and_strings():
    assert sprintf("%05c", "a") == "a".rjust(5, "0")
    assert sprintf("%-05s", "ab") == "ab".ljust(5, "0")


def test_width_on_percent():
    out = sprintf("%5%")
    assert len(out) == 5
    assert out.strip() == "%"


def test_unknown_conversion_is_written_literally():
    assert sprintf("%k") == "k"
    assert sprintf("%5k") == "k"
    assert sprintf("%0-5d") == "-5d"


def test_extra_arguments_are_ignored():
    assert sprintf("%d", 1, 2) == sprintf("%d", 1)


def test_lone_percent_raises():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_wrong_string_argument_raises():
    with pytest.raises(TypeError):
        sprintf("%s", 3)


def test_width_overflow_raises():
    with pytest.raises(OverflowError):
        sprintf("%2147483648d", 1)


def test_precision_overflow_raises():
    with pytest.raises(OverflowError):
        sprintf("%.2147483648d", 1)


def test_fprintf_writes_and_counts():
    buf = io.StringIO()
    count = fprintf(buf, "%s=%5d\n", "depth", 12)
    assert buf.getvalue() == sprintf("%s=%5d\n", "depth", 12)
    assert count == len(buf.getvalue())


def test_printf_writes_to_stdout(capsys):
    count = printf("%d-%s", 1, "x")
    out = capsys.readouterr().out
    assert out == sprintf("%d-%s", 1, "x")
    assert count == len(out)