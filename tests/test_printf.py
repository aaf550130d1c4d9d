import io

import pytest

from miniprintf.printf import FormatError, printf, sprintf


def test_plain_text_unchanged():
    assert sprintf("hello, world") == "hello, world"


def test_empty_template():
    assert sprintf("") == ""


def test_percent_escape():
    assert sprintf("100%%") == "100%"


def test_string_and_null_string():
    assert sprintf("[%s|%s]", "abc", None) == "[abc|(null)]"


def test_char_conversion():
    assert sprintf("%c%c", "o", ord("k")) == "ok"


@pytest.mark.parametrize("spec", ["d", "i"])
def test_decimal_conversions(spec):
    assert sprintf("%" + spec, -123) == str(-123)


def test_unsigned_conversion_wraps():
    assert sprintf("%u", -1) == str(2**32 - 1)


def test_hex_conversions():
    lower = sprintf("%x", 48879)
    upper = sprintf("%X", 48879)
    assert int(lower, 16) == 48879
    assert upper == lower.upper()


def test_pointer_conversion():
    assert sprintf("%p", None) == "(nil)"
    text = sprintf("%p", 4096)
    assert text.startswith("0x")
    assert int(text, 16) == 4096


def test_unknown_conversion_is_literal():
    assert sprintf("%y%d", 5) == "%y5"


def test_extra_arguments_ignored():
    assert sprintf("%d", 1, 2, 3) == sprintf("%d", 1)


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        sprintf("oops %")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        sprintf("%d and %d", 1)


def test_none_template_raises():
    with pytest.raises(FormatError):
        sprintf(None)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        sprintf("%s")


def test_printf_writes_to_file_and_returns_length():
    buffer = io.StringIO()
    count = printf("%s=%d%%", "x", 10, file=buffer)
    assert buffer.getvalue() == sprintf("%s=%d%%", "x", 10)
    assert count == len(buffer.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("value %x", 255)
    captured = capsys.readouterr().out
    assert captured == sprintf("value %x", 255)
    assert count == len(captured)