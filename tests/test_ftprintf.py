import pytest

from minish.ftprintf import format_printf, is_format, printf


@pytest.mark.parametrize("c", list("cspdiuxX%"))
def test_is_format_accepts_known_conversions(c):
    assert is_format(c) is True


@pytest.mark.parametrize("c", ["a", "f", "z", "", "cs"])
def test_is_format_rejects_others(c):
    assert is_format(c) is False


def test_plain_text_is_unchanged():
    assert format_printf("hello world") == "hello world"


def test_string_conversion():
    assert format_printf("[%s]", "abc") == "[abc]"


def test_null_string():
    assert format_printf("%s", None) == "(null)"


@pytest.mark.parametrize("value", [0, None])
def test_null_pointer(value):
    assert format_printf("%p", value) == "(nil)"


@pytest.mark.parametrize("value", [1, 255, 0xDEADBEEF, 2**40 + 7])
def test_pointer_is_hex_with_prefix(value):
    result = format_printf("%p", value)
    assert result.startswith("0x")
    assert int(result[2:], 16) == value
    assert result[2:] == result[2:].lower()


def test_char_conversion_from_int_and_str():
    assert ord(format_printf("%c", 65)) == 65
    assert format_printf("%c", "z") == "z"


def test_percent_literal_consumes_no_argument():
    assert format_printf("%%") == "%"
    assert format_printf("%%%d", 5) == "%" + str(5)


def test_unknown_conversion_is_literal():
    assert format_printf("%q") == "%q"


def test_trailing_percent_is_literal():
    assert format_printf("50%") == "50%"


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert format_printf("%i", n) == format_printf("%d", n)


def test_decimal_wraps_to_int32():
    assert format_printf("%d", 2**31) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format_printf("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 9, 10, 15, 16, 255, 4096, 0xABCDEF])
def test_hex_round_trip_and_case(n):
    lower = format_printf("%x", n)
    upper = format_printf("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_multiple_conversions_in_order():
    result = format_printf("%s-%d-%s", "a", 3, "b")
    assert result == "a-" + str(3) + "-b"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        printf(None)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "x", 42)
    out = capsys.readouterr().out
    assert out == format_printf("%s=%d\n", "x", 42)
    assert count == len(out)