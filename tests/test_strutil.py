import io

import pytest

from minish.strutil import BUFFER_SIZE, atoi, is_space, iter_lines, split


@pytest.mark.parametrize("c", [" ", "\t", "\n", "\v", "\f", "\r", 9, 13, 32])
def test_is_space_true(c):
    assert is_space(c) is True


@pytest.mark.parametrize("c", ["a", "0", "", "  ", 8, 14, 65])
def test_is_space_false(c):
    assert is_space(c) is False


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 2147483647, -2147483648])
def test_atoi_round_trip(n):
    assert atoi(str(n)) == n


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n-42abc") == atoi("-42")
    assert atoi("+7") == atoi("7")


@pytest.mark.parametrize("text", ["abc", "", "--5", "+-5", "   "])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648


def test_split_drops_empty_pieces():
    assert split("  a  b c ", " ") == ["a", "b", "c"]


def test_split_empty_and_only_separators():
    assert split("", ":") == []
    assert split(":::", ":") == []


@pytest.mark.parametrize("text", ["/usr/bin:/bin", ":a::b:", "single"])
def test_split_invariants(text):
    parts = split(text, ":")
    assert all(part and ":" not in part for part in parts)
    assert "".join(parts) == text.replace(":", "")


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a b", "")


def test_iter_lines_text():
    assert list(iter_lines(io.StringIO("a\nb\nc"))) == ["a\n", "b\n", "c"]


def test_iter_lines_trailing_newline_gives_no_empty_line():
    assert list(iter_lines(io.StringIO("a\nb\n"))) == ["a\n", "b\n"]


def test_iter_lines_empty_stream():
    assert list(iter_lines(io.StringIO(""))) == []


def test_iter_lines_bytes():
    assert list(iter_lines(io.BytesIO(b"x\ny"))) == [b"x\n", b"y"]


def test_iter_lines_long_lines_round_trip():
    text = "q" * (BUFFER_SIZE * 3 + 1) + "\n" + "\n" + "r" * (BUFFER_SIZE - 1)
    lines = list(iter_lines(io.StringIO(text)))
    assert "".join(lines) == text
    assert all(line.endswith("\n") for line in lines[:-1])
    assert len(lines) == text.count("\n") + 1