"""String helpers: whitespace test, integer parsing, splitting and line reading."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 10

_SPACES = "\t\n\v\f\r "


def is_space(c: str | int) -> bool:
    """Return True for a space, tab, newline, vertical tab, form feed or return."""
    if isinstance(c, int):
        return c == 32 or 9 <= c <= 13
    return len(c) == 1 and c in _SPACES


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and text without digits gives 0. The result wraps to 32 bits.
    """
    stripped = text.lstrip(_SPACES)
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    digits = []
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        digits.append(ch)
    value = int("".join(digits)) * sign if digits else 0
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield lines from ``stream`` with their newline; the last may lack one."""
    buffer = None
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        buffer = chunk if buffer is None else buffer + chunk
        newline = b"\n" if isinstance(buffer, bytes) else "\n"
        while True:
            pos = buffer.find(newline)
            if pos < 0:
                break
            yield buffer[: pos + 1]
            buffer = buffer[pos + 1 :]
    if buffer:
        yield buffer