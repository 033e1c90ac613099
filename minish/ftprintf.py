"""A small printf that understands the conversions %c %s %p %d %i %u %x %X %%."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator
from typing import Any

CONVERSIONS = "cspdiuxX%"

_SPEC = re.compile(r"%([cspdiuxX%])")
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def is_format(c: str) -> bool:
    """Return True if ``c`` is a conversion character the formatter knows."""
    return len(c) == 1 and c in CONVERSIONS


def _int32(value: Any) -> int:
    n = int(value) & _UINT32
    return n - (1 << 32) if n & 0x80000000 else n


def _uint32(value: Any) -> int:
    return int(value) & _UINT32


def _char(value: Any) -> str:
    if isinstance(value, str) and len(value) == 1:
        return value
    return chr(int(value) % 256)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    n = 0 if value is None else int(value) & _UINT64
    return f"0x{n:x}" if n else "(nil)"


_CONVERTERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: str(_int32(v)),
    "i": lambda v: str(_int32(v)),
    "u": lambda v: str(_uint32(v)),
    "x": lambda v: f"{_uint32(v):x}",
    "X": lambda v: f"{_uint32(v):X}",
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(values)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    return _CONVERTERS[spec](value)


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    A ``%`` that is not followed by a known conversion is kept as is.
    """
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    return _SPEC.sub(lambda match: _convert(match.group(1), values), fmt)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)