"""A small printf supporting the %c, %s, %p, %d, %i, %u, %x, %X and %% conversions."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from typing import Any

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    return ((value + 2**31) & _UINT_MASK) - 2**31


def _to_hex(value: int, digits: str) -> str:
    out = []
    while True:
        value, rem = divmod(value, 16)
        out.append(digits[rem])
        if value == 0:
            break
    return "".join(reversed(out))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _format_address(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        address = value & _ULONG_MASK
    else:
        address = id(value) & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _to_hex(address, _LOWER_HEX)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return "%" + spec
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_string(value)
    if spec == "p":
        return _format_address(value)
    if spec in "di":
        return str(_to_int32(_require_int(value, spec)))
    number = _require_int(value, spec) & _UINT_MASK
    if spec == "u":
        return str(number)
    return _to_hex(number, _LOWER_HEX if spec == "x" else _UPPER_HEX)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            yield "%"
        else:
            yield _convert(spec, remaining)


def render(fmt: str, *args: Any) -> str:
    """Return the text that printf would write for *fmt* and *args*.

    Unknown conversions are written back as-is and consume no argument; a
    lone trailing '%' is written literally. Extra arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the number of bytes written."""
    data = render(fmt, *args).encode("utf-8")
    sys.stdout.flush()
    view = memoryview(data)
    while view:
        written = os.write(1, view)
        view = view[written:]
    return len(data)