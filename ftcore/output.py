"""Write characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os

from ftcore.chars import itoa


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


def putchar_fd(c: int | str, fd: int) -> None:
    """Write the single character *c* (or byte value) to *fd*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str | bytes | None, fd: int) -> None:
    """Write *s* to *fd*; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s))


def putendl_fd(s: str | bytes | None, fd: int) -> None:
    """Write *s* followed by a newline to *fd*; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of *n* to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))