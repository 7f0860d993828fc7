"""Byte-buffer operations over bytes-like objects and bytearrays."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_span(buf, n: int, offset: int = 0) -> None:
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    if offset + n > len(buf):
        raise ValueError(
            f"span of {n} bytes at offset {offset} exceeds buffer of {len(buf)} bytes"
        )


def bzero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    _check_span(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes.

    Raises OverflowError when the total size does not fit in a size_t.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must be non-negative")
    if nmemb != 0 and size > SIZE_MAX // nmemb:
        raise OverflowError(f"{nmemb} * {size} bytes exceeds the maximum size")
    return bytearray(nmemb * size)


def memchr(buf, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to *value* among the first *n*.

    *value* is reduced to an unsigned byte. Returns None if it is not found.
    """
    _check_span(buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_span(a, n)
    _check_span(b, n)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into the start of *dest*; return *dest*."""
    _check_span(dest, n)
    _check_span(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    dest: bytearray, src, n: int, dest_offset: int = 0, src_offset: int = 0
) -> bytearray:
    """Copy *n* bytes from *src* at *src_offset* to *dest* at *dest_offset*.

    The regions may overlap, including when *dest* and *src* are the same
    buffer. Returns *dest*.
    """
    _check_span(dest, n, dest_offset)
    _check_span(src, n, src_offset)
    dest[dest_offset:dest_offset + n] = bytes(src[src_offset:src_offset + n])
    return dest


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with *value* as an unsigned byte; return *buf*."""
    _check_span(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf