"""String operations with C-style semantics on Python strings and byte buffers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _char(c: int | str) -> str:
    """Return *c* as a one-character string; *c* may be a code point."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        return chr(c)
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def _code_at(s: str, index: int) -> int:
    """Code of the character at *index*, or 0 past the end of *s*."""
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str | bytes | bytearray) -> int:
    """Return the length of *s* up to its first NUL, or its whole length."""
    index = s.find("\0" if isinstance(s, str) else b"\0")
    return len(s) if index < 0 else index


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of *c* in *s*, or None.

    Searching for NUL yields the position of the terminator, len(s).
    """
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(s)
    return None


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of *c* in *s*, or None.

    Searching for NUL yields the position of the terminator, len(s).
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters of *s1* and *s2*.

    Returns the difference of the first pair of differing character codes,
    with the end of a string counting as code 0; 0 if they match.
    """
    if n < 0:
        raise ValueError(f"count must be non-negative, got {n}")
    for index in range(n):
        a = _code_at(s1, index)
        b = _code_at(s2, index)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Index of the first occurrence of *little* lying within the first *n* characters of *big*.

    An empty *little* is found at index 0. Returns None if there is no match.
    """
    if n < 0:
        raise ValueError(f"length must be non-negative, got {n}")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return str(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* starting at *start*.

    A start at or past the end of *s* yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return *s1* followed by *s2*."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("both arguments must be strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: int | str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    ch = _char(sep)
    if ch == "\0":
        return [s] if s else []
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for each character of *s*."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call func(index, character) for each element of *chars*, in order.

    A non-None return value replaces the character in place.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy the NUL-terminated *src* into *dst*, writing at most *size* bytes.

    The copy is always NUL-terminated when *size* is non-zero. Returns the
    length of *src*, so a result of *size* or more means truncation.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    src_len = strlen(src)
    if size == 0:
        return src_len
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of {len(dst)} bytes")
    count = min(src_len, size - 1)
    dst[:count] = bytes(src[:count])
    dst[count] = 0
    return src_len


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append the NUL-terminated *src* to the string in *dst*, within *size* bytes.

    Returns the length the full result would have had; when *size* does not
    exceed the current length of *dst*, returns len(src) + size and leaves
    *dst* unchanged.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    src_len = strlen(src)
    dst_len = strlen(dst)
    if size <= dst_len:
        return src_len + size
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer of {len(dst)} bytes")
    count = min(src_len, size - dst_len - 1)
    dst[dst_len:dst_len + count] = bytes(src[:count])
    dst[dst_len + count] = 0
    return src_len + dst_len