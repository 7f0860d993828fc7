"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the integer code of *c*, which is an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a single character, got {type(c).__name__}")


def is_alpha(c: int | str) -> bool:
    """True if *c* is an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: int | str) -> bool:
    """True if *c* is an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: int | str) -> bool:
    """True if *c* is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True if *c* lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True if *c* is a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values are unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values are unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional sign is accepted, and parsing
    stops at the first character that is not an ASCII digit. Text with no
    digits yields 0.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < end and "0" <= text[pos] <= "9":
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of the integer *n*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = str(abs(n))
    return f"-{digits}" if n < 0 else digits