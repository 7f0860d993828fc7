# ftcore

Low-level helpers that behave like classic C library routines, working on
Python strings, bytes, bytearrays and file descriptors. Positions are
returned as indices (or `None`) where a C routine would return a pointer.

## Modules

- `ftcore.chars`: ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`) taking an int code or a
  one-character string; case mapping (`to_lower`, `to_upper`) that returns
  the same type it was given; `atoi`, which skips leading whitespace,
  accepts one sign and stops at the first non-digit (no digits gives 0);
  and `itoa`.
- `ftcore.memory`: byte-buffer routines `bzero`, `calloc` (raises
  `OverflowError` when the size would not fit in 64 bits), `memchr`,
  `memcmp`, `memcpy`, `memmove` (with `dest_offset` and `src_offset` for
  overlapping copies within one buffer) and `memset`. Spans that run past
  the end of a buffer raise `ValueError`.
- `ftcore.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split` (drops empty pieces),
  `strmapi`, `striteri` (updates a mutable sequence of characters in
  place), and `strlcpy` / `strlcat` on NUL-terminated `bytearray` buffers.
- `ftcore.linkedlist`: a singly linked `LinkedList` of `Node` objects with
  `push_front`, `push_back`, `last`, `clear`, `for_each`, `map`, `len()`
  and iteration over contents.
- `ftcore.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and
  `putnbr_fd` write to a file descriptor; `None` strings write nothing.
- `ftcore.printf`: `render` returns formatted text and `printf` writes it
  to standard output and returns the number of bytes written. Supported
  conversions are `%c %s %p %d %i %u %x %X %%`. `%d`/`%i` wrap to a signed
  32-bit value, `%u`/`%x`/`%X` to an unsigned 32-bit value, `%s` of `None`
  gives `(null)`, and `%p` of `None` or 0 gives `(nil)`. Unknown
  conversions are written back unchanged and consume no argument; a
  trailing lone `%` is written literally; too few arguments raise
  `TypeError`.
- `ftcore.lines`: `LineReader(fd, buffer_size)` reads a descriptor in
  chunks with `os.read` and returns lines as `bytes`, newline included,
  through `read_line()` or iteration. `get_next_line(fd)` keeps a separate
  reader for each descriptor and returns `None` once it is drained.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Examples

```python
from ftcore.chars import atoi, itoa
from ftcore.strings import split, strtrim
from ftcore.printf import render

atoi("  -42abc")                 # -42
itoa(-2147483648)                # "-2147483648"
split("  a  b c ", " ")          # ["a", "b", "c"]
strtrim("xxhixx", "x")           # "hi"
render("%d is 0x%x", 255, 255)   # "255 is 0xff"
```

```python
import os
from ftcore.lines import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader(fd, 42):
    print(line.decode(), end="")
os.close(fd)
```

```python
from ftcore.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
doubled = items.map(lambda x: x * 2, None)
list(doubled)                    # [0, 2, 4, 6]
```

## What it does not do

This is a library only; it installs no command-line program. The
formatter has no field widths, precision, flags or length modifiers.

## Running the tests

```
pytest
```