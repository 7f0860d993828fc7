"""Read a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 42


class LineReader:
    """Reads newline-terminated lines from a file descriptor.

    Data is pulled with os.read in chunks of *buffer_size* bytes. Bytes read
    past the end of a line are kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must be non-negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def _fill(self) -> None:
        """Read until the pending data holds a newline or the descriptor is drained."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                return
            self._pending += chunk

    def read_line(self) -> bytes | None:
        """Return the next line, newline included, or None once no data is left.

        The final line is returned without a newline if the data does not end
        with one. A read error discards any pending data and propagates.
        """
        self._fill()
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from *fd*, keeping separate state for each descriptor.

    Returns None when *fd* has no more data; its state is then released.
    """
    if fd < 0:
        raise ValueError(f"file descriptor must be non-negative, got {fd}")
    reader = _readers.get(fd)
    if reader is None:
        reader = LineReader(fd, BUFFER_SIZE)
        _readers[fd] = reader
    try:
        line = reader.read_line()
    except OSError:
        del _readers[fd]
        raise
    if line is None:
        del _readers[fd]
    return line