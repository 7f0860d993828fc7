import os

import pytest

from ftcore.lines import BUFFER_SIZE, LineReader, get_next_line


@pytest.fixture
def open_file(tmp_path):
    opened = []

    def _open(content: bytes, name: str = "data.txt") -> int:
        path = tmp_path / name
        path.write_bytes(content)
        fd = os.open(path, os.O_RDONLY)
        opened.append(fd)
        return fd

    yield _open
    for fd in opened:
        try:
            os.close(fd)
        except OSError:
            pass


def test_reads_lines_in_order(open_file):
    fd = open_file(b"one\ntwo\nthree")
    reader = LineReader(fd, 4)
    assert reader.read_line() == b"one\n"
    assert reader.read_line() == b"two\n"
    assert reader.read_line() == b"three"
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 7, BUFFER_SIZE, 10000])
def test_lines_rebuild_content_for_any_buffer_size(open_file, size):
    content = b"alpha\n\nbeta gamma\ndelta\n" * 20 + b"tail"
    fd = open_file(content)
    lines = list(LineReader(fd, size))
    assert b"".join(lines) == content
    assert lines == content.splitlines(keepends=True)


def test_every_line_but_last_ends_with_single_newline(open_file):
    fd = open_file(b"a\nbb\nccc\n\nd")
    lines = list(LineReader(fd, 3))
    for line in lines[:-1]:
        assert line.endswith(b"\n")
        assert line.count(b"\n") == 1
    assert b"\n" not in lines[-1]


def test_trailing_newline_yields_no_empty_line(open_file):
    fd = open_file(b"x\ny\n")
    assert list(LineReader(fd, 5)) == [b"x\n", b"y\n"]


def test_only_newlines(open_file):
    fd = open_file(b"\n\n\n")
    assert list(LineReader(fd, 1)) == [b"\n", b"\n", b"\n"]


def test_empty_file_returns_none(open_file):
    fd = open_file(b"")
    assert LineReader(fd).read_line() is None


def test_invalid_arguments():
    with pytest.raises(ValueError):
        LineReader(-1)
    with pytest.raises(ValueError):
        LineReader(0, 0)
    with pytest.raises(ValueError):
        get_next_line(-3)


def test_read_error_propagates():
    read_end, write_end = os.pipe()
    os.close(write_end)
    reader = LineReader(read_end, 8)
    os.close(read_end)
    with pytest.raises(OSError):
        reader.read_line()


def test_pipe_reads_more_after_end_of_data():
    read_end, write_end = os.pipe()
    try:
        os.write(write_end, b"first\nsec")
        reader = LineReader(read_end, 4)
        assert reader.read_line() == b"first\n"
        os.write(write_end, b"ond\n")
        assert reader.read_line() == b"second\n"
    finally:
        os.close(write_end)
    assert reader.read_line() is None
    os.close(read_end)


def test_get_next_line_keeps_state_per_descriptor(open_file):
    fd_a = open_file(b"a1\na2\n", "a.txt")
    fd_b = open_file(b"b1\nb2", "b.txt")
    assert get_next_line(fd_a) == b"a1\n"
    assert get_next_line(fd_b) == b"b1\n"
    assert get_next_line(fd_a) == b"a2\n"
    assert get_next_line(fd_b) == b"b2"
    assert get_next_line(fd_a) is None
    assert get_next_line(fd_b) is None


def test_get_next_line_matches_reader(open_file):
    content = b"line one\n" * 30 + b"end"
    fd = open_file(content)
    collected = []
    while (line := get_next_line(fd)) is not None:
        collected.append(line)
    assert b"".join(collected) == content
    assert len(collected) == 31