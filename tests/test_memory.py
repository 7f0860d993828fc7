import pytest

from ftcore.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf[:3] == bytes(3)
    assert buf[3:] == b"def"


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_bzero_out_of_range():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_is_zero_filled():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_zero_elements():
    assert len(calloc(0, 100)) == 0


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(2, SIZE_MAX)


def test_memchr_finds_first_match():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None


def test_memchr_reduces_value_to_byte():
    data = bytes([0, 1, 255])
    assert memchr(data, -1, 3) == 2


def test_memcmp_equal_and_sign():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(bytes([200]), bytes([1]), 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x25\x00"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(5)
    result = memcpy(dest, b"abcde", 3)
    assert result is dest
    assert dest[:3] == b"abc"
    assert dest[3:] == bytes(2)


def test_memcpy_out_of_range():
    with pytest.raises(ValueError):
        memcpy(bytearray(2), b"abc", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, buf, 4, dest_offset=2, src_offset=0)
    assert buf == b"ababcd"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, buf, 4, dest_offset=0, src_offset=2)
    assert buf == b"cdefef"


def test_memmove_distinct_buffers_matches_memcpy():
    src = b"0123456789"
    a = memmove(bytearray(10), src, 10)
    b = memcpy(bytearray(10), src, 10)
    assert a == b == src


def test_memmove_negative_offset():
    with pytest.raises(ValueError):
        memmove(bytearray(4), b"abcd", 1, dest_offset=-1)


def test_memset_fills_prefix():
    buf = bytearray(6)
    result = memset(buf, 0x41, 4)
    assert result is buf
    assert buf == b"AAAA" + bytes(2)


def test_memset_truncates_value():
    buf = memset(bytearray(2), 0x141, 2)
    assert buf == bytes([0x41, 0x41])


def test_memset_then_bzero_round_trip():
    buf = memset(bytearray(8), 7, 8)
    bzero(buf, 8)
    assert buf == calloc(8, 1)