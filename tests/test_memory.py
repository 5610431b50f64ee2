import pytest

from ftkit.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_calloc_zero_filled():
    buf = calloc(3, 4)
    assert buf == bytearray(12)
    assert isinstance(buf, bytearray)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_bzero_prefix_only():
    buf = bytearray(b"hello")
    bzero(buf, 3)
    assert buf == bytearray(b"\x00\x00\x00lo")


def test_memset_masks_value():
    buf = bytearray(b"abcdef")
    result = memset(buf, 0x141, 4)
    assert result is buf
    assert buf == bytearray(b"AAAAef")


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxxx")
    assert memcpy(dst, b"abc", 3) is dst
    assert dst[:3] == b"abc"
    assert dst[3:] == b"xxx"


def test_memccpy_stops_after_byte():
    dst = bytearray(8)
    end = memccpy(dst, b"key=value", ord("="), 8)
    assert end == len(b"key=")
    assert dst[:end] == b"key="
    assert dst[end:] == bytes(8 - end)


def test_memccpy_not_found_copies_all():
    dst = bytearray(5)
    assert memccpy(dst, b"abcde", ord("z"), 5) is None
    assert dst == bytearray(b"abcde")


def test_memchr():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == data.index(b"c")
    assert memchr(data, ord("c"), 2) is None
    assert memchr(data, ord("z"), 6) is None


def test_memcmp():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) == ord("d") - ord("c")
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"a", b"b", 0) == 0
    assert memcmp(b"\x00", b"\xff", 1) < 0


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)