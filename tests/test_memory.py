import sys

import pytest

from cubcaster.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_truncates_value():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_bzero():
    buf = bytearray(b"hello")
    bzero(buf, 4)
    assert buf == bytearray(b"\x00\x00\x00\x00o")


def test_calloc_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)


def test_calloc_zero_size():
    assert calloc(5, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(sys.maxsize, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_found_and_missing():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == 2
    assert memchr(data, ord("c"), 2) is None
    assert memchr(data, ord("z"), 6) is None


def test_memchr_masks_value():
    assert memchr(b"\x00\x01", 0x101, 2) == 1


def test_memcmp_equal_and_prefix():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_memcpy():
    dest = bytearray(b"......")
    result = memcpy(dest, b"xyz", 3)
    assert result is dest
    assert dest == bytearray(b"xyz...")


def test_memcpy_too_long():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 2, 0, 5)
    assert buf == bytearray(b"121234589")


def test_memmove_backward_overlap():
    buf = bytearray(b"123456789")
    memmove(buf, 0, 2, 5)
    assert buf == bytearray(b"345676789")


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 4)
    assert buf == bytearray(b"abcdef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)