"""Byte-buffer helpers working on bytes and bytearray objects."""

from __future__ import annotations

import sys
from typing import Optional

_MAX_SIZE = sys.maxsize


def _check_count(n: int, *buffers: bytes) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer of length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow the address size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _MAX_SIZE // size:
        raise MemoryError(f"cannot allocate {count} items of {size} bytes")
    return bytearray(count * size)


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if n < 0 or dst < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise IndexError("move reaches past the end of the buffer")
    buf[dst:dst + n] = buf[src:src + n]
    return buf