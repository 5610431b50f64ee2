"""Byte-buffer helpers operating on bytearrays in place."""

from __future__ import annotations

from operator import index

__all__ = [
    "calloc",
    "bzero",
    "memset",
    "memcpy",
    "memccpy",
    "memchr",
    "memcmp",
    "memmove",
]


def _check_length(n: int, *buffers) -> int:
    n = index(n)
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")
    return n


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    count, size = index(count), index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    n = _check_length(n, buf)
    buf[:n] = bytes(n)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (low 8 bits)."""
    n = _check_length(n, buf)
    buf[:n] = bytes([index(value) & 0xFF]) * n
    return buf


def memcpy(dst: bytearray, src: bytes, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    n = _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memccpy(dst: bytearray, src: bytes, c: int, n: int) -> int | None:
    """Copy up to ``n`` bytes, stopping after the first byte equal to ``c``.

    Returns the index in ``dst`` just past the copied ``c``, or None if ``c``
    was not found within ``n`` bytes (all ``n`` are then copied).
    """
    n = _check_length(n, dst, src)
    stop = index(c) & 0xFF
    found = bytes(src[:n]).find(stop)
    if found < 0:
        dst[:n] = src[:n]
        return None
    dst[: found + 1] = src[: found + 1]
    return found + 1


def memchr(data: bytes, c: int, n: int) -> int | None:
    """Return the index of the first byte ``c`` within ``n`` bytes, or None."""
    n = _check_length(n, data)
    found = bytes(data[:n]).find(index(c) & 0xFF)
    return None if found < 0 else found


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair."""
    n = _check_length(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to ``dst``; overlap is safe."""
    dst, src = index(dst), index(src)
    n = index(n)
    if n < 0 or dst < 0 or src < 0:
        raise ValueError("offsets and length must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise ValueError("range exceeds buffer")
    buf[dst : dst + n] = bytes(buf[src : src + n])
    return buf