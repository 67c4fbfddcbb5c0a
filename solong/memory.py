"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _check_length(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: MutableBuffer, c: int, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buf`` to ``c`` (taken modulo 256); return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: MutableBuffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > sys.maxsize:
        raise MemoryError(f"cannot allocate {total} bytes")
    return bytearray(total)


def memcpy(dest: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy the first ``n`` bytes of ``src`` into ``dest``; return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: MutableBuffer, dest_offset: int, src_offset: int, n: int) -> MutableBuffer:
    """Copy ``n`` bytes inside ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied
    to a temporary area first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if max(dest_offset, src_offset) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length(n, data)
    target = c & 0xFF
    for index, byte in enumerate(bytes(data[:n])):
        if byte == target:
            return index
    return None


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair, or 0."""
    _check_length(n, s1, s2)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0