"""Byte buffer primitives working on ``bytearray`` objects in place.

Counts are checked: a negative count raises ``ValueError`` and a count
reaching past the end of a buffer raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional


def _check(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    for length in lengths:
        if count > length:
            raise IndexError(f"count {count} exceeds buffer length {length}")


def bzero(buffer: bytearray, count: int) -> bytearray:
    """Zero the first ``count`` bytes of ``buffer`` and return it."""
    return memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``count``."""
    _check(count, len(data))
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, count: int) -> int:
    """Compare ``count`` bytes; return the difference of the first mismatch."""
    _check(count, len(first), len(second))
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def memcpy(destination: bytearray, source: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from ``source`` to the start of ``destination``."""
    _check(count, len(destination), len(source))
    destination[:count] = source[:count]
    return destination


def memmove(buffer: bytearray, destination: int, source: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer`` from offset ``source`` to ``destination``.

    Overlapping regions are handled correctly.
    """
    if destination < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    _check(count, len(buffer) - destination, len(buffer) - source)
    buffer[destination : destination + count] = bytes(buffer[source : source + count])
    return buffer


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` and return it."""
    _check(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer