"""Byte-buffer operations on bytearrays and other byte sequences."""

from __future__ import annotations

from typing import Optional


def _check_count(count: int, *lengths: int) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for length in lengths:
        if count > length:
            raise ValueError(f"count {count} exceeds buffer length {length}")


def mem_set(buffer: bytearray, value: int, count: int) -> bytearray:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (low 8 bits)."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def zero(buffer: bytearray, count: int) -> bytearray:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    return mem_set(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count`` elements of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(data: bytes, value: int, count: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``count``, or None."""
    _check_count(count, len(data))
    target = value & 0xFF
    return next((i for i, b in enumerate(data[:count]) if b == target), None)


def mem_cmp(first: bytes, second: bytes, count: int) -> int:
    """Difference of the first unequal bytes within ``count``, or 0 if none differ."""
    _check_count(count, len(first), len(second))
    for a, b in zip(first[:count], second[:count]):
        if a != b:
            return a - b
    return 0


def mem_copy(dst: bytearray, src: bytes, count: int) -> bytearray:
    """Copy ``count`` bytes from the start of ``src`` to the start of ``dst``."""
    _check_count(count, len(dst), len(src))
    dst[:count] = bytes(src[:count])
    return dst


def mem_move(buffer: bytearray, dst: int, src: int, count: int) -> bytearray:
    """Move ``count`` bytes inside ``buffer`` from offset ``src`` to ``dst``.

    The regions may overlap.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_count(count, len(buffer) - dst, len(buffer) - src)
    if dst != src:
        buffer[dst:dst + count] = bytes(buffer[src:src + count])
    return buffer