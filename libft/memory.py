"""Byte buffer helpers: filling, copying, searching and resizing."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Union

__all__ = [
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
    "memset",
    "realloc",
]

SIZE_MAX = (1 << 64) - 1

Bytes = Union[bytes, bytearray, memoryview]
Buffer = Union[bytearray, memoryview, MutableSequence[int]]


def _require_count(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if start + n > length:
        raise ValueError(
            f"{what} has {length} bytes, cannot reach {n} bytes from offset {start}"
        )


def bzero(buffer: Buffer, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero, in place."""
    _require_count(n, "n")
    _check_span(len(buffer), 0, n, "buffer")
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` elements of ``size`` bytes.

    Raises ``OverflowError`` when the total would not fit in a 64-bit size.
    """
    _require_count(count, "count")
    _require_count(size, "size")
    if count != 0 and size > SIZE_MAX // count:
        raise OverflowError("count * size overflows the size range")
    return bytearray(count * size)


def memchr(data: Bytes, ch: int, n: int) -> int | None:
    """Index of the first byte equal to ``ch`` among the first ``n`` bytes.

    Only the low eight bits of ``ch`` take part. Returns ``None`` if absent.
    """
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"ch must be an integer, got {ch!r}")
    _require_count(n, "n")
    _check_span(len(data), 0, n, "data")
    index = bytes(data[:n]).find(ch & 0xFF)
    return index if index >= 0 else None


def memcmp(a: Bytes, b: Bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _require_count(n, "n")
    _check_span(len(a), 0, n, "a")
    _check_span(len(b), 0, n, "b")
    for left, right in zip(bytes(a[:n]), bytes(b[:n])):
        if left != right:
            return left - right
    return 0


def memcpy(dest: Buffer, src: Bytes, n: int) -> Buffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _require_count(n, "n")
    _check_span(len(src), 0, n, "src")
    _check_span(len(dest), 0, n, "dest")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: Buffer, dest: int, src: int, n: int) -> Buffer:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to ``dest``.

    Overlapping regions are handled correctly.
    """
    _require_count(dest, "dest")
    _require_count(src, "src")
    _require_count(n, "n")
    _check_span(len(buffer), src, n, "buffer")
    _check_span(len(buffer), dest, n, "buffer")
    buffer[dest : dest + n] = bytes(buffer[src : src + n])
    return buffer


def memset(buffer: Buffer, value: int, n: int) -> Buffer:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an integer, got {value!r}")
    _require_count(n, "n")
    _check_span(len(buffer), 0, n, "buffer")
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def realloc(data: Bytes | None, new_size: int) -> bytearray:
    """Return a new buffer of ``new_size`` bytes holding a copy of ``data``.

    As much of ``data`` as fits is copied; any extra room is zero-filled.
    ``None`` gives a fresh zero-filled buffer.
    """
    _require_count(new_size, "new_size")
    result = bytearray(new_size)
    if data is not None:
        keep = min(len(data), new_size)
        result[:keep] = bytes(data[:keep])
    return result