"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["BUFFER_SIZE", "LineReader", "get_next_line"]

BUFFER_SIZE = 100

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _check_fd(fd: int) -> int:
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"fd must be an integer, got {fd!r}")
    if fd < 0:
        raise ValueError("fd must not be negative")
    return fd


class _LineBuffer:
    """Bytes read ahead of the last line handed out."""

    def __init__(self) -> None:
        self.pending = bytearray()

    def clear(self) -> None:
        self.pending.clear()

    def take_line(self, fd: int, buffer_size: int) -> str | None:
        """Return the next line from ``fd``, newline included, or ``None`` at the end."""
        _check_fd(fd)
        try:
            os.read(fd, 0)
            while b"\n" not in self.pending:
                chunk = os.read(fd, buffer_size)
                if not chunk:
                    break
                self.pending += chunk
        except OSError:
            self.clear()
            raise
        end = self.pending.find(b"\n")
        if end < 0:
            line = bytes(self.pending)
            self.clear()
        else:
            line = bytes(self.pending[: end + 1])
            del self.pending[: end + 1]
        if not line:
            self.clear()
            return None
        return line.decode(_ENCODING, _ERRORS)


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        self.fd = _check_fd(fd)
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self._buffer = _LineBuffer()

    def read_line(self) -> str | None:
        """The next line, ending in a newline unless it is the last, or ``None``."""
        return self._buffer.take_line(self.fd, self.buffer_size)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_shared = _LineBuffer()


def get_next_line(fd: int) -> str | None:
    """Read the next line from ``fd`` using one buffer shared by all calls.

    Data read ahead is kept between calls whatever descriptor is passed;
    it is dropped when the end is reached or a read fails.
    """
    try:
        _check_fd(fd)
    except ValueError:
        _shared.clear()
        raise
    return _shared.take_line(fd, BUFFER_SIZE)