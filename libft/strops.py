"""String duplication, joining and bounded copy helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

__all__ = [
    "strdup",
    "strndup",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strmapi",
    "striteri",
]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(_require_str(text, "text"))


def strndup(text: str, n: int) -> str:
    """Return at most the first ``n`` characters of ``text``."""
    _require_str(text, "text")
    if n < 0:
        raise ValueError("n must not be negative")
    return text[:n]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings into a new one."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``. With a size of
    zero nothing is copied.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the operation tried to create.
    When ``size`` does not exceed the length of ``dest``, ``dest`` is left as
    it is and the length reported is ``len(src) + size``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    if size < 0:
        raise ValueError("size must not be negative")
    dest_len = len(dest)
    if size <= dest_len:
        return dest, len(src) + size
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    _require_str(text, "text")
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(buffer: MutableSequence[Any], func: Callable[[int, Any], Any]) -> None:
    """Call ``func(index, item)`` for each item of ``buffer``, in place.

    A return value other than ``None`` replaces the item at that index.
    """
    if buffer is None or func is None:
        raise TypeError("buffer and func are required")
    for index, item in enumerate(list(buffer)):
        replacement = func(index, item)
        if replacement is not None:
            buffer[index] = replacement