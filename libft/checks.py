"""Character classification and simple counting helpers."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = [
    "array_len",
    "count_char",
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "is_space",
]

_SPACE_CHARS = frozenset(" \t\n\r\v")


def _code(ch: str | int) -> int:
    """Return the code point of a one-character string or an integer code."""
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer code, got {ch!r}")
    return ch


def array_len(items: Iterable[object | None]) -> int:
    """Count the items that come before the first ``None``."""
    count = 0
    for item in items:
        if item is None:
            break
        count += 1
    return count


def count_char(text: str, ch: str) -> int:
    """Count how often the single character ``ch`` occurs in ``text``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return text.count(ch)


def is_alnum(ch: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(ch) or is_digit(ch)


def is_alpha(ch: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(ch)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_ascii(ch: str | int) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(ch) <= 127


def is_digit(ch: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(ch) <= ord("9")


def is_print(ch: str | int) -> bool:
    """True for a printable ASCII character, space to tilde."""
    return ord(" ") <= _code(ch) <= ord("~")


def is_space(ch: str | int) -> bool:
    """True for space, tab, newline, carriage return or vertical tab.

    Form feed is not treated as whitespace.
    """
    code = _code(ch)
    return 0 <= code <= 0x10FFFF and chr(code) in _SPACE_CHARS