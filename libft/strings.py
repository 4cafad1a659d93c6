"""Searching, comparing, splitting and trimming strings."""

from __future__ import annotations

__all__ = [
    "split",
    "strchr",
    "strrchr",
    "strcmp",
    "strncmp",
    "strnstr",
    "strtrim",
    "substr",
    "strlen",
    "to_lower",
    "to_upper",
]

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_char(value: object, name: str) -> str:
    _require_str(value, name)
    if len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


def _code_at(text: str, index: int) -> int:
    """Code of the character at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _require_str(text, "text")
    _require_char(sep, "sep")
    return [word for word in text.split(sep) if word]


def strchr(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or ``None`` if absent.

    Searching for the NUL character finds the end of the string.
    """
    _require_str(text, "text")
    _require_char(ch, "ch")
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == _NUL else None


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or ``None`` if absent.

    Searching for the NUL character finds the end of the string.
    """
    _require_str(text, "text")
    _require_char(ch, "ch")
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    index = 0
    while index < len(s1) and _code_at(s1, index) == _code_at(s2, index):
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings."""
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return 0
    index = 0
    while (
        index < n - 1
        and index < len(s1)
        and index < len(s2)
        and s1[index] == s2[index]
    ):
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Index of ``needle`` within the first ``n`` characters of ``haystack``.

    An empty needle matches at index 0. Returns ``None`` when not found.
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    if n < 0:
        raise ValueError("n must not be negative")
    if not needle:
        return 0
    if n == 0:
        return None
    index = haystack[:n].find(needle)
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    _require_str(text, "text")
    _require_str(charset, "charset")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end yields an empty string.
    """
    _require_str(text, "text")
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(_require_str(text, "text"))


def _convert_case(ch: str | int, low: str, high: str, shift: int) -> str | int:
    if isinstance(ch, str):
        _require_char(ch, "ch")
        code = ord(ch)
        return chr(code + shift) if ord(low) <= code <= ord(high) else ch
    if isinstance(ch, bool) or not isinstance(ch, int):
        raise TypeError(f"expected a character or an integer code, got {ch!r}")
    return ch + shift if ord(low) <= ch <= ord(high) else ch


def to_lower(ch: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; other input is returned as is.

    A character gives a character back, an integer code an integer code.
    """
    return _convert_case(ch, "A", "Z", 32)


def to_upper(ch: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; other input is returned as is.

    A character gives a character back, an integer code an integer code.
    """
    return _convert_case(ch, "a", "z", -32)