"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

__all__ = ["sprintf", "printf"]

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= (1 << 31) else value


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} requires an integer, got {value!r}")
    return value


def _convert(spec: str, args: Iterator[Any]) -> str:
    """Render one conversion; unknown specifiers produce nothing."""
    if spec == "%":
        return "%"
    if spec == "c":
        value = _next_arg(args, spec)
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c requires a single character, got {value!r}")
            return value
        return chr(_require_int(value, spec) & 0xFF)
    if spec == "s":
        value = _next_arg(args, spec)
        if value is None:
            return "(null)"
        if not isinstance(value, str):
            raise TypeError(f"%s requires a string, got {value!r}")
        return value
    if spec in ("d", "i"):
        return str(_to_int32(_require_int(_next_arg(args, spec), spec)))
    if spec == "u":
        return str(_require_int(_next_arg(args, spec), spec) & _UINT32_MASK)
    if spec == "x":
        return format(_require_int(_next_arg(args, spec), spec) & _UINT32_MASK, "x")
    if spec == "X":
        return format(_require_int(_next_arg(args, spec), spec) & _UINT32_MASK, "X")
    if spec == "p":
        value = _next_arg(args, spec)
        if value is None:
            address = 0
        elif isinstance(value, int) and not isinstance(value, bool):
            address = value & _ULONG_MASK
        else:
            address = id(value)
        return "0x" + format(address, "x")
    return ""


def _render(fmt: str, args: tuple[Any, ...]) -> tuple[str, bool]:
    """Format ``fmt``; the flag tells whether it ended on a lone ``%``."""
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a string, got {type(fmt).__name__}")
    pieces: list[str] = []
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            return "".join(pieces), True
        pieces.append(_convert(spec, arg_iter))
    return "".join(pieces), False


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    text, _ = _render(fmt, args)
    return text


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    A format ending on a lone ``%`` still writes what came before it but
    reports a count of 0.
    """
    text, truncated = _render(fmt, args)
    sys.stdout.write(text)
    return 0 if truncated else len(text)