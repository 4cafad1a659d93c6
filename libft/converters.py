"""Conversions between decimal or based text and integers."""

from __future__ import annotations

__all__ = ["atoi", "atoi_base", "itoa"]

_LEADING_SPACE = frozenset(" \t\n\v\f\r")
_LLONG_MAX = (1 << 63) - 1


def _to_int32(value: int) -> int:
    """Wrap ``value`` into the signed 32-bit range."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def atoi(text: str) -> int:
    """Parse a decimal integer the way a 32-bit ``atoi`` would.

    Leading whitespace and one sign are accepted, parsing stops at the first
    non-digit. When the digits overflow a 64-bit accumulator, -1 is returned
    for positive input and 0 for negative input. Values that fit 64 bits but
    not 32 wrap around.
    """
    _require_str(text, "text")
    pos = 0
    while pos < len(text) and text[pos] in _LEADING_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    num = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        candidate = num * 10 + (ord(text[pos]) - ord("0"))
        if candidate > _LLONG_MAX:
            return -1 if sign == 1 else 0
        num = candidate
        pos += 1
    return _to_int32(_to_int32(num) * sign)


def _digit_value(ch: str, base: int) -> int | None:
    """Value of ``ch`` as a digit in ``base``, or ``None`` if it is not one."""
    ch = ch.lower() if "A" <= ch <= "Z" else ch
    code = ord(ch)
    limit = base + ord("0") if base <= 10 else base - 10 + ord("a")
    if ord("0") <= code <= ord("9") and code <= limit:
        return code - ord("0")
    if ord("a") <= code <= ord("f") and code <= limit:
        return 10 + code - ord("a")
    return None


def atoi_base(text: str, base: int) -> int:
    """Parse ``text`` as an integer in ``base``, stopping at the first non-digit.

    An optional leading ``-`` is accepted; letters are case-insensitive and
    only ``a`` to ``f`` count as digits. A digit equal to the base itself is
    still accepted, as the limit check is inclusive.
    """
    _require_str(text, "text")
    if isinstance(base, bool) or not isinstance(base, int):
        raise TypeError("base must be an integer")
    if base < 2:
        raise ValueError("base must be at least 2")
    sign = 1
    pos = 0
    if text.startswith("-"):
        sign = -1
        pos = 1
    result = 0
    for ch in text[pos:]:
        value = _digit_value(ch, base)
        if value is None:
            break
        result = _to_int32(result * base + value)
    return _to_int32(result * sign)


def itoa(n: int) -> str:
    """Decimal text of ``n``, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("n must be an integer")
    return str(n)