"""Character checks, string, list, memory, formatting and line-reading helpers."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "converters",
    "lists",
    "memory",
    "printf",
    "reader",
    "strings",
    "strops",
]