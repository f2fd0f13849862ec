"""Helpers for characters, numbers, string search and building, line reading, linked lists and printf-style formatting."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "numbers",
    "search",
    "strings",
    "reader",
    "slist",
    "dlist",
    "numfmt",
    "printf",
]