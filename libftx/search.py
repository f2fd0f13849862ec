"""Searching and comparing text, with C-string semantics expressed as indices."""

from __future__ import annotations

NUL = "\0"


def _ordinal(s: str, index: int) -> int:
    """Code of ``s[index]``, or 0 past the end (the terminating NUL)."""
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    if c == NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``len(s)``.
    """
    if c == NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strclen(s: str, c: str) -> int:
    """Return how many characters of ``s`` precede the first ``c``.

    Raises ValueError if ``c`` does not occur in ``s``.
    """
    if c == NUL:
        return len(s)
    try:
        return s.index(c)
    except ValueError:
        raise ValueError(f"{c!r} does not occur in {s!r}") from None


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings; return the difference of the first differing codes.

    Zero means equal; a negative result means ``s1`` sorts first.
    """
    return strncmp(s1, s2, max(len(s1), len(s2)) + 1)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings, like :func:`strcmp`."""
    for index in range(min(n, max(len(s1), len(s2)))):
        a, b = _ordinal(s1, index), _ordinal(s2, index)
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the match, or None. An empty needle matches at 0.
    """
    if not needle:
        return 0
    index = haystack[:max(length, 0)].find(needle)
    return None if index < 0 else index