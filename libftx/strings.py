"""String building helpers: splitting, joining, copying, mapping and trimming."""

from __future__ import annotations

from collections.abc import Callable


def split(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty words."""
    if len(c) != 1:
        raise ValueError(f"delimiter must be a single character, got {c!r}")
    return [word for word in s.split(c) if word]


def strjoin(s1: str, s2: str) -> str:
    """Return the concatenation of ``s1`` and ``s2``."""
    return s1 + s2


def strlcpy(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` characters, terminator included.

    Returns the new contents of the buffer and the length of ``src``, which
    is the length that would have been needed. With ``dstsize`` 0 the buffer
    is left as ``dst``.
    """
    if dstsize < 0:
        raise ValueError("buffer size cannot be negative")
    if dstsize == 0:
        return dst, len(src)
    return src[:dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` characters.

    At most ``dstsize - len(dst) - 1`` characters are appended. Returns the
    new contents of the buffer and the length the full result would have
    had; when ``dstsize`` is smaller than ``dst`` that is
    ``dstsize + len(src)``.
    """
    if dstsize < 0:
        raise ValueError("buffer size cannot be negative")
    room = dstsize - len(dst) - 1
    appended = src[:room] if room > 0 else ""
    if dstsize < len(dst):
        return dst + appended, dstsize + len(src)
    return dst + appended, len(dst) + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strndup(s: str, length: int) -> str:
    """Return a copy of at most ``length`` leading characters of ``s``."""
    if length < 0:
        raise ValueError("length cannot be negative")
    return s[:length]


def strtrim(s: str, charset: str | None) -> str:
    """Remove characters of ``charset`` from both ends of ``s``.

    With no charset, an unchanged copy is returned.
    """
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length cannot be negative")
    if start > len(s):
        return ""
    return s[start:start + length]