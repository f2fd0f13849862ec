"""Character classification and case conversion for ASCII characters."""

from __future__ import annotations

WHITESPACE = frozenset("\t\n\v\f\r ")


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for a decimal digit character."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for any character code between 0 and 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_upper_at(text: str, index: int) -> bool:
    """True if the character of ``text`` at ``index`` is an uppercase ASCII letter."""
    return "A" <= text[index] <= "Z"


def to_lower(c: int | str) -> int | str:
    """Convert an uppercase ASCII letter to lowercase; other values pass unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Convert a lowercase ASCII letter to uppercase; other values pass unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def skip_whitespace(text: str, index: int = 0) -> int:
    """Return the index of the first non-whitespace character at or after ``index``.

    Whitespace is space and the characters from tab to carriage return.
    If the rest of the text is whitespace, the length of the text is returned.
    """
    while index < len(text) and text[index] in WHITESPACE:
        index += 1
    return index