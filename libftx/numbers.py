"""Conversions between text and 32-bit integers, with overflow checks."""

from __future__ import annotations

from .chars import is_digit, skip_whitespace

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_ATOI_LIMIT = 922337203685477580


def _wrap_int(n: int) -> int:
    """Reduce ``n`` to a signed 32-bit value the way a C int conversion does."""
    return (n + 2**31) % 2**32 - 2**31


def _split_sign(text: str) -> tuple[bool, str]:
    """Skip leading whitespace and an optional sign; return (negative, rest)."""
    rest = text[skip_whitespace(text):]
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    return negative, rest


def _leading_digits(text: str) -> str:
    """Return the run of decimal digits at the start of ``text``."""
    end = 0
    while end < len(text) and is_digit(text[end]):
        end += 1
    return text[:end]


def absolute(num: int) -> int:
    """Return the absolute value of ``num``."""
    return -num if num < 0 else num


def atoi(text: str) -> int:
    """Convert the leading part of ``text`` to an int, like C ``atoi``.

    Very long numbers give -1 (or 0 when negative); values outside the
    32-bit range wrap around.
    """
    negative, rest = _split_sign(text)
    n = 0
    for ch in _leading_digits(rest):
        if n >= _ATOI_LIMIT:
            return 0 if negative else -1
        n = n * 10 + int(ch)
    return _wrap_int(-n if negative else n)


def _base_digit(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    return -1


def _within_range(ch: str, base: int) -> bool:
    top = ord("0") + base - 1 if base <= 10 else ord("a") + base - 11
    return ord("0") <= ord(ch) <= top


def atoi_base(text: str, base: int) -> int:
    """Convert the leading part of ``text``, written in ``base``, to an int."""
    negative, rest = _split_sign(text)
    result = 0
    for ch in rest:
        if not _within_range(ch, base):
            break
        digit = _base_digit(ch)
        result = result * base + digit
        if digit < 0:
            break
    return _wrap_int(-result if negative else result)


def atoi_strict(text: str) -> int:
    """Convert the leading number in ``text`` to an int.

    Conversion stops at the first non-digit. Raises OverflowError if the
    number does not fit a 32-bit int.
    """
    negative, rest = _split_sign(text)
    n = 0
    for ch in _leading_digits(rest):
        n = n * 10 + int(ch)
        if (not negative and n > INT_MAX) or (negative and -n < INT_MIN):
            raise OverflowError(f"{text!r} is outside the int range")
    return -n if negative else n


def add_checked(a: int, b: int) -> int:
    """Return ``a + b``, raising OverflowError if it leaves the 32-bit range."""
    if (b > 0 and a > INT_MAX - b) or (b < 0 and a < INT_MIN - b):
        raise OverflowError(f"{a} + {b} overflows an int")
    return a + b


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)


def parse_int(text: str | None) -> int:
    """Parse ``text`` as a whole 32-bit integer.

    Only leading whitespace and one sign may precede the digits; any other
    character raises ValueError. A value outside the int range raises
    OverflowError.
    """
    if text is None:
        raise ValueError("no number given")
    negative, rest = _split_sign(text)
    n = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            raise ValueError(f"invalid character {ch!r} in {text!r}")
        n = n * 10 + int(ch)
        if (not negative and n > INT_MAX) or (negative and -n < INT_MIN):
            raise OverflowError(f"{text!r} is outside the int range")
    return -n if negative else n