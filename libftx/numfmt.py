"""Number-to-text conversion driven by printf-style format specifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

PRECISION_UNSET = -2
PRECISION_FROM_ARG = -1
WIDTH_FROM_ARG = -1

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"


class Modifier(IntEnum):
    """Length modifier of a conversion."""

    NONE = 0
    L = 1
    LL = 2
    H = 3
    HH = 4


@dataclass
class FormatSpec:
    """State of one conversion: flags, width, precision and type."""

    type: str = ""
    modifier: Modifier = Modifier.NONE
    left: bool = False
    zero: bool = False
    precision: int = PRECISION_UNSET
    hash: bool = False
    group: bool = False
    sp_plus: str = ""
    sign: int = 0
    size: int = 0
    width: int = 0
    space: str = ""


def adjusted_length(spec: FormatSpec, length: int) -> int:
    """Return the field length for text of ``length`` under ``spec``."""
    new_length = length
    if spec.width != length:
        new_length = spec.width
    if spec.precision != PRECISION_UNSET and spec.width < spec.precision:
        if spec.type == "s" and spec.precision < length:
            new_length = spec.precision
        elif spec.type != "s" and spec.precision > length:
            new_length = spec.precision
    return new_length


def _with_commas(count: int) -> int:
    """Length of a ``count``-digit number once commas separate thousands."""
    if count <= 3:
        return count
    if count % 3 == 0:
        return count + count // 3 - 1
    return count + count // 3


def _fill(value: int, width: int, digits: str, base: int, group: bool) -> str:
    """Write ``value`` right-aligned in ``width`` characters, zero padded."""
    out: list[str] = []
    since_comma = 0
    remaining = width
    while remaining > 0:
        if group and since_comma == 3:
            out.append(",")
            since_comma = 0
            remaining -= 1
            if remaining == 0:
                break
        out.append(digits[value % base])
        value //= base
        remaining -= 1
        since_comma += 1
    return "".join(reversed(out))


def signed_itoa(n: int, spec: FormatSpec) -> str:
    """Convert a signed integer to decimal text for a d or i conversion.

    Thousands are separated when ``spec.group`` is set; a number that gains
    no separator clears the flag. The text is zero padded to
    ``spec.precision`` characters, the minus sign taking the first place.
    """
    count = len(str(abs(n))) + (1 if n < 0 else 0)
    if spec.group:
        grouped = _with_commas(count) if n >= 0 else count
        if grouped == count:
            spec.group = False
        count = grouped
    if count < spec.precision:
        count = spec.precision
    text = _fill(abs(n), count, _DECIMAL, 10, spec.group)
    if n < 0:
        text = "-" + text[1:]
    return text


def _digit_set(spec: FormatSpec) -> str:
    if spec.type == "u":
        return _DECIMAL
    if spec.type == "X":
        return _HEX_UPPER
    return _HEX_LOWER


def unsigned_itoa(n: int, spec: FormatSpec, base: int) -> str:
    """Convert a non-negative integer to text in ``base``.

    Digits are upper case for an X conversion. A u conversion with
    ``spec.group`` set separates thousands. Non-zero values are zero padded
    to ``spec.precision`` characters; zero is always the single digit 0.
    """
    if n < 0:
        raise ValueError("value must not be negative")
    if base < 2 or base > 16:
        raise ValueError("base must be between 2 and 16")
    digits = _digit_set(spec)
    if n == 0:
        return digits[0]
    count = 0
    rest = n
    while rest:
        rest //= base
        count += 1
    grouped = spec.type == "u" and spec.group
    if grouped:
        count = _with_commas(count)
    if count < spec.precision:
        count = spec.precision
    if grouped:
        return _fill(n, count, digits, 10, True)
    return _fill(n, count, digits, base, False)