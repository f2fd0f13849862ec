"""Formatted output with printf-style conversion specifications.

Supported conversions are ``c s p d i u x X % n``, with the flags
``- 0 + space # '``, a width and a precision (either may be ``*``) and the
length modifiers ``h hh l ll``.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .chars import is_digit
from .numbers import atoi
from .numfmt import (
    PRECISION_FROM_ARG,
    PRECISION_UNSET,
    WIDTH_FROM_ARG,
    FormatSpec,
    Modifier,
    adjusted_length,
    signed_itoa,
    unsigned_itoa,
)

_TYPES = frozenset("cspdiuxX%n")
_NULL_STRING = "(null)"


@dataclass
class CountRef:
    """Receives the number of characters written so far by a %n conversion."""

    value: int = 0


class _Output:
    """Collects written text and counts its characters."""

    def __init__(self) -> None:
        self._parts: list[str] = []
        self.count = 0

    def write(self, text: str) -> None:
        if text:
            self._parts.append(text)
            self.count += len(text)

    def pad(self, ch: str, times: int) -> None:
        if times > 0:
            self.write(ch * times)

    def text(self) -> str:
        return "".join(self._parts)


class _Arguments:
    """Hands out the values that follow the template, in order."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._args: Iterator[Any] = iter(args)

    def take(self) -> Any:
        try:
            return next(self._args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def take_int(self) -> int:
        return operator.index(self.take())


def _signed(n: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return (n + half) % (1 << bits) - half


def _unsigned(n: int, bits: int) -> int:
    return n % (1 << bits)


def _digit_at(template: str, pos: int) -> bool:
    ch = template[pos:pos + 1]
    return bool(ch) and is_digit(ch)


def _set_precision(template: str, pos: int, spec: FormatSpec) -> int:
    if template[pos + 1:pos + 2] == "*":
        spec.precision = PRECISION_FROM_ARG
        return pos + 1
    if _digit_at(template, pos + 1):
        spec.precision = atoi(template[pos + 1:])
    else:
        spec.precision = 0
    return pos


def _set_size(template: str, pos: int, spec: FormatSpec) -> int:
    ch = template[pos]
    doubled = template[pos + 1:pos + 2] == ch
    if ch == "h":
        spec.modifier = Modifier.HH if doubled else Modifier.H
    else:
        spec.modifier = Modifier.LL if doubled else Modifier.L
    return pos + 1 if doubled else pos


def _apply_flag(template: str, pos: int, spec: FormatSpec) -> int:
    """Apply the flag, width, precision or size at ``pos``; return the new position."""
    ch = template[pos]
    if ch == "-":
        spec.left = True
    elif ch == "0":
        spec.zero = True
    elif ch in "+ ":
        if not spec.sp_plus or spec.sp_plus == " ":
            spec.sp_plus = ch
        spec.sign = 1
    elif ch == "#":
        spec.hash = True
    elif ch == "'":
        spec.group = True
    elif ch == "*":
        spec.width = WIDTH_FROM_ARG
    elif is_digit(ch):
        spec.width = atoi(template[pos:])
    elif ch == ".":
        pos = _set_precision(template, pos, spec)
    if template[pos] in "hl":
        pos = _set_size(template, pos, spec)
    return pos


def _parse_spec(template: str, pos: int, spec: FormatSpec) -> int:
    """Fill ``spec`` from the text after a '%'; return the index of the type."""
    while pos < len(template):
        if template[pos] in _TYPES:
            spec.type = template[pos]
            return pos
        pos = _apply_flag(template, pos, spec)
        if spec.width != 0 or spec.precision != PRECISION_UNSET:
            while _digit_at(template, pos + 1):
                pos += 1
        pos += 1
    raise ValueError(f"incomplete conversion specification in {template!r}")


def _emit_single(spec: FormatSpec, ch: str, out: _Output) -> None:
    filler = "0" if not spec.left and spec.zero else " "
    if spec.width > 1 and not spec.left:
        out.pad(filler, spec.width - 1)
    out.write(ch)
    if spec.width > 1 and spec.left:
        out.pad(" ", spec.width - 1)


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _conv_percent(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    _emit_single(spec, "%", out)


def _conv_char(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    _emit_single(spec, _as_char(args.take()), out)


def _conv_string(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    if spec.precision == 0 and not spec.width:
        return
    if spec.precision < 0:
        spec.precision = PRECISION_UNSET
    value = args.take()
    if value is None:
        value = _NULL_STRING
    elif not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    length = len(value)
    field = adjusted_length(spec, length)
    if spec.precision != PRECISION_UNSET and spec.precision < length:
        length = spec.precision
    if not spec.left and field > length:
        out.pad(" ", field - length)
    out.write(value[:length])
    if spec.left and field > length:
        out.pad(" ", field - length)


def _print_number(spec: FormatSpec, digits: str, length: int, prefix: str,
                  out: _Output) -> None:
    if spec.precision == PRECISION_UNSET or spec.precision < length:
        spec.precision = length
    field = adjusted_length(spec, length)
    gap = field - min(field, spec.precision + spec.sign)
    if not spec.left and not spec.zero:
        out.pad(" ", gap)
    out.write(prefix)
    if not spec.left and spec.zero:
        out.pad("0", gap)
    if not spec.left or spec.precision > length:
        out.pad("0", spec.precision - length)
    out.write(digits[:length])
    if spec.left:
        out.pad(" ", gap)


def _conv_signed(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    bits = 64 if spec.modifier in (Modifier.L, Modifier.LL) else 32
    num = _signed(args.take_int(), bits)
    if spec.modifier == Modifier.H:
        num = _signed(num, 16)
    elif spec.modifier == Modifier.HH:
        num = _signed(num, 8)
    if spec.precision == 0 and num == 0 and not spec.width and not spec.sp_plus:
        return
    text = signed_itoa(num, spec)
    length = len(text)
    if num < 0:
        length -= 1
        spec.sp_plus = "-"
        spec.sign = 1
        text = text[1:]
    if spec.precision != PRECISION_UNSET:
        spec.zero = False
    if num == 0 and spec.precision == 0:
        length = 0
    _print_number(spec, text, length, spec.sp_plus if spec.sign else "", out)


def _conv_unsigned(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    wide = spec.modifier in (Modifier.L, Modifier.LL) or spec.type == "p"
    unum = _unsigned(args.take_int(), 64 if wide else 32)
    if spec.modifier == Modifier.H:
        unum = _unsigned(unum, 16)
    elif spec.modifier == Modifier.HH:
        unum = _unsigned(unum, 8)
    if spec.precision == 0 and unum == 0 and not spec.width and spec.type != "p":
        return
    base = 10 if spec.type == "u" else 16
    text = unsigned_itoa(unum, spec, base)
    length = len(text)
    if spec.precision != PRECISION_UNSET:
        spec.zero = False
    if spec.sp_plus in ("+", " "):
        spec.sign = 0
    elif spec.type == "p" or (spec.hash and base == 16 and unum != 0):
        spec.sign = 2
    if unum == 0 and spec.precision == 0:
        length = 0
    prefix = ("0X" if spec.type == "X" else "0x") if spec.sign == 2 else ""
    _print_number(spec, text, length, prefix, out)


def _conv_count(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    ref = args.take()
    if not isinstance(ref, CountRef):
        raise TypeError(f"%n needs a CountRef, got {type(ref).__name__}")
    ref.value = out.count


_CONVERTERS: dict[str, Callable[[FormatSpec, _Arguments, _Output], None]] = {
    "c": _conv_char,
    "s": _conv_string,
    "d": _conv_signed,
    "i": _conv_signed,
    "%": _conv_percent,
    "n": _conv_count,
    "x": _conv_unsigned,
    "X": _conv_unsigned,
    "u": _conv_unsigned,
    "p": _conv_unsigned,
}


def _convert(spec: FormatSpec, args: _Arguments, out: _Output) -> None:
    if spec.width == WIDTH_FROM_ARG:
        width = args.take_int()
        if width < 0:
            width = -width
            spec.left = True
        spec.width = width
    if spec.precision == PRECISION_FROM_ARG:
        spec.precision = args.take_int()
    _CONVERTERS[spec.type](spec, args, out)


def _render(template: str, args: Iterable[Any], out: _Output) -> None:
    arguments = _Arguments(args)
    pos = 0
    while pos < len(template):
        percent = template.find("%", pos)
        if percent < 0:
            out.write(template[pos:])
            return
        out.write(template[pos:percent])
        spec = FormatSpec()
        end = _parse_spec(template, percent + 1, spec)
        _convert(spec, arguments, out)
        pos = end + 1


def sprintf(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions replaced by formatted ``args``.

    Raises ValueError when the template ends inside a conversion and
    TypeError when arguments are missing or of the wrong kind.
    """
    out = _Output()
    _render(template, args, out)
    return out.text()


def printf(template: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Text produced before an error is still written before the error is raised.
    """
    out = _Output()
    try:
        _render(template, args, out)
    finally:
        sys.stdout.write(out.text())
    return out.count