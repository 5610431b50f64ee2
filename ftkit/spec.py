"""Parsing of printf conversion specifications and shared formatting helpers."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from operator import index
from typing import Any

from .chars import is_digit

__all__ = ["Flag", "Spec", "parse_spec", "number_base", "nb_len"]

_ULLONG_MOD = 1 << 64
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

# Conversions for which the '0' flag survives an explicit precision.
_ZERO_WITH_PRECISION = frozenset("c%feg")


class Flag(enum.IntFlag):
    """Flags and length modifiers of one conversion specification."""

    LEFT = enum.auto()
    PLUS = enum.auto()
    SPACE = enum.auto()
    ALT_FORM = enum.auto()
    ZERO = enum.auto()
    PRECISION = enum.auto()
    MINUS = enum.auto()
    LONG = enum.auto()
    LONG_LONG = enum.auto()
    SHORT = enum.auto()
    CHAR = enum.auto()


_FLAG_CHARS = {
    "-": Flag.LEFT,
    "+": Flag.PLUS,
    " ": Flag.SPACE,
    "#": Flag.ALT_FORM,
    "0": Flag.ZERO,
}

_LENGTH_MODIFIERS = (
    ("ll", Flag.LONG_LONG),
    ("l", Flag.LONG),
    ("hh", Flag.CHAR),
    ("h", Flag.SHORT),
)


@dataclass
class Spec:
    """One parsed conversion: flags, field width, precision and conversion character."""

    flags: Flag = Flag(0)
    width: int = 0
    precision: int = 0
    conversion: str = ""

    def pad(self, width: int) -> str:
        """Padding of ``width`` characters: zeros with the '0' flag unless left-justified."""
        fill = "0" if self.flags & Flag.ZERO and not self.flags & Flag.LEFT else " "
        return fill * max(width, 0)

    def sign_prefix(self, base: int) -> str:
        """Alternate-form prefix for hex bases followed by the sign character."""
        prefix = ""
        if self.flags & Flag.ALT_FORM:
            if base == 16:
                prefix = "0x"
            elif base == -16:
                prefix = "0X"
        if self.flags & Flag.MINUS:
            prefix += "-"
        elif self.flags & Flag.PLUS:
            prefix += "+"
        elif self.flags & Flag.SPACE:
            prefix += " "
        return prefix


def _skip_atoi(fmt: str, pos: int) -> tuple[int, int]:
    negative = pos < len(fmt) and fmt[pos] == "-"
    if negative:
        pos += 1
    value = 0
    while pos < len(fmt) and is_digit(fmt[pos]):
        value = value * 10 + ord(fmt[pos]) - ord("0")
        pos += 1
    return (-value if negative else value), pos


def _take_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None
    return index(value)


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[Spec, int]:
    """Parse the specification starting at ``pos``, just after a '%'.

    ``args`` is an iterator from which '*' widths and precisions are taken.
    Returns the spec and the index just past the conversion character. When
    the format ends early, the conversion is the empty string.
    """
    length = len(fmt)
    flags = Flag(0)
    while pos < length and fmt[pos] in _FLAG_CHARS:
        flags |= _FLAG_CHARS[fmt[pos]]
        pos += 1

    width = 0
    if pos < length and is_digit(fmt[pos]):
        width, pos = _skip_atoi(fmt, pos)
    elif pos < length and fmt[pos] == "*":
        width = _take_int(args)
        pos += 1
    if width < 0:
        flags &= ~Flag.ZERO
        flags |= Flag.LEFT
        width = -width

    precision = 0
    if pos < length and fmt[pos] == ".":
        pos += 1
        flags |= Flag.PRECISION
        if pos < length and (is_digit(fmt[pos]) or fmt[pos] in "-+"):
            precision, pos = _skip_atoi(fmt, pos)
        elif pos < length and fmt[pos] == "*":
            precision = _take_int(args)
            pos += 1
    if precision < 0:
        flags &= ~Flag.PRECISION

    for text, flag in _LENGTH_MODIFIERS:
        if fmt.startswith(text, pos):
            flags |= flag
            pos += len(text)
            break

    conversion = fmt[pos] if pos < length else ""
    if conversion:
        pos += 1
    if flags & Flag.ZERO and flags & Flag.PRECISION and conversion not in _ZERO_WITH_PRECISION:
        flags &= ~Flag.ZERO
    return Spec(flags, width, precision, conversion), pos


def _check_base(base: int) -> int:
    base = index(base)
    if not 2 <= abs(base) <= 16:
        raise ValueError(f"unsupported base {base}")
    return base


def number_base(n: int, base: int) -> str:
    """Digits of ``n`` in ``abs(base)``; a base of -16 uses upper-case digits.

    Negative numbers give their magnitude in base 10 and their 64-bit two's
    complement in any other base. No sign is written.
    """
    base = _check_base(base)
    alphabet = _UPPER_DIGITS if base == -16 else _LOWER_DIGITS
    radix = abs(base)
    n = index(n)
    num = -n if n < 0 and radix == 10 else n % _ULLONG_MOD
    if num == 0:
        return "0"
    digits = []
    while num:
        num, remainder = divmod(num, radix)
        digits.append(alphabet[remainder])
    return "".join(reversed(digits))


def nb_len(n: int, base: int) -> int:
    """Number of digits of ``n`` in ``abs(base)``, ignoring the sign."""
    radix = abs(_check_base(base))
    n = abs(index(n))
    if n == 0:
        return 1
    count = 0
    while n:
        count += 1
        n //= radix
    return count