"""Conversions for characters, strings, integers, pointers and '%'."""

from __future__ import annotations

from dataclasses import replace
from operator import index

from .spec import Flag, Spec, number_base

__all__ = [
    "format_char",
    "format_string",
    "format_int",
    "format_unsigned",
    "format_pointer",
    "format_percent",
]

_ULLONG_MOD = 1 << 64


def _bits(flags: Flag) -> int:
    if flags & (Flag.LONG | Flag.LONG_LONG):
        return 64
    if flags & Flag.SHORT:
        return 16
    if flags & Flag.CHAR:
        return 8
    return 32


def _as_unsigned(value: int, bits: int) -> int:
    return index(value) & ((1 << bits) - 1)


def _as_signed(value: int, bits: int) -> int:
    value = _as_unsigned(value, bits)
    return value - (1 << bits) if value >> (bits - 1) else value


def _zero_fill(precision: int, length: int) -> str:
    return "0" * max(precision - length, 0) if precision else ""


def _assemble(spec: Spec, digits: str, width: int, base: int) -> str:
    zero = spec.flags & Flag.ZERO
    left = spec.flags & Flag.LEFT
    parts = []
    if zero:
        parts.append(spec.sign_prefix(base))
    if not left:
        parts.append(spec.pad(width))
    if not zero:
        parts.append(spec.sign_prefix(base))
    parts.append(_zero_fill(spec.precision, len(digits)))
    parts.append(digits)
    if left:
        parts.append(spec.pad(width))
    return "".join(parts)


def _justify(spec: Spec, body: str, width: int) -> str:
    if spec.flags & Flag.LEFT:
        return body + spec.pad(width)
    return spec.pad(width) + body


def format_char(spec: Spec, value: int | str) -> str:
    """Format a character; without 'l' an integer keeps only its low 8 bits.

    Raises ValueError for a wide character outside 0-255.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        code = ord(value)
    else:
        code = index(value)
    if not spec.flags & Flag.LONG:
        code &= 0xFF
    if not 0 <= code <= 255:
        raise ValueError(f"character code {code} is out of range")
    return _justify(spec, chr(code), spec.width - 1)


def format_string(spec: Spec, value: str | None) -> str:
    """Format a string, truncated to the precision; None prints as '(null)'."""
    text = "(null)" if value is None else value
    if spec.flags & Flag.PRECISION:
        length = min(len(text), max(spec.precision, 0))
    else:
        length = len(text)
    width = 0 if length >= spec.width else spec.width - length
    return _justify(spec, text[:length], width)


def format_int(spec: Spec, value: int, base: int = 10) -> str:
    """Format a signed integer truncated to the size its length modifier names."""
    spec = replace(spec)
    arg = _as_signed(value, _bits(spec.flags))
    if arg < 0:
        spec.flags |= Flag.MINUS
    if spec.flags & (Flag.MINUS | Flag.PLUS | Flag.SPACE):
        spec.width -= 1
    show = arg or spec.precision or not spec.flags & Flag.PRECISION
    digits = number_base(arg, base) if show else ""
    width = spec.width - max(len(digits), spec.precision)
    return _assemble(spec, digits, width, base)


def format_unsigned(spec: Spec, value: int, base: int = 10) -> str:
    """Format an unsigned integer; base 16 or -16 gives lower or upper hex."""
    spec = replace(spec)
    arg = _as_unsigned(value, _bits(spec.flags))
    if arg == 0:
        spec.flags &= ~Flag.ALT_FORM
    show = arg or spec.precision or not spec.flags & Flag.PRECISION
    digits = number_base(arg, base) if show else ""
    width = spec.width - max(len(digits), spec.precision)
    if spec.flags & Flag.ALT_FORM and base in (16, -16):
        width -= 2
    return _assemble(spec, digits, width, base)


def format_pointer(spec: Spec, value: int | None) -> str:
    """Format an address as '0x' followed by lower-case hex; None is address 0."""
    arg = 0 if value is None else index(value) % _ULLONG_MOD
    digits = number_base(arg, 16)
    if arg == 0 and spec.flags & Flag.PRECISION and spec.precision == 0:
        digits = ""
    length = len(digits)
    if length > spec.precision:
        width = spec.width - (length + 2)
    else:
        width = spec.width - (spec.precision + 2)
    parts = []
    if not spec.flags & Flag.LEFT:
        parts.append(spec.pad(width))
    if spec.flags & Flag.MINUS:
        parts.append("-")
    parts.append("0x")
    parts.append(_zero_fill(spec.precision, length))
    parts.append(digits)
    if spec.flags & Flag.LEFT:
        parts.append(spec.pad(width))
    return "".join(parts)


def format_percent(spec: Spec) -> str:
    """Format a literal '%' within the field width."""
    return _justify(spec, "%", spec.width - 1)