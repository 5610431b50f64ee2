"""printf-style formatting of a format string and its arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, TextIO

from .floats import format_exp, format_fixed, format_general
from .integers import (
    format_char,
    format_int,
    format_percent,
    format_pointer,
    format_string,
    format_unsigned,
)
from .spec import Flag, Spec, parse_spec

__all__ = ["sprintf", "printf"]

_INTEGER_CONVERSIONS = {
    "d": (format_int, 10),
    "i": (format_int, 10),
    "u": (format_unsigned, 10),
    "x": (format_unsigned, 16),
    "X": (format_unsigned, -16),
}

_FLOAT_CONVERSIONS = {
    "f": format_fixed,
    "e": format_exp,
    "g": format_general,
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def _store_count(spec: Spec, target: Any, written: int) -> None:
    if target is None:
        return
    count = written
    if spec.flags & Flag.CHAR:
        count &= 0xFFFF
        if count & 0x8000:
            count -= 0x10000
    target.append(count)


def _convert(spec: Spec, args: Iterator[Any], written: int) -> str | None:
    """Text for one conversion, or None when output must stop here."""
    conversion = spec.conversion
    if conversion == "%":
        return format_percent(spec)
    if conversion in _INTEGER_CONVERSIONS:
        func, base = _INTEGER_CONVERSIONS[conversion]
        return func(spec, _next_arg(args), base)
    if conversion in _FLOAT_CONVERSIONS:
        return _FLOAT_CONVERSIONS[conversion](spec, _next_arg(args))
    if conversion == "c":
        value = _next_arg(args)
        try:
            return format_char(spec, value)
        except ValueError:
            return None
    if conversion == "s":
        return format_string(spec, _next_arg(args))
    if conversion == "p":
        return format_pointer(spec, _next_arg(args))
    if conversion == "n":
        _store_count(spec, _next_arg(args), written)
        return ""
    return None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Supported conversions are c s d i u x X p n f e g and %. An unknown
    conversion, or a wide character outside 0-255, ends the output at that
    point. A '%n' argument, when not None, gets the count so far appended.
    Raises ValueError when arguments run out.
    """
    pieces: list[str] = []
    written = 0
    remaining = iter(args)
    pos = 0
    while pos < len(fmt):
        start = fmt.find("%", pos)
        if start < 0:
            pieces.append(fmt[pos:])
            break
        literal = fmt[pos:start]
        pieces.append(literal)
        written += len(literal)
        spec, pos = parse_spec(fmt, start + 1, remaining)
        piece = _convert(spec, remaining, written)
        if piece is None:
            break
        pieces.append(piece)
        written += len(piece)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if file is None else file).write(text)
    return len(text)