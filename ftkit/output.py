"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from operator import index
from typing import TextIO

__all__ = ["put_char", "put_str", "put_endl", "put_nbr", "put_unbr"]

_UINT_MAX = 0xFFFFFFFF


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write a single character; an integer is taken as its low 8 bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(index(c) & 0xFF)
    _target(stream).write(ch)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing at all."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a signed integer in decimal."""
    _target(stream).write(str(index(n)))


def put_unbr(n: int, stream: TextIO | None = None) -> None:
    """Write an unsigned 32-bit integer in decimal."""
    n = index(n)
    if not 0 <= n <= _UINT_MAX:
        raise ValueError(f"{n} is outside the unsigned 32-bit range")
    _target(stream).write(str(n))