"""String helpers with the edge-case behaviour of classic C string routines."""

from __future__ import annotations

from collections.abc import Callable
from operator import index

__all__ = [
    "split",
    "strtrim",
    "substr",
    "strndup",
    "strjoin",
    "strmapi",
    "strchr",
    "strrchr",
    "strnstr",
    "strcmp",
    "strncmp",
    "strlcpy",
    "strlcat",
]


def _char(c: int | str) -> str:
    """Return a single character from a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(index(c))


def _non_negative(value: int, name: str) -> int:
    value = index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [piece for piece in text.split(_char(sep)) if piece]


def strtrim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A ``start`` at or past the end of ``text`` gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(text):
        return ""
    return text[start : start + length]


def strndup(text: str, n: int) -> str:
    """Return a copy of at most the first ``n`` characters of ``text``."""
    return text[: _non_negative(n, "n")]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing side yields the other, both missing yield None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string by applying ``func(index, char)`` to every character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))


def strchr(text: str, c: int | str) -> int | None:
    """Index of the first ``c`` in ``text``; searching for NUL gives ``len(text)``."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    found = text.find(ch)
    return None if found < 0 else found


def strrchr(text: str, c: int | str) -> int | None:
    """Index of the last ``c`` in ``text``; searching for NUL gives ``len(text)``."""
    ch = _char(c)
    if ch == "\0":
        return len(text)
    found = text.rfind(ch)
    return None if found < 0 else found


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` wholly inside the first ``length`` characters of ``haystack``.

    An empty needle matches at 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    length = _non_negative(length, "length")
    found = haystack[:length].find(needle)
    return None if found < 0 else found


def _compare(s1: str, s2: str, limit: int | None) -> int:
    pairs = zip(s1 + "\0", s2 + "\0")
    for count, (left, right) in enumerate(pairs):
        if limit is not None and count >= limit:
            break
        if left != right or left == "\0":
            return ord(left) - ord(right)
    return 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first unequal characters, treating string end as code 0."""
    return _compare(s1, s2, None)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    return _compare(s1, s2, _non_negative(n, "n"))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``.
    """
    size = _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have had.
    When ``dst`` already fills the buffer it is returned unchanged.
    """
    size = _non_negative(size, "size")
    used = min(len(dst), size)
    total = used + len(src)
    if used == size:
        return dst, total
    return dst + src[: size - 1 - used], total