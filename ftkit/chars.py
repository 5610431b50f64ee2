"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from operator import index

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "is_space",
    "to_lower",
    "to_upper",
    "atoi",
    "itoa",
    "itoa_base",
]

_LLONG_MAX = 9223372036854775807
_ULLONG_MOD = 1 << 64


def _code(c: int | str) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return index(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: int | str) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: int | str) -> bool:
    """True for space and the control characters 9 through 13."""
    code = _code(c)
    return 9 <= code <= 13 or code == 32


def _convert_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; other values pass unchanged."""
    return _convert_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; other values pass unchanged."""
    return _convert_case(c, "a", "z", -32)


def _wrap32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer with C ``atoi`` semantics.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit. A magnitude past the 64-bit signed range yields -1 for positive
    input and 0 for negative input; otherwise the result wraps to 32 bits.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and is_digit(text[pos]):
        result = result * 10 + ord(text[pos]) - ord("0")
        pos += 1
        if (sign > 0 and result > _LLONG_MAX) or (sign < 0 and result > _LLONG_MAX + 1):
            return -1 if sign > 0 else 0
    return _wrap32(_wrap32(result) * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(index(n))


def itoa_base(n: int, base: str) -> str:
    """Write ``n`` as an unsigned 64-bit number using the digits in ``base``."""
    if len(base) < 2:
        raise ValueError("base must hold at least two digits")
    value = index(n) % _ULLONG_MOD
    radix = len(base)
    if value == 0:
        return base[0]
    digits = []
    while value:
        value, remainder = divmod(value, radix)
        digits.append(base[remainder])
    return "".join(reversed(digits))