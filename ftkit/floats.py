"""Floating-point conversions in fixed, exponent and general notation."""

from __future__ import annotations

import math
from dataclasses import replace

from .spec import Flag, Spec

__all__ = [
    "decimal_digits",
    "round_digits",
    "format_fixed",
    "format_exp",
    "format_general",
]

_DEFAULT_PRECISION = 6
_SPECIAL = ("inf", "nan")


def decimal_digits(value: float) -> str:
    """Exact decimal expansion of ``abs(value)`` as ``"<int>.<fraction>"``.

    The fraction carries every digit of the binary value and no trailing
    zeros, so an integral value ends with the point. Infinities give "inf"
    and NaNs give "nan"; the sign is never written.
    """
    value = float(value)
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf"
    numerator, denominator = abs(value).as_integer_ratio()
    whole, remainder = divmod(numerator, denominator)
    fraction = []
    while remainder:
        digit, remainder = divmod(remainder * 10, denominator)
        fraction.append(str(digit))
    return f"{whole}.{''.join(fraction)}"


def round_digits(digits: str, precision: int) -> str:
    """Round a ``"<int>.<fraction>"`` string to ``precision`` fractional digits.

    The result has exactly ``precision`` fractional digits and no point when
    ``precision`` is 0. Ties round up, except at precision 0 where they go to
    the even integer. "inf" and "nan" pass unchanged.
    """
    if digits in _SPECIAL:
        return digits
    precision = max(int(precision), 0)
    int_part, _, fraction = digits.partition(".")
    int_part = int_part or "0"
    if not (int_part + fraction).isdigit():
        raise ValueError(f"not a decimal digit string: {digits!r}")
    kept = fraction[:precision].ljust(precision, "0")
    rest = fraction[precision:]
    if precision == 0:
        round_up = bool(rest) and rest[0] >= "5" and (
            bool(rest[1:].strip("0")) or int_part[-1] in "13579"
        )
    else:
        round_up = bool(rest) and rest[0] >= "5"
    if round_up:
        total = str(int(int_part + kept) + 1).rjust(len(int_part) + precision, "0")
        split_at = len(total) - precision
        int_part, kept = total[:split_at], total[split_at:]
    return f"{int_part}.{kept}" if precision else int_part


def _scientific(digits: str, precision: int) -> tuple[str, int]:
    """Mantissa rounded to ``precision`` fractional digits and its decimal exponent."""
    int_part, _, fraction = digits.partition(".")
    joined = int_part + fraction
    significant = joined.lstrip("0")
    if not significant:
        return round_digits("0.", precision), 0
    exponent = len(int_part) - 1 - (len(joined) - len(significant))
    mantissa = round_digits(f"{significant[0]}.{significant[1:]}", precision)
    head, _, tail = mantissa.partition(".")
    if len(head) > 1:
        exponent += 1
        mantissa = round_digits(f"{head[0]}.{head[1:]}{tail}", precision)
    return mantissa, exponent


def _exponent_text(exponent: int) -> str:
    sign = "-" if exponent < 0 else "+"
    return f"e{sign}{abs(exponent):02d}"


def _setup(spec: Spec, value: float) -> tuple[Spec, float]:
    """Copy ``spec`` and adjust sign flags, width and precision for ``value``."""
    spec = replace(spec)
    value = float(value)
    if value < 0:
        spec.flags &= ~(Flag.PLUS | Flag.SPACE)
    if spec.flags & (Flag.PLUS | Flag.SPACE):
        spec.width -= 1
    if not spec.flags & Flag.PRECISION or spec.precision < 0:
        spec.precision = _DEFAULT_PRECISION
    if math.copysign(1.0, value) < 0:
        spec.flags |= Flag.MINUS
        spec.width -= 1
    if not math.isfinite(value):
        spec.precision = 0
        spec.flags &= ~Flag.ZERO
        if math.isnan(value):
            if spec.flags & (Flag.PLUS | Flag.SPACE):
                spec.width += 1
            spec.flags &= ~(Flag.PLUS | Flag.SPACE)
    return spec, value


def _place(spec: Spec, body: str) -> str:
    width = spec.width - len(body)
    prefix = spec.sign_prefix(10)
    zero = spec.flags & Flag.ZERO
    left = spec.flags & Flag.LEFT
    parts = []
    if zero:
        parts.append(prefix)
    if not left:
        parts.append(spec.pad(width))
    if not zero:
        parts.append(prefix)
    parts.append(body)
    if left:
        parts.append(spec.pad(width))
    return "".join(parts)


def format_fixed(spec: Spec, value: float) -> str:
    """Format ``value`` as ``[-]ddd.ddd`` (the 'f' conversion)."""
    spec, value = _setup(spec, value)
    if not math.isfinite(value):
        return _place(spec, decimal_digits(value))
    body = round_digits(decimal_digits(value), spec.precision)
    if spec.flags & Flag.ALT_FORM and "." not in body:
        body += "."
    return _place(spec, body)


def format_exp(spec: Spec, value: float) -> str:
    """Format ``value`` as ``[-]d.ddde±dd`` (the 'e' conversion)."""
    spec, value = _setup(spec, value)
    if not math.isfinite(value):
        return _place(spec, decimal_digits(value))
    mantissa, exponent = _scientific(decimal_digits(value), spec.precision)
    if spec.flags & Flag.ALT_FORM and "." not in mantissa:
        mantissa += "."
    return _place(spec, mantissa + _exponent_text(exponent))


def format_general(spec: Spec, value: float) -> str:
    """Format ``value`` in fixed or exponent notation, whichever is shorter ('g').

    The precision counts significant digits (6 when absent, at least 1) and
    trailing zeros of the fraction are dropped.
    """
    value = float(value)
    if not math.isfinite(value):
        return format_fixed(spec, value)
    if spec.flags & Flag.PRECISION and spec.precision >= 0:
        significant = max(spec.precision, 1)
    else:
        significant = _DEFAULT_PRECISION
    mantissa, exponent = _scientific(decimal_digits(value), significant - 1)
    kept = mantissa.replace(".", "").rstrip("0") or "0"
    if -4 <= exponent < significant:
        precision = max(len(kept) - 1 - exponent, 0)
        target = format_fixed
    else:
        precision = len(kept) - 1
        target = format_exp
    return target(replace(spec, precision=precision, flags=spec.flags | Flag.PRECISION), value)