import math
from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Decimal

import pytest

from ftkit.floats import (
    decimal_digits,
    format_exp,
    format_fixed,
    format_general,
    round_digits,
)
from ftkit.spec import parse_spec


def _spec(text):
    spec, _ = parse_spec(text, 0, iter(()))
    return spec


@pytest.mark.parametrize("value", [0.1, 1.0, 123.456, 1e-10, 2.0**60, 5e-324, 0.0])
def test_decimal_digits_is_exact(value):
    assert Decimal(decimal_digits(value)) == Decimal(value)


def test_decimal_digits_drops_sign():
    assert decimal_digits(-2.5) == decimal_digits(2.5)


def test_decimal_digits_integral_ends_with_point():
    text = decimal_digits(7.0)
    assert text.endswith(".")
    assert Decimal(text) == 7


def test_decimal_digits_specials():
    assert decimal_digits(float("inf")) == "inf"
    assert decimal_digits(float("-inf")) == "inf"
    assert decimal_digits(float("nan")) == "nan"


@pytest.mark.parametrize(
    "text, precision",
    [
        ("0.125", 2),
        ("2.5", 0),
        ("3.5", 0),
        ("2.51", 0),
        ("9.99", 1),
        ("0.0049", 2),
        ("1.", 3),
        ("99.95", 1),
        ("0.5", 0),
    ],
)
def test_round_digits_matches_decimal_rounding(text, precision):
    mode = ROUND_HALF_EVEN if precision == 0 else ROUND_HALF_UP
    expected = Decimal(text).quantize(Decimal(1).scaleb(-precision), rounding=mode)
    assert round_digits(text, precision) == str(expected)


@pytest.mark.parametrize("precision", [0, 1, 4, 9])
def test_round_digits_fraction_length(precision):
    result = round_digits(decimal_digits(math.pi), precision)
    _, point, fraction = result.partition(".")
    assert len(fraction) == precision
    assert bool(point) == (precision > 0)


def test_round_digits_passes_specials():
    assert round_digits("inf", 3) == "inf"
    assert round_digits("nan", 0) == "nan"


def test_round_digits_rejects_garbage():
    with pytest.raises(ValueError):
        round_digits("1.2x", 1)


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("f", 3.14159),
        (".2f", -2.71828),
        ("10.3f", 1234.5678),
        ("010.3f", -3.14159),
        ("+.4f", 1e-5),
        (".0f", 1.5),
        (".0f", 2.5),
        ("#.0f", 3.0),
        (" f", 42.0),
        ("f", -0.0),
        ("f", 1e20),
        ("-12.1f", 7.75),
        ("5f", float("inf")),
        ("f", float("-inf")),
    ],
)
def test_format_fixed_matches_reference(fmt, value):
    assert format_fixed(_spec(fmt), value) == ("%" + fmt) % value


def test_format_fixed_rounds_exact_tie_up():
    assert format_fixed(_spec(".2f"), 0.125) == "0.13"


def test_format_fixed_nan_drops_plus():
    assert format_fixed(_spec("+f"), float("nan")) == "nan"


def test_format_fixed_leaves_spec_untouched():
    spec = _spec("+08.3f")
    format_fixed(spec, -1.5)
    assert spec == _spec("+08.3f")


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("e", 1234.5678),
        (".2e", -0.000123),
        ("15.3e", 6.02e23),
        (".0e", 5e-324),
        ("#.0e", 12.0),
        ("+e", 0.0),
        ("-12.2e", 9.999),
        (".3e", 5e-324),
        ("e", float("inf")),
    ],
)
def test_format_exp_matches_reference(fmt, value):
    assert format_exp(_spec(fmt), value) == ("%" + fmt) % value


@pytest.mark.parametrize(
    "fmt, value",
    [
        ("g", 100000.0),
        ("g", 1e6),
        ("g", 0.0001),
        ("g", 1.234e-5),
        ("g", 123.456),
        ("g", 0.0),
        ("g", -0.0),
        (".0g", 123.0),
        ("10.4g", 3.14159),
        ("g", 9.9999999),
        ("-12g", -42.5),
        ("g", 1e-5),
        ("g", float("inf")),
    ],
)
def test_format_general_matches_reference(fmt, value):
    assert format_general(_spec(fmt), value) == ("%" + fmt) % value