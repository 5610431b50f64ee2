import io

import pytest

from ftkit.output import put_char, put_endl, put_nbr, put_str, put_unbr


def test_put_char_string():
    out = io.StringIO()
    put_char("a", out)
    assert out.getvalue() == "a"


def test_put_char_int_uses_low_byte():
    out = io.StringIO()
    put_char(ord("A") + 256, out)
    assert out.getvalue() == "A"


def test_put_char_rejects_multiple_chars():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    put_str(" world", out)
    assert out.getvalue() == "hello world"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", out)
    assert out.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 42, -42, 2147483647, -2147483648])
def test_put_nbr_round_trips(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_negative_has_minus():
    out = io.StringIO()
    put_nbr(-5, out)
    assert out.getvalue().startswith("-")


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_put_unbr_round_trips(n):
    out = io.StringIO()
    put_unbr(n, out)
    assert int(out.getvalue()) == n


@pytest.mark.parametrize("n", [-1, 4294967296])
def test_put_unbr_out_of_range(n):
    with pytest.raises(ValueError):
        put_unbr(n, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_str("to stdout")
    assert capsys.readouterr().out == "to stdout"