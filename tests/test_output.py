import io

import pytest

from solong.output import put_char, put_endl, put_nbr, put_str


@pytest.mark.parametrize(
    "n, expected",
    [
        (123, "123"),
        (-456, "-456"),
        (0, "0"),
        (2147483647, "2147483647"),
        (-2147483648, "-2147483648"),
    ],
)
def test_put_nbr(n, expected):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert buf.getvalue() == expected


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_put_char_writes_one_character():
    buf = io.StringIO()
    for ch in "so_long":
        put_char(ch, buf)
    assert buf.getvalue() == "so_long"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_adds_no_newline():
    buf = io.StringIO()
    put_str("Moves : ", buf)
    put_nbr(0, buf)
    assert buf.getvalue() == "Moves : 0"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("Error", buf)
    put_endl("", buf)
    assert buf.getvalue() == "Error\n\n"


def test_defaults_to_standard_output(capsys):
    put_str("Error\n")
    put_nbr(-456)
    put_endl("")
    assert capsys.readouterr().out == "Error\n-456\n"


def test_writes_nothing_to_standard_error_by_default(capsys):
    put_endl("so_long")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == "so_long\n"