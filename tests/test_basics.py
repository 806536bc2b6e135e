import io

import pytest

from smalltools.basics import (
    copy,
    eof_flags,
    escape_demo,
    hello,
    main,
    power,
    power_table,
)


def test_hello():
    assert hello() == "Hello, World\n"


@pytest.mark.parametrize("text", ["", "abc", "line\n" * 5000, "tab\tand\nnewline"])
def test_copy_round_trip(text):
    dst = io.StringIO()
    assert copy(io.StringIO(text), dst) == len(text)
    assert dst.getvalue() == text


@pytest.mark.parametrize("base", [2, -3, 7, 0])
def test_power_recurrence(base):
    assert power(base, 0) == 1
    for n in range(10):
        assert power(base, n + 1) == power(base, n) * base


def test_power_non_positive_exponent():
    assert power(5, -2) == power(5, 0)


def test_power_table():
    lines = power_table().splitlines()
    assert len(lines) == 11
    assert lines[0] == "0, 1, 1"
    for i, line in enumerate(lines):
        assert [int(x) for x in line.split(", ")] == [i, power(2, i), power(-3, i)]


def test_escape_demo():
    text = escape_demo()
    assert text.count("Hello, World") == 3
    assert "\a" in text and "\b" in text
    assert text.endswith("Worldc")


def test_eof_flags():
    assert eof_flags("abc") == "111\n0 at EOF\n"
    assert eof_flags("") == "\n0 at EOF\n"
    assert eof_flags("x" * 40).count("1") == 40


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == hello()


def test_main_eof(capsys):
    assert main(["eof"]) == 0
    assert capsys.readouterr().out == "EOF = -1\n"


def test_main_copy(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("copied text\n"))
    assert main(["copy"]) == 0
    assert capsys.readouterr().out == "copied text\n"


def test_main_flags(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab"))
    assert main(["flags"]) == 0
    assert capsys.readouterr().out == eof_flags("ab")


def test_main_power(capsys):
    assert main(["power"]) == 0
    assert capsys.readouterr().out == power_table()


def test_main_unknown():
    with pytest.raises(SystemExit):
        main(["nothing"])