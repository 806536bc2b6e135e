import io
import sys

import pytest

from smalltools.lines import (
    long_lines,
    longest_line,
    main,
    read_lines,
    reverse_lines,
    trim_lines,
)


def test_read_lines_round_trip():
    text = "first\nsecond line\n\nlast without newline"
    assert "".join(read_lines(text)) == text


def test_read_lines_splits_very_long_lines():
    text = "x" * 2500 + "\nshort\n"
    pieces = list(read_lines(text))
    assert "".join(pieces) == text
    assert all(len(piece) <= 999 for piece in pieces)
    assert pieces[-1] == "short\n"


def test_read_lines_rejects_tiny_limit():
    with pytest.raises(ValueError):
        list(read_lines("abc", 1))


def test_longest_line_picks_first_of_longest():
    lines = ["ab\n", "abcd\n", "wxyz\n", "a\n"]
    assert longest_line("".join(lines)) == lines[1]


def test_longest_line_of_empty_text():
    assert longest_line("") == ""


def test_long_lines_keeps_only_lines_over_limit():
    short = "s" * 10 + "\n"
    long = "L" * 90 + "\n"
    assert long_lines(short + long + short) == [(len(long), long)]


def test_long_lines_reports_full_length_of_truncated_line():
    line = "y" * 1500 + "\n"
    [(length, stored)] = long_lines(line)
    assert length == len(line)
    assert len(stored) < len(line)
    assert stored.endswith("\n")
    assert line.startswith(stored[:-1])


def test_trim_lines_drops_empty_and_leading_blanks():
    assert trim_lines("  alpha\n\n\tbeta  \n") == "alpha\n" + "beta  \n"


def test_trim_lines_result_has_no_leading_blanks():
    result = trim_lines(" \t one\n\n   two\nthree\n")
    assert all(not line[:1].isspace() for line in result.splitlines())


def test_reverse_lines_twice_is_identity():
    text = "abc\nhello world\n"
    assert reverse_lines(reverse_lines(text)) == text


def test_reverse_lines_adds_final_newline():
    assert reverse_lines("abc") == "cba\n"


def test_main_longest(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a\nlonger\nmid\n"))
    assert main(["longest"]) == 0
    assert capsys.readouterr().out == "longer\n"


def test_main_reverse(monkeypatch, capsys):
    text = "one\ntwo\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main(["reverse"]) == 0
    assert capsys.readouterr().out == reverse_lines(text)