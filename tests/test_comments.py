import io
import sys

import pytest

from smalltools.comments import (
    CommentError,
    check_brackets,
    main_check,
    main_strip,
    strip_comments,
)


def test_block_comment_removed():
    assert strip_comments("a /* x */ b") == "a  b"


def test_line_comment_removed_keeping_newline():
    assert strip_comments("int a; // note\nint b;\n") == "int a; \nint b;\n"


@pytest.mark.parametrize(
    "code",
    [
        'x = "/* no */";\n',
        "c = '/';\n",
        "a / b\n",
        's = "a\\"b";\n',
        "plain text with no comments\n",
    ],
)
def test_code_without_comments_unchanged(code):
    assert strip_comments(code) == code


def test_multiline_comment_leaves_no_trace():
    result = strip_comments("a/* x\ny */b")
    assert "x" not in result
    assert "\n" not in result
    assert result.startswith("a") and result.endswith("b")


def test_continued_line_comment_spans_lines():
    result = strip_comments("// one \\\ntwo\nkeep\n")
    assert "two" not in result
    assert result.endswith("keep\n")


def test_unterminated_comment():
    with pytest.raises(CommentError, match="Syntax Error") as excinfo:
        strip_comments("a /* open")
    assert excinfo.value.line is None


def test_unterminated_quote_at_end():
    with pytest.raises(CommentError) as excinfo:
        strip_comments('"open')
    assert excinfo.value.line is None


def test_quote_broken_by_newline():
    with pytest.raises(CommentError, match="must end in same line") as excinfo:
        strip_comments('ok\n"abc\n')
    assert excinfo.value.line == 2


def test_balanced_brackets():
    assert check_brackets("int f(int a[]) { return (a[0]); }\n") == []


def test_open_brackets_reported_in_order():
    assert check_brackets("{[(") == [
        "Unbalanced Parantheses",
        "Unbalanced brackets",
        "Unbalanced braces",
    ]


def test_unmatched_closer():
    text = "\n\n)"
    with pytest.raises(CommentError, match="No matching '\\('") as excinfo:
        check_brackets(text)
    assert excinfo.value.line == text.count("\n") + 1


def test_brackets_in_quotes_and_comments_ignored():
    assert check_brackets('"{" \'[\' /* ( */ // }\n') == []


def test_escaped_quote_inside_string():
    assert check_brackets('"\\"{"') == []


def test_main_strip_matches_function(monkeypatch, capsys):
    text = "a /* b */\nc // d\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main_strip() == 0
    assert capsys.readouterr().out == strip_comments(text)


def test_main_strip_syntax_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x /* open"))
    assert main_strip([]) == 5
    captured = capsys.readouterr()
    assert "Syntax Error" in captured.err
    assert captured.out == "x "


def test_main_strip_quote_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("'a\n"))
    assert main_strip([]) == 1
    assert "must end in same line" in capsys.readouterr().err


def test_main_check_prints_messages(monkeypatch, capsys):
    text = "{ ( [ ]"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main_check([]) == 0
    assert capsys.readouterr().out.splitlines() == check_brackets(text)


def test_main_check_unmatched(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("]"))
    assert main_check([]) == 1
    assert "No matching '['." in capsys.readouterr().err