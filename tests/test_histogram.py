import io
import sys

from smalltools.histogram import (
    horizontal_letter_histogram,
    horizontal_word_histogram,
    letter_counts,
    main,
    vertical_letter_histogram,
    vertical_word_histogram,
    word_length_counts,
)


def test_word_counts_cover_terminated_words():
    text = "aa bb c ddd\teeee\n"
    result = word_length_counts(text)
    assert sum(result.counts) == len(text.split())
    assert result.longest == max(len(word) for word in text.split())
    assert result.overflow == 0


def test_word_without_trailing_white_space_is_not_counted():
    result = word_length_counts("abc")
    assert sum(result.counts) == 0


def test_very_long_word_counts_as_overflow():
    result = word_length_counts("x" * 150 + " ")
    assert result.overflow == 1
    assert sum(result.counts) == 0


def test_horizontal_word_histogram_stars_match_words():
    text = "aa bb c ddd\n"
    out = horizontal_word_histogram(text)
    assert out.count("*") == len(text.split())
    rows = [line for line in out.splitlines() if line]
    assert len(rows) == len({len(word) for word in text.split()})
    assert out.endswith("\n\n")


def test_horizontal_word_histogram_reports_overflow():
    out = horizontal_word_histogram("y" * 120 + "\n")
    assert out.endswith("1 words exceeds length 100\n")


def test_vertical_word_histogram_shape():
    text = "aa bb c\n"
    counts = word_length_counts(text).counts
    out = vertical_word_histogram(text)
    lines = out.splitlines()
    assert out.count("*") == sum(counts)
    assert len(lines) == max(counts) + 1
    assert lines[-1].split() == [str(n) for n, c in enumerate(counts, start=1) if c]


def test_letter_counts_ignore_case_and_non_letters():
    assert letter_counts("AbC") == letter_counts("aBc")
    assert sum(letter_counts("123 !? é")) == 0
    text = "Hello World"
    assert sum(letter_counts(text)) == sum(ch.isalpha() for ch in text)


def test_horizontal_letter_histogram_dots_match_letters():
    text = "banana"
    out = horizontal_letter_histogram(text)
    assert out.count(".") == len(text)
    assert [line.split(":")[0] for line in out.splitlines()] == sorted(set(text))


def test_vertical_letter_histogram_layout():
    text = "ab"
    out = vertical_letter_histogram(text)
    assert out.startswith("\n")
    assert out.count(".") == len(text)
    assert out.splitlines()[-1] == "a b "


def test_main_letters_prints_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc"))
    assert main(["letters"]) == 0
    out = capsys.readouterr().out
    assert out == "Enter the text (use Ctrl-D to end):\n" + horizontal_letter_histogram("abc")


def test_main_words_default(monkeypatch, capsys):
    text = "one two three\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out == horizontal_word_histogram(text)