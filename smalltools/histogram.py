"""Histograms of word lengths and of letter frequencies."""

from __future__ import annotations

import argparse
import string
import sys
from collections.abc import Sequence
from typing import NamedTuple

MAX_LENGTH = 100
_WHITE = " \n\t"
_LETTERS = string.ascii_lowercase


class WordLengths(NamedTuple):
    """``counts[i]`` words of length ``i + 1``; only lengths up to ``longest`` are shown."""

    counts: tuple[int, ...]
    longest: int
    overflow: int


def word_length_counts(text: str) -> WordLengths:
    """Count the words of each length.

    Only words followed by a blank, tab or newline are counted. Words longer
    than the maximum length are counted as overflow.
    """
    counts = [0] * MAX_LENGTH
    longest = 0
    overflow = 0
    length = 0
    for ch in text:
        if ch not in _WHITE:
            length += 1
            continue
        if length:
            if longest < length < MAX_LENGTH:
                longest = length
            if length > MAX_LENGTH:
                overflow += 1
            else:
                counts[length - 1] += 1
            length = 0
    return WordLengths(tuple(counts), longest, overflow)


def _overflow_note(overflow: int) -> str:
    return f"{overflow} words exceeds length {MAX_LENGTH}\n" if overflow else ""


def horizontal_word_histogram(text: str) -> str:
    """One row of ``*`` for each word length that occurs."""
    result = word_length_counts(text)
    rows = [
        f"{length}: {'*' * count}\n"
        for length, count in enumerate(result.counts[: result.longest], start=1)
        if count
    ]
    return "".join(rows) + "\n" + _overflow_note(result.overflow)


def _vertical(counts: Sequence[int], mark: str, labels: Sequence[str]) -> str:
    tallest = max(counts, default=0)
    rows = []
    for level in range(tallest, 0, -1):
        cells = (f"{mark} " if count >= level else "  " for count in counts if count)
        rows.append("".join(cells) + "\n")
    footer = "".join(f"{label} " for label, count in zip(labels, counts) if count)
    return "".join(rows) + footer + "\n"


def vertical_word_histogram(text: str) -> str:
    """Columns of ``*`` for each word length that occurs, labelled underneath."""
    result = word_length_counts(text)
    shown = result.counts[: result.longest]
    labels = [str(length) for length in range(1, len(shown) + 1)]
    return _vertical(shown, "*", labels) + _overflow_note(result.overflow)


def letter_counts(text: str) -> tuple[int, ...]:
    """How often each letter a to z occurs, upper and lower case together."""
    counts = [0] * len(_LETTERS)
    for ch in text:
        if ch.isascii() and ch.isalpha():
            counts[ord(ch.lower()) - ord("a")] += 1
    return tuple(counts)


def horizontal_letter_histogram(text: str) -> str:
    """One row of dots for each letter that occurs."""
    return "".join(
        f"{letter}: {'.' * count}\n"
        for letter, count in zip(_LETTERS, letter_counts(text))
        if count
    )


def vertical_letter_histogram(text: str) -> str:
    """Columns of dots for each letter that occurs, after an empty line."""
    return "\n" + _vertical(letter_counts(text), ".", _LETTERS)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``histogram [words|words-vertical|letters|letters-vertical]``."""
    parser = argparse.ArgumentParser(prog="histogram", description="Draw a histogram of standard input.")
    parser.add_argument(
        "kind",
        nargs="?",
        choices=("words", "words-vertical", "letters", "letters-vertical"),
        default="words",
    )
    args = parser.parse_args(argv)
    if args.kind == "letters":
        sys.stdout.write("Enter the text (use Ctrl-D to end):\n")
        sys.stdout.flush()
        sys.stdout.write(horizontal_letter_histogram(sys.stdin.read()))
    elif args.kind == "letters-vertical":
        sys.stdout.write("Enter input text (Ctrl-D to end)\n")
        sys.stdout.flush()
        sys.stdout.write(vertical_letter_histogram(sys.stdin.read()))
    elif args.kind == "words-vertical":
        sys.stdout.write(vertical_word_histogram(sys.stdin.read()))
    else:
        sys.stdout.write(horizontal_word_histogram(sys.stdin.read()))
    return 0