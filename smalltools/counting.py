"""Count characters, lines, words and kinds of characters in text."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from typing import NamedTuple

_WHITE = " \n\t"
_WORD = re.compile(r"[^ \n\t]+")


class WordCount(NamedTuple):
    lines: int
    words: int
    chars: int


class KindCounts(NamedTuple):
    digits: tuple[int, ...]
    white: int
    other: int


class BlankCounts(NamedTuple):
    blanks: int
    tabs: int
    newlines: int


def count_chars(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def count_lines(text: str) -> int:
    """Number of newline characters in ``text``."""
    return text.count("\n")


def word_count(text: str) -> WordCount:
    """Lines, words and characters; words are separated by blanks, tabs and newlines."""
    return WordCount(count_lines(text), len(_WORD.findall(text)), len(text))


def count_kinds(text: str) -> KindCounts:
    """Count of each decimal digit, of white space, and of everything else."""
    digits = [0] * 10
    white = other = 0
    for ch in text:
        if "0" <= ch <= "9":
            digits[ord(ch) - ord("0")] += 1
        elif ch in _WHITE:
            white += 1
        else:
            other += 1
    return KindCounts(tuple(digits), white, other)


def count_blanks(text: str) -> BlankCounts:
    """Count blanks, tabs and newlines."""
    return BlankCounts(text.count(" "), text.count("\t"), text.count("\n"))


def _report(kind: str, text: str) -> str:
    if kind == "chars":
        return f"{count_chars(text)}\n"
    if kind == "lines":
        return f"{count_lines(text)}\n"
    if kind == "kinds":
        counts = count_kinds(text)
        digits = "".join(f" {n}" for n in counts.digits)
        return f"Digits ={digits}, White space = {counts.white}, Others = {counts.other}\n"
    if kind == "blanks":
        counts = count_blanks(text)
        return f"Blanks: {counts.blanks}, Tabs: {counts.tabs}, Newlines: {counts.newlines}\n"
    counts = word_count(text)
    return f"{counts.lines} {counts.words} {counts.chars}\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``counting [chars|lines|words|kinds|blanks]`` on standard input."""
    parser = argparse.ArgumentParser(prog="counting", description="Count things in standard input.")
    parser.add_argument(
        "kind", nargs="?", choices=("chars", "lines", "words", "kinds", "blanks"), default="words"
    )
    args = parser.parse_args(argv)
    sys.stdout.write(_report(args.kind, sys.stdin.read()))
    return 0