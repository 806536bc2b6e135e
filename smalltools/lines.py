"""Line-oriented exercises: longest line, long lines, trimming and reversing."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator, Sequence

MAXLINE = 1000
LIMIT = 80

_LINE = re.compile(r"[^\n]*\n|[^\n]+")


def read_lines(text: str, limit: int = MAXLINE) -> Iterator[str]:
    """Yield the lines of ``text`` as a buffer of ``limit`` characters holds them.

    A line longer than ``limit - 1`` characters is split into pieces of that
    size; each piece is yielded as a line of its own.
    """
    if limit < 2:
        raise ValueError("limit must be at least 2")
    size = limit - 1
    for match in _LINE.finditer(text):
        line = match.group()
        for start in range(0, len(line), size):
            yield line[start : start + size]


def _measured_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield each line's full length with as much of it as fits the buffer."""
    keep = MAXLINE - 2
    for match in _LINE.finditer(text):
        line = match.group()
        has_newline = line.endswith("\n")
        body = line[:-1] if has_newline else line
        yield len(line), body[:keep] + ("\n" if has_newline else "")


def longest_line(text: str) -> str:
    """Return the first of the longest lines of ``text``, or ``""`` if it is empty."""
    best = ""
    for line in read_lines(text):
        if len(line) > len(best):
            best = line
    return best


def long_lines(text: str, limit: int = LIMIT) -> list[tuple[int, str]]:
    """Return ``(length, line)`` for each line longer than ``limit`` characters.

    The length counts the whole line; very long lines are kept only in part.
    """
    return [(length, line) for length, line in _measured_lines(text) if length > limit]


def trim_lines(text: str) -> str:
    """Drop empty lines and remove the blanks and tabs that begin each other line."""
    return "".join(
        line.lstrip(" \t") for _, line in _measured_lines(text) if not line.startswith("\n")
    )


def reverse_lines(text: str) -> str:
    """Reverse each line of ``text``; every line of the result ends in a newline."""
    return "".join(line.split("\n", 1)[0][::-1] + "\n" for _, line in _measured_lines(text))


def _lengths_report(text: str) -> str:
    parts = []
    longest = 0
    best = ""
    for length, line in _measured_lines(text):
        parts.append(f"{length}, {line}")
        if length > longest:
            longest = length
            best = line
    if longest > 0:
        parts.append(best)
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``lines [longest|lengths|long|trim|reverse]`` on standard input."""
    parser = argparse.ArgumentParser(prog="lines", description="Process the lines of standard input.")
    parser.add_argument(
        "action",
        nargs="?",
        choices=("longest", "lengths", "long", "trim", "reverse"),
        default="longest",
    )
    args = parser.parse_args(argv)
    text = sys.stdin.read()
    if args.action == "longest":
        sys.stdout.write(longest_line(text))
    elif args.action == "lengths":
        sys.stdout.write(_lengths_report(text))
    elif args.action == "long":
        sys.stdout.writelines(f"{length}, {line}" for length, line in long_lines(text))
    elif args.action == "trim":
        sys.stdout.write(trim_lines(text))
    else:
        sys.stdout.write(reverse_lines(text))
    return 0