"""Print the lines of files that contain a given substring."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

LINE_LIMIT = 999
_USAGE = "Usage: substring <sub_string> [<file1> ...... <filen>]"


def contains(text: str, sub: str) -> bool:
    """Whether ``sub`` occurs in ``text``.

    A match is only seen when at least one character of ``text`` follows the
    position where it starts, so a single character at the very end is missed.
    An empty ``sub`` is found in any non-empty text.
    """
    if not sub:
        return bool(text)
    return 0 <= text.find(sub) < len(text) - 1


def _chunks(line: str) -> Iterator[str]:
    for start in range(0, len(line), LINE_LIMIT):
        yield line[start : start + LINE_LIMIT]


def matching_lines(lines: Iterable[str], sub: str, label: str) -> Iterator[str]:
    """Yield ``"label: line"`` for each line holding ``sub``.

    Lines longer than the line limit are examined in pieces of that length.
    """
    for line in lines:
        for chunk in _chunks(line):
            if contains(chunk, sub):
                yield f"{label}: {chunk}"


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``substring <sub_string> [files...]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error: Invalid number of arguments", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1
    sub, *names = args
    if not names:
        sys.stdout.writelines(matching_lines(sys.stdin, sub, "stdin"))
        return 0
    for name in names:
        if name == "-":
            sys.stdout.writelines(matching_lines(sys.stdin, sub, name))
            continue
        try:
            with open(name, encoding="utf-8", errors="surrogateescape", newline="") as fh:
                sys.stdout.writelines(matching_lines(fh, sub, name))
        except OSError as err:
            print(f"{name}: {err.strerror}", file=sys.stderr)
    return 0