"""Print the last lines of files or standard input."""

from __future__ import annotations

import sys
from collections.abc import Sequence

DEFAULT_COUNT = 5


def last_lines(text: str, n: int) -> str:
    """Return the tail of ``text`` after the (n+1)-th newline from the end.

    The first character is never taken as a line break; if fewer newlines
    are found the whole text is returned.
    """
    end = len(text)
    for _ in range(n + 1):
        pos = text.rfind("\n", 1, end)
        if pos < 0:
            return text
        end = pos
    return text[end + 1 :]


def format_block(text: str, n: int, name: str) -> str:
    """Return the titled block printed for one input."""
    return f"Last {n} Lines of {name}\n{last_lines(text, n)}\n"


def _read(path: str) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``last [-N] [file|-]...``."""
    args = list(sys.argv[1:] if argv is None else argv)
    count = DEFAULT_COUNT
    if not args:
        sys.stdout.write(format_block(sys.stdin.read(), count, "stdin"))
        return 0
    for arg in args:
        if arg == "-":
            sys.stdout.write(format_block(sys.stdin.read(), count, "stdin"))
        elif arg.startswith("-"):
            digits = arg[1:]
            if not (digits.isascii() and digits.isdigit()):
                print(f"Invalid option {arg}", file=sys.stderr)
                return 1
            count = int(digits)
        else:
            try:
                text = _read(arg)
            except OSError as err:
                print(f"{arg}: {err.strerror}", file=sys.stderr)
                continue
            sys.stdout.write(format_block(text, count, arg))
    return 0