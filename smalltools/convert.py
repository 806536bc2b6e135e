"""Turn block comments into line comments in C source."""

from __future__ import annotations

import enum
import os
import sys
from collections.abc import Sequence
from pathlib import Path

_USAGE = "Usage: convert <in_file> <out_file>"


class ConvertError(Exception):
    """Raised when the input cannot be converted.

    ``line`` holds the line number of a quote left open at the end of a
    line, and is ``None`` when the input ends inside a comment or quote.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class _State(enum.Enum):
    NONE = enum.auto()
    SLASH_READ = enum.auto()
    INSIDE_COMMENT = enum.auto()
    END_COMMENT = enum.auto()
    INSIDE_QUOTES = enum.auto()
    INSIDE_NEW_COMMENT = enum.auto()


def convert_comments(text: str) -> str:
    """Rewrite every ``/* ... */`` comment in ``text`` as ``//`` lines."""
    out: list[str] = []
    state = _State.NONE
    quote = ""
    previous = ""
    continued = False
    line = 1
    pos = 0
    size = len(text)

    while pos < size:
        ch = text[pos]
        pos += 1
        if state is _State.NONE:
            if ch == "/":
                state = _State.SLASH_READ
                continue
            if ch in "'\"":
                state = _State.INSIDE_QUOTES
                quote = ch
            out.append(ch)
        elif state is _State.SLASH_READ:
            if ch == "*":
                state = _State.INSIDE_COMMENT
                out.append("//")
            elif ch == "/":
                out.append("//")
                state = _State.INSIDE_NEW_COMMENT
            else:
                state = _State.NONE
                out.append("/" + ch)
        elif state is _State.INSIDE_NEW_COMMENT:
            if ch == "\\":
                continued = True
            if ch == "\n":
                if continued:
                    continued = False
                else:
                    state = _State.NONE
            out.append(ch)
        elif state is _State.INSIDE_QUOTES:
            if ch == quote:
                if previous != "\\":
                    state = _State.NONE
            elif ch == "\\":
                continued = True
            elif ch == "\n":
                if not continued:
                    raise ConvertError(
                        f"Line {line}: {quote} character should end in same line", line
                    )
                continued = False
            out.append(ch)
            previous = ch
        elif state is _State.INSIDE_COMMENT:
            if ch == "\n":
                out.append("\n//")
            elif ch == "*":
                state = _State.END_COMMENT
            else:
                out.append(ch)
        else:  # END_COMMENT
            if ch == "/":
                while pos < size and text[pos] in " \t":
                    pos += 1
                ch = text[pos] if pos < size else ""
                if ch != "\n":
                    out.append("\n")
                state = _State.NONE
            else:
                out.append("*" + ch)
                state = _State.INSIDE_COMMENT
        if ch == "\n":
            line += 1

    if state in (_State.INSIDE_COMMENT, _State.INSIDE_QUOTES):
        raise ConvertError("Syntax Error")
    return "".join(out)


def _read(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def convert_file(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    """Convert ``src`` into ``dst``; ``dst`` is removed if conversion fails."""
    if os.fspath(src) == os.fspath(dst):
        raise ValueError("in_file and out_file must be different")
    text = _read(src)
    try:
        with open(dst, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(convert_comments(text))
    except ConvertError:
        Path(dst).unlink(missing_ok=True)
        raise


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``convert <in_file> <out_file>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Error: Invalid arguments", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1
    src, dst = args
    if src == dst:
        print("Error: in_file and out_file must be different", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 2
    try:
        convert_file(src, dst)
    except OSError as err:
        print(f"{err.filename}: {err.strerror}", file=sys.stderr)
        return 3 if err.filename == src else 4
    except ConvertError as err:
        if err.line is None:
            print(err, file=sys.stderr)
            return 5
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0