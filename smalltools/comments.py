"""Strip comments from C source and check its brackets for balance."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterator, Sequence


class CommentError(Exception):
    """Raised for malformed input.

    ``line`` is the line number the problem was found on, or ``None`` when
    the input ends inside a comment or a quote.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line


class _Strip(enum.Enum):
    NONE = enum.auto()
    SLASH_READ = enum.auto()
    INSIDE_COMMENT = enum.auto()
    END_COMMENT = enum.auto()
    INSIDE_QUOTES = enum.auto()
    INSIDE_NEW_COMMENT = enum.auto()


class _Scan(enum.Enum):
    NORMAL = enum.auto()
    SLASH = enum.auto()
    OLD = enum.auto()
    END = enum.auto()
    NEW = enum.auto()
    QUOTES = enum.auto()


def _strip(text: str) -> Iterator[str]:
    state = _Strip.NONE
    quote = ""
    previous = ""
    escape = 0
    continued = False
    line = 1
    for ch in text:
        if state is _Strip.NONE:
            if ch == "/":
                state = _Strip.SLASH_READ
                continue
            if ch in "'\"":
                state = _Strip.INSIDE_QUOTES
                quote = ch
            yield ch
        elif state is _Strip.SLASH_READ:
            if ch == "*":
                state = _Strip.INSIDE_COMMENT
            elif ch == "/":
                state = _Strip.INSIDE_NEW_COMMENT
            else:
                state = _Strip.NONE
                yield "/" + ch
        elif state is _Strip.INSIDE_NEW_COMMENT:
            if ch == "\\":
                continued = True
            elif ch == "\n":
                if continued:
                    continued = False
                else:
                    state = _Strip.NONE
                    yield ch
        elif state is _Strip.INSIDE_QUOTES:
            if ch == quote:
                if previous != "\\" or not escape:
                    state = _Strip.NONE
            elif ch == "\\":
                escape += 1
            elif ch == "\n":
                if not escape:
                    raise CommentError(f"Line {line}: {quote} must end in same line", line)
                escape = 0
            else:
                escape = 0
            escape %= 2
            yield ch
            previous = ch
        elif state is _Strip.INSIDE_COMMENT:
            if ch == "\n":
                continue
            if ch == "*":
                state = _Strip.END_COMMENT
        elif ch == "/":  # END_COMMENT
            state = _Strip.NONE
        if ch == "\n":
            line += 1
    if state in (_Strip.INSIDE_COMMENT, _Strip.INSIDE_QUOTES):
        raise CommentError("Syntax Error")


def strip_comments(text: str) -> str:
    """Return ``text`` with its ``/* */`` and ``//`` comments removed.

    Quoted strings and character constants are kept as they are; a quote
    may only run onto the next line after a backslash.
    """
    return "".join(_strip(text))


_OPENERS = {"{": "Parantheses", "[": "brackets", "(": "braces"}
_CLOSERS = {"}": "{", "]": "[", ")": "("}


def check_brackets(text: str) -> list[str]:
    """Return a message for each kind of bracket left open in ``text``.

    Comments and quoted text are skipped. A closing bracket without an
    opening one raises :class:`CommentError`.
    """
    depth = dict.fromkeys(_OPENERS, 0)
    state = _Scan.NORMAL
    quote = ""
    line = 1
    chars = iter(text)
    for ch in chars:
        if state is _Scan.NORMAL:
            if ch in depth:
                depth[ch] += 1
            elif ch in _CLOSERS:
                opener = _CLOSERS[ch]
                if not depth[opener]:
                    raise CommentError(f"Line {line}: No matching '{opener}'.", line)
                depth[opener] -= 1
            elif ch in "'\"":
                state = _Scan.QUOTES
                quote = ch
            elif ch == "/":
                state = _Scan.SLASH
        elif state is _Scan.SLASH:
            if ch == "*":
                state = _Scan.OLD
            elif ch == "/":
                state = _Scan.NEW
            else:
                state = _Scan.NORMAL
        elif state is _Scan.OLD:
            if ch == "*":
                state = _Scan.END
        elif state is _Scan.END:
            state = _Scan.NORMAL if ch == "/" else _Scan.OLD
        elif state is _Scan.NEW:
            if ch == "\n":
                state = _Scan.NORMAL
        elif ch == "\\":  # QUOTES: the escaped character is skipped unseen
            next(chars, None)
        elif ch == quote:
            state = _Scan.NORMAL
        if ch == "\n":
            line += 1
    return [f"Unbalanced {name}" for opener, name in _OPENERS.items() if depth[opener]]


def main_strip(argv: Sequence[str] | None = None) -> int:
    """Command entry point: strip comments from standard input."""
    text = sys.stdin.read()
    try:
        for chunk in _strip(text):
            sys.stdout.write(chunk)
    except CommentError as err:
        sys.stdout.flush()
        if err.line is None:
            print(err, file=sys.stderr)
            return 5
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


def main_check(argv: Sequence[str] | None = None) -> int:
    """Command entry point: check the brackets of standard input."""
    text = sys.stdin.read()
    try:
        messages = check_brackets(text)
    except CommentError as err:
        print(err, file=sys.stderr)
        return 1
    for message in messages:
        print(message)
    return 0