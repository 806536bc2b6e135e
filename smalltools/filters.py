"""Character filters: squeezing blanks, showing tabs, detab, entab and fold."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

TAB = 8
_WHITE = " \t\n"
_C_SPACE = " \t\n\v\f\r"
_VISIBLE = str.maketrans({"\t": "\\t", "\b": "\\b", "\\": "\\\\"})
_TAB_RANGE_ERROR = "tab_stop must be in range 1 - 10 (inclusive)"


def squeeze_blanks(text: str) -> str:
    """Replace every run of blanks with a single blank."""
    out = []
    previous_blank = False
    for ch in text:
        if ch == " ":
            if not previous_blank:
                out.append(ch)
            previous_blank = True
        else:
            out.append(ch)
            previous_blank = False
    return "".join(out)


def make_visible(text: str) -> str:
    """Write tabs, backspaces and backslashes as ``\\t``, ``\\b`` and ``\\\\``."""
    return text.translate(_VISIBLE)


def words_per_line(text: str) -> str:
    """Print each word on a line of its own.

    A newline is written after a word only when white space follows it.
    """
    out = []
    in_word = False
    for ch in text:
        if ch in _WHITE:
            if in_word:
                out.append("\n")
                in_word = False
        else:
            out.append(ch)
            in_word = True
    return "".join(out)


def _check_tab_stop(tab_stop: int) -> None:
    if not 1 <= tab_stop <= 10:
        raise ValueError(_TAB_RANGE_ERROR)


def detab(text: str, tab_stop: int) -> str:
    """Replace tabs with blanks up to the next stop; stops every 1 to 10 columns."""
    _check_tab_stop(tab_stop)
    out = []
    column = 0
    for ch in text:
        if ch == "\t":
            while True:
                out.append(" ")
                column += 1
                if column % tab_stop == 0:
                    break
        else:
            out.append(ch)
            column = 0 if ch == "\n" else column + 1
    return "".join(out)


def entab(text: str, tab_stop: int = TAB) -> str:
    """Replace runs of blanks and tabs with the fewest tabs and blanks.

    Each run is measured from its own start, not from the line's column.
    Blanks just before a newline or the end of the text are dropped.
    """
    if tab_stop < 1:
        raise ValueError("tab_stop must be positive")
    out = []
    spaces = 0
    for ch in text:
        if ch == " ":
            spaces += 1
        elif ch == "\t":
            spaces += 1
            while spaces % tab_stop:
                spaces += 1
        else:
            if ch != "\n":
                tabs, rest = divmod(spaces, tab_stop)
                out.append("\t" * tabs + " " * rest)
            spaces = 0
            out.append(ch)
    return "".join(out)


def fold(text: str, width: int, tab_stop: int = TAB) -> str:
    """Break lines longer than ``width`` columns.

    A line broken inside a word gets a hyphen. Tabs become blanks. Text
    after the last newline is not written.
    """
    if width < 1:
        raise ValueError("width must be positive")
    if tab_stop < 1:
        raise ValueError("tab_stop must be positive")
    out: list[str] = []
    line: list[str] = []
    index = 0
    while index < len(text):
        ch = text[index]
        if len(line) == width:
            if ch not in _C_SPACE:
                line.append("-")
            line.append("\n")
            out.extend(line)
            line = []
            continue  # the character is taken again on a fresh line
        index += 1
        if ch == "\t":
            while True:
                line.append(" ")
                if len(line) == width or len(line) % tab_stop == 0:
                    break
        elif ch == "\n":
            line.append("\n")
            out.extend(line)
            line = []
        else:
            line.append(ch)
    return "".join(out)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``filters <squeeze|visible|words|detab N|entab|fold W T>``."""
    parser = argparse.ArgumentParser(prog="filters", description="Filter standard input.")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("squeeze")
    sub.add_parser("visible")
    sub.add_parser("words")
    detab_parser = sub.add_parser("detab")
    detab_parser.add_argument("tab_stop")
    sub.add_parser("entab")
    fold_parser = sub.add_parser("fold")
    fold_parser.add_argument("width", type=int)
    fold_parser.add_argument("tab_stop", type=int)
    args = parser.parse_args(argv)

    if args.command == "detab":
        if not (args.tab_stop.isascii() and args.tab_stop.isdigit()):
            print("Invalid integer for tab_stop", file=sys.stderr)
            return 2
        tab_stop = int(args.tab_stop)
        try:
            _check_tab_stop(tab_stop)
        except ValueError as err:
            print(err, file=sys.stderr)
            return 3
        sys.stdout.write(detab(sys.stdin.read(), tab_stop))
        return 0

    text = sys.stdin.read()
    if args.command == "squeeze":
        sys.stdout.write(squeeze_blanks(text))
    elif args.command == "visible":
        sys.stdout.write(make_visible(text))
    elif args.command == "words":
        sys.stdout.write(words_per_line(text))
    elif args.command == "entab":
        sys.stdout.write(entab(text))
    else:
        try:
            sys.stdout.write(fold(text, args.width, args.tab_stop))
        except ValueError as err:
            print(err, file=sys.stderr)
            return 1
    return 0