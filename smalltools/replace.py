"""Replace a whole word in a file with another word."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

_WHITE = frozenset(" \n\t")
_USAGE = "Usage: replace <in_file> <out_file> <in_word> <out_word>"


def replace_word(text: str, old: str, new: str) -> str:
    """Replace ``old`` with ``new`` where it stands between whitespace.

    A word is replaced only when whitespace precedes and follows it; the very
    start of the text does not count as whitespace. Text still being matched
    against ``old`` when the input ends is not written.
    """
    out: list[str] = []
    pending = ""
    after_white = False
    for ch in text:
        if len(pending) == len(old):
            out.append(new if after_white and ch in _WHITE else pending)
            out.append(ch)
            pending = ""
        elif ch == old[len(pending)]:
            pending += ch
        else:
            out.append(pending)
            out.append(ch)
            pending = ""
            after_white = ch in _WHITE
    return "".join(out)


def _read(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def replace_file(
    src: str | os.PathLike[str], dst: str | os.PathLike[str], old: str, new: str
) -> None:
    """Write ``src`` to ``dst`` with ``old`` replaced by ``new``."""
    if os.fspath(src) == os.fspath(dst):
        raise ValueError("<in_file> and <out_file> should be different")
    text = _read(src)
    with open(dst, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
        fh.write(replace_word(text, old, new))


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``replace <in_file> <out_file> <in_word> <out_word>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print("Error: Missing arguments", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1
    src, dst, old, new = args
    if src == dst:
        print("Error: <in_file> and <out_file> should be different", file=sys.stderr)
        return 2
    try:
        replace_file(src, dst, old, new)
    except OSError as err:
        print(f"{err.filename}: {err.strerror}", file=sys.stderr)
        return 3 if err.filename == src else 4
    return 0