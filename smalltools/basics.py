"""First small programs: greeting, copying, powers and end-of-input checks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

EOF = -1
_CHUNK = 8192


def hello() -> str:
    """The greeting line."""
    return "Hello, World\n"


def copy(src: TextIO, dst: TextIO) -> int:
    """Copy everything from ``src`` to ``dst``; return the number of characters."""
    total = 0
    while chunk := src.read(_CHUNK):
        dst.write(chunk)
        total += len(chunk)
    return total


def power(base: int, n: int) -> int:
    """Raise ``base`` to the ``n``-th power; ``n`` below one gives 1."""
    result = 1
    for _ in range(n):
        result *= base
    return result


def power_table() -> str:
    """Lines ``i, 2**i, (-3)**i`` for ``i`` from 0 to 10."""
    return "".join(f"{i}, {power(2, i)}, {power(-3, i)}\n" for i in range(11))


def escape_demo() -> str:
    """The greeting three times, ended by a bell, a backspace and a plain ``c``."""
    return "Hello, World\a" + "Hello, World\b" + "Hello, Worldc"


def eof_flags(text: str) -> str:
    """A ``1`` for every character read, then the ``0`` seen at end of input."""
    return "1" * len(text) + "\n0 at EOF\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``basics [hello|copy|power|escape|flags|eof]``."""
    parser = argparse.ArgumentParser(prog="basics", description="Run a small demonstration.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("hello", "copy", "power", "escape", "flags", "eof"),
        default="hello",
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    if args.demo == "hello":
        out.write(hello())
    elif args.demo == "copy":
        copy(sys.stdin, out)
    elif args.demo == "power":
        out.write(power_table())
    elif args.demo == "escape":
        out.write(escape_demo())
    elif args.demo == "flags":
        out.write(eof_flags(sys.stdin.read()))
    else:
        out.write(f"EOF = {EOF}\n")
    return 0