"""A tiny preprocessor that expands ``#include <FILE>`` lines."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

LINE_LIMIT = 999
_SPACE = " \t\n\v\f\r"
_BAD_INCLUDE = "#include expects <FILENAME>"
_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_HEADER_NAME = re.compile(r"([^>\n]*)>")


def _read(path: str | os.PathLike[str]) -> str:
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        return fh.read()


def _lines(text: str) -> Iterator[str]:
    for match in _LINE.finditer(text):
        line = match.group()
        for start in range(0, len(line), LINE_LIMIT):
            yield line[start : start + LINE_LIMIT]


class Preprocessor:
    """Expands angle-bracket includes, each header at most once."""

    def __init__(self, include_dir: str | os.PathLike[str] = "/usr/include") -> None:
        self.include_dir = os.fspath(include_dir)
        self.included: list[str] = []
        self._seen: set[str] = set()

    def expand(self, text: str) -> str:
        """Return ``text`` with its includes replaced by the headers' contents."""
        return "".join(self._expand_lines(text))

    def expand_file(self, path: str | os.PathLike[str]) -> str:
        """Expand the contents of the file at ``path``."""
        return self.expand(_read(path))

    def _expand_lines(self, text: str) -> Iterator[str]:
        for line in _lines(text):
            yield from self._process(line)

    def _process(self, line: str) -> Iterator[str]:
        rest = line.lstrip(_SPACE)
        if not rest.startswith("#"):
            yield line
            return
        rest = rest[1:].lstrip(_SPACE)
        if rest[:7] != "include":
            yield line
            return
        rest = rest[7:].lstrip(_SPACE)
        match = _HEADER_NAME.match(rest[1:]) if rest.startswith("<") else None
        if match is None:
            yield _BAD_INCLUDE + line
            return
        name = match.group(1)
        if name in self._seen:
            return
        self._seen.add(name)
        self.included.append(name)
        try:
            content = _read(Path(f"{self.include_dir}/{name}"))
        except OSError:
            return
        yield from self._expand_lines(content)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``minicpp <input_file> <output_file>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Error: Invalid arguments", file=sys.stderr)
        print("Usage: minicpp <input_file> <output_file>", file=sys.stderr)
        return 1
    src, dst = args
    try:
        text = _read(src)
    except OSError as err:
        print(f"{src}: {err.strerror}", file=sys.stderr)
        return 2
    if src == dst:
        print("Input and output files must be different", file=sys.stderr)
        return 4
    preprocessor = Preprocessor()
    result = preprocessor.expand(text)
    try:
        with open(dst, "w", encoding="utf-8", errors="surrogateescape", newline="") as fh:
            fh.write(result)
    except OSError as err:
        print(f"{dst}: {err.strerror}", file=sys.stderr)
        return 3
    for name in preprocessor.included:
        print(f"Included: {name}")
    return 0