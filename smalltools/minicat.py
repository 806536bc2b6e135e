"""Concatenate files to standard output, with the common cat(1) switches."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

_PROGRAM = "minicat"
_NL = 0x0A
_TAB = 0x09
_CARET = 0x5E
HELP_FILE = "cat_help"
VERSION_FILE = "cat_version"


class UsageError(Exception):
    """An unknown or misplaced switch.

    ``option`` holds the argument text from the offending character on.
    """

    def __init__(self, option: str) -> None:
        super().__init__(f"Invalid option: {option}")
        self.option = option


@dataclass
class CatOptions:
    """Switches and input names taken from the command line."""

    number: bool = False
    number_nonblank: bool = False
    show_ends: bool = False
    show_tabs: bool = False
    squeeze_blank: bool = False
    show_nonprinting: bool = False
    files: list[str] = field(default_factory=list)
    info: str | None = None

    @property
    def any_switch(self) -> bool:
        """Whether any formatting switch is on."""
        return any(
            (
                self.number,
                self.number_nonblank,
                self.show_ends,
                self.show_tabs,
                self.squeeze_blank,
                self.show_nonprinting,
            )
        )


def parse_args(argv: Sequence[str]) -> CatOptions:
    """Parse command-line arguments into :class:`CatOptions`.

    ``--`` makes every later argument a file name and may not follow a
    switch. ``--help`` and ``--version`` stop parsing and set ``info`` to
    the name of the file whose text is to be shown.
    """
    options = CatOptions()
    files_only = False
    for arg in argv:
        if arg == "-" or files_only or not arg.startswith("-"):
            options.files.append(arg)
            continue
        double = False
        for pos, ch in enumerate(arg[1:], start=1):
            rest = arg[pos:]
            if double and ch not in "hv":
                raise UsageError(rest)
            if ch == "-":
                if options.any_switch:
                    raise UsageError(rest)
                files_only = double = True
            elif ch == "A":
                options.show_nonprinting = options.show_ends = options.show_tabs = True
            elif ch == "b":
                options.number_nonblank = True
            elif ch == "n":
                options.number = True
            elif ch == "E":
                options.show_ends = True
            elif ch == "T":
                options.show_tabs = True
            elif ch == "s":
                options.squeeze_blank = True
            elif ch == "e":
                options.show_nonprinting = options.show_ends = True
            elif ch == "t":
                options.show_nonprinting = options.show_tabs = True
            elif ch == "v":
                if double:
                    options.info = VERSION_FILE
                    return options
                options.show_nonprinting = True
            elif ch == "h" and double:
                options.info = HELP_FILE
                return options
            else:
                raise UsageError(rest)
    return options


class Formatter:
    """Applies the formatting switches; line numbers run on across inputs."""

    def __init__(self, options: CatOptions) -> None:
        self.options = options
        self.line = 0

    def format(self, data: bytes) -> bytes:
        """Return ``data`` as it is printed under the chosen switches."""
        opts = self.options
        numbering = opts.number or opts.number_nonblank
        out = bytearray()
        blank_run = 0
        last = _NL
        for byte in data:
            if byte == _NL:
                if opts.squeeze_blank:
                    blank_run += 1
                    if blank_run > 2:
                        continue
            else:
                blank_run = 0
            if last == _NL and numbering and (not opts.number_nonblank or byte != _NL):
                self.line += 1
                out += b"%6d  " % self.line
            if byte == _TAB and opts.show_tabs:
                out += b"^I"
                last = byte
                continue
            if byte == _NL and opts.show_ends:
                out += b"$"
            if opts.show_nonprinting and byte < 0x20 and byte not in (_NL, _TAB):
                out += bytes((_CARET, byte + 0x40))
            else:
                out.append(byte)
            last = byte
        return bytes(out)


def _read(path: str) -> bytes:
    with open(path, "rb") as fh:
        return fh.read()


def _show_file(name: str) -> None:
    try:
        data = _read(name)
    except OSError as err:
        print(f"{name}: {err.strerror}", file=sys.stderr)
        return
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``minicat [files...] [switches...]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    stdout = sys.stdout.buffer
    if not args:
        stdout.write(sys.stdin.buffer.read())
        stdout.flush()
        return 0
    try:
        options = parse_args(args)
    except UsageError as err:
        print(f"{_PROGRAM}: {err}")
        print(f"Try '{_PROGRAM} --help' for more information")
        return 1
    if options.info is not None:
        _show_file(options.info)
        return 0

    formatter = Formatter(options)
    files = options.files or ["-"]
    # The cursor moves past an input only once it went through the formatter;
    # an unreadable file, or raw standard input, is taken again on the next turn.
    current = 0
    for _ in files:
        name = files[current]
        if name == "-":
            data = sys.stdin.buffer.read()
            if not options.any_switch:
                stdout.write(data)
                continue
        else:
            try:
                data = _read(name)
            except OSError as err:
                print(f"{name}: {err.strerror}", file=sys.stderr)
                continue
        stdout.write(formatter.format(data))
        current += 1
    stdout.flush()
    return 0