"""List directory contents, with optional inode, long and recursive output."""

from __future__ import annotations

import os
import stat
import sys
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

try:
    import grp
    import pwd
except ImportError:  # not a POSIX system
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]

_PERMISSIONS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)
_DEFAULT_PATH = "./"


@dataclass
class ListOptions:
    """Switches and directories taken from the command line."""

    recursive: bool = False
    inode: bool = False
    long: bool = False
    paths: list[str] = field(default_factory=list)


def parse_args(argv: Sequence[str]) -> ListOptions:
    """Parse ``-i``, ``-l`` and ``-R`` switches; other arguments are directories."""
    options = ListOptions()
    for arg in argv:
        if not (arg.startswith("-") and len(arg) > 1):
            options.paths.append(arg)
            continue
        for ch in arg[1:]:
            if ch == "i":
                options.inode = True
            elif ch == "l":
                options.long = True
            elif ch == "R":
                options.recursive = True
            else:
                raise ValueError(f"Invalid option {arg}")
    return options


def format_mode(mode: int) -> str:
    """Return the ten-character type and permission string for ``mode``."""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSIONS)


def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, AttributeError):
        return str(uid)


def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, AttributeError):
        return str(gid)


def _long_fields(st: os.stat_result) -> str:
    modified = time.ctime(st.st_mtime)[4:16]
    return (
        f"{format_mode(st.st_mode)}. {st.st_nlink:2d} "
        f"{_user_name(st.st_uid)} {_group_name(st.st_gid)} "
        f"{st.st_size:6d} {modified} "
    )


def _report(path: str, err: OSError) -> None:
    print(f"{path}: {err.strerror}", file=sys.stderr)


def iter_listing(path: str | os.PathLike[str], options: ListOptions) -> Iterator[str]:
    """Yield the output lines for one directory, without newlines.

    Hidden entries are left out. Errors are reported on standard error and
    the listing goes on.
    """
    directory = os.fspath(path)
    if not directory.endswith("/"):
        directory += "/"
    try:
        with os.scandir(directory) as scan:
            entries = [entry for entry in scan if not entry.name.startswith(".")]
    except OSError as err:
        _report(directory, err)
        return

    if options.recursive:
        yield f"{directory}:"
    for entry in entries:
        parts = []
        if options.inode:
            parts.append(f"{entry.inode()} ")
        if options.long:
            full = directory + entry.name
            try:
                st = os.lstat(full)
            except OSError as err:
                _report(full, err)
            else:
                parts.append(_long_fields(st))
        parts.append(f"{entry.name} ")
        yield "".join(parts)

    if options.recursive:
        for entry in entries:
            full = directory + entry.name
            try:
                st = os.lstat(full)
            except OSError as err:
                _report(full, err)
                continue
            if stat.S_ISDIR(st.st_mode):
                yield from iter_listing(full, options)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``minils [-ilR] [directories...]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_args(args)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    for path in options.paths or [_DEFAULT_PATH]:
        for line in iter_listing(path, options):
            print(line)
    return 0