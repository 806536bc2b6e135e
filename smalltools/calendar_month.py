"""Print the calendar of one month, laid out like cal(1)."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEK_HEADER = "Su Mo Tu We Th Fr Sa"
# 1 January of year 1 is counted as a Saturday (Sunday = 0).
_FIRST_WEEKDAY = 6

_MONTH_ERROR = "Illegal month value: use 1 - 12"
_YEAR_ERROR = "Illegal year value: use 1900 - 9999"
_USAGE = "Usage: calendar <month> <year>"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def days_in_year(year: int) -> int:
    """Number of days in ``year``; 1752 lost eleven days to the calendar reform."""
    if year == 1752:
        return 354
    if (year % 4 == 0 and year % 100 != 0) or year % 400 == 0:
        return 366
    return 365


def _month_lengths(year: int) -> list[int]:
    lengths = list(_MONTH_DAYS)
    if days_in_year(year) == 366:
        lengths[1] = 29
    return lengths


def _days_of_month(month: int, year: int, length: int) -> list[int]:
    if month == 9 and year == 1752:
        return [1, 2, *range(14, length + 1)]
    return list(range(1, length + 1))


def _check(month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(_MONTH_ERROR)
    if not 1 <= year <= 9999:
        raise ValueError(_YEAR_ERROR)


def format_month(month: int, year: int) -> str:
    """Return the calendar of ``month`` in ``year`` as text."""
    _check(month, year)
    lengths = _month_lengths(year)
    weekday = (
        _FIRST_WEEKDAY
        + sum(days_in_year(y) for y in range(1, year))
        + sum(lengths[: month - 1])
    ) % 7

    parts = [f"{MONTH_NAMES[month - 1]:>11} {year}\n", _WEEK_HEADER + "\n", "   " * weekday]
    for day in _days_of_month(month, year, lengths[month - 1]):
        parts.append(f"{day:2d} ")
        weekday = (weekday + 1) % 7
        if weekday == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``calendar <month> <year>``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(_USAGE, file=sys.stderr)
        return 1
    month = _atoi(args[0])
    if not 1 <= month <= 12:
        print(_MONTH_ERROR, file=sys.stderr)
        return 2
    year = _atoi(args[1])
    if not 1 <= year <= 9999:
        print(_YEAR_ERROR, file=sys.stderr)
        return 3
    sys.stdout.write(format_month(month, year))
    return 0