"""Fahrenheit and Celsius conversion tables."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

LOWER = 0
UPPER = 300
STEP = 20

_FAHRENHEIT_HEADING = "Fahrenheit \t Celsius\n"
_CELSIUS_HEADING = "Celsius \t Fahrenheit\n"


def celsius(fahr: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (5.0 / 9.0) * (fahr - 32.0)


def _steps(lower: int, upper: int, step: int, reverse: bool = False) -> range:
    if step <= 0:
        raise ValueError("step must be positive")
    if reverse:
        return range(upper, lower - 1, -step)
    return range(lower, upper + 1, step)


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def integer_table(lower: int = LOWER, upper: int = UPPER, step: int = STEP) -> str:
    """Return the table computed in whole numbers, truncating toward zero."""
    return "".join(
        f"{fahr}\t{_truncating_div(5 * (fahr - 32), 9)}\n"
        for fahr in _steps(lower, upper, step)
    )


def fahrenheit_table(
    lower: int = LOWER,
    upper: int = UPPER,
    step: int = STEP,
    heading: bool = False,
    reverse: bool = False,
) -> str:
    """Return the Fahrenheit to Celsius table.

    With ``heading`` a title line is printed and the Celsius column is
    widened to sit under it; ``reverse`` runs from ``upper`` down to ``lower``.
    """
    width = 12 if heading else 6
    rows = (
        f"{fahr:3.0f}\t{celsius(fahr):{width}.1f}\n"
        for fahr in _steps(lower, upper, step, reverse)
    )
    return (_FAHRENHEIT_HEADING if heading else "") + "".join(rows)


def celsius_table(lower: int = LOWER, upper: int = UPPER, step: int = STEP) -> str:
    """Return the Celsius to Fahrenheit table, with its heading."""
    rows = (
        f"{cels:3.0f} \t\t{(cels * 9.0) / 5.0 + 32.0:9.1f}\n"
        for cels in _steps(lower, upper, step)
    )
    return _CELSIUS_HEADING + "".join(rows)


_TABLES = {
    "int": lambda lo, hi, st: integer_table(lo, hi, st),
    "float": lambda lo, hi, st: fahrenheit_table(lo, hi, st),
    "heading": lambda lo, hi, st: fahrenheit_table(lo, hi, st, heading=True),
    "reverse": lambda lo, hi, st: fahrenheit_table(lo, hi, st, heading=True, reverse=True),
    "celsius": lambda lo, hi, st: celsius_table(lo, hi, st),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``temperature [kind] [--lower N] [--upper N] [--step N]``."""
    parser = argparse.ArgumentParser(prog="temperature", description="Print a temperature table.")
    parser.add_argument("kind", nargs="?", choices=sorted(_TABLES), default="float")
    parser.add_argument("--lower", type=int, default=LOWER)
    parser.add_argument("--upper", type=int, default=UPPER)
    parser.add_argument("--step", type=int, default=STEP)
    args = parser.parse_args(argv)
    try:
        table = _TABLES[args.kind](args.lower, args.upper, args.step)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    sys.stdout.write(table)
    return 0