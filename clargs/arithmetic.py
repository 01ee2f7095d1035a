"""Example command performing arithmetic on two numbers."""

from __future__ import annotations

import enum
import math
import operator
import sys
from collections.abc import Sequence

from clargs.helptext import default_help
from clargs.parser import ArgumentError, _parse_double, parse
from clargs.schema import (
    Option,
    boolean_option,
    double_option,
    help_option,
    int_option,
    one_of_option,
)

SCHEMA = (
    boolean_option("verbose", "v", "enable verbose output"),
    boolean_option("round", "r", "round final value before output"),
    one_of_option("mode", None, "Operation to perform", "add", "sub", "mul", "div"),
    double_option("xValue", "x", "First value of operation", 0, 0, math.nan),
    double_option("yValue", "y", "Second value of operation", 0, 0, math.nan),
    int_option("power", "p", "Power to raise the final result to before output", 0, 10, 1),
    help_option(),
)


class Mode(enum.Enum):
    """Arithmetic operation, valued by its symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


def get_mode(mode_string: str | None) -> Mode:
    """Map a mode name to a Mode; anything unrecognised means addition."""
    return {"sub": Mode.SUB, "mul": Mode.MUL, "div": Mode.DIV}.get(mode_string or "", Mode.ADD)


def custom_help(schema: Sequence[Option], progname: str) -> bool:
    """Help menu for this command; always requests exit."""
    print(f"Usage: {progname} x y [options]")
    print(f"  Or : {progname} -x (x) -y (y) [otherOptions]\n")
    default_help(schema, None)
    print(
        "\nExample program for the clargs library.\n"
        "Performs arithmetic operations on the provided floating point numbers."
    )
    return True


def _divide(x: float, y: float) -> float:
    if y != 0:
        return x / y
    if x == 0 or math.isnan(x):
        return math.nan
    return math.copysign(math.inf, x) * math.copysign(1.0, y)


def _power(base: float, exponent: int) -> float:
    try:
        return math.pow(base, exponent)
    except (OverflowError, ValueError):
        return math.copysign(math.inf, base) if exponent % 2 else math.inf


def _round_half_away(value: float) -> float:
    if not math.isfinite(value) or abs(value) >= 2.0**52:
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


_OPERATIONS = {
    Mode.ADD: operator.add,
    Mode.SUB: operator.sub,
    Mode.MUL: operator.mul,
    Mode.DIV: _divide,
}


def _operate(x: float, y: float, mode: Mode) -> float:
    return _OPERATIONS[mode](x, y)


def compute(x: float, y: float, mode: Mode, power: int) -> float:
    """Apply ``mode`` to x and y, raise to ``power`` and round the result."""
    return _round_half_away(_power(_operate(x, y, mode), power))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    argv = sys.argv if argv is None else argv
    try:
        args = parse(argv, SCHEMA, on_help=custom_help)
    except ArgumentError as exc:
        print(f"Argument error: {exc.flag}: {exc.message}", file=sys.stderr)
        return 1

    x = args.flag("xValue")
    y = args.flag("yValue")
    values = args.values
    if math.isnan(x) and math.isnan(y):
        if len(values) < 2:
            print("Expected a value for x and y", file=sys.stderr)
            return 1
        x, y = _parse_double(values[0]), _parse_double(values[1])
    elif math.isnan(x):
        if not values:
            print("Expected a value for x", file=sys.stderr)
            return 1
        x = _parse_double(values[0])
    elif math.isnan(y):
        if not values:
            print("Expected a value for y", file=sys.stderr)
            return 1
        y = _parse_double(values[0])

    mode = get_mode(args.flag("mode"))
    power = args.flag("power")
    round_result = args.flag("round")
    verbose = args.flag("verbose")

    if verbose:
        print(f"VERBOSE MODE\nPerforming {x:f} {mode.value} {y:f}")
        if power != 1:
            print(f"Then raising by the power of {power}")
        if round_result:
            print("Then rounding.")

    result = _operate(x, y, mode)
    if verbose and (power != 1 or round_result):
        print(f"Operation result (before power/round): {result:f}\nTotal result: ", end="")

    result = _round_half_away(_power(result, power))
    print(f"{result:f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())