"""Example command that parses arguments without a schema."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from clargs.parser import Args, parse


def describe(args: Args) -> str:
    """Report on ``--main`` and list every option and value."""
    main_value = args.flag("main")
    if main_value is None:
        lines = ["--main not passed"]
    elif main_value:
        lines = [f"value of --main: {main_value}"]
    else:
        lines = ["value of --main not set"]

    lines.append("===All Options:===")
    lines.extend(
        f"{flag}: {value}" if value else f"{flag} (no value)" for flag, value in args.options
    )
    lines.append("===All Values: ===")
    lines.extend(args.values)
    return "\n".join(lines) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    argv = sys.argv if argv is None else argv
    print(describe(parse(argv)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())