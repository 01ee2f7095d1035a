"""Rendering of the help menu for a schema."""

from __future__ import annotations

from collections.abc import Sequence

from clargs.schema import Option, OptionType


def value_hint(option: Option) -> str:
    """The hint shown after a flag name describing the value it takes."""
    if option.type is OptionType.STRING:
        if option.choices:
            return " (" + "/".join(option.choices) + ")"
        if option.optional:
            return " [value]"
        return " (value)"
    if option.type is OptionType.INT:
        if option.has_range():
            return f" ({int(option.min_value)}..{int(option.max_value)})"
        return " (int)"
    if option.type is OptionType.DOUBLE:
        if option.has_range():
            return f" ({option.min_value:.2f}..{option.max_value:.2f})"
        return " (num)"
    return ""


def format_help(schema: Sequence[Option], progname: str | None) -> str:
    """Build the help menu text; the usage line is included only with a program name."""
    entries = [(option, option.name + value_hint(option)) for option in schema]
    width = max((len(label) + 1 for _, label in entries), default=0)

    lines = []
    if progname:
        lines.append(f"Usage: {progname} [values] [options]")
        lines.append("")
    lines.append("Options:")
    for option, label in entries:
        prefix = f" -{option.abbr}, " if option.abbr else "     "
        padding = " " * (width - len(label))
        lines.append(f"{prefix}--{label}{padding}{option.description}")
    return "\n".join(lines) + "\n"


def default_help(schema: Sequence[Option], progname: str | None) -> bool:
    """Print the help menu to standard output; returns True to request exit."""
    print(format_help(schema, progname), end="")
    return True