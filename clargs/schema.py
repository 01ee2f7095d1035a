"""Option definitions that make up a parsing schema."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

MAX_ONE_OF_CHOICES = 15

OptionValue = Union[bool, int, float, str, None]


class OptionType(enum.Enum):
    """Kinds of option a schema can declare."""

    HELP = "help"
    BOOLEAN = "boolean"
    STRING = "string"
    INT = "int"
    DOUBLE = "double"


@dataclass(frozen=True)
class Option:
    """A single option in a schema."""

    name: str
    type: OptionType
    description: str = ""
    abbr: str | None = None
    min_value: float = 0
    max_value: float = 0
    default: OptionValue = None
    optional: bool = False
    choices: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("option name must not be empty")
        if self.abbr is not None and len(self.abbr) != 1:
            raise ValueError(f"abbreviation for {self.name!r} must be a single character")
        if self.abbr == "-":
            raise ValueError("'-' cannot be used as an abbreviation")
        if len(self.choices) > MAX_ONE_OF_CHOICES:
            raise ValueError(
                f"option {self.name!r} has more than {MAX_ONE_OF_CHOICES} choices"
            )

    def has_range(self) -> bool:
        """Whether a numeric option restricts its value to a range."""
        if self.type not in (OptionType.INT, OptionType.DOUBLE):
            return False
        return self.min_value != 0 or self.max_value != 0


def help_option() -> Option:
    """The standard ``--help`` option."""
    return Option(
        name="help",
        type=OptionType.HELP,
        description="Display the help menu",
        default=False,
    )


def boolean_option(name: str, abbr: str | None, description: str) -> Option:
    """A flag that is either present (True) or absent (False)."""
    return Option(
        name=name, type=OptionType.BOOLEAN, description=description, abbr=abbr, default=False
    )


def int_option(
    name: str,
    abbr: str | None,
    description: str,
    min_value: int,
    max_value: int,
    default: int,
) -> Option:
    """An integer option; a range of 0..0 means unrestricted."""
    return Option(
        name=name,
        type=OptionType.INT,
        description=description,
        abbr=abbr,
        min_value=int(min_value),
        max_value=int(max_value),
        default=int(default),
    )


def double_option(
    name: str,
    abbr: str | None,
    description: str,
    min_value: float,
    max_value: float,
    default: float,
) -> Option:
    """A floating point option; a range of 0..0 means unrestricted."""
    return Option(
        name=name,
        type=OptionType.DOUBLE,
        description=description,
        abbr=abbr,
        min_value=float(min_value),
        max_value=float(max_value),
        default=float(default),
    )


def string_option(name: str, abbr: str | None, description: str, default: str | None) -> Option:
    """A string option that must be given a value."""
    return Option(
        name=name, type=OptionType.STRING, description=description, abbr=abbr, default=default
    )


def optional_option(name: str, abbr: str | None, description: str, default: str | None) -> Option:
    """A string option that may appear without a value."""
    return Option(
        name=name,
        type=OptionType.STRING,
        description=description,
        abbr=abbr,
        default=default,
        optional=True,
    )


def one_of_option(name: str, abbr: str | None, description: str, *args: str) -> Option:
    """A string option restricted to the given choices; the first is the default."""
    if not args:
        raise ValueError(f"option {name!r} needs at least one choice")
    return Option(
        name=name,
        type=OptionType.STRING,
        description=description,
        abbr=abbr,
        default=args[0],
        choices=tuple(args),
    )