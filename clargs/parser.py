"""Command-line argument parsing against an optional schema."""

from __future__ import annotations

import math
import re
from collections import deque
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from clargs.helptext import default_help
from clargs.schema import Option, OptionType, OptionValue

ErrorHandler = Callable[[str, str], None]
HelpHandler = Callable[[Sequence[Option], str], bool]

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)
_LONG_MIN = -(1 << 63)
_LONG_MAX = (1 << 63) - 1
_C_SPACE = " \t\n\v\f\r"
_BASE_PREFIXES = {"x": 16, "X": 16, "b": 2, "B": 2, "o": 8, "O": 8}

_FLOAT_RE = re.compile(
    r"""
    [\ \t\n\v\f\r]*
    (?P<number>[+-]?(?:
        0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?
      | (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    ))
    """,
    re.VERBOSE | re.IGNORECASE,
)


class ArgumentError(Exception):
    """Raised when a command-line argument does not fit the schema."""

    def __init__(self, flag: str, message: str) -> None:
        super().__init__(f"{flag}: {message}")
        self.flag = flag
        self.message = message


def raise_error(flag: str, message: str) -> None:
    """Default error handler: raise an ArgumentError."""
    raise ArgumentError(flag, message)


@dataclass
class Args:
    """The result of parsing: program path, options and plain values."""

    path: str = ""
    options: list[tuple[str, OptionValue]] = field(default_factory=list)
    values: list[str] = field(default_factory=list)

    def flag(self, name: str) -> OptionValue:
        """Value of the first option called ``name``, or None when absent."""
        return next((value for flag, value in self.options if flag == name), None)


def _wrap_int32(value: int) -> int:
    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def _leading_int(text: str, base: int) -> int:
    """Parse the longest integer prefix of ``text`` the way strtol does."""
    text = text.lstrip(_C_SPACE)
    negative = False
    if text and text[0] in "+-":
        negative = text[0] == "-"
        text = text[1:]
    if base == 16 and text[:2] in ("0x", "0X") and len(text) > 2 and text[2] in "0123456789abcdefABCDEF":
        text = text[2:]
    digits = []
    for char in text:
        if not (char.isascii() and char.isalnum()) or int(char, 36) >= base:
            break
        digits.append(char)
    value = int("".join(digits), base) if digits else 0
    if negative:
        value = -value
    return max(_LONG_MIN, min(_LONG_MAX, value))


def parse_int(text: str) -> int:
    """Parse a signed 32-bit integer with optional 0x, 0b or 0o prefix.

    Trailing garbage is ignored and a missing number reads as 0.
    """
    sign = 1
    if text.startswith("-"):
        sign = -1
        text = text[1:]
    base = 10
    if text[:1] == "0" and text[1:2] in _BASE_PREFIXES:
        base = _BASE_PREFIXES[text[1:2]]
        text = text[2:]
    return _wrap_int32(_wrap_int32(_leading_int(text, base)) * sign)


def _parse_double(text: str) -> float:
    """Parse the longest floating point prefix of ``text``; 0.0 when none."""
    match = _FLOAT_RE.match(text)
    if not match:
        return 0.0
    number = match.group("number")
    body = number.lstrip("+-").lower()
    negative = number.startswith("-")
    if body.startswith("nan"):
        return math.copysign(math.nan, -1.0 if negative else 1.0)
    if body.startswith("0x"):
        try:
            return float.fromhex(number)
        except OverflowError:
            return -math.inf if negative else math.inf
    return float(number)


def _initial_value(option: Option) -> OptionValue:
    if option.type in (OptionType.HELP, OptionType.BOOLEAN):
        return False
    if option.type is OptionType.STRING and option.choices:
        return option.choices[0]
    return option.default


def _take_value(pending: deque[str]) -> str:
    """Consume the next argument as a value unless it is a long flag."""
    if pending and not pending[0].startswith("--"):
        return pending.popleft()
    return ""


class Parser:
    """Parses argument vectors, with or without a schema."""

    def __init__(
        self,
        schema: Iterable[Option] | None = None,
        on_error: ErrorHandler | None = None,
        on_help: HelpHandler | None = None,
    ) -> None:
        self.schema = None if schema is None else tuple(schema)
        self.on_error = on_error or raise_error
        self.on_help = on_help or default_help

    def parse(self, argv: Iterable[str]) -> Args:
        """Parse ``argv``, whose first item is the program path."""
        arguments = list(argv)
        args = Args(path=arguments[0] if arguments else "")
        if self.schema is not None:
            args.options = [(option.name, _initial_value(option)) for option in self.schema]

        pending = deque(arguments[1:])
        while pending:
            arg = pending.popleft()
            if not self._is_flag(arg):
                args.values.append(arg)
            elif self.schema is None:
                args.options.append((arg[2:], _take_value(pending)))
            elif arg[1] != "-" and len(arg) > 2:
                self._set_grouped(arg[1:], args)
            else:
                index = self._find(arg)
                if index is None:
                    self.on_error(arg, "Unknown option")
                else:
                    self._apply(index, pending, args)
        return args

    def _is_flag(self, arg: str) -> bool:
        return len(arg) > 1 and arg[0] == "-" and (self.schema is not None or arg[1] == "-")

    def _find(self, arg: str) -> int | None:
        assert self.schema is not None
        if arg[1] != "-":
            matches = (i for i, option in enumerate(self.schema) if option.abbr == arg[1])
        else:
            name = arg[2:]
            matches = (i for i, option in enumerate(self.schema) if option.name == name)
        return next(matches, None)

    def _set_grouped(self, letters: str, args: Args) -> None:
        assert self.schema is not None
        for letter in letters:
            for index, option in enumerate(self.schema):
                if option.abbr != letter:
                    continue
                if option.type is not OptionType.BOOLEAN:
                    self.on_error(letter, "Grouped flag not a boolean option")
                    continue
                args.options[index] = (option.name, True)
                break

    def _apply(self, index: int, pending: deque[str], args: Args) -> None:
        assert self.schema is not None
        option = self.schema[index]
        value: OptionValue

        if option.type is OptionType.HELP:
            if self.on_help(self.schema, args.path):
                raise SystemExit(0)
            return
        if option.type is OptionType.BOOLEAN:
            value = True
        elif option.type is OptionType.STRING:
            text = _take_value(pending)
            if not text and not option.optional:
                self.on_error(option.name, "Expected value after flag")
                return
            if option.choices and text not in option.choices:
                self.on_error(option.name, "invalid option")
                return
            value = text
        elif option.type is OptionType.INT:
            text = _take_value(pending)
            if not text:
                self.on_error(option.name, "Expected value after flag")
                return
            value = parse_int(text)
            if option.has_range() and not option.min_value <= value <= option.max_value:
                self.on_error(option.name, "Value out of range")
                return
        else:
            text = _take_value(pending)
            if not text:
                self.on_error(option.name, "Expected value after flag")
                return
            value = _parse_double(text)
            if not math.isfinite(value):
                self.on_error(option.name, "Invalid value")
                return
            if option.has_range() and not option.min_value <= value <= option.max_value:
                self.on_error(option.name, "Value out of range")
                return
        args.options[index] = (option.name, value)


def parse(
    argv: Iterable[str],
    schema: Iterable[Option] | None = None,
    on_error: ErrorHandler | None = None,
    on_help: HelpHandler | None = None,
) -> Args:
    """Parse ``argv`` against ``schema`` (or freely when it is None)."""
    return Parser(schema, on_error, on_help).parse(argv)