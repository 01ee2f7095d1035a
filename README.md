# clargs

clargs is a small command-line argument parser. You can describe your
options once as a schema. You can also parse with no schema and collect
whatever `--flag value` pairs the user passed.

## Schema parsing

```python
from clargs.schema import boolean_option, int_option, one_of_option, help_option
from clargs.parser import parse

schema = [
    boolean_option("verbose", "v", "enable verbose output"),
    one_of_option("mode", None, "Operation to perform", "add", "sub"),
    int_option("power", "p", "Power to raise to", 0, 10, 1),
    help_option(),
]

args = parse(["prog", "-v", "--mode", "sub", "-p", "3", "extra"], schema)
args.flag("verbose")   # True
args.flag("mode")      # "sub"
args.flag("power")     # 3
args.values            # ["extra"]
```

`clargs.schema` provides these option builders:

- `help_option()`
- `boolean_option()`
- `int_option()`
- `double_option()`
- `string_option()`
- `optional_option()`
- `one_of_option()`

Each one returns a frozen `Option`.

Parsing follows these rules:

- The first item of `argv` is taken as the program path (`args.path`).
- Every schema option starts with a value. Booleans start as `False`.
  A one-of option starts with its first choice. Any other option starts
  with its default.
- Short boolean flags can be grouped, as in `-vr`.
- An option that takes a value uses the next argument, unless that
  argument starts with `--`.
- Integers accept the `0x`, `0b` and `0o` prefixes and a leading `-`.
  Trailing garbage is ignored. Values wrap to a signed 32-bit integer.
- A range of `0, 0` means "no range".
- `--help` calls the help handler. The default handler prints the option
  table and returns `True`, which makes the parser raise `SystemExit(0)`.

## Errors and callbacks

`parse(argv, schema, on_error, on_help)` and `Parser(schema, on_error, on_help)`
take two optional callbacks:

- `on_error(flag, message)`: the default, `raise_error`, raises
  `ArgumentError`. This error has `.flag` and `.message` attributes. A
  handler that returns normally makes the parser skip the bad argument
  and carry on.
- `on_help(schema, progname)`: this returns `True` to exit after the help
  is shown. The default is `clargs.helptext.default_help`.
  `clargs.helptext.format_help(schema, progname)` returns the same text
  as a string.

## Parsing without a schema

```python
from clargs.parser import parse

args = parse(["prog", "--main", "value", "loose"])
args.flag("main")      # "value"
args.flag("missing")   # None
args.options           # [("main", "value")]
```

With no schema, only arguments that start with `--` are treated as flags.
A flag that has no following value gets the empty string.

## Example commands

Installing the package gives you two demo commands:

```
clargs-arithmetic 3 4 --mode mul -p 2
clargs-arithmetic --help
clargs-noschema --main hello --other stray
```

`clargs-arithmetic` does four things:

1. It applies `add`, `sub`, `mul` or `div` to x and y. You can give x and y
   as plain values or with `-x` and `-y`.
2. It raises the result to `--power`.
3. It always rounds the final value before printing it.
4. It prints the steps when given `-v`.

`clargs-noschema` reports on `--main` and lists every option and value it
received.