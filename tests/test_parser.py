import pytest

from clargs.parser import Args, ArgumentError, Parser, parse, parse_int, raise_error
from clargs.schema import (
    boolean_option,
    double_option,
    help_option,
    int_option,
    one_of_option,
    optional_option,
    string_option,
)

SCHEMA = [
    boolean_option("verbose", "v", "verbose"),
    boolean_option("round", "r", "round"),
    string_option("name", "n", "a name", "anon"),
    optional_option("tag", "t", "a tag", "none"),
    one_of_option("mode", None, "mode", "add", "sub"),
    int_option("count", "c", "count", 0, 0, 7),
    int_option("level", "l", "level", 1, 5, 3),
    double_option("ratio", "q", "ratio", 0, 0, 0.5),
    double_option("scale", "s", "scale", -1, 1, 0),
    help_option(),
]


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return False


def test_no_schema_values_and_path():
    args = parse(["prog", "a", "b"])
    assert args.path == "prog"
    assert args.values == ["a", "b"]
    assert args.options == []


def test_empty_argv():
    args = parse([], SCHEMA)
    assert args.path == ""
    assert args.values == []
    assert args.flag("verbose") is False


def test_no_schema_options_take_following_value():
    args = parse(["prog", "--main", "val", "--flag", "--other", "x"])
    assert args.options == [("main", "val"), ("flag", ""), ("other", "x")]
    assert args.values == []


def test_no_schema_single_dash_is_value():
    args = parse(["prog", "-x", "-", "--k", "-v"])
    assert args.values == ["-x", "-"]
    assert args.options == [("k", "-v")]


def test_flag_lookup_first_match_and_missing():
    args = parse(["prog", "--a", "1", "--a", "2"])
    assert args.flag("a") == "1"
    assert args.flag("b") is None
    assert len(args.options) == 2


def test_schema_defaults():
    args = parse(["prog"], SCHEMA)
    assert [name for name, _ in args.options] == [option.name for option in SCHEMA]
    assert args.flag("verbose") is False
    assert args.flag("name") == "anon"
    assert args.flag("tag") == "none"
    assert args.flag("mode") == "add"
    assert args.flag("count") == 7
    assert args.flag("ratio") == 0.5
    assert args.flag("help") is False


def test_boolean_long_and_short():
    args = parse(["prog", "--verbose", "-r"], SCHEMA)
    assert args.flag("verbose") is True
    assert args.flag("round") is True


def test_grouped_booleans():
    args = parse(["prog", "-vr", "file"], SCHEMA)
    assert args.flag("verbose") is True
    assert args.flag("round") is True
    assert args.values == ["file"]


def test_grouped_unknown_letters_ignored():
    args = parse(["prog", "-vz"], SCHEMA)
    assert args.flag("verbose") is True
    assert args.flag("round") is False


def test_grouped_non_boolean_reports_error():
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "-vc"], SCHEMA)
    assert info.value.flag == "c"
    assert info.value.message == "Grouped flag not a boolean option"


def test_unknown_option_raises():
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--nope"], SCHEMA)
    assert info.value.flag == "--nope"
    assert info.value.message == "Unknown option"


def test_double_dash_alone_is_unknown_with_schema():
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--"], SCHEMA)
    assert info.value.flag == "--"


def test_single_dash_is_value_with_schema():
    assert parse(["prog", "-"], SCHEMA).values == ["-"]


def test_error_callback_continues():
    recorder = Recorder()
    args = parse(["prog", "--nope", "-v", "--level", "9", "file"], SCHEMA, on_error=recorder)
    assert recorder.calls == [("--nope", "Unknown option"), ("level", "Value out of range")]
    assert args.flag("verbose") is True
    assert args.flag("level") == 3
    assert args.values == ["file"]


def test_string_value():
    assert parse(["prog", "--name", "bob"], SCHEMA).flag("name") == "bob"
    assert parse(["prog", "-n", "-x"], SCHEMA).flag("name") == "-x"


@pytest.mark.parametrize("argv", [["prog", "--name", "--verbose"], ["prog", "--name"]])
def test_string_missing_value(argv):
    with pytest.raises(ArgumentError) as info:
        parse(argv, SCHEMA)
    assert info.value.flag == "name"
    assert info.value.message == "Expected value after flag"


def test_optional_without_and_with_value():
    assert parse(["prog", "--tag"], SCHEMA).flag("tag") == ""
    assert parse(["prog", "-t", "blue"], SCHEMA).flag("tag") == "blue"


def test_one_of():
    assert parse(["prog", "--mode", "sub"], SCHEMA).flag("mode") == "sub"
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--mode", "mul"], SCHEMA)
    assert info.value.message == "invalid option"


@pytest.mark.parametrize("n", [0, 5, 255, 1000])
def test_int_prefixes(n):
    for text in (str(n), f"0x{n:x}", f"0X{n:X}", f"0b{n:b}", f"0o{n:o}"):
        assert parse(["prog", "--count", text], SCHEMA).flag("count") == n
    assert parse(["prog", "-c", f"-0x{n:x}"], SCHEMA).flag("count") == -n


def test_int_range():
    assert parse(["prog", "--level", "5"], SCHEMA).flag("level") == 5
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--level", "0"], SCHEMA)
    assert info.value.message == "Value out of range"


def test_int_missing_value():
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--count", "--verbose"], SCHEMA)
    assert info.value.message == "Expected value after flag"


def test_double_values():
    assert parse(["prog", "--ratio", "2.25"], SCHEMA).flag("ratio") == 2.25
    assert parse(["prog", "-s", "-0.5"], SCHEMA).flag("scale") == -0.5


@pytest.mark.parametrize("text", ["inf", "nan", "-INFINITY", "1e999"])
def test_double_not_finite(text):
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--ratio", text], SCHEMA)
    assert info.value.message == "Invalid value"


def test_double_out_of_range_and_empty():
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--scale", "1.5"], SCHEMA)
    assert info.value.message == "Value out of range"
    with pytest.raises(ArgumentError) as info:
        parse(["prog", "--ratio", ""], SCHEMA)
    assert info.value.message == "Expected value after flag"


def test_help_callback_returning_false_continues():
    recorder = Recorder()
    args = parse(["prog", "--help", "x"], SCHEMA, on_help=recorder)
    assert len(recorder.calls) == 1
    schema, progname = recorder.calls[0]
    assert list(schema) == SCHEMA
    assert progname == "prog"
    assert args.values == ["x"]


def test_help_callback_returning_true_exits():
    with pytest.raises(SystemExit) as info:
        parse(["prog", "--help"], SCHEMA, on_help=lambda schema, progname: True)
    assert info.value.code == 0


def test_default_help_prints_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        parse(["prog", "--help"], SCHEMA)
    assert info.value.code == 0
    assert capsys.readouterr().out.startswith("Usage: prog [values] [options]\n\nOptions:\n")


def test_parser_is_reusable():
    parser = Parser(SCHEMA)
    first = parser.parse(["prog", "-v"])
    second = parser.parse(["prog"])
    assert first.flag("verbose") is True
    assert second.flag("verbose") is False


def test_args_flag_on_plain_args():
    args = Args(path="p", options=[("k", "v")], values=[])
    assert args.flag("k") == "v"


@pytest.mark.parametrize("n", [0, 1, 42, 65535, 2**31 - 1])
def test_parse_int_round_trips(n):
    assert parse_int(str(n)) == n
    assert parse_int(hex(n)) == n
    assert parse_int(bin(n)) == n
    assert parse_int(oct(n)) == n
    assert parse_int(f"-{n}") == -n


def test_parse_int_lenient():
    assert parse_int("12abc") == 12
    assert parse_int("  42") == 42
    assert parse_int("xyz") == 0


def test_parse_int_wraps_to_32_bits():
    assert parse_int(str(2**31)) == -(2**31)


def test_raise_error():
    with pytest.raises(ArgumentError) as info:
        raise_error("level", "Value out of range")
    assert str(info.value) == "level: Value out of range"