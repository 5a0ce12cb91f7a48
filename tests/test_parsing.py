import pytest

from pushswap.parsing import (
    INT_MAX,
    INT_MIN,
    ParseError,
    atol,
    is_number,
    is_within_limits,
    parse_args,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  -7", -7),
        ("\t+13", 13),
        ("--5", -5),
        ("-+3", -3),
        ("abc", 0),
        ("12ab", 12),
    ],
)
def test_atol(text, expected):
    assert atol(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123", True),
        ("-123", True),
        ("+0", True),
        ("-", True),
        ("", False),
        ("1a", False),
        ("--1", False),
        (" 1", False),
    ],
)
def test_is_number(text, expected):
    assert is_number(text) is expected


def test_is_within_limits():
    assert is_within_limits(str(INT_MAX)) is True
    assert is_within_limits(str(INT_MIN)) is True
    assert is_within_limits(str(INT_MAX + 1)) is False
    assert is_within_limits(str(INT_MIN - 1)) is False


def test_parse_single_string_is_split():
    assert list(parse_args(["3 1  2"])) == [3, 1, 2]


def test_parse_many_arguments():
    assert list(parse_args(["5", "-4", "+3"])) == [5, -4, 3]


def test_parse_lone_sign_reads_as_zero():
    assert list(parse_args(["-", "1"])) == [0, 1]


def test_parse_blank_string_gives_empty_stack():
    assert len(parse_args(["   "])) == 0


@pytest.mark.parametrize(
    "args",
    [
        ["1", "1"],
        ["+0", "-0"],
        ["1 2 1"],
        ["1", "x"],
        ["1", ""],
        ["1", "2 3"],
        [str(INT_MAX + 1)],
        ["1", str(INT_MIN - 1)],
    ],
)
def test_parse_errors(args):
    with pytest.raises(ParseError):
        parse_args(args)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_args(["a b"])