import pytest

from pushswap.parsing import (
    ParseError,
    check_duplicates,
    join_arguments,
    parse_arguments,
    parse_int,
)


@pytest.mark.parametrize(
    "word, expected",
    [
        ("42", 42),
        ("-7", -7),
        ("+5", 5),
        ("0", 0),
        ("007", 7),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_accepts(word, expected):
    assert parse_int(word) == expected


@pytest.mark.parametrize(
    "word",
    ["", "-", "+", "1a", "a1", " 1", "--1", "+-1", "1.5", "2147483648", "-2147483649", "1\t"],
)
def test_parse_int_rejects(word):
    with pytest.raises(ParseError):
        parse_int(word)


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_int("x")


def test_join_arguments_uses_single_spaces():
    assert join_arguments(["1 2", "3"]) == "1 2 3"


def test_join_arguments_rejects_empty_argument():
    with pytest.raises(ParseError):
        join_arguments(["1", ""])


def test_check_duplicates_returns_distinct_values():
    assert check_duplicates([3, 1, 2]) == [3, 1, 2]


def test_check_duplicates_raises():
    with pytest.raises(ParseError):
        check_duplicates([1, 2, 1])


def test_parse_arguments_mixes_quoted_and_separate():
    assert parse_arguments(["3 2", "1", "-4"]) == [3, 2, 1, -4]


def test_parse_arguments_ignores_extra_spaces():
    assert parse_arguments(["  5   6 "]) == [5, 6]


@pytest.mark.parametrize(
    "args",
    [[], ["   "], ["1", ""], ["1 2 1"], ["1", "1"], ["1 two"], ["99999999999"]],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(ParseError):
        parse_arguments(args)