"""Turning command-line arguments into the list of integers to sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .chars import isdigit
from .numbers import atol
from .strings import split

__all__ = ["ParseError", "join_arguments", "parse_int", "check_duplicates", "parse_arguments"]

_INT_MIN = -2_147_483_648
_INT_MAX = 2_147_483_647


class ParseError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def join_arguments(args: Sequence[str]) -> str:
    """Join the arguments with single spaces; an empty argument is an error."""
    for arg in args:
        if not arg:
            raise ParseError("empty argument")
    return " ".join(args)


def parse_int(word: str) -> int:
    """Read a word made of an optional sign and decimal digits that fits a 32-bit int."""
    digits = word[1:] if word[:1] in ("+", "-") else word
    if not digits or not all(isdigit(char) for char in digits):
        raise ParseError(f"not an integer: {word!r}")
    number = atol(word)
    if not _INT_MIN <= number <= _INT_MAX:
        raise ParseError(f"out of range: {word!r}")
    return number


def check_duplicates(values: Iterable[int]) -> list[int]:
    """Return the values as a list, raising ParseError if any repeats."""
    values = list(values)
    if len(set(values)) != len(values):
        raise ParseError("duplicate value")
    return values


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Parse all arguments, each of which may hold several space-separated numbers."""
    words = split(join_arguments(args), " ")
    if not words:
        raise ParseError("no numbers given")
    return check_duplicates(parse_int(word) for word in words)