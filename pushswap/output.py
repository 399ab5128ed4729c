"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

from typing import TextIO

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write a single character."""
    stream.write(c[:1])


def putstr_fd(s: str | None, stream: TextIO) -> None:
    """Write a string; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: str | None, stream: TextIO) -> None:
    """Write a string followed by a newline; a missing string writes nothing."""
    if s is None:
        return
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal text of an integer."""
    stream.write(str(n))