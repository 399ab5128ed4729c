"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

__all__ = ["format_address", "format_hex", "format_unsigned", "format_string", "printf"]

_SPECIFIERS = frozenset("cspdiuxX%")
_UINT_MASK = 0xFFFFFFFF
_ADDRESS_MASK = 0xFFFFFFFFFFFFFFFF


def _int32(n: int) -> int:
    n &= _UINT_MASK
    return n - (1 << 32) if n >= 1 << 31 else n


def format_address(address: int | None) -> str:
    """Render a pointer value as ``0x`` followed by lower-case hex; null is ``0x0``."""
    if not address:
        return "0x0"
    return "0x" + format(address & _ADDRESS_MASK, "x")


def format_hex(n: int, spec: str) -> str:
    """Render ``n`` as a 32-bit unsigned hex number; ``spec`` 'x' is lower case, anything else upper."""
    digits = format(n & _UINT_MASK, "x")
    return digits if spec == "x" else digits.upper()


def format_unsigned(n: int) -> str:
    """Render ``n`` as a 32-bit unsigned decimal number."""
    return str(n & _UINT_MASK)


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    arg = _next_arg(args)
    if spec == "c":
        if isinstance(arg, str):
            if len(arg) != 1:
                raise TypeError("%c requires a single character")
            return arg
        return chr(arg & 0xFF)
    if spec == "s":
        return "(null)" if arg is None else str(arg)
    if spec == "p":
        return format_address(arg)
    if spec in ("d", "i"):
        return str(_int32(arg))
    if spec == "u":
        return format_unsigned(arg)
    return format_hex(arg, spec)


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    A '%' followed by an unknown character is written as '%' and the
    character after it is dropped.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        if spec and spec in _SPECIFIERS:
            pieces.append(_convert(spec, remaining))
        else:
            pieces.append("%")
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the expanded format to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)