"""Conversions between decimal text and integers, with fixed-width integer semantics."""

from __future__ import annotations

__all__ = ["atoi", "atol", "itoa"]

_INT_MAX = 2_147_483_647
_WHITESPACE = frozenset(" \t\n\v\f\r")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed integer of the given width."""
    modulus = 1 << bits
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def _scan(text: str) -> tuple[int, str]:
    """Skip leading whitespace and an optional sign; return the sign and the rest."""
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    return sign, rest


def _leading_digits(text: str) -> str:
    digits = []
    for char in text:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return "".join(digits)


def atoi(text: str) -> int:
    """Read a leading decimal integer as a 32-bit int.

    Leading whitespace and one sign are accepted and reading stops at the first
    non-digit. If the magnitude already exceeds the int range before another
    digit is added, -1 is returned; otherwise the result wraps to 32 bits.
    """
    sign, rest = _scan(text)
    result = 0
    for char in _leading_digits(rest):
        if result > _INT_MAX:
            return -1
        result = result * 10 + (ord(char) - ord("0"))
    return _wrap(result * sign, 32)


def atol(text: str) -> int:
    """Read a leading decimal integer as a 64-bit integer, wrapping on overflow."""
    sign, rest = _scan(text)
    result = 0
    for char in _leading_digits(rest):
        result = _wrap(result * 10 + (ord(char) - ord("0")), 64)
    return _wrap(result * sign, 64)


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)