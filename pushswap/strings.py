"""String searching, slicing and transformation helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

__all__ = [
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

_NUL = "\0"


def _char(c: int | str) -> str:
    return chr(c) if isinstance(c, int) else c


def strchr(s: str, c: int | str) -> int | None:
    """Position of the first ``c`` in ``s``; the terminator matches at ``len(s)``."""
    char = _char(c)
    position = s.find(char)
    if position >= 0:
        return position
    if char == _NUL:
        return len(s)
    return None


def strrchr(s: str, c: int | str) -> int | None:
    """Position of the last ``c`` in ``s``; the terminator matches at ``len(s)``."""
    char = _char(c)
    if char == _NUL:
        return len(s)
    position = s.rfind(char)
    return position if position >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    for position in range(n):
        first = ord(s1[position]) if position < len(s1) else 0
        second = ord(s2[position]) if position < len(s2) else 0
        if first == 0 and second == 0:
            break
        if first != second:
            return first - second
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Position of ``needle`` lying wholly within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    position = haystack.find(needle, 0, min(length, len(haystack)))
    return position if position >= 0 else None


def substr(s: str | None, start: int, length: int) -> str | None:
    """Up to ``length`` characters of ``s`` from ``start``; empty if start is past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; if one is missing, return the other."""
    if s1 is None:
        return s2
    if s2 is None:
        return s1
    return s1 + s2


def strtrim(s: str | None, chars: str | None) -> str | None:
    """Remove characters found in ``chars`` from both ends of ``s``."""
    if s is None or chars is None:
        return None
    return s.strip(chars)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the separator character, dropping empty words."""
    return [word for word in s.split(sep) if word]


def strmapi(s: str | None, func: Callable[[int, str], str]) -> str | None:
    """Build a new string from ``func(index, char)`` for each character."""
    if s is None:
        return None
    return "".join(func(position, char) for position, char in enumerate(s))


def striteri(
    s: MutableSequence[str] | None,
    func: Callable[[int, MutableSequence[str]], None],
) -> None:
    """Call ``func(index, s)`` for each position so it can change ``s`` in place."""
    if s is None:
        return
    for position in range(len(s)):
        func(position, s)