"""Byte-buffer filling, copying, searching and bounded string copies."""

from __future__ import annotations

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
    "strlcpy",
    "strlcat",
]


def _check_count(count: int, *buffers: bytes | bytearray) -> None:
    if count < 0:
        raise ValueError("count must not be negative")
    if any(count > len(buffer) for buffer in buffers):
        raise ValueError("count exceeds the buffer length")


def _strlen(data: bytes | bytearray) -> int:
    """Length up to the first NUL byte, or the whole buffer if there is none."""
    position = data.find(0)
    return len(data) if position < 0 else position


def memset(buffer: bytearray, value: int, count: int) -> bytearray:
    """Set the first ``count`` bytes to ``value`` taken modulo 256."""
    _check_count(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: bytearray, count: int) -> None:
    """Zero the first ``count`` bytes."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` items of ``size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dest: bytearray, src: bytes | bytearray, count: int) -> bytearray:
    """Copy ``count`` bytes from ``src`` to the start of ``dest``."""
    _check_count(count, dest, src)
    dest[:count] = bytes(src[:count])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, count: int) -> bytearray:
    """Copy ``count`` bytes inside ``buffer`` from offset ``src`` to ``dest``; overlap is safe."""
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if count < 0:
        raise ValueError("count must not be negative")
    if dest + count > len(buffer) or src + count > len(buffer):
        raise ValueError("range exceeds the buffer length")
    if count and dest != src:
        buffer[dest:dest + count] = bytes(buffer[src:src + count])
    return buffer


def memchr(data: bytes | bytearray, value: int, count: int) -> int | None:
    """Position of the first byte equal to ``value`` among the first ``count``."""
    _check_count(count, data)
    position = data.find(value & 0xFF, 0, count)
    return position if position >= 0 else None


def memcmp(a: bytes | bytearray, b: bytes | bytearray, count: int) -> int:
    """Difference of the first unequal bytes within ``count``, or 0."""
    _check_count(count, a, b)
    for first, second in zip(a[:count], b[:count]):
        if first != second:
            return first - second
    return 0


def strlcpy(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dest`` keeping at most ``size - 1`` bytes plus a NUL.

    Returns the length of ``src``, so a result of ``size`` or more means truncation.
    """
    src_len = _strlen(src)
    if size <= 0:
        return src_len
    if size > len(dest):
        raise ValueError("size exceeds the destination length")
    copied = min(src_len, size - 1)
    dest[:copied] = bytes(src[:copied])
    dest[copied] = 0
    return src_len


def strlcat(dest: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the string in ``dest`` within a total of ``size`` bytes.

    Returns the length of the string it tried to build; if ``size`` does not
    exceed the current length, nothing is written and ``size + len(src)`` is returned.
    """
    dest_len = _strlen(dest)
    src_len = _strlen(src)
    if size <= 0 or size <= dest_len:
        return size + src_len
    if size > len(dest):
        raise ValueError("size exceeds the destination length")
    copied = min(src_len, size - 1 - dest_len)
    dest[dest_len:dest_len + copied] = bytes(src[:copied])
    dest[dest_len + copied] = 0
    return dest_len + src_len