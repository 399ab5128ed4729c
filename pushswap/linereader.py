"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["LineReader"]

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return lines from ``stream``, reading it ``buffer_size`` characters at a time.

    Works on text and binary streams alike; each line keeps its newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream has nothing left."""
        try:
            pending = self.stream.read(0) if self._pending is None else self._pending
            newline = b"\n" if isinstance(pending, bytes) else "\n"
            while newline not in pending:
                chunk = self.stream.read(self.buffer_size)
                if not chunk:
                    break
                pending += chunk
        except Exception:
            self._pending = None
            raise
        if not pending:
            self._pending = None
            return None
        end = pending.find(newline)
        if end < 0:
            self._pending = None
            return pending
        line, rest = pending[:end + 1], pending[end + 1:]
        self._pending = rest if rest else None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line