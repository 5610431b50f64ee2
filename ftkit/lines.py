"""Read a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

__all__ = ["LineReader", "read_lines"]


class LineReader(Generic[AnyStr]):
    """Return successive lines of a stream, without their newline.

    The stream is read ``buffer_size`` units at a time. The text after the
    last newline is always returned as a final line, even when empty, so the
    lines produced equal the stream's content split on newlines.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 32) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None
        self._newline = "\n"
        self._done = False

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        if self._done:
            return None
        parts = []
        pending = self._pending
        self._pending = None
        while True:
            if pending:
                cut = pending.find(self._newline)
                if cut >= 0:
                    parts.append(pending[:cut])
                    self._pending = pending[cut + 1 :]
                    return self._newline[:0].join(parts)
                parts.append(pending)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._done = True
                return self._newline[:0].join(parts)
            if isinstance(chunk, (bytes, bytearray)):
                self._newline = b"\n"
                chunk = bytes(chunk)
            pending = chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = 32) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` as :class:`LineReader` produces them."""
    yield from LineReader(stream, buffer_size)