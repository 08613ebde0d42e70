"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

BUFFER_SIZE = 1024
_MAX_BUFFER_SIZE = 2**31 - 2


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading ``buffer_size`` at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0 or buffer_size > _MAX_BUFFER_SIZE:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        """Read chunks until the buffer holds a newline or the stream ends."""
        while self._buffer is None or self._newline(self._buffer) not in self._buffer:
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                return
            self._buffer = chunk if self._buffer is None else self._buffer + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        buffer = self._buffer
        if not buffer:
            self._buffer = None
            return None
        end = buffer.find(self._newline(buffer))
        if end < 0:
            self._buffer = None
            return buffer
        self._buffer = buffer[end + 1:]
        return buffer[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` in order, newlines included."""
    yield from LineReader(stream, buffer_size)