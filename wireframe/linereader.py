"""Buffered line-by-line reading of text or byte streams."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

DEFAULT_BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Read lines from a stream in fixed-size chunks, keeping each newline.

    After every call to :meth:`read_line` the attribute ``eof`` tells
    whether the stream ran dry during that call: it is true when the
    returned line is the unterminated tail of the stream, or when there
    was nothing left to return.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stock: Optional[AnyStr] = None
        self.eof = False

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line with its newline, or None once the stream is exhausted."""
        self.eof = False
        searched = 0
        while True:
            if self._stock is not None:
                newline = "\n" if isinstance(self._stock, str) else b"\n"
                cut = self._stock.find(newline, searched)  # type: ignore[arg-type]
                if cut >= 0:
                    line = self._stock[:cut + 1]
                    self._stock = self._stock[cut + 1:]
                    return line
                searched = len(self._stock)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._stock = chunk if self._stock is None else self._stock + chunk
        self.eof = True
        rest, self._stock = self._stock, None
        return rest or None

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr]) -> List[AnyStr]:
    """All lines of ``stream``, each keeping its trailing newline."""
    return list(LineReader(stream))