"""Reading a text stream one line at a time."""

from __future__ import annotations

from typing import Iterator, TextIO

BUFFER_SIZE = 4096


class LineReader:
    """Reads lines, without their newline, from a text stream.

    Reading stops at the end of the stream or at the first empty line;
    an empty line also discards whatever had been read ahead of it.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        while "\n" not in self._buffer:
            chunk = self._stream.read(BUFFER_SIZE)
            if not chunk:
                return
            self._buffer += chunk

    def read_line(self) -> str | None:
        """Return the next line, or None when no more lines are available."""
        self._fill()
        line, newline, rest = self._buffer.partition("\n")
        if not line:
            self._buffer = ""
            return None
        self._buffer = rest if newline else ""
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream`` as ``LineReader`` reads them."""
    yield from LineReader(stream)