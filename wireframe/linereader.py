"""Reading a text stream one line at a time in fixed-size chunks."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, TextIO, Union

BUFFER_SIZE = 15


class LineReader:
    """Returns successive lines of ``stream``, each with its newline kept.

    Data is read ``buffer_size`` characters at a time; text read past the end
    of a line is held for the next call.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> Optional[str]:
        """The next line, ending in a newline unless it is the last; None at end."""
        line = self._pending
        self._pending = ""
        while "\n" not in line:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            line += chunk
        if not line:
            return None
        end = line.find("\n")
        if end < 0:
            return line
        self._pending = line[end + 1:]
        return line[: end + 1]

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Yield the lines of the file at ``path`` with their newlines kept."""
    with open(path, encoding="utf-8", newline="") as stream:
        yield from LineReader(stream)