"""Reading text one line at a time from a stream."""

from __future__ import annotations

import os
from typing import Iterator, List, Optional, TextIO, Union

BUFFER_SIZE = 42


class LineReader:
    """Return the successive lines of a text stream, newline included.

    The stream is read in chunks of ``buffer_size`` characters. As with a
    NUL-terminated buffer, anything after a NUL character in a chunk is
    dropped.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self.buffer_size = buffer_size
        self._pending = ""

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while "\n" not in self._pending:
            chunk = self._stream.read(self.buffer_size)
            if not chunk:
                break
            self._pending += chunk.split("\0", 1)[0]
        if not self._pending:
            return None
        line, newline, rest = self._pending.partition("\n")
        self._pending = rest
        return line + newline

    def __iter__(self) -> Iterator[str]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(path: Union[str, "os.PathLike[str]"]) -> List[str]:
    """Return every line of the file at ``path``, each with its newline."""
    with open(path, encoding="latin-1", newline="") as stream:
        return list(LineReader(stream))