"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 10
FD_MAX = 1024
_ENCODING = "utf-8"


class LineReader:
    """Reads lines from a file descriptor in chunks of ``buffer_size`` bytes.

    Each line keeps its trailing newline; the last line of a file may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"invalid file descriptor {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._storage = b""

    def read_line(self) -> Optional[str]:
        """Return the next line, or None once the input is exhausted."""
        while b"\n" not in self._storage:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._storage = b""
                raise
            if not chunk:
                break
            self._storage += chunk
        if not self._storage:
            return None
        newline = self._storage.find(b"\n")
        if newline == -1:
            line, self._storage = self._storage, b""
        else:
            line = self._storage[: newline + 1]
            self._storage = self._storage[newline + 1 :]
        return line.decode(_ENCODING, errors="replace")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[str]:
    """Return the next line of ``fd``, keeping separate state for each descriptor.

    Returns None at end of input, after which the descriptor's state is dropped.
    """
    if fd < 0 or fd >= FD_MAX:
        raise ValueError(f"file descriptor {fd} out of range 0..{FD_MAX - 1}")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line


def read_lines(fd: int) -> Iterator[str]:
    """Yield every remaining line of ``fd``."""
    yield from LineReader(fd)