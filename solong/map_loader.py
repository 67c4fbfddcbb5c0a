"""Loading a .ber map file into a grid of tiles."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Union

from .line_reader import LineReader

MAP_EXTENSION = ".ber"

PathLike = Union[str, "os.PathLike[str]"]


class MapLoadError(Exception):
    """The map file could not be read."""


@dataclass
class GameMap:
    """A map as a grid of one-character tiles, indexed ``grid[y][x]``."""

    grid: list[list[str]]
    width: int
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.height = len(self.grid)

    @property
    def lines(self) -> list[str]:
        """The rows of the map as strings."""
        return ["".join(row) for row in self.grid]

    def find(self, char: str) -> Optional[tuple[int, int]]:
        """Return ``(x, y)`` of the first ``char`` in row-major order, or None."""
        for y, row in enumerate(self.grid):
            for x, tile in enumerate(row[: self.width]):
                if tile == char:
                    return x, y
        return None

    def count(self, char: str) -> int:
        """Number of tiles equal to ``char`` within the map's width."""
        return sum(row[: self.width].count(char) for row in self.grid)


def line_width(line: Optional[str]) -> int:
    """Length of ``line`` without one trailing newline."""
    if not line:
        return 0
    return len(line) - 1 if line.endswith("\n") else len(line)


def has_ber_extension(path: PathLike) -> bool:
    """True if the text after the last dot of ``path`` is exactly ``.ber``."""
    text = os.fspath(path)
    dot = text.rfind(".")
    return dot != -1 and text[dot:] == MAP_EXTENSION


def load_map(path: PathLike) -> GameMap:
    """Read the map at ``path``; its width is that of the first line."""
    if not has_ber_extension(path):
        raise MapLoadError("Invalid file extension. Must be .ber")
    try:
        fd = os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise MapLoadError("Failed to open map file") from exc
    try:
        lines = list(LineReader(fd))
    except OSError as exc:
        raise MapLoadError("Failed to read map file") from exc
    finally:
        os.close(fd)
    if not lines:
        raise MapLoadError("Map file is empty")
    grid = [list(line[: line_width(line)]) for line in lines]
    return GameMap(grid=grid, width=line_width(lines[0]))