"""Checks that a loaded map is playable: shape, walls, elements and a path."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple, Optional

from .map_loader import GameMap

VALID_CHARS = frozenset("01PEC")

WALL = "1"
EMPTY = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"

MIN_SIDE = 3


class MapErrorCode(IntEnum):
    """Reasons a map is rejected."""

    OK = 0
    NO_PLAYER = 1
    MULTI_PLAYER = 2
    NO_EXIT = 3
    MULTI_EXIT = 4
    NO_COLLECT = 5
    INVALID_CHAR = 6
    NOT_RECTANGLE = 7
    NO_WALLS = 8
    MAP_TOO_SMALL = 9
    NO_PATH = 10
    MEMORY = 11


_MESSAGES = {
    MapErrorCode.NO_PLAYER: "Map must have exactly one starting point (P)",
    MapErrorCode.MULTI_PLAYER: "Map has multiple starting points",
    MapErrorCode.NO_EXIT: "Map must have exactly one exit (E)",
    MapErrorCode.MULTI_EXIT: "Map has multiple exits",
    MapErrorCode.NO_COLLECT: "Map must have at least one collectible (C)",
    MapErrorCode.INVALID_CHAR: "Map contains invalid character",
    MapErrorCode.NOT_RECTANGLE: "Map must be rectangular",
    MapErrorCode.NO_WALLS: "Map must be surrounded by walls",
    MapErrorCode.MAP_TOO_SMALL: "Map must be rectangular",
    MapErrorCode.MEMORY: "Memory allocation failed",
    MapErrorCode.NO_PATH: "Map has no valid path",
}


class MapValidationError(Exception):
    """The map breaks one of the rules; ``code`` tells which."""

    def __init__(self, code: MapErrorCode) -> None:
        self.code = MapErrorCode(code)
        super().__init__(error_message(self.code))


class ElementCounts(NamedTuple):
    """How many players, exits and collectibles a map holds."""

    players: int
    exits: int
    collectibles: int


def is_valid_char(c: str) -> bool:
    """True for the tiles a map may contain."""
    return c in VALID_CHARS


def error_message(code: int) -> str:
    """Human-readable text for an error code; empty for unknown codes and OK."""
    return _MESSAGES.get(code, "")


def _tiles(game_map: GameMap):
    """Yield ``(x, y, tile)`` for every tile within the map's width."""
    for y, row in enumerate(game_map.grid):
        for x, tile in enumerate(row[: game_map.width]):
            yield x, y, tile


def count_elements(game_map: GameMap) -> ElementCounts:
    """Count the players, exits and collectibles of the map."""
    return ElementCounts(
        game_map.count(PLAYER), game_map.count(EXIT), game_map.count(COLLECTIBLE)
    )


def validate_count(players: int, exits: int, collectibles: int) -> None:
    """Require exactly one player, exactly one exit and at least one collectible."""
    if players == 0:
        raise MapValidationError(MapErrorCode.NO_PLAYER)
    if players > 1:
        raise MapValidationError(MapErrorCode.MULTI_PLAYER)
    if exits == 0:
        raise MapValidationError(MapErrorCode.NO_EXIT)
    if exits > 1:
        raise MapValidationError(MapErrorCode.MULTI_EXIT)
    if collectibles == 0:
        raise MapValidationError(MapErrorCode.NO_COLLECT)


def check_rectangle(game_map: GameMap) -> None:
    """Require at least 3x3 tiles and every row as wide as the first."""
    if game_map.height < MIN_SIDE or game_map.width < MIN_SIDE:
        raise MapValidationError(MapErrorCode.MAP_TOO_SMALL)
    if any(len(row) != game_map.width for row in game_map.grid):
        raise MapValidationError(MapErrorCode.NOT_RECTANGLE)


def _tile_at(game_map: GameMap, x: int, y: int) -> Optional[str]:
    row = game_map.grid[y]
    return row[x] if x < len(row) else None


def check_walls(game_map: GameMap) -> None:
    """Require every tile on the border to be a wall."""
    last_x = game_map.width - 1
    last_y = game_map.height - 1
    for y in range(game_map.height):
        for x in range(game_map.width):
            on_border = y in (0, last_y) or x in (0, last_x)
            if on_border and _tile_at(game_map, x, y) != WALL:
                raise MapValidationError(MapErrorCode.NO_WALLS)


def check_elements(game_map: GameMap) -> None:
    """Require only known tiles and the right number of each element."""
    if not all(is_valid_char(tile) for _, _, tile in _tiles(game_map)):
        raise MapValidationError(MapErrorCode.INVALID_CHAR)
    validate_count(*count_elements(game_map))


def _reachable(game_map: GameMap, start: tuple[int, int]) -> set[tuple[int, int]]:
    """Tiles reachable from ``start`` without crossing walls or the exit."""
    seen: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if not (0 <= x < game_map.width and 0 <= y < game_map.height):
            continue
        if (x, y) in seen or _tile_at(game_map, x, y) in (WALL, EXIT):
            continue
        seen.add((x, y))
        pending.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return seen


def check_path(game_map: GameMap) -> None:
    """Require every collectible to be reachable from the player.

    The exit blocks movement while searching, as it does during play.
    """
    start = game_map.find(PLAYER)
    if start is None:
        raise MapValidationError(MapErrorCode.NO_PLAYER)
    reachable = _reachable(game_map, start)
    for x, y, tile in _tiles(game_map):
        if tile == COLLECTIBLE and (x, y) not in reachable:
            raise MapValidationError(MapErrorCode.NO_PATH)


def validate_map(game_map: GameMap) -> GameMap:
    """Run every check in order, raising on the first failure; return the map."""
    check_rectangle(game_map)
    check_walls(game_map)
    check_elements(game_map)
    check_path(game_map)
    return game_map