"""A pygame window that draws a map with one sprite per tile."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

import pygame

from .map_loader import GameMap

SPRITE_SIZE = 40
WINDOW_TITLE = "so_long"
DEFAULT_ASSET_DIR = Path("asset")

# Loaded in this order; the first missing one stops initialisation.
TEXTURE_FILES = {
    "player": "player.xpm",
    "wall": "wall.xpm",
    "exit": "exit.xpm",
    "floor": "floor.xpm",
    "collect": "collect.xpm",
}

_SPRITES = {"1": "wall", "C": "collect", "E": "exit", "P": "player"}


class GraphicsError(Exception):
    """The window or a texture could not be set up, or the renderer is closed."""


def sprite_for(tile: str) -> Optional[str]:
    """Name of the texture drawn over the floor for ``tile``, or None for bare floor."""
    return _SPRITES.get(tile)


class Renderer:
    """Owns the game window and its textures."""

    def __init__(
        self,
        game_map: GameMap,
        asset_dir: Union[str, "os.PathLike[str]"] = DEFAULT_ASSET_DIR,
    ) -> None:
        self.width = game_map.width * SPRITE_SIZE
        self.height = game_map.height * SPRITE_SIZE
        self.textures: dict[str, pygame.Surface] = {}
        self._screen: Optional[pygame.Surface] = None
        try:
            pygame.display.init()
            self._screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(WINDOW_TITLE)
        except pygame.error as exc:
            self.close()
            raise GraphicsError("Failed to create window") from exc
        base = Path(asset_dir)
        for name, filename in TEXTURE_FILES.items():
            try:
                self.textures[name] = pygame.image.load(os.fspath(base / filename))
            except (pygame.error, OSError) as exc:
                self.close()
                raise GraphicsError("Failed to load texture") from exc

    @property
    def closed(self) -> bool:
        """True once the window has been closed."""
        return self._screen is None

    @property
    def surface(self) -> pygame.Surface:
        """The window's drawing surface."""
        if self._screen is None:
            raise GraphicsError("renderer is closed")
        return self._screen

    def render(self, game_map: GameMap) -> None:
        """Draw every tile of ``game_map``: floor first, then the tile's sprite."""
        screen = self.surface
        floor = self.textures["floor"]
        for y, row in enumerate(game_map.grid):
            for x, tile in enumerate(row[: game_map.width]):
                position = (x * SPRITE_SIZE, y * SPRITE_SIZE)
                screen.blit(floor, position)
                name = sprite_for(tile)
                if name is not None:
                    screen.blit(self.textures[name], position)
        pygame.display.flip()

    def close(self) -> None:
        """Release the textures and the window. Safe to call more than once."""
        self.textures.clear()
        self._screen = None
        if pygame.display.get_init():
            pygame.display.quit()

    def __enter__(self) -> "Renderer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()