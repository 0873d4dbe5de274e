"""Map tiles: the cells of the world grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import pygame

WHITE = (255, 255, 255)
BLUE = (0, 0, 255)


class TileType(Enum):
    """Kinds of map cell; the values match the codes used in map layouts."""

    NONE = 0
    BRICK = 1
    SPAWN = 2


@dataclass
class Tile:
    """A single grid cell with a position, a size and a fill colour."""

    tile_type: TileType = TileType.NONE
    position: tuple[float, float] = (0.0, 0.0)
    size: tuple[float, float] = (0.0, 0.0)
    color: tuple[int, int, int] = WHITE

    def change_type(self, tile_type: TileType) -> None:
        """Set the tile's kind; bricks are painted blue."""
        self.tile_type = tile_type
        if tile_type is TileType.BRICK:
            self.color = BLUE

    def draw(self, surface: pygame.Surface) -> None:
        """Fill the tile's rectangle on the surface."""
        width, height = self.size
        if width <= 0 or height <= 0:
            return
        x, y = self.position
        pygame.draw.rect(surface, self.color, pygame.Rect(int(x), int(y), int(width), int(height)))