"""The tile grid the player walks through."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from raycaster2d.tile import Tile, TileType

BLACK = (0, 0, 0)

DEFAULT_WIDTH = 32
DEFAULT_HEIGHT = 16
DEFAULT_CELL_SIZE = 8

DEFAULT_LAYOUT: tuple[int, ...] = (
    1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,
    1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,
    1,0,2,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,0,0,0,0,0,0,0,0,0,0,0,0,1,
    1,0,0,0,1,1,0,0,0,1,1,0,0,0,0,0,0,0,0,0,1,1,0,0,0,1,1,0,0,0,1,1,
    1,0,0,0,1,1,1,1,0,0,0,0,0,0,1,1,1,0,0,0,1,1,1,1,0,0,0,0,0,0,1,1,
    1,0,0,0,0,0,0,0,0,0,1,1,1,1,1,1,1,0,0,0,0,0,0,0,0,0,1,1,1,1,1,1,
    1,0,0,0,1,1,1,0,0,0,1,1,0,0,1,1,1,0,0,0,1,1,1,0,0,0,1,1,0,0,1,1,
    1,0,0,0,1,1,1,0,0,0,1,1,0,0,1,1,1,0,0,0,1,1,1,0,0,0,1,1,0,0,1,1,
    1,0,0,0,1,1,1,0,0,0,0,0,0,0,0,1,1,0,0,0,1,1,1,0,0,0,0,0,0,0,0,1,
    1,0,0,0,1,1,1,1,1,1,1,1,1,1,1,1,1,0,0,0,1,1,1,1,1,1,1,1,1,1,1,1,
    1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,
    1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,
    1,1,1,1,1,1,1,1,1,1,1,1,0,0,0,1,1,1,1,1,1,1,1,1,1,1,1,1,0,0,0,1,
    1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,
    1,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,0,1,
    1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,1,
)


class WorldMap:
    """A grid of tiles built from a layout of codes (0 empty, 1 brick, 2 spawn)."""

    def __init__(
        self,
        layout: Sequence[int] | None = None,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        cell_width: int = DEFAULT_CELL_SIZE,
        cell_height: int = DEFAULT_CELL_SIZE,
    ) -> None:
        self.layout = tuple(DEFAULT_LAYOUT if layout is None else layout)
        if len(self.layout) != width * height:
            raise ValueError(
                f"layout holds {len(self.layout)} cells, expected {width * height}"
            )
        self.width = width
        self.height = height
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.tiles: list[Tile] = []

    def generate(self) -> None:
        """Build the tile list from the layout."""
        self.tiles = [self._make_tile(index, code) for index, code in enumerate(self.layout)]

    def _make_tile(self, index: int, code: int) -> Tile:
        row, column = divmod(index, self.width)
        position = (float(column * self.cell_width), float(row * self.cell_height))
        tile = Tile()
        if code == 1:
            tile.position = position
            tile.size = (float(self.cell_width - 1), float(self.cell_height - 1))
            tile.change_type(TileType.BRICK)
        elif code == 2:
            tile.position = position
            tile.change_type(TileType.SPAWN)
        else:
            tile.change_type(TileType.NONE)
        return tile

    def tile_at(self, column: int, row: int) -> Tile:
        """Return the tile in the given grid cell."""
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(f"cell ({column}, {row}) is outside the map")
        return self.tiles[row * self.width + column]

    def spawn_position(self) -> tuple[float, float]:
        """Top-left corner of the first spawn tile, or the origin if there is none."""
        return next(
            (tile.position for tile in self.tiles if tile.tile_type is TileType.SPAWN),
            (0.0, 0.0),
        )

    def draw(self, surface: pygame.Surface) -> None:
        """Paint the background and every non-empty tile."""
        background = pygame.Rect(
            0, 0, self.width * self.cell_width, self.height * self.cell_height
        )
        pygame.draw.rect(surface, BLACK, background)
        for tile in self.tiles:
            if tile.tile_type is not TileType.NONE:
                tile.draw(surface)