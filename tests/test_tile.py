import pygame
import pytest

from raycaster2d.tile import Tile, TileType


def test_new_tile_is_empty_and_white():
    tile = Tile()
    assert tile.tile_type is TileType.NONE
    assert tile.color == (255, 255, 255)


def test_brick_is_blue():
    tile = Tile()
    tile.change_type(TileType.BRICK)
    assert tile.tile_type is TileType.BRICK
    assert tile.color == (0, 0, 255)


@pytest.mark.parametrize("kind", [TileType.NONE, TileType.SPAWN])
def test_other_kinds_keep_colour(kind):
    tile = Tile()
    tile.change_type(kind)
    assert tile.tile_type is kind
    assert tile.color == Tile().color


def test_layout_codes_map_to_kinds():
    assert [TileType(code) for code in (0, 1, 2)] == [
        TileType.NONE,
        TileType.BRICK,
        TileType.SPAWN,
    ]


def test_draw_fills_rectangle():
    surface = pygame.Surface((10, 10))
    surface.fill((0, 0, 0))
    tile = Tile(position=(2.0, 2.0), size=(3.0, 3.0))
    tile.change_type(TileType.BRICK)
    tile.draw(surface)
    assert tuple(surface.get_at((3, 3)))[:3] == tile.color
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
    assert tuple(surface.get_at((6, 6)))[:3] == (0, 0, 0)


def test_draw_without_size_paints_nothing():
    surface = pygame.Surface((10, 10))
    surface.fill((0, 0, 0))
    tile = Tile(position=(2.0, 2.0))
    tile.change_type(TileType.SPAWN)
    tile.draw(surface)
    assert tuple(surface.get_at((2, 2)))[:3] == (0, 0, 0)