import pygame
import pytest

from raycaster2d.scene import Scene


@pytest.fixture
def scene():
    return Scene(800, 600, 200)


def test_initial_walls(scene):
    assert scene.offset == 4.0
    assert len(scene.walls) == 200
    assert all(wall.y == 300.0 and wall.height == 100.0 for wall in scene.walls)
    assert all(wall.color == (0, 255, 0) for wall in scene.walls)
    assert [wall.x for wall in scene.walls[:3]] == [0.0, 4.0, 8.0]


def test_offset_uses_whole_division():
    assert Scene(10, 10, 3).offset == 3.0


def test_render_centres_walls_and_clears_lengths(scene):
    scene.lengths = [50.0] * 200
    scene.render_scene()
    assert scene.lengths == []
    for wall in scene.walls:
        assert wall.y + wall.height / 2 == pytest.approx(300.0)
        assert wall.height == int(wall.height)


def test_nearer_walls_are_taller_and_brighter(scene):
    scene.lengths = [20.0, 80.0] + [50.0] * 198
    scene.render_scene()
    near, far = scene.walls[0], scene.walls[1]
    assert near.height > far.height
    assert near.color[1] > far.color[1]


@pytest.mark.parametrize("length", [200.0, 250.0, 1000.0])
def test_far_walls_are_dark(scene, length):
    scene.lengths = [length] * 200
    scene.render_scene()
    assert all(wall.color == (0, 0, 0) for wall in scene.walls)


def test_too_few_lengths_raises(scene):
    scene.lengths = [50.0] * 10
    with pytest.raises(IndexError):
        scene.render_scene()


def test_draw_paints_walls(scene):
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    scene.draw(surface)
    assert tuple(surface.get_at((1, 350)))[:3] == (0, 255, 0)
    assert tuple(surface.get_at((1, 100)))[:3] == (0, 0, 0)


def test_draw_clips_tall_walls(scene):
    scene.lengths = [0.5] * 200
    scene.render_scene()
    surface = pygame.Surface((800, 600))
    surface.fill((0, 0, 0))
    scene.draw(surface)
    assert surface.get_at((1, 0))[1] == scene.walls[0].color[1]
    assert surface.get_at((1, 599))[1] == scene.walls[0].color[1]