"""The game loop: input, movement, ray casting and drawing."""

from __future__ import annotations

import argparse
import math
from collections.abc import Sequence

import pygame

from raycaster2d.player import Player
from raycaster2d.ray import Ray
from raycaster2d.scene import Scene
from raycaster2d.tile import TileType
from raycaster2d.worldmap import WorldMap

_PI = 3.1415

MAX_RAY_DISTANCE = 500.0
WINDOW_TITLE = "Raycasting 2D"


def deg_to_rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * (_PI / 180)


def _cell_step(cell_size: float, along: float, across: float) -> float:
    """Distance travelled along the ray to cross one cell in one axis."""
    if along == 0:
        return math.inf
    ratio = across / along
    return cell_size * math.sqrt(1 + ratio * ratio)


class Engine:
    """Owns the world, the player and the projected view, and drives them."""

    def __init__(
        self,
        width: int = 800,
        height: int = 600,
        world: WorldMap | None = None,
        ray_amount: int = 200,
        ray_length: float = 1000.0,
        fps: float = 60.0,
    ) -> None:
        self.screen_width = width
        self.screen_height = height
        self.fps = fps
        self.time_per_frame = 1.0 / fps
        self.ray_amount = ray_amount
        self.ray_length = ray_length

        self.world = world if world is not None else WorldMap()
        self.world.generate()

        self.player = Player()
        spawn_x, spawn_y = self.world.spawn_position()
        self.player.position = (
            spawn_x + 0.5 * self.world.cell_width,
            spawn_y + 0.5 * self.world.cell_height,
        )

        self.scene = Scene(width, height, ray_amount)

        self.forward = False
        self.back = False
        self.left = False
        self.right = False
        self.running = True
        self._window: pygame.Surface | None = None

    def run(self) -> None:
        """Open the window and run the fixed-step loop until it is closed."""
        pygame.init()
        try:
            self._window = pygame.display.set_mode((self.screen_width, self.screen_height))
            pygame.display.set_caption(WINDOW_TITLE)
            self.create_rays(self.ray_amount)
            clock = pygame.time.Clock()
            elapsed = 0.0
            self.running = True
            while self.running:
                self._process_events()
                elapsed += clock.tick(self.fps) / 1000.0
                while elapsed > self.time_per_frame and self.running:
                    elapsed -= self.time_per_frame
                    self._process_events()
                    self.update(self.time_per_frame)
                if self.running:
                    self._render()
        finally:
            self._window = None
            pygame.quit()

    def update(self, delta_time: float) -> None:
        """Move the player for one step of delta_time seconds and recast the view."""
        heading = self.player.rotation
        speed = self.player.speed
        dx = dy = 0.0
        for active, offset in (
            (self.forward, 120),
            (self.back, -60),
            (self.left, 30),
            (self.right, -150),
        ):
            if active:
                angle = deg_to_rad(heading + offset)
                dx += speed * math.cos(angle)
                dy += -speed * -math.sin(angle)

        self.player.move((dx * delta_time, dy * delta_time))
        self.cast_rays()
        self.scene.render_scene()

    def _process_events(self) -> None:
        event = pygame.event.poll()
        if event.type != pygame.NOEVENT:
            self._dispatch(event)

    def _dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.KEYDOWN:
            self.handle_player_input(event.key, True)
        elif event.type == pygame.KEYUP:
            self.handle_player_input(event.key, False)
        elif event.type == pygame.MOUSEMOTION:
            self.rotate_player(event.pos[0])
        elif event.type == pygame.QUIT:
            self.running = False

    def handle_player_input(self, key: int, pressed: bool) -> None:
        """Update movement flags from a key press or release; Escape stops the loop."""
        if key == pygame.K_ESCAPE and pressed:
            self.running = False
        if key == pygame.K_w:
            self.forward = pressed
        if key == pygame.K_a:
            self.left = pressed
        if key == pygame.K_s:
            self.back = pressed
        if key == pygame.K_d:
            self.right = pressed

    def _render(self) -> None:
        window = self._window
        if window is None:
            return
        window.fill((0, 0, 0))
        self.scene.draw(window)
        self.world.draw(window)
        self.player.draw(window)
        pygame.display.flip()

    def rotate_player(self, mouse_x: float) -> None:
        """Turn the player according to the mouse's horizontal position."""
        self.player.set_rotation(mouse_x / 100.0)

    def create_rays(self, amount: int) -> None:
        """Fan out the given number of rays evenly across the player's field of view."""
        spacing = self.player.fov / amount
        for i in range(amount):
            ray = Ray(self.ray_length, self.player.position)
            ray.rotation = (spacing * i) % 360.0
            ray.primary_rotation = spacing * i
            self.player.rays.append(ray)

    def _ray_length(self, ray: Ray) -> float:
        world = self.world
        start_x, start_y = self.player.position
        dir_x = math.cos(deg_to_rad(ray.rotation + 90))
        dir_y = math.sin(deg_to_rad(ray.rotation + 90))
        cell_x = math.floor(start_x / world.cell_width)
        cell_y = math.floor(start_y / world.cell_height)
        step_size_x = _cell_step(world.cell_width, dir_x, dir_y)
        step_size_y = _cell_step(world.cell_height, dir_y, dir_x)

        if dir_x < 0:
            step_x = -1
            reach_x = (start_x / world.cell_width - cell_x) * step_size_x
        else:
            step_x = 1
            reach_x = (1 + cell_x - start_x / world.cell_width) * step_size_x
        if dir_y < 0:
            step_y = -1
            reach_y = (start_y / world.cell_height - cell_y) * step_size_y
        else:
            step_y = 1
            reach_y = (1 + cell_y - start_y / world.cell_height) * step_size_y

        length = 0.0
        while length < MAX_RAY_DISTANCE:
            if reach_x < reach_y:
                cell_x += step_x
                length = reach_x
                reach_x += step_size_x
            else:
                cell_y += step_y
                length = reach_y
                reach_y += step_size_y
            if 0 <= cell_x < world.width and 0 <= cell_y < world.height:
                kind = world.tile_at(int(cell_x), int(cell_y)).tile_type
                if kind not in (TileType.NONE, TileType.SPAWN):
                    break
        return length

    def cast_rays(self) -> None:
        """Find each ray's distance to the nearest wall and hand it to the scene."""
        for ray in self.player.rays:
            length = self._ray_length(ray)
            ray.set_length(length)
            self.scene.lengths.append(length)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game in a window of the requested size."""
    parser = argparse.ArgumentParser(description="A ray-cast first-person walk through a tile map.")
    parser.add_argument("--width", type=int, default=800, help="window width in pixels")
    parser.add_argument("--height", type=int, default=600, help="window height in pixels")
    args = parser.parse_args(argv)
    Engine(args.width, args.height).run()
    return 0