"""The projected first-person view: one wall strip per ray."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import pygame

_PI = 3.1415

GREEN = (0, 255, 0)


@dataclass
class Wall:
    """One vertical strip of the projected view."""

    x: float
    y: float
    width: float
    height: float
    color: tuple[int, int, int] = GREEN


def _round_half_away(value: float) -> float:
    if math.isinf(value):
        return value
    if value >= 0:
        return float(math.floor(value + 0.5))
    return -float(math.floor(-value + 0.5))


@dataclass
class Scene:
    """Turns ray lengths into shaded wall strips across the window."""

    window_width: int
    window_height: int
    ray_amount: int
    render_distance: float = 200.0
    fov_vertical: float = 51.0
    fov: float = 60.0
    lengths: list[float] = field(default_factory=list)
    walls: list[Wall] = field(init=False)
    offset: float = field(init=False)

    def __post_init__(self) -> None:
        self.offset = float(self.window_width // self.ray_amount)
        self.walls = [
            Wall(self.offset * i, float(self.window_height // 2), self.offset, 100.0)
            for i in range(self.ray_amount)
        ]

    def render_scene(self) -> None:
        """Size and shade each wall from the collected lengths, then clear them."""
        projection = 0.5 * 4 / math.tan((0.5 * self.fov_vertical) * (_PI / 180))
        half_width = math.floor(0.5 * self.window_width)
        for i, wall in enumerate(self.walls):
            length = self.lengths[i]
            ray_dir = self.fov * (half_width - i) / (self.window_width - 1)
            denominator = length * math.cos(ray_dir * (_PI / 180))
            raw = self.window_height * projection / denominator if denominator else math.inf
            height = _round_half_away(raw)

            wall.width = self.offset
            wall.height = height
            wall.x = self.offset * i
            wall.y = 0.5 * (self.window_height - height)

            shade = 0 if length > self.render_distance else int(
                255 * (1 - length / self.render_distance)
            )
            wall.color = (0, shade, 0)
        self.lengths.clear()

    def draw(self, surface: pygame.Surface) -> None:
        """Paint every wall strip, clipped to the surface."""
        surface_height = surface.get_height()
        for wall in self.walls:
            top = max(wall.y, 0.0)
            bottom = min(wall.y + wall.height, float(surface_height))
            if bottom <= top or wall.width <= 0:
                continue
            rect = pygame.Rect(int(wall.x), int(top), int(wall.width), int(bottom - top))
            pygame.draw.rect(surface, wall.color, rect)