"""The player: a position, a heading and the fan of rays it casts."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import pygame

from raycaster2d.ray import Ray

_PI = 3.1415

YELLOW = (255, 255, 0)
RED = (255, 0, 0)


@dataclass
class Player:
    """The player's body, heading indicator and rays."""

    position: tuple[float, float] = (400.0, 300.0)
    fov: float = 60.0
    radius: float = 3.0
    speed: float = 20.0
    rotation: float = 0.0
    indicator_rotation: float = 0.0
    rays: list[Ray] = field(default_factory=list)

    def move(self, movement: tuple[float, float]) -> None:
        """Shift the player and carry every ray along."""
        x, y = self.position
        dx, dy = movement
        self.position = (x + dx, y + dy)
        for ray in self.rays:
            ray.update(self.position)

    def set_rotation(self, radians: float) -> None:
        """Turn the player to the given heading, given in radians."""
        degrees = radians * (180 / _PI)
        self.rotation = degrees % 360.0
        self.indicator_rotation = (degrees + 30) % 360.0
        for ray in self.rays:
            ray.set_rotation(degrees)

    def _indicator_corners(self) -> list[tuple[float, float]]:
        angle = math.radians(self.indicator_rotation)
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        x0, y0 = self.position
        corners = ((0.0, 0.0), (1.0, 0.0), (1.0, self.radius), (0.0, self.radius))
        return [
            (x0 + x * cos_a - y * sin_a, y0 + x * sin_a + y * cos_a) for x, y in corners
        ]

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the player's body and heading indicator."""
        x, y = self.position
        pygame.draw.circle(surface, YELLOW, (round(x), round(y)), self.radius)
        pygame.draw.polygon(surface, RED, self._indicator_corners())