"""A single ray cast from the player's position."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Ray:
    """A ray with a start position, a length and a rotation in degrees."""

    length: float
    position: tuple[float, float]
    width: float = 2.0
    rotation: float = 0.0
    primary_rotation: float = 0.0

    def update(self, position: tuple[float, float]) -> None:
        """Move the ray's start point."""
        self.position = position

    def set_rotation(self, rotation: float) -> None:
        """Rotate the ray to the given angle plus its own fixed offset."""
        self.rotation = (rotation + self.primary_rotation) % 360.0

    def set_length(self, length: float) -> None:
        """Set the ray's length after a hit has been found."""
        self.width = 1.0
        self.length = length