"""Grid ray casting demo on pygame: tiles, map, rays, player, projected scene and game loop."""

__version__ = "0.1.0"