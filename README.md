# raycaster2d

A small ray casting demo built on pygame.

The window shows two things. A 32×16 grid map of 8-pixel cells is drawn from
above in its top-left corner, with the player drawn on it as a yellow dot and a
red heading mark. Behind the map, a first-person view is projected across the
whole window.

Each step, the player casts 200 rays across a 60° field of view. Each ray walks
the grid cell by cell (DDA) until it reaches a brick or has gone 500 pixels.
Every hit distance becomes one green wall column. Nearer walls are taller and
brighter, and walls farther than 200 pixels are drawn black.

## Installation

```
pip install .
```

pygame is the only dependency.

## Running

```
raycaster2d
```

By default this opens an 800×600 window titled "Raycasting 2D". The size can be
changed:

```
raycaster2d --width 1024 --height 768
```

The game runs a fixed-step loop at 60 steps per second.

## Controls

| Input     | Action                                             |
|-----------|----------------------------------------------------|
| `W`       | move forward                                       |
| `S`       | move back                                          |
| `A`       | move left                                          |
| `D`       | move right                                         |
| mouse (x) | turn the player; the heading is the mouse x / 100 radians |
| `Esc`     | quit                                               |

Closing the window also quits. The player moves at 20 pixels per second.

## Using the pieces

The building blocks can be used without opening a window.

### `raycaster2d.tile`

- `TileType` has three members: `NONE`, `BRICK` and `SPAWN`.
- `Tile` is a dataclass with `tile_type`, `position`, `size` and `color`.
  - `change_type()` sets the tile's kind and paints bricks blue.
  - `draw(surface)` fills the tile's rectangle.

### `raycaster2d.worldmap`

`WorldMap(layout=None, width=32, height=16, cell_width=8, cell_height=8)` holds
the grid. A layout is a flat sequence of codes: 0 is empty, 1 is brick and
2 is spawn. A layout whose length is not `width * height` raises `ValueError`.

- `generate()` builds `tiles` from the layout.
- `tile_at(column, row)` returns one tile. A cell outside the grid raises
  `IndexError`.
- `spawn_position()` returns the top-left corner of the first spawn tile, or
  `(0.0, 0.0)` if there is none.
- `draw(surface)` paints a black background and every non-empty tile.

### `raycaster2d.ray`

`Ray` holds a start `position`, a `length` and a `rotation` in degrees.

- `update()` moves its start point.
- `set_rotation()` turns it to a heading plus its own `primary_rotation`.
- `set_length()` records the hit distance.

### `raycaster2d.player`

`Player` holds a position, a field of view, a speed, a heading and its `rays`.

- `move()` shifts the player and carries its rays along.
- `set_rotation(radians)` turns the player and every ray.
- `draw(surface)` draws the body and the heading mark.

### `raycaster2d.scene`

`Scene(window_width, window_height, ray_amount)` holds one `Wall` column per ray.

1. Append one hit length per ray to `Scene.lengths`.
2. Call `render_scene()`. It sizes and shades each wall from those lengths,
   then clears the list.
3. Call `draw(surface)` to paint the walls, clipped to the surface.

### `raycaster2d.engine`

`Engine(width=800, height=600, world=None, ray_amount=200, ray_length=1000.0, fps=60.0)`
ties everything together. It places the player in the middle of the spawn cell.

- `create_rays(amount)` fans rays evenly across the player's field of view.
- `cast_rays()` finds each ray's distance and passes it to the scene.
- `update(delta_time)` moves the player by the active movement flags, then
  recasts and re-projects the view.
- `handle_player_input(key, pressed)` sets the movement flags from pygame key
  codes.
- `rotate_player(mouse_x)` turns the player.
- `run()` opens the window and runs the loop.
- `deg_to_rad()` converts degrees to radians.
- `main(argv=None)` is the `raycaster2d` command.

## What it does not do

- There is no collision detection: the player walks through walls.
- The map is fixed to the built-in layout when started from the command.
  Other layouts can only be used through `WorldMap` and `Engine` in code.
- There are no textures, sprites, sound, enemies or saving.

## Tests

```
pip install .[test]
pytest
```