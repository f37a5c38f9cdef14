# raycube

raycube reads `.cub` scene files, checks them, and can render a view of the
map with a grid raycaster into an in-memory pixel buffer, all in pure Python
with no third-party dependencies.

A scene file gives four wall textures, optional floor and ceiling colours,
and then a map made of walls, floor cells, entities and exactly one player
spawn point.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
raycube maps/example.cub
```

The command takes exactly one argument. It checks that the path ends in
`.cub`, reads the file, parses the header and validates the map. On success
it prints the floor and ceiling colours in hexadecimal, the four texture
paths and the map width and height, then exits with status 0.

If the argument count is wrong, the path is not a `.cub` file, the file
cannot be opened, the header is incomplete or invalid, or the map has no
spawn point, several spawn points, unsupported characters or a floor or door
cell touching the outside, an error is logged and the exit status is 1.

## Scene format

```
F 220,100,0
C 225,30,0
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

111111
1N0M01
100D01
111111
```

* `NO`, `SO`, `WE`, `EA`: texture paths for the four wall faces. The header
  ends as soon as all four are known; every later line is read as map.
  Colour lines therefore have to come before the last texture line.
* `F`, `C`: floor and ceiling colours, three values from 0 to 255 separated
  by commas. A missing colour is `0`.
* `0` is floor, `1` is a wall; `G`, `F`, `B` and `T` are other wall kinds
  drawn at different heights or with textures linked to that character.
* `N`, `S`, `E`, `W`: the spawn cell and the direction the player faces.
* `V`, `M`, `D`: a soldier, money and a door. They are recorded as entities;
  soldier and money cells become floor, door cells stay doors.
* Spaces are outside the map. Floor and door cells must not touch them.

## Library use

```python
from raycube.parsing import load_scene
from raycube.raycast import cast_ray

scene = load_scene("maps/example.cub")
game_map = scene.game_map
ray = cast_ray(game_map, game_map.player, game_map.rotation, game_map.rotation)
print(ray.distance, ray.facing, ray.wall)
```

* `raycube.parsing`: `load_scene`, `parse_scene`, `parse_color` and
  `is_valid_map_path`, returning a `Scene`. Errors are raised as `ParseError`.
* `raycube.gamemap`: `parse_map`, `GameMap` (with `get`, `is_void`,
  `is_floor`, `is_wall`, `width`, `height`), `Entity`, and the checks
  `only_allowed_chars` and `is_enclosed`. Errors are raised as `MapError`.
* `raycube.raycast`: `cast_ray`, `horizontal_intersection`,
  `vertical_intersection` and `normalize_angle`; rays are `Ray` objects
  carrying a `Facing`. One map cell is `TILE_SIZE` (64) world units.
* `raycube.render`: `ViewSettings.from_fov`, `render_frame` and the steps it
  uses: `wall_height`, `wall_span`, `darkness`, `draw_sky`,
  `draw_textured_wall` and `draw_floor`. `render_frame` draws into an `Image`
  and returns the wall distance of every column.
* `raycube.images`: the `Image` pixel buffer, `put_pixel`, colour blending
  (`melt_colors`, `melt_colors_weighted`, `apply_color_filter`), block copies
  and `draw_line` / `draw_rect`. The colour `0xFF000000` counts as
  transparent and is never drawn by the transparent operations.
* `raycube.textures`: `TextureAtlas`, which stores textures by id or links
  them to a map character.
* `raycube.logs`: coloured console logging with `info`, `debug`, `warning`
  and `error`.
* `raycube.utils`: small string, number and vector helpers, including `Vec2`.
* `raycube.app`: the command's `main` and `average_fps`.

## What it does not do

raycube does not open a window, read keyboard or mouse input, or run a game
loop; the command only loads and reports on a scene. It does not load image
files: the texture paths in a scene are read as text only, and textures for
rendering must be built as `Image` objects and added to a `TextureAtlas` by
the caller. Entities are parsed and listed but have no behaviour, and there
is no HUD, minimap or menu.