# raycaster

A small first-person ray-casting game built on pygame and numpy. The world is
a fixed 12×12 grid of 64-unit blocks. For each screen column a ray is stepped
across the vertical and horizontal grid lines to the nearest wall, and a
textured wall slice is drawn whose colour fades with distance. Floors and
ceilings are texture-mapped per pixel, cells without a ceiling show a sky
background that scrolls with the view, and a minimap of the grid and the
player can be shown in the top-left corner.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
raycaster
```

The window is 1280×720. Textures are read from a `textures/` directory
relative to the current working directory; a different directory can be
given with `--textures`:

```
raycaster --textures path/to/textures
```

The directory must hold these images:

- walls: `default_acacia_wood.png`, `bricksx64.png`, `default_aspen_wood.png`,
  `default_furnace_front.png`, `default_bookshelf.png`, `doors_door_wood.png`
- floors: `default_stone_block.png`, `default_rainforest_litter.png`,
  `default_river_water.png`
- ceilings and sky: `default_acacia_wood.png`, `default_aspen_leaves.png`,
  `skyBackground.png`

If one of them is missing, the command prints the missing path to standard
error and exits with status 1.

While running, the mouse pointer is hidden and grabbed by the window, the
frame rate is limited to 60 frames per second, and the measured frame rate is
printed to standard output every frame.

## Controls

| Key          | Action                                  |
|--------------|-----------------------------------------|
| W / S        | move forward / backward                 |
| A / D        | strafe left / right                     |
| Left / Right | turn                                    |
| Up / Down    | move the horizon to look up / down      |
| C            | lower the camera (crouch)               |
| F            | raise the camera (fly), up to 64 units  |
| M            | show or hide the minimap                |
| Esc          | quit                                    |

Movement and turning are scaled by the time elapsed since the previous frame.
The player cannot walk into a wall cell or off the map.

## Using the pieces

The game is built from parts that can be used on their own:

- `raycaster.settings` holds the screen and world constants, the world map
  `WORLD_MAP`, `wrap_angle` and `map_cell`.
- `raycaster.ray.Ray` casts a single ray through the grid; `Ray.cast` returns
  the distance to the nearest wall and records the hit point and hit cell.
- `raycaster.player.Player` holds position (`x`, `y`), `angle`, camera
  `height` and `horizon`, and applies movement with wall collision.
- `raycaster.frame.FrameBuffer` is the RGB pixel buffer drawn into;
  `raycaster.frame.Texture` is an image sampled from, loaded with
  `Texture.from_file`.
- `raycaster.walls.Wall`, `raycaster.floor.Floor` and
  `raycaster.ceiling.Ceiling` each draw one screen column into a
  `FrameBuffer`.
- `raycaster.minimap.MiniMap` lays out the overhead map (`cells`,
  `player_rect`) and draws it onto a pygame surface.
- `raycaster.engine.RayCaster` ties them together: `cast_rays` renders the
  current view into its frame buffer and returns it, and `run` opens the
  window and runs the game loop. `raycaster.engine.main` is the command.

```python
from raycaster.player import Player
from raycaster.ray import Ray

player = Player()
ray = Ray()
ray.direction = player.angle
distance = ray.cast(player.x, player.y)
```

Rendering a single frame without opening a window:

```python
from raycaster.engine import RayCaster

engine = RayCaster(texture_dir="textures")
frame = engine.cast_rays()
print(frame.get(640, 360))
```

## What it does not do

There is no shooting, no enemies or other sprites, and no mouse look: the
mouse is only hidden and grabbed. The level is the single fixed map in
`raycaster.settings`; there is no way to load other levels, and nothing is
saved between runs.