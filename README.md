# raycube

raycube is a first-person maze explorer. It uses a raycaster to draw a
textured 3D view of a grid map. It also draws a minimap in the top-left
corner of the window. A `.cub` text file describes each scene.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
raycube maps/example.cub
```

The command takes exactly one argument, the path to a scene file. With any
other number of arguments, it prints a usage line and exits with status 0.

- **Scene file name.** From its first `.` onwards, the name must be exactly
  `.cub`. So `maps/example.cub` is accepted. `./maps/example.cub` and
  `level.v2.cub` are rejected.
- **Invalid scenes.** If the scene file cannot be read or is invalid, the
  program prints `Error` and then the reason on the next line. It then exits
  with status 1. The same happens when a texture image cannot be loaded.
- **Window.** The window takes the size of the current desktop, or 640×480
  if that size is not known. The mouse pointer is hidden and kept at the
  centre of the window.

## Controls

| Input                       | Action                         |
|-----------------------------|--------------------------------|
| `W` / `S`                   | move forward / backward        |
| `A` / `D`                   | strafe left / right            |
| Left / Right arrow          | turn                           |
| Mouse left / right          | turn                           |
| Mouse up / down             | look up / down (pitch)         |
| `Esc` or closing the window | quit                           |

Movement speed and turn speed are both 0.05 per frame. Pitch is limited to
half the window height in either direction.

The player can move only onto open floor. Each axis is checked on its own,
so the player slides along a wall instead of stopping dead.

## Scene files

### Information lines

Six information lines come first, in any order. Each must appear exactly
once:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- **Textures.** `NO`, `SO`, `WE` and `EA` name the wall texture images.
  - Each of these keywords must be followed by a space.
  - The path is the rest of the line, starting at the first `./`.
  - The file must exist.
  - The image is loaded with pygame, so any format pygame can read will work.
- **Colours.** `F` sets the floor colour and `C` sets the ceiling colour.
  - The keyword must be followed by a space.
  - The value is written `R,G,B`.
  - Each component must be between 0 and 255.
  - The line may contain only the keyword, digits, commas, spaces and tabs.

Lines that are empty or hold only spaces may appear between the information
lines. Any other line before the map is an error.

### The map

The map comes last:

```
111111
100101
1010N1
111111
```

**Cells**

- `1` is a wall.
- `0` is open floor.
- A space is void.
- `N`, `S`, `E` or `W` marks the starting cell. The letter sets the direction
  the player faces at the start. There must be exactly one such cell.

**Rules**

- Every floor cell must be enclosed. It must not be on the edge of the map,
  and it must not touch void or the end of a shorter row, either beside it or
  above or below it.
- The map ends at the first line that is not a map row. After that line, no
  more map rows and no more information lines may follow.

## Using it as a library

### Scenes

- `raycube.scene.load_scene(path)` reads, checks and parses a scene file. It
  returns a `raycube.scene.Scene`. A `Scene` holds:
  - `textures`: the four texture paths, in the order NO, SO, WE, EA
  - `floor_color` and `ceiling_color`: packed `0xRRGGBB` values
  - `grid`: the map rows, with the starting cell replaced by `0`
  - `player`
  - `width` and `height`
- `raycube.scene.parse_scene(lines)` does the same for a list of lines that
  are already in memory.
- `read_lines`, `parse_texture_path`, `check_enclosed` and `find_player`
  each do one step of that work.
- All of these raise `raycube.errors.SceneError` for an invalid scene.
  `raycube.errors.error_text(message)` formats such an error the way the
  command prints it.

### Lines and colours

- `raycube.lines.classify_line(line)` returns the `LineKind` of a line.
- `raycube.lines.is_map_line(line)` tells whether a line is a map row.
- `raycube.lines.check_file_format(path)` applies the `.cub` name rule.
- `raycube.colors.parse_color(line)` turns a colour line such as
  `F 220,100,0` into `0xDC6400`.

### The player

- `raycube.player.Player.from_spawn(x, y, direction)` places a player on a
  map cell.
- `rotate`, `mouse_look`, `proposed_position`, `apply_collision` and `update`
  turn and move the player. Movement requests are given as
  `raycube.player.Action` values.

### Drawing

- `raycube.raycast.render(frame, grid, player, textures, floor_color,
  ceiling_color)` draws one view into a `raycube.raycast.Frame`. The textures
  are given as `raycube.raycast.Texture` objects.
- `raycube.raycast.cast_ray` casts the ray for a single screen column. It
  returns a `Ray`.
- `raycube.minimap.draw_minimap(frame, grid, player)` adds the minimap to
  that frame.

### The game

- `raycube.app.Game` joins a scene, its textures and a frame. It provides
  `key_down`, `key_up`, `mouse_moved` and `tick`.
- `raycube.app.load_texture(path)` loads an image file as a `Texture`.

## What it does not do

raycube lets you walk through a maze and look around, and nothing more:

- no enemies, weapons, items or doors
- no sound
- no saving of progress
- no editor for scene files