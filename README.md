# sheepgame

A small tile-based puzzle game played in a pygame window. You walk a
player around a walled map, pick up every collectible, and then step onto
the exit. The exit stays shut until the last collectible has been taken.
In bonus mode the map may also hold enemies (`K`); walking into one ends
the game.

## Installing

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
sheepgame maps/level1.ber
sheepgame --bonus maps/level2.ber
```

The command takes exactly one map path, plus `--bonus` for the extended
game; with any other number of arguments it exits with status 1 without
doing anything.

Move with `W`/`A`/`S`/`D` or the arrow keys. `Esc` or closing the window
quits. Any other key counts as a move that leaves the player in place.
Walking into a wall is not counted. In the normal game each counted move
prints `keys pressed: N`; in bonus mode the count is instead drawn as five
digits in a 100-pixel strip at the top of the window, and enemy images
cycle through six frames while the game runs.

Reaching the exit with every collectible taken prints a winning banner
with the move count; in bonus mode walking into an enemy prints a losing
banner. Either way the game closes.

If the map cannot be used, the problem is printed after a line reading
`Error` and the command exits with status 1. A map file that cannot be
opened is reported on standard error, also with status 1.

### Textures

Images are read from a `textures/` directory in the current working
directory: `floor.xpm`, `wall.xpm`, `collectible.xpm`, `player_right.xpm`,
`player_left.xpm`, `player_up.xpm`, `player_down.xpm`, `close_door.xpm`,
`open_door.xpm`, and in bonus mode also `enemy1.xpm` to `enemy6.xpm`,
`counter.xpm`, `background_yellow.xpm` and `0.xpm` to `9.xpm`. Each tile
is 64 by 64 pixels. If any image fails to load, `Error` and
`in loading images` are printed on standard error and the command exits
with status 1.

## Map files

A map is a plain text file whose name ends in `.ber`, one row per line:

| Character | Meaning                      |
|-----------|------------------------------|
| `0`       | floor                        |
| `1`       | wall                         |
| `P`       | player start (exactly one)   |
| `E`       | exit (exactly one)           |
| `C`       | collectible (at least one)   |
| `K`       | enemy (bonus mode only)      |

Rules a map must satisfy:

- the file name ends in `.ber` and is more than just `.ber`;
- the file is not empty and every row has the same length (a blank line
  counts as an empty row);
- only the characters above appear;
- there is exactly one player, exactly one exit and at least one
  collectible;
- the map is surrounded by walls;
- every collectible and the exit can be reached from the player's start,
  moving up, down, left or right; in bonus mode enemies block the way.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from sheepgame.game import Direction, Outcome, new_game
from sheepgame.mapfile import parse_map
from sheepgame.validation import MapError

try:
    rows = parse_map("1111111\n1P0C0E1\n1111111\n")
except MapError as err:
    print(err)
else:
    game = new_game(rows)
    outcome = game.press(Direction.RIGHT)
    print(outcome, game.key_count, game.visible_rows())
    print(game.messages)
```

### `sheepgame.validation`

The individual checks, each raising `MapError` (a `ValueError`) with a
message describing the problem:

- `check_file_name(path)` returns the path if it is an acceptable map name;
- `check_rectangular(rows)` returns the common row width;
- `check_characters(rows, bonus=False)`;
- `check_required_elements(rows)` returns the number of collectibles and
  reports every missing element in one error;
- `check_walls(rows)`;
- `find_player(rows)` returns the player's `(x, y)`;
- `check_path(rows, bonus=False)` returns the set of reachable `(x, y)`
  cells;
- `validate(rows, bonus=False)` runs all of the above and returns the rows
  as a list.

### `sheepgame.mapfile`

- `split_rows(text)` splits text into rows on `\n`, dropping a final
  newline;
- `parse_map(text, bonus=False)` returns validated rows;
- `load_map(path, bonus=False)` checks the file name, reads the file and
  returns validated rows. It raises `MapError` for a bad name or content
  and `OSError` when the file cannot be opened.

### `sheepgame.game`

- `new_game(rows, bonus=False)` returns a `Game`.
- `Game.press(direction)` applies one key press and returns an `Outcome`:
  `MOVED`, `BLOCKED`, `WON` or `LOST`. Pass `None` for a key with no
  direction. Text meant for the player is left in `Game.messages`.
- `Game.tile_at(x, y)`, `Game.visible_rows()` and `Game.step_digits()`
  (the five digits of the move count) read the state; `player`, `exit`,
  `collected`, `total_collectibles`, `key_count`, `facing` and `door_open`
  are plain attributes.
- `direction_for_key(keycode)` maps X keysyms for W/A/S/D (either case)
  and the arrow keys to a `Direction`, and returns `None` for anything
  else.

### `sheepgame.app`

- `run(path, bonus=False)` plays a map in a window and returns the exit
  status; `main(argv=None)` is the command above.
- `Renderer(surface, textures, bonus=False)` draws a `Game` with
  `draw(game)` and steps the enemy animation with `animate(game)`;
  `load_textures(directory="textures", bonus=False)` loads its images.
- `window_size(width, height, bonus=False)`, `tile_origin(x, y, bonus=False)`
  and `digit_positions()` give the pixel layout.

## What it does not include

No texture images and no sample maps are shipped with the package; both
have to be supplied by the player.