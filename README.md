# solong

Building blocks for a small top-down puzzle game in which a player walks a
walled map, picks up every collectible and then reaches the exit. The
package loads map files, checks that a map is playable and draws it in a
pygame window. It also carries a set of small text, byte-buffer, linked-list
and line-reading helpers.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row
of tiles:

| Char | Tile         |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `C`  | collectible  |
| `E`  | exit         |
| `P`  | player start |

Example:

```
1111111
1P0C0E1
1111111
```

## Loading and validating a map

```python
from solong.map_loader import load_map, MapLoadError
from solong.validation import validate_map, MapValidationError

game_map = load_map("level.ber")   # raises MapLoadError
validate_map(game_map)             # raises MapValidationError
print(game_map.width, game_map.height)
print(game_map.find("P"))          # (x, y) of the player start
print(game_map.count("C"))         # number of collectibles
```

`load_map` rejects a path whose text after the last dot is not exactly
`.ber`, a file that cannot be opened or read, and an empty file. The map's
width is the length of its first line; `GameMap.grid` holds the tiles as
`grid[y][x]` and `GameMap.lines` gives the rows as strings.

`validate_map` runs these checks in order and raises on the first failure;
each can also be called on its own from `solong.validation`:

- `check_rectangle`: at least 3 by 3, and every row as wide as the first;
- `check_walls`: the whole border is walls;
- `check_elements`: only the characters above, exactly one `P`, exactly one
  `E` and at least one `C` (see also `count_elements` and `validate_count`);
- `check_path`: every collectible can be reached from the start without
  crossing walls or the exit.

`MapValidationError.code` is a `MapErrorCode`, and its message is the text
returned by `error_message(code)`.

## Drawing

`solong.graphics.Renderer` opens a pygame window sized 40 pixels per tile,
titled `so_long`, and loads `player.xpm`, `wall.xpm`, `exit.xpm`,
`floor.xpm` and `collect.xpm` from an asset directory (`asset` by default).
It raises `GraphicsError` if the window or a texture cannot be set up.

```python
from solong.graphics import Renderer

with Renderer(game_map, asset_dir="asset") as renderer:
    renderer.render(game_map)
```

`render` draws the floor under every tile and then the tile's sprite, as
given by `sprite_for(tile)`.

## Helpers

- `solong.chars`: ASCII classification (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_lower`, `to_upper`, `atoi`, `itoa`.
- `solong.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing to
  a stream (standard output by default).
- `solong.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on byte buffers.
- `solong.linked_list`: `LinkedList` of `Node`s with `add_front`,
  `add_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `solong.strings`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`,
  and the NUL-terminated buffer copies `strlcpy` and `strlcat`.
- `solong.line_reader`: `LineReader` reads a file descriptor line by line in
  fixed-size chunks; `get_next_line(fd)` keeps state per descriptor and
  `read_lines(fd)` yields every remaining line.

## What this package does not do

There is no command to start a game and no game loop: the package does not
track the player, handle key presses, count moves or decide when the game is
won. It loads, checks and draws maps; moving a player around one is left to
the code that uses it.