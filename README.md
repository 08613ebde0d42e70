# solong

The map side of a small tile-based puzzle game, in which a player walks a
walled map, picks up every collectable and then steps onto the exit. This
package reads map files, checks them against the game's rules and works out
whether every collectable and the exit can be reached. It also carries a set
of small character, number, string, buffer and output helpers.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Map format

A map is a text file whose name ends in `.ber`, made of these characters:

| Char | Meaning       |
|------|---------------|
| `1`  | wall          |
| `0`  | floor         |
| `P`  | player start  |
| `C`  | collectable   |
| `E`  | exit          |

A valid map:

- has exactly one `P`, exactly one `E` and at least one `C`;
- holds no other characters;
- is rectangular (every row is the same length);
- is fully enclosed by walls;
- lets the player reach every collectable and the exit.

Example:

```
1111111
1P0C0E1
1111111
```

## Loading and checking maps

```python
from solong.game_map import load_map, MapError

try:
    game_map = load_map("maps/level.ber")
except MapError as error:
    print(error)
else:
    print(game_map.height, game_map.width)
    print(game_map.player_y, game_map.player_x)
```

`load_map` reads the file, then runs `check_errors` and `path_check` on it.
Every broken rule raises `MapError` with a message saying what is wrong, for
example `The map is not rectangular` or `The exit is not reachable`.

The steps can also be used one at a time on maps already in memory:

- `is_ber(path)` tells whether a path ends in `.ber`, counted from its first dot.
- `read_map(path)` reads a `.ber` file into a `GameMap`.
- `parse_map(lines)` builds a `GameMap` from lines, dropping trailing newlines.
- `find_player(rows)` returns the `(row, column)` of the first `P`.
- `check_errors(game_map)` checks characters, tile counts, shape and walls.
- `flood_fill(rows, start_y, start_x)` returns a copy of the rows with every
  reachable tile marked `F` and a reached exit marked `X`.
- `path_check(game_map)` checks that all collectables and the exit are reachable.

A `GameMap` holds its `grid` as a list of character lists together with
`player_y` and `player_x`. It offers `height`, `width` and `rows`, plus
`tile(y, x)`, `set_tile(y, x, value)` and `count(tile)`.

```python
from solong.game_map import parse_map, check_errors, path_check

game_map = parse_map(["1111111", "1P0C0E1", "1111111"])
check_errors(game_map)
path_check(game_map)
print(game_map.count("C"))  # 1
```

## Helpers

- `solong.line_reader`: `LineReader` splits a text or binary stream into lines,
  reading a fixed number of characters at a time; `read_lines(stream,
  buffer_size)` yields them. Lines keep their trailing newline.
- `solong.printf`: `sprintf(fmt, *args)` and `printf(fmt, *args)` with the
  conversions `%c %s %p %d %i %u %x %X %%`. `printf` writes to standard output
  and returns the number of characters written.
- `solong.chars`: ASCII tests and case conversion (`isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `is_sign`, `is_space`, `tolower`, `toupper`).
- `solong.numbers`: `atoi` and `atoli` (32- and 64-bit wrapping), `itoa`,
  `uitoa` and `convert_base`.
- `solong.strings`: searching, comparing, copying, slicing and splitting text
  (`strchr`, `strcmp`, `strnstr`, `strlcpy`, `substr`, `split`, `strtrim`, …).
  Searches return indices, or None when nothing is found.
- `solong.memory`: filling, copying, searching and comparing byte buffers
  (`memset`, `bzero`, `calloc`, `memcpy`, `memmove`, `memchr`, `memcmp`).
- `solong.linked_list`: `Node` and `LinkedList`, a singly linked list with
  `add_front`, `add_back`, `last`, `clear`, `iterate`, `map`, `len()` and
  iteration over its contents.

## What this package does not do

It has no game window, no drawing of tiles, no keyboard play and no command to
start a game. It installs no command-line program; everything is used from
Python.