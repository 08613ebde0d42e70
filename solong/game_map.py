"""Loading, validating and path-checking game maps.

A map is a rectangle of tiles: ``1`` wall, ``0`` floor, ``P`` the
player's start, ``C`` a collectable and ``E`` the exit. It must hold one
player, one exit and at least one collectable, and be closed in by walls.
Every collectable and the exit must be reachable from the player.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

from solong.line_reader import read_lines

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTABLE = "C"

_ALLOWED = frozenset({WALL, FLOOR, PLAYER, EXIT, COLLECTABLE, "\n"})
_FILLED = "F"
_REACHED_EXIT = "X"
_MAP_SUFFIX = ".ber"


class MapError(Exception):
    """Raised when a map cannot be read or breaks one of the map rules."""


@dataclass
class GameMap:
    """A grid of tiles and the player's current position."""

    grid: List[List[str]] = field(default_factory=list)
    player_y: int = 0
    player_x: int = 0

    @property
    def height(self) -> int:
        """The number of rows."""
        return len(self.grid)

    @property
    def width(self) -> int:
        """The length of the first row."""
        return len(self.grid[0]) if self.grid else 0

    @property
    def rows(self) -> List[str]:
        """The rows as strings."""
        return ["".join(row) for row in self.grid]

    def _check_position(self, y: int, x: int) -> None:
        if not (0 <= y < self.height and 0 <= x < len(self.grid[y])):
            raise IndexError(f"position ({y}, {x}) is outside the map")

    def tile(self, y: int, x: int) -> str:
        """Return the tile at row ``y``, column ``x``."""
        self._check_position(y, x)
        return self.grid[y][x]

    def set_tile(self, y: int, x: int, value: str) -> None:
        """Replace the tile at row ``y``, column ``x`` with ``value``."""
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(f"a tile is a single character, got {value!r}")
        self._check_position(y, x)
        self.grid[y][x] = value

    def count(self, tile: str) -> int:
        """Return how many times ``tile`` occurs in the map."""
        return sum(row.count(tile) for row in self.grid)


def is_ber(path: Union[str, os.PathLike]) -> bool:
    """Tell whether ``path`` ends in ``.ber`` counted from its first dot."""
    text = os.fspath(path)
    dot = text.find(".")
    return dot >= 0 and text[dot:] == _MAP_SUFFIX


def find_player(rows: Iterable[str]) -> Tuple[int, int]:
    """Return the (row, column) of the first ``P``, scanning row by row.

    Only the first ``width`` columns of each row are searched, the width
    being that of the first row.
    """
    rows = list(rows)
    width = len(rows[0]) if rows else 0
    for y, row in enumerate(rows):
        x = row[:width].find(PLAYER)
        if x >= 0:
            return y, x
    raise MapError("Player starting position not found in the map")


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from its lines; a trailing newline on each is dropped."""
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not rows:
        raise MapError("The map is empty")
    player_y, player_x = find_player(rows)
    return GameMap([list(row) for row in rows], player_y, player_x)


def read_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read and parse the map file at ``path``, which must end in ``.ber``."""
    if not is_ber(path):
        raise MapError("The format of the map is not supported")
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            lines = list(read_lines(stream))
    except OSError as error:
        raise MapError("Failed to read the map") from error
    return parse_map(lines)


def _check_characters(game_map: GameMap) -> None:
    """Validate characters and the tile counts in all rows but the last."""
    width = game_map.width
    counts = {PLAYER: 0, EXIT: 0, COLLECTABLE: 0}
    for row in game_map.grid[:-1]:
        raw = "".join(row) + "\n"
        for x in range(width):
            ch = raw[x] if x < len(raw) else "\0"
            if ch not in _ALLOWED:
                raise MapError("Invalid characters in the map")
            if ch in counts:
                counts[ch] += 1
    if not (counts[PLAYER] == 1 and counts[COLLECTABLE] >= 1 and counts[EXIT] == 1):
        raise MapError("Error in the map")


def _is_rectangular(game_map: GameMap) -> bool:
    return len({len(row) for row in game_map.grid}) <= 1


def _is_enclosed(game_map: GameMap) -> bool:
    width = game_map.width
    if width == 0:
        return False
    if any(row[0] != WALL or row[width - 1] != WALL for row in game_map.grid):
        return False
    first, last = game_map.grid[0], game_map.grid[-1]
    return all(first[x] == WALL and last[x] == WALL for x in range(width))


def check_errors(game_map: GameMap) -> None:
    """Raise MapError if the map breaks a character, count or shape rule."""
    _check_characters(game_map)
    if not _is_rectangular(game_map):
        raise MapError("The map is not rectangular")
    if not _is_enclosed(game_map):
        raise MapError("The map is not properly enclosed")


def flood_fill(rows: Iterable[str], start_y: int, start_x: int) -> List[str]:
    """Return a copy of ``rows`` with everything reachable from the start marked.

    Walls stop the fill. A reached exit is marked ``X`` and the fill passes
    through it; every other reached tile is marked ``F``.
    """
    grid = [list(row) for row in rows]
    stack = [(start_y, start_x)]
    while stack:
        y, x = stack.pop()
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        cell = grid[y][x]
        if cell in (WALL, _FILLED, _REACHED_EXIT):
            continue
        grid[y][x] = _REACHED_EXIT if cell == EXIT else _FILLED
        stack.extend(((y, x + 1), (y, x - 1), (y + 1, x), (y - 1, x)))
    return ["".join(row) for row in grid]


def path_check(game_map: GameMap) -> None:
    """Raise MapError unless every collectable and the exit can be reached."""
    width = game_map.width
    filled = flood_fill(
        [row[:width] for row in game_map.rows],
        game_map.player_y,
        game_map.player_x,
    )
    if any(COLLECTABLE in row for row in filled):
        raise MapError("Not all collectibles are reachable")
    if not any(_REACHED_EXIT in row for row in filled):
        raise MapError("The exit is not reachable")


def load_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read a map file and check it fully, returning the valid map."""
    game_map = read_map(path)
    check_errors(game_map)
    path_check(game_map)
    return game_map