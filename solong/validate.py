"""Reachability checks and exit placement for parsed maps."""

from __future__ import annotations

import os
from typing import Sequence

from solong.mapfile import GameMap, MapError, Tile, check_map_file, parse_map, read_map

CAN_NOT_COLLECT = "All Collectibles cannot be collected!!"
EXIT_NOT_REACHABLE = "Player cannot reach Exit!!"

# Exit placement codes keyed by whether the (up, left, down, right)
# neighbours are walls.  Any other combination is code 15.
_EXIT_CODES: dict[tuple[bool, bool, bool, bool], int] = {
    (False, False, True, True): 1,
    (True, False, False, True): 2,
    (False, True, True, False): 3,
    (True, True, False, False): 4,
    (True, False, False, False): 5,
    (False, True, False, False): 6,
    (False, True, False, True): 14,
    (False, False, True, False): 7,
    (False, False, False, True): 8,
    (False, True, True, True): 9,
    (True, False, True, True): 10,
    (True, True, False, True): 11,
    (True, True, True, False): 12,
    (True, False, True, False): 13,
}
_OTHER_EXIT_CODE = 15


def _reachable(game_map: GameMap) -> tuple[int, int]:
    """Flood fill from the player; return (collectibles seen, exits seen).

    The exit and enemy tiles are entered but not passed through.
    """
    collected = 0
    exits = 0
    visited: set[tuple[int, int]] = set()
    stack = [game_map.player]
    while stack:
        x, y = stack.pop()
        if (x, y) in visited:
            continue
        visited.add((x, y))
        tile = game_map.tile(x, y)
        if tile is Tile.COLLECTIBLE:
            collected += 1
        if tile is Tile.EXIT or tile is Tile.ENEMY:
            if tile is Tile.EXIT:
                exits += 1
            continue
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if not (0 <= ny < game_map.height and 0 <= nx < game_map.width):
                continue
            if (nx, ny) in visited or game_map.tile(nx, ny) is Tile.WALL:
                continue
            stack.append((nx, ny))
    return collected, exits


def check_path(game_map: GameMap) -> GameMap:
    """Check that every collectible and the exit can be reached.

    Raises :class:`MapError` otherwise; returns the map unchanged.
    """
    collected, exits = _reachable(game_map)
    if collected != game_map.collectibles:
        raise MapError(CAN_NOT_COLLECT)
    if exits != 1:
        raise MapError(EXIT_NOT_REACHABLE)
    return game_map


def exit_position(rows: Sequence[Sequence[str]], x: int, y: int) -> int:
    """Classify the cell at ``(x, y)`` by which of its neighbours are walls."""
    wall = Tile.WALL.value
    key = (
        rows[y - 1][x] == wall,
        rows[y][x - 1] == wall,
        rows[y + 1][x] == wall,
        rows[y][x + 1] == wall,
    )
    return _EXIT_CODES.get(key, _OTHER_EXIT_CODE)


def load_game_map(
    path: str | os.PathLike[str], allow_enemies: bool = False
) -> GameMap:
    """Read, check and return the map stored at ``path``."""
    checked = check_map_file(path)
    game_map = parse_map(read_map(checked), allow_enemies)
    return check_path(game_map)