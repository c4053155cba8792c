"""Loading and structural checks for ``.ber`` map files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

TILE_SIZE = 64

MIN_MAP_HEIGHT = 3
MAX_MAP_HEIGHT = 21
MIN_MAP_WIDTH = 3
MAX_MAP_WIDTH = 40

MAP_SUFFIX = ".ber"

FILE_ERROR = "Unable to Read File Data!!"
FILE_NAME_ERROR = "Invalid Map File Format!!"
WIDTH_NOT_SAME = "Width of Map is not Same for all Rows!!"
MAP_SIZE_ISSUE = "Map is Either too Big or too Small to be Displayed!!"
UNKNOWN_CHAR = "Found an Unknown Variable in Map!!"
FOUR_SIDE_WALL = "Map should be closed with Walls from all 4 sides!!"
ZERO_COLLECT = "No. of Collectibles cannot be less than 1"
ONE_EXIT = "No. of Exits should only be 1"
ONE_PLAYER = "No. of Players should only be 1"


class Tile(str, Enum):
    """A single map cell, valued by its character in the map file."""

    FLOOR = "0"
    WALL = "1"
    COLLECTIBLE = "C"
    EXIT = "E"
    PLAYER = "P"
    ENEMY = "H"


class MapError(Exception):
    """Raised when a map file or its contents are not usable."""

    def __init__(self, *messages: str) -> None:
        super().__init__("\n".join(messages))
        self.messages: tuple[str, ...] = messages


@dataclass
class GameMap:
    """A validated map grid with the positions the game needs."""

    rows: list[list[Tile]]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int
    allow_enemies: bool = field(default=False)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)

    def tile(self, x: int, y: int) -> Tile:
        """Return the tile at column ``x`` and row ``y``."""
        return self.rows[y][x]

    def copy(self) -> GameMap:
        """Return an independent copy of the map."""
        return GameMap(
            rows=[list(row) for row in self.rows],
            player=self.player,
            exit=self.exit,
            collectibles=self.collectibles,
            allow_enemies=self.allow_enemies,
        )

    def __str__(self) -> str:
        return "\n".join("".join(t.value for t in row) for row in self.rows)


def check_map_file(path: str | os.PathLike[str]) -> Path:
    """Check that ``path`` names a readable ``.ber`` file and return it."""
    name = os.fspath(path)
    if not name.endswith(MAP_SUFFIX):
        raise MapError(FILE_NAME_ERROR)
    try:
        with open(name, "rb"):
            pass
    except OSError as exc:
        raise MapError(FILE_ERROR) from exc
    return Path(name)


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read the map rows of a file; empty lines are dropped."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(FILE_ERROR) from exc
    return [part for part in text.split("\n") if part]


def _check_dimensions(rows: list[str]) -> None:
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise MapError(WIDTH_NOT_SAME)
    height = len(rows)
    width = len(rows[-1]) if rows else 0
    if not (
        MIN_MAP_HEIGHT <= height <= MAX_MAP_HEIGHT
        and MIN_MAP_WIDTH <= width <= MAX_MAP_WIDTH
    ):
        raise MapError(MAP_SIZE_ISSUE)


def _check_walls(rows: list[str]) -> None:
    wall = Tile.WALL.value
    edges = rows[0] + rows[-1] + "".join(row[0] + row[-1] for row in rows)
    if any(ch != wall for ch in edges):
        raise MapError(FOUR_SIDE_WALL)


def _count_components(rows: list[str]) -> tuple[tuple[int, int], tuple[int, int], int]:
    players: list[tuple[int, int]] = []
    exits: list[tuple[int, int]] = []
    collectibles = 0
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch == Tile.PLAYER.value:
                players.append((x, y))
            elif ch == Tile.COLLECTIBLE.value:
                collectibles += 1
            elif ch == Tile.EXIT.value:
                exits.append((x, y))
    problems = []
    if collectibles < 1:
        problems.append(ZERO_COLLECT)
    if len(exits) != 1:
        problems.append(ONE_EXIT)
    if len(players) != 1:
        problems.append(ONE_PLAYER)
    if problems:
        raise MapError(*problems)
    return players[0], exits[0], collectibles


def _check_characters(rows: list[str], allow_enemies: bool) -> list[list[Tile]]:
    allowed = {t.value for t in Tile}
    if not allow_enemies:
        allowed.discard(Tile.ENEMY.value)
    if any(ch not in allowed for row in rows for ch in row):
        raise MapError(UNKNOWN_CHAR)
    return [[Tile(ch) for ch in row] for row in rows]


def parse_map(lines: Iterable[str], allow_enemies: bool = False) -> GameMap:
    """Check the structure of map rows and build a :class:`GameMap`.

    Checks run in order: equal row widths and size limits, closed
    border, component counts, then unknown characters.  Enemy tiles
    are accepted only when ``allow_enemies`` is true.
    """
    rows = list(lines)
    _check_dimensions(rows)
    _check_walls(rows)
    player, exit_pos, collectibles = _count_components(rows)
    grid = _check_characters(rows, allow_enemies)
    return GameMap(
        rows=grid,
        player=player,
        exit=exit_pos,
        collectibles=collectibles,
        allow_enemies=allow_enemies,
    )