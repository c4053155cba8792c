"""Game state and player movement on a checked map."""

from __future__ import annotations

from enum import Enum

from solong.mapfile import GameMap, Tile

KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_ESC = 65307

PLAYER_WON = "Yeah... You Won!!"
PLAYER_LOSE = "Sorry... You Lose!!"

_WON_BANNER = "\n".join(
    (
        PLAYER_WON,
        "-----------------------------------------------",
        "|    🎉🎉🎉  Congratulations!!!!!  🎉🎉🎉     |",
        "|    You found all collectibles and exit.     |",
        "|        ✓✓✓✓✓✓✓✓ You won! ✓✓✓✓✓✓✓✓           |",
        "-----------------------------------------------",
    )
)

_LOST_BANNER = "\n".join(
    (
        PLAYER_LOSE,
        "-----------------------------------------------",
        "|    😢😢😢  Sorry, You Lose!  😢😢😢         |",
        "|    You were caught by the enemy.            |",
        "|    Try again to win.                        |",
        "-----------------------------------------------",
    )
)

_PLAYER_DIR = "textures/Player"


class Direction(Enum):
    """A step the player can take, valued by its (dx, dy) offset."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Outcome(Enum):
    """Where a game stands."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


_KEY_DIRECTIONS: dict[int, Direction] = {
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}

_TEXTURE_SUFFIX = {
    Direction.RIGHT: "R",
    Direction.LEFT: "L",
    Direction.UP: "U",
    Direction.DOWN: "D",
}


def direction_for_key(key: int) -> Direction | None:
    """Return the direction bound to ``key``, or ``None`` if unbound."""
    return _KEY_DIRECTIONS.get(key)


def player_texture(direction: Direction) -> str:
    """Return the texture path of the player facing ``direction``."""
    return f"{_PLAYER_DIR}/player_{_TEXTURE_SUFFIX[direction]}.xpm"


def initial_facing(game_map: GameMap) -> Direction:
    """Pick the direction the player faces at the start.

    The player faces the first open side among right, left and up, and
    down otherwise.  On maps with enemies the player always starts
    facing down.
    """
    if game_map.allow_enemies:
        return Direction.DOWN
    x, y = game_map.player
    for direction in (Direction.RIGHT, Direction.LEFT, Direction.UP):
        if game_map.tile(x + direction.dx, y + direction.dy) is not Tile.WALL:
            return direction
    return Direction.DOWN


class Game:
    """A running game: the map, the player and the score."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map.copy()
        self.player = self.map.player
        self.total = self.map.collectibles
        self.remaining = self.map.collectibles
        self.moves = 0
        self.outcome = Outcome.PLAYING
        self.facing = initial_facing(self.map)

    @property
    def over(self) -> bool:
        return self.outcome is not Outcome.PLAYING

    def move(self, direction: Direction) -> bool:
        """Try to step in ``direction``; return whether the player moved.

        The player always turns to face ``direction``.  Walls block, and
        the exit blocks until every collectible has been taken.  Stepping
        on the exit wins; stepping on an enemy loses.
        """
        if self.over:
            return False
        self.facing = direction
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        target = self.map.tile(nx, ny)
        if target is Tile.WALL or (target is Tile.EXIT and self.remaining != 0):
            return False
        if target is Tile.COLLECTIBLE:
            self.remaining -= 1
            self._step(x, y, nx, ny)
        elif target is Tile.FLOOR:
            self._step(x, y, nx, ny)
        elif target is Tile.ENEMY:
            self.outcome = Outcome.LOST
        else:
            self.outcome = Outcome.WON
        self.moves += 1
        self.player = (nx, ny)
        return True

    def _step(self, x: int, y: int, nx: int, ny: int) -> None:
        self.map.rows[y][x] = Tile.FLOOR
        self.map.rows[ny][nx] = Tile.PLAYER

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return whether the move count changed."""
        if self.over:
            return False
        direction = direction_for_key(key)
        if direction is None:
            return False
        return self.move(direction)

    def collected(self) -> int:
        """Return how many collectibles have been taken so far."""
        return self.total - self.remaining

    def hud_lines(self) -> list[str]:
        """Return the text lines shown over the map."""
        return [
            f"No. of Moves: {self.moves}",
            f"Star Collected: {self.collected()}",
        ]

    def status_message(self) -> str | None:
        """Return the end-of-game banner, or ``None`` while playing."""
        if self.outcome is Outcome.WON:
            return _WON_BANNER
        if self.outcome is Outcome.LOST:
            return _LOST_BANNER
        return None