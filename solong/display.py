"""Window, drawing and the main loop of the game."""

from __future__ import annotations

import os
import sys
from typing import Callable, Sequence

import pygame

from solong.frames import frame_textures
from solong.game import (
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    Game,
    player_texture,
)
from solong.mapfile import TILE_SIZE, GameMap, MapError, Tile
from solong.validate import load_game_map

WINDOW_TITLE = "So Long"

PRESSED_ESC = "Ohhh... You Pressed Esc!!"
RED_CROSS_CLICKED = "Ohhh... You Closed the game Window!!"

_GIVE_UP_BANNER = (
    "--------------------------------------------------",
    "|              You gave up :(                    |",
    "|   Is the game hard for you? Try again......    |",
    "--------------------------------------------------",
)

_GIVE_UP_HEADERS = {
    "escape": PRESSED_ESC,
    "close": RED_CROSS_CLICKED,
}

_STATIC_TEXTURES = {
    "back": "textures/Floor/back.xpm",
    "wall": "textures/Wall/Brick.xpm",
    "collect": "textures/Collectible/food.xpm",
    "lock": "textures/Exit/lock.xpm",
    "exit": "textures/Exit/exit.xpm",
}

_TEXTURE_LABELS = {
    "back": "back",
    "wall": "wall",
    "collect": "collectible",
    "enemy": "enemy",
    "lock": "lock",
    "exit": "exit",
    "player": "player",
}

_HUD_COLOR = (255, 255, 255)
_HUD_ORIGIN = (10, 20)
_HUD_LINE_STEP = 20

_BONUS_FPS = 10
_PLAIN_FPS = 30

Loader = Callable[[str], "pygame.Surface"]


def tile_layers(game: Game, x: int, y: int) -> list[str]:
    """Return the texture names drawn, bottom to top, at cell ``(x, y)``."""
    layers = ["back"]
    tile = game.map.tile(x, y)
    if tile is Tile.WALL:
        layers.append("wall")
    elif tile is Tile.COLLECTIBLE:
        layers.append("collect")
    elif tile is Tile.ENEMY:
        layers.append("enemy")
    elif tile is Tile.PLAYER:
        layers.append("player")
    elif tile is Tile.EXIT:
        layers.append("exit")
        if game.remaining != 0:
            layers.append("lock")
    return layers


def window_size(game_map: GameMap) -> tuple[int, int]:
    """Return the window size in pixels for ``game_map``."""
    return game_map.width * TILE_SIZE, game_map.height * TILE_SIZE


def give_up_message(reason: str) -> str:
    """Return the message printed when the player quits.

    ``reason`` is ``"escape"`` for the Escape key or ``"close"`` for a
    closed window.
    """
    try:
        header = _GIVE_UP_HEADERS[reason]
    except KeyError:
        raise ValueError(f"unknown reason for giving up: {reason!r}") from None
    return "\n".join((header, *_GIVE_UP_BANNER))


def _default_loader(path: str) -> pygame.Surface:
    return pygame.image.load(path)


class Renderer:
    """Draws a game onto a surface, caching the textures it loads."""

    def __init__(
        self,
        surface: pygame.Surface,
        bonus: bool = False,
        loader: Loader | None = None,
    ) -> None:
        self.surface = surface
        self.bonus = bonus
        self.tick = 0
        self.facing_texture = ""
        self._loader: Loader = loader or _default_loader
        self._cache: dict[str, pygame.Surface | None] = {}
        self._font: pygame.font.Font | None = None

    def _path(self, name: str) -> str:
        if name == "player":
            return self.facing_texture
        if self.bonus and name in ("enemy", "collect"):
            frame = frame_textures(self.tick)
            return frame.enemy if name == "enemy" else frame.collectible
        if name == "enemy":
            return frame_textures(self.tick).enemy
        try:
            return _STATIC_TEXTURES[name]
        except KeyError:
            raise KeyError(f"unknown texture: {name!r}") from None

    def texture(self, name: str) -> pygame.Surface | None:
        """Return the surface for texture ``name``, or ``None`` if it failed to load."""
        path = self._path(name)
        if path not in self._cache:
            try:
                self._cache[path] = self._loader(path)
            except (OSError, pygame.error):
                print(f"Failed to load {_TEXTURE_LABELS.get(name, name)} image")
                self._cache[path] = None
        return self._cache[path]

    def draw(self, game: Game) -> None:
        """Draw the whole map, and in bonus mode the score lines."""
        self.facing_texture = player_texture(game.facing)
        self.surface.fill((0, 0, 0))
        for y, row in enumerate(game.map.rows):
            for x in range(len(row)):
                position = (x * TILE_SIZE, y * TILE_SIZE)
                for name in tile_layers(game, x, y):
                    image = self.texture(name)
                    if image is not None:
                        self.surface.blit(image, position)
        if self.bonus:
            self._draw_hud(game)

    def _draw_hud(self, game: Game) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 20)
        left, top = _HUD_ORIGIN
        for offset, line in enumerate(game.hud_lines()):
            text = self._font.render(line, True, _HUD_COLOR)
            self.surface.blit(text, (left, top + offset * _HUD_LINE_STEP))


_ARROW_KEYS = {
    pygame.K_UP: KEY_UP,
    pygame.K_DOWN: KEY_DOWN,
    pygame.K_LEFT: KEY_LEFT,
    pygame.K_RIGHT: KEY_RIGHT,
}


def _keysym(key: int) -> int:
    return _ARROW_KEYS.get(key, key)


def run(path: str | os.PathLike[str], bonus: bool = False) -> int:
    """Load the map at ``path`` and play it until the game ends.

    Returns the process exit status.
    """
    try:
        game_map = load_game_map(path, allow_enemies=bonus)
    except MapError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    game = Game(game_map)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(window_size(game_map))
        except pygame.error as exc:
            print(f"Error\n{exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, bonus=bonus)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    print(give_up_message("close"))
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    print(give_up_message("escape"))
                    return 0
                if game.handle_key(_keysym(event.key)):
                    if game.over:
                        print(game.status_message())
                        return 0
                    print(f"Moves: {game.moves}")
            renderer.draw(game)
            pygame.display.flip()
            if bonus:
                renderer.tick += 1
            clock.tick(_BONUS_FPS if bonus else _PLAIN_FPS)
    finally:
        pygame.quit()


def _start(argv: Sequence[str] | None, bonus: bool) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Error\nInvalid argument", file=sys.stderr)
        return 1
    return run(args[0], bonus=bonus)


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line."""
    return _start(argv, bonus=False)


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line with enemies and animation."""
    return _start(argv, bonus=True)