import pygame
import pytest

from solong.display import (
    PRESSED_ESC,
    RED_CROSS_CLICKED,
    Renderer,
    give_up_message,
    main,
    main_bonus,
    run,
    tile_layers,
    window_size,
)
from solong.frames import frame_textures
from solong.game import Direction, Game, player_texture
from solong.mapfile import TILE_SIZE, parse_map

ROWS = ["11111", "1PCE1", "11111"]


def _game(rows=ROWS, allow_enemies=False):
    return Game(parse_map(rows, allow_enemies))


class _Loader:
    def __init__(self, colors):
        self.colors = colors
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(self.colors.get(path, (1, 1, 1)))
        return surface


def test_tile_layers_per_tile():
    game = _game()
    assert tile_layers(game, 0, 0) == ["back", "wall"]
    assert tile_layers(game, 1, 1) == ["back", "player"]
    assert tile_layers(game, 2, 1) == ["back", "collect"]
    assert tile_layers(game, 3, 1) == ["back", "exit", "lock"]


def test_exit_unlocks_after_collecting():
    game = _game()
    assert game.move(Direction.RIGHT)
    assert tile_layers(game, 3, 1) == ["back", "exit"]
    assert tile_layers(game, 1, 1) == ["back"]


def test_enemy_layer():
    game = _game(["111111", "1PCEH1", "111111"], allow_enemies=True)
    assert tile_layers(game, 4, 1) == ["back", "enemy"]


def test_window_size():
    assert window_size(parse_map(ROWS)) == (320, 192)


def test_give_up_messages():
    escape = give_up_message("escape")
    close = give_up_message("close")
    assert escape.splitlines()[0] == PRESSED_ESC
    assert close.splitlines()[0] == RED_CROSS_CLICKED
    assert escape.splitlines()[1:] == close.splitlines()[1:]


def test_give_up_unknown_reason():
    with pytest.raises(ValueError):
        give_up_message("bored")


def test_draw_blits_layers_in_order():
    game = _game()
    colors = {
        "textures/Wall/Brick.xpm": (200, 0, 0),
        "textures/Floor/back.xpm": (0, 0, 50),
        "textures/Exit/exit.xpm": (0, 200, 0),
        "textures/Exit/lock.xpm": (0, 0, 200),
        "textures/Collectible/food.xpm": (200, 200, 0),
        player_texture(game.facing): (0, 200, 200),
    }
    surface = pygame.Surface((5 * TILE_SIZE, 3 * TILE_SIZE))
    renderer = Renderer(surface, loader=_Loader(colors))
    renderer.draw(game)

    def at(x, y):
        return tuple(surface.get_at((x * TILE_SIZE + 1, y * TILE_SIZE + 1)))[:3]

    assert at(0, 0) == (200, 0, 0)
    assert at(1, 1) == (0, 200, 200)
    assert at(2, 1) == (200, 200, 0)
    assert at(3, 1) == (0, 0, 200)

    game.move(Direction.RIGHT)
    renderer.draw(game)
    assert at(3, 1) == (0, 200, 0)
    assert at(1, 1) == (0, 0, 50)


def test_texture_is_cached():
    loader = _Loader({})
    renderer = Renderer(pygame.Surface((10, 10)), loader=loader)
    first = renderer.texture("wall")
    second = renderer.texture("wall")
    assert first is second
    assert loader.calls == ["textures/Wall/Brick.xpm"]


def test_texture_failure_reports_and_returns_none(capsys):
    def failing(path):
        raise FileNotFoundError(path)

    renderer = Renderer(pygame.Surface((10, 10)), loader=failing)
    assert renderer.texture("wall") is None
    assert "Failed to load wall image" in capsys.readouterr().out


def test_bonus_textures_follow_animation_frames():
    loader = _Loader({})
    renderer = Renderer(pygame.Surface((10, 10)), bonus=True, loader=loader)
    renderer.tick = 4
    renderer.texture("enemy")
    renderer.texture("collect")
    frame = frame_textures(4)
    assert loader.calls == [frame.enemy, frame.collectible]


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert main(["a.ber", "b.ber"]) == 1
    assert "Invalid argument" in capsys.readouterr().err


def test_main_rejects_wrong_suffix(capsys):
    assert main(["map.txt"]) == 1
    assert "Invalid Map File Format!!" in capsys.readouterr().err


def test_run_reports_open_border(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("11111\n0PCE1\n11111\n")
    assert run(path) == 1
    assert "Map should be closed with Walls from all 4 sides!!" in capsys.readouterr().err


def test_main_bonus_rejects_unreachable_exit(tmp_path, capsys):
    path = tmp_path / "blocked.ber"
    path.write_text("111111\n1PC1E1\n111111\n")
    assert main_bonus([str(path)]) == 1
    assert "Player cannot reach Exit!!" in capsys.readouterr().err


def test_plain_game_rejects_enemy(tmp_path, capsys):
    path = tmp_path / "enemy.ber"
    path.write_text("111111\n1PCEH1\n111111\n")
    assert main([str(path)]) == 1
    assert "Found an Unknown Variable in Map!!" in capsys.readouterr().err