# solong

A small top-down puzzle game drawn with pygame. Walk around a walled map,
pick up every collectible, and step onto the exit. The exit stays locked
until the last collectible has been taken. The bonus mode also accepts
enemy tiles: stepping onto one loses the game. In bonus mode the enemy and
collectible sprites are animated and the score is drawn in the window.

## Installing

```
pip install .
```

## Playing

```
so_long maps/your_map.ber
so_long_bonus maps/your_map.ber
```

Each command takes exactly one argument, the path of a map file. With any
other number of arguments it prints `Error` and `Invalid argument` to
standard error and exits with status 1. A map that fails its checks is
reported the same way, with the reason on the second line.

Controls:

- `W` / `↑`: move up
- `S` / `↓`: move down
- `A` / `←`: move left
- `D` / `→`: move right
- `Esc` or closing the window gives up

Every successful move prints `Moves: <n>`. Bumping into a wall, or into the
exit while it is still locked, turns the player but does not count as a
move. Reaching the exit prints a winning banner and ends the game;
touching an enemy prints a losing banner. Giving up prints a short message
saying how you quit. In all of these cases the command exits with status 0.

In bonus mode the window also shows `No. of Moves: <n>` and
`Star Collected: <n>` in its top-left corner.

## Textures

Tile images are loaded with `pygame.image.load` from paths under a
`textures/` directory, relative to the directory the game is started from:

- `textures/Floor/back.xpm`, `textures/Wall/Brick.xpm`
- `textures/Exit/exit.xpm`, `textures/Exit/lock.xpm` (drawn over the exit
  while collectibles remain)
- `textures/Collectible/food.xpm` (normal mode)
- `textures/Collectible/Star*.xpm` and `textures/Enemy/E1.xpm` to
  `E15.xpm` (bonus animation frames)
- `textures/Player/player_R.xpm`, `player_L.xpm`, `player_U.xpm`,
  `player_D.xpm` (the player faces the direction of the last key pressed)

An image that cannot be loaded is reported once, for example
`Failed to load wall image`, and is then left out of the drawing.

## What is not included

The package ships no texture images and no map files; you have to provide
both. Enemies never move: they are fixed tiles that only animate.

## Map files

A map is a text file whose name ends in `.ber`. Each non-empty line is one
row of tiles:

| Char | Tile                         |
|------|------------------------------|
| `1`  | wall                         |
| `0`  | floor                        |
| `P`  | player start (exactly one)   |
| `C`  | collectible (at least one)   |
| `E`  | exit (exactly one)           |
| `H`  | enemy (bonus mode only)      |

A map is rejected, in this order of checking, when:

- its rows do not all have the same width;
- it has fewer than 3 or more than 21 rows, or fewer than 3 or more than
  40 columns;
- it is not closed by walls on all four sides;
- it does not have exactly one player, exactly one exit and at least one
  collectible (all count problems are reported together);
- it contains any other character;
- the player cannot reach every collectible, or cannot reach the exit.
  Enemies and the exit block the path for this check.

Example:

```
1111111111
1P0C00C001
1011110101
1C000000E1
1111111111
```

## Using it as a library

```python
from solong.validate import load_game_map
from solong.game import Game, Direction

game = Game(load_game_map("maps/level.ber", allow_enemies=False))
game.move(Direction.RIGHT)
print(game.hud_lines())
print(game.outcome, game.collected(), game.moves)
```

- `solong.mapfile`: `check_map_file`, `read_map` and `parse_map`, which
  turn a list of row strings into a `GameMap` without touching the file
  system. Problems are raised as `MapError`, whose `messages` attribute
  holds each reason.
- `solong.validate`: `check_path` (reachability), `load_game_map` (all
  checks on a file) and `exit_position`, which classifies a cell by which
  of its four neighbours are walls.
- `solong.game`: `Game` with `move`, `handle_key`, `collected`,
  `hud_lines` and `status_message`; `Direction`, `Outcome`,
  `direction_for_key`, `initial_facing` and `player_texture`.
- `solong.frames`: `frame_textures(tick)` gives the enemy and collectible
  texture paths for an animation tick.
- `solong.display`: `Renderer`, `tile_layers`, `window_size`,
  `give_up_message`, `run`, `main` and `main_bonus`.

## Running the tests

```
pip install .[test]
pytest
```