"""Animation frames for the enemy and collectible sprites."""

from __future__ import annotations

from typing import NamedTuple

FRAME_COUNT = 15

_ENEMY_DIR = "textures/Enemy"
_COLLECT_DIR = "textures/Collectible"


class FrameTextures(NamedTuple):
    """Texture paths shown for one animation tick."""

    enemy: str
    collectible: str


# Indexed by tick modulo the frame count; index 0 is the last frame.
_STAR_FRAMES = (
    "Star_B2",
    "Star_B3",
    "Star_B2",
    "Star_B1",
    "Star",
    "Star_U1",
    "Star_U2",
    "Star_U3",
    "Star_U4",
    "Star_U3",
    "Star_U2",
    "Star_U1",
    "Star",
    "Star",
    "Star_B1",
)


def frame_textures(tick: int) -> FrameTextures:
    """Return the enemy and collectible textures for animation ``tick``."""
    if tick < 0:
        raise ValueError("tick must not be negative")
    step = tick % FRAME_COUNT
    enemy_number = step if step else FRAME_COUNT
    return FrameTextures(
        enemy=f"{_ENEMY_DIR}/E{enemy_number}.xpm",
        collectible=f"{_COLLECT_DIR}/{_STAR_FRAMES[step]}.xpm",
    )