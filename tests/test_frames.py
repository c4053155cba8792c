import pytest

from solong.frames import FRAME_COUNT, frame_textures


def test_first_tick_textures():
    frame = frame_textures(1)
    assert frame.enemy == "textures/Enemy/E1.xpm"
    assert frame.collectible == "textures/Collectible/Star_B3.xpm"


def test_tick_zero_uses_last_enemy_frame():
    frame = frame_textures(0)
    assert frame.enemy == "textures/Enemy/E15.xpm"
    assert frame.collectible == "textures/Collectible/Star_B2.xpm"


def test_middle_tick_textures():
    frame = frame_textures(8)
    assert frame.enemy == "textures/Enemy/E8.xpm"
    assert frame.collectible == "textures/Collectible/Star_U4.xpm"


@pytest.mark.parametrize("tick", range(0, 40))
def test_frames_repeat(tick):
    assert frame_textures(tick) == frame_textures(tick + FRAME_COUNT)


def test_every_enemy_frame_is_distinct():
    enemies = {frame_textures(t).enemy for t in range(FRAME_COUNT)}
    assert len(enemies) == FRAME_COUNT


def test_collectible_paths_live_in_collectible_folder():
    for tick in range(FRAME_COUNT):
        path = frame_textures(tick).collectible
        assert path.startswith("textures/Collectible/")
        assert path.endswith(".xpm")


def test_negative_tick_is_rejected():
    with pytest.raises(ValueError):
        frame_textures(-1)