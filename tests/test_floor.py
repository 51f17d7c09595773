import numpy as np
import pytest

from raycaster.floor import Floor
from raycaster.frame import FrameBuffer, Texture

COLOURS = [(0, 0, 250), (0, 250, 0), (250, 0, 0), (250, 250, 0)]


def _textures():
    return [Texture(np.full((16, 16, 3), colour, dtype=np.uint8)) for colour in COLOURS]


def _draw(frame, **overrides):
    floor = Floor()
    args = dict(wall_max_height=30, screen_distance=20, angle=0.0, ray_sin=0.0,
                ray_cos=1.0, player_x=100.0, player_y=100.0, textures=_textures(),
                ray_num=5, frame=frame, player_height=32, horizon=20)
    args.update(overrides)
    floor.draw(**args)
    return floor


def test_fills_column_below_wall():
    frame = FrameBuffer(32, 40)
    _draw(frame)
    column = frame.pixels[:, frame.width - 5]
    assert not column[:30].any()
    assert np.all(column[30:, 2] > 0)
    others = np.delete(frame.pixels, frame.width - 5, axis=1)
    assert not others.any()


def test_open_cell_uses_first_texture_with_fading():
    frame = FrameBuffer(32, 40)
    _draw(frame)
    column = frame.pixels[30:, frame.width - 5]
    assert not column[:, 0].any() and not column[:, 1].any()
    assert np.all(column[:, 2] <= 250)
    # Nearer rows (lower on screen) are brighter.
    assert column[-1, 2] >= column[0, 2]


def test_negative_cell_picks_texture_by_absolute_value():
    frame = FrameBuffer(32, 40)
    _draw(frame, player_x=544.0, player_y=96.0)
    column = frame.pixels[30:, frame.width - 5]
    assert np.all(column[:, 0] > 0)
    assert np.all(column[:, 1] > 0)
    assert not column[:, 2].any()


def test_distances_match_on_straight_ray():
    frame = FrameBuffer(32, 40)
    floor = _draw(frame)
    assert floor.straight_distance > 0
    assert floor.real_distance == pytest.approx(floor.straight_distance)


def test_wall_reaching_bottom_leaves_nothing():
    frame = FrameBuffer(32, 40)
    _draw(frame, wall_max_height=100)
    assert not frame.pixels.any()


def test_column_outside_frame_draws_nothing():
    frame = FrameBuffer(32, 40)
    _draw(frame, ray_num=0)
    assert not frame.pixels.any()