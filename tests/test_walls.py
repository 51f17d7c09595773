import numpy as np
import pytest

from raycaster.frame import FrameBuffer, Texture
from raycaster.walls import MAX_WALL_SPAN, Wall


def _striped_texture():
    pixels = np.zeros((64, 64, 3), dtype=np.uint8)
    pixels[:, :, 0] = (np.arange(64) * 3)[None, :]
    pixels[:, :, 1] = 100
    return Texture(pixels)


def _draw(frame, **overrides):
    wall = Wall()
    args = dict(ray_num=10, depth=64, screen_distance=20, frame=frame, ray_x=5,
                ray_y=5, horizon=24, vertical_hit=True, texture=_striped_texture())
    args.update(overrides)
    wall.draw(**args)
    return wall


def test_slice_lands_in_mirrored_column():
    frame = FrameBuffer(64, 48)
    wall = _draw(frame)
    column = frame.width - 10
    drawn = np.flatnonzero(frame.pixels[:, column, 1])
    assert len(drawn) == wall.difference
    assert drawn[0] == int(wall.min_height)
    assert drawn[-1] == int(wall.max_height) - 1
    others = np.delete(frame.pixels, column, axis=1)
    assert not others.any()


def test_slice_is_centred_on_horizon():
    frame = FrameBuffer(64, 48)
    wall = _draw(frame)
    assert abs((wall.min_height + wall.max_height) / 2 - 24) <= 1
    assert abs((wall.max_height - wall.min_height) - wall.projection) <= 1


def test_far_walls_are_darker():
    near_frame = FrameBuffer(64, 48)
    far_frame = FrameBuffer(64, 48)
    _draw(near_frame, depth=64)
    wall = _draw(far_frame, depth=500)
    column = near_frame.width - 10
    row = int((wall.min_height + wall.max_height) // 2)
    near = near_frame.pixels[row, column, 1]
    far = far_frame.pixels[row, column, 1]
    assert 0 < far < near <= 100


def test_vertical_hit_uses_y_and_horizontal_uses_x():
    vertical = FrameBuffer(64, 48)
    horizontal = FrameBuffer(64, 48)
    other = FrameBuffer(64, 48)
    _draw(vertical, ray_x=40, ray_y=10, vertical_hit=True)
    _draw(horizontal, ray_x=10, ray_y=40, vertical_hit=False)
    _draw(other, ray_x=40, ray_y=10, vertical_hit=False)
    assert np.array_equal(vertical.pixels, horizontal.pixels)
    assert not np.array_equal(vertical.pixels, other.pixels)


def test_tall_wall_is_clipped_to_frame():
    frame = FrameBuffer(64, 48)
    wall = _draw(frame, depth=10)
    assert wall.min_height < 0 and wall.max_height > frame.height
    assert np.all(frame.pixels[:, frame.width - 10, 1] > 0)


def test_overly_tall_wall_is_skipped():
    frame = FrameBuffer(64, 48)
    wall = _draw(frame, depth=0)
    assert wall.difference > MAX_WALL_SPAN
    assert not frame.pixels.any()


@pytest.mark.parametrize("ray_num", [0, 100])
def test_column_outside_frame_draws_nothing(ray_num):
    frame = FrameBuffer(64, 48)
    _draw(frame, ray_num=ray_num)
    assert not frame.pixels.any()