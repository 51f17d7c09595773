"""Drawing the textured floor below one wall column.

A floor pixel on screen row ``y`` lies, by similar triangles, at straight
distance ``height * screen_distance / (y - horizon)`` from the player; dividing
by the cosine of the ray's angle to the view direction gives the distance along
the ray, and walking that far from the player finds the world point to sample.
"""

import math
from dataclasses import dataclass

import numpy as np

from raycaster.settings import BLOCK_SIZE, MAP_HEIGHT, MAP_WIDTH, WORLD_MAP

_WORLD = np.array(WORLD_MAP, dtype=np.int64)


@dataclass
class Floor:
    """Draws floor columns and remembers the distances of the last pixel drawn."""

    straight_distance: float = 0.0
    real_distance: float = 0.0
    texture_size: int = 128

    @property
    def texture_size_half(self) -> int:
        return self.texture_size // 2

    def draw(self, wall_max_height, screen_distance, angle, ray_sin, ray_cos, player_x,
             player_y, textures, ray_num, frame, player_height, horizon):
        """Fill column ``ray_num`` of ``frame`` from just below the wall to the bottom.

        The absolute value of the map cell under each floor point picks the
        texture from ``textures``.
        """
        if wall_max_height >= frame.height:
            wall_max_height = frame.height

        column = frame.width - ray_num
        difference = int(frame.height - wall_max_height)
        if difference <= 0:
            return

        steps = np.arange(difference)
        with np.errstate(divide="ignore", invalid="ignore"):
            straight = (player_height * screen_distance) / (
                wall_max_height + steps - horizon + 0.001
            )
            real = straight / math.cos(angle)
        self.straight_distance = float(straight[-1])
        self.real_distance = float(real[-1])

        if not 0 <= column < frame.width:
            return

        floor_x = player_x + ray_cos * real
        floor_y = player_y - ray_sin * real
        valid = np.isfinite(floor_x) & np.isfinite(floor_y)
        floor_x = np.where(valid, floor_x, -2.0 * BLOCK_SIZE)
        floor_y = np.where(valid, floor_y, -2.0 * BLOCK_SIZE)

        map_row = np.trunc(floor_y / BLOCK_SIZE).astype(np.int64)
        map_col = np.trunc(floor_x / BLOCK_SIZE).astype(np.int64)
        screen_rows = int(wall_max_height) + steps
        valid &= (map_row >= 0) & (map_row < MAP_HEIGHT)
        valid &= (map_col >= 0) & (map_col < MAP_WIDTH)
        valid &= (screen_rows >= 0) & (screen_rows < frame.height)
        if not valid.any():
            return

        kinds = np.full(difference, -1, dtype=np.int64)
        kinds[valid] = np.abs(_WORLD[map_row[valid], map_col[valid]])
        x_offsets = np.trunc(floor_x).astype(np.int64) % BLOCK_SIZE
        y_offsets = np.trunc(floor_y).astype(np.int64) % BLOCK_SIZE
        fading = 1 + (real / 4) ** 2 * 0.00004

        for kind in np.unique(kinds[valid]):
            if kind >= len(textures):
                continue
            texture = textures[kind]
            chosen = kinds == kind
            tex_x = x_offsets[chosen] * texture.width // BLOCK_SIZE
            tex_y = y_offsets[chosen] * texture.height // BLOCK_SIZE
            colours = texture.pixels[tex_y, tex_x, :3] / fading[chosen][:, None]
            frame.pixels[screen_rows[chosen], column] = colours.astype(np.uint8)