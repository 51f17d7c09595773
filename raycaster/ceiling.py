"""Drawing the textured ceiling or sky above one wall column.

The ceiling is the floor seen upside down: a pixel on screen row ``y`` above
the horizon lies at straight distance
``(block - height) * screen_distance / (horizon - y)`` from the player. Cells
whose absolute map value is below 2 get a ceiling texture; the rest show the
sky background, which scrolls with the view angle and is not faded.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from raycaster.frame import Texture
from raycaster.settings import BLOCK_SIZE, MAP_HEIGHT, MAP_WIDTH, WORLD_MAP

SKY_BACKGROUND_PATH = "textures/skyBackground.png"

# Map values at or above this show the sky instead of a ceiling texture.
_FIRST_SKY_KIND = 2

_WORLD = np.array(WORLD_MAP, dtype=np.int64)


@dataclass
class Ceiling:
    """Draws ceiling columns and remembers the distances of the last pixel drawn."""

    background: Texture | None = None
    straight_distance: float = 0.0
    real_distance: float = 0.0

    def draw(self, wall_min_height, screen_distance, angle, ray_sin, ray_cos, player_x,
             player_y, textures, ray_num, frame, player_height, horizon, player_angle):
        """Fill column ``ray_num`` of ``frame`` from just above the wall up towards the top.

        ``textures`` is indexed by the absolute map value of the cell above each
        point; sky cells sample ``background`` when one is set.
        """
        if wall_min_height < 0:
            wall_min_height = 0

        column = frame.width - ray_num
        difference = int(wall_min_height)
        if difference <= 0:
            return

        steps = np.arange(difference)
        with np.errstate(divide="ignore", invalid="ignore"):
            straight = ((BLOCK_SIZE - player_height) * screen_distance) / (
                horizon - (wall_min_height - steps + 0.001)
            )
            real = straight / math.cos(angle)
        self.straight_distance = float(straight[-1])
        self.real_distance = float(real[-1])

        if not 0 <= column < frame.width:
            return

        ceil_x = player_x + ray_cos * real
        ceil_y = player_y - ray_sin * real
        valid = np.isfinite(ceil_x) & np.isfinite(ceil_y)
        ceil_x = np.where(valid, ceil_x, -2.0 * BLOCK_SIZE)
        ceil_y = np.where(valid, ceil_y, -2.0 * BLOCK_SIZE)

        map_row = np.trunc(ceil_y / BLOCK_SIZE).astype(np.int64)
        map_col = np.trunc(ceil_x / BLOCK_SIZE).astype(np.int64)
        screen_rows = int(wall_min_height) - steps
        valid &= (map_row >= 0) & (map_row < MAP_HEIGHT)
        valid &= (map_col >= 0) & (map_col < MAP_WIDTH)
        valid &= (screen_rows >= 0) & (screen_rows < frame.height)
        if not valid.any():
            return

        kinds = np.full(difference, -1, dtype=np.int64)
        kinds[valid] = np.abs(_WORLD[map_row[valid], map_col[valid]])

        self._draw_textured(kinds, valid, ceil_x, ceil_y, real, textures, screen_rows,
                            column, frame)
        self._draw_sky(kinds, valid, steps, screen_rows, column, frame, player_angle)

    @staticmethod
    def _draw_textured(kinds, valid, ceil_x, ceil_y, real, textures, screen_rows, column,
                       frame):
        x_offsets = np.trunc(ceil_x).astype(np.int64) % BLOCK_SIZE
        y_offsets = np.trunc(ceil_y).astype(np.int64) % BLOCK_SIZE
        fading = 1 + (real / 4) ** 2 * 0.00004

        for kind in np.unique(kinds[valid]):
            if kind >= _FIRST_SKY_KIND or kind >= len(textures):
                continue
            texture = textures[kind]
            chosen = kinds == kind
            tex_x = x_offsets[chosen] * texture.width // BLOCK_SIZE
            tex_y = y_offsets[chosen] * texture.height // BLOCK_SIZE
            colours = texture.pixels[tex_y, tex_x, :3] / fading[chosen][:, None]
            frame.pixels[screen_rows[chosen], column] = colours.astype(np.uint8)

    def _draw_sky(self, kinds, valid, steps, screen_rows, column, frame, player_angle):
        if self.background is None:
            return
        sky = valid & (kinds >= _FIRST_SKY_KIND)
        if not sky.any():
            return
        background = self.background
        half_height = max(1, frame.height // 2)
        tex_x = (int(player_angle + column) % frame.width) % background.width
        tex_y = (steps[sky] % half_height) % background.height
        frame.pixels[screen_rows[sky], column] = background.pixels[tex_y, tex_x, :3]