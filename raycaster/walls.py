"""Drawing one textured wall column of the view."""

import math
from dataclasses import dataclass

import numpy as np

from raycaster.settings import BLOCK_SIZE

# Walls projected taller than this are skipped.
MAX_WALL_SPAN = 10000


@dataclass
class Wall:
    """Draws wall slices and remembers the extent of the last one drawn."""

    projection: float = 0.0
    min_height: float = 0.0
    max_height: float = 0.0
    difference: int = 0
    texture_size: int = 128

    @property
    def texture_size_half(self) -> int:
        return self.texture_size // 2

    def draw(self, ray_num, depth, screen_distance, frame, ray_x, ray_y, horizon,
             vertical_hit, texture):
        """Draw the wall slice hit by ray ``ray_num`` at ``depth`` into ``frame``.

        The texture column comes from the hit's y coordinate on vertical hits
        and from its x coordinate on horizontal ones; colours fade with depth.
        """
        self.projection = (BLOCK_SIZE * screen_distance) / (depth + 0.0001)
        fading = 1 + (depth / 4) ** 2 * 0.00004

        self.max_height = float(math.floor(horizon + self.projection / 2))
        self.min_height = float(math.floor(horizon - self.projection / 2))
        self.difference = int(self.max_height - self.min_height)

        column = frame.width - ray_num
        if self.difference > MAX_WALL_SPAN or not 0 <= column < frame.width:
            return

        offset = int(ray_y if vertical_hit else ray_x)
        tex_x = ((offset % BLOCK_SIZE) * texture.width) // BLOCK_SIZE

        span = np.arange(self.difference)
        rows = int(self.min_height) + span
        visible = (rows >= 0) & (rows < frame.height)
        span, rows = span[visible], rows[visible]
        if span.size == 0:
            return

        scale = max(1, int(self.projection))
        tex_y = np.minimum((span * texture.height) // scale, texture.height - 1)
        colours = texture.pixels[tex_y, tex_x, :3] / fading
        frame.pixels[rows, column] = colours.astype(np.uint8)