"""Grid ray casting against the level map."""

import math
from dataclasses import dataclass

from raycaster.settings import BLOCK_SIZE, MAP_HEIGHT, MAP_WIDTH, WORLD_MAP

# Rays longer than this are not followed further.
MAX_RAY_LENGTH = 1536
MAX_STEPS = 25


def _cell(value: float) -> int:
    if not math.isfinite(value):
        return -1
    return math.floor(value / BLOCK_SIZE)


def _is_wall(row: int, col: int) -> bool:
    return 0 <= row < MAP_HEIGHT and 0 <= col < MAP_WIDTH and WORLD_MAP[row][col] > 0


@dataclass
class Ray:
    """A ray cast from the player; holds the nearest wall hit it found.

    Angles grow clockwise on screen: a positive sine points towards smaller y.
    """

    direction: float = 0.0
    delta_ray: float = 0.0
    vertical_distance: float = 0.0
    horizontal_distance: float = 0.0
    wall_hit_x: float = 0.0
    wall_hit_y: float = 0.0
    cos_angle: float = 0.0
    sin_angle: float = 0.0
    wall_row: int = 0
    wall_col: int = 0

    @property
    def hit_vertical(self) -> bool:
        """True when the nearest hit is on a vertical grid line."""
        return not self.horizontal_distance < self.vertical_distance

    def vertical_wall_check(self, player_x, player_y, sin_a, cos_a):
        """Find the nearest wall crossing a vertical grid line and record the hit."""
        if cos_a == 0:
            self.vertical_distance = math.inf
            return

        col = _cell(player_x)
        if cos_a > 0:
            xa = (col + 1) * BLOCK_SIZE
            dx = BLOCK_SIZE
        else:
            xa = col * BLOCK_SIZE
            dx = -BLOCK_SIZE
        step_back = 1 if cos_a < 0 else 0
        sin_a = -sin_a

        hypotenuse = (xa - player_x) / cos_a
        ya = player_y + hypotenuse * sin_a
        wall_row = _cell(ya)
        wall_col = _cell(xa) - step_back
        found = _is_wall(wall_row, wall_col)

        if not found:
            step = dx / cos_a
            dy = step * sin_a
            steps = 0
            while not found and steps < MAX_STEPS and hypotenuse < MAX_RAY_LENGTH:
                hypotenuse += step
                xa += dx
                ya += dy
                wall_row = _cell(ya)
                wall_col = _cell(xa) - step_back
                found = _is_wall(wall_row, wall_col)
                steps += 1

        self.vertical_distance = hypotenuse
        self.wall_row = wall_row
        self.wall_col = wall_col
        self.wall_hit_x = xa
        self.wall_hit_y = ya

    def horizontal_wall_check(self, player_x, player_y, sin_a, cos_a):
        """Find the nearest wall crossing a horizontal grid line.

        The hit is recorded only when it is closer than the vertical one.
        """
        if sin_a == 0:
            self.horizontal_distance = math.inf
            return

        row = _cell(player_y)
        if sin_a < 0:
            ya = (row + 1) * BLOCK_SIZE
            dy = BLOCK_SIZE
        else:
            ya = row * BLOCK_SIZE
            dy = -BLOCK_SIZE
        step_back = 1 if sin_a > 0 else 0
        cos_a = -cos_a

        hypotenuse = (ya - player_y) / sin_a
        xa = player_x + hypotenuse * cos_a
        wall_row = _cell(ya) - step_back
        wall_col = _cell(xa)
        found = _is_wall(wall_row, wall_col)

        if not found:
            step = dy / sin_a
            dx = step * cos_a
            steps = 0
            while not found and steps < MAX_STEPS and abs(hypotenuse) < MAX_RAY_LENGTH:
                hypotenuse += step
                xa += dx
                ya += dy
                wall_row = _cell(ya) - step_back
                wall_col = _cell(xa)
                found = _is_wall(wall_row, wall_col)
                steps += 1

        self.horizontal_distance = abs(hypotenuse)
        if self.horizontal_distance < self.vertical_distance:
            self.wall_row = wall_row
            self.wall_col = wall_col
            self.wall_hit_x = xa
            self.wall_hit_y = ya

    def cast(self, player_x, player_y):
        """Cast along ``direction`` from the player and return the distance to the wall."""
        self.cos_angle = math.cos(self.direction)
        self.sin_angle = math.sin(self.direction)
        self.vertical_wall_check(player_x, player_y, self.sin_angle, self.cos_angle)
        self.horizontal_wall_check(player_x, player_y, self.sin_angle, self.cos_angle)
        return min(self.horizontal_distance, self.vertical_distance)