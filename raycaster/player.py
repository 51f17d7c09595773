"""The player: position, view angle, height and movement with collisions."""

import math
from dataclasses import dataclass, field

from raycaster.settings import (
    BLOCK_SIZE,
    MAP_HEIGHT,
    MAP_WIDTH,
    PI,
    PI_OVER_2,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WORLD_MAP,
    wrap_angle,
)

MOVE_SPEED = 120
STRAFE_SPEED = 60
TURN_SPEED = 2.5
LOOK_SPEED = 800
MAX_HEIGHT = 64


@dataclass
class Player:
    """Player state; ``angle`` is in radians with a positive sine pointing up the screen."""

    x: float = 100.0
    y: float = 100.0
    angle: float = 5.0
    width: int = 8
    height: int = 32
    depth: int = 8
    fov: float = PI / 3
    half_fov: float = field(init=False)
    screen_distance: float = field(init=False)
    horizon: float = field(init=False)
    pitch: int = 0
    crouch_state: bool = False
    fly_state: bool = False

    def __post_init__(self) -> None:
        self.half_fov = self.fov / 2
        self.screen_distance = (SCREEN_WIDTH // 2) / math.tan(self.half_fov)
        self.horizon = SCREEN_HEIGHT // 2

    def collides(self, x, y, direction, elapsed):
        """Return True when position ``x``, ``y`` is inside a wall or outside the map."""
        row = math.floor(y / BLOCK_SIZE)
        col = math.floor(x / BLOCK_SIZE)
        if not (0 <= row < MAP_HEIGHT and 0 <= col < MAP_WIDTH):
            return True
        return WORLD_MAP[row][col] > 0

    def crouch(self):
        """Lower the camera by one unit."""
        if self.height > 0:
            self.height -= 1
            self.pitch -= 4

    def fly(self):
        """Raise the camera by one unit, up to the height of a block."""
        if self.height < MAX_HEIGHT:
            self.height += 1
            self.pitch += 4

    def look_up(self, elapsed):
        if self.horizon < SCREEN_HEIGHT - 5:
            self.horizon += LOOK_SPEED * elapsed

    def look_down(self, elapsed):
        if self.horizon > 5:
            self.horizon -= LOOK_SPEED * elapsed

    def rotate_left(self, elapsed):
        self.angle = wrap_angle(self.angle + TURN_SPEED * elapsed)

    def rotate_right(self, elapsed):
        self.angle = wrap_angle(self.angle - TURN_SPEED * elapsed)

    def _step(self, direction, speed, elapsed, check_direction):
        new_x = self.x + math.cos(direction) * elapsed * speed
        new_y = self.y - math.sin(direction) * elapsed * speed
        if not self.collides(new_x, new_y, check_direction, elapsed):
            self.x, self.y = new_x, new_y

    def move_left(self, elapsed):
        direction = wrap_angle(self.angle + PI_OVER_2 + 0.001)
        self._step(direction, STRAFE_SPEED, elapsed, direction)

    def move_right(self, elapsed):
        direction = wrap_angle(self.angle - PI_OVER_2 + 0.001)
        self._step(direction, STRAFE_SPEED, elapsed, direction)

    def move_forward(self, elapsed):
        self._step(self.angle + 0.001, MOVE_SPEED, elapsed, self.angle)

    def move_backward(self, elapsed):
        direction = wrap_angle(self.angle - PI + 0.001)
        self._step(direction, MOVE_SPEED, elapsed, direction)