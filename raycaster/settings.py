"""World constants, the level map and small angle helpers."""

PI = 3.1415926535897
TWO_PI = PI * 2
PI_OVER_2 = PI / 2

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
HALF_SCREEN_HEIGHT = SCREEN_HEIGHT // 2
HALF_SCREEN_WIDTH = SCREEN_WIDTH // 2

# Edge length of one map cell in world units.
BLOCK_SIZE = 64

MAP_WIDTH = 12
MAP_HEIGHT = 12

# Positive cells are walls (the value picks the wall texture); zero and
# negative cells are open floor (the absolute value picks floor/ceiling).
WORLD_MAP: tuple[tuple[int, ...], ...] = (
    (1, 5, 1, 1, 1, 4, 1, 2, 2, 2, 2, 2),
    (5, 0, 0, 3, 0, 0, 1, -3, -3, -3, -3, 2),
    (1, 0, 0, 0, 0, 0, 6, -3, -3, -3, -3, 2),
    (1, 0, 0, 3, 0, 0, 1, -3, -3, -3, -3, 2),
    (1, 5, 0, 3, 0, 0, 1, -3, -3, -3, -3, 2),
    (1, 0, 0, 3, 0, 0, 0, -3, -3, -3, -3, 2),
    (6, 0, 0, 3, 0, 0, 1, -3, -3, -2, -3, 2),
    (1, 0, 0, 0, 0, 0, 1, -3, -2, -2, -2, 2),
    (1, 0, 0, 3, 0, 0, 1, -3, -2, -2, -2, 2),
    (1, 0, 1, 1, 1, 1, 1, -3, -2, -3, -3, 2),
    (2, -1, -1, -1, -1, -1, -1, -3, -3, -3, -3, 2),
    (2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2, 2),
)


def wrap_angle(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into 0..2*PI."""
    if angle < 0.0:
        angle += TWO_PI
    if angle > TWO_PI:
        angle -= TWO_PI
    return angle


def map_cell(row: int, col: int) -> int:
    """Return the map value at ``row``, ``col``; raise IndexError outside the map."""
    if not (0 <= row < MAP_HEIGHT and 0 <= col < MAP_WIDTH):
        raise IndexError(f"cell ({row}, {col}) is outside the map")
    return WORLD_MAP[row][col]