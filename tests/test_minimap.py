import pygame
import pytest

from raycaster.minimap import (
    FLOOR_COLOUR,
    MINIMAP_SCALE,
    PLAYER_COLOUR,
    WALL_COLOUR,
    MiniMap,
)
from raycaster.settings import MAP_HEIGHT, MAP_WIDTH, WORLD_MAP


def _rgb(colour):
    return tuple(colour)[:3]


def test_starts_hidden_and_toggles():
    minimap = MiniMap()
    assert minimap.show is False
    minimap.toggle()
    assert minimap.show is True
    minimap.toggle()
    assert minimap.show is False


def test_drawn_colours_match_the_source():
    minimap = MiniMap()
    surface = pygame.Surface((minimap.size_x, minimap.size_y))
    player_x, player_y = 3 * 64 + 10, 2 * 64 + 10
    minimap.draw(surface, player_x, player_y)

    width, height = minimap.cell_width, minimap.cell_height
    assert _rgb(surface.get_at((width // 2, height // 2))) == (87, 23, 5)
    assert _rgb(surface.get_at((width + width // 2, height + height // 2))) == (222, 191, 182)
    marker = minimap.player_rect(player_x, player_y)
    assert _rgb(surface.get_at(marker.topleft)) == (0, 255, 0)


def test_cells_tile_the_whole_map():
    minimap = MiniMap()
    cells = list(minimap.cells())
    assert len(cells) == MAP_WIDTH * MAP_HEIGHT
    union = cells[0][0].unionall([rect for rect, _ in cells[1:]])
    assert union == pygame.Rect(0, 0, minimap.size_x, minimap.size_y)
    assert sum(rect.width * rect.height for rect, _ in cells) == union.width * union.height


def test_cell_colours_follow_the_map():
    minimap = MiniMap()
    for index, (_, colour) in enumerate(minimap.cells()):
        value = WORLD_MAP[index // MAP_WIDTH][index % MAP_WIDTH]
        assert colour == (WALL_COLOUR if value > 0 else FLOOR_COLOUR)


def test_player_marker_size():
    assert MiniMap().player_size == (4, 4)


@pytest.mark.parametrize("cell", [(0, 0), (3, 7), (20, 15)])
def test_player_rect_scales_world_position(cell):
    x, y = cell
    rect = MiniMap().player_rect(x * MINIMAP_SCALE, y * MINIMAP_SCALE)
    assert rect.topleft == (x, y)


def test_player_rect_truncates_fractions():
    minimap = MiniMap()
    assert minimap.player_rect(MINIMAP_SCALE * 5 + 7.9, 3.0).topleft == (5, 0)


def test_draw_paints_walls_floor_and_player():
    minimap = MiniMap()
    surface = pygame.Surface((minimap.size_x, minimap.size_y))
    player_x, player_y = 3 * 64 + 10, 2 * 64 + 10
    minimap.draw(surface, player_x, player_y)

    width, height = minimap.cell_width, minimap.cell_height
    assert _rgb(surface.get_at((width // 2, height // 2))) == WALL_COLOUR
    assert _rgb(surface.get_at((width + width // 2, height + height // 2))) == FLOOR_COLOUR
    marker = minimap.player_rect(player_x, player_y)
    assert _rgb(surface.get_at(marker.topleft)) == PLAYER_COLOUR
    assert _rgb(surface.get_at((marker.right - 1, marker.bottom - 1))) == PLAYER_COLOUR