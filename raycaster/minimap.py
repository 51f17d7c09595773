"""An overhead map of the level drawn in the corner of the view."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

import pygame

from raycaster.settings import BLOCK_SIZE, MAP_HEIGHT, MAP_WIDTH, WORLD_MAP

WALL_COLOUR = (87, 23, 5)
FLOOR_COLOUR = (222, 191, 182)
PLAYER_COLOUR = (0, 255, 0)

# World units per minimap pixel: a 1536-unit world on a 192-pixel map.
MINIMAP_SCALE = 8
# Enlargement of the player marker so it stays visible.
PLAYER_SCALE = 4


@dataclass
class MiniMap:
    """The map's cells as coloured squares with the player as a green square."""

    size_x: int = 192
    size_y: int = 192
    show: bool = False

    @property
    def cell_width(self) -> int:
        return self.size_x // MAP_WIDTH

    @property
    def cell_height(self) -> int:
        return self.size_y // MAP_HEIGHT

    @property
    def player_size(self) -> tuple[int, int]:
        width = math.ceil(self.cell_width / BLOCK_SIZE) * PLAYER_SCALE
        height = math.ceil(self.cell_height / BLOCK_SIZE) * PLAYER_SCALE
        return width, height

    def toggle(self):
        """Show the minimap if hidden, hide it if shown."""
        self.show = not self.show

    def player_rect(self, player_x, player_y):
        """Return the square marking a player at world position ``player_x``, ``player_y``."""
        width, height = self.player_size
        return pygame.Rect(int(player_x / MINIMAP_SCALE), int(player_y / MINIMAP_SCALE),
                           width, height)

    def cells(self) -> Iterator[tuple[pygame.Rect, tuple[int, int, int]]]:
        """Yield each map cell's square and colour, row by row."""
        for row, values in enumerate(WORLD_MAP):
            for col, value in enumerate(values):
                rect = pygame.Rect(col * self.cell_width, row * self.cell_height,
                                   self.cell_width, self.cell_height)
                yield rect, WALL_COLOUR if value > 0 else FLOOR_COLOUR

    def draw(self, surface, player_x, player_y):
        """Paint the map and then the player onto ``surface``."""
        for rect, colour in self.cells():
            surface.fill(colour, rect)
        surface.fill(PLAYER_COLOUR, self.player_rect(player_x, player_y))