"""Pixel storage for the rendered view and for loaded textures."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import pygame

from raycaster.settings import SCREEN_HEIGHT, SCREEN_WIDTH


@dataclass
class FrameBuffer:
    """An RGB image the renderer draws into, stored as rows of pixels."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    pixels: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the frame")

    def put(self, x, y, rgb):
        """Set the pixel at column ``x``, row ``y`` to an (r, g, b) colour."""
        self._check(x, y)
        self.pixels[y, x] = rgb

    def get(self, x, y):
        """Return the (r, g, b) colour at column ``x``, row ``y``."""
        self._check(x, y)
        r, g, b = self.pixels[y, x]
        return int(r), int(g), int(b)

    def clear(self):
        """Paint the whole frame black."""
        self.pixels.fill(0)


@dataclass
class Texture:
    """An image sampled by walls, floors and ceilings; ``pixels`` is rows x columns x channels."""

    pixels: np.ndarray

    def __post_init__(self) -> None:
        self.pixels = np.asarray(self.pixels, dtype=np.uint8)
        if self.pixels.ndim != 3 or self.pixels.shape[2] < 3:
            raise ValueError("texture pixels must have shape (height, width, channels>=3)")
        if self.pixels.shape[0] == 0 or self.pixels.shape[1] == 0:
            raise ValueError("texture must not be empty")

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @classmethod
    def from_file(cls, path):
        """Load an image file as a texture."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"texture not found: {path}")
        surface = pygame.image.load(str(path))
        columns = pygame.surfarray.array3d(surface)
        return cls(np.ascontiguousarray(columns.transpose(1, 0, 2)))

    def texel(self, x, y):
        """Return the (r, g, b) colour at texture column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) is outside the texture")
        r, g, b = self.pixels[y, x, :3]
        return int(r), int(g), int(b)