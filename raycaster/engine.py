"""The game: window, keyboard input and the per-frame render loop."""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path

import pygame

from raycaster.ceiling import SKY_BACKGROUND_PATH, Ceiling
from raycaster.floor import Floor
from raycaster.frame import FrameBuffer, Texture
from raycaster.minimap import MiniMap
from raycaster.player import Player
from raycaster.ray import Ray
from raycaster.settings import SCREEN_HEIGHT, SCREEN_WIDTH, map_cell, wrap_angle
from raycaster.walls import Wall

WALL_TEXTURES = (
    "default_acacia_wood.png",
    "bricksx64.png",
    "default_aspen_wood.png",
    "default_furnace_front.png",
    "default_bookshelf.png",
    "doors_door_wood.png",
)
FLOOR_TEXTURES = (
    "default_stone_block.png",
    "default_rainforest_litter.png",
    "default_river_water.png",
    "default_rainforest_litter.png",
)
CEILING_TEXTURES = (
    "default_acacia_wood.png",
    "default_aspen_leaves.png",
    "skyBackground.png",
    "skyBackground.png",
)

WINDOW_TITLE = "Ray Caster"
FRAME_RATE = 60


class RayCaster:
    """Owns the world objects and renders one view per frame."""

    def __init__(self, texture_dir="textures", width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        self.texture_dir = Path(texture_dir)
        self.frame = FrameBuffer(width, height)
        self.player = Player()
        self.ray = Ray()
        self.minimap = MiniMap()
        self.wall = Wall()
        self.floor = Floor()
        self.ceiling = Ceiling()

        self.wall_images: list[Texture | None] = [None] * len(WALL_TEXTURES)
        self.floor_textures: list[Texture | None] = [None] * len(FLOOR_TEXTURES)
        self.ceiling_textures: list[Texture | None] = [None] * len(CEILING_TEXTURES)

        self.elapsed = 0.0
        self.running = True

        self.ray.delta_ray = self.player.fov / self.frame.width
        self.ray.direction = self.player.angle - self.player.half_fov + 0.001

    @property
    def textures_loaded(self) -> bool:
        """True when every wall, floor and ceiling texture slot is filled."""
        slots = (*self.wall_images, *self.floor_textures, *self.ceiling_textures)
        return all(texture is not None for texture in slots)

    def load_images(self):
        """Load every texture that is not loaded yet from the texture directory."""
        for slots, names in (
            (self.wall_images, WALL_TEXTURES),
            (self.floor_textures, FLOOR_TEXTURES),
            (self.ceiling_textures, CEILING_TEXTURES),
        ):
            for index, name in enumerate(names):
                if slots[index] is None:
                    slots[index] = Texture.from_file(self.texture_dir / name)
        if self.ceiling.background is None:
            self.ceiling.background = Texture.from_file(
                self.texture_dir / Path(SKY_BACKGROUND_PATH).name
            )

    def ray_direction_setup(self):
        """Point the first ray at the left edge of the field of view."""
        self.ray.direction = wrap_angle(self.player.angle - self.player.half_fov + 0.001)

    def apply_keys(self, pressed):
        """Move and turn the player for every held key; ``pressed`` is indexed by key code."""
        player = self.player
        elapsed = self.elapsed
        actions = (
            (pygame.K_w, player.move_forward),
            (pygame.K_s, player.move_backward),
            (pygame.K_a, player.move_left),
            (pygame.K_d, player.move_right),
            (pygame.K_UP, player.look_up),
            (pygame.K_DOWN, player.look_down),
        )
        for key, action in actions:
            if pressed[key]:
                action(elapsed)
        if pressed[pygame.K_LEFT]:
            player.rotate_left(elapsed)
            self.ray_direction_setup()
        if pressed[pygame.K_RIGHT]:
            player.rotate_right(elapsed)
            self.ray_direction_setup()

    def handle_key_down(self, key):
        """React to a single key press: minimap, crouch and fly."""
        if key == pygame.K_m:
            self.minimap.toggle()
        if key == pygame.K_c:
            self.player.crouch()
        if key == pygame.K_f:
            self.player.fly()

    def _wall_texture(self):
        try:
            value = map_cell(self.ray.wall_row, self.ray.wall_col)
        except IndexError:
            return None
        if value <= 0:
            return None
        return self.wall_images[value - 1]

    def draw_screen(self):
        """Cast one ray per frame column and draw its wall, floor and ceiling."""
        if not self.textures_loaded:
            raise RuntimeError("textures are not loaded")
        player = self.player
        ray = self.ray
        frame = self.frame
        for ray_num in range(frame.width):
            depth = ray.cast(player.x, player.y)
            # Project onto the view direction to remove the fish-eye distortion.
            depth *= math.cos(player.angle - ray.direction)

            texture = self._wall_texture()
            if texture is not None:
                self.wall.draw(ray_num, depth, player.screen_distance, frame,
                               ray.wall_hit_x, ray.wall_hit_y, player.horizon,
                               ray.hit_vertical, texture)

            angle = abs(player.angle - ray.direction)
            self.floor.draw(self.wall.max_height + 1, player.screen_distance, angle,
                            ray.sin_angle, ray.cos_angle, player.x, player.y,
                            self.floor_textures, ray_num, frame, player.height,
                            player.horizon)
            self.ceiling.draw(self.wall.min_height - 1, player.screen_distance, angle,
                              ray.sin_angle, ray.cos_angle, player.x, player.y,
                              self.ceiling_textures, ray_num, frame, player.height,
                              player.horizon, player.angle)

            ray.direction += ray.delta_ray

    def cast_rays(self):
        """Render the current view into the frame buffer and return it."""
        self.ray_direction_setup()
        self.load_images()
        self.draw_screen()
        return self.frame

    def event_loop(self):
        """Process pending window events, then apply held keys."""
        pressed = pygame.key.get_pressed()
        for event in pygame.event.get():
            if event.type == pygame.QUIT or pressed[pygame.K_ESCAPE]:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                else:
                    self.handle_key_down(event.key)
        self.apply_keys(pygame.key.get_pressed())

    def run(self):
        """Open the window and render frames until the player quits."""
        pygame.init()
        try:
            window = pygame.display.set_mode((self.frame.width, self.frame.height))
            pygame.display.set_caption(WINDOW_TITLE)
            pygame.mouse.set_visible(False)
            pygame.event.set_grab(True)
            clock = pygame.time.Clock()
            last = time.perf_counter()
            while self.running:
                now = time.perf_counter()
                self.elapsed = now - last
                last = now
                if self.elapsed > 0:
                    print(f"FPS: {1.0 / self.elapsed}")

                self.event_loop()
                if not self.running:
                    break
                self.cast_rays()
                pygame.surfarray.blit_array(window, self.frame.pixels.transpose(1, 0, 2))
                if self.minimap.show:
                    self.minimap.draw(window, self.player.x, self.player.y)
                pygame.display.flip()
                self.frame.clear()
                clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv=None):
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(description="A textured grid ray-casting game.")
    parser.add_argument("--textures", default="textures",
                        help="directory holding the texture images")
    args = parser.parse_args(argv)
    engine = RayCaster(texture_dir=args.textures)
    try:
        engine.run()
    except FileNotFoundError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())