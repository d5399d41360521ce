"""Ray casting of the map into a frame of packed 0xRRGGBB pixels."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from raycube.player import Player

_MIN_DISTANCE = 1e-6


@dataclass
class Frame:
    """A width x height image stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame size must be positive")
        size = self.width * self.height
        if not self.pixels:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError("pixel count does not match frame size")

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: int, y: int, color: int) -> None:
        """Set pixel (x, y); points outside the frame are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color

    def get(self, x: int, y: int) -> int:
        """Return the colour of pixel (x, y)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside the frame")
        return self.pixels[y * self.width + x]


@dataclass(frozen=True)
class Texture:
    """A wall texture stored row by row."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture size must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture size")

    def pixel(self, x: int, y: int) -> int:
        """Return texel (x, y), clamping the coordinates to the texture."""
        x = min(max(x, 0), self.width - 1)
        y = min(max(y, 0), self.height - 1)
        return self.pixels[y * self.width + x]


class _Span(NamedTuple):
    distance: float
    line_height: int
    start: int
    end: int


@dataclass(frozen=True)
class Ray:
    """A ray cast from the player, and the wall cell it stopped on."""

    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    side: int

    def _perp_distance(self, player: Player) -> float:
        if self.side == 0:
            return (self.map_x - player.x + (1 - self.step_x) / 2.0) / self.dir_x
        return (self.map_y - player.y + (1 - self.step_y) / 2.0) / self.dir_y

    def project(self, player: Player, screen_height: int, pitch: int) -> _Span:
        """Return (distance, line height, first row, last row) of the wall slice."""
        distance = self._perp_distance(player)
        line_height = int(screen_height / max(distance, _MIN_DISTANCE))
        centre = screen_height // 2 + pitch
        start = max(-(line_height // 2) + centre, 0)
        end = min(line_height // 2 + centre, screen_height - 1)
        return _Span(distance, line_height, start, end)

    def texture_index(self) -> int:
        """Return which of the four wall textures the hit face shows."""
        if self.side == 0:
            return 2 if self.dir_x > 0 else 3
        return 1 if self.dir_y > 0 else 0


def _cell(grid: Sequence[str], col: int, row: int) -> str:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return " "
    return grid[row][col]


def _axis(direction: float, position: float, cell: int) -> tuple[int, float, float]:
    delta = abs(1 / direction) if direction else math.inf
    if direction < 0:
        return -1, (position - cell) * delta, delta
    return 1, (cell + 1.0 - position) * delta, delta


def cast_ray(
    grid: Sequence[str], player: Player, column: int, screen_width: int
) -> Ray:
    """Cast the ray for a screen column and step through the grid to a wall."""
    camera = 2 * column / screen_width - 1
    dir_x = player.dir_x + player.plane_x * camera
    dir_y = player.dir_y + player.plane_y * camera
    map_x, map_y = int(player.x), int(player.y)
    step_x, side_x, delta_x = _axis(dir_x, player.x, map_x)
    step_y, side_y, delta_y = _axis(dir_y, player.y, map_y)
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _cell(grid, map_x, map_y) != "0":
            return Ray(dir_x, dir_y, map_x, map_y, step_x, step_y, side)


def _texture_column(ray: Ray, player: Player, distance: float, texture: Texture) -> int:
    if ray.side == 0:
        wall_x = player.y + distance * ray.dir_y
    else:
        wall_x = player.x + distance * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture.width)
    if (ray.side == 0 and ray.dir_x > 0) or (ray.side == 1 and ray.dir_y < 0):
        tex_x = texture.width - tex_x - 1
    return tex_x


def render(
    frame: Frame,
    grid: Sequence[str],
    player: Player,
    textures: Sequence[Texture],
    floor_color: int,
    ceiling_color: int,
) -> None:
    """Draw ceiling, textured walls and floor into every column of ``frame``."""
    half = frame.height // 2
    for column in range(frame.width):
        ray = cast_ray(grid, player, column, frame.width)
        span = ray.project(player, frame.height, player.pitch)
        texture = textures[ray.texture_index()]
        tex_x = _texture_column(ray, player, span.distance, texture)
        step = texture.height / span.line_height if span.line_height else 0.0
        tex_pos = (span.start - player.pitch - half + span.line_height // 2) * step
        for row in range(frame.height):
            if row < span.start:
                color = ceiling_color
            elif row <= span.end:
                color = texture.pixel(tex_x, int(tex_pos))
                tex_pos += step
            else:
                color = floor_color
            frame.put(column, row, color)