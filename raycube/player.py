"""Player position, view direction and movement."""

from __future__ import annotations

import enum
import math
from collections.abc import Collection, Sequence
from dataclasses import dataclass

_SPAWN_OFFSET = 0.049
_MOUSE_SENSITIVITY = 0.008

_ORIENTATIONS = {
    "N": ((0.0, -1.0), (0.66, 0.0)),
    "S": ((0.0, 1.0), (-0.66, 0.0)),
    "E": ((1.0, 0.0), (0.0, 0.66)),
    "W": ((-1.0, 0.0), (0.0, -0.66)),
}


class Action(enum.Enum):
    """Movement requested by held keys."""

    FORWARD = "forward"
    BACKWARD = "backward"
    STRAFE_LEFT = "strafe_left"
    STRAFE_RIGHT = "strafe_right"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


def _walkable(grid: Sequence[str], x: float, y: float) -> bool:
    col, row = int(x), int(y)
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return False
    return grid[row][col] == "0"


@dataclass
class Player:
    """The viewer: position, direction, camera plane and look pitch."""

    x: float
    y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    direction: str = "N"
    move_speed: float = 0.05
    rot_speed: float = 0.05
    pitch: int = 0

    @classmethod
    def from_spawn(cls, x: int, y: int, direction: str) -> Player:
        """Place a player on map cell (x, y) facing N, S, E or W."""
        try:
            (dir_x, dir_y), (plane_x, plane_y) = _ORIENTATIONS[direction]
        except KeyError:
            raise ValueError(f"unknown spawn direction {direction!r}") from None
        return cls(
            x=x + _SPAWN_OFFSET,
            y=y + _SPAWN_OFFSET,
            dir_x=dir_x,
            dir_y=dir_y,
            plane_x=plane_x,
            plane_y=plane_y,
            direction=direction,
        )

    def rotate(self, angle: float) -> None:
        """Turn the direction and camera plane by ``angle`` radians."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = (
            self.dir_x * cos_a - self.dir_y * sin_a,
            self.dir_x * sin_a + self.dir_y * cos_a,
        )
        self.plane_x, self.plane_y = (
            self.plane_x * cos_a - self.plane_y * sin_a,
            self.plane_x * sin_a + self.plane_y * cos_a,
        )

    def mouse_look(self, delta_x: int, delta_y: int, screen_height: int) -> None:
        """Turn by a horizontal mouse offset and tilt by a vertical one."""
        self.rotate(delta_x * self.rot_speed * _MOUSE_SENSITIVITY)
        limit = screen_height // 2
        pitch = int(self.pitch - delta_y * 0.5)
        self.pitch = max(-limit, min(limit, pitch))

    def proposed_position(self, actions: Collection[Action]) -> tuple[float, float]:
        """Return where the held movement actions would take the player."""
        new_x, new_y = self.x, self.y
        speed = self.move_speed
        if Action.FORWARD in actions:
            new_x += self.dir_x * speed
            new_y += self.dir_y * speed
        if Action.BACKWARD in actions:
            new_x -= self.dir_x * speed
            new_y -= self.dir_y * speed
        if Action.STRAFE_LEFT in actions:
            new_x -= self.plane_x * speed
            new_y -= self.plane_y * speed
        if Action.STRAFE_RIGHT in actions:
            new_x += self.plane_x * speed
            new_y += self.plane_y * speed
        return new_x, new_y

    def apply_collision(self, grid: Sequence[str], new_x: float, new_y: float) -> None:
        """Move to (new_x, new_y), axis by axis, only onto open floor."""
        if _walkable(grid, new_x, self.y):
            self.x = new_x
        if _walkable(grid, self.x, new_y):
            self.y = new_y

    def update(self, grid: Sequence[str], actions: Collection[Action]) -> None:
        """Advance one frame: move, turn, then resolve collisions."""
        new_x, new_y = self.proposed_position(actions)
        if Action.TURN_RIGHT in actions:
            self.rotate(self.rot_speed)
        elif Action.TURN_LEFT in actions:
            self.rotate(-self.rot_speed)
        self.apply_collision(grid, new_x, new_y)