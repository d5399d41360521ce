"""Overlay of a small top-down map in the corner of the frame."""

from __future__ import annotations

from collections.abc import Sequence

from raycube.player import Player
from raycube.raycast import Frame

_MARGIN = 10
_CELL = 5
_CELL_COLORS = {"1": 0xFFFFFF, "0": 0x000000}
_PLAYER_COLOR = 0xFF0000


def _square(frame: Frame, x: int, y: int, color: int) -> None:
    for dy in range(_CELL):
        for dx in range(_CELL):
            frame.put(x + dx, y + dy, color)


def draw_minimap(frame: Frame, grid: Sequence[str], player: Player) -> None:
    """Draw walls white, floor black and the player red in the top-left corner."""
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            color = _CELL_COLORS.get(cell)
            if color is not None:
                _square(frame, _MARGIN + col * _CELL, _MARGIN + row * _CELL, color)
    _square(
        frame,
        _MARGIN + int(player.x * _CELL),
        _MARGIN + int(player.y * _CELL),
        _PLAYER_COLOR,
    )