"""Reading and validating a scene description: textures, colours and map."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from raycube.colors import parse_color
from raycube.errors import SceneError
from raycube.lines import LineKind, check_file_format, classify_line
from raycube.player import Player

_TEXTURE_KINDS = (LineKind.NO, LineKind.SO, LineKind.WE, LineKind.EA)
_SPAWN_CHARS = frozenset("NESW")


@dataclass
class Scene:
    """A validated scene: wall textures, floor and ceiling colours, map, player."""

    textures: tuple[str, str, str, str]
    floor_color: int
    ceiling_color: int
    grid: list[str]
    player: Player

    @property
    def width(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.grid)


@dataclass
class _Header:
    textures: dict[LineKind, list[str]] = field(
        default_factory=lambda: {kind: [] for kind in _TEXTURE_KINDS}
    )
    floors: list[int] = field(default_factory=list)
    ceilings: list[int] = field(default_factory=list)

    def check(self) -> None:
        for kind in (LineKind.NO, LineKind.SO, LineKind.EA, LineKind.WE):
            if len(self.textures[kind]) != 1:
                raise SceneError("Texture info must appear once above the map")
        if len(self.ceilings) != 1 or len(self.floors) != 1:
            raise SceneError("Color info must appear once above the map")


def read_lines(path: str) -> list[str]:
    """Read a file and split it on every newline, keeping empty lines."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError:
        raise SceneError("Can not open map file.") from None
    return text.split("\n")


def parse_texture_path(line: str) -> str:
    """Return the ``./`` path of a texture line after checking it can be opened."""
    start = line.find("./")
    if start < 0:
        raise SceneError("Invalid texture path")
    path = line[start:]
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise SceneError("Can not open file") from None
    return path


def _is_exposed(grid: Sequence[str], row: int, col: int) -> bool:
    line = grid[row]
    if row == 0 or col == 0 or row == len(grid) - 1 or col == len(line) - 1:
        return True
    if line[col - 1] == " " or line[col + 1] == " ":
        return True
    for neighbour in (grid[row - 1], grid[row + 1]):
        if col >= len(neighbour) or neighbour[col] == " ":
            return True
    return False


def check_enclosed(grid: Sequence[str]) -> None:
    """Raise SceneError if any open floor cell touches a void or the border."""
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell == "0" and _is_exposed(grid, row, col):
                raise SceneError("Map is not enclosed.")


def find_player(grid: Sequence[str]) -> tuple[int, int, str]:
    """Return (column, row, direction) of the spawn cell in the map."""
    spawn = None
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell in _SPAWN_CHARS:
                spawn = (col, row, cell)
    if spawn is None:
        raise SceneError("player_num != 1")
    return spawn


def _line_at(lines: Sequence[str], index: int) -> str | None:
    return lines[index] if index < len(lines) else None


def _parse_header(lines: Sequence[str]) -> tuple[_Header, int]:
    header = _Header()
    index = 0
    while True:
        line = _line_at(lines, index)
        kind = classify_line(line)
        if kind is LineKind.MAP:
            break
        if kind is LineKind.ERROR:
            raise SceneError("Invalid line in map file")
        if kind.is_texture:
            header.textures[kind].append(parse_texture_path(line))
        elif kind is LineKind.FLOOR:
            header.floors.append(parse_color(line))
        elif kind is LineKind.CEIL:
            header.ceilings.append(parse_color(line))
        index += 1
    header.check()
    return header, index


def _check_after_map(rest: Sequence[str]) -> None:
    for line in rest:
        kind = classify_line(line)
        if kind.is_info:
            raise SceneError("Map must appear at the end of the file")
        if kind is LineKind.MAP:
            raise SceneError("Empty lines are not allowed in the map")


def _map_rows(lines: Sequence[str], start: int) -> list[str]:
    tail = lines[start:]
    rows: list[str] = []
    players = 0
    for offset, line in enumerate(tail):
        if classify_line(line) is not LineKind.MAP:
            _check_after_map(tail[offset + 1:])
            break
        players += sum(1 for cell in line if cell in _SPAWN_CHARS)
        if players > 1:
            raise SceneError("player_num != 1")
        rows.append(line)
    return rows


def parse_scene(lines: Sequence[str]) -> Scene:
    """Build a Scene from the lines of a scene file, or raise SceneError."""
    header, start = _parse_header(lines)
    grid = _map_rows(lines, start)
    check_enclosed(grid)
    col, row, direction = find_player(grid)
    grid[row] = grid[row][:col] + "0" + grid[row][col + 1:]
    textures = tuple(header.textures[kind][0] for kind in _TEXTURE_KINDS)
    return Scene(
        textures=textures,
        floor_color=header.floors[0],
        ceiling_color=header.ceilings[0],
        grid=grid,
        player=Player.from_spawn(col, row, direction),
    )


def load_scene(path: str) -> Scene:
    """Read, check and parse the ``.cub`` scene file at ``path``."""
    lines = read_lines(path)
    check_file_format(path)
    return parse_scene(lines)