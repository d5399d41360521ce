"""Classification of the lines of a scene file, and file-name checks."""

from __future__ import annotations

import enum

from raycube.errors import SceneError

_MAP_CHARS = frozenset("01NESW \n")

_PREFIXES = (
    ("NO ", "NO"),
    ("SO ", "SO"),
    ("WE ", "WE"),
    ("EA ", "EA"),
    ("F ", "FLOOR"),
    ("C ", "CEIL"),
)


class LineKind(enum.IntEnum):
    """What a line of a scene file holds."""

    ERROR = -1
    NO = 0
    SO = 1
    WE = 2
    EA = 3
    FLOOR = 4
    CEIL = 5
    MAP = 6
    EMPTY = 7

    @property
    def is_info(self) -> bool:
        """True for texture and colour lines."""
        return LineKind.NO <= self <= LineKind.CEIL

    @property
    def is_texture(self) -> bool:
        """True for the four wall texture lines."""
        return LineKind.NO <= self <= LineKind.EA


def is_map_line(line: str) -> LineKind:
    """Tell whether ``line`` is a map row, blank, or neither."""
    if any(ch not in _MAP_CHARS for ch in line):
        return LineKind.ERROR
    if line.count(" ") == len(line):
        return LineKind.EMPTY
    return LineKind.MAP


def classify_line(line: str | None) -> LineKind:
    """Return the kind of a scene file line; ``None`` is an error."""
    if line is None:
        return LineKind.ERROR
    for prefix, name in _PREFIXES:
        if line.startswith(prefix):
            return LineKind[name]
    return is_map_line(line)


def check_file_format(path: str) -> str:
    """Check that ``path`` ends in ``.cub`` from its first dot on; return it."""
    dot = path.find(".")
    if dot < 0 or path[dot:] != ".cub":
        raise SceneError("file format *.cub")
    return path