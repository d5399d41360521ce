"""Parsing of floor and ceiling colour lines."""

from __future__ import annotations

import re

from raycube.errors import SceneError

_ALLOWED = frozenset("FC0123456789, \t\n")
_COLOR = re.compile(r"[ FC]*(\d*)[ ,]*(\d*)[ ,]*(\d*)")


def check_color_components(line: str) -> None:
    """Raise SceneError unless ``line`` has one identifier and two commas."""
    if any(ch not in _ALLOWED for ch in line):
        raise SceneError("Invalid color component")
    identifiers = sum(1 for ch in line if ch in "CF")
    if identifiers != 1 or line.count(",") != 2:
        raise SceneError("Invalid color format")


def parse_color(line: str) -> int:
    """Parse a line such as ``F 220,100,0`` into a packed 0xRRGGBB value."""
    check_color_components(line)
    match = _COLOR.match(line)
    red, green, blue = (int(group) if group else 0 for group in match.groups())
    if not all(0 <= part <= 255 for part in (red, green, blue)):
        raise SceneError("0 < color < 255")
    return (red << 16) | (green << 8) | blue