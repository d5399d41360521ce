import pytest

from raycube.errors import SceneError
from raycube.lines import LineKind, check_file_format, classify_line, is_map_line


@pytest.mark.parametrize(
    "line, kind",
    [
        ("NO ./textures/north.xpm", LineKind.NO),
        ("SO ./textures/south.xpm", LineKind.SO),
        ("WE ./textures/west.xpm", LineKind.WE),
        ("EA ./textures/east.xpm", LineKind.EA),
        ("F 220,100,0", LineKind.FLOOR),
        ("C 225,30,0", LineKind.CEIL),
        ("1111 1111", LineKind.MAP),
        ("10N01", LineKind.MAP),
        ("N", LineKind.MAP),
        ("    ", LineKind.EMPTY),
        ("", LineKind.EMPTY),
        ("hello", LineKind.ERROR),
        ("NO", LineKind.ERROR),
        ("\t101", LineKind.ERROR),
    ],
)
def test_classify_line(line, kind):
    assert classify_line(line) is kind


def test_classify_none_is_error():
    assert classify_line(None) is LineKind.ERROR


def test_is_map_line_rejects_identifier_text():
    assert is_map_line("F 1,2,3") is LineKind.ERROR
    assert is_map_line("1 0 1") is LineKind.MAP


def test_kind_values_follow_texture_order():
    lines = ["NO ./n.xpm", "SO ./s.xpm", "WE ./w.xpm", "EA ./e.xpm"]
    assert [classify_line(line).value for line in lines] == [0, 1, 2, 3]


def test_is_info_and_is_texture():
    info_lines = ["NO ./n.xpm", "EA ./e.xpm", "F 1,2,3", "C 4,5,6"]
    assert all(classify_line(line).is_info for line in info_lines)
    assert not classify_line("10101").is_info
    assert not classify_line("F 1,2,3").is_texture
    assert classify_line("WE ./w.xpm").is_texture


@pytest.mark.parametrize("path", ["map.cub", "maps/level.cub"])
def test_check_file_format_accepts(path):
    assert check_file_format(path) == path


@pytest.mark.parametrize(
    "path", ["map", "map.cube", "map.cu", "map.cub.cub", "dir.d/map.cub", "./map.cub"]
)
def test_check_file_format_rejects(path):
    with pytest.raises(SceneError, match=r"file format \*\.cub"):
        check_file_format(path)