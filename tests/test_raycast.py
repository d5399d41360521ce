import pytest

from raycube.player import Player
from raycube.raycast import Frame, Texture, cast_ray, render

ROOM = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]

BIG_ROOM = ["111111111"] + ["100000001"] * 7 + ["111111111"]


def _player(x, y, dir_x, dir_y):
    return Player(x=x, y=y, dir_x=dir_x, dir_y=dir_y, plane_x=0.66, plane_y=0.0)


def test_frame_put_get_round_trip():
    frame = Frame(4, 3)
    frame.put(2, 1, 0x123456)
    assert frame.get(2, 1) == 0x123456
    assert frame.get(1, 2) == 0


def test_frame_put_outside_is_ignored():
    frame = Frame(2, 2)
    frame.put(5, 5, 9)
    frame.put(-1, 0, 9)
    assert frame.pixels == [0, 0, 0, 0]


def test_frame_get_outside_raises():
    with pytest.raises(IndexError):
        Frame(2, 2).get(2, 0)


def test_frame_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Frame(2, 2, [1, 2, 3])


def test_texture_pixel_clamps():
    texture = Texture(2, 2, [1, 2, 3, 4])
    assert texture.pixel(1, 0) == 2
    assert texture.pixel(-5, 0) == 1
    assert texture.pixel(10, 10) == 4


def test_texture_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Texture(2, 2, [1])


@pytest.mark.parametrize(
    "direction, index",
    [("N", 0), ("S", 1), ("E", 2), ("W", 3)],
)
def test_texture_index_follows_facing(direction, index):
    player = Player.from_spawn(2, 2, direction)
    ray = cast_ray(ROOM, player, 320, 640)
    assert ray.texture_index() == index


def test_cast_ray_stops_on_wall():
    player = Player.from_spawn(2, 2, "N")
    for column in range(0, 640, 37):
        ray = cast_ray(ROOM, player, column, 640)
        assert ROOM[ray.map_y][ray.map_x] == "1"
        assert ray.side in (0, 1)


def test_cast_ray_straight_north_hits_top_row():
    player = Player.from_spawn(2, 2, "N")
    ray = cast_ray(ROOM, player, 320, 640)
    assert (ray.map_x, ray.map_y) == (2, 0)


def test_cast_ray_treats_missing_cells_as_wall():
    grid = ["111", "10", "111"]
    player = Player.from_spawn(1, 1, "E")
    ray = cast_ray(grid, player, 50, 100)
    assert (ray.map_x, ray.map_y) == (2, 1)


def test_project_is_symmetric_in_a_square_room():
    north = cast_ray(ROOM, _player(2.5, 2.5, 0.0, -1.0), 320, 640)
    south = cast_ray(ROOM, _player(2.5, 2.5, 0.0, 1.0), 320, 640)
    span_n = north.project(_player(2.5, 2.5, 0.0, -1.0), 480, 0)
    span_s = south.project(_player(2.5, 2.5, 0.0, 1.0), 480, 0)
    assert span_n.line_height == span_s.line_height
    assert span_n.distance == pytest.approx(span_s.distance)


def test_nearer_walls_are_taller():
    near = _player(2.5, 1.5, 0.0, -1.0)
    far = _player(2.5, 3.5, 0.0, -1.0)
    near_span = cast_ray(ROOM, near, 320, 640).project(near, 480, 0)
    far_span = cast_ray(ROOM, far, 320, 640).project(far, 480, 0)
    assert near_span.line_height > far_span.line_height


def test_pitch_shifts_unclamped_slice():
    player = Player.from_spawn(2, 2, "N")
    ray = cast_ray(ROOM, player, 320, 640)
    level = ray.project(player, 480, 0)
    raised = ray.project(player, 480, 10)
    assert raised.start - level.start == 10
    assert raised.end - level.end == 10
    assert raised.line_height == level.line_height


def test_project_clamps_to_screen():
    player = Player.from_spawn(2, 2, "N")
    ray = cast_ray(ROOM, player, 320, 640)
    assert ray.project(player, 480, 1000).end == 479
    assert ray.project(player, 480, -1000).start == 0


@pytest.mark.parametrize("direction, index", [("N", 0), ("S", 1), ("E", 2), ("W", 3)])
def test_render_draws_ceiling_wall_floor(direction, index):
    colors = [0x110000, 0x002200, 0x000033, 0x444444]
    textures = [Texture(4, 4, [color] * 16) for color in colors]
    frame = Frame(40, 30)
    player = Player.from_spawn(4, 4, direction)
    render(frame, BIG_ROOM, player, textures, floor_color=0xAA, ceiling_color=0xBB)
    assert frame.get(0, 0) == 0xBB
    assert frame.get(39, 29) == 0xAA
    assert frame.get(20, 15) == colors[index]


def test_render_fills_every_pixel_from_palette():
    colors = [0x110000, 0x002200, 0x000033, 0x444444]
    textures = [Texture(4, 4, [color] * 16) for color in colors]
    frame = Frame(16, 12, [-1] * (16 * 12))
    render(frame, BIG_ROOM, Player.from_spawn(3, 5, "W"), textures, 0xAA, 0xBB)
    assert set(frame.pixels) <= set(colors) | {0xAA, 0xBB}