import pytest

from wireframe.draw import LINE_COLOR, OFFSET, draw_line, draw_map, line_points
from wireframe.image import Image
from wireframe.parser import MapData


@pytest.mark.parametrize(
    "p1, p2",
    [((0, 0), (5, 0)), ((0, 0), (0, 7)), ((1, 1), (6, 3)), ((4, 9), (-2, 1)), ((3, 3), (0, 0))],
)
def test_line_invariants(p1, p2):
    points = line_points(p1, p2)
    steps = max(abs(p2[0] - p1[0]), abs(p2[1] - p1[1]))
    assert len(points) == steps + 1
    assert points[0] == tuple(p1)
    assert points[-1] == tuple(p2)
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert abs(bx - ax) <= 1
        assert abs(by - ay) <= 1


def test_horizontal_line_covers_every_column():
    assert line_points((2, 5), (6, 5)) == [(x, 5) for x in range(2, 7)]


def test_vertical_line_going_up():
    assert line_points((0, 3), (0, 0)) == [(0, y) for y in range(3, -1, -1)]


def test_diagonal_line():
    assert line_points((0, 0), (4, 4)) == [(i, i) for i in range(5)]


def test_single_point():
    assert line_points((7, 8), (7, 8)) == [(7, 8)]


def test_extra_items_in_points_are_ignored():
    assert line_points((1, 2, 99), (3, 2, 42)) == line_points((1, 2), (3, 2))


def test_draw_line_is_offset_and_colored():
    image = Image(OFFSET + 20, OFFSET + 20)
    drawn = draw_line(image, (0, 0), (3, 0))
    assert drawn == len(line_points((0, 0), (3, 0)))
    for x in range(4):
        assert image.pixel(OFFSET + x, OFFSET) == LINE_COLOR
    assert image.pixel(OFFSET + 4, OFFSET) == 0


def test_draw_line_single_point():
    image = Image(OFFSET + 5, OFFSET + 5)
    assert draw_line(image, (2, 3), (2, 3), 0x00FF00) == 1
    assert image.pixel(OFFSET + 2, OFFSET + 3) == 0x00FF00


def test_draw_line_outside_image_draws_nothing():
    image = Image(10, 10)
    assert draw_line(image, (0, 0), (5, 5)) == 0
    assert not any(image.data)


def test_draw_line_is_clipped():
    image = Image(OFFSET + 3, OFFSET + 1)
    drawn = draw_line(image, (0, 0), (10, 0))
    assert drawn == 3
    assert image.pixel(OFFSET + 2, OFFSET) == LINE_COLOR


def test_draw_map_outlines_square():
    data = MapData(
        width=2,
        height=2,
        points=[[(0, 0), (2, 0)], [(0, 2), (2, 2)]],
        z_min=0,
        z_max=2,
    )
    image = Image(OFFSET + 10, OFFSET + 10)
    drawn = draw_map(data, image)
    assert drawn == 4 * len(line_points((0, 0), (2, 0)))
    for x, y in [(0, 0), (1, 0), (2, 0), (0, 1), (2, 1), (0, 2), (1, 2), (2, 2)]:
        assert image.pixel(OFFSET + x, OFFSET + y) == LINE_COLOR
    assert image.pixel(OFFSET + 1, OFFSET + 1) == 0


def test_draw_map_single_point_map():
    data = MapData(width=1, height=1, points=[[(0, 0)]])
    image = Image(OFFSET + 5, OFFSET + 5)
    assert draw_map(data, image) == 0
    assert not any(image.data)