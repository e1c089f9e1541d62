import pytest

from chunkrunner.geometry import (
    CollisionSide,
    Rect,
    Vector2f,
    check_collision,
    count_digit,
    move_and_collide,
)


class _Floor:
    """Terrain that is solid everywhere below a given line."""

    def __init__(self, level):
        self.level = level

    def colliding_with_terrain(self, rect):
        if rect.bottom > self.level:
            return CollisionSide.BOTTOM
        return CollisionSide.NONE


class _WallOnLeft:
    def __init__(self, edge):
        self.edge = edge

    def colliding_with_terrain(self, rect):
        if rect.x < self.edge:
            return CollisionSide.RIGHT
        return CollisionSide.NONE


def test_vectors_sort_by_x_then_y():
    points = [Vector2f(1, 2), Vector2f(0, 5), Vector2f(1, 0)]
    assert sorted(points) == [Vector2f(0, 5), Vector2f(1, 0), Vector2f(1, 2)]


def test_vectors_work_as_dict_keys():
    table = {Vector2f(512.0, 0.0): "a"}
    assert table[Vector2f(512, 0)] == "a"


def test_vector_str():
    assert str(Vector2f(512.0, -32.0)) == "512, -32"


def test_rect_intersects_overlapping():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_rect_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert not b.intersects(a)


def test_rect_separated_does_not_intersect():
    assert not Rect(0, 0, 5, 5).intersects(Rect(20, 20, 5, 5))


def test_check_collision_bottom():
    assert check_collision(Rect(0, 0, 10, 10), Rect(0, 8, 10, 10)) == CollisionSide.BOTTOM


def test_check_collision_top():
    assert check_collision(Rect(0, 8, 10, 10), Rect(0, 0, 10, 10)) == CollisionSide.TOP


def test_check_collision_left():
    assert check_collision(Rect(0, 0, 10, 10), Rect(8, 0, 10, 10)) == CollisionSide.LEFT


def test_check_collision_right():
    assert check_collision(Rect(8, 0, 10, 10), Rect(0, 0, 10, 10)) == CollisionSide.RIGHT


def test_check_collision_separated_is_none():
    assert check_collision(Rect(0, 0, 10, 10), Rect(50, 50, 10, 10)) == CollisionSide.NONE


def test_check_collision_touching_is_none():
    assert check_collision(Rect(0, 0, 10, 10), Rect(0, 10, 10, 10)) == CollisionSide.NONE
    assert check_collision(Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)) == CollisionSide.NONE


def test_check_collision_identical_rects_report_all_sides():
    side = check_collision(Rect(0, 0, 10, 10), Rect(0, 0, 10, 10))
    assert side == (
        CollisionSide.TOP | CollisionSide.BOTTOM | CollisionSide.LEFT | CollisionSide.RIGHT
    )


def test_count_digit_zero_has_no_digits():
    assert count_digit(0) == 0


@pytest.mark.parametrize("number", [1, 9, 10, 99, 100, 12345, 2147483647, -1, -42, -1000])
def test_count_digit_matches_decimal_length(number):
    assert count_digit(number) == len(str(abs(number)))


def test_move_and_collide_without_obstacle_moves_full_distance():
    start = Rect(0, 50, 10, 10)
    result = move_and_collide(_Floor(1000), start, 10.0, vertical=True)
    assert result.y == pytest.approx(start.y + 10.0)
    assert result.x == start.x


def test_move_and_collide_stops_before_floor():
    start = Rect(0, 50, 10, 10)
    result = move_and_collide(_Floor(100), start, 100.0, vertical=True)
    assert result.bottom <= 100
    assert result.bottom > 100 - 4.0
    assert start.y == 50


def test_move_and_collide_horizontal_negative():
    start = Rect(50, 0, 10, 10)
    result = move_and_collide(_WallOnLeft(20), start, -100.0, vertical=False)
    assert result.x >= 20
    assert result.x < 20 + 4.0
    assert result.y == start.y


def test_move_and_collide_blocked_immediately_stays_put():
    start = Rect(0, 90, 10, 10)
    result = move_and_collide(_Floor(100), start, 5.0, vertical=True)
    assert result == start