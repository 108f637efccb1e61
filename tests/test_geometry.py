import pytest

from touch_joystick.geometry import (
    Point,
    angle,
    clamp_unit,
    distance,
    normalize,
    point_from_distance_and_angle,
)


def test_distance_is_euclidean():
    assert distance(Point(0, 0), Point(3, 4)) == 5.0
    assert distance(Point(7, 7), Point(7, 7)) == 0.0


@pytest.mark.parametrize(
    "target, expected",
    [
        ((110, 100), 0.0),    # right
        ((100, 90), 90.0),    # up on screen
        ((90, 100), 180.0),   # left
        ((100, 110), 270.0),  # down on screen
        ((110, 90), 45.0),
    ],
)
def test_angle_uses_stick_convention(target, expected):
    assert angle(Point(100, 100), Point(*target)) == pytest.approx(expected)


def test_angle_of_coincident_points_is_zero():
    assert angle(Point(5, 5), Point(5, 5)) == 0.0


def test_point_from_distance_and_angle_inverts_angle():
    origin = Point(10, 10)
    assert point_from_distance_and_angle(origin, 5, 90) == pytest.approx((10, 5))
    assert point_from_distance_and_angle(origin, 5, 0) == pytest.approx((15, 10))

    target = Point(42, -17)
    back = point_from_distance_and_angle(origin, distance(origin, target), angle(origin, target))
    assert back == pytest.approx(target)


def test_point_from_zero_distance_is_origin():
    assert point_from_distance_and_angle(Point(3, 4), 0, 123) == pytest.approx((3, 4))


def test_normalize_maps_window_to_unit_range():
    assert normalize(100, 50, 150) == 0.0
    assert normalize(50, 50, 150) == -1.0
    assert normalize(150, 50, 150) == 1.0
    assert normalize(125, 50, 150) == pytest.approx(0.5)


def test_normalize_saturates_and_handles_empty_window():
    assert normalize(500, 50, 150) == 1.0
    assert normalize(-500, 50, 150) == -1.0
    assert normalize(3, 7, 7) == 0.0


def test_clamp_unit():
    assert clamp_unit(2.0) == 1.0
    assert clamp_unit(-3.0) == -1.0
    assert clamp_unit(0.25) == 0.25
