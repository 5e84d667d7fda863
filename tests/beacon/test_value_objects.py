"""Tests for beacon Value Objects: Point, Sensor, CoverageInterval, Quadrant."""

from __future__ import annotations

import itertools

import numpy as np
import pytest
from pydantic import ValidationError

from domain.beacon.value_objects import CoverageInterval, Point, Quadrant, Sensor
from tests.conftest_utils import coverage_mask, make_sensor, random_sensors


# ===========================================================================
# Point
# ===========================================================================
def test_point_value_equality_and_hash():
    assert Point(x=1, y=-2) == Point(x=1, y=-2)
    assert len({Point(x=1, y=-2), Point(x=1, y=-2), Point(x=-2, y=1)}) == 2


def test_point_lexicographic_ordering():
    points = [Point(x=2, y=0), Point(x=-1, y=5), Point(x=2, y=-3), Point(x=-1, y=-5)]

    assert sorted(points) == [
        Point(x=-1, y=-5),
        Point(x=-1, y=5),
        Point(x=2, y=-3),
        Point(x=2, y=0),
    ]
    assert Point(x=0, y=9) < Point(x=1, y=0)
    assert Point(x=1, y=1) >= Point(x=1, y=1)


def test_point_is_immutable():
    p = Point(x=1, y=2)
    with pytest.raises(ValidationError):
        p.x = 5  # type: ignore[misc]


def test_point_distance_to_handles_negative_coordinates():
    assert Point(x=-3, y=4).distance_to(Point(x=2, y=-1)) == 10
    assert Point(x=7, y=7).distance_to(Point(x=7, y=7)) == 0


# ===========================================================================
# Sensor: radius derivation
# ===========================================================================
def test_sensor_radius_is_distance_to_beacon():
    sensor = make_sensor(8, 7, 2, 10)
    assert sensor.radius == 9


def test_sensor_accepts_matching_explicit_radius():
    sensor = Sensor(position=Point(x=0, y=0), beacon=Point(x=3, y=-4), radius=7)
    assert sensor.radius == 7


def test_sensor_rejects_disagreeing_radius():
    with pytest.raises(ValidationError, match="disagrees"):
        Sensor(position=Point(x=0, y=0), beacon=Point(x=3, y=-4), radius=5)


def test_sensor_is_immutable():
    sensor = make_sensor(0, 0, 1, 1)
    with pytest.raises(ValidationError):
        sensor.radius = 10  # type: ignore[misc]


def test_sensor_on_own_beacon_has_zero_radius():
    sensor = make_sensor(4, 4, 4, 4)
    assert sensor.radius == 0
    assert sensor.covers_point(Point(x=4, y=4))
    assert not sensor.covers_point(Point(x=5, y=4))


# ===========================================================================
# Sensor: coverage predicates
# ===========================================================================
def test_sensor_reaches_row_boundaries():
    sensor = make_sensor(8, 7, 2, 10)  # radius 9

    assert sensor.reaches_row(7)
    assert sensor.reaches_row(-2)  # exactly grazes the top
    assert sensor.reaches_row(16)  # exactly grazes the bottom
    assert not sensor.reaches_row(-3)
    assert not sensor.reaches_row(17)


def test_sensor_row_span():
    sensor = make_sensor(8, 7, 2, 10)  # radius 9

    assert sensor.row_span(7) == CoverageInterval(lo=-1, hi=17)
    assert sensor.row_span(10) == CoverageInterval(lo=2, hi=14)
    assert sensor.row_span(16) == CoverageInterval(lo=8, hi=8)
    assert sensor.row_span(17) is None
    assert sensor.half_width_at(17) == -1


def test_sensor_covers_point_matches_distance():
    sensor = make_sensor(0, 0, 2, 1)  # radius 3

    assert sensor.covers_point(Point(x=3, y=0))
    assert sensor.covers_point(Point(x=-1, y=-2))
    assert not sensor.covers_point(Point(x=2, y=2))
    assert sensor.distance_to(Point(x=2, y=2)) == 4


def test_fully_covers_region_inside_and_outside():
    sensor = make_sensor(0, 0, 4, 0)  # radius 4

    assert sensor.fully_covers_region(Point(x=-2, y=-2), Point(x=2, y=2))
    assert not sensor.fully_covers_region(Point(x=-2, y=-2), Point(x=3, y=2))
    # Region away from the sensor
    assert not sensor.fully_covers_region(Point(x=10, y=10), Point(x=11, y=11))
    # Single cell on the diamond edge
    assert sensor.fully_covers_region(Point(x=0, y=4), Point(x=0, y=4))


@pytest.mark.parametrize("seed", range(5))
def test_fully_covers_region_agrees_with_exhaustive_check(seed: int):
    """Corner-only check equals checking every cell of every small box."""
    rng = np.random.default_rng(seed)
    sensors = random_sensors(rng, count=6, lo=-4, hi=4)

    span = range(-4, 5)
    for sensor in sensors:
        for x0, y0 in itertools.product(span, span):
            for w, h in itertools.product(range(4), range(4)):
                lower = Point(x=x0, y=y0)
                upper = Point(x=x0 + w, y=y0 + h)
                ys, xs = np.mgrid[lower.y : upper.y + 1, lower.x : upper.x + 1]
                expected = bool(coverage_mask([sensor], xs, ys).all())
                assert sensor.fully_covers_region(lower, upper) is expected


# ===========================================================================
# CoverageInterval
# ===========================================================================
def test_interval_length_and_contains():
    interval = CoverageInterval(lo=-2, hi=24)

    assert interval.length == 27
    assert interval.contains(-2)
    assert interval.contains(24)
    assert not interval.contains(25)


def test_interval_single_cell():
    assert CoverageInterval(lo=5, hi=5).length == 1


def test_interval_rejects_reversed_bounds():
    with pytest.raises(ValidationError, match="Invalid interval"):
        CoverageInterval(lo=3, hi=2)


# ===========================================================================
# Quadrant
# ===========================================================================
def test_quadrant_dimensions():
    q = Quadrant(min=Point(x=0, y=0), max=Point(x=3, y=1))

    assert q.width == 4
    assert q.height == 2
    assert q.area == 8
    assert not q.is_cell


def test_quadrant_single_cell():
    q = Quadrant(min=Point(x=5, y=-5), max=Point(x=5, y=-5))
    assert q.is_cell
    assert q.area == 1


def test_quadrant_corners():
    q = Quadrant(min=Point(x=0, y=0), max=Point(x=3, y=1))

    assert q.corners() == (
        Point(x=0, y=0),
        Point(x=3, y=0),
        Point(x=3, y=1),
        Point(x=0, y=1),
    )


def test_quadrant_contains():
    q = Quadrant(min=Point(x=-1, y=-1), max=Point(x=1, y=1))

    assert q.contains(Point(x=0, y=1))
    assert not q.contains(Point(x=2, y=0))


@pytest.mark.parametrize(
    "lower, upper",
    [((1, 0), (0, 0)), ((0, 1), (0, 0)), ((5, 5), (4, 4))],
)
def test_quadrant_rejects_empty(lower: tuple[int, int], upper: tuple[int, int]):
    with pytest.raises(ValidationError, match="Empty quadrant"):
        Quadrant(min=Point(x=lower[0], y=lower[1]), max=Point(x=upper[0], y=upper[1]))
