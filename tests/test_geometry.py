# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

import math

import numpy as np
import pytest

from delaunay_voronoi.geometry import (
    Axis2D,
    BoundingBox2D,
    Circle2D,
    Direction2D,
    Point2D,
    Triangle2D,
    as_point,
    circumcenter,
    make_polygon,
    make_polyline,
)

"""Unit tests for the planar primitives consumed by the triangulation."""


def test_circumcenter_right_triangle():
    center = circumcenter(Point2D(0, 0), Point2D(10, 0), Point2D(0, 10))
    assert center is not None
    assert np.isclose(center.x, 5.0)
    assert np.isclose(center.y, 5.0)


def test_circumcenter_collinear_is_none():
    assert circumcenter(Point2D(0, 0), Point2D(5, 0), Point2D(10, 0)) is None


def test_circle_through_points_radius():
    h = 10 * math.sqrt(3) / 2
    circle = Circle2D.through_points(Point2D(0, 0), Point2D(10, 0), Point2D(5, h))
    assert circle is not None
    assert np.isclose(circle.center.x, 5.0)
    assert np.isclose(circle.radius, 10 / math.sqrt(3))


def test_circle_contains_is_strict_interior():
    circle = Circle2D(Point2D(0.0, 0.0), 1.0)
    assert circle.contains(Point2D(0.5, 0.5))
    assert not circle.contains(Point2D(1.0, 0.0))
    assert not circle.contains(Point2D(2.0, 0.0))


def test_point_distances_and_interpolation():
    a = Point2D(0.0, 0.0)
    b = Point2D(3.0, 4.0)
    assert np.isclose(a.distance_to(b), 5.0)
    assert np.isclose(a.distance_squared_to(b), 25.0)
    assert a.midpoint(b) == (1.5, 2.0)
    assert a.interpolate_to(b, 0.25) == (0.75, 1.0)


def test_as_point_accepts_tuples_and_array_rows():
    assert as_point((1, 2)) == Point2D(1.0, 2.0)
    row = np.array([[3.0, 4.0]])[0]
    assert as_point(row) == Point2D(3.0, 4.0)
    with pytest.raises(ValueError):
        as_point((1, 2, 3))


def test_direction_from_points_and_rotation():
    d = Direction2D.from_points(Point2D(0, 0), Point2D(3, 4))
    assert np.isclose(d.x, 0.6) and np.isclose(d.y, 0.8)
    ccw = d.rotate_counterclockwise()
    cw = d.rotate_clockwise()
    assert np.isclose(ccw.x, -0.8) and np.isclose(ccw.y, 0.6)
    assert np.isclose(cw.x, 0.8) and np.isclose(cw.y, -0.6)
    assert Direction2D.from_points(Point2D(1, 1), Point2D(1, 1)) is None


def test_axis_signed_distance_positive_on_left():
    axis = Axis2D(Point2D(0.0, 0.0), Direction2D(1.0, 0.0))
    assert np.isclose(axis.signed_distance_from(Point2D(5.0, 2.0)), 2.0)
    assert np.isclose(axis.signed_distance_from(Point2D(-5.0, -2.0)), -2.0)
    assert np.isclose(axis.distance_along(Point2D(5.0, 2.0)), 5.0)
    assert axis.point_at(3.0) == (3.0, 0.0)


def test_triangle_orientation_sign():
    ccw = Triangle2D(Point2D(0, 0), Point2D(1, 0), Point2D(0, 1))
    cw = Triangle2D(Point2D(0, 0), Point2D(0, 1), Point2D(1, 0))
    assert np.isclose(ccw.counterclockwise_area(), 0.5)
    assert np.isclose(cw.counterclockwise_area(), -0.5)
    assert np.isclose(cw.area(), 0.5)
    assert np.isclose(ccw.to_polygon().area, 0.5)


def test_bounding_box_from_points_and_polygon():
    bbox = BoundingBox2D.from_points([(0, 1), (2, -1), (1, 3)])
    assert bbox == BoundingBox2D(0.0, 2.0, -1.0, 3.0)
    assert np.isclose(bbox.to_polygon().area, 8.0)
    assert np.isclose(bbox.area(), 8.0)
    assert bbox.contains(Point2D(1.0, 0.0))
    assert not bbox.contains(Point2D(3.0, 0.0))
    assert bbox.expand_by(1.0) == BoundingBox2D(-1.0, 3.0, -2.0, 4.0)


def test_bounding_box_rejects_inverted_extrema():
    with pytest.raises(ValueError):
        BoundingBox2D.from_extrema(1.0, 0.0, 0.0, 1.0)
    with pytest.raises(ValueError):
        BoundingBox2D.from_points([])


def test_polygon_and_polyline_need_enough_points():
    square = make_polygon([Point2D(0, 0), Point2D(1, 0), Point2D(1, 1), Point2D(0, 1)])
    assert np.isclose(square.area, 1.0)
    line = make_polyline([Point2D(0, 0), Point2D(3, 4)])
    assert np.isclose(line.length, 5.0)
    with pytest.raises(ValueError):
        make_polygon([Point2D(0, 0), Point2D(1, 0)])
    with pytest.raises(ValueError):
        make_polyline([Point2D(0, 0)])
