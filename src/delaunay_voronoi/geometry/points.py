# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Points, directions and axes in the plane.

These are the closed-form building blocks consumed by the triangulation and
Voronoi code: point distances and interpolation, unit directions with
quarter-turn rotations, and directed lines (axes) used for signed
perpendicular offsets.
"""

import math
from typing import NamedTuple, Optional


class Point2D(NamedTuple):
    """A point in the plane."""
    x: float
    y: float

    def distance_to(self, other: 'Point2D') -> float:
        """
        Euclidean distance to another point.

        :param other: Other point.
        :type other: Point2D
        :return: Distance.
        :rtype: float
        """
        return math.hypot(other.x - self.x, other.y - self.y)

    def distance_squared_to(self, other: 'Point2D') -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def interpolate_to(self, other: 'Point2D', t: float) -> 'Point2D':
        """
        Linear interpolation; t=0 gives this point, t=1 gives `other`.

        :param other: End point.
        :type other: Point2D
        :param t: Interpolation parameter.
        :type t: float
        :return: Interpolated point.
        :rtype: Point2D
        """
        return Point2D(self.x + t * (other.x - self.x),
                       self.y + t * (other.y - self.y))

    def midpoint(self, other: 'Point2D') -> 'Point2D':
        return self.interpolate_to(other, 0.5)

    def translate_by(self, direction: 'Direction2D', distance: float) -> 'Point2D':
        return Point2D(self.x + distance * direction.x,
                       self.y + distance * direction.y)


def as_point(obj) -> Point2D:
    """
    Coerce a point-like object (tuple, list, array row) into a Point2D.

    :param obj: Object with exactly two coordinates.
    :return: Point2D with float coordinates.
    :rtype: Point2D
    :raises ValueError: If the object does not hold two coordinates.
    """
    if isinstance(obj, Point2D):
        return obj
    try:
        x, y = obj
    except (TypeError, ValueError):
        raise ValueError(f"Expected a 2D point, got {obj!r}")
    return Point2D(float(x), float(y))


def circumcenter(p1: Point2D, p2: Point2D, p3: Point2D) -> Optional[Point2D]:
    """
    Center of the circle through three points.

    :param p1: First point.
    :type p1: Point2D
    :param p2: Second point.
    :type p2: Point2D
    :param p3: Third point.
    :type p3: Point2D
    :return: Circumcenter, or None if the points are exactly collinear.
    :rtype: Optional[Point2D]
    """
    ax, ay = p1
    bx, by = p2
    cx, cy = p3

    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0.0:
        return None

    a2 = ax * ax + ay * ay
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    return Point2D(ux, uy)


class Direction2D(NamedTuple):
    """A unit vector in the plane."""
    x: float
    y: float

    @staticmethod
    def from_points(start: Point2D, end: Point2D) -> Optional['Direction2D']:
        """
        Direction from one point toward another.

        :param start: Start point.
        :type start: Point2D
        :param end: End point.
        :type end: Point2D
        :return: Unit direction, or None if the points coincide.
        :rtype: Optional[Direction2D]
        """
        dx = end.x - start.x
        dy = end.y - start.y
        length = math.hypot(dx, dy)
        if length == 0.0:
            return None
        return Direction2D(dx / length, dy / length)

    @staticmethod
    def from_angle(radians: float) -> 'Direction2D':
        return Direction2D(math.cos(radians), math.sin(radians))

    def rotate_counterclockwise(self) -> 'Direction2D':
        return Direction2D(-self.y, self.x)

    def rotate_clockwise(self) -> 'Direction2D':
        return Direction2D(self.y, -self.x)

    def reverse(self) -> 'Direction2D':
        return Direction2D(-self.x, -self.y)

    def dot(self, dx: float, dy: float) -> float:
        return self.x * dx + self.y * dy

    def cross(self, dx: float, dy: float) -> float:
        """Z component of (this direction) x (dx, dy); positive when (dx, dy) is to the left."""
        return self.x * dy - self.y * dx


class Axis2D(NamedTuple):
    """A directed line through an origin point."""
    origin: Point2D
    direction: Direction2D

    def signed_distance_from(self, point: Point2D) -> float:
        """
        Signed perpendicular offset of a point from the axis.

        :param point: Query point.
        :type point: Point2D
        :return: Offset, positive when the point is to the left of the axis.
        :rtype: float
        """
        return self.direction.cross(point.x - self.origin.x, point.y - self.origin.y)

    def distance_along(self, point: Point2D) -> float:
        """Projection of a point onto the axis, measured from the origin."""
        return self.direction.dot(point.x - self.origin.x, point.y - self.origin.y)

    def point_at(self, distance: float) -> Point2D:
        return self.origin.translate_by(self.direction, distance)
