# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Circles, triangles, bounding boxes and shapely polygon/polyline helpers.
"""

import math
from typing import Iterable, NamedTuple, Optional, Sequence, Tuple

from shapely.geometry import LineString, Polygon, box

from .points import Point2D, as_point, circumcenter


class Circle2D(NamedTuple):
    """A circle given by center and radius."""
    center: Point2D
    radius: float

    @staticmethod
    def through_points(p1: Point2D, p2: Point2D, p3: Point2D) -> Optional['Circle2D']:
        """
        Circle passing through three points.

        :param p1: First point.
        :type p1: Point2D
        :param p2: Second point.
        :type p2: Point2D
        :param p3: Third point.
        :type p3: Point2D
        :return: Circumcircle, or None if the points are exactly collinear.
        :rtype: Optional[Circle2D]
        """
        center = circumcenter(p1, p2, p3)
        if center is None:
            return None
        return Circle2D(center, center.distance_to(p1))

    def contains(self, point: Point2D) -> bool:
        """Strict containment; points on the circle are outside."""
        return self.center.distance_squared_to(point) < self.radius * self.radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius


class Triangle2D(NamedTuple):
    """A triangle given by its three corners."""
    p1: Point2D
    p2: Point2D
    p3: Point2D

    def vertices(self) -> Tuple[Point2D, Point2D, Point2D]:
        return (self.p1, self.p2, self.p3)

    def counterclockwise_area(self) -> float:
        """
        Signed area, positive when the corners run counterclockwise.

        :return: Signed area.
        :rtype: float
        """
        return 0.5 * ((self.p2.x - self.p1.x) * (self.p3.y - self.p1.y)
                      - (self.p3.x - self.p1.x) * (self.p2.y - self.p1.y))

    def area(self) -> float:
        return abs(self.counterclockwise_area())

    def circumcircle(self) -> Optional[Circle2D]:
        return Circle2D.through_points(self.p1, self.p2, self.p3)

    def to_polygon(self) -> Polygon:
        return make_polygon(self.vertices())


class BoundingBox2D(NamedTuple):
    """Axis-aligned bounding box."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @staticmethod
    def from_extrema(min_x: float, max_x: float,
                     min_y: float, max_y: float) -> 'BoundingBox2D':
        """
        Build a bounding box, validating the extrema.

        :raises ValueError: If a minimum exceeds its maximum.
        """
        if min_x > max_x or min_y > max_y:
            raise ValueError(
                f"Invalid bounding box extrema: x=({min_x}, {max_x}), y=({min_y}, {max_y})"
            )
        return BoundingBox2D(float(min_x), float(max_x), float(min_y), float(max_y))

    @staticmethod
    def from_points(points: Iterable) -> 'BoundingBox2D':
        """
        Smallest box containing all given points.

        :param points: Point-like objects.
        :type points: Iterable
        :return: Bounding box.
        :rtype: BoundingBox2D
        :raises ValueError: If no points are given.
        """
        pts = [as_point(p) for p in points]
        if not pts:
            raise ValueError("Cannot compute bounding box of zero points")
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return BoundingBox2D(min(xs), max(xs), min(ys), max(ys))

    def expand_by(self, margin: float) -> 'BoundingBox2D':
        return BoundingBox2D(self.min_x - margin, self.max_x + margin,
                             self.min_y - margin, self.max_y + margin)

    def union(self, other: 'BoundingBox2D') -> 'BoundingBox2D':
        return BoundingBox2D(min(self.min_x, other.min_x), max(self.max_x, other.max_x),
                             min(self.min_y, other.min_y), max(self.max_y, other.max_y))

    def contains(self, point: Point2D) -> bool:
        return (self.min_x <= point.x <= self.max_x
                and self.min_y <= point.y <= self.max_y)

    def centroid(self) -> Point2D:
        return Point2D(0.5 * (self.min_x + self.max_x), 0.5 * (self.min_y + self.max_y))

    def diagonal(self) -> float:
        return math.hypot(self.max_x - self.min_x, self.max_y - self.min_y)

    def area(self) -> float:
        return (self.max_x - self.min_x) * (self.max_y - self.min_y)

    def to_polygon(self) -> Polygon:
        return box(self.min_x, self.min_y, self.max_x, self.max_y)


def make_polygon(points: Sequence[Point2D]) -> Polygon:
    """
    Build a shapely polygon from an ordered ring of points.

    :param points: Ring vertices (not repeated at the end).
    :type points: Sequence[Point2D]
    :return: Shapely Polygon.
    :rtype: Polygon
    :raises ValueError: If fewer than three points are given.
    """
    if len(points) < 3:
        raise ValueError(f"A polygon needs at least 3 points, got {len(points)}")
    return Polygon([(p.x, p.y) for p in points])


def make_polyline(points: Sequence[Point2D]) -> LineString:
    """
    Build a shapely line string from ordered points.

    :param points: Polyline vertices.
    :type points: Sequence[Point2D]
    :return: Shapely LineString.
    :rtype: LineString
    :raises ValueError: If fewer than two points are given.
    """
    if len(points) < 2:
        raise ValueError(f"A polyline needs at least 2 points, got {len(points)}")
    return LineString([(p.x, p.y) for p in points])
