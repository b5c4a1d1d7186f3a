# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Face model of the triangulation.

A face is one of three triangle-shaped records:

- InteriorFace: three real vertices (counterclockwise) and their circumcircle.
- EdgeFace: two real vertices and one virtual corner at infinity.
- CornerFace: one real vertex and two virtual corners at infinity.

The virtual corners are three fixed rays 120 degrees apart. They let the
unbounded exterior be represented as ordinary faces, so insertion never needs
a separate convex-hull case. Every face answers `in_region(point)`: whether a
new point lies inside its circumcircle, or inside the half-plane that the
circle degenerates to when one or two corners are at infinity.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Union

from ..geometry import Axis2D, Circle2D, Direction2D, Point2D
from .vertices import Vertex


VIRTUAL_IDS = (-1, -2, -3)

VIRTUAL_DIRECTIONS = {
    -1: Direction2D.from_angle(math.radians(90.0)),
    -2: Direction2D.from_angle(math.radians(210.0)),
    -3: Direction2D.from_angle(math.radians(330.0)),
}


def _corner_direction(first_id: int, second_id: int) -> Direction2D:
    # Direction from the tip of the first virtual ray to the tip of the second
    d1 = VIRTUAL_DIRECTIONS[first_id]
    d2 = VIRTUAL_DIRECTIONS[second_id]
    return Direction2D.from_points(Point2D(d1.x, d1.y), Point2D(d2.x, d2.y))


CORNER_DIRECTIONS = {
    (first, second): _corner_direction(first, second)
    for first in VIRTUAL_IDS
    for second in VIRTUAL_IDS
    if first != second
}


# An edge endpoint is either a real Vertex or a virtual id
Endpoint = Union[Vertex, int]


def endpoint_id(endpoint: Endpoint) -> int:
    if isinstance(endpoint, Vertex):
        return endpoint.identity
    return endpoint


@dataclass(frozen=True)
class InteriorFace:
    """Triangle with three real vertices, counterclockwise."""
    first: Vertex
    second: Vertex
    third: Vertex
    circumcircle: Circle2D

    def in_region(self, point: Point2D) -> bool:
        return self.circumcircle.contains(point)

    def vertices(self) -> Tuple[Vertex, ...]:
        return (self.first, self.second, self.third)

    def edges(self) -> Tuple[Tuple[Endpoint, Endpoint], ...]:
        return ((self.first, self.second),
                (self.second, self.third),
                (self.third, self.first))


@dataclass(frozen=True)
class EdgeFace:
    """
    Hull edge joined to a virtual corner.

    The virtual corner lies to the left of `first -> second`; `direction` is
    the unit direction from `first` to `second`.
    """
    first: Vertex
    second: Vertex
    outer_id: int
    direction: Direction2D

    def in_region(self, point: Point2D) -> bool:
        """
        Whether a point lies on the virtual side of the hull edge.

        Points exactly on the edge line count only when strictly between the
        two real vertices, matching the limit of a circle through both
        vertices and a far-away third corner.

        :param point: Query point.
        :type point: Point2D
        :return: True if the point is inside the face's region.
        :rtype: bool
        """
        a = self.first.position
        b = self.second.position
        ex = b.x - a.x
        ey = b.y - a.y
        px = point.x - a.x
        py = point.y - a.y
        offset = ex * py - ey * px
        if offset != 0.0:
            return offset > 0.0
        along = ex * px + ey * py
        return 0.0 < along < ex * ex + ey * ey

    def vertices(self) -> Tuple[Vertex, ...]:
        return (self.first, self.second)

    def edges(self) -> Tuple[Tuple[Endpoint, Endpoint], ...]:
        return ((self.first, self.second),
                (self.second, self.outer_id),
                (self.outer_id, self.first))


@dataclass(frozen=True)
class CornerFace:
    """
    Wedge between two virtual corners around one real vertex.

    `direction` runs from the first virtual ray's tip to the second's.
    """
    vertex: Vertex
    outer_id1: int
    outer_id2: int
    direction: Direction2D

    def in_region(self, point: Point2D) -> bool:
        return Axis2D(self.vertex.position, self.direction).signed_distance_from(point) < 0.0

    def vertices(self) -> Tuple[Vertex, ...]:
        return (self.vertex,)

    def edges(self) -> Tuple[Tuple[Endpoint, Endpoint], ...]:
        return ((self.vertex, self.outer_id1),
                (self.outer_id1, self.outer_id2),
                (self.outer_id2, self.vertex))


Face = Union[InteriorFace, EdgeFace, CornerFace]


def initial_faces(vertex: Vertex) -> Tuple[Face, ...]:
    """
    Faces tiling the plane around a single first vertex.

    :param vertex: The first vertex of the triangulation.
    :type vertex: Vertex
    :return: Three corner faces, one per consecutive pair of virtual rays.
    :rtype: Tuple[Face, ...]
    """
    faces = []
    for i, first in enumerate(VIRTUAL_IDS):
        second = VIRTUAL_IDS[(i + 1) % len(VIRTUAL_IDS)]
        faces.append(CornerFace(vertex, first, second, CORNER_DIRECTIONS[(first, second)]))
    return tuple(faces)
