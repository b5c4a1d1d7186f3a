# SPDX-License-Identifier: GPL-3.0-or-later
# Copyright (C) 2025  Rami Ardati

"""
Voronoi regions dual to a Delaunay triangulation.

A single pass over the faces collects, for every vertex, the circumcenters of
its interior faces and the rays contributed by its hull edges. Vertices with
no rays get a bounded region (circumcenters sorted around the vertex); hull
vertices get an unbounded region made of a start ray, the circumcenters in
order, and an end ray.
"""

from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from shapely.geometry import LineString, Polygon

from ..geometry import Axis2D, Point2D, make_polygon, make_polyline
from ..triangulation import DelaunayTriangulation, EdgeFace, InteriorFace, Vertex


class BoundedRegion(NamedTuple):
    """Closed Voronoi cell of a vertex strictly inside the convex hull."""
    vertex: Vertex
    points: Tuple[Point2D, ...]

    @property
    def value(self) -> Any:
        return self.vertex.value

    def to_polygon(self) -> Polygon:
        return make_polygon(self.points)


class UnboundedRegion(NamedTuple):
    """
    Open Voronoi cell of a hull vertex.

    The boundary runs in from infinity along `start_axis` (reversed), follows
    `points`, and leaves along `end_axis`; the cell lies to the left of that
    path.
    """
    vertex: Vertex
    start_axis: Axis2D
    points: Tuple[Point2D, ...]
    end_axis: Axis2D

    @property
    def value(self) -> Any:
        return self.vertex.value

    def to_polyline(self, ray_length: float = 1.0) -> LineString:
        """
        Boundary of the region as a line string, with both rays truncated.

        The line starts `ray_length` out along the start ray, runs through the
        finite points, and ends `ray_length` out along the end ray, so regions
        with zero or one finite point still give a valid line.

        :param ray_length: Length kept of each ray.
        :type ray_length: float
        :return: Shapely LineString.
        :rtype: LineString
        :raises ValueError: If `ray_length` is not positive.
        """
        if ray_length <= 0.0:
            raise ValueError(f"Ray length must be positive, got {ray_length}")
        path = [self.start_axis.point_at(ray_length)]
        path.extend(self.points)
        if not self.points:
            path.append(self.start_axis.origin)
        path.append(self.end_axis.point_at(ray_length))
        return make_polyline(path)


Region = Union[BoundedRegion, UnboundedRegion]


class VoronoiRegions(NamedTuple):
    """Bounded and unbounded regions of a Voronoi diagram."""
    bounded: List[BoundedRegion]
    unbounded: List[UnboundedRegion]

    def region_count(self) -> int:
        return len(self.bounded) + len(self.unbounded)

    def all(self) -> List[Region]:
        """All regions ordered by vertex identity."""
        regions: List[Region] = list(self.bounded) + list(self.unbounded)
        return sorted(regions, key=lambda region: region.vertex.identity)

    def region_for(self, value: Any) -> Optional[Region]:
        for region in self.all():
            if region.vertex.value == value:
                return region
        return None


class _Accumulator:
    """Per-vertex state gathered during the pass over the faces."""

    def __init__(self, vertex: Vertex):
        self.vertex = vertex
        self.points: List[Point2D] = []
        self.start_rays: List[Axis2D] = []
        self.end_rays: List[Axis2D] = []


def pseudo_angle(center: Point2D, point: Point2D) -> float:
    """
    Trigonometry-free stand-in for the angle of `point` around `center`.

    Monotonic in the true counterclockwise angle, with values in [0, 4).

    :param center: Center of rotation.
    :type center: Point2D
    :param point: Point whose angle is measured.
    :type point: Point2D
    :return: Pseudo-angle.
    :rtype: float
    """
    dx = point.x - center.x
    dy = point.y - center.y
    denominator = abs(dx) + abs(dy)
    if denominator == 0.0:
        return 0.0
    p = dx / denominator
    if dy < 0.0:
        return 3.0 + p
    return 1.0 - p


def _accumulate(triangulation: DelaunayTriangulation) -> Dict[int, _Accumulator]:
    state: Dict[int, _Accumulator] = {}

    def entry(vertex: Vertex) -> _Accumulator:
        acc = state.get(vertex.identity)
        if acc is None:
            acc = _Accumulator(vertex)
            state[vertex.identity] = acc
        return acc

    for face in triangulation.faces():
        if isinstance(face, InteriorFace):
            center = face.circumcircle.center
            for vertex in face.vertices():
                entry(vertex).points.append(center)
        elif isinstance(face, EdgeFace):
            midpoint = face.first.position.midpoint(face.second.position)
            ray = Axis2D(midpoint, face.direction.rotate_counterclockwise())
            entry(face.first).end_rays.append(ray)
            entry(face.second).start_rays.append(ray)
        # Corner faces border no finite Voronoi edge

    return state


def _bounded(acc: _Accumulator) -> Optional[BoundedRegion]:
    # Fewer than three circumcenters cannot close a ring
    if len(acc.points) < 3:
        return None
    center = acc.vertex.position
    ordered = sorted(acc.points, key=lambda p: pseudo_angle(center, p))
    return BoundedRegion(acc.vertex, tuple(ordered))


def _unbounded(acc: _Accumulator) -> UnboundedRegion:
    start_ray = acc.start_rays[0]
    end_ray = acc.end_rays[0]
    # Runs from the start ray side toward the end ray side
    sweep = Axis2D(start_ray.origin, start_ray.direction.rotate_clockwise())
    ordered = tuple(sorted(acc.points, key=sweep.distance_along))

    if ordered:
        start_axis = Axis2D(ordered[0], start_ray.direction)
        end_axis = Axis2D(ordered[-1], end_ray.direction)
    else:
        start_axis = start_ray
        end_axis = end_ray
    return UnboundedRegion(acc.vertex, start_axis, ordered, end_axis)


def extract_regions(triangulation: DelaunayTriangulation) -> VoronoiRegions:
    """
    Compute the Voronoi regions of every vertex of a triangulation.

    Vertices whose faces do not form a closed fan (for example the middle
    vertices of an input lying entirely on one line, or a vertex with only
    one hull ray) are left out of both lists. A vertex with no hull rays needs
    at least three circumcenters to form a bounded region; with fewer it is
    left out too.

    :param triangulation: Delaunay triangulation.
    :type triangulation: DelaunayTriangulation
    :return: Bounded and unbounded regions, each ordered by vertex identity.
    :rtype: VoronoiRegions
    """
    bounded: List[BoundedRegion] = []
    unbounded: List[UnboundedRegion] = []

    state = _accumulate(triangulation)
    for identity in sorted(state):
        acc = state[identity]
        if not acc.start_rays and not acc.end_rays:
            region = _bounded(acc)
            if region is not None:
                bounded.append(region)
        elif len(acc.start_rays) == 1 and len(acc.end_rays) == 1:
            unbounded.append(_unbounded(acc))

    return VoronoiRegions(bounded, unbounded)
